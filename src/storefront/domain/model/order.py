"""Order aggregate: the persisted record of a checked-out cart.

Everything except ``status``, ``status_history`` and ``updated_at`` is
fixed at creation.  ``transition_to()`` is the only way the status
changes, and each change appends exactly one history entry.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone

from storefront.domain.exceptions import IllegalTransitionError
from storefront.domain.model.order_status import (
    OrderStatus,
    allowed_next_statuses,
    can_transition,
)
from storefront.domain.model.value_objects import CustomerDetails, Money, Quantity


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class OrderLineItem:
    """Captures the price snapshot of a cart line at checkout time."""

    product_id: str
    name: str
    unit_price: Money  # locked at checkout
    quantity: Quantity

    @property
    def line_total(self) -> Money:
        return self.unit_price * self.quantity.value


@dataclass(frozen=True)
class StatusChange:
    status: OrderStatus
    changed_at: datetime
    note: str

    @staticmethod
    def default_note(status: OrderStatus) -> str:
        return f"Status changed to {status.value}"


@dataclass
class Order:
    """Aggregate root for placed orders.

    New orders come from ``OrderFactory.create_order()``, which prices
    the cart and records the initial Placed entry.  The ``__init__`` is
    intentionally simple so the repository can reconstitute persisted
    orders without re-validating.
    """

    order_id: str
    customer: CustomerDetails
    items: list[OrderLineItem]
    subtotal: Money
    discount: Money
    discount_code: str | None
    tax: Money
    total: Money
    status: OrderStatus = OrderStatus.PLACED
    status_history: list[StatusChange] = field(default_factory=list)
    created_at: datetime = field(default_factory=utc_now)
    updated_at: datetime = field(default_factory=utc_now)

    # --- State transitions ----------------------------------------------------

    def transition_to(
        self,
        new_status: OrderStatus,
        note: str | None = None,
        now: datetime | None = None,
    ) -> StatusChange:
        """Move to *new_status* and record it in the history.

        Raises IllegalTransitionError, carrying the current status and the
        allowed targets, if the edge is not part of the lifecycle.  Final
        states reject every target, including themselves.
        """
        if not can_transition(self.status, new_status):
            raise IllegalTransitionError(
                current_status=self.status,
                requested=new_status,
                allowed=allowed_next_statuses(self.status),
            )

        change = StatusChange(
            status=new_status,
            changed_at=now or utc_now(),
            note=(note or "").strip() or StatusChange.default_note(new_status),
        )
        self.status = new_status
        self.status_history.append(change)
        self.updated_at = change.changed_at
        return change

    # --- Computed properties --------------------------------------------------

    @property
    def allowed_next_statuses(self) -> tuple[OrderStatus, ...]:
        return allowed_next_statuses(self.status)

    @property
    def item_count(self) -> int:
        return sum(item.quantity.value for item in self.items)

    @property
    def customer_email(self) -> str:
        return self.customer.email
