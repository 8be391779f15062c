"""Order lifecycle: the statuses an order moves through and the legal edges.

    Placed ──> Processing ──> Delivered
      │             │
      └─────────────┴──────> Cancelled

Delivered and Cancelled are final.
"""

from __future__ import annotations

from enum import Enum

from storefront.domain.exceptions import InvalidInputError


class OrderStatus(Enum):
    PLACED = "Placed"
    PROCESSING = "Processing"
    DELIVERED = "Delivered"
    CANCELLED = "Cancelled"

    @property
    def is_final(self) -> bool:
        return not ALLOWED_TRANSITIONS[self]

    @staticmethod
    def parse(raw: str) -> OrderStatus:
        """Look up a status by name, ignoring case and surrounding blanks."""
        wanted = (raw or "").strip().lower()
        for status in OrderStatus:
            if status.value.lower() == wanted:
                return status
        valid = ", ".join(s.value for s in OrderStatus)
        raise InvalidInputError(f"Unknown order status {raw!r} (expected one of: {valid})")


ALLOWED_TRANSITIONS: dict[OrderStatus, tuple[OrderStatus, ...]] = {
    OrderStatus.PLACED: (OrderStatus.PROCESSING, OrderStatus.CANCELLED),
    OrderStatus.PROCESSING: (OrderStatus.DELIVERED, OrderStatus.CANCELLED),
    OrderStatus.DELIVERED: (),
    OrderStatus.CANCELLED: (),
}


def allowed_next_statuses(current: OrderStatus) -> tuple[OrderStatus, ...]:
    return ALLOWED_TRANSITIONS[current]


def can_transition(current: OrderStatus, target: OrderStatus) -> bool:
    return target in ALLOWED_TRANSITIONS[current]
