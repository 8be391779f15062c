"""Domain service: Order Factory.

Turns a finished cart plus the customer's contact details into a new
Order.  Totals are priced again from the cart's lines rather than copied
from the cart, so a stale cart can never produce an inconsistent order.
"""

from __future__ import annotations

import itertools
import secrets
import threading
import time
from collections.abc import Callable
from datetime import datetime

from storefront.domain.exceptions import EmptyCartError
from storefront.domain.model.cart import Cart
from storefront.domain.model.order import Order, OrderLineItem, StatusChange, utc_now
from storefront.domain.model.order_status import OrderStatus
from storefront.domain.model.value_objects import CustomerDetails
from storefront.domain.service import pricing_engine

ORDER_ID_PREFIX = "ORD"

_sequence = itertools.count()
_sequence_lock = threading.Lock()


def generate_order_id() -> str:
    """Return a new order ID such as ``ORD018F3A2B4C1D002A9F31``.

    Layout: prefix, 11 hex digits of epoch milliseconds, 4 hex digits of a
    process-wide sequence and 4 random hex digits.  The sequence keeps IDs
    generated in the same millisecond apart; the random part keeps
    separate processes apart.
    """
    with _sequence_lock:
        seq = next(_sequence) % 0x10000
    millis = time.time_ns() // 1_000_000
    return f"{ORDER_ID_PREFIX}{millis:011X}{seq:04X}{secrets.randbelow(0x10000):04X}"


class OrderFactory:

    def __init__(self, id_generator: Callable[[], str] = generate_order_id) -> None:
        self._id_generator = id_generator

    def next_order_id(self) -> str:
        return self._id_generator()

    def create_order(
        self,
        cart: Cart,
        customer: CustomerDetails,
        order_id: str | None = None,
        now: datetime | None = None,
    ) -> Order:
        """Snapshot *cart* into a new Placed order.

        The cart itself is not modified; the caller clears it once the
        order has been stored.
        """
        if cart.is_empty:
            raise EmptyCartError("Cannot place order: Cart is empty")

        items = [
            OrderLineItem(
                product_id=item.product_id,
                name=item.name,
                unit_price=item.unit_price,
                quantity=item.quantity,
            )
            for item in cart.items
        ]
        pricing = pricing_engine.recompute(items, cart.coupon_code).rounded()
        created_at = now or utc_now()

        return Order(
            order_id=order_id or self.next_order_id(),
            customer=customer,
            items=items,
            subtotal=pricing.subtotal,
            discount=pricing.discount,
            discount_code=cart.coupon_code,
            tax=pricing.tax,
            total=pricing.total,
            status=OrderStatus.PLACED,
            status_history=[
                StatusChange(
                    status=OrderStatus.PLACED,
                    changed_at=created_at,
                    note=StatusChange.default_note(OrderStatus.PLACED),
                )
            ],
            created_at=created_at,
            updated_at=created_at,
        )
