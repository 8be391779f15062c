"""Application service: Place Order use case.

Checkout turns the session's cart into a stored order and then empties
the cart.  If anything fails before the order is stored, the cart is
left exactly as it was.

Order IDs are generated by the factory; if the store reports that an ID
is already taken, a fresh one is generated and the insert retried.
"""

from __future__ import annotations

import structlog

from storefront.application.dto import CheckoutCustomer, OrderDTO
from storefront.application.session_locks import session_lock
from storefront.domain.exceptions import (
    DuplicateOrderIdError,
    EmptyCartError,
    StorageUnavailableError,
)
from storefront.domain.model.value_objects import CustomerDetails
from storefront.domain.repository.cart_repository import CartRepository
from storefront.domain.repository.order_repository import OrderRepository
from storefront.domain.service.order_factory import OrderFactory

logger = structlog.get_logger(__name__)

MAX_ORDER_ID_ATTEMPTS = 5


class PlaceOrderHandler:

    def __init__(
        self,
        order_repo: OrderRepository,
        cart_repo: CartRepository,
        factory: OrderFactory | None = None,
    ) -> None:
        self._order_repo = order_repo
        self._cart_repo = cart_repo
        self._factory = factory or OrderFactory()

    def handle(self, session_id: str, customer: CheckoutCustomer) -> OrderDTO:
        """Place an order for the session's cart.

        Steps:
        1. Reject an empty cart (EmptyCartError).
        2. Validate the customer's contact details (ValidationError).
        3. Build the order from a snapshot of the cart and store it.
        4. Empty the cart.  If that fails the order stays stored and its ID is
           logged and reported in the StorageUnavailableError.
        """
        with session_lock(session_id):
            cart = self._cart_repo.get_or_empty(session_id)
            if cart.is_empty:
                raise EmptyCartError("Cannot place order: Cart is empty")

            details = CustomerDetails.create(
                name=customer.name,
                email=customer.email,
                address=customer.address,
                phone=customer.phone,
            )

            order = None
            for attempt in range(1, MAX_ORDER_ID_ATTEMPTS + 1):
                order = self._factory.create_order(cart, details)
                try:
                    self._order_repo.insert(order)
                    break
                except DuplicateOrderIdError:
                    logger.warning(
                        "Order ID collision, generating a new one",
                        order_id=order.order_id,
                        attempt=attempt,
                    )
                    if attempt == MAX_ORDER_ID_ATTEMPTS:
                        raise

            cart.clear()
            try:
                self._cart_repo.save(session_id, cart)
            except StorageUnavailableError as exc:
                logger.error(
                    "Order placed but cart could not be emptied",
                    order_id=order.order_id,
                    session_id=session_id,
                )
                raise StorageUnavailableError(
                    f"Order {order.order_id} was placed, but the cart could not "
                    f"be emptied: {exc}"
                ) from exc

        logger.info(
            "Order placed",
            order_id=order.order_id,
            session_id=session_id,
            customer_email=order.customer_email,
            total=str(order.total.amount),
        )
        return OrderDTO.from_domain(order)
