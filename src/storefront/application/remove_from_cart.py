"""Application service: Remove From Cart use case.

Removing a product that is not in the cart is not an error.
"""

from __future__ import annotations

import structlog

from storefront.application.dto import CartDTO
from storefront.application.session_locks import session_lock
from storefront.domain.repository.cart_repository import CartRepository

logger = structlog.get_logger(__name__)


class RemoveFromCartHandler:

    def __init__(self, cart_repo: CartRepository) -> None:
        self._cart_repo = cart_repo

    def handle(self, session_id: str, product_id: str) -> CartDTO:
        with session_lock(session_id):
            cart = self._cart_repo.get_or_empty(session_id)
            removed = cart.remove_item(product_id)
            if removed:
                self._cart_repo.save(session_id, cart)

        logger.info(
            "Item removed from cart" if removed else "Item not in cart",
            session_id=session_id,
            product_id=product_id,
        )
        return CartDTO.from_domain(cart)
