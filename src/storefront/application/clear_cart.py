"""Application service: Clear Cart use case."""

from __future__ import annotations

from storefront.application.dto import CartDTO
from storefront.application.session_locks import session_lock
from storefront.domain.repository.cart_repository import CartRepository


class ClearCartHandler:

    def __init__(self, cart_repo: CartRepository) -> None:
        self._cart_repo = cart_repo

    def handle(self, session_id: str) -> CartDTO:
        with session_lock(session_id):
            cart = self._cart_repo.get_or_empty(session_id)
            cart.clear()
            self._cart_repo.save(session_id, cart)
        return CartDTO.from_domain(cart)
