"""Application service: Show Cart use case (query).

Also serves the order preview: the DTO includes the tax that checkout
would add and the resulting total.
"""

from __future__ import annotations

from storefront.application.dto import CartDTO
from storefront.domain.exceptions import EmptyCartError
from storefront.domain.repository.cart_repository import CartRepository


class ShowCartHandler:

    def __init__(self, cart_repo: CartRepository) -> None:
        self._cart_repo = cart_repo

    def handle(self, session_id: str) -> CartDTO:
        return CartDTO.from_domain(self._cart_repo.get_or_empty(session_id))


class PreviewOrderHandler:
    """Show what checkout would charge; an empty cart cannot be previewed."""

    def __init__(self, cart_repo: CartRepository) -> None:
        self._cart_repo = cart_repo

    def handle(self, session_id: str) -> CartDTO:
        cart = self._cart_repo.get_or_empty(session_id)
        if cart.is_empty:
            raise EmptyCartError(
                "Your cart is empty. Please add items before checking out."
            )
        return CartDTO.from_domain(cart)
