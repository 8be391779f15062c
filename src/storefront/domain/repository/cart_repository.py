"""Abstract session store for Cart aggregates, keyed by session ID."""

from __future__ import annotations

from abc import ABC, abstractmethod

from storefront.domain.model.cart import Cart


class CartRepository(ABC):

    @abstractmethod
    def get(self, session_id: str) -> Cart | None:
        """Return the cart stored for a session, or None."""

    @abstractmethod
    def save(self, session_id: str, cart: Cart) -> None:
        """Store the cart for a session, replacing any previous one."""

    def get_or_empty(self, session_id: str) -> Cart:
        """Return the session's cart, or a new empty one if none is stored."""
        cart = self.get(session_id)
        return cart if cart is not None else Cart.empty()
