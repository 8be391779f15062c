"""Application service: Add To Cart use case.

The item's name and price are taken from the catalog when the product is
known.  Callers may instead pass an explicit name and price, as the
original product form did, for items that are not in the catalog.
"""

from __future__ import annotations

import structlog

from storefront.application.dto import CartDTO
from storefront.application.session_locks import session_lock
from storefront.domain.exceptions import EntityNotFoundError
from storefront.domain.repository.cart_repository import CartRepository
from storefront.domain.repository.product_repository import ProductRepository

logger = structlog.get_logger(__name__)


class AddToCartHandler:

    def __init__(
        self,
        cart_repo: CartRepository,
        product_repo: ProductRepository,
    ) -> None:
        self._cart_repo = cart_repo
        self._product_repo = product_repo

    def handle(
        self,
        session_id: str,
        product_id: str,
        quantity: str | int | None = 1,
        name: str | None = None,
        price: str | None = None,
    ) -> CartDTO:
        if name is None or price is None:
            product = self._product_repo.get_by_id(product_id)
            if product is None:
                raise EntityNotFoundError(f"Product with ID '{product_id}' not found")
            name, unit_price = product.name, product.price
        else:
            unit_price = price

        with session_lock(session_id):
            cart = self._cart_repo.get_or_empty(session_id)
            line = cart.add_item(product_id, name, unit_price, quantity)
            self._cart_repo.save(session_id, cart)

        logger.info(
            "Item added to cart",
            session_id=session_id,
            product_id=product_id,
            quantity=line.quantity.value,
            subtotal=str(cart.subtotal.amount),
        )
        return CartDTO.from_domain(cart)
