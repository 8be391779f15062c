"""JSON-file-backed session store for carts.

The file holds one object mapping session IDs to cart documents.  Only
the inputs of pricing (lines and coupon) are stored; the derived amounts
are recomputed when a cart is loaded.
"""

from __future__ import annotations

from decimal import Decimal
from pathlib import Path

from storefront.domain.model.cart import Cart, CartLineItem
from storefront.domain.model.value_objects import Money, Quantity
from storefront.domain.repository.cart_repository import CartRepository
from storefront.domain.service.pricing_engine import CouponStatus
from storefront.infrastructure.persistence.json_file import JsonFile


class JsonCartRepository(CartRepository):

    def __init__(self, file_path: Path) -> None:
        self._file = JsonFile(file_path, initial=dict)

    # --- CartRepository interface ---------------------------------------------

    def get(self, session_id: str) -> Cart | None:
        raw = self._file.read().get(session_id)
        if raw is None:
            return None
        return self._to_domain(raw)

    def save(self, session_id: str, cart: Cart) -> None:
        with self._file.update() as sessions:
            sessions[session_id] = self._to_raw(cart)

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(cart: Cart) -> dict:
        return {
            "items": [
                {
                    "product_id": item.product_id,
                    "name": item.name,
                    "unit_price": str(item.unit_price.amount),
                    "currency": item.unit_price.currency,
                    "quantity": item.quantity.value,
                }
                for item in cart.items
            ],
            "coupon_code": cart.coupon_code,
            "coupon_status": cart.coupon_status.value,
        }

    @staticmethod
    def _to_domain(raw: dict) -> Cart:
        cart = Cart(
            items=[
                CartLineItem(
                    product_id=i["product_id"],
                    name=i["name"],
                    unit_price=Money(Decimal(i["unit_price"]), i.get("currency", "USD")),
                    quantity=Quantity(i["quantity"]),
                )
                for i in raw["items"]
            ],
            coupon_code=raw.get("coupon_code"),
            coupon_status=CouponStatus(raw.get("coupon_status", CouponStatus.NONE.value)),
        )
        cart.reprice()
        return cart
