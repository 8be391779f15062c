"""Cart aggregate: the session-scoped basket a customer fills before checkout.

Every mutation ends with a single reprice through the pricing engine.  The
derived amounts live in one immutable ``PriceBreakdown`` that is swapped
in a single assignment, so a cart is never observed with a fresh subtotal
and a stale discount.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from storefront.domain.model.value_objects import Money, Quantity
from storefront.domain.service import pricing_engine
from storefront.domain.service.pricing_engine import CouponStatus, PriceBreakdown


@dataclass
class CartLineItem:
    product_id: str
    name: str
    unit_price: Money
    quantity: Quantity

    @property
    def line_total(self) -> Money:
        return self.unit_price * self.quantity.value


@dataclass
class Cart:
    """Aggregate root for a shopping cart.

    Use ``Cart.empty()`` to start a new cart.  The session store rebuilds
    carts through ``__init__`` and then calls ``reprice()``.
    """

    items: list[CartLineItem] = field(default_factory=list)
    coupon_code: str | None = None
    coupon_status: CouponStatus = CouponStatus.NONE
    pricing: PriceBreakdown = field(default_factory=PriceBreakdown.empty)

    @staticmethod
    def empty() -> Cart:
        return Cart()

    # --- Mutations ------------------------------------------------------------

    def add_item(
        self,
        product_id: str,
        name: str,
        unit_price: str | int | float | Money,
        quantity: str | int | None = 1,
    ) -> CartLineItem:
        """Add *quantity* units of a product, merging with an existing line.

        Raises InvalidInputError for a negative or malformed price, or a
        quantity that parses to zero or less.  Unparseable quantities
        count as 1.
        """
        price = unit_price if isinstance(unit_price, Money) else Money.of(unit_price)
        qty = Quantity.parse(quantity)

        existing = self._find_item(product_id)
        if existing is not None:
            existing.quantity = existing.quantity + qty
            line = existing
        else:
            line = CartLineItem(
                product_id=product_id,
                name=name,
                unit_price=price,
                quantity=qty,
            )
            self.items.append(line)

        self.reprice()
        return line

    def remove_item(self, product_id: str) -> bool:
        """Drop every line for *product_id*.  Returns False if there was none."""
        remaining = [item for item in self.items if item.product_id != product_id]
        removed = len(remaining) != len(self.items)
        if removed:
            self.items = remaining
            self.reprice()
        return removed

    def clear(self) -> None:
        self.items = []
        self.coupon_code = None
        self.coupon_status = CouponStatus.NONE
        self.reprice()

    def apply_coupon(self, code: str | None) -> CouponStatus:
        """Apply *code*, or strip any applied discount if it is absent or unknown."""
        self.coupon_status = pricing_engine.coupon_status(code)
        self.coupon_code = pricing_engine.normalize_coupon(code)
        self.reprice()
        return self.coupon_status

    def reprice(self) -> None:
        self.pricing = pricing_engine.recompute(self.items, self.coupon_code)

    # --- Computed properties --------------------------------------------------

    @property
    def is_empty(self) -> bool:
        return not self.items

    @property
    def item_count(self) -> int:
        return sum(item.quantity.value for item in self.items)

    @property
    def subtotal(self) -> Money:
        return self.pricing.subtotal

    @property
    def discount_amount(self) -> Money:
        return self.pricing.discount

    @property
    def total(self) -> Money:
        """Amount due before tax; tax is added at checkout."""
        return self.pricing.taxable

    # --- Internal helpers -----------------------------------------------------

    def _find_item(self, product_id: str) -> CartLineItem | None:
        for item in self.items:
            if item.product_id == product_id:
                return item
        return None
