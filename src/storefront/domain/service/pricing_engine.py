"""Domain service: Pricing Engine.

Derives subtotal, discount, tax and total from a list of line items and
an optional coupon code.  It is a pure function of its inputs: calling it
twice with the same items and code yields identical results, so carts can
be repriced after every mutation without accumulating drift.

Rounding to cents is deferred to ``PriceBreakdown.rounded()``, which is
applied where amounts are persisted (order creation).
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from typing import Protocol

from storefront.domain.model.value_objects import Money

COUPON_CODE = "SAVE10"
DISCOUNT_RATE = Decimal("0.10")
TAX_RATE = Decimal("0.08")


class PricedLine(Protocol):
    @property
    def line_total(self) -> Money: ...


class CouponStatus(Enum):
    NONE = "NONE"
    APPLIED = "APPLIED"
    INVALID = "INVALID"


@dataclass(frozen=True)
class PriceBreakdown:
    subtotal: Money
    discount: Money
    tax: Money
    total: Money

    @property
    def taxable(self) -> Money:
        return self.subtotal - self.discount

    def rounded(self) -> PriceBreakdown:
        """Round to cents so that ``total == subtotal - discount + tax`` holds exactly."""
        subtotal = self.subtotal.rounded()
        discount = self.discount.rounded()
        tax = (subtotal - discount).scale(TAX_RATE).rounded()
        return PriceBreakdown(
            subtotal=subtotal,
            discount=discount,
            tax=tax,
            total=subtotal - discount + tax,
        )

    @staticmethod
    def empty() -> PriceBreakdown:
        zero = Money.zero()
        return PriceBreakdown(subtotal=zero, discount=zero, tax=zero, total=zero)


def normalize_coupon(code: str | None) -> str | None:
    """Return the canonical coupon code, or None if *code* is not recognised."""
    if code is not None and code.strip().upper() == COUPON_CODE:
        return COUPON_CODE
    return None


def coupon_status(code: str | None) -> CouponStatus:
    if code is None or not code.strip():
        return CouponStatus.NONE
    if normalize_coupon(code) is not None:
        return CouponStatus.APPLIED
    return CouponStatus.INVALID


def recompute(items: Iterable[PricedLine], coupon_code: str | None) -> PriceBreakdown:
    subtotal = Money.zero()
    for item in items:
        subtotal = subtotal + item.line_total

    if normalize_coupon(coupon_code) is not None:
        discount = subtotal.scale(DISCOUNT_RATE)
    else:
        discount = Money.zero()

    taxable = subtotal - discount
    tax = taxable.scale(TAX_RATE)
    return PriceBreakdown(
        subtotal=subtotal,
        discount=discount,
        tax=tax,
        total=taxable + tax,
    )
