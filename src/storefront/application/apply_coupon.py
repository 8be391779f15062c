"""Application service: Apply Coupon use case.

An unknown code is not an error: the cart loses any discount it had and
the returned DTO carries an advisory message for the customer.
"""

from __future__ import annotations

import structlog

from storefront.application.dto import CartDTO
from storefront.application.session_locks import session_lock
from storefront.domain.repository.cart_repository import CartRepository
from storefront.domain.service.pricing_engine import DISCOUNT_RATE, CouponStatus

logger = structlog.get_logger(__name__)


class ApplyCouponHandler:

    def __init__(self, cart_repo: CartRepository) -> None:
        self._cart_repo = cart_repo

    def handle(self, session_id: str, code: str | None) -> CartDTO:
        with session_lock(session_id):
            cart = self._cart_repo.get_or_empty(session_id)
            status = cart.apply_coupon(code)
            self._cart_repo.save(session_id, cart)

        if status is CouponStatus.APPLIED:
            logger.info("Coupon applied", session_id=session_id, code=cart.coupon_code)
        elif status is CouponStatus.INVALID:
            logger.info("Coupon rejected", session_id=session_id, code=code)

        return CartDTO.from_domain(cart, message=self._message(status, code))

    @staticmethod
    def _message(status: CouponStatus, code: str | None) -> str:
        if status is CouponStatus.APPLIED:
            return f"{DISCOUNT_RATE * 100:.0f}% discount applied!"
        if status is CouponStatus.INVALID:
            return f"Invalid coupon code: {code}"
        return "No coupon applied"
