"""Application service: List Customer Orders use case (query).

Customers find their orders by the email used at checkout.  Lookups are
case-insensitive and return the newest orders first.
"""

from __future__ import annotations

from storefront.application.dto import OrderDTO
from storefront.domain.exceptions import ValidationError
from storefront.domain.repository.order_repository import (
    CUSTOMER_ORDERS_LIMIT,
    OrderRepository,
)


class ListCustomerOrdersHandler:

    def __init__(self, order_repo: OrderRepository) -> None:
        self._order_repo = order_repo

    def handle(self, email: str, limit: int = CUSTOMER_ORDERS_LIMIT) -> list[OrderDTO]:
        clean_email = (email or "").strip().lower()
        if not clean_email:
            raise ValidationError("Please enter an email address to search for orders")

        orders = self._order_repo.list_by_customer_email(clean_email, limit=limit)
        return [OrderDTO.from_domain(order) for order in orders]
