"""Application service: List Orders use case (admin query)."""

from __future__ import annotations

from storefront.application.dto import OrderDTO
from storefront.domain.model.order_status import OrderStatus
from storefront.domain.repository.order_repository import OrderRepository


class ListOrdersHandler:

    def __init__(self, order_repo: OrderRepository) -> None:
        self._order_repo = order_repo

    def handle(self, status: str | None = None, email: str | None = None) -> list[OrderDTO]:
        """List orders, newest first.

        *status* is a status name, or ``"all"``/None for every status.
        *email* filters by customer email, ignoring case.
        """
        wanted_status = None
        if status and status.strip().lower() != "all":
            wanted_status = OrderStatus.parse(status)

        wanted_email = (email or "").strip().lower() or None

        orders = self._order_repo.list_all(status=wanted_status, email=wanted_email)
        return [OrderDTO.from_domain(order) for order in orders]
