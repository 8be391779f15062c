"""Application service: Update Order Status use case (admin).

The order is read, the transition is validated against the lifecycle on
the in-memory copy, and the new status is written only if the stored
status is still the one that was read.  If another update got there
first, the write is refused and ConflictError is raised, so two admins
can never both move the same order from the same state.
"""

from __future__ import annotations

import structlog

from storefront.application.dto import OrderDTO
from storefront.domain.exceptions import ConflictError, EntityNotFoundError
from storefront.domain.model.order_status import OrderStatus
from storefront.domain.repository.order_repository import OrderRepository

logger = structlog.get_logger(__name__)


class UpdateOrderStatusHandler:

    def __init__(self, order_repo: OrderRepository) -> None:
        self._order_repo = order_repo

    def handle(self, order_id: str, status: str, note: str | None = None) -> OrderDTO:
        new_status = OrderStatus.parse(status)

        order = self._order_repo.get_by_order_id(order_id)
        if order is None:
            raise EntityNotFoundError(f"Order {order_id} not found")

        previous = order.status
        change = order.transition_to(new_status, note=note)

        if not self._order_repo.update_status(order.order_id, previous, change):
            logger.warning(
                "Order status changed concurrently",
                order_id=order_id,
                expected=previous.value,
                requested=new_status.value,
            )
            raise ConflictError(
                f"Order {order_id} was updated by someone else; "
                f"reload it and try again"
            )

        logger.info(
            "Order status updated",
            order_id=order_id,
            from_status=previous.value,
            to_status=new_status.value,
        )
        return OrderDTO.from_domain(order)
