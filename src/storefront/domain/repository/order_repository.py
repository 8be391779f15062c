"""Abstract repository for Order aggregate."""

from __future__ import annotations

from abc import ABC, abstractmethod

from storefront.domain.model.order import Order, StatusChange
from storefront.domain.model.order_status import OrderStatus

CUSTOMER_ORDERS_LIMIT = 50


class OrderRepository(ABC):

    @abstractmethod
    def insert(self, order: Order) -> None:
        """Store a new order.

        Raises DuplicateOrderIdError if the order ID is already taken;
        an existing order is never overwritten.
        """

    @abstractmethod
    def get_by_order_id(self, order_id: str) -> Order | None:
        """Return an order by its ID, or None if not found."""

    @abstractmethod
    def list_by_customer_email(
        self, email: str, limit: int = CUSTOMER_ORDERS_LIMIT
    ) -> list[Order]:
        """Return a customer's orders, newest first."""

    @abstractmethod
    def list_all(
        self, status: OrderStatus | None = None, email: str | None = None
    ) -> list[Order]:
        """Return orders matching the optional filters, newest first."""

    @abstractmethod
    def update_status(
        self, order_id: str, expected_status: OrderStatus, change: StatusChange
    ) -> bool:
        """Apply *change* only if the stored status is still *expected_status*.

        Returns False, leaving the order untouched, when the stored status
        has moved on (or the order no longer exists).
        """
