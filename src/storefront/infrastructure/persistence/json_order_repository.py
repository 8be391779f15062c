"""JSON-file-backed implementation of OrderRepository."""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from pathlib import Path

from storefront.domain.exceptions import DuplicateOrderIdError
from storefront.domain.model.order import Order, OrderLineItem, StatusChange
from storefront.domain.model.order_status import OrderStatus
from storefront.domain.model.value_objects import CustomerDetails, Money, Quantity
from storefront.domain.repository.order_repository import (
    CUSTOMER_ORDERS_LIMIT,
    OrderRepository,
)
from storefront.infrastructure.persistence.json_file import JsonFile


class JsonOrderRepository(OrderRepository):

    def __init__(self, file_path: Path) -> None:
        self._file = JsonFile(file_path, initial=list)

    # --- OrderRepository interface --------------------------------------------

    def insert(self, order: Order) -> None:
        with self._file.update() as records:
            if any(raw["order_id"] == order.order_id for raw in records):
                raise DuplicateOrderIdError(f"Order ID {order.order_id} already exists")
            records.append(self._to_raw(order))

    def get_by_order_id(self, order_id: str) -> Order | None:
        for raw in self._file.read():
            if raw["order_id"] == order_id:
                return self._to_domain(raw)
        return None

    def list_by_customer_email(
        self, email: str, limit: int = CUSTOMER_ORDERS_LIMIT
    ) -> list[Order]:
        return self.list_all(email=email)[:limit]

    def list_all(
        self, status: OrderStatus | None = None, email: str | None = None
    ) -> list[Order]:
        wanted_email = email.strip().lower() if email else None
        orders = [
            self._to_domain(raw)
            for raw in self._file.read()
            if (status is None or raw["status"] == status.value)
            and (wanted_email is None or raw["customer"]["email"] == wanted_email)
        ]
        orders.sort(key=lambda o: o.created_at, reverse=True)
        return orders

    def update_status(
        self, order_id: str, expected_status: OrderStatus, change: StatusChange
    ) -> bool:
        with self._file.update() as records:
            for raw in records:
                if raw["order_id"] != order_id:
                    continue
                if raw["status"] != expected_status.value:
                    return False
                raw["status"] = change.status.value
                raw["status_history"].append(self._change_to_raw(change))
                raw["updated_at"] = change.changed_at.isoformat()
                return True
        return False

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _change_to_raw(change: StatusChange) -> dict:
        return {
            "status": change.status.value,
            "changed_at": change.changed_at.isoformat(),
            "note": change.note,
        }

    @classmethod
    def _to_raw(cls, order: Order) -> dict:
        return {
            "order_id": order.order_id,
            "customer": {
                "name": order.customer.name,
                "email": order.customer.email,
                "address": order.customer.address,
                "phone": order.customer.phone,
            },
            "items": [
                {
                    "product_id": item.product_id,
                    "name": item.name,
                    "unit_price": str(item.unit_price.amount),
                    "quantity": item.quantity.value,
                    "line_total": str(item.line_total.amount),
                }
                for item in order.items
            ],
            "subtotal": str(order.subtotal.amount),
            "discount": str(order.discount.amount),
            "discount_code": order.discount_code,
            "tax": str(order.tax.amount),
            "total": str(order.total.amount),
            "currency": order.total.currency,
            "status": order.status.value,
            "status_history": [cls._change_to_raw(c) for c in order.status_history],
            "created_at": order.created_at.isoformat(),
            "updated_at": order.updated_at.isoformat(),
        }

    @staticmethod
    def _to_domain(raw: dict) -> Order:
        currency = raw.get("currency", "USD")

        def money(value: str) -> Money:
            return Money(Decimal(value), currency)

        return Order(
            order_id=raw["order_id"],
            customer=CustomerDetails(**raw["customer"]),
            items=[
                OrderLineItem(
                    product_id=i["product_id"],
                    name=i["name"],
                    unit_price=money(i["unit_price"]),
                    quantity=Quantity(i["quantity"]),
                )
                for i in raw["items"]
            ],
            subtotal=money(raw["subtotal"]),
            discount=money(raw["discount"]),
            discount_code=raw.get("discount_code"),
            tax=money(raw["tax"]),
            total=money(raw["total"]),
            status=OrderStatus(raw["status"]),
            status_history=[
                StatusChange(
                    status=OrderStatus(c["status"]),
                    changed_at=datetime.fromisoformat(c["changed_at"]),
                    note=c["note"],
                )
                for c in raw["status_history"]
            ],
            created_at=datetime.fromisoformat(raw["created_at"]),
            updated_at=datetime.fromisoformat(raw["updated_at"]),
        )
