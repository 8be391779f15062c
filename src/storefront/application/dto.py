"""Data Transfer Objects — plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing domain internals to the outside world.  Amounts stay Decimal
and timestamps are ISO 8601 strings; formatting is the caller's job.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from storefront.domain.model.cart import Cart
from storefront.domain.model.order import Order
from storefront.domain.model.product import Product


@dataclass(frozen=True)
class CheckoutCustomer:
    """Input: contact details as typed by the customer."""

    name: str
    email: str
    address: str
    phone: str


@dataclass(frozen=True)
class ProductDTO:
    id: str
    name: str
    price: Decimal
    description: str

    @staticmethod
    def from_domain(product: Product) -> ProductDTO:
        return ProductDTO(
            id=product.id,
            name=product.name,
            price=product.price.amount,
            description=product.description,
        )


@dataclass(frozen=True)
class LineItemDTO:
    """Output: a single cart or order line."""

    product_id: str
    name: str
    quantity: int
    unit_price: Decimal
    line_total: Decimal


@dataclass(frozen=True)
class CartDTO:
    """Output: a cart, including the tax preview shown before checkout."""

    items: list[LineItemDTO]
    item_count: int
    subtotal: Decimal
    discount: Decimal
    discount_code: str | None
    coupon_status: str
    total: Decimal
    tax: Decimal
    total_with_tax: Decimal
    message: str | None = None

    @staticmethod
    def from_domain(cart: Cart, message: str | None = None) -> CartDTO:
        preview = cart.pricing.rounded()
        return CartDTO(
            items=[
                LineItemDTO(
                    product_id=item.product_id,
                    name=item.name,
                    quantity=item.quantity.value,
                    unit_price=item.unit_price.amount,
                    line_total=item.line_total.amount,
                )
                for item in cart.items
            ],
            item_count=cart.item_count,
            subtotal=cart.subtotal.amount,
            discount=cart.discount_amount.amount,
            discount_code=cart.coupon_code,
            coupon_status=cart.coupon_status.value,
            total=cart.total.amount,
            tax=preview.tax.amount,
            total_with_tax=preview.total.amount,
            message=message,
        )


@dataclass(frozen=True)
class StatusChangeDTO:
    status: str
    changed_at: str
    note: str


@dataclass(frozen=True)
class OrderDTO:
    """Output: a complete order as displayed to the user."""

    order_id: str
    customer_name: str
    customer_email: str
    customer_address: str
    customer_phone: str
    status: str
    allowed_next_statuses: list[str]
    items: list[LineItemDTO]
    item_count: int
    subtotal: Decimal
    discount: Decimal
    discount_code: str | None
    tax: Decimal
    total: Decimal
    status_history: list[StatusChangeDTO]
    created_at: str
    updated_at: str

    @staticmethod
    def from_domain(order: Order) -> OrderDTO:
        return OrderDTO(
            order_id=order.order_id,
            customer_name=order.customer.name,
            customer_email=order.customer.email,
            customer_address=order.customer.address,
            customer_phone=order.customer.phone,
            status=order.status.value,
            allowed_next_statuses=[s.value for s in order.allowed_next_statuses],
            items=[
                LineItemDTO(
                    product_id=item.product_id,
                    name=item.name,
                    quantity=item.quantity.value,
                    unit_price=item.unit_price.amount,
                    line_total=item.line_total.amount,
                )
                for item in order.items
            ],
            item_count=order.item_count,
            subtotal=order.subtotal.amount,
            discount=order.discount.amount,
            discount_code=order.discount_code,
            tax=order.tax.amount,
            total=order.total.amount,
            status_history=[
                StatusChangeDTO(
                    status=change.status.value,
                    changed_at=change.changed_at.isoformat(),
                    note=change.note,
                )
                for change in order.status_history
            ],
            created_at=order.created_at.isoformat(),
            updated_at=order.updated_at.isoformat(),
        )
