"""Composition root — wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

from storefront.domain.model.product import Product
from storefront.domain.model.value_objects import Money
from storefront.infrastructure.config import load_settings
from storefront.infrastructure.persistence.json_cart_repository import (
    JsonCartRepository,
)
from storefront.infrastructure.persistence.json_order_repository import (
    JsonOrderRepository,
)
from storefront.infrastructure.persistence.json_product_repository import (
    JsonProductRepository,
)

DEFAULT_CATALOG = [
    Product("1", "Sales Support Package", Money.of("199.00"), "Professional sales team support"),
    Product("2", "Advertising Campaigns", Money.of("299.00"), "Complete campaign management"),
    Product("3", "24/7 Help Desk", Money.of("149.00"), "Round-the-clock customer support"),
    Product("4", "Analytics Dashboard", Money.of("50.00"), "Performance tracking & insights"),
    Product("5", "Inbound Call Handling", Money.of("179.00"), "Professional call management"),
    Product("6", "Multi-Channel Support", Money.of("249.00"), "Unified customer support"),
]


def product_repository() -> JsonProductRepository:
    return JsonProductRepository(load_settings().products_file, seed=DEFAULT_CATALOG)


def order_repository() -> JsonOrderRepository:
    return JsonOrderRepository(load_settings().orders_file)


def cart_repository() -> JsonCartRepository:
    return JsonCartRepository(load_settings().carts_file)
