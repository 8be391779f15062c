"""Product aggregate.

Products live independently of carts and orders.  Carts copy the name and
price of a product when it is added, so later catalog changes never
reach an existing cart line or order.
"""

from __future__ import annotations

from dataclasses import dataclass

from storefront.domain.model.value_objects import Money


@dataclass
class Product:
    """A product in the catalog."""

    id: str
    name: str
    price: Money
    description: str = ""
