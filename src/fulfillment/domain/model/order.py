"""Order: a grouping of products processed together.

An order carries no state of its own that the fulfillment policy cares
about. It only batches products.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from fulfillment.domain.model.product import Product


@dataclass(frozen=True)
class Order:
    id: int
    products: list[Product] = field(default_factory=list)
