"""Storage port for product stock and the order-to-product association.

Handlers write back through ``persist_product`` after every stock or
lead-time change; the order processor reads through
``find_order_with_products``.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from fulfillment.domain.model.order import Order
from fulfillment.domain.model.product import Product


class ProductRepository(ABC):

    @abstractmethod
    def find_order_with_products(self, order_id: int) -> Order | None:
        """Return the order with all its products, or None if not found."""

    @abstractmethod
    def persist_product(self, product: Product) -> None:
        """Write the full state of an existing product.

        Must be idempotent. Raises StorageError if the store is
        unreachable or the product id does not exist.
        """

    @abstractmethod
    def get_by_id(self, product_id: int) -> Product | None:
        """Return a product by its ID, or None if not found."""

    @abstractmethod
    def list_all(self) -> list[Product]:
        """Return every product in the catalog."""
