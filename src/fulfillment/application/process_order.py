"""Application service: Process Order use case.

Loads an order's products through the repository and hands each one to
the fulfillment policy registered for its type. Products are processed
one at a time, in the order the repository returns them.
"""

from __future__ import annotations

import logging

from fulfillment.domain.model.product import Product
from fulfillment.domain.repository.product_repository import ProductRepository
from fulfillment.domain.service.handler_registry import HandlerRegistry

logger = logging.getLogger(__name__)


class OrderProcessor:

    def __init__(
        self,
        product_repo: ProductRepository,
        registry: HandlerRegistry,
    ) -> None:
        self._product_repo = product_repo
        self._registry = registry

    def process_order(self, order_id: int) -> int | None:
        """Apply fulfillment policy to every product of an order.

        Returns the order id, or None when the order does not exist (in
        which case nothing is written). Storage errors propagate; products
        processed before the failure keep their new state.
        """
        order = self._product_repo.find_order_with_products(order_id)
        if order is None:
            logger.info("Order #%s not found", order_id)
            return None

        for product in order.products:
            self.process_product(product)

        logger.info("Order #%s processed (%d products)", order.id, len(order.products))
        return order.id

    def process_product(self, product: Product) -> Product:
        """Apply the policy for one product, bypassing order lookup."""
        handler = self._registry.resolve(product.type)
        return handler.process_order(product)
