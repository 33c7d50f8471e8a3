"""Fulfillment policy for NORMAL products."""

from __future__ import annotations

import logging

from fulfillment.domain.model.product import Product, ProductType
from fulfillment.domain.service.product_handler import ProductHandler

logger = logging.getLogger(__name__)


class NormalProductHandler(ProductHandler):

    product_type = ProductType.NORMAL

    def process_order(self, product: Product) -> Product:
        """Sell from stock, else announce the restock delay.

        A product with neither stock nor a lead time is left untouched.
        """
        if product.available > 0:
            logger.debug("Decrementing stock of %s", product.name)
            return self._decrement_stock(product)

        if product.lead_time > 0:
            logger.debug(
                "%s out of stock, restock in %d days", product.name, product.lead_time
            )
            return self.notify_delay(product.lead_time, product)

        logger.debug("%s has no stock and no lead time, nothing to do", product.name)
        return product
