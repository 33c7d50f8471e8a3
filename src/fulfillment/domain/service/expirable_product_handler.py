"""Fulfillment policy for EXPIRABLE products."""

from __future__ import annotations

import logging
from datetime import datetime

from fulfillment.domain.model.product import Product, ProductType
from fulfillment.domain.service.product_handler import ProductHandler

logger = logging.getLogger(__name__)


class ExpirableProductHandler(ProductHandler):

    product_type = ProductType.EXPIRABLE

    def process_order(self, product: Product) -> Product:
        """Sell unexpired stock; otherwise withdraw the product.

        The expiry instant itself counts as expired. A withdrawn product
        without an expiry date (plain out of stock) gets no notification.
        """
        now = self._clock()

        if product.available > 0 and not self._has_expired(product, now):
            logger.debug("Decrementing stock of %s", product.name)
            return self._decrement_stock(product)

        updated = self._mark_unavailable(product)
        if updated.expiry_date is not None:
            logger.debug("%s expired on %s", updated.name, updated.expiry_date)
            self._notifications.send_expiration_notification(
                updated.name, updated.expiry_date
            )
        return updated

    @staticmethod
    def _has_expired(product: Product, now: datetime) -> bool:
        if product.expiry_date is None:
            return False
        return product.expiry_date <= now
