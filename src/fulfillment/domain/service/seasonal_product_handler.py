"""Fulfillment policy for SEASONAL products.

A seasonal product can only be sold inside its season window. Both
ends of the window are inclusive. A product missing either season date
is treated as permanently out of season.

Decision order (first match wins):
  1. in season with stock                      -> decrement stock
  2. no season window, before season, after
     season, or restock would arrive after
     the season ends                             -> withdraw + out-of-stock
  3. otherwise                                   -> delay notification
"""

from __future__ import annotations

import logging
from datetime import datetime, timedelta

from fulfillment.domain.model.product import Product, ProductType
from fulfillment.domain.service.product_handler import ProductHandler

logger = logging.getLogger(__name__)


class SeasonalProductHandler(ProductHandler):

    product_type = ProductType.SEASONAL

    def process_order(self, product: Product) -> Product:
        now = self._clock()

        if self._is_in_season(product, now) and product.available > 0:
            logger.debug("%s in season, decrementing stock", product.name)
            return self._decrement_stock(product)

        if (
            not self._has_season(product)
            or self._is_before_season_start(product, now)
            or self._is_after_season_end(product, now)
            or not self._can_restock_before_season_end(product, now)
        ):
            logger.debug("%s cannot be sold this season", product.name)
            updated = self._mark_unavailable(product)
            self._notifications.send_out_of_stock_notification(updated.name)
            return updated

        return self.notify_delay(product.lead_time, product)

    # --- Season predicates ----------------------------------------------------

    @staticmethod
    def _has_season(product: Product) -> bool:
        return (
            product.season_start_date is not None
            and product.season_end_date is not None
        )

    def _is_in_season(self, product: Product, now: datetime) -> bool:
        if not self._has_season(product):
            return False
        return product.season_start_date <= now <= product.season_end_date

    @staticmethod
    def _is_before_season_start(product: Product, now: datetime) -> bool:
        if product.season_start_date is None:
            return False
        return now < product.season_start_date

    @staticmethod
    def _is_after_season_end(product: Product, now: datetime) -> bool:
        if product.season_end_date is None:
            return False
        return now > product.season_end_date

    @staticmethod
    def _can_restock_before_season_end(product: Product, now: datetime) -> bool:
        if product.season_end_date is None:
            return False
        restock_date = now + timedelta(days=product.lead_time)
        return restock_date <= product.season_end_date
