"""Wrapper that keeps notification failures away from order processing.

Stock changes are persisted before any alert is sent, so a transport
that raises must not fail the whole order. The failure is logged and
dropped; nothing is retried.
"""

from __future__ import annotations

import logging
from datetime import datetime

from fulfillment.domain.notification.notification_service import (
    NotificationService,
)

logger = logging.getLogger(__name__)


class BestEffortNotificationService(NotificationService):

    def __init__(self, delegate: NotificationService) -> None:
        self._delegate = delegate

    def send_delay_notification(self, lead_time: int, product_name: str) -> None:
        try:
            self._delegate.send_delay_notification(lead_time, product_name)
        except Exception:
            logger.exception("Delay notification for %s failed", product_name)

    def send_out_of_stock_notification(self, product_name: str) -> None:
        try:
            self._delegate.send_out_of_stock_notification(product_name)
        except Exception:
            logger.exception("Out-of-stock notification for %s failed", product_name)

    def send_expiration_notification(
        self, product_name: str, expiry_date: datetime
    ) -> None:
        try:
            self._delegate.send_expiration_notification(product_name, expiry_date)
        except Exception:
            logger.exception("Expiration notification for %s failed", product_name)
