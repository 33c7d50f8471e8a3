"""NotificationService that delivers alerts as log records."""

from __future__ import annotations

import logging
from datetime import datetime

from fulfillment.domain.notification.notification_service import (
    NotificationService,
)


class LoggingNotificationService(NotificationService):

    def __init__(self, logger: logging.Logger | None = None) -> None:
        self._logger = logger or logging.getLogger("fulfillment.notifications")

    def send_delay_notification(self, lead_time: int, product_name: str) -> None:
        self._logger.info(
            "Delay: %s will be restocked in %d days", product_name, lead_time
        )

    def send_out_of_stock_notification(self, product_name: str) -> None:
        self._logger.info("Out of stock: %s is no longer available", product_name)

    def send_expiration_notification(
        self, product_name: str, expiry_date: datetime
    ) -> None:
        self._logger.info(
            "Expired: %s was withdrawn, expired on %s",
            product_name,
            expiry_date.isoformat(),
        )
