"""Abstract notification service.

Three one-way alerts addressed by product name. The domain never
inspects a return value; delivery and its failures belong to the
adapter.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import datetime


class NotificationService(ABC):

    @abstractmethod
    def send_delay_notification(self, lead_time: int, product_name: str) -> None:
        """Announce that restocking will take ``lead_time`` days."""

    @abstractmethod
    def send_out_of_stock_notification(self, product_name: str) -> None:
        """Announce that the product is unavailable with no restock pending."""

    @abstractmethod
    def send_expiration_notification(
        self, product_name: str, expiry_date: datetime
    ) -> None:
        """Announce that the product was withdrawn because it expired."""
