"""Domain service: base class for per-type fulfillment policies.

A handler decides, for one product at a time, whether to take a unit
out of stock, withdraw the product, or tell the customer about a delay.
The shared primitives below always persist the new snapshot *before*
any notification goes out.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable
from datetime import datetime, timezone
from typing import ClassVar

from fulfillment.domain.model.product import Product, ProductType
from fulfillment.domain.notification.notification_service import (
    NotificationService,
)
from fulfillment.domain.repository.product_repository import ProductRepository

Clock = Callable[[], datetime]


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class ProductHandler(ABC):

    product_type: ClassVar[ProductType]

    def __init__(
        self,
        notifications: NotificationService,
        product_repo: ProductRepository,
        clock: Clock = utc_now,
    ) -> None:
        self._notifications = notifications
        self._product_repo = product_repo
        self._clock = clock

    @abstractmethod
    def process_order(self, product: Product) -> Product:
        """Apply the fulfillment policy to one product.

        Returns the resulting snapshot: the persisted state, or the
        input unchanged when no action was taken.
        """

    def notify_delay(self, lead_time: int, product: Product) -> Product:
        """Record the promised lead time, persist, then notify."""
        updated = product.with_lead_time(lead_time)
        self._product_repo.persist_product(updated)
        self._notifications.send_delay_notification(lead_time, updated.name)
        return updated

    # --- Shared primitives ----------------------------------------------------

    def _decrement_stock(self, product: Product) -> Product:
        updated = product.decremented()
        self._product_repo.persist_product(updated)
        return updated

    def _mark_unavailable(self, product: Product) -> Product:
        updated = product.marked_unavailable()
        self._product_repo.persist_product(updated)
        return updated
