"""Domain service: lookup table from product type to fulfillment policy.

The table is built once at startup and is read-only afterwards. A type
without its own handler falls back to the NORMAL policy, so a registry
without a NORMAL handler is a configuration error and is rejected at
construction time.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from types import MappingProxyType

from fulfillment.domain.exceptions import HandlerConfigurationError
from fulfillment.domain.model.product import ProductType
from fulfillment.domain.notification.notification_service import (
    NotificationService,
)
from fulfillment.domain.repository.product_repository import ProductRepository
from fulfillment.domain.service.expirable_product_handler import (
    ExpirableProductHandler,
)
from fulfillment.domain.service.normal_product_handler import NormalProductHandler
from fulfillment.domain.service.product_handler import (
    Clock,
    ProductHandler,
    utc_now,
)
from fulfillment.domain.service.seasonal_product_handler import (
    SeasonalProductHandler,
)

logger = logging.getLogger(__name__)


class HandlerRegistry:

    def __init__(self, handlers: Iterable[ProductHandler]) -> None:
        table: dict[ProductType, ProductHandler] = {}
        for handler in handlers:
            if handler.product_type in table:
                raise HandlerConfigurationError(
                    f"Duplicate handler for {handler.product_type.value} products"
                )
            table[handler.product_type] = handler

        if ProductType.NORMAL not in table:
            raise HandlerConfigurationError("Register a handler for NORMAL products")

        self._handlers = MappingProxyType(table)

    @classmethod
    def default(
        cls,
        notifications: NotificationService,
        product_repo: ProductRepository,
        clock: Clock = utc_now,
    ) -> HandlerRegistry:
        """Build the standard registry with one handler per product type."""
        return cls(
            handler_cls(notifications, product_repo, clock)
            for handler_cls in (
                NormalProductHandler,
                SeasonalProductHandler,
                ExpirableProductHandler,
            )
        )

    @property
    def registered_types(self) -> frozenset[ProductType]:
        return frozenset(self._handlers)

    def resolve(self, product_type: ProductType) -> ProductHandler:
        handler = self._handlers.get(product_type)
        if handler is not None:
            return handler

        logger.warning(
            "No handler registered for %s, falling back to NORMAL", product_type
        )
        return self._handlers[ProductType.NORMAL]
