"""Startup wiring for the fulfillment engine.

Builds the JSON product store from the configured data directory, wraps
the log notifier so its failures stay out of order processing, and hands
both ports to the handler registry and the order processor.
"""

from __future__ import annotations

import os
from pathlib import Path

from fulfillment.application.process_order import OrderProcessor
from fulfillment.domain.notification.notification_service import (
    NotificationService,
)
from fulfillment.domain.service.handler_registry import HandlerRegistry
from fulfillment.infrastructure.notifications.best_effort_notification_service import (
    BestEffortNotificationService,
)
from fulfillment.infrastructure.notifications.logging_notification_service import (
    LoggingNotificationService,
)
from fulfillment.infrastructure.persistence.json_product_repository import (
    JsonProductRepository,
)

DATA_DIR_ENV = "FULFILLMENT_DATA_DIR"

# When installed in editable mode the project root is the repo root.
_DEFAULT_DATA_DIR = Path(__file__).resolve().parents[3] / "data"


def data_dir(override: Path | None = None) -> Path:
    """Resolve the data directory: explicit override, env var, then default."""
    if override is not None:
        return override
    from_env = os.environ.get(DATA_DIR_ENV)
    if from_env:
        return Path(from_env)
    return _DEFAULT_DATA_DIR


def product_repository(directory: Path | None = None) -> JsonProductRepository:
    root = data_dir(directory)
    return JsonProductRepository(root / "products.json", root / "orders.json")


def notification_service() -> NotificationService:
    return BestEffortNotificationService(LoggingNotificationService())


def order_processor(
    product_repo: JsonProductRepository | None = None,
) -> OrderProcessor:
    repo = product_repo or product_repository()
    registry = HandlerRegistry.default(notification_service(), repo)
    return OrderProcessor(product_repo=repo, registry=registry)
