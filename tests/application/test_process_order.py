"""Integration tests for the ProcessOrder use case."""

from datetime import datetime, timedelta, timezone

import pytest

from fulfillment.application.process_order import OrderProcessor
from fulfillment.domain.exceptions import StorageError
from fulfillment.domain.model.product import Product, ProductType
from fulfillment.domain.service.handler_registry import HandlerRegistry
from fulfillment.domain.service.normal_product_handler import NormalProductHandler
from fulfillment.infrastructure.notifications.best_effort_notification_service import (
    BestEffortNotificationService,
)
from tests.fakes import (
    FailingNotificationService,
    FakeProductRepository,
    FixedClock,
    RecordingNotificationService,
)

NOW = datetime(2026, 6, 15, 12, 0, tzinfo=timezone.utc)
DAY = timedelta(days=1)


def _catalog() -> list[Product]:
    return [
        Product(id=1, name="USB Cable", type=ProductType.NORMAL, available=2, lead_time=15),
        Product(id=2, name="USB Dongle", type=ProductType.NORMAL, available=0, lead_time=10),
        Product(
            id=3,
            name="Melon",
            type=ProductType.SEASONAL,
            available=0,
            lead_time=3,
            season_start_date=NOW - 2 * DAY,
            season_end_date=NOW + 30 * DAY,
        ),
        Product(
            id=4,
            name="Cherry",
            type=ProductType.SEASONAL,
            available=5,
            lead_time=1,
            season_start_date=NOW + 30 * DAY,
            season_end_date=NOW + 60 * DAY,
        ),
        Product(
            id=5,
            name="Yogurt",
            type=ProductType.EXPIRABLE,
            available=3,
            lead_time=1,
            expiry_date=NOW - 2 * DAY,
        ),
        Product(
            id=6,
            name="Milk",
            type=ProductType.EXPIRABLE,
            available=2,
            lead_time=1,
            expiry_date=NOW + 30 * DAY,
        ),
    ]


def _setup(orders=None, notifications=None):
    repo = FakeProductRepository(_catalog(), orders or {1: [1, 2, 3, 4, 5, 6]})
    notifications = notifications or RecordingNotificationService()
    registry = HandlerRegistry.default(notifications, repo, clock=FixedClock(NOW))
    return repo, notifications, OrderProcessor(repo, registry)


class TestProcessOrderHappyPath:

    def test_returns_order_id(self):
        _, _, processor = _setup()
        assert processor.process_order(1) == 1

    def test_applies_each_products_policy(self):
        repo, notifications, processor = _setup()

        processor.process_order(1)

        assert repo.get_by_id(1).available == 1
        assert repo.get_by_id(2).available == 0
        assert repo.get_by_id(3).available == 0
        assert repo.get_by_id(4).available == 0
        assert repo.get_by_id(5).available == 0
        assert repo.get_by_id(6).available == 1
        assert notifications.calls == [
            ("delay", (10, "USB Dongle")),
            ("delay", (3, "Melon")),
            ("out_of_stock", ("Cherry",)),
            ("expiration", ("Yogurt", NOW - 2 * DAY)),
        ]

    def test_products_processed_in_repository_order(self):
        repo, _, processor = _setup(orders={9: [6, 1]})

        processor.process_order(9)

        assert [p.id for p in repo.writes] == [6, 1]

    def test_empty_order_returns_id_without_writes(self):
        repo, notifications, processor = _setup(orders={2: []})

        assert processor.process_order(2) == 2
        assert repo.writes == []
        assert notifications.calls == []


class TestProcessOrderNotFound:

    def test_unknown_order_returns_none(self):
        repo, notifications, processor = _setup()

        assert processor.process_order(999) is None
        assert repo.writes == []
        assert notifications.calls == []


class TestProcessOrderFailures:

    def test_storage_error_propagates(self):
        repo, _, processor = _setup()
        repo.fail_on_write = True

        with pytest.raises(StorageError, match="unreachable"):
            processor.process_order(1)

    def test_failed_notification_does_not_abort_order(self):
        repo, _, processor = _setup(
            notifications=BestEffortNotificationService(FailingNotificationService())
        )

        assert processor.process_order(1) == 1
        assert repo.get_by_id(2).lead_time == 10
        assert repo.get_by_id(5).available == 0
        assert len(repo.writes) == 6


class TestProcessProduct:

    def test_bypasses_order_lookup(self):
        repo, notifications, processor = _setup(orders={})

        result = processor.process_product(repo.get_by_id(1))

        assert result.available == 1
        assert repo.get_by_id(1).available == 1

    def test_type_without_handler_uses_normal_policy(self):
        repo = FakeProductRepository(_catalog())
        notifications = RecordingNotificationService()
        registry = HandlerRegistry([NormalProductHandler(notifications, repo)])
        processor = OrderProcessor(repo, registry)

        # Expired, but the NORMAL policy only looks at stock
        processor.process_product(repo.get_by_id(5))

        assert repo.get_by_id(5).available == 2
        assert notifications.calls == []
