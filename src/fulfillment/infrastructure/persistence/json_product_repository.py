"""JSON-file-backed implementation of ProductRepository.

Two files make up the store:

- ``products.json``: list of product records, timestamps as ISO-8601
- ``orders.json``: list of ``{"id": int, "product_ids": [int, ...]}``
"""

from __future__ import annotations

import json
from datetime import datetime, timezone
from pathlib import Path

from fulfillment.domain.exceptions import StorageError
from fulfillment.domain.model.order import Order
from fulfillment.domain.model.product import Product, ProductType
from fulfillment.domain.repository.product_repository import ProductRepository


class JsonProductRepository(ProductRepository):

    def __init__(self, products_path: Path, orders_path: Path) -> None:
        self._products_path = products_path
        self._orders_path = orders_path
        self._ensure_file(products_path)
        self._ensure_file(orders_path)

    # --- ProductRepository interface ------------------------------------------

    def find_order_with_products(self, order_id: int) -> Order | None:
        for raw in self._load_raw(self._orders_path):
            if raw["id"] == order_id:
                product_ids = raw.get("product_ids", [])
                if not isinstance(product_ids, list):
                    raise StorageError(f"Malformed order record: {raw!r}")
                products = self._load()
                # Dangling ids (product removed from the catalog) are skipped
                return Order(
                    id=raw["id"],
                    products=[
                        products[pid]
                        for pid in product_ids
                        if isinstance(pid, int) and pid in products
                    ],
                )
        return None

    def persist_product(self, product: Product) -> None:
        records = self._load_raw(self._products_path)
        for i, raw in enumerate(records):
            if raw["id"] == product.id:
                records[i] = self._to_raw(product)
                break
        else:
            raise StorageError(f"Product #{product.id} does not exist")
        self._persist_raw(self._products_path, records)

    def get_by_id(self, product_id: int) -> Product | None:
        return self._load().get(product_id)

    def list_all(self) -> list[Product]:
        return list(self._load().values())

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(product: Product) -> dict:
        return {
            "id": product.id,
            "name": product.name,
            "type": product.type.value,
            "available": product.available,
            "lead_time": product.lead_time,
            "expiry_date": _format_timestamp(product.expiry_date),
            "season_start_date": _format_timestamp(product.season_start_date),
            "season_end_date": _format_timestamp(product.season_end_date),
        }

    @staticmethod
    def _to_domain(raw: dict) -> Product:
        try:
            return Product(
                id=raw["id"],
                name=raw["name"],
                type=ProductType(raw["type"]),
                available=raw["available"],
                lead_time=raw.get("lead_time", 0),
                expiry_date=_parse_timestamp(raw.get("expiry_date")),
                season_start_date=_parse_timestamp(raw.get("season_start_date")),
                season_end_date=_parse_timestamp(raw.get("season_end_date")),
            )
        except (KeyError, TypeError, ValueError) as exc:
            raise StorageError(f"Malformed product record: {raw!r}") from exc

    def _load(self) -> dict[int, Product]:
        return {
            raw["id"]: self._to_domain(raw)
            for raw in self._load_raw(self._products_path)
        }

    # --- File helpers ---------------------------------------------------------

    @staticmethod
    def _load_raw(path: Path) -> list[dict]:
        try:
            records = json.loads(path.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as exc:
            raise StorageError(f"Cannot read {path}: {exc}") from exc

        # Every record needs an id, the key all lookups go through
        if not isinstance(records, list) or not all(
            isinstance(raw, dict) and "id" in raw for raw in records
        ):
            raise StorageError(f"Malformed store {path}: expected a list of records with an id")
        return records

    @staticmethod
    def _persist_raw(path: Path, records: list[dict]) -> None:
        try:
            path.write_text(json.dumps(records, indent=2) + "\n", encoding="utf-8")
        except OSError as exc:
            raise StorageError(f"Cannot write {path}: {exc}") from exc

    @staticmethod
    def _ensure_file(path: Path) -> None:
        if path.exists():
            return
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text("[]", encoding="utf-8")
        except OSError as exc:
            raise StorageError(f"Cannot create {path}: {exc}") from exc


def _format_timestamp(value: datetime | None) -> str | None:
    return value.isoformat() if value is not None else None


def _parse_timestamp(value: str | None) -> datetime | None:
    if value is None:
        return None
    # fromisoformat only accepts the "Z" suffix from Python 3.11 on
    if isinstance(value, str) and value.endswith("Z"):
        value = value[:-1] + "+00:00"
    parsed = datetime.fromisoformat(value)
    # Stored timestamps without an offset are taken to be UTC
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed
