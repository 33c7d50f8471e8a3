"""Display-ready product state returned by the use cases.

Dates are pre-formatted and the product type is a plain string, so the
CLI never handles Product snapshots or ProductType members itself.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone

from fulfillment.domain.model.product import Product


def _format_date(value: datetime | None) -> str:
    if value is None:
        return "-"
    return value.astimezone(timezone.utc).strftime("%Y-%m-%d %H:%M UTC")


@dataclass(frozen=True)
class ProductDTO:
    """Output: a product's current fulfillment state."""

    id: int
    name: str
    type: str
    available: int
    lead_time: int
    expiry_date: str  # formatted, "-" when absent
    season: str  # "start .. end", "-" when either end is absent

    @staticmethod
    def from_product(product: Product) -> ProductDTO:
        if product.season_start_date is None or product.season_end_date is None:
            season = "-"
        else:
            season = (
                f"{product.season_start_date:%Y-%m-%d} .. "
                f"{product.season_end_date:%Y-%m-%d}"
            )
        return ProductDTO(
            id=product.id,
            name=product.name,
            type=product.type.value,
            available=product.available,
            lead_time=product.lead_time,
            expiry_date=_format_date(product.expiry_date),
            season=season,
        )
