"""Product value object.

A Product is a snapshot of one catalog row. Handlers never mutate a
snapshot in place: every state change returns a new Product which is
then written back through the repository.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import datetime
from enum import Enum

from fulfillment.domain.exceptions import ValidationError


class ProductType(Enum):
    NORMAL = "NORMAL"
    SEASONAL = "SEASONAL"
    EXPIRABLE = "EXPIRABLE"


@dataclass(frozen=True)
class Product:
    """The unit of inventory policy.

    Invariants:
    - ``available`` and ``lead_time`` are never negative
    - all timestamps are timezone-aware
    """

    id: int
    name: str
    type: ProductType
    available: int
    lead_time: int
    expiry_date: datetime | None = None
    season_start_date: datetime | None = None
    season_end_date: datetime | None = None

    def __post_init__(self) -> None:
        if self.available < 0:
            raise ValidationError(
                f"Available stock cannot be negative, got {self.available}"
            )
        if self.lead_time < 0:
            raise ValidationError(
                f"Lead time cannot be negative, got {self.lead_time}"
            )
        for label, value in (
            ("expiry_date", self.expiry_date),
            ("season_start_date", self.season_start_date),
            ("season_end_date", self.season_end_date),
        ):
            if value is not None and value.tzinfo is None:
                raise ValidationError(f"{label} must be timezone-aware")

    # --- State transitions ----------------------------------------------------

    def decremented(self) -> Product:
        """Return a copy with one unit less in stock."""
        if self.available <= 0:
            raise ValidationError(f"{self.name} has no stock to decrement")
        return replace(self, available=self.available - 1)

    def marked_unavailable(self) -> Product:
        return replace(self, available=0)

    def with_lead_time(self, lead_time: int) -> Product:
        return replace(self, lead_time=lead_time)
