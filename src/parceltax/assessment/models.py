"""Assessment data models: site and floor inputs, derived figures, and results."""

from __future__ import annotations

import math
import uuid
from typing import Any

from pydantic import BaseModel, Field, field_validator

from parceltax.core.types import (
    ConstructionType,
    FloorUse,
    Landuse,
    OTHER_OCCUPANCY,
    SELF_OCCUPIED,
    is_vacant_landuse,
    parse_flag,
)


def coerce_float(value: Any, default: float = 0.0) -> float:
    """Coerce form input to a float, falling back to ``default``.

    Blank, non-numeric and non-finite values never raise; the calculator has
    to stay computable while a field is half-typed.
    """
    if value is None:
        return default
    if isinstance(value, str):
        value = value.strip()
        if not value:
            return default
    try:
        result = float(value)
    except (TypeError, ValueError):
        return default
    if not math.isfinite(result):
        return default
    return result


def coerce_year(value: Any) -> int:
    """Coerce a construction year to an int; anything unusable becomes 0."""
    return int(coerce_float(value))


class SiteInput(BaseModel):
    """Site-level attributes entered for one parcel."""

    plot_area: float = 0.0
    guidance_value: float = 0.0
    is_corner_site: bool = False
    plinth_factor: float = 1.0
    vacant_area: float = 0.0
    tax_rate_percent: float = 0.0
    rebate_percent: float = 0.0
    cess_percent: float = 0.0
    landuse: str = Landuse.BUILTUP.value
    market_rate_by_construction_type: dict[str, float] | None = None

    @field_validator(
        "plot_area",
        "guidance_value",
        "vacant_area",
        "tax_rate_percent",
        "rebate_percent",
        "cess_percent",
        mode="before",
    )
    @classmethod
    def _coerce_amount(cls, value: Any) -> float:
        return coerce_float(value)

    @field_validator("plinth_factor", mode="before")
    @classmethod
    def _coerce_plinth(cls, value: Any) -> float:
        # An empty or zero plinth factor means "no adjustment".
        return coerce_float(value) or 1.0

    @field_validator("is_corner_site", mode="before")
    @classmethod
    def _coerce_corner(cls, value: Any) -> bool:
        return parse_flag(value)

    @field_validator("landuse", mode="before")
    @classmethod
    def _coerce_landuse(cls, value: Any) -> str:
        return "" if value is None else str(value)

    @field_validator("market_rate_by_construction_type", mode="before")
    @classmethod
    def _coerce_market_rates(cls, value: Any) -> dict[str, float] | None:
        if value is None:
            return None
        return {str(tag): coerce_float(rate) for tag, rate in dict(value).items()}

    @property
    def is_vacant(self) -> bool:
        return is_vacant_landuse(self.landuse)


class FloorInput(BaseModel):
    """One physical floor of a building on the site."""

    row_id: str = Field(default_factory=lambda: str(uuid.uuid4()))
    use: str = FloorUse.RESIDENTIAL.value
    construction_year: int = 0
    construction_type: str = ConstructionType.RCC.value
    market_rate: float | None = None
    built_up_area: float = 0.0
    occupancy_factor: float = SELF_OCCUPIED

    @field_validator("construction_year", mode="before")
    @classmethod
    def _coerce_year(cls, value: Any) -> int:
        return coerce_year(value)

    @field_validator("construction_type", mode="before")
    @classmethod
    def _coerce_type(cls, value: Any) -> str:
        return "" if value is None else str(value).strip().upper()

    @field_validator("market_rate", mode="before")
    @classmethod
    def _coerce_market_rate(cls, value: Any) -> float | None:
        if value is None or (isinstance(value, str) and not value.strip()):
            return None
        return coerce_float(value)

    @field_validator("built_up_area", mode="before")
    @classmethod
    def _coerce_area(cls, value: Any) -> float:
        return coerce_float(value)

    @field_validator("occupancy_factor", mode="before")
    @classmethod
    def _coerce_occupancy(cls, value: Any) -> float:
        return coerce_float(value) or OTHER_OCCUPANCY


class DerivedFloor(BaseModel):
    """Figures derived for one floor in a single computation pass."""

    row_id: str
    index: int
    built_up_area: float
    market_rate: float
    depreciation_factor: float
    adjusted_market_rate_25pct: float
    land_component: float
    building_component: float
    floor_tax: float


class SiteSummary(BaseModel):
    """Site-wide aggregate of a computation pass."""

    total_bua: float = 0.0
    corner_add: float = 0.0
    total_guidance_value: float = 0.0
    guidance_value_25pct: float = 0.0
    effective_vacant_area: float = 0.0
    vacant_land_tax: float = 0.0
    sum_floor_tax: float = 0.0
    base_tax: float = 0.0
    additional_tax_29pct: float = 0.0
    total_property_tax: float = 0.0
    rebate_amount: float = 0.0
    cess_amount: float = 0.0
    final_payable: float = 0.0


class Assessment(BaseModel):
    """Complete result of one recompute: per-floor figures, summary, warnings."""

    current_year: int
    floors: list[DerivedFloor] = Field(default_factory=list)
    summary: SiteSummary = Field(default_factory=SiteSummary)
    warnings: list[str] = Field(default_factory=list)

    @property
    def warning(self) -> str | None:
        return self.warnings[0] if self.warnings else None
