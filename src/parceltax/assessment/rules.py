"""Tax rule book: depreciation bands, market-rate table, statutory surcharge."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Mapping

import yaml
from pydantic import BaseModel, Field, field_validator

from parceltax.core.config import TaxConfig

logger = logging.getLogger(__name__)

_DEFAULT_CONFIG_PATH = Path(__file__).resolve().parents[3] / "config" / "tax_rules.yml"

CORNER_PREMIUM_RATE = 0.10
GUIDANCE_VALUE_SHARE = 0.25
MARKET_RATE_SHARE = 0.25
# Statutory surcharge on the base tax. Pending confirmation against the
# published tax rules; override through TaxConfig.additional_tax_rate.
ADDITIONAL_TAX_RATE = 0.29


class DepreciationBand(BaseModel):
    """Buildings up to ``max_age`` years old are discounted by ``factor``."""

    model_config = {"frozen": True}

    max_age: int
    factor: float


_DEFAULT_BANDS: tuple[DepreciationBand, ...] = (
    DepreciationBand(max_age=5, factor=0.0),
    DepreciationBand(max_age=10, factor=0.05),
    DepreciationBand(max_age=20, factor=0.10),
    DepreciationBand(max_age=30, factor=0.20),
)
_DEFAULT_MAX_DEPRECIATION = 0.30

# Form defaults in currency per sq ft
_DEFAULT_MARKET_RATES: dict[str, float] = {
    "RCC": 1576.0,
    "GRANITE": 1421.0,
    "MOSAIC": 817.84,
    "OTHER": 1000.0,
}


class TaxRuleBook(BaseModel):
    """Read-only parameters of the property-tax computation."""

    model_config = {"frozen": True}

    depreciation_bands: tuple[DepreciationBand, ...] = _DEFAULT_BANDS
    max_depreciation: float = _DEFAULT_MAX_DEPRECIATION
    market_rates: dict[str, float] = Field(
        default_factory=lambda: dict(_DEFAULT_MARKET_RATES)
    )
    additional_tax_rate: float = ADDITIONAL_TAX_RATE

    @field_validator("depreciation_bands")
    @classmethod
    def _check_bands(
        cls, bands: tuple[DepreciationBand, ...]
    ) -> tuple[DepreciationBand, ...]:
        previous: int | None = None
        for band in bands:
            if previous is not None and band.max_age <= previous:
                raise ValueError(
                    f"Depreciation bands must have ascending max_age; "
                    f"got {band.max_age} after {previous}"
                )
            if not 0.0 <= band.factor < 1.0:
                raise ValueError(f"Depreciation factor out of range: {band.factor}")
            previous = band.max_age
        return bands

    @field_validator("max_depreciation")
    @classmethod
    def _check_max_depreciation(cls, value: float) -> float:
        if not 0.0 <= value < 1.0:
            raise ValueError(f"Depreciation factor out of range: {value}")
        return value

    @classmethod
    def default(cls) -> TaxRuleBook:
        return cls()

    @classmethod
    def from_yaml(cls, path: str | Path | None = None) -> TaxRuleBook:
        """Load a rule book from YAML; keys absent from the file keep their defaults."""
        config_path = Path(path) if path else _DEFAULT_CONFIG_PATH
        if not config_path.exists():
            logger.debug("No tax rules at %s, using built-in defaults", config_path)
            return cls()

        with open(config_path) as fh:
            raw = yaml.safe_load(fh) or {}

        data: dict[str, Any] = {}
        depreciation = raw.get("depreciation") or {}
        if "bands" in depreciation:
            data["depreciation_bands"] = [
                DepreciationBand(max_age=band["max_age"], factor=band["factor"])
                for band in depreciation["bands"]
            ]
        if "above" in depreciation:
            data["max_depreciation"] = depreciation["above"]
        market_rates = raw.get("market_rates") or {}
        if market_rates:
            # YAML may hand back non-string keys
            data["market_rates"] = {
                str(tag).upper(): float(rate) for tag, rate in market_rates.items()
            }
        if "additional_tax_rate" in raw:
            data["additional_tax_rate"] = raw["additional_tax_rate"]

        rules = cls(**data)
        logger.info("Loaded tax rules from %s", config_path)
        return rules

    @classmethod
    def from_settings(cls, config: TaxConfig) -> TaxRuleBook:
        rules = cls.from_yaml(config.rules_path)
        if config.additional_tax_rate is not None:
            rules = rules.model_copy(update={"additional_tax_rate": config.additional_tax_rate})
        return rules

    def depreciation_factor(self, construction_year: int, current_year: int) -> float:
        """Age-banded depreciation; an unknown (zero) construction year is not depreciated."""
        if not construction_year:
            return 0.0
        age = current_year - construction_year
        for band in self.depreciation_bands:
            if age <= band.max_age:
                return band.factor
        return self.max_depreciation

    def market_rate_for(
        self,
        construction_type: str,
        table: Mapping[str, float] | None = None,
    ) -> float:
        """Market rate for a construction type, 0 when the tag is unknown."""
        rates = self.market_rates if table is None else table
        key = (construction_type or "").strip().upper()
        for tag, rate in rates.items():
            if tag.strip().upper() == key:
                return rate
        return 0.0
