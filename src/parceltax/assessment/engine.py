"""Deterministic property tax computation engine.

One call to :func:`recompute` turns a snapshot of site and floor inputs into
per-floor figures and a site summary. Nothing is cached between calls and the
inputs are never modified, so callers simply recompute after every edit.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date
from typing import Mapping, Sequence

from parceltax.assessment.models import (
    Assessment,
    DerivedFloor,
    FloorInput,
    SiteInput,
    SiteSummary,
)
from parceltax.assessment.rules import (
    CORNER_PREMIUM_RATE,
    GUIDANCE_VALUE_SHARE,
    MARKET_RATE_SHARE,
    TaxRuleBook,
)
from parceltax.assessment.validation import check_built_up_area

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class _SiteConstants:
    """Site-wide values shared by every floor within one pass."""

    corner_add: float
    total_guidance_value: float
    guidance_value_25pct: float
    plinth_factor: float
    tax_rate: float
    market_rates: Mapping[str, float] | None


def _site_constants(site: SiteInput) -> _SiteConstants:
    corner_add = CORNER_PREMIUM_RATE * site.guidance_value if site.is_corner_site else 0.0
    total_guidance_value = site.guidance_value + corner_add
    return _SiteConstants(
        corner_add=corner_add,
        total_guidance_value=total_guidance_value,
        guidance_value_25pct=GUIDANCE_VALUE_SHARE * total_guidance_value,
        plinth_factor=site.plinth_factor,
        tax_rate=site.tax_rate_percent / 100.0,
        market_rates=site.market_rate_by_construction_type,
    )


def _derive_floor(
    floor: FloorInput,
    index: int,
    consts: _SiteConstants,
    rules: TaxRuleBook,
    current_year: int,
) -> DerivedFloor:
    depreciation = rules.depreciation_factor(floor.construction_year, current_year)

    market_rate = floor.market_rate
    if market_rate is None:
        market_rate = rules.market_rate_for(floor.construction_type, consts.market_rates)
    adjusted_rate = MARKET_RATE_SHARE * market_rate

    bua = floor.built_up_area
    occupancy = floor.occupancy_factor
    land = bua * consts.guidance_value_25pct * occupancy * consts.plinth_factor
    building = bua * adjusted_rate * occupancy * (1 - depreciation)
    floor_tax = (land + building) * consts.tax_rate

    return DerivedFloor(
        row_id=floor.row_id,
        index=index,
        built_up_area=bua,
        market_rate=market_rate,
        depreciation_factor=depreciation,
        adjusted_market_rate_25pct=adjusted_rate,
        land_component=land,
        building_component=building,
        floor_tax=floor_tax,
    )


def recompute(
    site: SiteInput,
    floors: Sequence[FloorInput],
    current_year: int,
    *,
    rules: TaxRuleBook | None = None,
) -> Assessment:
    """Compute every derived figure for one site.

    Args:
        site: Site-level inputs.
        floors: Floors in display order. Ignored entirely on a vacant site.
        current_year: Calendar year used to age the buildings.
        rules: Rule book; the built-in defaults when omitted.

    Returns:
        Assessment with one DerivedFloor per processed floor, the site
        summary, and any advisory warnings.
    """
    if rules is None:
        rules = TaxRuleBook.default()
    consts = _site_constants(site)

    if site.is_vacant:
        if floors:
            logger.debug("Ignoring %d floor(s) on vacant site", len(floors))
        floors = []
        effective_vacant_area = site.plot_area
    else:
        effective_vacant_area = site.vacant_area

    derived = [
        _derive_floor(floor, index, consts, rules, current_year)
        for index, floor in enumerate(floors, start=1)
    ]

    total_bua = sum(f.built_up_area for f in derived)
    vacant_land_tax = effective_vacant_area * consts.guidance_value_25pct * consts.tax_rate
    sum_floor_tax = sum(f.floor_tax for f in derived)
    base_tax = sum_floor_tax + vacant_land_tax
    additional_tax = base_tax * rules.additional_tax_rate
    total_property_tax = base_tax + additional_tax
    rebate_amount = total_property_tax * (site.rebate_percent / 100.0)
    cess_amount = total_property_tax * (site.cess_percent / 100.0)

    summary = SiteSummary(
        total_bua=total_bua,
        corner_add=consts.corner_add,
        total_guidance_value=consts.total_guidance_value,
        guidance_value_25pct=consts.guidance_value_25pct,
        effective_vacant_area=effective_vacant_area,
        vacant_land_tax=vacant_land_tax,
        sum_floor_tax=sum_floor_tax,
        base_tax=base_tax,
        additional_tax_29pct=additional_tax,
        total_property_tax=total_property_tax,
        rebate_amount=rebate_amount,
        cess_amount=cess_amount,
        final_payable=total_property_tax - rebate_amount + cess_amount,
    )

    warnings = check_built_up_area(site, floors)
    if warnings:
        logger.debug("Area warnings for site: %s", warnings)

    return Assessment(
        current_year=current_year,
        floors=derived,
        summary=summary,
        warnings=warnings,
    )


class TaxEngine:
    """Computes property tax assessments against a fixed rule book."""

    def __init__(self, rules: TaxRuleBook | None = None) -> None:
        self._rules = rules if rules is not None else TaxRuleBook.default()

    @property
    def rules(self) -> TaxRuleBook:
        return self._rules.model_copy(deep=True)

    @staticmethod
    def current_year() -> int:
        return date.today().year

    def recompute(
        self,
        site: SiteInput,
        floors: Sequence[FloorInput],
        current_year: int | None = None,
    ) -> Assessment:
        year = current_year if current_year is not None else self.current_year()
        return recompute(site, floors, year, rules=self._rules)
