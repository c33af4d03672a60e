"""Shared test fixtures and helpers."""

from __future__ import annotations

import pytest

from parceltax.assessment.models import FloorInput, SiteInput


ASSESSMENT_YEAR = 2024


def make_site(**overrides) -> SiteInput:
    """Example A site inputs with optional overrides."""
    data = {
        "plot_area": 1200,
        "guidance_value": 743.49,
        "is_corner_site": False,
        "plinth_factor": 1,
        "vacant_area": 0,
        "tax_rate_percent": 0.4,
        "rebate_percent": 5,
        "cess_percent": 26,
        "landuse": "Builtup",
    }
    data.update(overrides)
    return SiteInput(**data)


def make_floor(**overrides) -> FloorInput:
    """Example A floor with optional overrides."""
    data = {
        "construction_year": 2020,
        "construction_type": "RCC",
        "market_rate": 1576,
        "built_up_area": 500,
        "occupancy_factor": 0.5,
    }
    data.update(overrides)
    return FloorInput(**data)


@pytest.fixture
def site() -> SiteInput:
    return make_site()


@pytest.fixture
def floor() -> FloorInput:
    return make_floor()
