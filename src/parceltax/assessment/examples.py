"""Form defaults and demo datasets for the calculator."""

from __future__ import annotations

from typing import Any

from parceltax.assessment.models import FloorInput, SiteInput
from parceltax.core.types import Landuse, is_vacant_landuse

_DEFAULT_SITE: dict[str, Any] = {
    "plot_area": 1200,
    "guidance_value": 743.49,
    "plinth_factor": 1,
    "vacant_area": 0,
    "tax_rate_percent": 0.4,
    "rebate_percent": 5,
    "cess_percent": 26,
    "market_rate_by_construction_type": {
        "RCC": 1576,
        "GRANITE": 1421,
        "MOSAIC": 817.84,
        "OTHER": 1000,
    },
}

EXAMPLES: dict[str, dict[str, Any]] = {
    "A": {
        "site": dict(_DEFAULT_SITE),
        "floors": [
            {
                "construction_year": 2020,
                "construction_type": "RCC",
                "market_rate": 1576,
                "built_up_area": 500,
                "occupancy_factor": 0.5,
            },
        ],
    },
    "B": {
        "site": {
            "plot_area": 2500,
            "guidance_value": 900,
            "plinth_factor": 1,
            "vacant_area": 1200,
            "tax_rate_percent": 0.8,
            "rebate_percent": 0,
            "cess_percent": 26,
            "market_rate_by_construction_type": {
                "RCC": 2000,
                "GRANITE": 1800,
                "MOSAIC": 900,
                "OTHER": 1100,
            },
        },
        "floors": [
            {
                "construction_year": 2015,
                "construction_type": "GRANITE",
                "market_rate": 1800,
                "built_up_area": 800,
                "occupancy_factor": 1.0,
            },
            {
                "construction_year": 2000,
                "construction_type": "MOSAIC",
                "market_rate": 900,
                "built_up_area": 700,
                "occupancy_factor": 1.0,
            },
        ],
    },
}


def default_site(
    landuse: str = Landuse.BUILTUP.value,
    is_corner_site: bool = False,
) -> SiteInput:
    """Initial form values for a freshly opened parcel."""
    return SiteInput(**_DEFAULT_SITE, landuse=landuse, is_corner_site=is_corner_site)


def default_floors(current_year: int, landuse: str = Landuse.BUILTUP.value) -> list[FloorInput]:
    """One new self-occupied RCC floor; vacant sites start with none."""
    if is_vacant_landuse(landuse):
        return []
    return [
        FloorInput(
            construction_year=current_year,
            construction_type="RCC",
            built_up_area=500,
            occupancy_factor=0.5,
        )
    ]


def load_example(
    name: str,
    landuse: str = Landuse.BUILTUP.value,
    is_corner_site: bool = False,
) -> tuple[SiteInput, list[FloorInput]]:
    """Build the site and floors of a named demo dataset.

    On a vacant site the whole plot becomes vacant area and no floors load.
    """
    key = name.strip().upper()
    if key not in EXAMPLES:
        raise ValueError(
            f"Unknown example {name!r}. Available: {list(EXAMPLES.keys())}"
        )

    example = EXAMPLES[key]
    site_data = dict(example["site"], landuse=landuse, is_corner_site=is_corner_site)
    if is_vacant_landuse(landuse):
        site_data["vacant_area"] = site_data["plot_area"]
        return SiteInput(**site_data), []

    floors = [FloorInput(**floor) for floor in example["floors"]]
    return SiteInput(**site_data), floors
