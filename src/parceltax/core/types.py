"""Core type definitions shared across all parceltax modules."""

from __future__ import annotations

from enum import StrEnum
from typing import Any


class Landuse(StrEnum):
    """Landuse values carried on GIS parcels.

    Callers may supply other values; only ``Vacant`` changes how a site is taxed.
    """

    BUILTUP = "Builtup"
    VACANT = "Vacant"


class ConstructionType(StrEnum):
    """Construction-type tags with a row in the market-rate table."""

    RCC = "RCC"
    GRANITE = "GRANITE"
    MOSAIC = "MOSAIC"
    OTHER = "OTHER"


class FloorUse(StrEnum):
    """How a floor is used. Display only, it does not change the tax."""

    RESIDENTIAL = "Residential"
    COMMERCIAL = "Commercial"
    INDUSTRIAL = "Industrial"
    PUBLIC = "Public"


SELF_OCCUPIED = 0.5
OTHER_OCCUPANCY = 1.0

_TRUTHY_FLAGS = frozenset({"yes", "y", "1", "true"})


def is_vacant_landuse(landuse: str | None) -> bool:
    """Return True when a landuse label denotes a vacant site (case-insensitive)."""
    if not landuse:
        return False
    return str(landuse).strip().lower() == Landuse.VACANT.lower()


def parse_flag(value: Any) -> bool:
    """Parse a yes/no flag as it arrives from a query string or GIS attribute."""
    if isinstance(value, bool):
        return value
    if value is None:
        return False
    return str(value).strip().lower() in _TRUTHY_FLAGS
