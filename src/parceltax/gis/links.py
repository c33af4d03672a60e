"""Links between parcel features and the tax calculator."""

from __future__ import annotations

from typing import Any, Mapping
from urllib.parse import urlencode

from parceltax.core.types import is_vacant_landuse, parse_flag
from parceltax.gis.models import AssessContext

# Layers name the id attribute differently; first match wins.
ID_CANDIDATES = ("Property_ID", "PropID", "ID", "PropertyID")


def _present(value: Any) -> bool:
    return value is not None and value != ""


def resolve_property_id(properties: Mapping[str, Any]) -> Any | None:
    for key in ID_CANDIDATES:
        if key in properties:
            return properties[key]
    return None


def build_assess_query(properties: Mapping[str, Any]) -> str | None:
    """Query string for the calculator link of a feature, or None without an id."""
    property_id = resolve_property_id(properties)
    if not _present(property_id):
        return None

    params = [("propertyId", str(property_id))]
    landuse = properties.get("Landuse")
    if _present(landuse):
        params.append(("landuse", str(landuse)))
    corner = properties.get("CornerSite")
    if _present(corner):
        params.append(("corner", str(corner)))
    return urlencode(params)


def parse_assess_query(params: Mapping[str, Any]) -> AssessContext:
    """Read ``propertyId``, ``landuse`` and ``corner`` from calculator query params."""
    property_id = params.get("propertyId")
    landuse = str(params.get("landuse") or "")
    return AssessContext(
        property_id=str(property_id) if _present(property_id) else None,
        landuse=landuse,
        is_vacant=is_vacant_landuse(landuse),
        is_corner_site=parse_flag(params.get("corner") or ""),
    )
