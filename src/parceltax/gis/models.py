"""GIS data models."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field

from parceltax.core.types import is_vacant_landuse, parse_flag


class Parcel(BaseModel):
    """A parcel feature from the property layer."""

    property_id: str
    landuse: str = ""
    built_type: str = ""
    no_floors: str = ""
    corner_site: str = ""
    attributes: dict[str, Any] = Field(default_factory=dict)

    @property
    def is_vacant(self) -> bool:
        return is_vacant_landuse(self.landuse)

    @property
    def is_corner_site(self) -> bool:
        return parse_flag(self.corner_site)

    def feature_properties(self) -> dict[str, Any]:
        """Attributes as they appear on the GeoJSON feature."""
        props: dict[str, Any] = {
            "Property_ID": self.property_id,
            "Landuse": self.landuse,
            "BuiltType": self.built_type,
            "No_Floors": self.no_floors,
            "CornerSite": self.corner_site,
        }
        props.update(self.attributes)
        return props


class AssessContext(BaseModel):
    """Parcel context passed from the map into the tax calculator."""

    property_id: str | None = None
    landuse: str = ""
    is_vacant: bool = False
    is_corner_site: bool = False
