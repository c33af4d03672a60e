"""GIS service protocol and mock implementation."""

from __future__ import annotations

from typing import Protocol

from parceltax.gis.models import Parcel


class GISService(Protocol):
    """Protocol for parcel lookup services."""

    def lookup_by_id(self, property_id: str) -> Parcel | None: ...
    def list_parcels(self) -> list[Parcel]: ...


class MockGISService:
    """Mock GIS service with fixture parcels for development/testing."""

    def __init__(self) -> None:
        self._parcels: dict[str, Parcel] = {}
        self._load_fixtures()

    def _load_fixtures(self) -> None:
        fixtures = [
            Parcel(
                property_id="MIT-0001",
                landuse="Builtup",
                built_type="Residential",
                no_floors="G+1",
                corner_site="Yes",
            ),
            Parcel(
                property_id="MIT-0002",
                landuse="Builtup",
                built_type="Commercial",
                no_floors="G+2",
                corner_site="No",
            ),
            Parcel(
                property_id="MIT-0003",
                landuse="Vacant",
                built_type="Vacant",
                no_floors="Vacant",
                corner_site="No",
            ),
            Parcel(
                property_id="MIT-0004",
                landuse="Vacant",
                built_type="Vacant",
                no_floors="Vacant",
                corner_site="Yes",
            ),
            Parcel(
                property_id="MIT-0005",
                landuse="Builtup",
                built_type="Gated_Community",
                no_floors="G",
                corner_site="No",
            ),
        ]
        for parcel in fixtures:
            self._parcels[parcel.property_id] = parcel

    def lookup_by_id(self, property_id: str) -> Parcel | None:
        return self._parcels.get(property_id)

    def list_parcels(self) -> list[Parcel]:
        return list(self._parcels.values())
