"""Tax API router: assessments, calculator context, demo datasets."""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, HTTPException, Request
from pydantic import BaseModel, Field

from parceltax.assessment.engine import TaxEngine
from parceltax.assessment.examples import load_example
from parceltax.assessment.formatting import format_assessment
from parceltax.assessment.models import Assessment, FloorInput, SiteInput
from parceltax.core.types import Landuse, parse_flag
from parceltax.gis.links import parse_assess_query


router = APIRouter()


# ---------------------------------------------------------------------------
# Request models
# ---------------------------------------------------------------------------


class AssessRequest(BaseModel):
    """Request body for an assessment."""

    site: SiteInput = Field(default_factory=SiteInput)
    floors: list[FloorInput] = Field(default_factory=list)
    current_year: int | None = None


# ---------------------------------------------------------------------------
# Helpers to get services from app state
# ---------------------------------------------------------------------------


def _get_tax_engine(request: Request) -> TaxEngine:
    engine = getattr(request.app.state, "tax_engine", None)
    if engine is None:
        raise HTTPException(status_code=503, detail="Tax engine not available")
    return engine


def _assessment_response(assessment: Assessment) -> dict[str, Any]:
    return {
        "assessment": assessment.model_dump(mode="json"),
        "display": format_assessment(assessment),
    }


# ---------------------------------------------------------------------------
# Routes
# ---------------------------------------------------------------------------


@router.post("/api/tax/assess")
async def api_assess(body: AssessRequest, request: Request) -> dict[str, Any]:
    """Compute an assessment for the submitted site and floors."""
    engine = _get_tax_engine(request)
    assessment = engine.recompute(body.site, body.floors, body.current_year)
    return _assessment_response(assessment)


@router.get("/api/tax/context")
async def api_context(request: Request) -> dict[str, Any]:
    """Parse calculator query params, filling gaps from the parcel layer."""
    params = dict(request.query_params)
    gis_service = getattr(request.app.state, "gis_service", None)
    property_id = params.get("propertyId")

    if property_id and gis_service is not None:
        parcel = gis_service.lookup_by_id(property_id)
        if parcel is not None:
            if not params.get("landuse"):
                params["landuse"] = parcel.landuse
            if not params.get("corner"):
                params["corner"] = parcel.corner_site

    return parse_assess_query(params).model_dump()


@router.get("/api/tax/examples/{name}")
async def api_example(
    name: str,
    request: Request,
    landuse: str = Landuse.BUILTUP.value,
    corner: str = "",
    current_year: int | None = None,
) -> dict[str, Any]:
    """Assess one of the demo datasets."""
    engine = _get_tax_engine(request)
    try:
        site, floors = load_example(name, landuse=landuse, is_corner_site=parse_flag(corner))
    except ValueError as e:
        raise HTTPException(status_code=404, detail=str(e))

    assessment = engine.recompute(site, floors, current_year)
    response = _assessment_response(assessment)
    response["site"] = site.model_dump(mode="json")
    response["floors"] = [floor.model_dump(mode="json") for floor in floors]
    return response


@router.get("/api/tax/rules")
async def api_rules(request: Request) -> dict[str, Any]:
    """Rule book in effect."""
    engine = _get_tax_engine(request)
    return engine.rules.model_dump(mode="json")
