"""FastAPI application for the parcel property-tax calculator.

Exposes the assessment engine over REST so the map front end can open a
parcel in the calculator and display the computed figures.
"""

from __future__ import annotations

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel

from parceltax.assessment.engine import TaxEngine
from parceltax.assessment.rules import TaxRuleBook
from parceltax.core.config import Settings
from parceltax.gis.service import GISService, MockGISService
from parceltax.web.tax_router import router as tax_router

logger = logging.getLogger(__name__)


class HealthResponse(BaseModel):
    """Health check response."""

    status: str
    service: str
    version: str = "0.1.0"


def create_app(
    settings: Settings | None = None,
    tax_engine: TaxEngine | None = None,
    gis_service: GISService | None = None,
) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        settings: Application settings. Loaded from the environment if omitted.
        tax_engine: Optional pre-built engine; built from ``settings.tax`` otherwise.
        gis_service: Optional parcel lookup service; the mock fixtures otherwise.
    """
    if settings is None:
        settings = Settings()

    logging.getLogger("parceltax").setLevel(settings.log_level.upper())

    if tax_engine is None:
        tax_engine = TaxEngine(rules=TaxRuleBook.from_settings(settings.tax))
    if gis_service is None:
        if settings.gis.provider != "mock":
            logger.warning(
                "GIS provider %r not supported, falling back to mock", settings.gis.provider
            )
        gis_service = MockGISService()

    app = FastAPI(
        title="Parcel Property Tax",
        description="Per-floor property tax assessment for GIS parcels",
        version="0.1.0",
        debug=settings.debug,
    )

    app.state.settings = settings
    app.state.tax_engine = tax_engine
    app.state.gis_service = gis_service

    # CORS for development
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(tax_router)

    @app.get("/api/health", response_model=HealthResponse)
    async def health_check() -> HealthResponse:
        """Health check endpoint."""
        return HealthResponse(status="healthy", service="parceltax")

    return app
