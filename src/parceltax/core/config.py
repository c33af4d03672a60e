"""Application configuration loaded from environment and config files."""

from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings


class TaxConfig(BaseSettings):
    """Tax rule book configuration."""

    model_config = {"env_prefix": "PTAX_TAX_"}

    rules_path: str | None = None
    # Overrides the statutory surcharge from the rule book when set.
    additional_tax_rate: float | None = None


class GISConfig(BaseSettings):
    """GIS service configuration."""

    model_config = {"env_prefix": "PTAX_GIS_"}

    provider: str = "mock"


class Settings(BaseSettings):
    """Root application settings."""

    model_config = {"env_prefix": "PTAX_"}

    debug: bool = False
    log_level: str = "INFO"

    tax: TaxConfig = Field(default_factory=TaxConfig)
    gis: GISConfig = Field(default_factory=GISConfig)
