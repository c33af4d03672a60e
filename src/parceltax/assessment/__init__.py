"""Property tax assessment: models, rule book, and the computation engine."""

from parceltax.assessment.engine import TaxEngine, recompute
from parceltax.assessment.floors import FloorTable
from parceltax.assessment.models import (
    Assessment,
    DerivedFloor,
    FloorInput,
    SiteInput,
    SiteSummary,
)
from parceltax.assessment.rules import TaxRuleBook

__all__ = [
    "Assessment",
    "DerivedFloor",
    "FloorInput",
    "FloorTable",
    "SiteInput",
    "SiteSummary",
    "TaxEngine",
    "TaxRuleBook",
    "recompute",
]
