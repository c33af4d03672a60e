"""Advisory area checks. They warn, they never block a computation."""

from __future__ import annotations

from typing import Sequence

from parceltax.assessment.models import FloorInput, SiteInput

FLOOR_EXCEEDS_PLOT = "Built-up area in one floor exceeds total site area."
TOTAL_EXCEEDS_PLOT = "Total built-up area exceeds plot area."


def check_built_up_area(site: SiteInput, floors: Sequence[FloorInput]) -> list[str]:
    """Return warnings when built-up area does not fit on the plot.

    Vacant sites and sites without a plot area are never flagged.
    """
    if site.is_vacant or site.plot_area <= 0:
        return []

    warnings: list[str] = []
    if any(floor.built_up_area > site.plot_area for floor in floors):
        warnings.append(FLOOR_EXCEEDS_PLOT)

    total_bua = sum(floor.built_up_area for floor in floors)
    if total_bua > site.plot_area:
        warnings.append(TOTAL_EXCEEDS_PLOT)
    return warnings
