"""Presentation formatting. Values are rounded here and nowhere else."""

from __future__ import annotations

from typing import Any

from parceltax.assessment.models import Assessment, DerivedFloor, SiteSummary

_FLOOR_FIELDS = (
    "built_up_area",
    "market_rate",
    "depreciation_factor",
    "adjusted_market_rate_25pct",
    "land_component",
    "building_component",
    "floor_tax",
)


def format_amount(value: float | None) -> str:
    """Format a number with exactly two decimals; None reads as 0."""
    text = f"{float(value or 0.0):.2f}"
    return "0.00" if text == "-0.00" else text


def format_floor(floor: DerivedFloor) -> dict[str, Any]:
    row: dict[str, Any] = {"row_id": floor.row_id, "index": floor.index}
    for name in _FLOOR_FIELDS:
        row[name] = format_amount(getattr(floor, name))
    return row


def format_summary(summary: SiteSummary) -> dict[str, str]:
    return {name: format_amount(value) for name, value in summary.model_dump().items()}


def format_assessment(assessment: Assessment) -> dict[str, Any]:
    """Display view of an assessment: every figure as a 2-decimal string."""
    return {
        "floors": [format_floor(f) for f in assessment.floors],
        "summary": format_summary(assessment.summary),
        "warning": assessment.warning,
    }


def format_report(assessment: Assessment) -> str:
    """Plain-text report of an assessment, as printed by the CLI."""
    lines = [f"Property tax assessment ({assessment.current_year})", ""]

    if assessment.floors:
        lines.append("Floors:")
        for floor in assessment.floors:
            lines.append(
                f"  {floor.index}. BUA {format_amount(floor.built_up_area)}"
                f"  depr {format_amount(floor.depreciation_factor)}"
                f"  land {format_amount(floor.land_component)}"
                f"  building {format_amount(floor.building_component)}"
                f"  tax {format_amount(floor.floor_tax)}"
            )
    else:
        lines.append("Floors: none")
    lines.append("")

    lines.append("Summary:")
    for name, value in format_summary(assessment.summary).items():
        lines.append(f"  {name:<24} {value:>14}")

    if assessment.warnings:
        lines.append("")
        for warning in assessment.warnings:
            lines.append(f"WARNING: {warning}")
    return "\n".join(lines)
