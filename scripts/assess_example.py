#!/usr/bin/env python3
"""CLI script to print a property tax assessment for a demo dataset."""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path

# Ensure the project source is importable when running the script directly.
_project_root = Path(__file__).resolve().parent.parent
_src = _project_root / "src"
if str(_src) not in sys.path:
    sys.path.insert(0, str(_src))

from parceltax.assessment.engine import TaxEngine  # noqa: E402
from parceltax.assessment.examples import EXAMPLES, load_example  # noqa: E402
from parceltax.assessment.formatting import format_assessment, format_report  # noqa: E402
from parceltax.assessment.rules import TaxRuleBook  # noqa: E402
from parceltax.core.config import Settings  # noqa: E402
from parceltax.core.types import parse_flag  # noqa: E402


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Compute the property tax of a demo dataset."
    )
    parser.add_argument(
        "example",
        choices=sorted(EXAMPLES),
        help="Demo dataset to assess.",
    )
    parser.add_argument(
        "--landuse",
        type=str,
        default="Builtup",
        help="Parcel landuse (use 'Vacant' for an unbuilt site).",
    )
    parser.add_argument(
        "--corner",
        type=str,
        default="no",
        help="Corner site flag (yes/y/1/true).",
    )
    parser.add_argument(
        "--year",
        type=int,
        default=None,
        help="Assessment year; defaults to the current year.",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print the formatted figures as JSON instead of a text report.",
    )
    return parser.parse_args()


def main() -> None:
    args = parse_args()

    settings = Settings()
    engine = TaxEngine(rules=TaxRuleBook.from_settings(settings.tax))

    site, floors = load_example(
        args.example, landuse=args.landuse, is_corner_site=parse_flag(args.corner)
    )
    assessment = engine.recompute(site, floors, args.year)

    if args.json:
        print(json.dumps(format_assessment(assessment), indent=2))
    else:
        print(format_report(assessment))

    # Area warnings are advisory; exit code flags them for scripting.
    sys.exit(1 if assessment.warnings else 0)


if __name__ == "__main__":
    main()
