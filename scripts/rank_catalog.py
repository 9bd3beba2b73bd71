#!/usr/bin/env python3
"""
Diagnostic: rank a JSON catalog export against a preference payload.

The preference file holds the three preference sets in the same
camelCase shape the front end sends:

    {
        "guided":    {"rockType": "granite", "skillLevel": "intermediate"},
        "footShape": {"footWidth": ["wide"]},
        "flat":      {"closure": ["velcro"], "priceRange": [80, 180]}
    }

Usage:
    PYTHONPATH=src python scripts/rank_catalog.py --catalog data/shoes.json --prefs prefs.json
    PYTHONPATH=src python scripts/rank_catalog.py --prefs prefs.json --explain
"""

import argparse
import json
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from catalog import load_catalog, price_bounds
from config.settings import get_settings
from core.logging import configure_from_settings
from scoring import (
    FlatPreferences,
    FootShapePreferences,
    GuidedPreferences,
    ShoeMatcher,
    has_active_preferences,
)


def main():
    settings = get_settings()
    configure_from_settings(settings)

    parser = argparse.ArgumentParser(description="Rank a shoe catalog against preferences")
    parser.add_argument("--catalog", type=Path, default=settings.catalog_path, help="JSON catalog export")
    parser.add_argument("--prefs", type=Path, help="JSON preference payload (default: nothing selected)")
    parser.add_argument("--top", type=int, default=settings.ranking_top_n, help="Shortlist size")
    parser.add_argument("--explain", action="store_true", help="Print the per-category breakdown")
    args = parser.parse_args()

    if args.catalog is None:
        parser.error("--catalog is required when CATALOG_PATH is not set")

    shoes = load_catalog(args.catalog)
    bounds = price_bounds(shoes, default=settings.price_bounds)

    payload = json.loads(args.prefs.read_text(encoding="utf-8")) if args.prefs else {}
    guided = GuidedPreferences.from_dict(payload.get("guided"))
    shape = FootShapePreferences.from_dict(payload.get("footShape") or payload.get("foot_shape"))
    flat = FlatPreferences.from_dict(payload.get("flat"), bounds=bounds)

    matcher = ShoeMatcher.from_settings(settings, price_bounds=bounds, top_n=args.top)
    ranked = matcher.rank(shoes, guided, flat, shape)

    if not has_active_preferences(guided, flat, shape, bounds):
        print("No preferences selected: every shoe scores the neutral baseline.\n")

    print(f"{'#':>3}  {'Score':>5}  {'Brand':<16} Model")
    print("-" * 60)
    for i, scored in enumerate(ranked, 1):
        print(f"{i:>3}  {scored.match_score:>4}%  {scored.brand:<16} {scored.model}")
        if args.explain:
            for detail in scored.match_details:
                flag = "match" if detail.matched else "partial" if detail.partial else "-"
                print(f"{'':>12}{detail.category:<18} {detail.points:>2}/{detail.max_points:<3} {flag}")


if __name__ == "__main__":
    main()
