"""
Shoe Scoring Module.

Rule-table, ordinal, foot-shape and flat scorers plus the ranking
orchestrator that combines them.

Quick start::

    from scoring import ShoeMatcher, GuidedPreferences, FlatPreferences

    matcher = ShoeMatcher()
    guided = GuidedPreferences(wall_angle="overhang", use_case="boulder")
    flat = FlatPreferences(closure={"velcro"}, vegan=True)

    shortlist = matcher.rank(catalog, guided=guided, flat=flat)
    for shoe in shortlist:
        print(shoe.model, shoe.match_score)
"""

from scoring.preferences import (
    FlatPreferences,
    FootholdType,
    FootShapePreferences,
    FootWidth,
    GuidedPreferences,
    HeelVolume,
    InstepHeight,
    RockType,
    Sensitivity,
    SkillLevel,
    ToeForm,
    UseCase,
    WallAngle,
    has_active_preferences,
)
from scoring.scorer import ShoeMatcher, derive_sensitivity, rank_candidates, score_candidate

__all__ = [
    "FlatPreferences",
    "FootholdType",
    "FootShapePreferences",
    "FootWidth",
    "GuidedPreferences",
    "HeelVolume",
    "InstepHeight",
    "RockType",
    "Sensitivity",
    "SkillLevel",
    "ToeForm",
    "UseCase",
    "WallAngle",
    "has_active_preferences",
    "ShoeMatcher",
    "derive_sensitivity",
    "rank_candidates",
    "score_candidate",
]
