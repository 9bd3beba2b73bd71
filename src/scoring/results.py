"""
MatchDetail construction shared by every category scorer.

All scorers classify the same way: ``matched`` at a fraction of at least
0.75, ``partial`` in [0.5, 0.75).  Category labels are the strings shown
in the "why this score?" breakdown.
"""

from config.constants import DEFAULT_RANKING_CONFIG, RankingConfig
from catalog.models import MatchDetail
from core.utils import clamp

# ── Category labels ───────────────────────────────────────────────
ROCK_TYPE = "Rock Type"
WALL_ANGLE = "Wall Angle"
FOOTHOLD_TYPE = "Foothold Type"
SKILL_LEVEL = "Skill Level"
USE_CASE = "Use Case"
SENSITIVITY = "Sensitivity"

TOE_FORM = "Toe Form"
FOOT_WIDTH = "Foot Width"
INSTEP_HEIGHT = "Instep Height"
HEEL_VOLUME = "Heel Volume"

RUBBER_THICKNESS = "Rubber Thickness"
RUBBER_TYPE = "Rubber Type"
PRICE = "Price"
VEGAN = "Vegan"

# Flat multi-select field -> label
FLAT_LABELS = {
    "downturn": "Downturn",
    "closure": "Closure",
    "rubber_hardness": "Rubber Hardness",
    "midsole": "Midsole",
    "volume": "Volume",
    "width": "Width",
    "heel": "Heel",
    "toe_patch": "Toe Patch",
    "asymmetry": "Asymmetry",
    "brand": "Brand",
}


def build_detail(
    category: str,
    points: int,
    max_points: int,
    config: RankingConfig = DEFAULT_RANKING_CONFIG,
) -> MatchDetail:
    """Clamp points into [0, max_points] and classify the fraction."""
    points = int(clamp(points, 0, max_points))
    fraction = points / max_points
    return MatchDetail(
        category=category,
        points=points,
        max_points=max_points,
        matched=fraction >= config.MATCHED_THRESHOLD,
        partial=config.PARTIAL_THRESHOLD <= fraction < config.MATCHED_THRESHOLD,
    )


def build_fraction_detail(
    category: str,
    fraction: float,
    points: int,
    max_points: int,
    config: RankingConfig = DEFAULT_RANKING_CONFIG,
) -> MatchDetail:
    """
    Classify on the raw ``fraction`` rather than ``points / max_points``.

    Rule-table categories round points, so 2 of 3 constraints on a
    20-point category gives 13 points (0.65) but must classify on 0.667.
    """
    return MatchDetail(
        category=category,
        points=int(clamp(points, 0, max_points)),
        max_points=max_points,
        matched=fraction >= config.MATCHED_THRESHOLD,
        partial=config.PARTIAL_THRESHOLD <= fraction < config.MATCHED_THRESHOLD,
    )
