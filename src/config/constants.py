"""
Application constants and algorithm configuration.

These are values that don't change based on environment but may need
to be tuned or referenced across the codebase.
"""

from dataclasses import dataclass
from typing import Tuple


# =============================================================================
# Ranking Configuration
# =============================================================================

@dataclass(frozen=True)
class RankingConfig:
    """Configuration for the shoe ranking engine."""

    # Shortlist size returned by rank_candidates()
    TOP_N: int = 10

    # Score returned when no preference category is active
    NEUTRAL_SCORE: int = 50

    # Match-fraction classification
    MATCHED_THRESHOLD: float = 0.75
    PARTIAL_THRESHOLD: float = 0.5

    # Catalog price bounds (EUR). A price preference equal to these
    # bounds counts as "not narrowed" and stays inactive.
    DEFAULT_PRICE_RANGE: Tuple[float, float] = (50.0, 250.0)


# Default ranking config instance
DEFAULT_RANKING_CONFIG = RankingConfig()


# =============================================================================
# Category Point Budgets
# =============================================================================

@dataclass(frozen=True)
class CategoryPoints:
    """Maximum points each scoring category can award."""

    ROCK_TYPE: int = 20
    WALL_ANGLE: int = 20
    FOOTHOLD_TYPE: int = 15
    SKILL_LEVEL: int = 15
    USE_CASE: int = 10
    SENSITIVITY: int = 10

    # Every foot-shape dimension
    FOOT_SHAPE: int = 15

    # Every flat multi-select, price and vegan category
    FLAT: int = 10


DEFAULT_CATEGORY_POINTS = CategoryPoints()


# =============================================================================
# Rubber Thickness Buckets (mm)
# =============================================================================

THIN_RUBBER_BELOW_MM = 3.5
MEDIUM_RUBBER_MAX_MM = 4.0
