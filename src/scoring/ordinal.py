"""
Ordinal distance scoring for skill level and sensitivity.

Both categories sit on five-step scales.  An exact hit earns the full
budget, a neighbouring step earns half (partial), anything further earns
nothing.
"""

from typing import Any, Sequence, TypeVar

from catalog.models import MatchDetail
from config.constants import DEFAULT_CATEGORY_POINTS, CategoryPoints
from core.utils import round_half_up
from scoring import results
from scoring.item_utils import get_attr
from scoring.preferences import Sensitivity, SkillLevel
from scoring.sensitivity import derive_sensitivity

T = TypeVar("T")

SKILL_LEVEL_ORDER = tuple(SkillLevel)
SENSITIVITY_ORDER = tuple(Sensitivity)

NEIGHBOUR_CREDIT = 0.5


def ordinal_distance(order: Sequence[T], a: T, b: T) -> int:
    """Number of steps between ``a`` and ``b`` on ``order``."""
    return abs(order.index(a) - order.index(b))


class OrdinalScorer:
    """Skill level and sensitivity scorer.  Stateless; safe to share across threads."""

    def __init__(self, points: CategoryPoints = DEFAULT_CATEGORY_POINTS):
        self.points = points

    def score_skill_level(self, shoe: Any, target: SkillLevel) -> MatchDetail:
        shoe_level = SkillLevel(get_attr(shoe, "skill_level"))
        distance = ordinal_distance(SKILL_LEVEL_ORDER, shoe_level, target)
        return self._score(results.SKILL_LEVEL, distance, self.points.SKILL_LEVEL)

    def score_sensitivity(self, shoe: Any, target: Sensitivity) -> MatchDetail:
        distance = ordinal_distance(SENSITIVITY_ORDER, derive_sensitivity(shoe), target)
        return self._score(results.SENSITIVITY, distance, self.points.SENSITIVITY)

    def _score(self, category: str, distance: int, max_points: int) -> MatchDetail:
        if distance == 0:
            return MatchDetail(
                category=category, points=max_points, max_points=max_points,
                matched=True, partial=False,
            )
        if distance == 1:
            return MatchDetail(
                category=category, points=round_half_up(max_points * NEIGHBOUR_CREDIT),
                max_points=max_points, matched=False, partial=True,
            )
        return MatchDetail(
            category=category, points=0, max_points=max_points,
            matched=False, partial=False,
        )
