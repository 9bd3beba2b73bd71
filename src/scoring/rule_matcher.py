"""
Categorical rule matching for the guided rule categories.

Rock type, wall angle, foothold type and use case are each scored by
looking up the selected value's constraints in the RuleBook and awarding
the category budget in proportion to the constraints the shoe satisfies.
"""

from numbers import Real
from typing import Any, Mapping, Optional

from catalog.models import MatchDetail
from config.constants import (
    DEFAULT_CATEGORY_POINTS,
    DEFAULT_RANKING_CONFIG,
    CategoryPoints,
    RankingConfig,
)
from core.utils import round_half_up
from scoring import results
from scoring.constants.rules import (
    DEFAULT_RULE_BOOK,
    Constraints,
    RuleBook,
    SetConstraint,
    ThresholdConstraint,
)
from scoring.item_utils import get_attr
from scoring.preferences import FootholdType, RockType, UseCase, WallAngle


def constraint_satisfied(shoe: Any, constraint) -> bool:
    value = get_attr(shoe, constraint.attribute)
    if isinstance(constraint, ThresholdConstraint):
        # bool is a Real subclass; a flag is never a measurement
        return isinstance(value, Real) and not isinstance(value, bool) and value >= constraint.minimum
    if isinstance(constraint, SetConstraint):
        return value in constraint.allowed
    raise TypeError(f"Unsupported constraint type: {type(constraint).__name__}")


def match_fraction(shoe: Any, constraints: Constraints) -> float:
    """Share of ``constraints`` the shoe satisfies; 0.0 when there are none."""
    if not constraints:
        return 0.0
    matches = sum(1 for c in constraints if constraint_satisfied(shoe, c))
    return matches / len(constraints)


class RuleMatcher:
    """
    Scores the four rule-table categories.

    Stateless apart from its injected tables and budgets; safe to share
    across threads.
    """

    def __init__(
        self,
        rules: RuleBook = DEFAULT_RULE_BOOK,
        points: CategoryPoints = DEFAULT_CATEGORY_POINTS,
        config: RankingConfig = DEFAULT_RANKING_CONFIG,
    ):
        self.rules = rules
        self.points = points
        self.config = config

    def score_rock_type(self, shoe: Any, rock_type: RockType) -> MatchDetail:
        return self._score(shoe, self.rules.rock_type, rock_type, results.ROCK_TYPE, self.points.ROCK_TYPE)

    def score_wall_angle(self, shoe: Any, wall_angle: WallAngle) -> MatchDetail:
        return self._score(shoe, self.rules.wall_angle, wall_angle, results.WALL_ANGLE, self.points.WALL_ANGLE)

    def score_foothold_type(self, shoe: Any, foothold_type: FootholdType) -> MatchDetail:
        return self._score(
            shoe, self.rules.foothold_type, foothold_type, results.FOOTHOLD_TYPE, self.points.FOOTHOLD_TYPE,
        )

    def score_use_case(self, shoe: Any, use_case: UseCase) -> MatchDetail:
        return self._score(shoe, self.rules.use_case, use_case, results.USE_CASE, self.points.USE_CASE)

    def _score(
        self,
        shoe: Any,
        table: Mapping[Any, Constraints],
        value: Any,
        category: str,
        max_points: int,
    ) -> MatchDetail:
        constraints: Optional[Constraints] = table.get(value)
        fraction = match_fraction(shoe, constraints or ())
        return results.build_fraction_detail(
            category,
            fraction,
            round_half_up(fraction * max_points),
            max_points,
            self.config,
        )
