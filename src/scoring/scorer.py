"""
ShoeMatcher -- the ranking orchestrator.

Combines the guided, foot-shape and flat category scorers into one
match percentage per shoe and ranks a catalog into a bounded shortlist.

Usage::

    from scoring import ShoeMatcher, GuidedPreferences, FootShapePreferences

    matcher = ShoeMatcher()
    guided = GuidedPreferences(rock_type="granite", skill_level="intermediate")
    shape = FootShapePreferences(foot_width={"wide"})

    # Single shoe
    scored = matcher.score(shoe, guided=guided, shape=shape)
    scored.match_score, scored.match_details

    # Top-N shortlist, catalog order breaks ties
    shortlist = matcher.rank(catalog, guided=guided, shape=shape)
"""

from concurrent.futures import ThreadPoolExecutor
from functools import partial
from typing import Any, Dict, Iterable, List, Optional, Tuple

from catalog.models import MatchDetail, ScoredShoe, Shoe
from config.constants import (
    DEFAULT_CATEGORY_POINTS,
    DEFAULT_RANKING_CONFIG,
    CategoryPoints,
    RankingConfig,
)
from core.logging import LoggerMixin
from core.utils import round_half_up
from scoring.constants.rules import DEFAULT_RULE_BOOK, RuleBook
from scoring.flat_scorer import FlatScorer
from scoring.foot_shape import FootShapeScorer
from scoring.ordinal import OrdinalScorer
from scoring.preferences import FlatPreferences, FootShapePreferences, GuidedPreferences
from scoring.rule_matcher import RuleMatcher
from scoring.sensitivity import derive_sensitivity


def _as_shoe(shoe: Any) -> Shoe:
    """Raw catalog rows are validated into ``Shoe`` before scoring."""
    if isinstance(shoe, Shoe):
        return shoe
    return Shoe.model_validate(shoe)


class ShoeMatcher(LoggerMixin):
    """
    Orchestrates all category scorers.

    Stateless apart from its injected tables and configuration -- safe to
    share across threads and reuse across requests.
    """

    def __init__(
        self,
        rules: RuleBook = DEFAULT_RULE_BOOK,
        config: RankingConfig = DEFAULT_RANKING_CONFIG,
        points: CategoryPoints = DEFAULT_CATEGORY_POINTS,
        price_bounds: Optional[Tuple[float, float]] = None,
        top_n: Optional[int] = None,
        max_workers: int = 1,
    ) -> None:
        self.config = config
        self.price_bounds = price_bounds or config.DEFAULT_PRICE_RANGE
        self.top_n = top_n if top_n is not None else config.TOP_N
        self.max_workers = max_workers

        self._rule_matcher = RuleMatcher(rules, points, config)
        self._ordinal_scorer = OrdinalScorer(points)
        self._foot_shape_scorer = FootShapeScorer(points, config)
        self._flat_scorer = FlatScorer(points, config, self.price_bounds)

    @classmethod
    def from_settings(cls, settings: Any, **kwargs: Any) -> "ShoeMatcher":
        """Build a matcher from ``config.settings.Settings``."""
        kwargs.setdefault("price_bounds", settings.price_bounds)
        kwargs.setdefault("top_n", settings.ranking_top_n)
        kwargs.setdefault("max_workers", settings.ranking_max_workers)
        return cls(**kwargs)

    # ── Single shoe ───────────────────────────────────────────────

    def match_details(
        self,
        shoe: Shoe,
        guided: Optional[GuidedPreferences] = None,
        flat: Optional[FlatPreferences] = None,
        shape: Optional[FootShapePreferences] = None,
    ) -> List[MatchDetail]:
        """
        Details for every active category, guided first, then foot shape,
        then flat.
        """
        details: List[MatchDetail] = []

        if guided is not None:
            if guided.rock_type is not None:
                details.append(self._rule_matcher.score_rock_type(shoe, guided.rock_type))
            if guided.wall_angle is not None:
                details.append(self._rule_matcher.score_wall_angle(shoe, guided.wall_angle))
            if guided.foothold_type is not None:
                details.append(self._rule_matcher.score_foothold_type(shoe, guided.foothold_type))
            if guided.skill_level is not None:
                details.append(self._ordinal_scorer.score_skill_level(shoe, guided.skill_level))
            if guided.use_case is not None:
                details.append(self._rule_matcher.score_use_case(shoe, guided.use_case))
            if guided.sensitivity is not None:
                details.append(self._ordinal_scorer.score_sensitivity(shoe, guided.sensitivity))

        if shape is not None:
            details.extend(self._foot_shape_scorer.score(shoe, shape))

        if flat is not None:
            details.extend(self._flat_scorer.score(shoe, flat))

        return details

    def match_score(self, details: List[MatchDetail]) -> int:
        """Percentage of available points earned; neutral when nothing is active."""
        total_max = sum(d.max_points for d in details)
        if total_max == 0:
            return self.config.NEUTRAL_SCORE
        total = sum(d.points for d in details)
        return round_half_up(total / total_max * 100)

    def score(
        self,
        shoe: Shoe,
        guided: Optional[GuidedPreferences] = None,
        flat: Optional[FlatPreferences] = None,
        shape: Optional[FootShapePreferences] = None,
    ) -> ScoredShoe:
        shoe = _as_shoe(shoe)
        details = self.match_details(shoe, guided, flat, shape)
        return ScoredShoe.from_shoe(shoe, self.match_score(details), details)

    def explain(
        self,
        shoe: Shoe,
        guided: Optional[GuidedPreferences] = None,
        flat: Optional[FlatPreferences] = None,
        shape: Optional[FootShapePreferences] = None,
    ) -> Dict[str, Any]:
        """
        Return detailed breakdown of scoring for debugging / admin UI.
        """
        shoe = _as_shoe(shoe)
        details = self.match_details(shoe, guided, flat, shape)
        breakdown: Dict[str, Any] = {
            "id": shoe.id,
            "match_score": self.match_score(details),
            "total_points": sum(d.points for d in details),
            "total_max_points": sum(d.max_points for d in details),
            "categories": {
                d.category: {
                    "points": d.points,
                    "max_points": d.max_points,
                    "matched": d.matched,
                    "partial": d.partial,
                }
                for d in details
            },
        }
        if guided is not None and guided.sensitivity is not None:
            breakdown["derived_sensitivity"] = derive_sensitivity(shoe).value
        return breakdown

    # ── Ranking ───────────────────────────────────────────────────

    def rank(
        self,
        shoes: Iterable[Shoe],
        guided: Optional[GuidedPreferences] = None,
        flat: Optional[FlatPreferences] = None,
        shape: Optional[FootShapePreferences] = None,
        max_workers: Optional[int] = None,
    ) -> List[ScoredShoe]:
        """
        Score every shoe and return the top-N by ``match_score``.

        Ties keep catalog order.  With ``max_workers > 1`` the per-shoe
        scoring runs on a thread pool; the result is identical to the
        sequential run.
        """
        shoes = list(shoes)
        workers = max_workers if max_workers is not None else self.max_workers
        score_one = partial(self.score, guided=guided, flat=flat, shape=shape)

        if workers > 1 and len(shoes) > 1:
            with ThreadPoolExecutor(max_workers=workers) as pool:
                scored = list(pool.map(score_one, shoes))
        else:
            scored = [score_one(shoe) for shoe in shoes]

        order = sorted(range(len(scored)), key=lambda i: (-scored[i].match_score, i))
        ranked = [scored[i] for i in order[: self.top_n]]

        self.logger.debug(
            "Ranked candidates",
            candidates=len(shoes),
            active_categories=len(ranked[0].match_details) if ranked else 0,
            returned=len(ranked),
            top_score=ranked[0].match_score if ranked else None,
            workers=workers,
        )
        return ranked


# ── Module-level entry points ────────────────────────────────────

_default_matcher = ShoeMatcher()


def score_candidate(
    shoe: Shoe,
    guided: Optional[GuidedPreferences] = None,
    flat: Optional[FlatPreferences] = None,
    shape: Optional[FootShapePreferences] = None,
) -> ScoredShoe:
    """Score one shoe with the default rule tables and configuration."""
    return _default_matcher.score(shoe, guided, flat, shape)


def rank_candidates(
    shoes: Iterable[Shoe],
    guided: Optional[GuidedPreferences] = None,
    flat: Optional[FlatPreferences] = None,
    shape: Optional[FootShapePreferences] = None,
) -> List[ScoredShoe]:
    """Rank shoes with the default rule tables and return the top 10."""
    return _default_matcher.rank(shoes, guided, flat, shape)


__all__ = [
    "ShoeMatcher",
    "score_candidate",
    "rank_candidates",
    "derive_sensitivity",
]
