"""
Foot-Shape Heuristic Scorer.

Scores how well a shoe's last suits the buyer's anatomy across four
dimensions, 15 points each:

1. Toe form       -- asymmetry base score plus a toe-box width bonus
2. Foot width     -- volume flags, toe-box width and leather stretch
3. Instep height  -- volume flags, instep height and slipper closure
4. Heel volume    -- volume flags, women's lasts and heel fit

A dimension is active only when the buyer selected at least one value.
With several values selected the best single value wins; values are
never summed.  Low-volume lasts lose points on the largest bucket of
width, instep and heel.
"""

from typing import Any, Callable, Iterable, List, Optional, TypeVar

from catalog.models import MatchDetail
from config.constants import (
    DEFAULT_CATEGORY_POINTS,
    DEFAULT_RANKING_CONFIG,
    CategoryPoints,
    RankingConfig,
)
from core.utils import clamp
from scoring import results
from scoring.constants.foot_shape import (
    EXACT_FIT_POINTS,
    FAR_FIT_POINTS,
    LEATHER_WIDE_POINTS,
    LOW_VOLUME_PENALTY,
    MEDIUM_FLAGGED_POINTS,
    MEDIUM_LARGE_POINTS,
    MEDIUM_MISMATCH_POINTS,
    MEDIUM_NEUTRAL_POINTS,
    NARROW_HEEL_POINTS,
    NARROW_TOE_BOX_POINTS,
    NEAR_FIT_POINTS,
    SLIPPER_LOW_INSTEP_POINTS,
    TOE_FORM_ASYMMETRY_POINTS,
    TOE_FORM_TOE_BOX_BONUS,
    VOLUME_FLAG_POINTS,
    WOMENS_SMALL_HEEL_POINTS,
)
from scoring.item_utils import (
    get_asymmetry,
    get_closure,
    get_heel_fit,
    get_instep_height,
    get_toe_box_width,
    is_high_volume,
    is_leather,
    is_low_volume,
    is_womens_last,
)
from scoring.preferences import (
    FootShapePreferences,
    FootWidth,
    HeelVolume,
    InstepHeight,
    ToeForm,
)

V = TypeVar("V")


class FootShapeScorer:
    """
    Score a shoe against foot-shape preferences.

    Stateless apart from the injected budgets; safe to share across
    threads.
    """

    def __init__(
        self,
        points: CategoryPoints = DEFAULT_CATEGORY_POINTS,
        config: RankingConfig = DEFAULT_RANKING_CONFIG,
    ):
        self.points = points
        self.config = config

    def score(self, shoe: Any, shape: FootShapePreferences) -> List[MatchDetail]:
        """
        Details for every active dimension, in toe form, width, instep,
        heel order.  Returns an empty list when nothing is selected.
        """
        details: List[MatchDetail] = []
        for category, selected, ladder in (
            (results.TOE_FORM, shape.toe_form, self._score_toe_form),
            (results.FOOT_WIDTH, shape.foot_width, self._score_width),
            (results.INSTEP_HEIGHT, shape.instep_height, self._score_instep),
            (results.HEEL_VOLUME, shape.heel_volume, self._score_heel),
        ):
            detail = self.score_dimension(shoe, category, selected, ladder)
            if detail is not None:
                details.append(detail)
        return details

    def score_dimension(
        self,
        shoe: Any,
        category: str,
        selected: Iterable[V],
        ladder: Callable[[Any, V], int],
    ) -> Optional[MatchDetail]:
        """Best-of-N over ``selected``; ``None`` when nothing is selected."""
        max_points = self.points.FOOT_SHAPE
        scores = [clamp(ladder(shoe, value), 0, max_points) for value in selected]
        if not scores:
            return None
        return results.build_detail(category, int(max(scores)), max_points, self.config)

    # ── Toe form ──────────────────────────────────────────────────

    def _score_toe_form(self, shoe: Any, toe_form: ToeForm) -> int:
        asymmetry = get_asymmetry(shoe)
        toe_box = get_toe_box_width(shoe)
        score = TOE_FORM_ASYMMETRY_POINTS[toe_form].get(asymmetry, 0)
        return score + TOE_FORM_TOE_BOX_BONUS[toe_form].get(toe_box, 0)

    # ── Foot width ────────────────────────────────────────────────

    def _score_width(self, shoe: Any, width: FootWidth) -> int:
        toe_box = get_toe_box_width(shoe)
        low, high = is_low_volume(shoe), is_high_volume(shoe)

        if width == FootWidth.NARROW:
            if low:
                return VOLUME_FLAG_POINTS
            if toe_box == "narrow":
                return NARROW_TOE_BOX_POINTS
            if toe_box == "medium":
                return NEAR_FIT_POINTS
            return FAR_FIT_POINTS

        if width == FootWidth.MEDIUM:
            return self._score_medium(toe_box, low, high)

        if high:
            score = VOLUME_FLAG_POINTS
        elif toe_box == "wide":
            score = EXACT_FIT_POINTS
        elif is_leather(shoe):
            score = LEATHER_WIDE_POINTS
        elif toe_box == "medium":
            score = NEAR_FIT_POINTS
        else:
            score = 0
        return self._penalize_low_volume(score, low)

    # ── Instep height ─────────────────────────────────────────────

    def _score_instep(self, shoe: Any, height: InstepHeight) -> int:
        instep = get_instep_height(shoe)
        low, high = is_low_volume(shoe), is_high_volume(shoe)

        if height == InstepHeight.LOW:
            if low:
                return VOLUME_FLAG_POINTS
            if instep == "low":
                return EXACT_FIT_POINTS
            if get_closure(shoe) == "slipper":
                return SLIPPER_LOW_INSTEP_POINTS
            if instep == "medium":
                return NEAR_FIT_POINTS
            return FAR_FIT_POINTS

        if height == InstepHeight.MEDIUM:
            return self._score_medium(instep, low, high)

        if high:
            score = VOLUME_FLAG_POINTS
        elif instep == "high":
            score = EXACT_FIT_POINTS
        elif instep == "medium":
            score = MEDIUM_LARGE_POINTS
        else:
            score = 0
        return self._penalize_low_volume(score, low)

    # ── Heel volume ───────────────────────────────────────────────

    def _score_heel(self, shoe: Any, volume: HeelVolume) -> int:
        heel = get_heel_fit(shoe)
        low, high = is_low_volume(shoe), is_high_volume(shoe)

        if volume == HeelVolume.SMALL:
            if low:
                return VOLUME_FLAG_POINTS
            if is_womens_last(shoe):
                return WOMENS_SMALL_HEEL_POINTS
            if heel == "narrow":
                return NARROW_HEEL_POINTS
            if heel == "medium":
                return NEAR_FIT_POINTS
            return FAR_FIT_POINTS

        if volume == HeelVolume.MEDIUM:
            return self._score_medium(heel, low, high)

        if high:
            score = VOLUME_FLAG_POINTS
        elif heel == "wide":
            score = EXACT_FIT_POINTS
        elif heel == "medium":
            score = MEDIUM_LARGE_POINTS
        else:
            score = 0
        return self._penalize_low_volume(score, low)

    # ── Shared rungs ──────────────────────────────────────────────

    @staticmethod
    def _score_medium(attribute: str, low: bool, high: bool) -> int:
        if attribute == "medium" and not low and not high:
            return MEDIUM_NEUTRAL_POINTS
        if attribute == "medium":
            return MEDIUM_FLAGGED_POINTS
        return MEDIUM_MISMATCH_POINTS

    @staticmethod
    def _penalize_low_volume(score: int, low: bool) -> int:
        return max(0, score - LOW_VOLUME_PENALTY) if low else score
