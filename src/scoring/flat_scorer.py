"""
Flat multi-select, range and toggle scoring.

Every flat category is binary: 10 points when the shoe satisfies the
selection, 0 otherwise.  Inactive categories (empty selection, price
interval left at the catalog bounds, vegan left unset) emit nothing.
"""

from typing import Any, List, Tuple

from catalog.models import MatchDetail
from config.constants import (
    DEFAULT_CATEGORY_POINTS,
    DEFAULT_RANKING_CONFIG,
    MEDIUM_RUBBER_MAX_MM,
    THIN_RUBBER_BELOW_MM,
    CategoryPoints,
    RankingConfig,
)
from core.utils import contains_token
from scoring import results
from scoring.item_utils import get_attr
from scoring.preferences import FLAT_MULTI_SELECT_FIELDS, FlatPreferences


def thickness_bucket(thickness_mm: float) -> str:
    """thin below 3.5 mm, medium up to 4.0 mm inclusive, thick above."""
    if thickness_mm < THIN_RUBBER_BELOW_MM:
        return "thin"
    if thickness_mm <= MEDIUM_RUBBER_MAX_MM:
        return "medium"
    return "thick"


class FlatScorer:
    """Stateless flat-filter scorer; safe to share across threads."""

    def __init__(
        self,
        points: CategoryPoints = DEFAULT_CATEGORY_POINTS,
        config: RankingConfig = DEFAULT_RANKING_CONFIG,
        price_bounds: Tuple[float, float] = DEFAULT_RANKING_CONFIG.DEFAULT_PRICE_RANGE,
    ):
        self.points = points
        self.config = config
        self.price_bounds = price_bounds

    def score(self, shoe: Any, flat: FlatPreferences) -> List[MatchDetail]:
        details: List[MatchDetail] = []

        for name in FLAT_MULTI_SELECT_FIELDS:
            selected = getattr(flat, name)
            if selected:
                details.append(self._binary(results.FLAT_LABELS[name], get_attr(shoe, name) in selected))

        if flat.rubber_thickness:
            thickness = float(get_attr(shoe, "rubber_thickness_mm") or 0.0)
            details.append(self._binary(
                results.RUBBER_THICKNESS, thickness_bucket(thickness) in flat.rubber_thickness,
            ))

        if flat.rubber_type:
            rubber = get_attr(shoe, "rubber_type")
            details.append(self._binary(
                results.RUBBER_TYPE, any(contains_token(rubber, wanted) for wanted in flat.rubber_type),
            ))

        if flat.price_is_narrowed(self.price_bounds):
            low, high = flat.price_range
            price = get_attr(shoe, "price_eur")
            details.append(self._binary(results.PRICE, price is not None and low <= price <= high))

        if flat.vegan is not None:
            details.append(self._binary(results.VEGAN, bool(get_attr(shoe, "vegan")) == flat.vegan))

        return details

    def _binary(self, category: str, matched: bool) -> MatchDetail:
        max_points = self.points.FLAT
        return results.build_detail(category, max_points if matched else 0, max_points, self.config)
