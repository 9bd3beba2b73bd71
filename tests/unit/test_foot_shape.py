"""
Unit tests for the foot-shape heuristic scorer and its secondary inference.

Tests cover:
1. Volume / leather / women's-last inference and attribute fallbacks
2. Toe form (asymmetry base + toe-box bonus, clamping)
3. Foot width, instep height and heel volume ladders
4. Best-of-N over multiple selections
5. Detail ordering and inactive dimensions

Run with: PYTHONPATH=src python -m pytest tests/unit/test_foot_shape.py -v
"""

import pytest

from scoring.foot_shape import FootShapeScorer
from scoring.item_utils import (
    get_asymmetry,
    get_heel_fit,
    get_instep_height,
    get_toe_box_width,
    is_high_volume,
    is_leather,
    is_low_volume,
    is_womens_last,
)
from scoring.preferences import FootShapePreferences


@pytest.fixture
def scorer():
    return FootShapeScorer()


def _points(scorer, shoe, **selection) -> int:
    details = scorer.score(shoe, FootShapePreferences(**selection))
    assert len(details) == 1
    return details[0].points


# =============================================================================
# 1. Secondary inference
# =============================================================================

class TestInference:

    def test_low_volume_from_model_name(self):
        assert is_low_volume({"model": "Solution LV", "volume": "medium"})

    def test_low_volume_from_volume_column(self):
        assert is_low_volume({"model": "Solution", "volume": "low"})

    def test_high_volume(self):
        assert is_high_volume({"model": "Drago HV", "volume": "medium"})
        assert is_high_volume({"model": "Drago", "volume": "high"})
        assert not is_high_volume({"model": "Drago", "volume": "medium"})

    def test_model_substring_is_taken_at_its_word(self):
        # "Evolv" contains "lv"
        assert is_low_volume({"model": "Evolv Shaman", "volume": "medium"})

    def test_missing_model_is_not_flagged(self):
        assert not is_low_volume({"model": None, "volume": "medium"})

    def test_leather(self):
        assert is_leather({"rubber_type": "Vibram XS Edge / Leather upper"})
        assert not is_leather({"rubber_type": "Vibram XS Grip"})
        assert not is_leather({})

    def test_womens_last(self):
        assert is_womens_last({"gender": "womens"})
        assert not is_womens_last({"gender": "unisex"})
        assert not is_womens_last({"gender": "Womens"})
        assert not is_womens_last({})

    def test_fallbacks(self):
        shoe = {"width": "wide", "heel": "narrow"}
        assert get_toe_box_width(shoe) == "wide"
        assert get_heel_fit(shoe) == "narrow"
        assert get_instep_height(shoe) == "medium"
        assert get_asymmetry(shoe) == "slight"
        assert get_toe_box_width({}) == "medium"
        assert get_heel_fit({}) == "medium"

    def test_sub_attribute_wins_over_fallback(self):
        shoe = {"width": "wide", "toe_box_width": "narrow", "heel": "narrow", "heel_fit": "wide"}
        assert get_toe_box_width(shoe) == "narrow"
        assert get_heel_fit(shoe) == "wide"


# =============================================================================
# 2. Toe form
# =============================================================================

class TestToeForm:

    def test_egyptian_bonus_is_clamped(self, scorer, make_shoe):
        shoe = make_shoe(asymmetry="strong", width="narrow")
        assert _points(scorer, shoe, toe_form={"egyptian"}) == 15

    def test_roman_with_strong_asymmetry(self, scorer, make_shoe):
        shoe = make_shoe(asymmetry="strong")
        assert _points(scorer, shoe, toe_form={"roman"}) == 3

    def test_greek_slight(self, scorer, make_shoe):
        assert _points(scorer, make_shoe(), toe_form={"greek"}) == 15

    def test_germanic_medium_box_bonus(self, scorer, make_shoe):
        assert _points(scorer, make_shoe(), toe_form={"germanic"}) == 13

    def test_celtic_narrow_box_no_bonus(self, scorer, make_shoe):
        shoe = make_shoe(asymmetry="none", width="narrow")
        assert _points(scorer, shoe, toe_form={"celtic"}) == 8

    def test_toe_box_width_sub_attribute_used(self, scorer, make_shoe):
        shoe = make_shoe(asymmetry="none", width="narrow", toe_box_width="wide")
        assert _points(scorer, shoe, toe_form={"celtic"}) == 10

    def test_low_volume_does_not_affect_toe_form(self, scorer, make_shoe):
        plain = _points(scorer, make_shoe(), toe_form={"germanic"})
        low = _points(scorer, make_shoe(model="Allround LV"), toe_form={"germanic"})
        assert plain == low


# =============================================================================
# 3. Ladders
# =============================================================================

class TestFootWidth:

    def test_wide_foot_low_volume_wide_box(self, scorer, make_shoe):
        shoe = make_shoe(model="Solution LV", toe_box_width="wide")
        detail = scorer.score(shoe, FootShapePreferences(foot_width={"wide"}))[0]
        assert (detail.category, detail.points, detail.max_points) == ("Foot Width", 8, 15)
        assert detail.partial and not detail.matched

    def test_wide_foot_high_volume(self, scorer, make_shoe):
        assert _points(scorer, make_shoe(volume="high"), foot_width={"wide"}) == 15

    def test_wide_foot_leather_stretch(self, scorer, make_shoe):
        shoe = make_shoe(width="narrow", rubber_type="Leather")
        assert _points(scorer, shoe, foot_width={"wide"}) == 3

    def test_wide_foot_medium_box(self, scorer, make_shoe):
        assert _points(scorer, make_shoe(), foot_width={"wide"}) == 6

    def test_wide_foot_narrow_box(self, scorer, make_shoe):
        assert _points(scorer, make_shoe(width="narrow"), foot_width={"wide"}) == 0

    def test_wide_foot_low_volume_never_negative(self, scorer, make_shoe):
        shoe = make_shoe(volume="low", width="narrow")
        assert _points(scorer, shoe, foot_width={"wide"}) == 0

    def test_narrow_foot(self, scorer, make_shoe):
        assert _points(scorer, make_shoe(volume="low"), foot_width={"narrow"}) == 15
        assert _points(scorer, make_shoe(width="narrow"), foot_width={"narrow"}) == 12
        assert _points(scorer, make_shoe(), foot_width={"narrow"}) == 6
        assert _points(scorer, make_shoe(width="wide"), foot_width={"narrow"}) == 2

    def test_medium_foot(self, scorer, make_shoe):
        assert _points(scorer, make_shoe(), foot_width={"medium"}) == 15
        assert _points(scorer, make_shoe(volume="low"), foot_width={"medium"}) == 12
        assert _points(scorer, make_shoe(width="wide"), foot_width={"medium"}) == 8


class TestInstepHeight:

    def test_low_instep(self, scorer, make_shoe):
        assert _points(scorer, make_shoe(volume="low"), instep_height={"low"}) == 15
        assert _points(scorer, make_shoe(instep_height="low"), instep_height={"low"}) == 13
        assert _points(scorer, make_shoe(closure="slipper"), instep_height={"low"}) == 10
        assert _points(scorer, make_shoe(), instep_height={"low"}) == 6
        assert _points(scorer, make_shoe(instep_height="high"), instep_height={"low"}) == 2

    def test_medium_instep(self, scorer, make_shoe):
        assert _points(scorer, make_shoe(), instep_height={"medium"}) == 15
        assert _points(scorer, make_shoe(volume="high"), instep_height={"medium"}) == 12
        assert _points(scorer, make_shoe(instep_height="low"), instep_height={"medium"}) == 8

    def test_high_instep(self, scorer, make_shoe):
        assert _points(scorer, make_shoe(volume="high"), instep_height={"high"}) == 15
        assert _points(scorer, make_shoe(instep_height="high"), instep_height={"high"}) == 13
        assert _points(scorer, make_shoe(), instep_height={"high"}) == 8
        assert _points(scorer, make_shoe(instep_height="low"), instep_height={"high"}) == 0

    def test_high_instep_low_volume_penalty(self, scorer, make_shoe):
        shoe = make_shoe(model="Katana LV", instep_height="high")
        assert _points(scorer, shoe, instep_height={"high"}) == 8


class TestHeelVolume:

    def test_small_heel(self, scorer, make_shoe):
        assert _points(scorer, make_shoe(volume="low"), heel_volume={"small"}) == 15
        assert _points(scorer, make_shoe(gender="womens"), heel_volume={"small"}) == 13
        assert _points(scorer, make_shoe(gender="Womens"), heel_volume={"small"}) == 6
        assert _points(scorer, make_shoe(heel="narrow"), heel_volume={"small"}) == 12
        assert _points(scorer, make_shoe(), heel_volume={"small"}) == 6
        assert _points(scorer, make_shoe(heel="wide"), heel_volume={"small"}) == 2

    def test_medium_heel(self, scorer, make_shoe):
        assert _points(scorer, make_shoe(), heel_volume={"medium"}) == 15
        assert _points(scorer, make_shoe(model="Allround HV"), heel_volume={"medium"}) == 12
        assert _points(scorer, make_shoe(heel="narrow"), heel_volume={"medium"}) == 8

    def test_large_heel(self, scorer, make_shoe):
        assert _points(scorer, make_shoe(volume="high"), heel_volume={"large"}) == 15
        assert _points(scorer, make_shoe(heel_fit="wide"), heel_volume={"large"}) == 13
        assert _points(scorer, make_shoe(), heel_volume={"large"}) == 8
        assert _points(scorer, make_shoe(heel="narrow"), heel_volume={"large"}) == 0

    def test_large_heel_low_volume_penalty(self, scorer, make_shoe):
        shoe = make_shoe(volume="low", heel="wide")
        assert _points(scorer, shoe, heel_volume={"large"}) == 8


# =============================================================================
# 4. Best-of-N
# =============================================================================

class TestBestOfN:

    def test_best_value_wins(self, scorer, make_shoe):
        shoe = make_shoe(asymmetry="strong")
        assert _points(scorer, shoe, toe_form={"roman", "egyptian"}) == 15

    def test_values_are_not_summed(self, scorer, make_shoe):
        shoe = make_shoe()
        both = _points(scorer, shoe, foot_width={"narrow", "wide"})
        assert both == max(
            _points(scorer, shoe, foot_width={"narrow"}),
            _points(scorer, shoe, foot_width={"wide"}),
        )

    def test_adding_a_value_never_lowers_score(self, scorer, catalog):
        for shoe in catalog:
            one = _points(scorer, shoe, heel_volume={"small"})
            two = _points(scorer, shoe, heel_volume={"small", "large"})
            assert two >= one


# =============================================================================
# 5. Ordering and activity
# =============================================================================

class TestDetails:

    def test_nothing_selected(self, scorer, make_shoe):
        assert scorer.score(make_shoe(), FootShapePreferences()) == []

    def test_dimension_order(self, scorer, make_shoe):
        prefs = FootShapePreferences(
            heel_volume={"medium"},
            toe_form={"greek"},
            instep_height={"medium"},
            foot_width={"medium"},
        )
        categories = [d.category for d in scorer.score(make_shoe(), prefs)]
        assert categories == ["Toe Form", "Foot Width", "Instep Height", "Heel Volume"]

    def test_points_within_budget(self, scorer, catalog):
        prefs = FootShapePreferences(
            toe_form={"egyptian", "roman", "greek", "germanic", "celtic"},
            foot_width={"narrow", "medium", "wide"},
            instep_height={"low", "medium", "high"},
            heel_volume={"small", "medium", "large"},
        )
        for shoe in catalog:
            for detail in scorer.score(shoe, prefs):
                assert 0 <= detail.points <= detail.max_points == 15
