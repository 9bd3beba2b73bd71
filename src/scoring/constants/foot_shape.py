"""
Foot-shape heuristic point tables.

Points are on a 0-15 scale (the foot-shape category budget) and are
clamped to that range after bonuses and penalties.

Toe form is driven by shoe asymmetry, with a bonus when the toe box
width suits the toe shape.  Width, instep and heel use a first-match
ladder over the shoe's inferred volume flags and fit attributes; those
ladders live in scoring.foot_shape, the values they award live here.
"""

from typing import Dict

from scoring.preferences import ToeForm

# fmt: off
# ── Toe form: base points by shoe asymmetry ──────────────────────
TOE_FORM_ASYMMETRY_POINTS: Dict[ToeForm, Dict[str, int]] = {
    ToeForm.EGYPTIAN: {"strong": 15, "slight": 10, "none": 5},
    ToeForm.ROMAN:    {"none": 15, "slight": 10, "strong": 3},
    ToeForm.GREEK:    {"slight": 15, "strong": 10, "none": 8},
    ToeForm.GERMANIC: {"slight": 12, "none": 10, "strong": 5},
    ToeForm.CELTIC:   {"slight": 13, "strong": 8, "none": 8},
}

# ── Toe form: bonus by toe-box width ─────────────────────────────
TOE_FORM_TOE_BOX_BONUS: Dict[ToeForm, Dict[str, int]] = {
    ToeForm.EGYPTIAN: {"narrow": 2},
    ToeForm.ROMAN:    {"wide": 3},
    ToeForm.GREEK:    {},
    ToeForm.GERMANIC: {"wide": 3, "medium": 1},
    ToeForm.CELTIC:   {"medium": 2, "wide": 2},
}
# fmt: on

# ── Ladder values ────────────────────────────────────────────────
VOLUME_FLAG_POINTS = 15           # LV for the smallest bucket, HV for the largest
EXACT_FIT_POINTS = 13             # shoe attribute equals the requested extreme
NARROW_TOE_BOX_POINTS = 12        # narrow foot in a narrow toe box
SLIPPER_LOW_INSTEP_POINTS = 10    # slippers hug a low instep
NEAR_FIT_POINTS = 6               # one step off toward the middle
FAR_FIT_POINTS = 2                # opposite extreme
LEATHER_WIDE_POINTS = 3           # leather uppers stretch for wide feet
MEDIUM_LARGE_POINTS = 8           # medium attribute for a large/high request

MEDIUM_NEUTRAL_POINTS = 15        # medium request, medium shoe, no volume flag
MEDIUM_FLAGGED_POINTS = 12        # medium request, medium shoe, LV/HV last
MEDIUM_MISMATCH_POINTS = 8        # medium request, non-medium shoe

WOMENS_SMALL_HEEL_POINTS = 13     # women's lasts run small in the heel
NARROW_HEEL_POINTS = 12

# Low-volume lasts cannot also suit the largest bucket of a dimension.
LOW_VOLUME_PENALTY = 5

# Fallbacks for absent fit sub-attributes
DEFAULT_FIT = "medium"
DEFAULT_ASYMMETRY = "slight"
