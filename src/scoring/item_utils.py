"""
Shared shoe-attribute helpers for scoring modules.

The foot-shape scorer needs a few facts that are not stored as clean
columns: whether a shoe is built on a low- or high-volume last, whether
its upper is leather, and which toe-box / instep / heel fit applies when
the dedicated sub-attribute is missing.  These helpers keep the
substring rules in one place so tests can pin them exactly.

The volume flags are heuristics over free text: a model name that merely
contains "lv" or "hv" is taken at its word.
"""

from typing import Any

from core.utils import contains_token
from scoring.constants.foot_shape import DEFAULT_ASYMMETRY, DEFAULT_FIT


def get_attr(shoe: Any, name: str) -> Any:
    if isinstance(shoe, dict):
        return shoe.get(name)
    return getattr(shoe, name, None)


# ── Volume / material inference ───────────────────────────────────

def is_low_volume(shoe: Any) -> bool:
    """LV last: "lv" in the model name, or internal volume marked low."""
    return contains_token(get_attr(shoe, "model"), "lv") or get_attr(shoe, "volume") == "low"


def is_high_volume(shoe: Any) -> bool:
    """HV last: "hv" in the model name, or internal volume marked high."""
    return contains_token(get_attr(shoe, "model"), "hv") or get_attr(shoe, "volume") == "high"


def is_leather(shoe: Any) -> bool:
    """Leather is recorded in the material text alongside the rubber type."""
    return contains_token(get_attr(shoe, "rubber_type"), "leather")


def is_womens_last(shoe: Any) -> bool:
    return get_attr(shoe, "gender") == "womens"


# ── Fit sub-attributes with fallbacks ─────────────────────────────

def get_toe_box_width(shoe: Any) -> str:
    return get_attr(shoe, "toe_box_width") or get_attr(shoe, "width") or DEFAULT_FIT


def get_instep_height(shoe: Any) -> str:
    return get_attr(shoe, "instep_height") or DEFAULT_FIT


def get_heel_fit(shoe: Any) -> str:
    return get_attr(shoe, "heel_fit") or get_attr(shoe, "heel") or DEFAULT_FIT


def get_asymmetry(shoe: Any) -> str:
    return get_attr(shoe, "asymmetry") or DEFAULT_ASYMMETRY


def get_closure(shoe: Any) -> str:
    return get_attr(shoe, "closure") or "velcro"
