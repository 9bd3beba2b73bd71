"""
Derived sensitivity: how much of the rock a shoe lets the foot feel.

Soft, thin rubber over little or no midsole is sensitive; hard, thick
rubber over a full midsole is supportive.  Each of the three inputs
contributes 0-2 points and the 0-6 total maps onto five levels.
"""

from typing import Any

from config.constants import MEDIUM_RUBBER_MAX_MM, THIN_RUBBER_BELOW_MM
from scoring.item_utils import get_attr
from scoring.preferences import Sensitivity

_HARDNESS_POINTS = {"soft": 2, "medium": 1}
_MIDSOLE_POINTS = {"none": 2, "half": 1}


def sensitivity_points(shoe: Any) -> int:
    """Raw 0-6 sensitivity total before mapping onto a level."""
    points = _HARDNESS_POINTS.get(get_attr(shoe, "rubber_hardness"), 0)

    thickness = float(get_attr(shoe, "rubber_thickness_mm") or 0.0)
    if thickness < THIN_RUBBER_BELOW_MM:
        points += 2
    elif thickness <= MEDIUM_RUBBER_MAX_MM:
        points += 1

    points += _MIDSOLE_POINTS.get(get_attr(shoe, "midsole"), 0)
    return points


def derive_sensitivity(shoe: Any) -> Sensitivity:
    """Map a shoe onto the five-level sensitivity scale."""
    points = sensitivity_points(shoe)
    if points >= 5:
        return Sensitivity.VERY_SENSITIVE
    if points == 4:
        return Sensitivity.SENSITIVE
    if points == 3:
        return Sensitivity.MEDIUM
    if points == 2:
        return Sensitivity.SUPPORTIVE
    return Sensitivity.VERY_SUPPORTIVE
