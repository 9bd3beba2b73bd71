"""
Rule tables: guided preference value -> attribute constraints.

Each guided category (rock type, wall angle, foothold type, use case)
maps every one of its values to a short list of constraints a shoe
should satisfy.  Two constraint shapes exist:

- SetConstraint       -- attribute value must be one of ``allowed``
- ThresholdConstraint -- numeric attribute must be >= ``minimum``

Tables are read-only mappings built once at import time and bundled in
a RuleBook that the scorers receive at construction.
"""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import FrozenSet, Mapping, Tuple, Union

from scoring.preferences import FootholdType, RockType, UseCase, WallAngle


@dataclass(frozen=True)
class SetConstraint:
    attribute: str
    allowed: FrozenSet[str]


@dataclass(frozen=True)
class ThresholdConstraint:
    attribute: str
    minimum: float


Constraint = Union[SetConstraint, ThresholdConstraint]
Constraints = Tuple[Constraint, ...]


def _one_of(attribute: str, *values: str) -> SetConstraint:
    return SetConstraint(attribute, frozenset(values))


def _at_least(attribute: str, minimum: float) -> ThresholdConstraint:
    return ThresholdConstraint(attribute, minimum)


# fmt: off
# ── Rock type ─────────────────────────────────────────────────────
ROCK_TYPE_RULES: Mapping[RockType, Constraints] = MappingProxyType({
    RockType.LIMESTONE: (
        _one_of("rubber_hardness", "soft", "medium"),
        _one_of("toe_patch", "medium", "large"),
        _one_of("midsole", "half", "3/4"),
    ),
    RockType.GRANITE: (
        _one_of("rubber_hardness", "medium", "hard"),
        _one_of("midsole", "3/4", "full"),
    ),
    RockType.SANDSTONE: (
        _one_of("rubber_hardness", "soft", "medium"),
        _one_of("midsole", "none", "half"),
        _one_of("toe_patch", "medium", "large"),
    ),
    RockType.INDOOR: (
        _one_of("rubber_hardness", "soft", "medium"),
        _one_of("closure", "velcro", "slipper"),
        _one_of("toe_patch", "medium", "large"),
    ),
})

# ── Wall angle ────────────────────────────────────────────────────
WALL_ANGLE_RULES: Mapping[WallAngle, Constraints] = MappingProxyType({
    WallAngle.SLAB: (
        _one_of("downturn", "flat"),
        _one_of("asymmetry", "none"),
        _one_of("midsole", "full", "3/4"),
        _one_of("rubber_hardness", "medium", "hard"),
    ),
    WallAngle.VERTICAL: (
        _one_of("downturn", "flat", "moderate"),
        _one_of("midsole", "full", "3/4", "half"),
    ),
    WallAngle.OVERHANG: (
        _one_of("downturn", "moderate", "aggressive"),
        _one_of("toe_patch", "medium", "large"),
        _one_of("rubber_hardness", "soft", "medium"),
    ),
    WallAngle.ROOF: (
        _one_of("downturn", "aggressive"),
        _one_of("toe_patch", "large"),
        _one_of("rubber_hardness", "soft"),
    ),
})

# ── Foothold type ─────────────────────────────────────────────────
FOOTHOLD_TYPE_RULES: Mapping[FootholdType, Constraints] = MappingProxyType({
    FootholdType.SMEARS: (
        _one_of("rubber_hardness", "soft", "medium"),
        _one_of("downturn", "flat", "moderate"),
        _one_of("midsole", "3/4", "full"),
    ),
    FootholdType.EDGES: (
        _one_of("rubber_hardness", "medium", "hard"),
        _one_of("midsole", "3/4", "full"),
        _one_of("asymmetry", "slight", "strong"),
        _one_of("downturn", "moderate", "aggressive"),
    ),
    FootholdType.POCKETS: (
        _one_of("downturn", "moderate", "aggressive"),
        _one_of("asymmetry", "strong"),
        _one_of("midsole", "3/4", "full"),
    ),
    FootholdType.CRACKS: (
        _one_of("downturn", "flat"),
        _one_of("midsole", "full", "3/4"),
        _one_of("rubber_hardness", "medium", "hard"),
        _at_least("rubber_thickness_mm", 4.0),
    ),
})

# ── Use case ──────────────────────────────────────────────────────
USE_CASE_RULES: Mapping[UseCase, Constraints] = MappingProxyType({
    UseCase.SPORT: (
        _one_of("downturn", "moderate", "aggressive"),
        _one_of("closure", "velcro", "lace"),
        _one_of("rubber_hardness", "soft", "medium"),
    ),
    UseCase.BOULDER: (
        _one_of("downturn", "moderate", "aggressive"),
        _one_of("rubber_hardness", "soft", "medium"),
        _one_of("midsole", "half", "none"),
        _one_of("closure", "slipper", "velcro"),
    ),
    UseCase.TRAD_MULTIPITCH: (
        _one_of("downturn", "flat", "moderate"),
        _one_of("midsole", "full", "3/4"),
        _one_of("closure", "lace"),
        _one_of("rubber_hardness", "medium", "hard"),
    ),
    UseCase.SPEED: (
        _one_of("closure", "velcro", "slipper"),
        _one_of("downturn", "flat", "moderate"),
    ),
})
# fmt: on


@dataclass(frozen=True)
class RuleBook:
    """The four guided rule tables, passed to scorers as one unit."""
    rock_type: Mapping[RockType, Constraints] = field(default_factory=lambda: ROCK_TYPE_RULES)
    wall_angle: Mapping[WallAngle, Constraints] = field(default_factory=lambda: WALL_ANGLE_RULES)
    foothold_type: Mapping[FootholdType, Constraints] = field(default_factory=lambda: FOOTHOLD_TYPE_RULES)
    use_case: Mapping[UseCase, Constraints] = field(default_factory=lambda: USE_CASE_RULES)


DEFAULT_RULE_BOOK = RuleBook()
