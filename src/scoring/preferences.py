"""
Buyer preference types for shoe scoring.

Three independently optional preference sets feed the ShoeMatcher:

- GuidedPreferences     -- at most one value per high-level category
- FootShapePreferences  -- multi-select anatomical fit dimensions
- FlatPreferences       -- multi-select / range filters over raw attributes

Each set is owned by the caller and may be mutated between ranking
calls; the matcher only reads them.  A category is *active* only when
the caller actually chose something for it.
"""

from dataclasses import dataclass, field, fields
from enum import Enum
from typing import Any, Dict, FrozenSet, Iterable, Optional, Tuple, Type, TypeVar

from config.constants import DEFAULT_RANKING_CONFIG
from core.utils import safe_get


# ── Guided enums ─────────────────────────────────────────────────

class RockType(str, Enum):
    LIMESTONE = "limestone"
    GRANITE = "granite"
    SANDSTONE = "sandstone"
    INDOOR = "indoor"


class WallAngle(str, Enum):
    SLAB = "slab"
    VERTICAL = "vertical"
    OVERHANG = "overhang"
    ROOF = "roof"


class FootholdType(str, Enum):
    SMEARS = "smears"
    EDGES = "edges"
    POCKETS = "pockets"
    CRACKS = "cracks"


class SkillLevel(str, Enum):
    """Declared in ascending order of climbing experience."""
    BEGINNER = "beginner"
    HOBBY = "hobby"
    INTERMEDIATE = "intermediate"
    ADVANCED = "advanced"
    ELITE = "elite"


class UseCase(str, Enum):
    SPORT = "sport"
    BOULDER = "boulder"
    TRAD_MULTIPITCH = "trad_multipitch"
    SPEED = "speed"


class Sensitivity(str, Enum):
    """Declared from most supportive to most sensitive."""
    VERY_SUPPORTIVE = "very_supportive"
    SUPPORTIVE = "supportive"
    MEDIUM = "medium"
    SENSITIVE = "sensitive"
    VERY_SENSITIVE = "very_sensitive"


# ── Foot-shape enums ─────────────────────────────────────────────

class ToeForm(str, Enum):
    EGYPTIAN = "egyptian"     # big toe longest
    ROMAN = "roman"           # first 2-3 toes level
    GREEK = "greek"           # second toe longest
    GERMANIC = "germanic"     # big toe longest, rest level
    CELTIC = "celtic"         # second toe longest, rest uneven


class FootWidth(str, Enum):
    NARROW = "narrow"
    MEDIUM = "medium"
    WIDE = "wide"


class InstepHeight(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class HeelVolume(str, Enum):
    SMALL = "small"
    MEDIUM = "medium"
    LARGE = "large"


E = TypeVar("E", bound=Enum)


def _parse_enum(enum_cls: Type[E], value: Any) -> Optional[E]:
    """Parse an optional enum value; unknown values raise ValueError."""
    if value is None or value == "":
        return None
    if isinstance(value, enum_cls):
        return value
    return enum_cls(str(value).strip().lower())


def _parse_enum_set(enum_cls: Type[E], values: Optional[Iterable[Any]]) -> FrozenSet[E]:
    if not values:
        return frozenset()
    if isinstance(values, (str, Enum)):
        values = [values]
    return frozenset(_parse_enum(enum_cls, v) for v in values if v)


def _string_set(values: Optional[Iterable[str]]) -> FrozenSet[str]:
    if not values:
        return frozenset()
    if isinstance(values, str):
        values = [values]
    return frozenset(str(v).strip() for v in values if v and str(v).strip())


def _pick(payload: Dict[str, Any], snake: str, camel: str, default: Any = None) -> Any:
    """Read a payload key in snake_case or camelCase form."""
    if snake in payload:
        return payload[snake]
    return payload.get(camel, default)


def _camel(name: str) -> str:
    head, *rest = name.split("_")
    return head + "".join(part.capitalize() for part in rest)


# ── Guided preferences ───────────────────────────────────────────

@dataclass
class GuidedPreferences:
    """Single-select quick picks.  ``None`` leaves a category inactive."""
    rock_type: Optional[RockType] = None
    wall_angle: Optional[WallAngle] = None
    foothold_type: Optional[FootholdType] = None
    skill_level: Optional[SkillLevel] = None
    use_case: Optional[UseCase] = None
    sensitivity: Optional[Sensitivity] = None

    def __post_init__(self) -> None:
        self.rock_type = _parse_enum(RockType, self.rock_type)
        self.wall_angle = _parse_enum(WallAngle, self.wall_angle)
        self.foothold_type = _parse_enum(FootholdType, self.foothold_type)
        self.skill_level = _parse_enum(SkillLevel, self.skill_level)
        self.use_case = _parse_enum(UseCase, self.use_case)
        self.sensitivity = _parse_enum(Sensitivity, self.sensitivity)

    def active_count(self) -> int:
        return sum(1 for f in fields(self) if getattr(self, f.name) is not None)

    def is_active(self) -> bool:
        return self.active_count() > 0

    @classmethod
    def from_dict(cls, payload: Optional[Dict[str, Any]]) -> "GuidedPreferences":
        """Build from a snake_case or camelCase payload (e.g. ``rockType``)."""
        payload = payload or {}
        return cls(**{f.name: _pick(payload, f.name, _camel(f.name)) for f in fields(cls)})


# ── Foot-shape preferences ───────────────────────────────────────

@dataclass
class FootShapePreferences:
    """
    Accepted values per anatomical dimension.

    Several values may be accepted at once; the scorer rewards the best
    of them rather than their sum.
    """
    toe_form: FrozenSet[ToeForm] = field(default_factory=frozenset)
    foot_width: FrozenSet[FootWidth] = field(default_factory=frozenset)
    instep_height: FrozenSet[InstepHeight] = field(default_factory=frozenset)
    heel_volume: FrozenSet[HeelVolume] = field(default_factory=frozenset)

    def __post_init__(self) -> None:
        self.toe_form = _parse_enum_set(ToeForm, self.toe_form)
        self.foot_width = _parse_enum_set(FootWidth, self.foot_width)
        self.instep_height = _parse_enum_set(InstepHeight, self.instep_height)
        self.heel_volume = _parse_enum_set(HeelVolume, self.heel_volume)

    def active_count(self) -> int:
        return sum(1 for f in fields(self) if getattr(self, f.name))

    def is_active(self) -> bool:
        return self.active_count() > 0

    @classmethod
    def from_dict(cls, payload: Optional[Dict[str, Any]]) -> "FootShapePreferences":
        payload = payload or {}
        return cls(**{f.name: _pick(payload, f.name, _camel(f.name)) for f in fields(cls)})


# ── Flat / advanced preferences ──────────────────────────────────

# Multi-select fields compared against a candidate attribute of the same
# meaning.  Order here is the order their MatchDetails are emitted.
FLAT_MULTI_SELECT_FIELDS: Tuple[str, ...] = (
    "downturn", "closure", "rubber_hardness", "midsole", "volume",
    "width", "heel", "toe_patch", "asymmetry", "brand",
)

RUBBER_THICKNESS_BUCKETS: Tuple[str, ...] = ("thin", "medium", "thick")


@dataclass
class FlatPreferences:
    """
    Advanced multi-select filters, a price interval and a vegan toggle.

    ``price_range`` defaults to the catalog bounds, which counts as "not
    narrowed".  ``vegan`` is tri-state: ``None`` leaves it inactive.
    """
    downturn: FrozenSet[str] = field(default_factory=frozenset)
    closure: FrozenSet[str] = field(default_factory=frozenset)
    rubber_hardness: FrozenSet[str] = field(default_factory=frozenset)
    rubber_thickness: FrozenSet[str] = field(default_factory=frozenset)
    rubber_type: FrozenSet[str] = field(default_factory=frozenset)
    midsole: FrozenSet[str] = field(default_factory=frozenset)
    volume: FrozenSet[str] = field(default_factory=frozenset)
    width: FrozenSet[str] = field(default_factory=frozenset)
    heel: FrozenSet[str] = field(default_factory=frozenset)
    toe_patch: FrozenSet[str] = field(default_factory=frozenset)
    asymmetry: FrozenSet[str] = field(default_factory=frozenset)
    brand: FrozenSet[str] = field(default_factory=frozenset)
    price_range: Tuple[float, float] = DEFAULT_RANKING_CONFIG.DEFAULT_PRICE_RANGE
    vegan: Optional[bool] = None

    def __post_init__(self) -> None:
        for name in FLAT_MULTI_SELECT_FIELDS + ("rubber_type",):
            setattr(self, name, _string_set(getattr(self, name)))

        buckets = _string_set(self.rubber_thickness)
        unknown = {b for b in buckets if b.lower() not in RUBBER_THICKNESS_BUCKETS}
        if unknown:
            raise ValueError(f"Unknown rubber thickness bucket(s): {sorted(unknown)}")
        self.rubber_thickness = frozenset(b.lower() for b in buckets)

        low, high = self.price_range
        if low > high:
            raise ValueError(f"price_range lower bound {low} exceeds upper bound {high}")
        self.price_range = (float(low), float(high))

    def price_is_narrowed(
        self,
        bounds: Tuple[float, float] = DEFAULT_RANKING_CONFIG.DEFAULT_PRICE_RANGE,
    ) -> bool:
        """True when the caller moved either end of the interval inward."""
        low, high = self.price_range
        return low > bounds[0] or high < bounds[1]

    def active_count(
        self,
        bounds: Tuple[float, float] = DEFAULT_RANKING_CONFIG.DEFAULT_PRICE_RANGE,
    ) -> int:
        count = sum(
            1 for name in FLAT_MULTI_SELECT_FIELDS + ("rubber_thickness", "rubber_type")
            if getattr(self, name)
        )
        if self.price_is_narrowed(bounds):
            count += 1
        if self.vegan is not None:
            count += 1
        return count

    def is_active(
        self,
        bounds: Tuple[float, float] = DEFAULT_RANKING_CONFIG.DEFAULT_PRICE_RANGE,
    ) -> bool:
        return self.active_count(bounds) > 0

    @classmethod
    def from_dict(
        cls,
        payload: Optional[Dict[str, Any]],
        bounds: Tuple[float, float] = DEFAULT_RANKING_CONFIG.DEFAULT_PRICE_RANGE,
    ) -> "FlatPreferences":
        """
        Build from a snake_case or camelCase payload.

        ``priceRange`` may be a ``[low, high]`` pair or a
        ``{"min": .., "max": ..}`` mapping; missing ends take ``bounds``.
        """
        payload = payload or {}
        kwargs: Dict[str, Any] = {}
        for name in FLAT_MULTI_SELECT_FIELDS + ("rubber_thickness", "rubber_type"):
            kwargs[name] = _pick(payload, name, _camel(name))

        price = _pick(payload, "price_range", "priceRange")
        if isinstance(price, dict):
            kwargs["price_range"] = (
                safe_get(price, "min", default=bounds[0]),
                safe_get(price, "max", default=bounds[1]),
            )
        elif price:
            kwargs["price_range"] = (float(price[0]), float(price[1]))
        else:
            kwargs["price_range"] = bounds

        kwargs["vegan"] = payload.get("vegan")
        return cls(**kwargs)


def has_active_preferences(
    guided: Optional[GuidedPreferences] = None,
    flat: Optional[FlatPreferences] = None,
    shape: Optional[FootShapePreferences] = None,
    price_bounds: Tuple[float, float] = DEFAULT_RANKING_CONFIG.DEFAULT_PRICE_RANGE,
) -> bool:
    """True when any category in any preference set would be scored."""
    return bool(
        (guided is not None and guided.is_active())
        or (flat is not None and flat.is_active(price_bounds))
        or (shape is not None and shape.is_active())
    )
