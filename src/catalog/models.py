"""
Pydantic models for the shoe catalog and ranking output.

Models cover:
- Shoe records as delivered by the catalog store
- Per-category match details (the "why this score?" trail)
- Scored shoes returned by the ranking engine
"""

from typing import List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field


# =============================================================================
# Attribute Vocabularies
# =============================================================================

Downturn = Literal["flat", "moderate", "aggressive"]
Closure = Literal["lace", "velcro", "slipper"]
Volume = Literal["low", "medium", "high"]
Width = Literal["narrow", "medium", "wide"]
ToePatch = Literal["small", "medium", "large"]
Asymmetry = Literal["none", "slight", "strong"]
RubberHardness = Literal["soft", "medium", "hard"]
Midsole = Literal["full", "3/4", "half", "none"]
SkillLevelValue = Literal["beginner", "hobby", "intermediate", "advanced", "elite"]
InstepValue = Literal["low", "medium", "high"]


# =============================================================================
# Shoe (Candidate)
# =============================================================================

class CustomerVoices(BaseModel):
    """Aggregated customer review snippets for one shoe."""
    model_config = ConfigDict(frozen=True)

    pros: List[str] = Field(default_factory=list)
    cons: List[str] = Field(default_factory=list)
    used_for: List[str] = Field(default_factory=list)
    fit: str = ""


class Shoe(BaseModel):
    """
    One catalog climbing shoe.

    Immutable: the ranking engine never modifies a Shoe, it derives a
    ScoredShoe from it.  Unknown columns from the store are ignored.
    """
    model_config = ConfigDict(frozen=True, extra="ignore")

    # Identity
    id: str
    brand: str
    model: str
    slug: str
    image_url: Optional[str] = None

    # Categorical attributes
    downturn: Downturn
    closure: Closure
    volume: Volume
    width: Width
    heel: Width
    toe_patch: ToePatch
    asymmetry: Asymmetry
    rubber_type: str = ""
    rubber_hardness: RubberHardness
    rubber_thickness_mm: float = Field(ge=0)
    midsole: Midsole
    skill_level: SkillLevelValue

    # Optional fit sub-attributes (foot-shape scoring falls back when absent)
    toe_box_width: Optional[Width] = None
    instep_height: Optional[InstepValue] = None
    heel_fit: Optional[Width] = None
    gender: Optional[str] = None

    # Terrain / usage lists
    best_rock_types: List[str] = Field(default_factory=list)
    best_wall_angles: List[str] = Field(default_factory=list)
    best_foothold_types: List[str] = Field(default_factory=list)
    use_cases: List[str] = Field(default_factory=list)

    # Temperature and price
    optimal_temp_min_c: Optional[float] = None
    optimal_temp_max_c: Optional[float] = None
    price_eur: float = Field(ge=0)
    price_usd: Optional[float] = Field(default=None, ge=0)

    description: str = ""
    customer_voices: Optional[CustomerVoices] = None
    vegan: bool = False


# =============================================================================
# Ranking Output
# =============================================================================

class MatchDetail(BaseModel):
    """
    Outcome of one active scoring category for one shoe.

    ``matched`` means the category fraction reached 0.75; ``partial`` means
    it landed in [0.5, 0.75).  The two are never both set.
    """
    model_config = ConfigDict(frozen=True)

    category: str
    points: int = Field(ge=0)
    max_points: int = Field(gt=0)
    matched: bool = False
    partial: bool = False


class ScoredShoe(Shoe):
    """
    A Shoe plus its match percentage and per-category breakdown.

    ``match_details`` is in evaluation order: guided categories, then
    foot-shape dimensions, then flat attributes.
    """
    match_score: int = Field(ge=0, le=100)
    match_details: List[MatchDetail] = Field(default_factory=list)

    @classmethod
    def from_shoe(
        cls,
        shoe: Shoe,
        match_score: int,
        match_details: List[MatchDetail],
    ) -> "ScoredShoe":
        return cls(
            **shoe.model_dump(),
            match_score=match_score,
            match_details=match_details,
        )
