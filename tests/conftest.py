"""
Pytest configuration and shared fixtures for the shoe matcher tests.
"""
import os
import sys

import pytest

# Add src to path for imports
sys.path.insert(0, os.path.join(os.path.dirname(os.path.dirname(__file__)), "src"))

from catalog.models import Shoe  # noqa: E402


# ============================================================================
# Fixtures: Test Data Factories
# ============================================================================

@pytest.fixture
def shoe_record() -> dict:
    """A neutral all-round shoe as a raw catalog row."""
    return {
        "id": "shoe-001",
        "brand": "TestBrand",
        "model": "Allround",
        "slug": "testbrand-allround",
        "image_url": "https://example.com/images/shoe-001.jpg",
        "downturn": "moderate",
        "closure": "velcro",
        "volume": "medium",
        "width": "medium",
        "heel": "medium",
        "toe_patch": "medium",
        "asymmetry": "slight",
        "rubber_type": "Vibram XS Grip 2",
        "rubber_hardness": "medium",
        "rubber_thickness_mm": 4.0,
        "midsole": "3/4",
        "skill_level": "intermediate",
        "best_rock_types": ["limestone", "granite"],
        "best_wall_angles": ["vertical"],
        "best_foothold_types": ["edges"],
        "use_cases": ["sport"],
        "price_eur": 150.0,
        "price_usd": 165.0,
        "description": "A test shoe.",
        "vegan": False,
    }


@pytest.fixture
def make_shoe(shoe_record: dict):
    """Factory: ``make_shoe(model="Solution LV", volume="low")``."""
    def _make(**overrides) -> Shoe:
        record = dict(shoe_record)
        record.update(overrides)
        return Shoe(**record)
    return _make


@pytest.fixture
def catalog(make_shoe) -> list:
    """Twelve shoes spanning the main attribute axes, in catalog order."""
    variants = [
        dict(downturn="flat", closure="lace", rubber_hardness="hard", midsole="full", asymmetry="none"),
        dict(downturn="aggressive", closure="velcro", rubber_hardness="soft", midsole="none", toe_patch="large"),
        dict(downturn="moderate", closure="slipper", rubber_hardness="soft", midsole="half"),
        dict(downturn="aggressive", closure="slipper", rubber_hardness="soft", midsole="none", asymmetry="strong"),
        dict(downturn="flat", closure="velcro", rubber_hardness="medium", midsole="full"),
        dict(downturn="moderate", closure="lace", rubber_hardness="medium", midsole="3/4"),
        dict(downturn="aggressive", closure="lace", rubber_hardness="medium", midsole="half"),
        dict(downturn="flat", closure="slipper", rubber_hardness="soft", midsole="none"),
        dict(downturn="moderate", closure="velcro", rubber_hardness="hard", midsole="full"),
        dict(downturn="aggressive", closure="velcro", rubber_hardness="medium", midsole="3/4"),
        dict(downturn="moderate", closure="velcro", rubber_hardness="soft", midsole="half"),
        dict(downturn="flat", closure="lace", rubber_hardness="medium", midsole="3/4"),
    ]
    return [
        make_shoe(id=f"shoe-{i:03d}", model=f"Model {i}", slug=f"model-{i}", brand=f"Brand {i % 3}", **variant)
        for i, variant in enumerate(variants)
    ]
