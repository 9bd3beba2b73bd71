"""
Configuration module for the shoe matcher.

This module provides centralized configuration management using pydantic-settings.
Environment-dependent values are accessed through get_settings(); fixed algorithm
constants live in config.constants.

Usage:
    from config import get_settings, DEFAULT_RANKING_CONFIG

    settings = get_settings()
    top_n = settings.ranking_top_n
"""

from config.constants import (
    DEFAULT_CATEGORY_POINTS,
    DEFAULT_RANKING_CONFIG,
    CategoryPoints,
    RankingConfig,
)
from config.settings import Settings, get_settings, get_settings_for_testing

__all__ = [
    "Settings",
    "get_settings",
    "get_settings_for_testing",
    "RankingConfig",
    "DEFAULT_RANKING_CONFIG",
    "CategoryPoints",
    "DEFAULT_CATEGORY_POINTS",
]
