"""
Core module for cross-cutting concerns.

This module provides:
- Structured logging configuration
- Numeric and string helpers shared by the scorers
"""

from core.logging import configure_from_settings, configure_logging, get_logger
from core.utils import clamp, contains_token, round_half_up, safe_get

__all__ = [
    "configure_logging",
    "configure_from_settings",
    "get_logger",
    "clamp",
    "contains_token",
    "round_half_up",
    "safe_get",
]
