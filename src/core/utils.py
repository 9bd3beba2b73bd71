"""
Core Utility Functions.

Common utilities used across the application.
"""

import math
from typing import Any, Optional


# =============================================================================
# Numeric Helpers
# =============================================================================

def round_half_up(value: float) -> int:
    """
    Round to the nearest integer, with halves rounded up.

    Python's built-in round() uses banker's rounding (``round(12.5) == 12``),
    which would shift percentages and half-credit points by one.

    Examples:
        >>> round_half_up(7.5)
        8
        >>> round_half_up(12.5)
        13
        >>> round_half_up(6.49)
        6
    """
    return int(math.floor(value + 0.5))


def clamp(value: float, low: float, high: float) -> float:
    """Clamp ``value`` into the closed interval ``[low, high]``."""
    return max(low, min(high, value))


# =============================================================================
# String Helpers
# =============================================================================

def contains_token(text: Optional[str], token: str) -> bool:
    """Case-insensitive substring test that tolerates missing text."""
    if not text:
        return False
    return token.lower() in text.lower()


def safe_get(obj: Any, *keys: str, default: Any = None) -> Any:
    """
    Safely get nested dictionary values.

    Args:
        obj: Dictionary or object
        *keys: Keys to traverse
        default: Default value if key not found

    Returns:
        Value at the nested key path, or default

    Example:
        >>> safe_get({'a': {'b': 1}}, 'a', 'b')
        1
        >>> safe_get({'a': {}}, 'a', 'b', default=0)
        0
    """
    current = obj
    for key in keys:
        if isinstance(current, dict):
            current = current.get(key)
        elif hasattr(current, key):
            current = getattr(current, key)
        else:
            return default
        if current is None:
            return default
    return current
