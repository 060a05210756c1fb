"""Binary unit table shared by the formatter and the parser."""

from types import MappingProxyType
from typing import Any, Mapping, Optional, Tuple

# Constants for byte conversions
KB = 1 << 10
MB = 1 << 20
GB = 1 << 30
TB = 1024**4
PB = 1024**5

UNIT_MULTIPLIERS: Mapping[str, int] = MappingProxyType(
    {
        "b": 1,
        "kb": KB,
        "mb": MB,
        "gb": GB,
        "tb": TB,
        "pb": PB,
    }
)

# Descending (threshold, unit); the zero threshold must stay last
UNIT_THRESHOLDS: Tuple[Tuple[int, str], ...] = (
    (PB, "PB"),
    (TB, "TB"),
    (GB, "GB"),
    (MB, "MB"),
    (KB, "KB"),
    (0, "B"),
)


def get_multiplier(unit: Any) -> Optional[int]:
    """Return the byte multiplier for a unit symbol, case-insensitively."""
    if not isinstance(unit, str):
        return None
    return UNIT_MULTIPLIERS.get(unit.lower())


def select_unit(magnitude: float) -> str:
    """Pick the largest unit whose threshold does not exceed ``magnitude``."""
    for threshold, unit in UNIT_THRESHOLDS:
        if magnitude >= threshold:
            return unit
    return "B"  # Fallback (unreachable for non-negative magnitudes)
