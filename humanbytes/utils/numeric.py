"""Number helpers shared by the formatter and the parser."""

import math
import numbers
import re
from decimal import ROUND_HALF_UP, Context, Decimal
from typing import Any, Optional

# Quotients at or above this render in shortest float notation
EXPONENT_THRESHOLD = 1e21

# Enough precision for 21 integer digits plus 100 decimals
_FIXED_CONTEXT = Context(prec=128)

_LEADING_INT_RE = re.compile(r"[+-]?[0-9]+")


def is_number(value: Any) -> bool:
    """True for real numbers (ints, floats, numpy scalars) but not for bools."""
    return isinstance(value, numbers.Real) and not isinstance(value, bool)


def is_nan(value: Any) -> bool:
    # NaN is the only value unequal to itself
    return value != value


def as_finite_float(value: Any) -> Optional[float]:
    """Convert a real number to a finite float, or None if that is impossible."""
    if not is_number(value):
        return None
    try:
        result = float(value)
    except (OverflowError, ValueError):
        return None
    return result if math.isfinite(result) else None


def to_fixed(value: float, places: int) -> str:
    """Render ``value`` with exactly ``places`` decimals.

    The exact binary value is rounded, ties away from zero. The sign is only
    emitted for strictly negative values, so ``-0.0`` renders as ``0``.
    """
    sign = "-" if value < 0 else ""
    magnitude = abs(value)
    if magnitude >= EXPONENT_THRESHOLD:
        return sign + repr(magnitude)

    quantum = Decimal(1).scaleb(-places)
    rounded = Decimal(magnitude).quantize(quantum, rounding=ROUND_HALF_UP, context=_FIXED_CONTEXT)
    return sign + f"{rounded:f}"


def parse_leading_int(text: str) -> Optional[int]:
    """Parse the leading base-10 integer of ``text``.

    Leading whitespace and a sign are accepted, parsing stops at the first
    non-digit. Returns None when no digits lead the string.
    """
    match = _LEADING_INT_RE.match(text.lstrip())
    if not match:
        return None
    return int(match.group(0))
