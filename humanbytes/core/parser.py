"""
Display string to byte count parsing.
"""

import math
import re
from typing import Any, Optional, Union

from humanbytes.core.cache import DEFAULT_MAX_ENTRIES, PARSE_STATIC, TwoTierCache
from humanbytes.core.units import UNIT_MULTIPLIERS
from humanbytes.utils.numeric import is_nan, is_number, parse_leading_int

# Plain "b" is deliberately absent; "5b" goes through the leading-integer fallback
PARSE_RE = re.compile(r"([+-]?\d+(?:\.\d+)?) *(kb|mb|gb|tb|pb)", re.IGNORECASE | re.ASCII)

_WHITESPACE_RE = re.compile(r"\s+")

Number = Union[int, float]


def normalize(text: str) -> str:
    """Lowercase ``text`` and remove all whitespace."""
    return _WHITESPACE_RE.sub("", text.lower())


class Parser:
    def __init__(self, max_entries: int = DEFAULT_MAX_ENTRIES):
        self.cache: TwoTierCache[str, int] = TwoTierCache(
            PARSE_STATIC, max_entries=max_entries, name="parse"
        )

    def parse(self, value: Any) -> Optional[Number]:
        """Parse a size string such as ``"1.5 MB"`` into a byte count.

        Numbers pass through unchanged (NaN gives None). Strings without a
        recognised unit fall back to their leading integer in bytes.
        """
        if is_number(value):
            return None if is_nan(value) else value

        if not isinstance(value, str):
            return None

        key = normalize(value)
        cached = self.cache.get(key)
        if cached is not None:
            return cached

        result = self._parse_key(key)
        if result is None:
            return None

        self.cache.put(key, result)
        return result

    def _parse_key(self, key: str) -> Optional[int]:
        # Works on the normalized key only, so a cached result always equals a fresh one
        match = PARSE_RE.fullmatch(key)
        if match:
            numeral: Number = float(match.group(1))
            multiplier = UNIT_MULTIPLIERS[match.group(2).lower()]
        else:
            leading = parse_leading_int(key)
            if leading is None:
                return None
            numeral, multiplier = leading, 1

        product = multiplier * numeral
        try:
            if not math.isfinite(product):
                return None
        except OverflowError:
            return None
        return math.floor(product)
