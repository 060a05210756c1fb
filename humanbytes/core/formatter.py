"""
Byte count to display string formatting.
"""

import re
from dataclasses import dataclass, fields
from typing import Any, Dict, Mapping, Optional, Union

from humanbytes.core.cache import DEFAULT_MAX_ENTRIES, FORMAT_STATIC, TwoTierCache
from humanbytes.core.units import get_multiplier, select_unit
from humanbytes.utils.numeric import as_finite_float, to_fixed

THOUSANDS_RE = re.compile(r"\B(?=(\d{3})+(?!\d))")

MAX_DECIMAL_PLACES = 100

# camelCase names accepted by FormatOptions.from_dict
_OPTION_ALIASES = {
    "decimalPlaces": "decimal_places",
    "fixedDecimals": "fixed_decimals",
    "thousandsSeparator": "thousands_separator",
    "unitSeparator": "unit_separator",
}


@dataclass(frozen=True)
class FormatOptions:
    """Immutable formatting options. Defaults match the no-options call."""

    decimal_places: int = 2
    fixed_decimals: bool = False
    thousands_separator: str = ""
    unit_separator: str = ""
    unit: str = ""

    def __post_init__(self) -> None:
        if isinstance(self.decimal_places, bool) or not isinstance(self.decimal_places, int):
            raise TypeError(f"decimal_places must be an int, got {self.decimal_places!r}")
        if not 0 <= self.decimal_places <= MAX_DECIMAL_PLACES:
            raise ValueError(
                f"decimal_places must be between 0 and {MAX_DECIMAL_PLACES}, "
                f"got {self.decimal_places}"
            )
        for name in ("thousands_separator", "unit_separator", "unit"):
            if not isinstance(getattr(self, name), str):
                raise TypeError(f"{name} must be a string, got {getattr(self, name)!r}")

    @classmethod
    def from_dict(cls, options: Mapping[str, Any]) -> "FormatOptions":
        """Build options from a mapping; None values fall back to defaults."""
        known = {f.name for f in fields(cls)}
        kwargs: Dict[str, Any] = {}
        for key, value in options.items():
            name = _OPTION_ALIASES.get(key, key)
            if name not in known:
                raise ValueError(f"Unknown format option: {key}")
            if value is not None:
                kwargs[name] = value
        return cls(**kwargs)

    @property
    def is_default(self) -> bool:
        return self == FormatOptions()


OptionsLike = Union[FormatOptions, Mapping[str, Any], None]


def _coerce_options(options: OptionsLike) -> Optional[FormatOptions]:
    if options is None or isinstance(options, FormatOptions):
        return options
    if isinstance(options, Mapping):
        return FormatOptions.from_dict(options)
    raise TypeError(f"options must be FormatOptions or a mapping, got {type(options).__name__}")


def trim_decimals(numeral: str) -> str:
    """Drop trailing fractional zeros, and the point if nothing is left after it."""
    if "." not in numeral or "e" in numeral:
        return numeral
    return numeral.rstrip("0").rstrip(".")


def group_thousands(numeral: str, separator: str) -> str:
    """Insert ``separator`` every three digits of the integer part only."""
    integer, dot, fraction = numeral.partition(".")
    return THOUSANDS_RE.sub(lambda _: separator, integer) + dot + fraction


class Formatter:
    def __init__(self, max_entries: int = DEFAULT_MAX_ENTRIES):
        self.cache: TwoTierCache[float, str] = TwoTierCache(
            FORMAT_STATIC, max_entries=max_entries, name="format"
        )

    def format(self, value: Any, options: OptionsLike = None) -> Optional[str]:
        """Format a byte count as a string such as ``"1.5MB"``.

        Returns None when ``value`` is not a finite real number. Only calls
        without options are served from and stored in the cache.
        """
        number = as_finite_float(value)
        if number is None:
            return None

        opts = _coerce_options(options)
        if opts is None:
            cached = self.cache.get(value)
            if cached is not None:
                return cached
            result = self._render(number, FormatOptions())
            self.cache.put(value, result)
            return result

        return self._render(number, opts)

    def _render(self, number: float, opts: FormatOptions) -> str:
        unit = opts.unit
        multiplier = get_multiplier(unit) if unit else None
        if multiplier is None:
            unit = select_unit(abs(number))
            multiplier = get_multiplier(unit)

        numeral = to_fixed(number / multiplier, opts.decimal_places)

        if not opts.fixed_decimals:
            numeral = trim_decimals(numeral)

        if opts.thousands_separator:
            numeral = group_thousands(numeral, opts.thousands_separator)

        return numeral + opts.unit_separator + unit
