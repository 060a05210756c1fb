"""
Tests for the unit table.
"""

import pytest

from humanbytes.core.units import (
    GB,
    KB,
    MB,
    PB,
    TB,
    UNIT_MULTIPLIERS,
    UNIT_THRESHOLDS,
    get_multiplier,
    select_unit,
)


def test_multipliers_are_binary_powers() -> None:
    assert UNIT_MULTIPLIERS["b"] == 1
    assert UNIT_MULTIPLIERS["kb"] == 2**10
    assert UNIT_MULTIPLIERS["mb"] == 2**20
    assert UNIT_MULTIPLIERS["gb"] == 2**30
    assert UNIT_MULTIPLIERS["tb"] == 2**40
    assert UNIT_MULTIPLIERS["pb"] == 2**50


def test_multiplier_table_is_read_only() -> None:
    with pytest.raises(TypeError):
        UNIT_MULTIPLIERS["eb"] = 2**60  # type: ignore[index]


def test_thresholds_descend_and_end_with_bytes() -> None:
    thresholds = [threshold for threshold, _ in UNIT_THRESHOLDS]
    assert thresholds == sorted(thresholds, reverse=True)
    assert [t for t in thresholds if t == 0] == [0]
    assert UNIT_THRESHOLDS[-1] == (0, "B")


@pytest.mark.parametrize("symbol", ["kb", "KB", "Kb", "kB"])
def test_get_multiplier_is_case_insensitive(symbol: str) -> None:
    assert get_multiplier(symbol) == KB


def test_get_multiplier_unknown() -> None:
    assert get_multiplier("eb") is None
    assert get_multiplier("") is None
    assert get_multiplier(None) is None


@pytest.mark.parametrize(
    "magnitude, unit",
    [
        (0, "B"),
        (0.5, "B"),
        (1023, "B"),
        (KB, "KB"),
        (MB - 1, "KB"),
        (MB, "MB"),
        (GB, "GB"),
        (TB, "TB"),
        (PB, "PB"),
        (PB * 4096, "PB"),
    ],
)
def test_select_unit(magnitude: float, unit: str) -> None:
    assert select_unit(magnitude) == unit
