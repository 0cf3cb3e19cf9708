from __future__ import annotations

import math

import pytest

from luxplan.core.units import display_symbol, from_meters, parse_length, to_meters


def test_to_meters_fixed_factors() -> None:
    assert to_meters(3.0, "meters") == 3.0
    assert abs(to_meters(10.0, "feet") - 3.048) < 1e-12
    assert abs(to_meters(2500.0, "millimeters") - 2.5) < 1e-12


def test_to_meters_accepts_short_aliases() -> None:
    assert to_meters(1.0, "ft") == to_meters(1.0, "feet")
    assert to_meters(1.0, "MM") == to_meters(1.0, "millimeters")
    assert to_meters(1.0, "m") == 1.0


def test_to_meters_propagates_non_finite() -> None:
    assert math.isnan(to_meters(float("nan"), "ft"))
    assert to_meters(float("inf"), "mm") == float("inf")


def test_unknown_unit_rejected() -> None:
    with pytest.raises(ValueError):
        to_meters(1.0, "furlong")


def test_from_meters_and_symbols() -> None:
    assert abs(from_meters(1.0, "ft") - 3.28084) < 1e-12
    assert abs(from_meters(2.5, "mm") - 2500.0) < 1e-9
    assert display_symbol("feet") == "ft"
    assert display_symbol("metres") == "m"


def test_parse_length_keeps_original_unit() -> None:
    p = parse_length(10.0, "ft")
    assert abs(p.value_m - 3.048) < 1e-12
    assert p.original_value == 10.0
    assert p.original_unit == "feet"
