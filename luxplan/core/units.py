from __future__ import annotations

from dataclasses import dataclass


FEET_TO_METERS = 0.3048
MM_TO_METERS = 0.001
METERS_TO_FEET = 3.28084

_UNIT_ALIASES = {
    "m": "meters",
    "meter": "meters",
    "meters": "meters",
    "metre": "meters",
    "metres": "meters",
    "ft": "feet",
    "foot": "feet",
    "feet": "feet",
    "mm": "millimeters",
    "millimeter": "millimeters",
    "millimeters": "millimeters",
    "millimetre": "millimeters",
    "millimetres": "millimeters",
}

_SCALE_TO_M = {
    "meters": 1.0,
    "feet": FEET_TO_METERS,
    "millimeters": MM_TO_METERS,
}

_SYMBOLS = {
    "meters": "m",
    "feet": "ft",
    "millimeters": "mm",
}


def normalize_unit(unit: str) -> str:
    u = str(unit).strip().lower()
    try:
        return _UNIT_ALIASES[u]
    except KeyError:
        raise ValueError(f"Unsupported length unit: {unit!r}") from None


def unit_scale_to_m(unit: str) -> float:
    return _SCALE_TO_M[normalize_unit(unit)]


def to_meters(value: float, unit: str) -> float:
    """Convert a length to meters. Non-finite values pass through unchanged."""
    return float(value) * unit_scale_to_m(unit)


def from_meters(value_m: float, unit: str) -> float:
    u = normalize_unit(unit)
    if u == "feet":
        return float(value_m) * METERS_TO_FEET
    return float(value_m) / _SCALE_TO_M[u]


def display_symbol(unit: str) -> str:
    return _SYMBOLS[normalize_unit(unit)]


@dataclass(frozen=True)
class ParsedLength:
    value_m: float
    original_value: float
    original_unit: str


def parse_length(value: float, unit: str) -> ParsedLength:
    return ParsedLength(
        value_m=to_meters(value, unit),
        original_value=float(value),
        original_unit=normalize_unit(unit),
    )
