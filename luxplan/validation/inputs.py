from __future__ import annotations

import math
import numbers
from dataclasses import dataclass
from typing import List, Tuple

from luxplan.models.request import SOLVE_FOR_COUNT, SOLVE_FOR_LUX, CalculationRequest


@dataclass(frozen=True)
class InputIssue:
    field: str
    message: str


class InvalidInputError(ValueError):
    def __init__(self, issues: List[InputIssue]):
        self.issues = list(issues)
        detail = "; ".join(f"{i.field}: {i.message}" for i in self.issues)
        super().__init__(f"Invalid calculation input: {detail}")


def _is_number(value) -> bool:
    return isinstance(value, numbers.Real) and not isinstance(value, bool) and math.isfinite(value)


def _check_positive(issues: List[InputIssue], field: str, value) -> None:
    if not _is_number(value):
        issues.append(InputIssue(field, "must be a finite number"))
    elif value <= 0:
        issues.append(InputIssue(field, "must be greater than zero"))


def _check_fraction(issues: List[InputIssue], field: str, value) -> None:
    if not _is_number(value):
        issues.append(InputIssue(field, "must be a finite number"))
    elif not 0.0 <= value <= 1.0:
        issues.append(InputIssue(field, "must be between 0 and 1"))


def validate_request(request: CalculationRequest) -> List[InputIssue]:
    """Collect every precondition the calculation core assumes but does not check."""
    issues: List[InputIssue] = []
    geom = request.geometry
    dims: Tuple[Tuple[str, float], ...] = (
        ("length", geom.length),
        ("width", geom.width),
        ("height", geom.height),
        ("mounting_height", geom.mounting_height),
        ("working_plane_height", geom.working_plane_height),
    )
    for field, value in dims:
        _check_positive(issues, field, value)

    if _is_number(geom.mounting_height) and _is_number(geom.height) and geom.mounting_height > geom.height:
        issues.append(InputIssue("mounting_height", "cannot exceed room height"))
    if (
        _is_number(geom.working_plane_height)
        and _is_number(geom.mounting_height)
        and geom.working_plane_height >= geom.mounting_height
    ):
        issues.append(InputIssue("working_plane_height", "must be below the mounting height"))

    refl = request.reflectance
    _check_fraction(issues, "ceiling_reflectance", refl.ceiling)
    _check_fraction(issues, "wall_reflectance", refl.wall)
    _check_fraction(issues, "floor_reflectance", refl.floor)

    _check_positive(issues, "lumens_per_fixture", request.luminaire.lumens_per_fixture)
    _check_fraction(issues, "maintenance_factor", request.luminaire.maintenance_factor)

    if request.mode == SOLVE_FOR_COUNT:
        if request.target_lux is None:
            issues.append(InputIssue("target_lux", "is required when solving for luminaire count"))
        else:
            _check_positive(issues, "target_lux", request.target_lux)
    elif request.mode == SOLVE_FOR_LUX:
        n = request.luminaire_count
        if n is None:
            issues.append(InputIssue("luminaire_count", "is required when solving for illuminance"))
        elif not _is_number(n) or n < 1 or not float(n).is_integer():
            issues.append(InputIssue("luminaire_count", "must be a whole number of at least 1"))
    else:
        issues.append(InputIssue("mode", f"unknown calculation mode {request.mode!r}"))

    return issues


def require_valid(request: CalculationRequest) -> CalculationRequest:
    issues = validate_request(request)
    if issues:
        raise InvalidInputError(issues)
    return request
