"""
Lumen-method illuminance calculations.

The average maintained illuminance on the working plane is

    E = N × Φ × UF × MF × k / A

Where:
    N  = number of luminaires
    Φ  = luminous flux per luminaire (lm)
    UF = utilization factor (from room index and reflectances)
    MF = maintenance factor
    k  = fixed calibration multiplier (DIALUX_MULTIPLIER)
    A  = working plane area (m²)

Solving for N and rounding up gives the luminaire count needed to reach a
target illuminance.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Iterator, Optional, Tuple

from luxplan.calculation.utilization import DEFAULT_ESTIMATOR, UtilizationFactorEstimator
from luxplan.core.constants import (
    DEFAULT_MAINTENANCE_FACTOR,
    DIALUX_MULTIPLIER,
    ILLUMINANCE_TABLE_ROWS,
    MIN_MOUNTING_HEIGHT_ABOVE_WORK_PLANE,
)
from luxplan.design.layout import plan_layout
from luxplan.models.request import SOLVE_FOR_COUNT, SOLVE_FOR_LUX, CalculationRequest, CalculationResult


logger = logging.getLogger(__name__)


def room_index(length: float, width: float, mounting_height: float, working_plane_height: float) -> float:
    """
    Room index K = L × W / (Hm × (L + W)).

    Hm is the luminaire height above the working plane, floored at 0.1 m so
    nearly coincident planes do not blow the ratio up.
    """
    hm = max(MIN_MOUNTING_HEIGHT_ABOVE_WORK_PLANE, mounting_height - working_plane_height)
    return (length * width) / (hm * (length + width))


def required_luminaires(
    target_lux: float,
    area: float,
    lumens_per_fixture: float,
    uf: float,
    mf: float = DEFAULT_MAINTENANCE_FACTOR,
) -> Optional[int]:
    """
    Smallest luminaire count whose average illuminance reaches target_lux.

    Returns None when lumens, UF or MF is non-positive: the count is not
    computable and must not be formatted as a number.
    """
    if lumens_per_fixture <= 0 or uf <= 0 or mf <= 0:
        return None
    return int(math.ceil((target_lux * area) / (lumens_per_fixture * uf * mf * DIALUX_MULTIPLIER)))


def achieved_lux(count: int, lumens_per_fixture: float, uf: float, mf: float, area: float) -> float:
    return (count * lumens_per_fixture * uf * mf * DIALUX_MULTIPLIER) / area


@dataclass(frozen=True)
class IlluminanceTable:
    """Achieved illuminance for 1..rows luminaires. Iterating twice yields the same pairs."""
    lumens_per_fixture: float
    uf: float
    mf: float
    area: float
    rows: int = ILLUMINANCE_TABLE_ROWS

    def __iter__(self) -> Iterator[Tuple[int, float]]:
        for n in range(1, self.rows + 1):
            yield n, achieved_lux(n, self.lumens_per_fixture, self.uf, self.mf, self.area)

    def __len__(self) -> int:
        return self.rows


def illuminance_table(lumens_per_fixture: float, uf: float, mf: float, area: float) -> IlluminanceTable:
    return IlluminanceTable(lumens_per_fixture=lumens_per_fixture, uf=uf, mf=mf, area=area)


class IlluminanceEngine:
    def __init__(self, estimator: Optional[UtilizationFactorEstimator] = None):
        self.estimator = estimator or DEFAULT_ESTIMATOR

    def calculate(self, request: CalculationRequest) -> CalculationResult:
        geom = request.geometry
        refl = request.reflectance
        lumens = request.luminaire.lumens_per_fixture
        mf = request.luminaire.maintenance_factor

        area = geom.area
        k = room_index(geom.length, geom.width, geom.mounting_height, geom.working_plane_height)
        uf_lookup = self.estimator.lookup(k, refl.ceiling, refl.wall, refl.floor)
        uf = uf_lookup.value
        table = tuple(illuminance_table(lumens, uf, mf, area))

        if request.mode == SOLVE_FOR_COUNT:
            if request.target_lux is None:
                raise ValueError("target_lux is required when solving for luminaire count")
            count = required_luminaires(request.target_lux, area, lumens, uf, mf)
        elif request.mode == SOLVE_FOR_LUX:
            if request.luminaire_count is None:
                raise ValueError("luminaire_count is required when solving for illuminance")
            count = int(request.luminaire_count)
        else:
            raise ValueError(f"Unknown calculation mode: {request.mode!r}")

        if count is None:
            logger.debug("Luminaire count not computable (lumens=%g, uf=%g, mf=%g)", lumens, uf, mf)
            lux = None
            layout = None
        else:
            lux = achieved_lux(count, lumens, uf, mf, area)
            layout = plan_layout(geom.length, geom.width, count) if count > 0 else None

        logger.debug("K=%.3f UF=%.2f count=%s", k, uf, count)
        return CalculationResult(
            mode=request.mode,
            room_area=area,
            room_index=k,
            utilization_factor=uf,
            maintenance_factor=mf,
            luminaire_count=count,
            achieved_lux=lux,
            illuminance_table=table,
            lumens_per_fixture=lumens,
            target_lux=request.target_lux if request.mode == SOLVE_FOR_COUNT else None,
            uf_fallback=uf_lookup.fallback,
            layout=layout,
        )


def calculate(request: CalculationRequest) -> CalculationResult:
    return IlluminanceEngine().calculate(request)
