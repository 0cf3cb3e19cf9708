"""
Utilization factor lookup.

The UF table is indexed by room index, ceiling reflectance and wall
reflectance. Each input snaps down to the largest tabulated breakpoint not
exceeding it; inputs below the first breakpoint use the first breakpoint.
There is no interpolation between breakpoints.

Floor reflectance is accepted for interface symmetry but the table has no
floor dimension, so it does not influence the result.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Optional, Sequence

import numpy as np

from luxplan.core.constants import (
    CEILING_BREAKPOINTS,
    DEFAULT_UTILIZATION_FACTOR,
    ROOM_INDEX_BREAKPOINTS,
    UF_TABLE,
    WALL_BREAKPOINTS,
)


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class UFLookup:
    value: float
    room_index_breakpoint: float
    ceiling_breakpoint: float
    wall_breakpoint: float
    fallback: bool = False


def _sorted_breakpoints(values: Sequence[float]) -> np.ndarray:
    arr = np.asarray(values, dtype=float).reshape(-1)
    if arr.size == 0:
        raise ValueError("Breakpoint set must not be empty")
    return np.sort(arr)


def floor_breakpoint_index(value: float, breakpoints: np.ndarray) -> int:
    """Index of the largest breakpoint <= value, or 0 if value is below all of them."""
    if math.isnan(value):
        return 0
    idx = int(np.searchsorted(breakpoints, value, side="right")) - 1
    return max(idx, 0)


class UtilizationFactorEstimator:
    def __init__(
        self,
        table: Optional[Sequence] = None,
        room_index_breakpoints: Sequence[float] = ROOM_INDEX_BREAKPOINTS,
        ceiling_breakpoints: Sequence[float] = CEILING_BREAKPOINTS,
        wall_breakpoints: Sequence[float] = WALL_BREAKPOINTS,
        default_uf: float = DEFAULT_UTILIZATION_FACTOR,
    ):
        self.room_index_breakpoints = _sorted_breakpoints(room_index_breakpoints)
        self.ceiling_breakpoints = _sorted_breakpoints(ceiling_breakpoints)
        self.wall_breakpoints = _sorted_breakpoints(wall_breakpoints)
        self.table = np.array(UF_TABLE if table is None else table, dtype=float)
        expected = (
            self.room_index_breakpoints.size,
            self.ceiling_breakpoints.size,
            self.wall_breakpoints.size,
        )
        if self.table.shape != expected:
            raise ValueError(f"UF table shape {self.table.shape} does not match breakpoints {expected}")
        self.table.setflags(write=False)
        self.default_uf = float(default_uf)

    def lookup(
        self,
        room_index: float,
        ceiling_reflectance: float,
        wall_reflectance: float,
        floor_reflectance: Optional[float] = None,
    ) -> UFLookup:
        i = floor_breakpoint_index(room_index, self.room_index_breakpoints)
        j = floor_breakpoint_index(ceiling_reflectance, self.ceiling_breakpoints)
        k = floor_breakpoint_index(wall_reflectance, self.wall_breakpoints)
        ri_bp = float(self.room_index_breakpoints[i])
        c_bp = float(self.ceiling_breakpoints[j])
        w_bp = float(self.wall_breakpoints[k])

        value = float(self.table[i, j, k])
        if not math.isfinite(value) or value <= 0.0:
            # Unreachable with the built-in table; every breakpoint triple is populated.
            logger.warning(
                "UF table has no entry for K=%g, ceiling=%g, wall=%g; using default UF %g",
                ri_bp,
                c_bp,
                w_bp,
                self.default_uf,
            )
            return UFLookup(self.default_uf, ri_bp, c_bp, w_bp, fallback=True)

        logger.debug("UF %.2f for K=%g, ceiling=%g, wall=%g", value, ri_bp, c_bp, w_bp)
        return UFLookup(value, ri_bp, c_bp, w_bp)

    def estimate(
        self,
        room_index: float,
        ceiling_reflectance: float,
        wall_reflectance: float,
        floor_reflectance: Optional[float] = None,
    ) -> float:
        return self.lookup(room_index, ceiling_reflectance, wall_reflectance, floor_reflectance).value


DEFAULT_ESTIMATOR = UtilizationFactorEstimator()


def estimate_uf(
    room_index: float,
    ceiling_reflectance: float,
    wall_reflectance: float,
    floor_reflectance: Optional[float] = None,
) -> float:
    return DEFAULT_ESTIMATOR.estimate(room_index, ceiling_reflectance, wall_reflectance, floor_reflectance)
