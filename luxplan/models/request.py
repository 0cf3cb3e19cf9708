from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Literal, Optional, Tuple

from luxplan.core.constants import DEFAULT_MAINTENANCE_FACTOR, DIALUX_MULTIPLIER
from luxplan.core.units import to_meters

if TYPE_CHECKING:
    from luxplan.models.layout import LayoutPlan


CalculationMode = Literal["solve_for_count", "solve_for_lux"]
SOLVE_FOR_COUNT: CalculationMode = "solve_for_count"
SOLVE_FOR_LUX: CalculationMode = "solve_for_lux"


@dataclass(frozen=True)
class RoomGeometry:
    """
    Rectangular room, all lengths in meters.

    Preconditions (checked by the caller, not here):
        mounting_height <= height
        working_plane_height < mounting_height
    """
    length: float
    width: float
    height: float
    mounting_height: float
    working_plane_height: float

    @property
    def area(self) -> float:
        return self.length * self.width

    @classmethod
    def from_units(
        cls,
        length: float,
        width: float,
        height: float,
        mounting_height: float,
        working_plane_height: float,
        unit: str = "meters",
    ) -> "RoomGeometry":
        return cls(
            length=to_meters(length, unit),
            width=to_meters(width, unit),
            height=to_meters(height, unit),
            mounting_height=to_meters(mounting_height, unit),
            working_plane_height=to_meters(working_plane_height, unit),
        )


@dataclass(frozen=True)
class SurfaceReflectance:
    ceiling: float
    wall: float
    floor: float = 0.2


@dataclass(frozen=True)
class LuminaireSpec:
    lumens_per_fixture: float
    maintenance_factor: float = DEFAULT_MAINTENANCE_FACTOR
    dialux_multiplier: float = field(default=DIALUX_MULTIPLIER, init=False)


@dataclass(frozen=True)
class CalculationRequest:
    geometry: RoomGeometry
    reflectance: SurfaceReflectance
    luminaire: LuminaireSpec
    mode: CalculationMode = SOLVE_FOR_COUNT
    target_lux: Optional[float] = None
    luminaire_count: Optional[int] = None


@dataclass(frozen=True)
class CalculationResult:
    """
    Outcome of one calculation.

    ``luminaire_count`` and ``achieved_lux`` are None when the count cannot be
    computed (non-positive lumens, UF or MF); check ``computable`` before
    formatting them.
    """
    mode: CalculationMode
    room_area: float
    room_index: float
    utilization_factor: float
    maintenance_factor: float
    luminaire_count: Optional[int]
    achieved_lux: Optional[float]
    illuminance_table: Tuple[Tuple[int, float], ...]
    lumens_per_fixture: float
    target_lux: Optional[float] = None
    uf_fallback: bool = False
    layout: Optional["LayoutPlan"] = None

    @property
    def computable(self) -> bool:
        return self.luminaire_count is not None
