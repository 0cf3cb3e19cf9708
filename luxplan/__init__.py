"""
Luxplan

Lumen-method lighting calculations: room index, utilization factor,
luminaire count or achieved illuminance, and a 2-D luminaire layout.
"""

from luxplan.calculation import (
    IlluminanceEngine,
    UtilizationFactorEstimator,
    achieved_lux,
    calculate,
    illuminance_table,
    required_luminaires,
    room_index,
)
from luxplan.core.units import to_meters
from luxplan.design.layout import LayoutPlanner, plan_layout
from luxplan.models import (
    SOLVE_FOR_COUNT,
    SOLVE_FOR_LUX,
    CalculationRequest,
    CalculationResult,
    LayoutPlan,
    LuminaireSpec,
    RoomGeometry,
    SurfaceReflectance,
)

__version__ = "0.1.0"

__all__ = [
    "SOLVE_FOR_COUNT",
    "SOLVE_FOR_LUX",
    "CalculationRequest",
    "CalculationResult",
    "IlluminanceEngine",
    "LayoutPlan",
    "LayoutPlanner",
    "LuminaireSpec",
    "RoomGeometry",
    "SurfaceReflectance",
    "UtilizationFactorEstimator",
    "achieved_lux",
    "calculate",
    "illuminance_table",
    "plan_layout",
    "required_luminaires",
    "room_index",
    "to_meters",
]
