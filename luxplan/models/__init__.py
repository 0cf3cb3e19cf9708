from luxplan.models.layout import LayoutPlan, LayoutType
from luxplan.models.request import (
    SOLVE_FOR_COUNT,
    SOLVE_FOR_LUX,
    CalculationMode,
    CalculationRequest,
    CalculationResult,
    LuminaireSpec,
    RoomGeometry,
    SurfaceReflectance,
)

__all__ = [
    "SOLVE_FOR_COUNT",
    "SOLVE_FOR_LUX",
    "CalculationMode",
    "CalculationRequest",
    "CalculationResult",
    "LayoutPlan",
    "LayoutType",
    "LuminaireSpec",
    "RoomGeometry",
    "SurfaceReflectance",
]
