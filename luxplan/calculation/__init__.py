"""
Luxplan Calculation Module

Room index, utilization factor and lumen-method illuminance calculations.
"""

from luxplan.core.constants import (
    DEFAULT_MAINTENANCE_FACTOR,
    DEFAULT_UTILIZATION_FACTOR,
    DIALUX_MULTIPLIER,
    ILLUMINANCE_TABLE_ROWS,
)
from luxplan.calculation.utilization import (
    UFLookup,
    UtilizationFactorEstimator,
    estimate_uf,
)
from luxplan.calculation.illuminance import (
    IlluminanceEngine,
    IlluminanceTable,
    achieved_lux,
    calculate,
    illuminance_table,
    required_luminaires,
    room_index,
)

__all__ = [
    # Constants
    "DEFAULT_MAINTENANCE_FACTOR",
    "DEFAULT_UTILIZATION_FACTOR",
    "DIALUX_MULTIPLIER",
    "ILLUMINANCE_TABLE_ROWS",
    # Utilization factor
    "UFLookup",
    "UtilizationFactorEstimator",
    "estimate_uf",
    # Illuminance
    "IlluminanceEngine",
    "IlluminanceTable",
    "achieved_lux",
    "calculate",
    "illuminance_table",
    "required_luminaires",
    "room_index",
]
