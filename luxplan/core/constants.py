from __future__ import annotations

from typing import Tuple


# Empirical correction aligning the lumen method with reference photometric
# software output. Applied exactly as-is.
DIALUX_MULTIPLIER = 1.097

DEFAULT_MAINTENANCE_FACTOR = 0.8

# Returned when the UF table has no entry for a breakpoint combination.
DEFAULT_UTILIZATION_FACTOR = 0.6

# Hm floor in meters; keeps the room index finite when the luminaire plane
# sits on (or below) the working plane.
MIN_MOUNTING_HEIGHT_ABOVE_WORK_PLANE = 0.1

ILLUMINANCE_TABLE_ROWS = 10

ROOM_INDEX_BREAKPOINTS: Tuple[float, ...] = (0.6, 0.8, 1.0, 1.25, 1.5, 2.0, 2.5, 3.0, 4.0)
CEILING_BREAKPOINTS: Tuple[float, ...] = (0.5, 0.7, 0.8)
WALL_BREAKPOINTS: Tuple[float, ...] = (0.3, 0.5, 0.7)

# UF[room_index][ceiling][wall], axes ordered as the breakpoint tuples above.
UF_TABLE: Tuple[Tuple[Tuple[float, ...], ...], ...] = (
    ((0.49, 0.54, 0.61), (0.50, 0.55, 0.63), (0.50, 0.55, 0.64)),
    ((0.61, 0.65, 0.71), (0.61, 0.66, 0.73), (0.62, 0.67, 0.74)),
    ((0.68, 0.72, 0.77), (0.69, 0.73, 0.79), (0.69, 0.74, 0.80)),
    ((0.74, 0.77, 0.81), (0.75, 0.79, 0.84), (0.76, 0.80, 0.85)),
    ((0.78, 0.81, 0.84), (0.79, 0.83, 0.87), (0.80, 0.84, 0.89)),
    ((0.81, 0.84, 0.87), (0.83, 0.86, 0.90), (0.84, 0.87, 0.91)),
    ((0.83, 0.86, 0.88), (0.86, 0.88, 0.91), (0.87, 0.90, 0.93)),
    ((0.85, 0.87, 0.89), (0.87, 0.90, 0.92), (0.88, 0.91, 0.94)),
    ((0.87, 0.88, 0.90), (0.89, 0.91, 0.94), (0.91, 0.93, 0.96)),
)
