from __future__ import annotations

import math
from typing import List, Optional, Tuple

from luxplan.models.layout import LayoutPlan, LayoutType


def _row_pattern(count: int, cols: int) -> Tuple[int, ...]:
    full_rows, remaining = divmod(count, cols)
    pattern: List[int] = [cols] * full_rows
    if remaining > 0:
        pattern.append(remaining)
    return tuple(pattern)


def _best_divisor_grid(length: float, width: float, count: int) -> Tuple[int, int]:
    room_aspect = length / width
    best_rows, best_cols = 1, count
    best_score = abs(room_aspect - best_cols / best_rows)
    for rows in range(1, count + 1):
        if count % rows != 0:
            continue
        cols = count // rows
        score = abs(room_aspect - cols / rows)
        # Strict comparison: the first divisor pair scanned wins ties.
        if score < best_score:
            best_score = score
            best_rows, best_cols = rows, cols
    return best_rows, best_cols


def _staggered_columns(count: int) -> int:
    base_cols = int(math.ceil(math.sqrt(count)))
    remaining = count % base_cols
    if not (0 < remaining < base_cols - 2):
        return base_cols
    # Probe order and acceptance rule are fixed so layouts are reproducible.
    for cols in (base_cols - 1, base_cols, base_cols + 1):
        if cols <= 0:
            continue
        full_rows, rem = divmod(count, cols)
        if rem == 0 or (rem >= cols - 1 and full_rows > 1):
            return cols
    return base_cols


def _uniform(
    length: float,
    width: float,
    rows: int,
    cols: int,
    count: int,
    layout_type: LayoutType,
    row_pattern: Optional[Tuple[int, ...]] = None,
) -> LayoutPlan:
    spacing_x = length / cols
    spacing_y = width / rows
    return LayoutPlan(
        rows=rows,
        columns=cols,
        spacing_x=spacing_x,
        spacing_y=spacing_y,
        wall_offset_x=spacing_x / 2,
        wall_offset_y=spacing_y / 2,
        total_luminaires=count,
        layout_type=layout_type,
        row_pattern=row_pattern,
    )


def plan_layout(length: float, width: float, count: int) -> LayoutPlan:
    """
    Arrange ``count`` luminaires over a length × width footprint.

    Up to three luminaires sit in a single column on the room's centre line.
    Otherwise the exact rows × columns factorisation whose aspect ratio is
    closest to the room's is used, provided neither side is 1. Counts with no
    such factorisation (primes, for instance) get a staggered layout: full
    rows of roughly sqrt(count) luminaires plus one shorter trailing row.
    """
    count = int(count)
    if count < 1:
        raise ValueError(f"Luminaire count must be at least 1, got {count}")

    if count <= 3:
        return LayoutPlan(
            rows=count,
            columns=1,
            spacing_x=length / 2,
            spacing_y=width / count,
            wall_offset_x=length / 2,
            wall_offset_y=width / (count * 2),
            total_luminaires=count,
            layout_type="grid",
        )

    rows, cols = _best_divisor_grid(length, width, count)
    if rows > 1 and cols > 1:
        return _uniform(length, width, rows, cols, count, "grid")

    pattern = _row_pattern(count, _staggered_columns(count))
    if max(pattern) == 1:
        pattern = _row_pattern(count, 2)
    return _uniform(length, width, len(pattern), max(pattern), count, "staggered", row_pattern=pattern)


class LayoutPlanner:
    """Stateless wrapper kept for callers that inject a planner object."""

    def plan(self, length: float, width: float, count: int) -> LayoutPlan:
        return plan_layout(length, width, count)
