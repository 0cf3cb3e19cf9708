from __future__ import annotations

from dataclasses import dataclass
from typing import List, Literal, Optional, Tuple


LayoutType = Literal["grid", "staggered"]


@dataclass(frozen=True)
class LayoutPlan:
    rows: int
    columns: int
    spacing_x: float
    spacing_y: float
    wall_offset_x: float
    wall_offset_y: float
    total_luminaires: int
    layout_type: LayoutType
    row_pattern: Optional[Tuple[int, ...]] = None

    @property
    def description(self) -> str:
        if self.row_pattern is None:
            return f"{self.rows} × {self.columns} grid"
        return "Staggered pattern: " + "-".join(str(n) for n in self.row_pattern)

    def row_widths(self) -> Tuple[int, ...]:
        if self.row_pattern is not None:
            return self.row_pattern
        return tuple(self.columns for _ in range(self.rows))

    def positions(self) -> List[Tuple[float, float]]:
        """
        Luminaire centres in room coordinates (meters, origin at a corner).

        Rows shorter than the widest row are centred by shifting them
        half the missing span.
        """
        out: List[Tuple[float, float]] = []
        for row, lights in enumerate(self.row_widths()):
            center = (self.columns - lights) * self.spacing_x / 2
            y = row * self.spacing_y + self.wall_offset_y
            for col in range(lights):
                if len(out) >= self.total_luminaires:
                    return out
                out.append((col * self.spacing_x + self.wall_offset_x + center, y))
        return out
