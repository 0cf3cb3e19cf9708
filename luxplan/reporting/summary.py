from __future__ import annotations

from dataclasses import asdict
from typing import Any, Dict, List, Tuple

from luxplan.core.constants import DIALUX_MULTIPLIER
from luxplan.core.units import display_symbol, from_meters
from luxplan.models.layout import LayoutPlan
from luxplan.models.request import SOLVE_FOR_COUNT, CalculationResult


NOT_AVAILABLE = "N/A"


def _fmt_count(result: CalculationResult) -> str:
    return str(result.luminaire_count) if result.computable else NOT_AVAILABLE


def _fmt_lux(value, digits: int) -> str:
    if value is None:
        return NOT_AVAILABLE
    return f"{value:.{digits}f} lux"


def summary_items(result: CalculationResult) -> List[Tuple[str, str]]:
    items = [
        ("Room Area", f"{result.room_area:.1f} m²"),
        ("Lumens/Fixture", f"{result.lumens_per_fixture:g} lm"),
        ("Utilization", f"{result.utilization_factor * 100:.0f}%"),
        ("Dialux Multiplier", f"{DIALUX_MULTIPLIER:.3f}"),
    ]
    if result.mode == SOLVE_FOR_COUNT:
        items.append(("Target Lux", f"{result.target_lux:g} lux"))
        items.append(("Luminaires Needed", _fmt_count(result)))
    else:
        items.append(("Luminaires Used", _fmt_count(result)))
    items.append(("Achieved Lux", _fmt_lux(result.achieved_lux, 0)))
    return items


def layout_info(plan: LayoutPlan, unit: str = "meters") -> List[Tuple[str, str]]:
    sym = display_symbol(unit)
    kind = "Uniform Grid" if plan.layout_type == "grid" else "Staggered Pattern"
    return [
        ("Pattern", plan.description),
        ("Total Fixtures", str(plan.total_luminaires)),
        ("Layout Type", kind),
        ("X-Spacing", f"{from_meters(plan.spacing_x, unit):.2f} {sym}"),
        ("Y-Spacing", f"{from_meters(plan.spacing_y, unit):.2f} {sym}"),
        ("Wall Offset", f"{from_meters(plan.wall_offset_x, unit):.2f} {sym}"),
    ]


def format_report(result: CalculationResult, unit: str = "meters") -> str:
    """Plain-text report, suitable for copying or printing."""
    sym = display_symbol(unit)
    area = result.room_area * from_meters(1.0, unit) ** 2
    lines = [
        "Room Details:",
        f"  Area: {area:.2f} {sym}²",
        "",
        "Calculated Parameters:",
        f"  Room Index (K): {result.room_index:.2f}",
        f"  Utilization Factor (UF): {result.utilization_factor * 100:.1f}%",
        f"  Maintenance Factor (MF): {result.maintenance_factor * 100:.0f}%",
        f"  Dialux Alignment Multiplier: {DIALUX_MULTIPLIER:.3f}",
    ]
    if result.uf_fallback:
        lines.append("  Note: UF table had no entry for this room; default UF used.")
    lines.append("")

    if result.mode == SOLVE_FOR_COUNT:
        lines += [
            "Lighting Results:",
            f"  Target illuminance: {result.target_lux:g} lux",
            f"  Number of luminaires needed: {_fmt_count(result)}",
            f"  Achieved illuminance: {_fmt_lux(result.achieved_lux, 1)}",
            "",
            f"Illuminance Table ({result.lumens_per_fixture:g} lm per luminaire):",
            "  # of Lights  Achieved Lux",
        ]
        lines += [f"  {n:>11d}  {lux:>12.1f}" for n, lux in result.illuminance_table]
    else:
        lines += [
            "Lighting Result:",
            f"  Using {_fmt_count(result)} luminaire(s) achieves {_fmt_lux(result.achieved_lux, 1)}",
        ]

    if result.layout is not None:
        lines += ["", "Layout:"]
        lines += [f"  {label}: {value}" for label, value in layout_info(result.layout, unit)]
    return "\n".join(lines) + "\n"


def to_dict(result: CalculationResult) -> Dict[str, Any]:
    out = asdict(result)
    out["illuminance_table"] = [{"count": n, "lux": lux} for n, lux in result.illuminance_table]
    out["computable"] = result.computable
    if result.layout is not None:
        out["layout"]["row_pattern"] = (
            list(result.layout.row_pattern) if result.layout.row_pattern is not None else None
        )
        out["layout"]["positions"] = [list(p) for p in result.layout.positions()]
    return out
