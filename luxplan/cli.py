from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

from luxplan.calculation.illuminance import IlluminanceEngine
from luxplan.core.observability import setup_logging
from luxplan.models.request import (
    SOLVE_FOR_COUNT,
    SOLVE_FOR_LUX,
    CalculationRequest,
    LuminaireSpec,
    RoomGeometry,
    SurfaceReflectance,
)
from luxplan.plotting.layout_plot import plot_layout
from luxplan.reporting.summary import format_report, summary_items, to_dict
from luxplan.validation.inputs import InvalidInputError, require_valid


logger = logging.getLogger(__name__)


def _build_request(args: argparse.Namespace) -> CalculationRequest:
    geometry = RoomGeometry.from_units(
        args.length,
        args.width,
        args.height,
        args.mounting_height,
        args.working_plane_height,
        unit=args.unit,
    )
    if args.count is not None:
        mode, target_lux, count = SOLVE_FOR_LUX, None, args.count
    else:
        mode, target_lux, count = SOLVE_FOR_COUNT, args.target_lux, None
    return CalculationRequest(
        geometry=geometry,
        reflectance=SurfaceReflectance(ceiling=args.ceiling, wall=args.wall, floor=args.floor),
        luminaire=LuminaireSpec(lumens_per_fixture=args.lumens, maintenance_factor=args.maintenance_factor),
        mode=mode,
        target_lux=target_lux,
        luminaire_count=count,
    )


def _cmd_calc(args: argparse.Namespace) -> int:
    try:
        request = require_valid(_build_request(args))
    except InvalidInputError as e:
        for issue in e.issues:
            print(f"[ERROR] {issue.field}: {issue.message}")
        return 2

    result = IlluminanceEngine().calculate(request)

    if args.json:
        print(json.dumps(to_dict(result), indent=2, ensure_ascii=False))
    else:
        print("Luxplan")
        for label, value in summary_items(result):
            print(f"  {label}: {value}")
        print()
        print(format_report(result, unit=args.unit), end="")

    if args.plot:
        if result.layout is None:
            print("[WARN] No layout to plot: luminaire count is not computable.", file=sys.stderr)
        else:
            path = plot_layout(
                result.layout,
                request.geometry.length,
                request.geometry.width,
                Path(args.plot).expanduser().resolve(),
            )
            if not args.json:
                print(f"  Saved: {path}")
            logger.info("Layout plot written to %s", path)
    return 0


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(prog="luxplan")
    p.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    sub = p.add_subparsers(dest="cmd", required=True)

    c = sub.add_parser("calc", help="Compute luminaire count or illuminance and a layout for a room.")
    c.add_argument("--length", type=float, required=True, help="Room length")
    c.add_argument("--width", type=float, required=True, help="Room width")
    c.add_argument("--height", type=float, required=True, help="Room height")
    c.add_argument("--mounting-height", type=float, required=True, help="Luminaire mounting height")
    c.add_argument("--working-plane-height", type=float, required=True, help="Working plane height")
    c.add_argument("--unit", default="m", choices=["m", "ft", "mm"], help="Length unit of all dimensions")
    c.add_argument("--ceiling", type=float, default=0.7, help="Ceiling reflectance (0-1)")
    c.add_argument("--wall", type=float, default=0.5, help="Wall reflectance (0-1)")
    c.add_argument("--floor", type=float, default=0.2, help="Floor reflectance (0-1, informational)")
    c.add_argument("--lumens", type=float, required=True, help="Luminous flux per luminaire (lm)")
    c.add_argument("--maintenance-factor", type=float, default=0.8, help="Maintenance factor (default: 0.8)")
    goal = c.add_mutually_exclusive_group(required=True)
    goal.add_argument("--target-lux", type=float, help="Solve for the luminaire count reaching this illuminance")
    goal.add_argument("--count", type=int, help="Solve for the illuminance of this many luminaires")
    c.add_argument("--json", action="store_true", help="Print the result as JSON")
    c.add_argument("--plot", default=None, help="Save a PNG plan view of the layout to this path")
    c.set_defaults(func=_cmd_calc)

    args = p.parse_args(argv)
    setup_logging("DEBUG" if args.verbose else "WARNING")
    return int(args.func(args))


if __name__ == "__main__":
    raise SystemExit(main())
