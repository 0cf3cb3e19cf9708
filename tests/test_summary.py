from __future__ import annotations

import json

from luxplan.calculation.illuminance import calculate
from luxplan.models.request import (
    SOLVE_FOR_LUX,
    CalculationRequest,
    LuminaireSpec,
    RoomGeometry,
    SurfaceReflectance,
)
from luxplan.reporting.summary import format_report, layout_info, summary_items, to_dict


def _request(lumens: float = 1000.0, **kw) -> CalculationRequest:
    return CalculationRequest(
        geometry=RoomGeometry(5.0, 4.0, 2.7, 2.5, 0.8),
        reflectance=SurfaceReflectance(0.7, 0.5, 0.2),
        luminaire=LuminaireSpec(lumens_per_fixture=lumens),
        target_lux=kw.pop("target_lux", 300.0),
        **kw,
    )


def test_summary_items_solve_for_count() -> None:
    items = dict(summary_items(calculate(_request())))
    assert items["Room Area"] == "20.0 m²"
    assert items["Lumens/Fixture"] == "1000 lm"
    assert items["Utilization"] == "79%"
    assert items["Dialux Multiplier"] == "1.097"
    assert items["Target Lux"] == "300 lux"
    assert items["Luminaires Needed"] == "9"
    assert items["Achieved Lux"] == "312 lux"


def test_summary_items_solve_for_lux() -> None:
    result = calculate(_request(mode=SOLVE_FOR_LUX, target_lux=None, luminaire_count=4))
    labels = [label for label, _ in summary_items(result)]
    assert labels == ["Room Area", "Lumens/Fixture", "Utilization", "Dialux Multiplier", "Luminaires Used", "Achieved Lux"]


def test_not_computable_renders_na() -> None:
    result = calculate(_request(lumens=0.0))
    items = dict(summary_items(result))
    assert items["Luminaires Needed"] == "N/A"
    assert items["Achieved Lux"] == "N/A"
    text = format_report(result)
    assert "Number of luminaires needed: N/A" in text
    assert "Layout:" not in text


def test_report_contents() -> None:
    text = format_report(calculate(_request()))
    assert "Area: 20.00 m²" in text
    assert "Room Index (K): 1.31" in text
    assert "Utilization Factor (UF): 79.0%" in text
    assert "Maintenance Factor (MF): 80%" in text
    assert "Number of luminaires needed: 9" in text
    assert "Achieved illuminance: 312.0 lux" in text
    assert "Pattern: 3 × 3 grid" in text
    assert text.count("\n") > 20


def test_layout_info_converts_units() -> None:
    plan = calculate(_request()).layout
    info = dict(layout_info(plan, unit="mm"))
    assert info["X-Spacing"] == "1666.67 mm"
    assert info["Y-Spacing"] == "1333.33 mm"
    assert info["Layout Type"] == "Uniform Grid"


def test_to_dict_is_json_ready() -> None:
    result = calculate(_request(mode=SOLVE_FOR_LUX, target_lux=None, luminaire_count=7))
    data = json.loads(json.dumps(to_dict(result)))
    assert data["luminaire_count"] == 7
    assert data["computable"] is True
    assert data["layout"]["row_pattern"] == [3, 3, 1]
    assert len(data["layout"]["positions"]) == 7
    assert data["illuminance_table"][0]["count"] == 1
