from __future__ import annotations

import numpy as np
import pytest

from luxplan.calculation.illuminance import IlluminanceEngine, achieved_lux, calculate
from luxplan.calculation.utilization import UtilizationFactorEstimator
from luxplan.core.constants import UF_TABLE
from luxplan.models.request import (
    SOLVE_FOR_COUNT,
    SOLVE_FOR_LUX,
    CalculationRequest,
    LuminaireSpec,
    RoomGeometry,
    SurfaceReflectance,
)


def _request(**overrides) -> CalculationRequest:
    fields = dict(
        geometry=RoomGeometry(length=5.0, width=4.0, height=2.7, mounting_height=2.5, working_plane_height=0.8),
        reflectance=SurfaceReflectance(ceiling=0.7, wall=0.5, floor=0.2),
        luminaire=LuminaireSpec(lumens_per_fixture=1000.0),
        mode=SOLVE_FOR_COUNT,
        target_lux=300.0,
    )
    fields.update(overrides)
    return CalculationRequest(**fields)


def test_solve_for_count_medium_room() -> None:
    result = calculate(_request())
    assert result.room_area == 20.0
    assert abs(result.room_index - 20.0 / 15.3) < 1e-12
    assert result.utilization_factor == 0.79
    assert result.maintenance_factor == 0.8
    assert result.luminaire_count == 9
    assert result.computable
    assert result.achieved_lux == pytest.approx(311.9868, abs=1e-4)
    assert result.achieved_lux >= result.target_lux
    assert len(result.illuminance_table) == 10
    assert result.layout is not None
    assert (result.layout.rows, result.layout.columns) == (3, 3)
    assert not result.uf_fallback


def test_solve_for_lux_uses_given_count() -> None:
    result = calculate(_request(mode=SOLVE_FOR_LUX, target_lux=None, luminaire_count=7))
    assert result.luminaire_count == 7
    assert result.target_lux is None
    assert result.achieved_lux == pytest.approx(achieved_lux(7, 1000.0, 0.79, 0.8, 20.0))
    assert result.layout.row_pattern == (3, 3, 1)


def test_not_computable_count_has_no_lux_or_layout() -> None:
    result = calculate(_request(luminaire=LuminaireSpec(lumens_per_fixture=0.0)))
    assert result.luminaire_count is None
    assert result.achieved_lux is None
    assert result.layout is None
    assert not result.computable
    assert all(lux == 0.0 for _, lux in result.illuminance_table)


def test_zero_maintenance_factor_not_computable() -> None:
    result = calculate(_request(luminaire=LuminaireSpec(lumens_per_fixture=1000.0, maintenance_factor=0.0)))
    assert not result.computable


def test_dialux_multiplier_is_fixed() -> None:
    spec = LuminaireSpec(lumens_per_fixture=1000.0)
    assert spec.dialux_multiplier == 1.097
    with pytest.raises(TypeError):
        LuminaireSpec(lumens_per_fixture=1000.0, dialux_multiplier=1.2)  # type: ignore[call-arg]


def test_geometry_in_feet_matches_meters() -> None:
    ft = RoomGeometry.from_units(5.0 / 0.3048, 4.0 / 0.3048, 2.7 / 0.3048, 2.5 / 0.3048, 0.8 / 0.3048, unit="ft")
    r_ft = calculate(_request(geometry=ft))
    r_m = calculate(_request())
    assert r_ft.room_area == pytest.approx(r_m.room_area)
    assert r_ft.luminaire_count == r_m.luminaire_count


def test_engine_flags_uf_fallback() -> None:
    table = np.array(UF_TABLE, dtype=float)
    table[3, 1, 1] = np.nan
    engine = IlluminanceEngine(UtilizationFactorEstimator(table=table))
    result = engine.calculate(_request())
    assert result.uf_fallback
    assert result.utilization_factor == 0.6


def test_missing_mode_inputs_rejected() -> None:
    with pytest.raises(ValueError):
        calculate(_request(target_lux=None))
    with pytest.raises(ValueError):
        calculate(_request(mode=SOLVE_FOR_LUX, target_lux=None))
