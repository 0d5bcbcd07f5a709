import sys
from pathlib import Path

import numpy as np
import pytest

PROJECT_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(PROJECT_ROOT))

from traintool.models import (
    Consist,
    FrictionMode,
    Hilliness,
    Load,
    Locomotive,
    RollingStock,
    Terrain,
)
from traintool.resistance import (
    consist_resistance,
    required_tractive_effort,
    resistance_profile,
    waggons_on_slope,
)

FLAT = Terrain(Hilliness.NO_SLOPES)


def test_flat_kinetic_matches_rolling_formula():
    # (30 n + 100) × 17 / 1000
    assert required_tractive_effort(5, 30, 100, 1, FLAT, FrictionMode.KINETIC, 0.5) == pytest.approx(4.25)


def test_static_friction_coefficient():
    assert required_tractive_effort(0, 30, 100, 1, FLAT, FrictionMode.STATIC, 0.5) == pytest.approx(2.7)


@pytest.mark.parametrize("hilliness", list(Hilliness))
def test_zero_waggons_only_locomotive_tonnage(hilliness):
    terrain = Terrain(hilliness, slope_percentage=5, tiles_between_slopes=2)
    effort = required_tractive_effort(0, 30, 100, 2, terrain, FrictionMode.KINETIC, 0.5)
    assert effort == pytest.approx(200 * 17 / 1000)


def test_locomotive_count_multiplies_tonnage():
    single = required_tractive_effort(10, 30, 100, 1, FLAT, FrictionMode.KINETIC, 0.5)
    double = required_tractive_effort(10, 30, 100, 2, FLAT, FrictionMode.KINETIC, 0.5)
    assert double - single == pytest.approx(100 * 17 / 1000)


def test_one_slope_resistance():
    terrain = Terrain(Hilliness.ONE_SLOPE, slope_percentage=2)
    # two waggons fit on the slope: 2 × 30 × 2 / 10 = 12, rolling (90 + 100) × 0.017
    effort = required_tractive_effort(3, 30, 100, 1, terrain, FrictionMode.KINETIC, 0.5)
    assert effort == pytest.approx(12 + 3.23)


def test_slope_divisor_is_ten_not_gravity():
    terrain = Terrain(Hilliness.ONE_SLOPE, slope_percentage=10)
    effort = required_tractive_effort(1, 100, 100, 1, terrain, FrictionMode.STATIC, 1.0)
    assert effort == pytest.approx(100 + 200 * 27 / 1000)


@pytest.mark.parametrize(
    "count, expected",
    [(0, 0), (1, 1), (2, 2), (5, 2)],
)
def test_waggons_on_one_slope(count, expected):
    terrain = Terrain(Hilliness.ONE_SLOPE, 3)
    assert float(waggons_on_slope(count, 0.5, terrain)) == expected


def test_one_slope_fractional_occupancy():
    terrain = Terrain(Hilliness.ONE_SLOPE, 3)
    assert float(waggons_on_slope(10, 0.3, terrain)) == pytest.approx(1 / 0.3)


@pytest.mark.parametrize(
    "count, expected",
    [(0, 0), (1, 1), (8, 2), (9, 4), (16, 4), (17, 6)],
)
def test_waggons_on_multiple_slopes(count, expected):
    # 4 tiles per slope period, half-tile waggons
    terrain = Terrain(Hilliness.MULTIPLE_SLOPES, 3, tiles_between_slopes=3)
    assert float(waggons_on_slope(count, 0.5, terrain)) == expected


def test_no_slopes_has_nobody_on_a_grade():
    terrain = Terrain(Hilliness.NO_SLOPES, slope_percentage=8)
    assert float(waggons_on_slope(12, 0.5, terrain)) == 0


@pytest.mark.parametrize("hilliness", list(Hilliness))
@pytest.mark.parametrize("length", [0.3, 0.5, 1.0, 2.5])
@pytest.mark.parametrize("spacing", [0, 1, 4])
@pytest.mark.parametrize("friction", list(FrictionMode))
def test_resistance_is_monotone_in_waggon_count(hilliness, length, spacing, friction):
    terrain = Terrain(hilliness, slope_percentage=3, tiles_between_slopes=spacing)
    profile = resistance_profile(np.arange(301), 45, 120, 2, terrain, friction, length)
    assert np.all(np.diff(profile) >= 0)


def test_profile_matches_scalar_calls():
    terrain = Terrain(Hilliness.MULTIPLE_SLOPES, 4, tiles_between_slopes=2)
    profile = resistance_profile(np.arange(40), 30, 100, 1, terrain, FrictionMode.KINETIC, 0.5)
    scalars = [
        required_tractive_effort(n, 30, 100, 1, terrain, FrictionMode.KINETIC, 0.5)
        for n in range(40)
    ]
    assert profile.tolist() == scalars


def test_negative_waggon_count_rejected():
    with pytest.raises(ValueError):
        required_tractive_effort(-1, 30, 100, 1, FLAT, FrictionMode.KINETIC, 0.5)


def test_consist_resistance_uses_model_values():
    loco = Locomotive(power=2000, mass=100, max_speed=120, max_tractive_effort=300)
    waggon = RollingStock(mass_empty=10, mass_full=50, max_speed=100, length=0.5)
    terrain = Terrain(Hilliness.ONE_SLOPE, 2)
    assert consist_resistance(3, Consist(loco, 1), Load(waggon, 50), terrain, FrictionMode.KINETIC) == \
        required_tractive_effort(3, 30, 100, 1, terrain, FrictionMode.KINETIC, 0.5)
