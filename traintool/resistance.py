"""
resistance.py – tractive effort a train needs to hold its speed.

Rolling resistance scales with total tonnage; slope resistance with the laden
mass of the waggons currently on a grade.  Every function accepts either a
scalar waggon count or a numpy array of counts, so the capacity solver can
evaluate all candidates in one pass with exactly the same arithmetic.
"""
from __future__ import annotations

import logging
from typing import Union

import numpy as np

from .models import Consist, FrictionMode, Hilliness, Load, Terrain

logger = logging.getLogger("traintool.resistance")

# 1/10 stands in for 9.81 / 100; close to the trigonometric value for small
# grades and what every calibrated chart was produced with.
SLOPE_DIVISOR = 10.0

Counts = Union[int, np.ndarray]


def waggons_on_slope(waggon_count: Counts, waggon_length: float, terrain: Terrain):
    """Number of waggons (possibly fractional) standing on a grade at once."""
    n = np.asarray(waggon_count, dtype=float)

    if terrain.hilliness is Hilliness.ONE_SLOPE:
        return np.minimum(n, 1.0 / waggon_length)

    if terrain.hilliness is Hilliness.MULTIPLE_SLOPES:
        train_length = n * waggon_length
        tiles_occupied = np.ceil(train_length / (terrain.tiles_between_slopes + 1))
        return np.minimum(n, tiles_occupied / waggon_length)

    return np.zeros_like(n)


def resistance_profile(
    waggon_count: Counts,
    waggon_mass: int,
    locomotive_mass: int,
    locomotive_count: int,
    terrain: Terrain,
    friction_mode: FrictionMode,
    waggon_length: float,
) -> np.ndarray:
    """Vectorised :func:`required_tractive_effort` (kN per waggon count)."""
    n = np.asarray(waggon_count, dtype=float)
    coefficient = float(friction_mode.coefficient)

    on_slope = waggons_on_slope(n, waggon_length, terrain)
    slope = (on_slope * waggon_mass * terrain.slope_percentage) / SLOPE_DIVISOR

    tonnage = n * waggon_mass + (locomotive_mass * locomotive_count)
    rolling = (tonnage * coefficient) / 1000.0

    return slope + rolling


def required_tractive_effort(
    waggon_count: int,
    waggon_mass: int,
    locomotive_mass: int,
    locomotive_count: int,
    terrain: Terrain,
    friction_mode: FrictionMode,
    waggon_length: float,
) -> float:
    """
    Tractive effort (kN) needed to move *waggon_count* waggons plus the
    locomotives.  No upper bound is applied; callers compare against the
    effort the consist can deliver.
    """
    if waggon_count < 0:
        raise ValueError(f"waggon_count must be >= 0 (got {waggon_count})")
    return float(
        resistance_profile(
            waggon_count,
            waggon_mass,
            locomotive_mass,
            locomotive_count,
            terrain,
            friction_mode,
            waggon_length,
        )
    )


def consist_resistance(
    waggon_count: int,
    consist: Consist,
    load: Load,
    terrain: Terrain,
    friction_mode: FrictionMode,
) -> float:
    return required_tractive_effort(
        waggon_count,
        load.waggon_mass,
        consist.locomotive.mass,
        consist.count,
        terrain,
        friction_mode,
        load.rolling_stock.length,
    )
