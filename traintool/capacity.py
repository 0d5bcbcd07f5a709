"""
capacity.py – how many waggons a consist can pull at a given speed.
"""
from __future__ import annotations

import logging
import math
from concurrent.futures import ThreadPoolExecutor
from typing import Optional

import numpy as np

from .effort import SPEED_VALUES, available_effort
from .models import Consist, FrictionMode, Load, Series, Terrain
from .resistance import resistance_profile

logger = logging.getLogger("traintool.capacity")


def candidate_upper_bound(
    effort: int, consist: Consist, load: Load, friction_mode: FrictionMode
) -> int:
    """Loose cap on the waggon count from rolling resistance alone."""
    tonnage = (effort * 1000.0) / friction_mode.coefficient
    tonnage = max(0.0, tonnage - consist.mass)
    return math.floor(tonnage / load.waggon_mass)


def max_waggons_at_speed(
    consist: Consist,
    load: Load,
    terrain: Terrain,
    friction_mode: FrictionMode,
    speed_kmh: int,
) -> int:
    """
    Largest waggon count whose required effort does not exceed the effort
    available at *speed_kmh*.  0 when not even the bare consist can run.
    """
    effort = available_effort(consist, speed_kmh, load.rolling_stock.max_speed)
    upper = candidate_upper_bound(effort, consist, load, friction_mode)

    counts = np.arange(upper + 1)
    required = resistance_profile(
        counts,
        load.waggon_mass,
        consist.locomotive.mass,
        consist.count,
        terrain,
        friction_mode,
        load.rolling_stock.length,
    )

    # searchsorted needs a non-decreasing profile
    if np.any(np.diff(required) < 0):
        raise RuntimeError(
            f"Resistance is not monotone in waggon count for {terrain} – cannot search"
        )

    feasible = int(np.searchsorted(required, effort, side="right"))
    result = max(0, feasible - 1)
    logger.debug(
        "%d km/h: effort=%d kN, candidates=0..%d → %d waggons",
        speed_kmh, effort, upper, result,
    )
    return result


def capacity_curve(
    consist: Consist,
    load: Load,
    terrain: Terrain,
    friction_mode: FrictionMode,
    max_workers: Optional[int] = None,
) -> Series:
    """Max waggon count for every speed sample (0..205 km/h)."""

    def _solve(speed: int) -> int:
        return max_waggons_at_speed(consist, load, terrain, friction_mode, speed)

    if max_workers:
        with ThreadPoolExecutor(max_workers=max_workers) as executor:
            waggons = list(executor.map(_solve, SPEED_VALUES))
    else:
        waggons = [_solve(speed) for speed in SPEED_VALUES]

    return list(zip(SPEED_VALUES, waggons))
