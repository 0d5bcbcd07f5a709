"""
speed.py – steady-state speed of a consist for a given train length.
"""
from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from typing import Optional

from .models import Consist, FrictionMode, Load, Series, Terrain
from .resistance import consist_resistance

logger = logging.getLogger("traintool.speed")

WAGGON_COUNTS = tuple(range(1, 20))


def speed_cap(consist: Consist, load: Load) -> int:
    return min(consist.locomotive.max_speed, load.rolling_stock.max_speed)


def speed_for_waggon_count(
    consist: Consist,
    load: Load,
    terrain: Terrain,
    friction_mode: FrictionMode,
    waggon_count: int,
) -> int:
    """
    Speed (km/h) at which the consist's power exactly balances the resistance
    of *waggon_count* waggons, capped at the slower of locomotive and waggon.
    """
    required = consist_resistance(waggon_count, consist, load, terrain, friction_mode)
    cap = speed_cap(consist, load)

    if required > consist.max_tractive_effort:
        return 0
    if required <= 0:
        return cap

    speed_ms = consist.power / required
    speed_kmh = speed_ms * 3.6
    return int(min(cap, speed_kmh))


def speed_curve(
    consist: Consist,
    load: Load,
    terrain: Terrain,
    friction_mode: FrictionMode,
    max_workers: Optional[int] = None,
) -> Series:
    """Speed for 1..19 waggons."""

    def _solve(n: int) -> int:
        return speed_for_waggon_count(consist, load, terrain, friction_mode, n)

    if max_workers:
        with ThreadPoolExecutor(max_workers=max_workers) as executor:
            speeds = list(executor.map(_solve, WAGGON_COUNTS))
    else:
        speeds = [_solve(n) for n in WAGGON_COUNTS]

    logger.debug("Speed curve for %s ×%d / %s: %s", consist.locomotive, consist.count,
                 load.rolling_stock, speeds)
    return list(zip(WAGGON_COUNTS, speeds))
