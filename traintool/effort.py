"""
effort.py – available tractive effort of a consist over the speed range.
"""
from __future__ import annotations

import logging
from typing import Optional

import numpy as np

from .models import Consist, FrictionMode, Series

logger = logging.getLogger("traintool.effort")

SPEED_STEP_KMH = 5
SPEED_SAMPLES = 42
# 0, 5, …, 205 km/h
SPEED_VALUES = tuple(int(v) for v in np.arange(SPEED_SAMPLES) * SPEED_STEP_KMH)


def available_effort(
    consist: Consist, speed_kmh: int, speed_limit: Optional[int] = None
) -> int:
    """
    Tractive effort (kN) the consist delivers at *speed_kmh*.

    At standstill P / v is undefined, so the rated maximum effort is used.
    Above the locomotive's top speed (or *speed_limit*, e.g. the waggon's
    top speed) the consist cannot run at all and the effort is 0.
    """
    if speed_kmh < 0:
        raise ValueError(f"speed_kmh must be >= 0 (got {speed_kmh})")

    te_max = consist.max_tractive_effort
    if speed_kmh == 0:
        return te_max

    if speed_kmh > consist.locomotive.max_speed:
        return 0
    if speed_limit is not None and speed_kmh > speed_limit:
        return 0

    # P [kW] / v [m/s] = F [kN]
    effort = int(consist.power / (speed_kmh / 3.6))
    return max(0, min(te_max, effort))


def effort_curve(consist: Consist) -> Series:
    """Tractive effort vs speed, one sample per 5 km/h from 0 to 205."""
    values = [(speed, available_effort(consist, speed)) for speed in SPEED_VALUES]
    logger.debug("Effort curve for %s ×%d: %s", consist.locomotive, consist.count, values)
    return values


def tonnage_curve(
    consist: Consist, friction_mode: FrictionMode = FrictionMode.KINETIC
) -> Series:
    """Gross tonnage the effort curve can keep rolling on flat track."""
    coefficient = friction_mode.coefficient
    return [
        (speed, int((effort * 1000.0) / coefficient))
        for speed, effort in effort_curve(consist)
    ]
