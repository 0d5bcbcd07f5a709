"""
TrainTool – train set performance engine.
Top-level package.  Exposes the calculation API and
configures logging early so every sub-module inherits it.
"""

from __future__ import annotations

import logging
import os

__all__ = [
    "logger",
    "InvalidSpec",
    "Hilliness",
    "FrictionMode",
    "Locomotive",
    "RollingStock",
    "Consist",
    "Load",
    "Terrain",
    "required_tractive_effort",
    "consist_resistance",
    "effort_curve",
    "available_effort",
    "tonnage_curve",
    "max_waggons_at_speed",
    "capacity_curve",
    "speed_for_waggon_count",
    "speed_curve",
]

# ---------- logging ----------
LOG_LEVEL = os.getenv("TRAINTOOL_LOG_LEVEL", "INFO").upper()

logging.basicConfig(
    level=LOG_LEVEL,
    format="%(asctime)s │ %(levelname)-8s │ %(name)s │ %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
)

logger = logging.getLogger("traintool")
logger.debug("Logging initialised (level=%s)", LOG_LEVEL)

# ---------- public API ----------
from .models import (  # noqa: E402
    Consist,
    FrictionMode,
    Hilliness,
    InvalidSpec,
    Load,
    Locomotive,
    RollingStock,
    Terrain,
)
from .resistance import consist_resistance, required_tractive_effort  # noqa: E402
from .effort import available_effort, effort_curve, tonnage_curve  # noqa: E402
from .capacity import capacity_curve, max_waggons_at_speed  # noqa: E402
from .speed import speed_curve, speed_for_waggon_count  # noqa: E402
