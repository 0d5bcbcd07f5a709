"""
report.py – chart series as pandas tables, with CSV export.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, List, Optional

import pandas as pd

from .capacity import capacity_curve
from .effort import effort_curve, tonnage_curve
from .models import Consist, FrictionMode, Load, Series, Terrain
from .speed import speed_curve

logger = logging.getLogger("traintool.report")

CHARTS = ("effort", "capacity", "speed")

# chart → (x column, y column)
_AXES = {
    "effort": ("speed_kmh", "effort_kn"),
    "tonnage": ("speed_kmh", "tonnage_t"),
    "capacity": ("speed_kmh", "waggons"),
    "speed": ("waggons", "speed_kmh"),
}


@dataclass(frozen=True)
class OperatingPoint:
    load: Optional[Load]  # not needed for the effort chart
    terrain: Terrain
    friction_mode: FrictionMode = FrictionMode.KINETIC


def series_frame(series: Series, chart: str, label: Optional[str] = None) -> pd.DataFrame:
    x, y = _AXES[chart]
    df = pd.DataFrame(series, columns=[x, y])
    if label:
        df = df.rename(columns={y: f"{y} [{label}]"})
    return df


def _chart_series(chart: str, consist: Consist, point: OperatingPoint,
                  max_workers: Optional[int]) -> Dict[str, Series]:
    if chart == "effort":
        return {
            "effort": effort_curve(consist),
            "tonnage": tonnage_curve(consist, point.friction_mode),
        }
    if chart == "capacity":
        return {"capacity": capacity_curve(consist, point.load, point.terrain,
                                           point.friction_mode, max_workers)}
    if chart == "speed":
        return {"speed": speed_curve(consist, point.load, point.terrain,
                                     point.friction_mode, max_workers)}
    raise ValueError(f"Unknown chart {chart!r} (expected one of {CHARTS})")


def build_report(
    consists: List[Consist],
    point: OperatingPoint,
    charts=CHARTS,
    max_workers: Optional[int] = None,
) -> Dict[str, pd.DataFrame]:
    """
    One table per chart; each consist (primary first, then alternatives)
    contributes a column, joined on the shared x axis.
    """
    tables: Dict[str, pd.DataFrame] = {}
    labels = []
    for consist in consists:
        label = f"{consist.locomotive.name} ×{consist.count}"
        labels.append(label if label not in labels else f"{label} #{len(labels) + 1}")

    for chart in charts:
        for consist, label in zip(consists, labels):
            for name, series in _chart_series(chart, consist, point, max_workers).items():
                df = series_frame(series, name, label)
                x = _AXES[name][0]
                tables[name] = df if name not in tables else tables[name].merge(df, on=x)
    logger.debug("Built %d tables for %d consists", len(tables), len(consists))
    return tables


def export_csv(tables: Dict[str, pd.DataFrame], out_dir: Path) -> List[Path]:
    out_dir.mkdir(parents=True, exist_ok=True)
    written = []
    for name, df in tables.items():
        out_file = out_dir / f"{name}.csv"
        df.to_csv(out_file, index=False)
        written.append(out_file)
        logger.info("%s written to %s", name, out_file)
    return written
