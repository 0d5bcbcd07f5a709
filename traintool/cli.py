from __future__ import annotations
import argparse
import logging
import sys
from pathlib import Path
from typing import Optional, Sequence

from traintool.config import EngineConfig, get_default_config
from traintool.logging_config import configure
from traintool.models import Consist, FrictionMode, Hilliness, InvalidSpec, Load, Terrain
from traintool.report import CHARTS, OperatingPoint, build_report, export_csv
from traintool.trainset import UnknownEntry, load_trainset

log = logging.getLogger("traintool.cli")

HILLINESS_CHOICES = {
    "no": Hilliness.NO_SLOPES,
    "one": Hilliness.ONE_SLOPE,
    "multiple": Hilliness.MULTIPLE_SLOPES,
}


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Print train set performance charts")
    parser.add_argument("trainset", help="Path to train set JSON")
    parser.add_argument("--train", required=True, help="Locomotive name")
    parser.add_argument("--waggon", help="Waggon name (required for capacity/speed charts)")
    parser.add_argument("--alt-train", help="Alternative locomotive to compare against")
    parser.add_argument("--locos", type=int, help="Number of coupled locomotives")
    parser.add_argument("--alt-locos", type=int, help="Number of coupled alternative locomotives")
    parser.add_argument("--cargo", type=int, help="Cargo factor in percent (0-100)")
    parser.add_argument("--slope", type=int, help="Slope in percent")
    parser.add_argument("--hilliness", choices=sorted(HILLINESS_CHOICES), help="Terrain profile")
    parser.add_argument("--tiles-between-slopes", type=int, help="Spacing for multiple slopes")
    parser.add_argument("--static-friction", action="store_true", default=None,
                        help="Use the static friction coefficient")
    parser.add_argument("--chart", choices=CHARTS + ("all",), default="all")
    parser.add_argument("--out", type=Path, help="Directory for CSV export")
    parser.add_argument("--config", type=Path, help="YAML/JSON engine configuration")
    parser.add_argument("--log-level", help="Override configured log level")
    return parser


def _pick(value, default):
    return default if value is None else value


def main(argv: Optional[Sequence[str]] = None) -> None:
    args = _parser().parse_args(argv)

    try:
        config = EngineConfig.load_from_file(args.config) if args.config else get_default_config()
    except (FileNotFoundError, KeyError, ValueError, TypeError) as exc:
        log.error("Cannot read config %s – %s", args.config, exc)
        sys.exit(1)

    configure(args.log_level or config.logging.level.value, config.logging.rich_tracebacks)

    issues = config.validate()
    if issues:
        for issue in issues:
            log.error("Config: %s", issue)
        sys.exit(1)

    defaults = config.charts
    charts = CHARTS if args.chart == "all" else (args.chart,)

    try:
        trainset = load_trainset(args.trainset)

        consists = [Consist(trainset.train(args.train), _pick(args.locos, defaults.locomotive_count))]
        if args.alt_train:
            consists.append(
                Consist(trainset.train(args.alt_train), _pick(args.alt_locos, defaults.locomotive_count))
            )

        if args.waggon:
            load = Load(trainset.waggon(args.waggon), _pick(args.cargo, defaults.cargo_factor))
        elif charts != ("effort",):
            log.error("--waggon is required for the capacity and speed charts")
            sys.exit(1)
        else:
            load = None

        static = _pick(args.static_friction, defaults.static_friction)
        point = OperatingPoint(
            load=load,
            terrain=Terrain(
                HILLINESS_CHOICES[args.hilliness] if args.hilliness else defaults.hilliness,
                _pick(args.slope, defaults.slope_percentage),
                _pick(args.tiles_between_slopes, defaults.tiles_between_slopes),
            ),
            friction_mode=FrictionMode.STATIC if static else FrictionMode.KINETIC,
        )
    except (FileNotFoundError, InvalidSpec, UnknownEntry) as exc:
        log.error("%s", exc)
        sys.exit(1)

    log.info("Train set → %s (%s)", trainset, args.trainset)
    tables = build_report(consists, point, charts, config.performance.max_workers)

    for name, df in tables.items():
        print(f"\n== {name} ==")
        print(df.to_string(index=False))

    if args.out:
        export_csv(tables, args.out)
