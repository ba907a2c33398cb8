"""CLI entry point for the station temperature reports.

Usage:
    python -m station_reports.reports.run --input data/observations.txt
    python -m station_reports.reports.run --input data/observations.txt --report daily_averages
    python -m station_reports.reports.run --input data/observations.txt --policy legacy
    python -m station_reports.reports.run --config my_config.yaml --export-dir out/

Options:
    --config            Path to config.yaml (auto-detected if omitted)
    --input             Observation file (overrides input.path)
    --report            station_extremes | daily_averages | both (default: from config)
    --policy            Extreme ordering policy: earliest_on_tie | legacy
    --max-observations  Read at most N records
    --export-dir        Also write station_extremes.csv / daily_averages.csv here
    --log-level         Logging level (default: from config, else INFO)
"""

from __future__ import annotations

import argparse
import dataclasses
import logging
import sys
from pathlib import Path
from typing import Optional

from station_reports.core.config import (
    POLICY_NAMES,
    REPORT_NAMES,
    ReportSettings,
    configure_logging,
    load_config,
    report_settings,
    standard_argparser,
)
from station_reports.reports.daily_averages import compute_daily_averages
from station_reports.reports.extremes import compute_station_extremes
from station_reports.reports.printer import (
    daily_averages_to_dataframe,
    export_report,
    extremes_to_dataframe,
    render_daily_averages,
    render_station_extremes,
)
from station_reports.weather.observations import load_all_observations

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = standard_argparser(
        "Per-station temperature extremes and daily mean temperatures."
    )
    parser.formatter_class = argparse.RawDescriptionHelpFormatter
    parser.epilog = __doc__
    parser.add_argument("--input", default=None, help="Observation file")
    parser.add_argument(
        "--report", choices=[*REPORT_NAMES, "both"], default=None,
        help="Which report(s) to print (default: reports.include from config)",
    )
    parser.add_argument("--policy", choices=POLICY_NAMES, default=None,
                        help="Extreme ordering policy")
    parser.add_argument("--max-observations", type=int, default=None,
                        help="Read at most N records")
    parser.add_argument("--export-dir", default=None,
                        help="Directory for CSV exports")
    return parser


def _apply_overrides(settings: ReportSettings, args: argparse.Namespace) -> ReportSettings:
    """CLI flags win over config values."""
    overrides = {}
    if args.input:
        overrides["input_path"] = Path(args.input)
    if args.report:
        overrides["include"] = REPORT_NAMES if args.report == "both" else (args.report,)
    if args.policy:
        overrides["extreme_policy"] = args.policy
    if args.max_observations is not None:
        overrides["max_observations"] = args.max_observations
    if args.export_dir:
        overrides["export_dir"] = Path(args.export_dir)
    if args.log_level:
        overrides["log_level"] = args.log_level
    return dataclasses.replace(settings, **overrides)


def run_reports(settings: ReportSettings, out=None) -> None:
    """Load observations and write the selected reports to ``out`` (stdout)."""
    if out is None:
        out = sys.stdout
    observations = load_all_observations(settings.input_path, settings.max_observations)

    if "station_extremes" in settings.include:
        extremes = compute_station_extremes(observations, settings.extreme_policy)
        out.write(render_station_extremes(extremes))
        if settings.export_dir:
            export_report(extremes_to_dataframe(extremes),
                          settings.export_dir / "station_extremes.csv")

    if "daily_averages" in settings.include:
        averages = compute_daily_averages(observations)
        out.write(render_daily_averages(averages))
        if settings.export_dir:
            export_report(daily_averages_to_dataframe(averages),
                          settings.export_dir / "daily_averages.csv")


def main(argv: Optional[list[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.max_observations is not None and args.max_observations < 0:
        parser.error("--max-observations must be >= 0")

    config, config_path = load_config(args.config)
    settings = _apply_overrides(report_settings(config, config_path), args)
    configure_logging(settings.log_level)

    if settings.input_path is None:
        logger.error("No input file: pass --input or set input.path in %s", config_path)
        return 1

    try:
        run_reports(settings)
    except FileNotFoundError as e:
        logger.error("%s", e)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
