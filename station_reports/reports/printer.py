"""Text layouts and tabular export for the two reports.

Line formats:
    Station 1: Minimum = -1.87 degrees (2020-11-21 06:10), Maximum = 10.60 degrees (2020-01-11 01:16)
    2020 11 20 10.6
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable

import pandas as pd

from station_reports.reports.daily_averages import DailyAverage
from station_reports.reports.extremes import StationExtreme

logger = logging.getLogger(__name__)


# ======================================================================
# Text
# ======================================================================

def format_station_extreme(extreme: StationExtreme) -> str:
    lo, hi = extreme.min_observation, extreme.max_observation
    return (
        f"Station {extreme.station_id}: "
        f"Minimum = {lo.temperature:.2f} degrees ({lo.timestamp}), "
        f"Maximum = {hi.temperature:.2f} degrees ({hi.timestamp})"
    )


def format_daily_average(avg: DailyAverage) -> str:
    return f"{avg.year:04d} {avg.month:02d} {avg.day:02d} {avg.mean:.1f}"


def render_station_extremes(extremes: Iterable[StationExtreme]) -> str:
    """All extreme lines, each newline-terminated ("" when there are none)."""
    return "".join(format_station_extreme(e) + "\n" for e in extremes)


def render_daily_averages(averages: Iterable[DailyAverage]) -> str:
    """All daily average lines, each newline-terminated ("" when there are none)."""
    return "".join(format_daily_average(a) + "\n" for a in averages)


# ======================================================================
# DataFrames
# ======================================================================

def extremes_to_dataframe(extremes: Iterable[StationExtreme]) -> pd.DataFrame:
    columns = ["station_id", "min_temp", "min_time", "max_temp", "max_time"]
    rows = [
        {
            "station_id": e.station_id,
            "min_temp": e.min_temperature,
            "min_time": e.min_observation.timestamp,
            "max_temp": e.max_temperature,
            "max_time": e.max_observation.timestamp,
        }
        for e in extremes
    ]
    return pd.DataFrame(rows, columns=columns)


def daily_averages_to_dataframe(averages: Iterable[DailyAverage]) -> pd.DataFrame:
    columns = ["date", "mean_temp", "n_obs"]
    rows = [
        {"date": a.date.isoformat(), "mean_temp": a.mean, "n_obs": a.observation_count}
        for a in averages
    ]
    return pd.DataFrame(rows, columns=columns)


def export_report(df: pd.DataFrame, path: Path | str) -> Path:
    """Write a report DataFrame as CSV or parquet, chosen by file suffix."""
    path = Path(path)
    suffix = path.suffix.lower()
    if suffix not in (".csv", ".parquet"):
        raise ValueError(f"Unsupported export format {path.suffix!r}; use .csv or .parquet")

    path.parent.mkdir(parents=True, exist_ok=True)
    if suffix == ".csv":
        df.to_csv(path, index=False)
    else:
        df.to_parquet(path, index=False)
    logger.info("Saved %d rows → %s", len(df), path)
    return path
