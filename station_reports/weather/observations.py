"""Station temperature observations and the plain-text reader that produces them.

Record format (whitespace-delimited, line breaks are plain whitespace):

    year month day hour minute station_id temperature

All fields are integers except ``temperature``.  Reading stops at the first
malformed or partial record; nothing after it is yielded.

Usage:
    from station_reports.weather.observations import load_all_observations

    observations = load_all_observations("data/observations.txt")
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from itertools import islice
from pathlib import Path
from typing import Iterable, Iterator, Optional, TextIO

import pandas as pd

logger = logging.getLogger(__name__)

FIELDS_PER_RECORD = 7


# ======================================================================
# Data classes
# ======================================================================

@dataclass(frozen=True)
class Date:
    """Calendar date as recorded in the input (no calendar validation)."""

    year: int
    month: int
    day: int

    @property
    def key(self) -> int:
        """Sortable integer key, e.g. 2020-01-31 → 20200131."""
        return self.year * 10000 + self.month * 100 + self.day

    def isoformat(self) -> str:
        return f"{self.year:04d}-{self.month:02d}-{self.day:02d}"


@dataclass(frozen=True)
class Observation:
    """One timestamped temperature reading at one station."""

    date: Date
    hour: int
    minute: int
    station_id: int
    temperature: float

    @property
    def timestamp_key(self) -> tuple[int, int, int, int, int]:
        """(year, month, day, hour, minute) for chronological comparison."""
        d = self.date
        return (d.year, d.month, d.day, self.hour, self.minute)

    @property
    def timestamp(self) -> str:
        """``YYYY-MM-DD HH:MM``"""
        return f"{self.date.isoformat()} {self.hour:02d}:{self.minute:02d}"


def make_observation(
    year: int,
    month: int,
    day: int,
    hour: int,
    minute: int,
    station_id: int,
    temperature: float,
) -> Observation:
    """Build an Observation from the flat field order used in the input files."""
    return Observation(
        date=Date(year, month, day),
        hour=hour,
        minute=minute,
        station_id=station_id,
        temperature=float(temperature),
    )


# ======================================================================
# Reader
# ======================================================================

def _tokens(stream: TextIO) -> Iterator[str]:
    for line in stream:
        yield from line.split()


def _parse_record(fields: list[str]) -> Optional[Observation]:
    """Parse seven tokens; return None when any of them is malformed."""
    if len(fields) < FIELDS_PER_RECORD:
        return None
    try:
        ints = [int(tok) for tok in fields[:6]]
        temperature = float(fields[6])
    except ValueError:
        return None
    return make_observation(*ints, temperature)


def read_observations(stream: TextIO) -> Iterator[Observation]:
    """Yield observations from ``stream`` until EOF or the first bad record."""
    tokens = _tokens(stream)
    index = 0
    while True:
        fields = list(islice(tokens, FIELDS_PER_RECORD))
        if not fields:
            return
        obs = _parse_record(fields)
        if obs is None:
            logger.warning(
                "Stopped reading at record %d: malformed or partial record %r",
                index, fields,
            )
            return
        yield obs
        index += 1


def _open(path: Path | str) -> TextIO:
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Observation file not found: {path}")
    return open(path, encoding="utf-8")


def count_observations(path: Path | str) -> int:
    """Count the complete observation records in a file."""
    with _open(path) as f:
        count = sum(1 for _ in read_observations(f))
    logger.info("Counted %d observations in %s", count, path)
    return count


def load_all_observations(path: Path | str, limit: Optional[int] = None) -> list[Observation]:
    """Read observations from ``path`` in file order.

    Parameters
    ----------
    path : Path or str
        Input file.
    limit : int, optional
        Maximum number of records to read; the whole file when omitted.

    Returns
    -------
    list of Observation, at most ``limit`` long.
    """
    with _open(path) as f:
        records = read_observations(f)
        if limit is not None:
            records = islice(records, limit)
        observations = list(records)
    logger.info("Loaded %d observations from %s", len(observations), path)
    return observations


def observations_to_dataframe(observations: Iterable[Observation]) -> pd.DataFrame:
    """Flatten observations into a DataFrame (one column per input field)."""
    columns = ["year", "month", "day", "hour", "minute", "station_id", "temperature"]
    rows = [
        {
            "year": o.date.year,
            "month": o.date.month,
            "day": o.date.day,
            "hour": o.hour,
            "minute": o.minute,
            "station_id": o.station_id,
            "temperature": o.temperature,
        }
        for o in observations
    ]
    return pd.DataFrame(rows, columns=columns)
