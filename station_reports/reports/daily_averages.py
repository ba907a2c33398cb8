"""Mean temperature per calendar day, across all stations.

``DailyAverageAccumulator`` keeps one bucket (running sum + count) per date.
Date keys live in a sorted list maintained with ``bisect``, so buckets can
be walked in ascending date order at any time without a sort pass, and each
date maps to exactly one bucket.

Observations may arrive in any order.  Buckets are only ever created or
updated; build a fresh accumulator for every computation.
"""

from __future__ import annotations

import bisect
import logging
from dataclasses import dataclass
from typing import Iterable, Iterator

from station_reports.weather.observations import Date, Observation

logger = logging.getLogger(__name__)


# ======================================================================
# Data classes
# ======================================================================

@dataclass
class DailyBucket:
    """Running total for one date.  ``observation_count`` is always >= 1."""
    date_key: int
    sum_temperature: float
    observation_count: int
    representative_date: Date

    @property
    def mean(self) -> float:
        return self.sum_temperature / self.observation_count


@dataclass(frozen=True)
class DailyAverage:
    """One row of the daily average report."""
    date: Date
    mean: float
    observation_count: int

    @property
    def year(self) -> int:
        return self.date.year

    @property
    def month(self) -> int:
        return self.date.month

    @property
    def day(self) -> int:
        return self.date.day


# ======================================================================
# Accumulator
# ======================================================================

class DailyAverageAccumulator:
    """Date-keyed running averages with keys kept in ascending order."""

    def __init__(self):
        self._keys: list[int] = []
        self._buckets: dict[int, DailyBucket] = {}

    def __len__(self) -> int:
        return len(self._keys)

    def __contains__(self, date: object) -> bool:
        return isinstance(date, Date) and date.key in self._buckets

    @property
    def is_empty(self) -> bool:
        return not self._keys

    def add(self, obs: Observation) -> DailyBucket:
        """Fold one observation into its date's bucket, creating it if needed."""
        key = obs.date.key
        bucket = self._buckets.get(key)
        if bucket is not None:
            bucket.observation_count += 1
            bucket.sum_temperature += obs.temperature
            return bucket

        bucket = DailyBucket(
            date_key=key,
            sum_temperature=obs.temperature,
            observation_count=1,
            representative_date=obs.date,
        )
        bisect.insort(self._keys, key)
        self._buckets[key] = bucket
        return bucket

    def add_all(self, observations: Iterable[Observation]) -> None:
        for obs in observations:
            self.add(obs)

    def buckets(self) -> Iterator[DailyBucket]:
        """Buckets in ascending date order."""
        for key in self._keys:
            yield self._buckets[key]

    def averages(self) -> list[DailyAverage]:
        return [
            DailyAverage(
                date=b.representative_date,
                mean=b.mean,
                observation_count=b.observation_count,
            )
            for b in self.buckets()
        ]


def compute_daily_averages(observations: Iterable[Observation]) -> list[DailyAverage]:
    """Return the mean temperature per date, ascending by (year, month, day)."""
    acc = DailyAverageAccumulator()
    acc.add_all(observations)
    logger.debug("Accumulated %d distinct dates", len(acc))
    return acc.averages()
