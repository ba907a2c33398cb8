"""Per-station temperature extremes.

One pass over the observations keeps a (min, max) pair per station id and
emits one ``StationExtreme`` per station that has data, ordered by station
id.  The pair holds references to the caller's ``Observation`` objects; the
tracker never copies them.

ORDERING POLICIES
=================
``EARLIEST_ON_TIE`` (default)
    min is the coldest reading and max the warmest.  When several readings
    share the extreme value, the chronologically earliest one is reported,
    whatever order the input arrives in.

``LEGACY``
    The field-by-field comparison of the original report tool, kept so its
    output can be reproduced.  ``observation_precedes(a, b)`` is true when
    ANY of year, month, day, hour, minute or temperature of ``a`` is smaller
    than the same field of ``b`` (each compared on its own, not
    lexicographically).  min is replaced when the new reading precedes it;
    max is replaced when the new reading does not precede it.  This can pick
    a warmer reading as the minimum when it has, say, an earlier month.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Iterable

from station_reports.weather.observations import Observation

logger = logging.getLogger(__name__)


class ExtremePolicy(Enum):
    """How a new reading is weighed against the current station min / max."""
    EARLIEST_ON_TIE = "earliest_on_tie"
    LEGACY = "legacy"


@dataclass
class StationExtreme:
    """Min and max observation for one station (references, not copies)."""
    station_id: int
    min_observation: Observation
    max_observation: Observation

    @property
    def min_temperature(self) -> float:
        return self.min_observation.temperature

    @property
    def max_temperature(self) -> float:
        return self.max_observation.temperature


# ======================================================================
# Comparisons
# ======================================================================

def observation_precedes(a: Observation, b: Observation) -> bool:
    """Legacy priority test: any smaller date/time field or a colder reading."""
    p, q = a.date, b.date
    return (
        p.year < q.year
        or p.month < q.month
        or p.day < q.day
        or a.hour < b.hour
        or a.minute < b.minute
        or a.temperature < b.temperature
    )


def _colder(a: Observation, b: Observation) -> bool:
    if a.temperature != b.temperature:
        return a.temperature < b.temperature
    return a.timestamp_key < b.timestamp_key


def _warmer(a: Observation, b: Observation) -> bool:
    if a.temperature != b.temperature:
        return a.temperature > b.temperature
    return a.timestamp_key < b.timestamp_key


def _update(extreme: StationExtreme, obs: Observation, policy: ExtremePolicy) -> None:
    if policy is ExtremePolicy.LEGACY:
        if observation_precedes(obs, extreme.min_observation):
            extreme.min_observation = obs
        if not observation_precedes(obs, extreme.max_observation):
            extreme.max_observation = obs
        return

    if _colder(obs, extreme.min_observation):
        extreme.min_observation = obs
    if _warmer(obs, extreme.max_observation):
        extreme.max_observation = obs


# ======================================================================
# Report
# ======================================================================

def compute_station_extremes(
    observations: Iterable[Observation],
    policy: ExtremePolicy | str = ExtremePolicy.EARLIEST_ON_TIE,
) -> list[StationExtreme]:
    """Return one StationExtreme per station with data, ascending by station id.

    Station ids are expected in 1..250; ids outside that range are the
    caller's responsibility and are not checked here.
    """
    policy = ExtremePolicy(policy)
    by_station: dict[int, StationExtreme] = {}
    n_obs = 0

    for obs in observations:
        n_obs += 1
        extreme = by_station.get(obs.station_id)
        if extreme is None:
            by_station[obs.station_id] = StationExtreme(obs.station_id, obs, obs)
        else:
            _update(extreme, obs, policy)

    logger.debug("Tracked extremes for %d stations over %d observations (%s)",
                 len(by_station), n_obs, policy.value)
    return [by_station[sid] for sid in sorted(by_station)]
