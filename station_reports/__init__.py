"""Station temperature reports: per-station extremes and daily mean temperatures."""

from station_reports.reports.daily_averages import compute_daily_averages
from station_reports.reports.extremes import ExtremePolicy, compute_station_extremes
from station_reports.weather.observations import Date, Observation, make_observation

__all__ = [
    "Date",
    "ExtremePolicy",
    "Observation",
    "compute_daily_averages",
    "compute_station_extremes",
    "make_observation",
]
