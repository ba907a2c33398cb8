"""Observation data model and plain-text reader.

Re-exports the record types for convenience.
"""

from station_reports.weather.observations import Date, Observation

__all__ = ["Date", "Observation"]
