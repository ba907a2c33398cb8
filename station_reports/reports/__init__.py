"""Aggregate reports over station temperature observations.

Modules
-------
extremes : compute_station_extremes
    Min / max observation per station, ordered by station id.
daily_averages : DailyAverageAccumulator, compute_daily_averages
    Mean temperature per calendar day, ordered by date.
printer
    Fixed text layouts and CSV / parquet export.
run : CLI
    ``python -m station_reports.reports.run`` — print both reports.
"""
