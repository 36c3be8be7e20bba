"""
In-memory storage for the samples of a monitoring run.
"""

from .time_series import SERIES_SCHEMA, TimeSeriesStore

__all__ = [
    "SERIES_SCHEMA",
    "TimeSeriesStore",
]
