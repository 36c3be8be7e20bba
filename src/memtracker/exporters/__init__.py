"""
Data export sinks for finished time series.

Provides CSV (memory values only) and Parquet (full series) exporters that
share a common interface.
"""

from .base import SeriesExporter
from .csv_export import CsvExporter
from .factory import create_exporter
from .parquet_export import PARQUET_COMPRESSIONS, ParquetExporter

__all__ = [
    "SeriesExporter",
    "CsvExporter",
    "ParquetExporter",
    "PARQUET_COMPRESSIONS",
    "create_exporter",
]
