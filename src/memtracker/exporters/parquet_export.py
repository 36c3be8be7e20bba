"""
Parquet export of the full (elapsed time, memory) series using Polars.
"""

import logging
from pathlib import Path
from typing import Literal

from ..storage import TimeSeriesStore
from .base import SeriesExporter

logger = logging.getLogger(__name__)

ParquetCompression = Literal["snappy", "gzip", "brotli", "lz4", "zstd"]
PARQUET_COMPRESSIONS = ["snappy", "gzip", "brotli", "lz4", "zstd"]


class ParquetExporter(SeriesExporter):
    """
    Columnar export with both ``elapsed_seconds`` and ``memory_kb``.

    An empty series produces an empty file that still carries the schema.
    """

    sink_name = "parquet"

    def __init__(self, compression: ParquetCompression = "snappy"):
        """
        Args:
            compression: Compression algorithm to use
        """
        self.compression = compression
        logger.debug(f"Initialized ParquetExporter with compression: {compression}")

    def _write(self, series: TimeSeriesStore, path: Path) -> None:
        series.to_dataframe().write_parquet(path, compression=self.compression)
