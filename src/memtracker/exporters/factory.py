"""
Factory for creating exporter instances.
"""

import logging
from typing import Literal

from .base import SeriesExporter
from .csv_export import CsvExporter
from .parquet_export import ParquetCompression, ParquetExporter

logger = logging.getLogger(__name__)


def create_exporter(
    format_type: Literal["csv", "parquet"],
    compression: ParquetCompression = "snappy",
) -> SeriesExporter:
    """
    Create an exporter for the given format.

    Args:
        format_type: Export format ('csv' or 'parquet')
        compression: Compression algorithm (for Parquet only)

    Returns:
        SeriesExporter instance

    Raises:
        ValueError: If an unsupported format type is specified
    """
    if format_type == "csv":
        logger.debug("Creating CsvExporter")
        return CsvExporter()
    elif format_type == "parquet":
        logger.debug(f"Creating ParquetExporter with compression: {compression}")
        return ParquetExporter(compression=compression)
    else:
        raise ValueError(f"Unsupported export format: {format_type}")
