"""
CSV export of the memory readings.

The file holds one memory value (KB) per line in time order, newline
terminated, with no header. The elapsed time column is not written.
"""

import logging
from pathlib import Path

from ..storage import TimeSeriesStore
from .base import SeriesExporter

logger = logging.getLogger(__name__)


class CsvExporter(SeriesExporter):
    """Writes memory values only, one per line."""

    sink_name = "csv"

    def _write(self, series: TimeSeriesStore, path: Path) -> None:
        # TODO: add an opt-in elapsed_seconds column once downstream consumers
        # of the single-column format have been checked.
        df = series.to_dataframe().select("memory_kb")
        df.write_csv(path, include_header=False, line_terminator="\n")
