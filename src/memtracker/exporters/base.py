"""
Abstract base class for series exporters.

An exporter takes a finished ``TimeSeriesStore`` and writes it to a file. Any
failure to write is a hard error reported as ``OutputWriteError``.
"""

import logging
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Union

from ..storage import TimeSeriesStore
from ..validation import OutputWriteError

logger = logging.getLogger(__name__)


class SeriesExporter(ABC):
    """Abstract base class for data export implementations."""

    #: Short sink name used in messages and in ``OutputWriteError.sink``.
    sink_name: str = "export"

    def export(self, series: TimeSeriesStore, path: Union[str, Path]) -> Path:
        """
        Write the series to ``path``.

        Args:
            series: The finished time series
            path: File path to write to

        Returns:
            The path that was written

        Raises:
            OutputWriteError: If the file cannot be written
        """
        output_path = Path(path)
        try:
            self._write(series, output_path)
        except Exception as e:
            logger.error(f"Failed to write {self.sink_name} file {output_path}: {e}")
            raise OutputWriteError(
                f"Failed to write {self.sink_name} file: {output_path}: {e}",
                path=output_path,
                sink=self.sink_name,
            ) from e

        logger.debug(f"Wrote {len(series)} samples to {output_path}")
        return output_path

    @abstractmethod
    def _write(self, series: TimeSeriesStore, path: Path) -> None:
        """
        Implementation hook that performs the actual write.

        Args:
            series: The finished time series
            path: File path to write to
        """
        pass
