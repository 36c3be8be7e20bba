"""
Console reporting for a monitoring run.

The reporter owns everything printed for the user: the run banner, the
single progress line that is rewritten on every sample, the stop notice,
the final statistics block and the outcome of each output sink. Diagnostic
detail goes through ``logging`` instead.
"""

import logging
import sys
from pathlib import Path
from typing import IO, Optional

from ..models.config import RunConfig
from ..models.results import RunResult
from ..models.samples import Sample

logger = logging.getLogger(__name__)


class ConsoleReporter:
    """
    Writes human-readable run output to a text stream (stdout by default).
    """

    def __init__(self, stream: Optional[IO[str]] = None):
        self.stream = stream if stream is not None else sys.stdout
        self._progress_active = False

    def _write(self, text: str) -> None:
        self.stream.write(text)
        self.stream.flush()

    def _line(self, text: str = "") -> None:
        # Terminate a pending progress line before printing anything else.
        if self._progress_active:
            self._write("\n")
            self._progress_active = False
        self._write(f"{text}\n")

    def run_started(self, config: RunConfig) -> None:
        self._line(f"Monitoring process {config.pid} with interval {config.interval_ms}ms")
        if config.max_duration_seconds is not None:
            self._line(f"Duration: {config.max_duration_seconds:g} seconds")
        else:
            self._line("Duration: until process exits")

    def progress(self, sample: Sample) -> None:
        self._write(
            f"\rTime: {sample.elapsed_seconds:.1f}s | "
            f"Memory: {sample.memory_kb} KB ({sample.memory_mb:.2f} MB)"
        )
        self._progress_active = True

    def duration_reached(self) -> None:
        self._line("Reached maximum duration")

    def target_gone(self, pid: int, error: Exception) -> None:
        self._line(f"Process {pid} no longer exists or is not accessible: {error}")

    def interrupted(self) -> None:
        self._line("Interrupted, stopping early")

    def statistics(self, result: RunResult) -> None:
        self._line()
        self._line("Generating statistics...")
        self._line(f"Total samples: {result.sample_count}")
        self._line(f"Mean memory: {result.mean_kb:.2f} KB ({result.mean_mb:.2f} MB)")
        self._line(f"Median memory: {result.median_kb:.2f} KB ({result.median_mb:.2f} MB)")
        self._line(f"Max memory: {result.max_kb} KB ({result.max_mb:.2f} MB)")
        self._line(f"Min memory: {result.min_kb} KB ({result.min_mb:.2f} MB)")

    def chart_started(self, path: Path) -> None:
        self._line()
        self._line(f"Generating chart: {path}")

    def chart_saved(self) -> None:
        self._line("Chart saved successfully!")

    def chart_skipped(self, reason: str) -> None:
        self._line()
        self._line(f"{reason}, skipping chart generation")

    def export_started(self, sink: str, path: Path) -> None:
        self._line()
        self._line(f"Saving memory data to {sink.upper()}: {path}")

    def export_saved(self, sink: str) -> None:
        self._line(f"{sink.upper()} saved successfully!")

    def output_failed(self, sink: str, error: Exception) -> None:
        self._line(f"Failed to write {sink} output: {error}")
