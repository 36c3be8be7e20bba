"""
The sampling controller: run loop, stop conditions and finishing sequence.

``SamplingController`` drives a single monitoring run. Each tick it checks
for an interrupt and for the optional maximum duration, reads the target's
resident memory and appends it to the time series. Sampling ends in one of
three terminal states:

- ``STOPPED_BY_DURATION``: the configured maximum duration elapsed. No extra
  sample is taken after the cutoff check.
- ``STOPPED_BY_TARGET_GONE``: the memory reader failed. Both reader failure
  kinds (process gone, malformed status data) are treated as definitive, with
  no retry.
- ``STOPPED_BY_INTERRUPT``: ``request_shutdown()`` was called, typically from a
  SIGINT/SIGTERM handler.

Whatever the terminal state, ``finish()`` then computes the statistics,
renders the chart when samples exist, and writes any configured exports.
Output failures raise ``OutputWriteError``.
"""

import logging
import threading
import time
from pathlib import Path
from typing import Callable, Optional

from ..collectors.base import AbstractMemoryReader
from ..exporters import create_exporter
from ..models.config import RunConfig
from ..models.results import MonitoringOutcome, RunResult, RunState
from ..plotter import generate_chart
from ..storage import TimeSeriesStore
from ..validation import MemoryReadError, OutputWriteError
from .reporter import ConsoleReporter

logger = logging.getLogger(__name__)

ChartRenderer = Callable[[TimeSeriesStore, Path, RunResult], Path]


class SamplingController:
    """
    Owns one monitoring run: one target process, one pass.

    Attributes:
        config: Settings for this run.
        reader: Source of memory readings.
        series: Samples collected so far, in time order.
        state: Current controller state.
    """

    def __init__(
        self,
        config: RunConfig,
        reader: AbstractMemoryReader,
        reporter: Optional[ConsoleReporter] = None,
        clock: Callable[[], float] = time.monotonic,
        sleep: Optional[Callable[[float], object]] = None,
        chart_renderer: Optional[ChartRenderer] = None,
    ):
        """
        Args:
            config: Run settings.
            reader: Memory reader used for every tick.
            reporter: Console output; a stdout reporter is created when omitted.
            clock: Monotonic clock returning seconds.
            sleep: Called with the interval in seconds between ticks. Defaults to
                an interruptible wait on the shutdown event.
            chart_renderer: Chart sink; defaults to ``plotter.generate_chart``.
        """
        self.config = config
        self.reader = reader
        self.reporter = reporter or ConsoleReporter()
        self.series = TimeSeriesStore()
        self.state = RunState.RUNNING
        self.shutdown_requested = threading.Event()

        self._clock = clock
        self._sleep = sleep if sleep is not None else self.shutdown_requested.wait
        self._chart_renderer = chart_renderer or generate_chart

    def request_shutdown(self) -> None:
        """Ask the loop to stop at its next check. Safe to call from a signal handler."""
        self.shutdown_requested.set()

    def _stop(self, state: RunState) -> None:
        logger.info(f"Sampling of PID {self.config.pid} ended: {state.value}")
        self.state = state

    def sample(self) -> RunState:
        """
        Run the sampling loop until a terminal state is reached.

        Returns:
            The terminal state.
        """
        if self.state.is_terminal:
            raise RuntimeError(f"Sampling already finished ({self.state.value})")

        max_duration = self.config.max_duration_seconds
        interval = self.config.interval_seconds
        start = self._clock()
        logger.info(
            f"Starting sampling of PID {self.config.pid} with "
            f"{self.reader.__class__.__name__}, interval {interval}s"
        )

        while True:
            if self.shutdown_requested.is_set():
                self.reporter.interrupted()
                self._stop(RunState.STOPPED_BY_INTERRUPT)
                break

            elapsed = self._clock() - start
            if max_duration is not None and elapsed >= max_duration:
                self.reporter.duration_reached()
                self._stop(RunState.STOPPED_BY_DURATION)
                break

            try:
                memory_kb = self.reader.read_memory_kb(self.config.pid)
            except MemoryReadError as e:
                # TargetUnavailableError and MalformedStatusDataError end the run alike.
                logger.warning(f"{type(e).__name__} while reading PID {self.config.pid}: {e}")
                self.reporter.target_gone(self.config.pid, e)
                self._stop(RunState.STOPPED_BY_TARGET_GONE)
                break

            sample = self.series.append(elapsed, memory_kb)
            self.reporter.progress(sample)

            self._sleep(interval)

        logger.info(f"Collected {len(self.series)} samples")
        return self.state

    def finish(self) -> MonitoringOutcome:
        """
        Produce statistics and outputs from the collected series.

        Returns:
            The run outcome.

        Raises:
            OutputWriteError: If the chart or an export cannot be written.
        """
        result = self.series.summarize()
        self.reporter.statistics(result)
        outcome = MonitoringOutcome(pid=self.config.pid, final_state=self.state, result=result)

        if not self.config.generate_chart:
            self.reporter.chart_skipped("Chart disabled")
        elif not result.has_data:
            self.reporter.chart_skipped("No samples collected")
        else:
            self.reporter.chart_started(self.config.output_path)
            try:
                outcome.chart_path = self._chart_renderer(
                    self.series, self.config.output_path, result
                )
            except OutputWriteError as e:
                self.reporter.output_failed("chart", e)
                raise
            self.reporter.chart_saved()

        if self.config.csv_output_path is not None:
            outcome.csv_path = self._export("csv", self.config.csv_output_path)

        if self.config.parquet_output_path is not None:
            outcome.parquet_path = self._export("parquet", self.config.parquet_output_path)

        return outcome

    def _export(self, sink: str, path: Path) -> Path:
        exporter = create_exporter(sink, compression=self.config.parquet_compression)
        self.reporter.export_started(sink, path)
        try:
            written = exporter.export(self.series, path)
        except OutputWriteError as e:
            self.reporter.output_failed(sink, e)
            raise
        self.reporter.export_saved(sink)
        return written

    def run(self) -> MonitoringOutcome:
        """Sample until a terminal state, then run the finishing sequence."""
        self.reporter.run_started(self.config)
        self.sample()
        return self.finish()
