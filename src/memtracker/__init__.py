"""
memtracker: Process memory tracking and reporting tool.

This package samples the resident memory of a single running process at a
fixed interval, computes summary statistics once sampling ends, and renders
a time-series chart with optional data exports.

The package is organized into specialized modules:
- models: Data structures for samples, run settings and results
- storage: Append-only time series with statistical reductions
- collectors: Memory readers (/proc status file, psutil)
- monitoring: Sampling controller, console reporting, signal handling
- exporters: CSV and Parquet data export
- plotter: Chart rendering with Plotly
- config: Defaults file loading and run configuration building
- validation: Exception taxonomy and input validation
- cli: Command-line interface

Usage:
    From command line:
        memtracker --pid 1234 --duration 60 --csv-output rss.csv

    Programmatically:
        from memtracker import RunConfig, SamplingController, create_memory_reader
        config = RunConfig(pid=1234, max_duration_seconds=60)
        controller = SamplingController(config, create_memory_reader())
        outcome = controller.run()
"""

from .cli import main_cli
from .collectors import AbstractMemoryReader, create_memory_reader
from .config import build_run_config
from .models import MonitoringOutcome, RunConfig, RunResult, RunState, Sample
from .monitoring import SamplingController
from .storage import TimeSeriesStore
from .validation import (
    MalformedStatusDataError,
    MemoryReadError,
    OutputWriteError,
    TargetUnavailableError,
    ValidationError,
)

__version__ = "1.0.0"

__all__ = [
    # Main interfaces
    "main_cli",
    "SamplingController",
    "TimeSeriesStore",
    "build_run_config",
    "create_memory_reader",
    "AbstractMemoryReader",
    # Models
    "MonitoringOutcome",
    "RunConfig",
    "RunResult",
    "RunState",
    "Sample",
    # Errors
    "MemoryReadError",
    "TargetUnavailableError",
    "MalformedStatusDataError",
    "OutputWriteError",
    "ValidationError",
]
