"""
Result data models for a finished monitoring run.

This module defines the derived, read-only views produced once sampling has
ended: the statistical summary of the collected series, the controller states,
the chart axis ranges, and the overall outcome handed back to the caller.
"""

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Optional

from .samples import KB_PER_MB


class RunState(Enum):
    """States of the sampling controller."""

    RUNNING = "running"
    # The configured maximum duration elapsed.
    STOPPED_BY_DURATION = "stopped_by_duration"
    # The target process disappeared or its status could not be read.
    STOPPED_BY_TARGET_GONE = "stopped_by_target_gone"
    # An interrupt signal (SIGINT/SIGTERM) was received.
    STOPPED_BY_INTERRUPT = "stopped_by_interrupt"

    @property
    def is_terminal(self) -> bool:
        return self is not RunState.RUNNING


@dataclass(frozen=True)
class RunResult:
    """
    Statistical summary of a finished time series.

    All reductions are 0 when no samples were collected. Because 0 is also a
    legitimate reading, use ``has_data`` (or ``sample_count``) to tell an empty
    run from a process that reported 0 KB.
    """

    sample_count: int
    mean_kb: float
    median_kb: float
    max_kb: int
    min_kb: int

    @property
    def has_data(self) -> bool:
        return self.sample_count > 0

    @property
    def mean_mb(self) -> float:
        return self.mean_kb / KB_PER_MB

    @property
    def median_mb(self) -> float:
        return self.median_kb / KB_PER_MB

    @property
    def max_mb(self) -> float:
        return self.max_kb / KB_PER_MB

    @property
    def min_mb(self) -> float:
        return self.min_kb / KB_PER_MB


@dataclass(frozen=True)
class AxisRanges:
    """Chart axis bounds: time in seconds on x, memory in MB on y."""

    x_min: float
    x_max: float
    y_min: float
    y_max: float


@dataclass
class MonitoringOutcome:
    """
    Everything a finished run produced.

    Paths are None when the corresponding output was not requested or was
    skipped (e.g. no chart for an empty series).
    """

    pid: int
    final_state: RunState
    result: RunResult
    chart_path: Optional[Path] = None
    csv_path: Optional[Path] = None
    parquet_path: Optional[Path] = None
