"""
Data models for the monitoring system.

Configuration Models:
- Settings for a single monitoring run

Sample Models:
- Individual (elapsed time, memory) observations

Result Models:
- Statistical summary, controller state, chart axis ranges and run outcome

All models use type hints and dataclasses.
"""

from .config import RunConfig
from .samples import KB_PER_MB, Sample
from .results import AxisRanges, MonitoringOutcome, RunResult, RunState

__all__ = [
    # Configuration
    "RunConfig",
    # Samples
    "KB_PER_MB",
    "Sample",
    # Results
    "AxisRanges",
    "MonitoringOutcome",
    "RunResult",
    "RunState",
]
