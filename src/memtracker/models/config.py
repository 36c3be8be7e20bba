"""
Run configuration data model.

``RunConfig`` is produced by the configuration layer (command line plus the
optional TOML defaults file) and consumed by the sampling controller.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

DEFAULT_INTERVAL_MS = 1000
DEFAULT_OUTPUT_PATH = "memory_usage.png"
DEFAULT_READER_TYPE = "proc_status"
DEFAULT_PARQUET_COMPRESSION = "snappy"


@dataclass
class RunConfig:
    """
    Settings for a single monitoring run.
    """

    # Identifier of the process to monitor.
    pid: int
    # Time between two samples, in milliseconds.
    interval_ms: int = DEFAULT_INTERVAL_MS
    # Where the chart image is written.
    output_path: Path = Path(DEFAULT_OUTPUT_PATH)
    # Maximum run duration in seconds. None runs until the target exits.
    max_duration_seconds: Optional[float] = None
    # Optional CSV export of the memory values.
    csv_output_path: Optional[Path] = None
    # Optional Parquet export of the full (time, memory) series.
    parquet_output_path: Optional[Path] = None
    parquet_compression: str = DEFAULT_PARQUET_COMPRESSION
    # Which memory reader implementation to use ("proc_status" or "psutil").
    reader_type: str = DEFAULT_READER_TYPE
    # Set to False to skip chart rendering entirely.
    generate_chart: bool = True

    @property
    def interval_seconds(self) -> float:
        """The sampling interval in seconds."""
        return self.interval_ms / 1000.0

    @property
    def is_unbounded(self) -> bool:
        """True when the run only ends when the target process goes away."""
        return self.max_duration_seconds is None
