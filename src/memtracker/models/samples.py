"""
Sample data model.

A sample is a single (elapsed time, resident memory) observation taken at one
tick of the sampling loop.
"""

from dataclasses import dataclass

KB_PER_MB = 1024


@dataclass(frozen=True)
class Sample:
    """
    One memory observation.

    Attributes:
        elapsed_seconds: Seconds since the start of the run when the sample was taken.
        memory_kb: Resident memory of the target process in kilobytes.
    """

    elapsed_seconds: float
    memory_kb: int

    @property
    def memory_mb(self) -> float:
        """Resident memory in megabytes (KB / 1024)."""
        return self.memory_kb / KB_PER_MB
