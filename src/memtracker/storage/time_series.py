"""
Append-only time series of memory samples.

``TimeSeriesStore`` holds the samples of one monitoring run in the order they
were taken and computes summary statistics on demand. Statistics are always
recomputed from the full series; nothing is maintained incrementally.

Every reduction returns 0 for an empty series. ``summarize()`` bundles the
reductions into a ``RunResult`` whose ``sample_count`` disambiguates an empty
series from a real 0 KB reading.
"""

import logging
from typing import Iterator, List, Tuple

import polars as pl

from ..models.results import RunResult
from ..models.samples import Sample

logger = logging.getLogger(__name__)

SERIES_SCHEMA = {"elapsed_seconds": pl.Float64, "memory_kb": pl.UInt64}


class TimeSeriesStore:
    """
    Ordered collection of ``Sample`` objects for a single run.

    Samples are appended in chronological order and never modified or
    removed, so the primary sequence never needs re-sorting.
    """

    def __init__(self) -> None:
        self._samples: List[Sample] = []

    def append(self, elapsed_seconds: float, memory_kb: int) -> Sample:
        """Record a new observation and return it."""
        sample = Sample(elapsed_seconds=elapsed_seconds, memory_kb=memory_kb)
        self._samples.append(sample)
        return sample

    def __len__(self) -> int:
        return len(self._samples)

    def __iter__(self) -> Iterator[Sample]:
        return iter(self._samples)

    def __bool__(self) -> bool:
        return bool(self._samples)

    @property
    def samples(self) -> Tuple[Sample, ...]:
        """Read-only snapshot of the samples in insertion order."""
        return tuple(self._samples)

    def memory_values(self) -> List[int]:
        """Memory readings (KB) in time order."""
        return [sample.memory_kb for sample in self._samples]

    def elapsed_times(self) -> List[float]:
        """Elapsed times (seconds) in time order."""
        return [sample.elapsed_seconds for sample in self._samples]

    def mean(self) -> float:
        if not self._samples:
            return 0.0
        return sum(self.memory_values()) / len(self._samples)

    def median(self) -> float:
        """
        Median of the memory readings.

        Works on a sorted copy so the time-ordered series is left untouched.
        For an even count this is the average of the values at indices
        n/2 - 1 and n/2.
        """
        if not self._samples:
            return 0.0
        values = sorted(self.memory_values())
        mid = len(values) // 2
        if len(values) % 2 == 0:
            return (values[mid - 1] + values[mid]) / 2
        return float(values[mid])

    def max(self) -> int:
        return max(self.memory_values(), default=0)

    def min(self) -> int:
        return min(self.memory_values(), default=0)

    def last_elapsed_time(self) -> float:
        """Elapsed time of the final sample, or 0 when empty."""
        if not self._samples:
            return 0.0
        return self._samples[-1].elapsed_seconds

    def summarize(self) -> RunResult:
        """Compute all statistics over the current series."""
        result = RunResult(
            sample_count=len(self._samples),
            mean_kb=self.mean(),
            median_kb=self.median(),
            max_kb=self.max(),
            min_kb=self.min(),
        )
        logger.debug(f"Summarized {result.sample_count} samples: {result}")
        return result

    def to_dataframe(self) -> pl.DataFrame:
        """
        Return the series as a Polars DataFrame.

        Columns are ``elapsed_seconds`` (Float64) and ``memory_kb`` (UInt64),
        in insertion order. An empty store yields an empty frame with the same
        schema.
        """
        return pl.DataFrame(
            {
                "elapsed_seconds": self.elapsed_times(),
                "memory_kb": self.memory_values(),
            },
            schema=SERIES_SCHEMA,
        )
