"""
Defines the abstract interface for memory readers.

A memory reader answers one question: how many kilobytes of resident memory
does process ``pid`` hold right now? Implementations either return a
non-negative integer or raise a ``MemoryReadError`` subclass:

- ``TargetUnavailableError`` when the process does not exist or cannot be
  inspected.
- ``MalformedStatusDataError`` when the status information is present but
  lacks a usable memory value.

The sampling controller depends only on this interface, so tests can substitute
a deterministic fake reader.
"""

import logging
from abc import ABC, abstractmethod

from ..validation import TargetUnavailableError

logger = logging.getLogger(__name__)


class AbstractMemoryReader(ABC):
    """
    Abstract base class for memory readers.

    Subclasses implement ``_read_kb``; ``read_memory_kb`` performs the shared
    pid check before delegating.
    """

    #: Short identifier used in configuration and log messages.
    reader_type: str = "abstract"

    def __init__(self, **kwargs):
        self.reader_kwargs = kwargs
        logger.debug(f"Initializing {self.__class__.__name__} with extra_args: {kwargs}")

    def read_memory_kb(self, pid: int) -> int:
        """
        Read the current resident memory of a process.

        Args:
            pid: Process identifier (positive integer).

        Returns:
            Resident memory in kilobytes.

        Raises:
            TargetUnavailableError: If the process cannot be found or inspected.
            MalformedStatusDataError: If the memory value is missing or invalid.
        """
        if pid < 1:
            raise TargetUnavailableError(f"Invalid process id: {pid}", pid=pid)
        return self._read_kb(pid)

    @abstractmethod
    def _read_kb(self, pid: int) -> int:
        """Implementation hook: read resident memory (KB) for a valid pid."""
        pass
