"""
Memory reader implementation using the 'psutil' library.

This reader works wherever psutil supports ``memory_info()``, which makes it
the portable alternative to the ``/proc`` based reader.
"""

import logging

import psutil

from ..validation import MalformedStatusDataError, TargetUnavailableError
from .base import AbstractMemoryReader

logger = logging.getLogger(__name__)


class PsutilRssReader(AbstractMemoryReader):
    """
    Reads the resident set size (RSS) of a process through psutil.
    """

    reader_type = "psutil"

    def _read_kb(self, pid: int) -> int:
        try:
            mem_info = psutil.Process(pid).memory_info()
        except (psutil.NoSuchProcess, psutil.AccessDenied) as e:
            # ZombieProcess is a subclass of NoSuchProcess.
            raise TargetUnavailableError(
                f"Process {pid} is not accessible: {e}", pid=pid
            ) from e

        rss = getattr(mem_info, "rss", None)
        if not isinstance(rss, int) or rss < 0:
            raise MalformedStatusDataError(
                f"psutil returned an invalid RSS value for PID {pid}: {rss!r}", pid=pid
            )
        return rss // 1024
