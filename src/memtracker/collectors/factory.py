"""
Factory for creating memory reader instances.
"""

import logging
from typing import List

from .base import AbstractMemoryReader

logger = logging.getLogger(__name__)

READER_TYPES: List[str] = ["proc_status", "psutil"]


def create_memory_reader(reader_type: str = "proc_status", **kwargs) -> AbstractMemoryReader:
    """
    Create a memory reader based on the configured type.

    Args:
        reader_type: "proc_status" (Linux ``/proc``) or "psutil" (portable)
        **kwargs: Passed through to the reader constructor

    Returns:
        Memory reader instance

    Raises:
        ValueError: If the reader type is unknown
    """
    if reader_type == "proc_status":
        from .proc_status import ProcStatusReader

        logger.debug("Creating ProcStatusReader")
        return ProcStatusReader(**kwargs)
    elif reader_type == "psutil":
        from .psutil_rss import PsutilRssReader

        logger.debug("Creating PsutilRssReader")
        return PsutilRssReader(**kwargs)
    else:
        raise ValueError(f"Unknown memory reader type: {reader_type}")
