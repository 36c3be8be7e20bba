"""
Memory readers for the memtracker package.

This package contains the reader interface and its implementations:
- AbstractMemoryReader: Interface shared by all readers
- ProcStatusReader: Reads VmRSS from /proc/<pid>/status
- PsutilRssReader: Reads RSS through psutil
"""

from .base import AbstractMemoryReader
from .factory import READER_TYPES, create_memory_reader
from .proc_status import ProcStatusReader, parse_vmrss_kb
from .psutil_rss import PsutilRssReader

__all__ = [
    "AbstractMemoryReader",
    "ProcStatusReader",
    "PsutilRssReader",
    "READER_TYPES",
    "create_memory_reader",
    "parse_vmrss_kb",
]
