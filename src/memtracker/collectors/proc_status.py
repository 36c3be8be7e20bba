"""
Memory reader backed by the Linux ``/proc/<pid>/status`` file.

The ``VmRSS:`` line of the status file reports the resident set size in
kilobytes, e.g. ``VmRSS:	   10240 kB``.
"""

import logging
from pathlib import Path
from typing import Union

from ..validation import MalformedStatusDataError, TargetUnavailableError
from .base import AbstractMemoryReader

logger = logging.getLogger(__name__)

VMRSS_FIELD = "VmRSS:"


def parse_vmrss_kb(content: str, pid: int) -> int:
    """
    Extract the VmRSS value (KB) from the text of a status file.

    Args:
        content: Full text of ``/proc/<pid>/status``.
        pid: Process id, used for error reporting.

    Returns:
        The resident set size in kilobytes.

    Raises:
        MalformedStatusDataError: If no usable ``VmRSS:`` line is present, or
            its value is not a non-negative integer.
    """
    for line in content.splitlines():
        if not line.startswith(VMRSS_FIELD):
            continue
        parts = line.split()
        if len(parts) < 2:
            # A bare "VmRSS:" line counts as missing; keep scanning.
            continue
        try:
            memory_kb = int(parts[1])
        except ValueError:
            raise MalformedStatusDataError(
                f"Failed to parse memory value: {parts[1]}", pid=pid
            )
        if memory_kb < 0:
            raise MalformedStatusDataError(
                f"Negative memory value: {parts[1]}", pid=pid
            )
        return memory_kb

    raise MalformedStatusDataError(f"VmRSS not found in /proc/{pid}/status", pid=pid)


class ProcStatusReader(AbstractMemoryReader):
    """
    Reads resident memory from ``/proc/<pid>/status``.

    Kernel threads and zombie processes have no ``VmRSS:`` line; for those the
    reader raises ``MalformedStatusDataError``.
    """

    reader_type = "proc_status"

    def __init__(self, proc_root: Union[str, Path] = "/proc", **kwargs):
        """
        Args:
            proc_root: Mount point of the proc filesystem. Overridable for tests.
        """
        super().__init__(**kwargs)
        self.proc_root = Path(proc_root)

    def status_path(self, pid: int) -> Path:
        return self.proc_root / str(pid) / "status"

    def _read_kb(self, pid: int) -> int:
        status_path = self.status_path(pid)
        try:
            content = status_path.read_text(encoding="utf-8", errors="replace")
        except OSError as e:
            # FileNotFoundError, PermissionError and ProcessLookupError all land here.
            raise TargetUnavailableError(f"Failed to read {status_path}: {e}", pid=pid) from e
        return parse_vmrss_kb(content, pid)
