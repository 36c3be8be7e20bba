"""
Pytest configuration and shared fixtures for the memtracker test suite.

This module provides common fixtures, fake collaborators (reader, clock)
and test utilities for all test modules.
"""

import io
import sys
import tempfile
import shutil
from pathlib import Path
from typing import List, Sequence, Union

import pytest

# Add src to Python path for testing
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from memtracker.collectors.base import AbstractMemoryReader  # noqa: E402
from memtracker.models import RunConfig  # noqa: E402
from memtracker.monitoring import ConsoleReporter  # noqa: E402
from memtracker.validation import TargetUnavailableError  # noqa: E402


# ============================================================================
# Test Configuration
# ============================================================================


def pytest_configure(config):
    """Configure pytest with custom markers and settings."""
    config.addinivalue_line("markers", "unit: mark test as a unit test")
    config.addinivalue_line("markers", "integration: mark test as an integration test")
    config.addinivalue_line("markers", "slow: mark test as slow running")


# ============================================================================
# Fake Collaborators
# ============================================================================


class FakeClock:
    """
    Deterministic monotonic clock.

    ``sleep`` advances the clock instead of blocking, so a controller using
    both runs instantly while still seeing time pass.
    """

    def __init__(self, start: float = 100.0, read_cost: float = 0.0):
        self.now = start
        self.read_cost = read_cost
        self.sleeps: List[float] = []

    def __call__(self) -> float:
        return self.now

    def sleep(self, seconds: float) -> None:
        self.sleeps.append(seconds)
        self.now += seconds


class ScriptedReader(AbstractMemoryReader):
    """
    Memory reader that replays a script of results.

    Each script entry is either a KB value to return or an exception to raise.
    Once the script is exhausted the reader keeps returning the last value,
    or raises ``TargetUnavailableError`` if ``exhausted_raises`` is set.
    """

    reader_type = "scripted"

    def __init__(
        self,
        script: Sequence[Union[int, Exception]],
        exhausted_raises: bool = False,
        clock: FakeClock = None,
    ):
        super().__init__()
        self.script = list(script)
        self.exhausted_raises = exhausted_raises
        self.clock = clock
        self.calls: List[int] = []

    def _read_kb(self, pid: int) -> int:
        self.calls.append(pid)
        if self.clock is not None:
            self.clock.now += self.clock.read_cost

        index = len(self.calls) - 1
        if index >= len(self.script):
            if self.exhausted_raises or not self.script:
                raise TargetUnavailableError(f"Process {pid} exited", pid=pid)
            entry = self.script[-1]
        else:
            entry = self.script[index]

        if isinstance(entry, Exception):
            raise entry
        return entry


# ============================================================================
# Core Fixtures
# ============================================================================


@pytest.fixture
def temp_dir():
    """Create a temporary directory for test files."""
    temp_path = tempfile.mkdtemp()
    yield Path(temp_path)
    shutil.rmtree(temp_path, ignore_errors=True)


@pytest.fixture
def fake_clock():
    """A fake clock starting at an arbitrary non-zero instant."""
    return FakeClock()


@pytest.fixture
def console_output():
    """In-memory stream for capturing reporter output."""
    return io.StringIO()


@pytest.fixture
def reporter(console_output):
    """Console reporter writing into ``console_output``."""
    return ConsoleReporter(stream=console_output)


@pytest.fixture
def run_config(temp_dir):
    """
    Factory for RunConfig objects with test-friendly defaults.

    Chart rendering is disabled unless explicitly requested.
    """

    def _make(**overrides) -> RunConfig:
        values = {
            "pid": 4242,
            "interval_ms": 1000,
            "output_path": temp_dir / "memory_usage.png",
            "generate_chart": False,
        }
        values.update(overrides)
        return RunConfig(**values)

    return _make


@pytest.fixture
def proc_root(temp_dir):
    """
    Factory for a fake /proc tree.

    Call with (pid, status_text) to create ``<root>/<pid>/status``.
    """
    root = temp_dir / "proc"
    root.mkdir()

    def _write_status(pid: int, content: str) -> Path:
        pid_dir = root / str(pid)
        pid_dir.mkdir(exist_ok=True)
        status = pid_dir / "status"
        status.write_text(content)
        return root

    _write_status.root = root
    return _write_status


SAMPLE_STATUS = """Name:\tpython3
Umask:\t0022
State:\tS (sleeping)
Tgid:\t4242
Pid:\t4242
VmPeak:\t  231640 kB
VmSize:\t  231640 kB
VmHWM:\t   12044 kB
VmRSS:\t   10240 kB
RssAnon:\t    5120 kB
Threads:\t1
"""


@pytest.fixture
def sample_status_text():
    """Realistic /proc/<pid>/status content with VmRSS of 10240 kB."""
    return SAMPLE_STATUS


@pytest.fixture
def scripted_reader():
    """Factory for ``ScriptedReader`` instances."""
    return ScriptedReader
