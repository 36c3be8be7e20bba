"""
Tests for the memory readers.

This module tests VmRSS parsing from /proc status content, the /proc based
reader against a fake proc tree, the psutil reader with psutil mocked out,
and the reader factory.
"""

from unittest.mock import Mock, patch

import psutil
import pytest

from memtracker.collectors import (
    ProcStatusReader,
    PsutilRssReader,
    create_memory_reader,
    parse_vmrss_kb,
)
from memtracker.validation import (
    MalformedStatusDataError,
    MemoryReadError,
    TargetUnavailableError,
)


class TestParseVmRss:
    """Test cases for parsing the VmRSS field."""

    def test_parses_vmrss_line(self, sample_status_text):
        assert parse_vmrss_kb(sample_status_text, pid=4242) == 10240

    def test_missing_field_is_malformed(self):
        content = "Name:\tkthreadd\nState:\tS (sleeping)\n"
        with pytest.raises(MalformedStatusDataError) as exc_info:
            parse_vmrss_kb(content, pid=2)
        assert exc_info.value.pid == 2
        assert "VmRSS not found" in str(exc_info.value)

    def test_non_integer_value_is_malformed(self):
        with pytest.raises(MalformedStatusDataError):
            parse_vmrss_kb("VmRSS:\t  12ab kB\n", pid=1)

    def test_negative_value_is_malformed(self):
        with pytest.raises(MalformedStatusDataError):
            parse_vmrss_kb("VmRSS:\t  -5 kB\n", pid=1)

    def test_bare_field_is_skipped(self):
        content = "VmRSS:\nVmRSS:\t 77 kB\n"
        assert parse_vmrss_kb(content, pid=1) == 77

    def test_similar_prefix_is_not_matched(self):
        content = "VmRSSX:\t 1 kB\nVmHWM:\t 2 kB\n"
        with pytest.raises(MalformedStatusDataError):
            parse_vmrss_kb(content, pid=1)

    def test_zero_is_valid(self):
        assert parse_vmrss_kb("VmRSS:\t       0 kB\n", pid=1) == 0


class TestProcStatusReader:
    """Test cases for the /proc status file reader."""

    def test_reads_from_status_file(self, proc_root, sample_status_text):
        root = proc_root(4242, sample_status_text)
        reader = ProcStatusReader(proc_root=root)

        assert reader.read_memory_kb(4242) == 10240
        assert reader.status_path(4242) == root / "4242" / "status"

    def test_missing_process_is_target_unavailable(self, proc_root):
        reader = ProcStatusReader(proc_root=proc_root.root)

        with pytest.raises(TargetUnavailableError) as exc_info:
            reader.read_memory_kb(999999)
        assert exc_info.value.pid == 999999

    def test_status_without_vmrss_is_malformed(self, proc_root):
        root = proc_root(7, "Name:\tzombie\nState:\tZ (zombie)\n")
        reader = ProcStatusReader(proc_root=root)

        with pytest.raises(MalformedStatusDataError):
            reader.read_memory_kb(7)

    @pytest.mark.parametrize("pid", [0, -1])
    def test_invalid_pid_is_target_unavailable(self, proc_root, pid):
        reader = ProcStatusReader(proc_root=proc_root.root)

        with pytest.raises(TargetUnavailableError):
            reader.read_memory_kb(pid)

    def test_failures_share_a_base_class(self, proc_root):
        reader = ProcStatusReader(proc_root=proc_root.root)

        with pytest.raises(MemoryReadError):
            reader.read_memory_kb(123456)


class TestPsutilRssReader:
    """Test cases for the psutil reader."""

    @patch("memtracker.collectors.psutil_rss.psutil.Process")
    def test_converts_bytes_to_kb(self, mock_process_class):
        mock_process_class.return_value.memory_info.return_value = Mock(rss=10 * 1024 * 1024 + 512)

        reader = PsutilRssReader()

        assert reader.read_memory_kb(1234) == 10 * 1024
        mock_process_class.assert_called_once_with(1234)

    @pytest.mark.parametrize(
        "error",
        [
            psutil.NoSuchProcess(1234),
            psutil.ZombieProcess(1234),
            psutil.AccessDenied(1234),
        ],
    )
    @patch("memtracker.collectors.psutil_rss.psutil.Process")
    def test_process_errors_are_target_unavailable(self, mock_process_class, error):
        mock_process_class.side_effect = error

        with pytest.raises(TargetUnavailableError):
            PsutilRssReader().read_memory_kb(1234)

    @patch("memtracker.collectors.psutil_rss.psutil.Process")
    def test_invalid_rss_is_malformed(self, mock_process_class):
        mock_process_class.return_value.memory_info.return_value = Mock(rss=None)

        with pytest.raises(MalformedStatusDataError):
            PsutilRssReader().read_memory_kb(1234)

    def test_reads_own_process(self):
        import os

        assert PsutilRssReader().read_memory_kb(os.getpid()) > 0


class TestReaderFactory:
    """Test cases for create_memory_reader."""

    def test_creates_proc_status_reader_by_default(self):
        reader = create_memory_reader()
        assert isinstance(reader, ProcStatusReader)
        assert reader.reader_type == "proc_status"

    def test_creates_psutil_reader(self):
        assert isinstance(create_memory_reader("psutil"), PsutilRssReader)

    def test_passes_kwargs_through(self, temp_dir):
        reader = create_memory_reader("proc_status", proc_root=temp_dir)
        assert reader.proc_root == temp_dir

    def test_unknown_type_raises(self):
        with pytest.raises(ValueError, match="Unknown memory reader type"):
            create_memory_reader("pidstat")
