"""
Tests for the command-line entry point.

The memory reader factory is patched so that runs are deterministic and do
not depend on a live process.
"""

from unittest.mock import patch

import pytest

from memtracker.cli.main import build_parser, main_cli


@pytest.fixture
def patched_reader(scripted_reader):
    """Patch the reader factory; yields the factory mock."""
    with patch("memtracker.cli.main.create_memory_reader") as factory:
        factory.return_value = scripted_reader([1024, 2048], exhausted_raises=True)
        yield factory


@pytest.fixture
def instant_sleep():
    """Make the interruptible wait return immediately."""
    with patch("threading.Event.wait", return_value=False):
        yield


class TestArgumentParsing:
    """Test cases for build_parser."""

    def test_defaults_are_none_so_file_settings_apply(self):
        args = build_parser().parse_args(["-p", "42"])

        assert args.pid == 42
        assert args.interval_ms is None
        assert args.output is None
        assert args.duration is None
        assert args.chart is None
        assert args.verbose is False

    def test_short_options(self):
        args = build_parser().parse_args(
            ["-p", "1", "-i", "200", "-o", "x.png", "-d", "5", "-c", "x.csv"]
        )

        assert args.interval_ms == 200
        assert args.output == "x.png"
        assert args.duration == 5
        assert args.csv_output == "x.csv"

    def test_no_chart(self):
        assert build_parser().parse_args(["-p", "1", "--no-chart"]).chart is False

    def test_missing_pid_is_a_usage_error(self, capsys):
        with pytest.raises(SystemExit) as exc_info:
            main_cli([])
        assert exc_info.value.code == 2

    def test_non_numeric_interval_is_a_usage_error(self, capsys):
        with pytest.raises(SystemExit) as exc_info:
            main_cli(["-p", "1", "-i", "fast"])
        assert exc_info.value.code == 2

    def test_unknown_reader_is_a_usage_error(self, capsys):
        with pytest.raises(SystemExit) as exc_info:
            main_cli(["-p", "1", "--reader", "pidstat"])
        assert exc_info.value.code == 2


class TestMainCli:
    """End-to-end runs through main_cli."""

    def test_run_writes_statistics_and_csv(self, patched_reader, instant_sleep, temp_dir, capsys):
        csv_path = temp_dir / "out.csv"

        main_cli(["-p", "4242", "--no-chart", "-c", str(csv_path)])

        patched_reader.assert_called_once_with("proc_status")
        assert csv_path.read_text().splitlines() == ["1024", "2048"]
        out = capsys.readouterr().out
        assert "Monitoring process 4242 with interval 1000ms" in out
        assert "Total samples: 2" in out
        assert "Max memory: 2048 KB (2.00 MB)" in out
        assert "CSV saved successfully!" in out

    def test_chart_written_as_html(self, patched_reader, instant_sleep, temp_dir, capsys):
        chart_path = temp_dir / "chart.html"

        main_cli(["-p", "4242", "-o", str(chart_path)])

        assert chart_path.exists()
        assert "Chart saved successfully!" in capsys.readouterr().out

    def test_zero_samples_exits_cleanly(self, scripted_reader, temp_dir, capsys):
        with patch("memtracker.cli.main.create_memory_reader") as factory:
            factory.return_value = scripted_reader([], exhausted_raises=True)
            main_cli(["-p", "4242", "-o", str(temp_dir / "chart.png")])

        out = capsys.readouterr().out
        assert "Total samples: 0" in out
        assert "No samples collected, skipping chart generation" in out
        assert not (temp_dir / "chart.png").exists()

    def test_zero_interval_exits_with_error(self, patched_reader, capsys):
        with pytest.raises(SystemExit) as exc_info:
            main_cli(["-p", "4242", "-i", "0"])

        assert exc_info.value.code == 1
        patched_reader.assert_not_called()

    def test_invalid_pid_exits_with_error(self, patched_reader, capsys):
        with pytest.raises(SystemExit) as exc_info:
            main_cli(["-p", "0"])
        assert exc_info.value.code == 1

    def test_unwritable_csv_exits_with_error(self, patched_reader, instant_sleep, temp_dir, capsys):
        with pytest.raises(SystemExit) as exc_info:
            main_cli(["-p", "4242", "--no-chart", "-c", str(temp_dir / "missing" / "m.csv")])

        assert exc_info.value.code == 1
        assert "Total samples: 2" in capsys.readouterr().out

    def test_defaults_file_is_applied(self, patched_reader, instant_sleep, temp_dir, capsys):
        csv_path = temp_dir / "from_file.csv"
        config_file = temp_dir / "memtracker.toml"
        config_file.write_text(
            "[monitor]\n"
            "interval_ms = 250\n"
            f"csv_output = '{csv_path.as_posix()}'\n"
            "reader = 'psutil'\n"
            "chart = false\n"
        )

        main_cli(["-p", "4242", "--config", str(config_file)])

        patched_reader.assert_called_once_with("psutil")
        assert csv_path.exists()
        assert "interval 250ms" in capsys.readouterr().out

    def test_command_line_beats_defaults_file(self, patched_reader, instant_sleep, temp_dir, capsys):
        config_file = temp_dir / "memtracker.toml"
        config_file.write_text("[monitor]\ninterval_ms = 250\nchart = false\n")

        main_cli(["-p", "4242", "-i", "50", "--config", str(config_file)])

        assert "interval 50ms" in capsys.readouterr().out

    def test_missing_defaults_file_exits_with_error(self, patched_reader, temp_dir, capsys):
        with pytest.raises(SystemExit) as exc_info:
            main_cli(["-p", "4242", "--config", str(temp_dir / "absent.toml")])
        assert exc_info.value.code == 1
