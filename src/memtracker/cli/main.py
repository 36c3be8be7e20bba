"""
Command-line interface for the memtracker application.

This module parses the command line, merges it with the optional TOML
defaults file, wires up logging and signal handling, and runs one monitoring
pass against the requested process.

Exit status is 0 on a clean finish (including runs that collected no
samples) and non-zero on invalid arguments or when an output file cannot be
written.
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from ..collectors import READER_TYPES, create_memory_reader
from ..config import build_run_config, load_monitor_defaults
from ..exporters import PARQUET_COMPRESSIONS
from ..monitoring import ConsoleReporter, SamplingController, SignalHandler
from ..validation import OutputWriteError, ValidationError, handle_cli_error

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s [%(levelname)-5.5s] %(name)s:%(filename)s:%(lineno)d\t %(message)s"


def setup_logging(verbose: bool = False) -> None:
    """
    Configure root logging on stderr; stdout is reserved for run output.
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format=LOG_FORMAT,
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stderr,
        force=True,
    )


def build_parser() -> argparse.ArgumentParser:
    """Create the argument parser. Optional values default to None so file defaults can apply."""
    parser = argparse.ArgumentParser(
        prog="memtracker",
        description="Track memory usage of a process and generate statistics.",
    )
    parser.add_argument("-p", "--pid", type=int, required=True, help="Process ID to monitor")
    parser.add_argument(
        "-i",
        "--interval",
        type=int,
        dest="interval_ms",
        help="Sampling interval in milliseconds (default: 1000)",
    )
    parser.add_argument(
        "-o",
        "--output",
        type=str,
        help="Output chart path; '.html' writes an interactive chart (default: memory_usage.png)",
    )
    parser.add_argument(
        "-d",
        "--duration",
        type=int,
        help="Duration to monitor in seconds, 0 = until process exits (default: 0)",
    )
    parser.add_argument(
        "-c",
        "--csv-output",
        type=str,
        help="Optional file path to save memory values as CSV, one value per line",
    )
    parser.add_argument(
        "--parquet-output",
        type=str,
        help="Optional file path to save the full (time, memory) series as Parquet",
    )
    parser.add_argument(
        "--parquet-compression",
        choices=PARQUET_COMPRESSIONS,
        help="Compression for the Parquet export (default: snappy)",
    )
    parser.add_argument(
        "--reader",
        choices=READER_TYPES,
        help="How memory is read: /proc status file or psutil (default: proc_status)",
    )
    parser.add_argument(
        "--no-chart",
        action="store_false",
        dest="chart",
        default=None,
        help="Skip chart generation",
    )
    parser.add_argument(
        "--config",
        type=Path,
        help="TOML file with a [monitor] table of default settings",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable debug logging"
    )
    return parser


def main_cli(argv: Optional[List[str]] = None) -> None:
    """
    Main command-line entry point.

    Args:
        argv: Argument list; defaults to ``sys.argv[1:]``.

    Raises:
        SystemExit: On invalid arguments or configuration (status 1, or 2 for
            usage errors) and when an output file cannot be written (status 1).
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(args.verbose)

    file_values = None
    if args.config is not None:
        try:
            file_values = load_monitor_defaults(args.config)
        except Exception as e:
            handle_cli_error(
                error=e,
                context="defaults file loading",
                exit_code=1,
                logger=logger,
            )

    cli_values = {
        "interval_ms": args.interval_ms,
        "output": args.output,
        "duration": args.duration,
        "csv_output": args.csv_output,
        "parquet_output": args.parquet_output,
        "parquet_compression": args.parquet_compression,
        "reader": args.reader,
        "chart": args.chart,
    }
    try:
        config = build_run_config(args.pid, cli_values, file_values)
    except ValidationError as e:
        handle_cli_error(
            error=e,
            context="argument validation",
            exit_code=1,
            logger=logger,
        )

    reader = create_memory_reader(config.reader_type)
    controller = SamplingController(config, reader, reporter=ConsoleReporter())

    try:
        with SignalHandler(controller):
            outcome = controller.run()
    except OutputWriteError as e:
        handle_cli_error(
            error=e,
            context=f"{e.sink} output",
            exit_code=1,
            logger=logger,
        )

    logger.info(
        f"Run for PID {outcome.pid} finished ({outcome.final_state.value}) "
        f"with {outcome.result.sample_count} samples"
    )


if __name__ == "__main__":
    main_cli()
