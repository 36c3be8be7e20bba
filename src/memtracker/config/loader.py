"""
Configuration file loading utilities.

This module handles the low-level loading and parsing of the optional TOML
defaults file. The file holds a single ``[monitor]`` table, e.g.::

    [monitor]
    interval_ms = 500
    output = "rss.png"
    duration = 60
    csv_output = "rss.csv"
    reader = "psutil"
"""

import logging
import tomllib
from pathlib import Path
from typing import Any, Dict

from ..validation import ErrorSeverity, ValidationError, handle_config_error

logger = logging.getLogger(__name__)

KNOWN_MONITOR_KEYS = {
    "interval_ms",
    "output",
    "duration",
    "csv_output",
    "parquet_output",
    "parquet_compression",
    "reader",
    "chart",
}


def load_toml_file(file_path: Path, description: str = "configuration file") -> Dict[str, Any]:
    """
    Load and parse a TOML file with error handling.

    Args:
        file_path: Path to the TOML file to load
        description: Human-readable description for error messages

    Returns:
        Parsed TOML data as a dictionary

    Raises:
        FileNotFoundError: If the file doesn't exist
        tomllib.TOMLDecodeError: If the file is malformed
    """
    logger.info(f"Loading {description} from: {file_path}")

    if not file_path.exists():
        logger.error(f"{description} not found: {file_path}")
        raise FileNotFoundError(f"{description} not found: {file_path}")

    try:
        with open(file_path, "rb") as f:
            return tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        handle_config_error(
            error=e,
            context=f"parsing {description}",
            severity=ErrorSeverity.CRITICAL,
            reraise=True,
            logger=logger
        )
        raise


def load_monitor_defaults(config_path: Path) -> Dict[str, Any]:
    """
    Load the ``[monitor]`` table of a defaults file.

    Unknown keys are logged and ignored.

    Args:
        config_path: Path to the TOML defaults file

    Returns:
        The monitor settings found in the file (possibly empty)

    Raises:
        ValidationError: If ``[monitor]`` is present but is not a table
    """
    data = load_toml_file(config_path, "defaults file")
    monitor_data = data.get("monitor", {})
    if not isinstance(monitor_data, dict):
        raise ValidationError(
            "[monitor] must be a table in the defaults file",
            field_name="monitor",
            value=monitor_data
        )

    unknown = sorted(set(monitor_data) - KNOWN_MONITOR_KEYS)
    if unknown:
        logger.warning(f"Ignoring unknown keys in [monitor] of {config_path}: {', '.join(unknown)}")

    return {key: value for key, value in monitor_data.items() if key in KNOWN_MONITOR_KEYS}
