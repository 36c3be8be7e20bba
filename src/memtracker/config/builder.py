"""
Builds a validated ``RunConfig`` from layered settings.

Precedence, highest first: command-line values, the ``[monitor]`` table of
the optional defaults file, built-in defaults. A ``None`` command-line value
means "not given" and falls through to the next layer.
"""

import logging
from typing import Any, Dict, Optional

from ..collectors.factory import READER_TYPES
from ..exporters.parquet_export import PARQUET_COMPRESSIONS
from ..models.config import (
    DEFAULT_INTERVAL_MS,
    DEFAULT_OUTPUT_PATH,
    DEFAULT_PARQUET_COMPRESSION,
    DEFAULT_READER_TYPE,
    RunConfig,
)
from ..validation import (
    ValidationError,
    validate_enum_choice,
    validate_output_path,
    validate_positive_integer,
)

logger = logging.getLogger(__name__)

CHART_SUFFIXES = [".png", ".jpg", ".jpeg", ".webp", ".svg", ".pdf", ".html"]

BUILTIN_DEFAULTS: Dict[str, Any] = {
    "interval_ms": DEFAULT_INTERVAL_MS,
    "output": DEFAULT_OUTPUT_PATH,
    "duration": 0,
    "csv_output": None,
    "parquet_output": None,
    "parquet_compression": DEFAULT_PARQUET_COMPRESSION,
    "reader": DEFAULT_READER_TYPE,
    "chart": True,
}


def merge_settings(
    cli_values: Dict[str, Any],
    file_values: Optional[Dict[str, Any]] = None,
) -> Dict[str, Any]:
    """
    Layer command-line values over file values over built-in defaults.
    """
    merged = dict(BUILTIN_DEFAULTS)
    merged.update(file_values or {})
    merged.update({key: value for key, value in cli_values.items() if value is not None})
    return merged


def build_run_config(
    pid: Any,
    cli_values: Dict[str, Any],
    file_values: Optional[Dict[str, Any]] = None,
) -> RunConfig:
    """
    Validate layered settings and assemble the run configuration.

    Args:
        pid: Target process identifier.
        cli_values: Settings from the command line (``None`` = not given).
        file_values: Settings from the ``[monitor]`` table of a defaults file.

    Returns:
        A validated ``RunConfig``.

    Raises:
        ValidationError: If any value is invalid.
    """
    settings = merge_settings(cli_values, file_values)

    duration = validate_positive_integer(settings["duration"], min_value=0, field_name="duration")

    chart = settings["chart"]
    if not isinstance(chart, bool):
        raise ValidationError(f"chart must be true or false, got {chart}", field_name="chart", value=chart)

    csv_output = settings["csv_output"]
    parquet_output = settings["parquet_output"]

    config = RunConfig(
        pid=validate_positive_integer(pid, min_value=1, field_name="pid"),
        interval_ms=validate_positive_integer(settings["interval_ms"], min_value=1, field_name="interval"),
        output_path=validate_output_path(
            settings["output"], field_name="output", allowed_suffixes=CHART_SUFFIXES
        ),
        max_duration_seconds=float(duration) if duration > 0 else None,
        csv_output_path=(
            validate_output_path(csv_output, field_name="csv_output")
            if csv_output is not None else None
        ),
        parquet_output_path=(
            validate_output_path(parquet_output, field_name="parquet_output")
            if parquet_output is not None else None
        ),
        parquet_compression=validate_enum_choice(
            settings["parquet_compression"], PARQUET_COMPRESSIONS, field_name="parquet_compression"
        ),
        reader_type=validate_enum_choice(settings["reader"], READER_TYPES, field_name="reader"),
        generate_chart=chart,
    )
    logger.debug(f"Built run configuration: {config}")
    return config
