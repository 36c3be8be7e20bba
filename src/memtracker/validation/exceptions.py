"""
Exception types and error handling helpers.

This module provides the error taxonomy used throughout the application,
together with a few helpers that log errors consistently before re-raising
or exiting.

Reader failures (``TargetUnavailableError``, ``MalformedStatusDataError``)
end a sampling run normally. Output failures (``OutputWriteError``) are hard
errors that end the process with a non-zero status.
"""

import logging
import sys
from enum import Enum
from pathlib import Path
from typing import Any, Optional, Union

logger = logging.getLogger(__name__)


class ErrorSeverity(Enum):
    """Severity levels for error handling."""
    DEBUG = "debug"
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ValidationError(Exception):
    """
    Exception raised when validation of a configuration value fails.
    """

    def __init__(self, message: str, field_name: Optional[str] = None,
                 value: Any = None, severity: ErrorSeverity = ErrorSeverity.ERROR):
        super().__init__(message)
        self.field_name = field_name
        self.value = value
        self.severity = severity


class MemoryReadError(Exception):
    """
    Base class for failures to read the resident memory of a process.

    Attributes:
        pid: The process identifier that was being read.
    """

    def __init__(self, message: str, pid: int):
        super().__init__(message)
        self.pid = pid


class TargetUnavailableError(MemoryReadError):
    """The process does not exist or its status cannot be read."""


class MalformedStatusDataError(MemoryReadError):
    """The status information lacks the memory field or it cannot be parsed."""


class OutputWriteError(Exception):
    """
    Raised when a report sink (chart or data export) cannot write its output.

    Attributes:
        path: The output path that could not be written.
        sink: Short name of the sink that failed (e.g. "chart", "csv").
    """

    def __init__(self, message: str, path: Union[str, Path], sink: str):
        super().__init__(message)
        self.path = Path(path)
        self.sink = sink


def handle_error(
    error: Exception,
    context: str,
    severity: Union[ErrorSeverity, str] = ErrorSeverity.ERROR,
    reraise: bool = True,
    logger: Optional[logging.Logger] = None
) -> None:
    """
    Handle errors with consistent logging and optional re-raising.

    Args:
        error: The exception that occurred
        context: Context description of where the error occurred
        severity: Severity level for logging
        reraise: Whether to re-raise the exception after logging
        logger: Logger instance to use (defaults to module logger)
    """
    effective_logger = logger or globals()['logger']

    error_msg = f"Error in {context}: {error}"

    if isinstance(severity, str):
        severity_str = severity.lower()
    else:
        severity_str = severity.value

    if severity_str == "debug":
        effective_logger.debug(error_msg, exc_info=True)
    elif severity_str == "info":
        effective_logger.info(error_msg)
    elif severity_str == "warning":
        effective_logger.warning(error_msg)
    elif severity_str == "error":
        effective_logger.error(error_msg)
    elif severity_str == "critical":
        effective_logger.critical(error_msg, exc_info=True)

    if reraise:
        raise error


def handle_config_error(error: Exception, context: str, **kwargs) -> None:
    """Handle configuration-related errors."""
    handle_error(error, f"config {context}", **kwargs)


def handle_file_error(error: Exception, context: str, **kwargs) -> None:
    """Handle file-related errors."""
    handle_error(error, f"file {context}", **kwargs)


def handle_cli_error(error: Exception, context: str, **kwargs) -> None:
    """Log a CLI-level error and exit the process."""
    exit_code = kwargs.pop('exit_code', 1)
    include_traceback = kwargs.pop('include_traceback', False)

    severity = kwargs.pop('severity', ErrorSeverity.ERROR)
    if include_traceback:
        severity = ErrorSeverity.CRITICAL
    handle_error(error, f"CLI {context}", severity=severity, reraise=False, **kwargs)

    sys.exit(exit_code)
