"""
Validation and error handling for the memtracker package.

This module provides input validation and the exception taxonomy with
consistent error reporting across the application.
"""

from .exceptions import (
    ErrorSeverity,
    MalformedStatusDataError,
    MemoryReadError,
    OutputWriteError,
    TargetUnavailableError,
    ValidationError,
    handle_cli_error,
    handle_config_error,
    handle_error,
    handle_file_error,
)

from .validators import (
    validate_enum_choice,
    validate_output_path,
    validate_positive_integer,
)

__all__ = [
    # Exceptions
    "ErrorSeverity",
    "ValidationError",
    "MemoryReadError",
    "TargetUnavailableError",
    "MalformedStatusDataError",
    "OutputWriteError",
    # Error handling
    "handle_error",
    "handle_config_error",
    "handle_file_error",
    "handle_cli_error",
    # Validators
    "validate_enum_choice",
    "validate_output_path",
    "validate_positive_integer",
]
