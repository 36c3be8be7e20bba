"""
Validation functions for configuration values.

These are used by the configuration builder to check values coming from the
command line and from the optional TOML defaults file.
"""

from pathlib import Path
from typing import Any, List, Optional, Union

from .exceptions import ValidationError


def validate_positive_integer(
    value: Any,
    min_value: int = 1,
    max_value: Optional[int] = None,
    field_name: str = "value"
) -> int:
    """
    Validate that a value is an integer within the given bounds.

    Args:
        value: Value to validate
        min_value: Minimum allowed value (inclusive)
        max_value: Maximum allowed value (inclusive), None for no limit
        field_name: Name of the field being validated

    Returns:
        Validated integer value

    Raises:
        ValidationError: If validation fails
    """
    if isinstance(value, bool):
        raise ValidationError(
            f"{field_name} must be a valid integer, got {value}",
            field_name=field_name,
            value=value
        )
    try:
        int_value = int(value)
    except (ValueError, TypeError):
        raise ValidationError(
            f"{field_name} must be a valid integer, got {value}",
            field_name=field_name,
            value=value
        )
    if isinstance(value, float) and not value.is_integer():
        raise ValidationError(
            f"{field_name} must be a whole number, got {value}",
            field_name=field_name,
            value=value
        )
    if int_value < min_value:
        raise ValidationError(
            f"{field_name} must be >= {min_value}, got {int_value}",
            field_name=field_name,
            value=value
        )
    if max_value is not None and int_value > max_value:
        raise ValidationError(
            f"{field_name} must be <= {max_value}, got {int_value}",
            field_name=field_name,
            value=value
        )
    return int_value


def validate_enum_choice(
    value: Any,
    choices: List[str],
    field_name: str = "value",
    case_sensitive: bool = True
) -> str:
    """
    Validate that a value is one of the allowed choices.

    Args:
        value: Value to validate
        choices: List of allowed choices
        field_name: Name of the field being validated
        case_sensitive: Whether the comparison should be case-sensitive

    Returns:
        Validated choice, in the spelling used by ``choices``

    Raises:
        ValidationError: If value is not in choices
    """
    str_value = str(value)

    if case_sensitive:
        if str_value not in choices:
            raise ValidationError(
                f"{field_name} must be one of {choices}, got {value}",
                field_name=field_name,
                value=value
            )
        return str_value

    lower_choices = [choice.lower() for choice in choices]
    lower_value = str_value.lower()
    if lower_value not in lower_choices:
        raise ValidationError(
            f"{field_name} must be one of {choices}, got {value}",
            field_name=field_name,
            value=value
        )
    return choices[lower_choices.index(lower_value)]


def validate_output_path(
    path: Union[str, Path, None],
    field_name: str = "output_path",
    allowed_suffixes: Optional[List[str]] = None,
) -> Path:
    """
    Validate an output file path.

    The path must be non-empty and must not name an existing directory. When
    ``allowed_suffixes`` is given, the file suffix must be one of them
    (compared case-insensitively).

    Raises:
        ValidationError: If the path is unusable as an output file
    """
    if path is None or not str(path).strip():
        raise ValidationError(
            f"{field_name} must be a non-empty path",
            field_name=field_name,
            value=path
        )

    output_path = Path(path)
    if output_path.is_dir():
        raise ValidationError(
            f"{field_name} points to a directory: {output_path}",
            field_name=field_name,
            value=str(path)
        )

    if allowed_suffixes is not None:
        suffix = output_path.suffix.lower()
        if suffix not in allowed_suffixes:
            raise ValidationError(
                f"{field_name} must end with one of {allowed_suffixes}, got '{output_path.name}'",
                field_name=field_name,
                value=str(path)
            )
    return output_path
