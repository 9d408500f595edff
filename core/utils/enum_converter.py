"""
Enum conversion utilities.

Standardized conversion between enums and strings, with case-insensitive
parsing and fallback defaults.
"""

from typing import Any, Type, TypeVar

T = TypeVar("T")


def parse_enum(value: Any, enum_class: Type[T], default: T, normalize: bool = True) -> T:
    """
    Parse value to enum with fallback to default.

    Args:
        value: Value to parse (string, enum, or None)
        enum_class: Enum class to parse to
        default: Default enum value if parsing fails
        normalize: Whether to lowercase string before parsing

    Returns:
        Parsed enum value or default

    Example:
        >>> parse_enum("REFLECT", EdgePolicy, EdgePolicy.CONSTANT)
        >>> # Returns EdgePolicy.REFLECT
    """
    if isinstance(value, enum_class):
        return value

    if value is None:
        return default

    try:
        str_value = value.strip().lower() if normalize else value
        return enum_class(str_value)
    except (ValueError, AttributeError):
        return default


def enum_to_string(value: Any) -> str:
    """
    Convert enum to string value, or pass through if already string.

    Example:
        >>> enum_to_string(ContainerFormat.UNKNOWN)
        >>> # Returns "unknown"
    """
    return value.value if hasattr(value, "value") else value
