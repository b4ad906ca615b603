"""
Helper functions for configuration values and serialization.

Configuration may arrive as JSON booleans or as strings from Lambda
events and environment variables; canonical records may hold datetime
values, which JSON cannot encode.
"""

from datetime import datetime
from typing import Any

TRUE_STRINGS = frozenset({"1", "true", "yes", "on"})
FALSE_STRINGS = frozenset({"0", "false", "no", "off", ""})


def parse_bool(value: Any) -> bool:
    """
    Interpret a configuration flag.

    Args:
        value: bool, int, or string flag

    Returns:
        The flag as a bool

    Raises:
        ValueError: If a string is not a recognized boolean spelling

    Examples:
        >>> parse_bool("false")
        False
        >>> parse_bool(" Yes ")
        True
    """
    if isinstance(value, bool):
        return value

    if isinstance(value, str):
        text = value.strip().lower()
        if text in TRUE_STRINGS:
            return True
        if text in FALSE_STRINGS:
            return False
        raise ValueError(f"Cannot interpret {value!r} as a boolean flag")

    return bool(value)


def convert_datetime_objects(obj: Any) -> Any:
    """
    Convert datetime objects to ISO format strings.

    Recursively traverses the object and converts all datetime objects
    to ISO format strings.

    Args:
        obj: Object to transform

    Returns:
        Object with datetime objects converted to strings

    Examples:
        >>> from datetime import datetime
        >>> convert_datetime_objects({"creationdate": datetime(2015, 3, 22, 14, 30)})
        {'creationdate': '2015-03-22T14:30:00'}
    """
    if isinstance(obj, datetime):
        return obj.isoformat()

    if isinstance(obj, dict):
        return {key: convert_datetime_objects(value) for key, value in obj.items()}

    if isinstance(obj, list):
        return [convert_datetime_objects(item) for item in obj]

    # Pass through other types unchanged
    return obj
