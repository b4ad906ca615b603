"""Date value converters for exiftool metadata."""

from datetime import datetime
from typing import Any

# exiftool's default date/time rendering
EXIFTOOL_DATE_FORMAT = "%Y:%m:%d %H:%M:%S"


def convert_create_date(value: Any) -> datetime | None:
    """Parse an exiftool date string such as "2015:03:22 14:30:00".

    Returns None rather than raising when the value does not match
    the exiftool format exactly.
    """
    if isinstance(value, datetime):
        return value
    if not isinstance(value, str):
        return None
    try:
        return datetime.strptime(value, EXIFTOOL_DATE_FORMAT)
    except ValueError:
        return None
