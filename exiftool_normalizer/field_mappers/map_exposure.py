"""Exposure-related value converters for exiftool metadata.

exiftool reports lens and exposure settings as plain numbers or as numbers
followed by a unit. These converters bring them into the display formats
used by the canonical record:

- Aperture: ``"2.8"`` → ``"f/2.8"``
- Exposure time: ``"0.008"`` → ``"1/125"``
- Focal length: ``"50.0 mm"`` → ``50``
- Approximate focus distance: ``"1.5"`` → ``"1.5m"``

Every converter returns None when its input is not a number.
"""

import math
from typing import Any

from exiftool_normalizer.errors import InvalidExposureTimeError


def _to_float(value: Any) -> float | None:
    """Parse a raw exiftool value as a float.

    Args:
        value: String or numeric value from the raw record.

    Returns:
        The parsed float, or None if the value is not a number.
    """
    if isinstance(value, bool) or value is None:
        return None
    if isinstance(value, (int, float)):
        return float(value)
    try:
        return float(str(value).strip())
    except ValueError:
        return None


def convert_aperture(value: Any) -> str | None:
    """Format an f-number with exactly one fractional digit.

    Args:
        value: Aperture value as reported by exiftool.

    Returns:
        Aperture string such as "f/2.0", or None if invalid.

    Examples:
        >>> convert_aperture("2")
        'f/2.0'
        >>> convert_aperture("1.8")
        'f/1.8'
    """
    f_number = _to_float(value)
    if f_number is None:
        return None
    return f"f/{f_number:.1f}"


def convert_focus_distance(value: Any) -> str:
    """Append the metre unit to a focus distance without reformatting it.

    Examples:
        >>> convert_focus_distance("1.5")
        '1.5m'
    """
    return f"{value}m"


def convert_exposure_time(value: Any) -> str | None:
    """Convert an exposure time in seconds to a "1/N" shutter speed.

    The reciprocal is rounded half away from zero.

    Args:
        value: Exposure time in seconds (e.g., "0.01").

    Returns:
        Shutter speed string such as "1/100", or None if invalid.

    Raises:
        InvalidExposureTimeError: If the exposure time is zero.

    Examples:
        >>> convert_exposure_time("0.01")
        '1/100'
        >>> convert_exposure_time("0.0125")
        '1/80'
    """
    seconds = _to_float(value)
    if seconds is None or not math.isfinite(seconds):
        return None
    if seconds == 0:
        raise InvalidExposureTimeError(value)

    reciprocal = 1 / seconds
    if not math.isfinite(reciprocal):
        # subnormal exposure times overflow
        return None
    denominator = math.floor(abs(reciprocal) + 0.5)
    if reciprocal < 0:
        denominator = -denominator
    return f"1/{denominator}"


def convert_focal_length(value: Any) -> int | None:
    """Convert a focal length with an optional unit to whole millimetres.

    Only the token before the first space is parsed; the unit and anything
    after it are discarded.

    Args:
        value: Focal length such as "50 mm" or "200".

    Returns:
        Focal length as an integer, or None if invalid.

    Examples:
        >>> convert_focal_length("50 mm")
        50
        >>> convert_focal_length("200")
        200
    """
    if isinstance(value, int) and not isinstance(value, bool):
        return value

    token = str(value).strip().split(" ", 1)[0]
    try:
        return int(float(token))
    except (ValueError, OverflowError):
        return None
