"""GPS coordinate extraction and resolution for exiftool metadata.

exiftool reports latitude and longitude as unsigned magnitudes with separate
reference fields (N/S, E/W). Depending on how exiftool was invoked the
magnitudes are either decimal degrees (``-n``) or degree/minute/second
strings:

    GPSLatitude:     40 deg 42' 46.08"
    GPSLatitudeRef:  North

Resolution folds the two magnitudes and their references into a single
signed ``"<latitude>,<longitude>"`` value.
"""

import logging
import math
import re
from collections.abc import Mapping
from typing import Any

from exiftool_normalizer.errors import MissingGPSReferenceError
from exiftool_normalizer.fields import (
    GPS_LATITUDE,
    GPS_LATITUDE_REF,
    GPS_LONGITUDE,
    GPS_LONGITUDE_REF,
    ExifField,
)

logger = logging.getLogger(__name__)

# 40 deg 42' 46.08"
DMS_PATTERN = re.compile(r"^([0-9.]+) deg ([0-9.]+)' ([0-9.]+)\"")

# Significant digits kept when rendering a coordinate
COORDINATE_PRECISION = 14


def extract_decimal_coordinate(value: Any) -> float | None:
    """Parse a decimal-degree coordinate and drop its sign.

    Args:
        value: Decimal degrees, possibly signed (e.g., "-74.0060").

    Returns:
        Non-negative magnitude in degrees, or None if not a number.

    Examples:
        >>> extract_decimal_coordinate("-74.0060")
        74.006
    """
    if isinstance(value, bool) or value is None:
        return None
    try:
        magnitude = abs(float(value))
    except (TypeError, ValueError):
        return None
    return magnitude if math.isfinite(magnitude) else None


def extract_dms_coordinate(value: Any) -> float | None:
    """Parse a degree/minute/second coordinate into decimal degrees.

    Args:
        value: DMS string such as ``40 deg 42' 46.08"``.

    Returns:
        Decimal degrees, or None if the string is not in DMS notation.

    Examples:
        >>> round(extract_dms_coordinate("40 deg 42' 46.08\\""), 4)
        40.7128
    """
    if not isinstance(value, str):
        return None

    match = DMS_PATTERN.match(value)
    if not match:
        return None

    try:
        degrees, minutes, seconds = (float(part) for part in match.groups())
    except ValueError:
        # "1.2.3" satisfies the character class but is not a number
        return None

    return degrees + minutes / 60 + seconds / 3600


def extract_gps_coordinate(value: Any, numeric: bool = True) -> float | None:
    """Extract a coordinate magnitude in the configured notation."""
    if numeric:
        return extract_decimal_coordinate(value)
    return extract_dms_coordinate(value)


def format_coordinate(value: float) -> str:
    """Render a coordinate without exponent, grouping or locale formatting.

    Examples:
        >>> format_coordinate(-74.006)
        '-74.006'
        >>> format_coordinate(0.00005)
        '0.00005'
    """
    if value == 0:
        # Avoid "-0" for a southern or western zero
        value = 0.0

    text = f"{value:.{COORDINATE_PRECISION}g}"
    if "e" in text:
        text = f"{value:.{COORDINATE_PRECISION}f}".rstrip("0").rstrip(".")
    return text


def _reference_sign(raw_metadata: Mapping[str, Any], ref_field: str, negative: str) -> int:
    """Return -1 when the reference field points south or west, else 1.

    Raises:
        MissingGPSReferenceError: If the reference field is absent or empty.
    """
    reference = raw_metadata.get(ref_field)
    if reference is None or not str(reference).strip():
        raise MissingGPSReferenceError(ref_field)

    return -1 if str(reference).strip()[0].upper() == negative else 1


def resolve_gps(
    raw_metadata: Mapping[str, Any], mapped_metadata: dict[str, Any]
) -> dict[str, Any]:
    """Fold extracted latitude and longitude into the combined GPS field.

    The separate latitude and longitude entries never survive resolution:
    either both are present and parsed, and they are replaced by a single
    ``gps`` entry, or the pair is dropped.

    Args:
        raw_metadata: The raw exiftool record, read for the reference fields.
        mapped_metadata: The partially mapped record holding the extracted
            coordinate magnitudes under their exiftool names.

    Returns:
        The mapped record with GPS resolved.

    Raises:
        MissingGPSReferenceError: If both coordinates parsed but a reference
            field is missing.
    """
    latitude = mapped_metadata.pop(GPS_LATITUDE, None)
    longitude = mapped_metadata.pop(GPS_LONGITUDE, None)

    if latitude is None or longitude is None:
        if latitude is not None or longitude is not None:
            logger.debug(
                "Dropping incomplete GPS coordinate pair",
                extra={"has_latitude": latitude is not None, "has_longitude": longitude is not None},
            )
        return mapped_metadata

    latitude *= _reference_sign(raw_metadata, GPS_LATITUDE_REF, "S")
    longitude *= _reference_sign(raw_metadata, GPS_LONGITUDE_REF, "W")

    mapped_metadata[ExifField.GPS.value] = (
        f"{format_coordinate(latitude)},{format_coordinate(longitude)}"
    )
    return mapped_metadata
