"""Validation utilities for exiftool metadata normalization.

Validation is advisory: it reports on the shape of a raw record before
mapping and on the canonical record afterwards. The only blocking input
error is a record that is not a mapping.

Key Functions:
    validate_input_metadata: Validate a raw exiftool record
    validate_output_metadata: Validate a canonical record
"""

import re
from collections.abc import Mapping
from typing import Any

from exiftool_normalizer.base import ValidationResult
from exiftool_normalizer.fields import (
    CANONICAL_FIELDS,
    FIELD_MAP,
    GPS_LATITUDE,
    GPS_LATITUDE_REF,
    GPS_LONGITUDE,
    GPS_LONGITUDE_REF,
    ExifField,
)

# Combined GPS value (e.g., "40.7128,-74.006")
GPS_VALUE_PATTERN = re.compile(r"^-?\d+(?:\.\d+)?,-?\d+(?:\.\d+)?$")


def validate_input_metadata(
    raw_metadata: Mapping[str, Any],
    config: dict[str, Any] | None = None,
) -> ValidationResult:
    """Validate a raw exiftool record before mapping.

    Args:
        raw_metadata: Raw record as parsed from exiftool output
        config: Mapper configuration (currently unused by the checks)

    Returns:
        ValidationResult with is_valid=False if the record cannot be mapped
    """
    result = ValidationResult(is_valid=True)

    if raw_metadata is None:
        result.add_error(
            field_path="root",
            message="Metadata is None - expected a mapping",
        )
        return result

    if not isinstance(raw_metadata, Mapping):
        result.add_error(
            field_path="root",
            message=f"Metadata must be a mapping, got {type(raw_metadata).__name__}",
            source_value=type(raw_metadata).__name__,
        )
        return result

    if not raw_metadata:
        result.add_warning(
            field_path="root",
            message="Empty metadata received - no fields present",
        )
        return result

    if not any(name in FIELD_MAP for name in raw_metadata):
        result.add_warning(
            field_path="root",
            message="No recognized exiftool fields - canonical record will be empty",
        )

    _validate_gps_fields(raw_metadata, result)

    return result


def _validate_gps_fields(
    raw_metadata: Mapping[str, Any], result: ValidationResult
) -> None:
    has_latitude = GPS_LATITUDE in raw_metadata
    has_longitude = GPS_LONGITUDE in raw_metadata

    if has_latitude != has_longitude:
        present = GPS_LATITUDE if has_latitude else GPS_LONGITUDE
        result.add_warning(
            field_path=present,
            message="Incomplete GPS coordinate pair - GPS will be omitted",
            source_value=raw_metadata[present],
        )
        return

    if not has_latitude:
        return

    for ref_field in (GPS_LATITUDE_REF, GPS_LONGITUDE_REF):
        reference = raw_metadata.get(ref_field)
        if reference is None or not str(reference).strip():
            result.add_warning(
                field_path=ref_field,
                message="GPS reference field is missing - coordinates cannot be signed",
            )


def validate_output_metadata(mapped_metadata: dict[str, Any]) -> ValidationResult:
    """Validate a canonical record produced by a mapper.

    Args:
        mapped_metadata: Canonical record

    Returns:
        ValidationResult listing non-canonical keys, unset creation dates
        and malformed GPS values
    """
    result = ValidationResult(is_valid=True)

    for key in mapped_metadata:
        if key not in CANONICAL_FIELDS:
            result.add_error(
                field_path=str(key),
                message="Field is not part of the canonical vocabulary",
            )

    creation_date = ExifField.CREATION_DATE.value
    if creation_date in mapped_metadata and mapped_metadata[creation_date] is None:
        result.add_warning(
            field_path=creation_date,
            message="Creation date could not be parsed",
        )

    gps = mapped_metadata.get(ExifField.GPS.value)
    if gps is not None and not GPS_VALUE_PATTERN.match(str(gps)):
        result.add_error(
            field_path=ExifField.GPS.value,
            message="GPS value must be formatted as '<latitude>,<longitude>'",
            source_value=gps,
        )

    return result
