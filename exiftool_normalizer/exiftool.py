"""Mapper for metadata produced by exiftool.

exiftool emits one flat record per image, keyed by its own tag names:

    {
        "Aperture": "2.8",
        "ExposureTime": "0.008",
        "FocalLength": "50.0 mm",
        "CreateDate": "2015:03:22 14:30:00",
        "GPSLatitude": "40.7128",
        "GPSLatitudeRef": "N",
        "GPSLongitude": "-74.0060",
        "GPSLongitudeRef": "W",
        ...
    }

ExiftoolMapper translates the tag names it knows into canonical field names,
normalizes the values that need it and folds the GPS fields into a single
``gps`` entry. Unknown tags are dropped.

Configuration:
    numeric_gps: True when exiftool ran with ``-n`` and reports GPS as
        decimal degrees, False for degree/minute/second strings
        (default True)
    include_raw_source: Whether normalize() keeps the raw record in its
        result (default False)
"""

import json
import logging
import time
from collections.abc import Callable, Mapping
from typing import Any

from typing_extensions import override

from exiftool_normalizer.base import MappingResult, MetadataMapper, ValidationResult
from exiftool_normalizer.errors import MappingError
from exiftool_normalizer.field_mappers import map_dates, map_exposure, map_gps
from exiftool_normalizer.fields import (
    APERTURE,
    APPROXIMATE_FOCUS_DISTANCE,
    CREATE_DATE,
    EXPOSURE_TIME,
    FIELD_MAP,
    FOCAL_LENGTH,
    GPS_LATITUDE,
    GPS_LONGITUDE,
    ExifField,
)
from exiftool_normalizer.helpers import parse_bool
from exiftool_normalizer.validation import (
    validate_input_metadata,
    validate_output_metadata,
)

logger = logging.getLogger(__name__)


def _get_size_bytes(data: Mapping[str, Any] | None) -> int:
    """Calculate the approximate size of a record in bytes."""
    if data is None:
        return 0
    try:
        return len(json.dumps(data, default=str).encode("utf-8"))
    except (TypeError, ValueError):
        return 0


class ExiftoolMapper(MetadataMapper):
    """Maps raw exiftool records to canonical image metadata records.

    Example:
        >>> mapper = ExiftoolMapper({"numeric_gps": True})
        >>> mapper.map_record({"Aperture": "2", "Model": "X100V", "Foo": "bar"})
        {'aperture': 'f/2.0', 'camera': 'X100V'}
    """

    def __init__(self, config: dict[str, Any] | None = None):
        super().__init__(config)

        self._numeric: bool = parse_bool(self.config.get("numeric_gps", True))
        self._include_raw_source: bool = parse_bool(
            self.config.get("include_raw_source", False)
        )
        self._converters: dict[str, Callable[[Any], Any]] = {
            APERTURE: map_exposure.convert_aperture,
            APPROXIMATE_FOCUS_DISTANCE: map_exposure.convert_focus_distance,
            CREATE_DATE: map_dates.convert_create_date,
            EXPOSURE_TIME: map_exposure.convert_exposure_time,
            FOCAL_LENGTH: map_exposure.convert_focal_length,
            GPS_LATITUDE: self._extract_gps_coordinate,
            GPS_LONGITUDE: self._extract_gps_coordinate,
        }

    @property
    def numeric(self) -> bool:
        """Whether GPS coordinates are parsed as decimal degrees."""
        return self._numeric

    def configure(self, numeric_gps: bool) -> "ExiftoolMapper":
        """Set the GPS parsing mode.

        Args:
            numeric_gps: True for decimal degrees, False for DMS strings

        Returns:
            This mapper, for chaining
        """
        self._numeric = parse_bool(numeric_gps)
        return self

    @override
    def get_source_type(self) -> str:
        return "exiftool"

    @override
    def validate_input(self, raw_metadata: Mapping[str, Any]) -> ValidationResult:
        return validate_input_metadata(raw_metadata, self.config)

    @override
    def map_record(self, raw_metadata: Mapping[str, Any]) -> dict[str, Any]:
        """Map a raw exiftool record to a canonical record.

        Fields are processed in record order. When two exiftool fields share
        a canonical name (Caption and Caption-Abstract), the later one wins.

        Args:
            raw_metadata: Raw exiftool record

        Returns:
            Canonical record. An unparsable creation date is kept as None;
            an incomplete or unparsable coordinate pair is omitted.

        Raises:
            MissingGPSReferenceError: If a parsed coordinate pair has no
                reference field.
            InvalidExposureTimeError: If the exposure time is zero.
        """
        mapped_metadata: dict[str, Any] = {}

        for field_name, value in raw_metadata.items():
            key = FIELD_MAP.get(field_name)
            if key is None:
                continue

            converter = self._converters.get(field_name)
            if converter is not None:
                value = converter(value)

            mapped_metadata[key] = value

        return map_gps.resolve_gps(raw_metadata, mapped_metadata)

    @override
    def normalize(self, raw_metadata: Mapping[str, Any]) -> MappingResult:
        """Validate and map a raw record, reporting instead of raising.

        Performance metrics are logged including duration in milliseconds
        and input/output sizes in bytes.
        """
        start_time = time.perf_counter()
        input_size_bytes = _get_size_bytes(raw_metadata)
        raw_source = (
            dict(raw_metadata)
            if self._include_raw_source and isinstance(raw_metadata, Mapping)
            else None
        )

        validation = self.validate_input(raw_metadata)

        if not validation.is_valid:
            duration_ms = (time.perf_counter() - start_time) * 1000
            logger.debug(
                "Mapping failed validation",
                extra={
                    "duration_ms": round(duration_ms, 3),
                    "input_size_bytes": input_size_bytes,
                    "success": False,
                    "error_count": len(validation.errors),
                },
            )
            return MappingResult(
                success=False, validation=validation, raw_source=raw_source
            )

        try:
            mapped_metadata = self.map_record(raw_metadata)
        except MappingError as e:
            duration_ms = (time.perf_counter() - start_time) * 1000
            logger.warning(
                "Mapping failed with contract violation",
                extra={
                    "duration_ms": round(duration_ms, 3),
                    "input_size_bytes": input_size_bytes,
                    "success": False,
                    "error": str(e),
                },
            )
            validation.add_error(
                field_path="mapping",
                message=f"Mapping failed: {e}",
            )
            return MappingResult(
                success=False, validation=validation, raw_source=raw_source
            )

        if (
            GPS_LATITUDE in raw_metadata
            and GPS_LONGITUDE in raw_metadata
            and ExifField.GPS.value not in mapped_metadata
        ):
            validation.add_warning(
                field_path=ExifField.GPS.value,
                message="GPS coordinates could not be parsed - GPS omitted",
                source_value=f"{raw_metadata[GPS_LATITUDE]},{raw_metadata[GPS_LONGITUDE]}",
            )

        output_validation = validate_output_metadata(mapped_metadata)
        validation.merge(output_validation)

        duration_ms = (time.perf_counter() - start_time) * 1000
        logger.info(
            "Mapping completed",
            extra={
                "duration_ms": round(duration_ms, 3),
                "input_size_bytes": input_size_bytes,
                "output_size_bytes": _get_size_bytes(mapped_metadata),
                "field_count": len(mapped_metadata),
                "success": True,
                "warning_count": len(validation.warnings),
            },
        )

        return MappingResult(
            success=True,
            normalized_metadata=mapped_metadata,
            validation=validation,
            raw_source=raw_source,
        )

    def _extract_gps_coordinate(self, value: Any) -> float | None:
        return map_gps.extract_gps_coordinate(value, numeric=self._numeric)
