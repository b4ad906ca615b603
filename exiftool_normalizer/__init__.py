"""Normalizers for raw image metadata.

This package maps the flat key/value output of metadata extraction tools
onto the canonical image metadata record: field names are translated and
aperture, exposure, focal length, focus distance, creation date and GPS
values are normalized.

Usage:
    from exiftool_normalizer import create_mapper

    mapper = create_mapper("exiftool", {"numeric_gps": False})
    canonical = mapper.map_record(raw_metadata)

    # Or, to collect validation issues instead of raising:
    result = mapper.normalize(raw_metadata)
"""

from typing import Any

from exiftool_normalizer.base import (
    MappingResult,
    MetadataMapper,
    ValidationIssue,
    ValidationResult,
    ValidationSeverity,
)
from exiftool_normalizer.errors import (
    InvalidExposureTimeError,
    MappingError,
    MissingGPSReferenceError,
)
from exiftool_normalizer.exiftool import ExiftoolMapper
from exiftool_normalizer.fields import CANONICAL_FIELDS, FIELD_MAP, ExifField
from exiftool_normalizer.validation import (
    validate_input_metadata,
    validate_output_metadata,
)

# Maps source_type string to mapper class
MAPPER_REGISTRY: dict[str, type[MetadataMapper]] = {
    "exiftool": ExiftoolMapper,
}


def create_mapper(
    source_type: str, config: dict[str, Any] | None = None
) -> MetadataMapper:
    """Factory function to create the appropriate mapper.

    Args:
        source_type: The mapper type identifier (e.g., "exiftool")
        config: Mapper configuration

    Returns:
        MetadataMapper instance configured for the specified source type

    Raises:
        ValueError: If source_type is not registered in MAPPER_REGISTRY
    """
    mapper_class = MAPPER_REGISTRY.get(source_type)

    if not mapper_class:
        available = ", ".join(sorted(MAPPER_REGISTRY.keys())) or "(none registered)"
        raise ValueError(
            f"Unknown source type: '{source_type}'. "
            f"Available mappers: {available}"
        )

    return mapper_class(config)


def register_mapper(source_type: str, mapper_class: type) -> None:
    """Register a new mapper type.

    Args:
        source_type: Unique identifier for this mapper type
        mapper_class: Class implementing the MetadataMapper interface

    Raises:
        TypeError: If mapper_class doesn't inherit from MetadataMapper
    """
    if not issubclass(mapper_class, MetadataMapper):
        raise TypeError(
            f"Mapper class must inherit from MetadataMapper, "
            f"got {mapper_class.__name__}"
        )
    MAPPER_REGISTRY[source_type] = mapper_class


__all__ = [
    "create_mapper",
    "register_mapper",
    "MAPPER_REGISTRY",
    "MetadataMapper",
    "ExiftoolMapper",
    "MappingResult",
    "ValidationResult",
    "ValidationIssue",
    "ValidationSeverity",
    "MappingError",
    "MissingGPSReferenceError",
    "InvalidExposureTimeError",
    "ExifField",
    "CANONICAL_FIELDS",
    "FIELD_MAP",
    "validate_input_metadata",
    "validate_output_metadata",
]
