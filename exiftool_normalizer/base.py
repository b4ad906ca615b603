"""Base interfaces for raw metadata mappers.

This module defines the abstract base class and data structures shared by
mappers that turn a metadata tool's raw key/value output into the canonical
image metadata record.

Key Classes:
    MetadataMapper: Abstract base class for all mappers
    ValidationResult: Result of input or output validation
    ValidationIssue: Individual validation issue (warning or error)
    MappingResult: Complete result of a normalize() call
"""

from abc import ABC, abstractmethod
from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class ValidationSeverity(Enum):
    """How a validation issue affects normalize().

    WARNING: reported alongside the canonical record
    ERROR: the record is not mapped (input) or is flagged (output)
    """

    WARNING = "warning"
    ERROR = "error"


@dataclass
class ValidationIssue:
    """One finding about a raw or canonical record.

    ``field_path`` names the exiftool field (``GPSLatitudeRef``), the
    canonical field (``creationdate``) or a pseudo-path such as ``root``
    or ``mapping`` for findings about the record as a whole.
    """

    severity: ValidationSeverity
    field_path: str
    message: str
    source_value: Any | None = None

    @property
    def is_error(self) -> bool:
        return self.severity is ValidationSeverity.ERROR

    def to_dict(self) -> dict[str, Any]:
        """Serialize the issue, omitting an unset source value."""
        data: dict[str, Any] = {
            "severity": self.severity.value,
            "field_path": self.field_path,
            "message": self.message,
        }
        if self.source_value is not None:
            data["source_value"] = self.source_value
        return data


@dataclass
class ValidationResult:
    """Accumulated findings of input and output validation.

    Attributes:
        is_valid: False once a blocking error has been added
        issues: Findings in the order they were recorded
    """

    is_valid: bool
    issues: list[ValidationIssue] = field(default_factory=list)

    @property
    def warnings(self) -> list[ValidationIssue]:
        return [issue for issue in self.issues if not issue.is_error]

    @property
    def errors(self) -> list[ValidationIssue]:
        return [issue for issue in self.issues if issue.is_error]

    def add_warning(
        self, field_path: str, message: str, source_value: Any | None = None
    ) -> None:
        """Record a finding that does not stop mapping."""
        self._add(ValidationSeverity.WARNING, field_path, message, source_value)

    def add_error(
        self, field_path: str, message: str, source_value: Any | None = None
    ) -> None:
        """Record a finding that stops mapping."""
        self._add(ValidationSeverity.ERROR, field_path, message, source_value)

    def merge(self, other: "ValidationResult", blocking: bool = False) -> None:
        """Append another result's findings to this one.

        Output validation runs after the canonical record exists, so its
        errors are reported without invalidating the result unless
        ``blocking`` is set.
        """
        self.issues.extend(other.issues)
        if blocking and not other.is_valid:
            self.is_valid = False

    def _add(
        self,
        severity: ValidationSeverity,
        field_path: str,
        message: str,
        source_value: Any | None,
    ) -> None:
        self.issues.append(ValidationIssue(severity, field_path, message, source_value))
        if severity is ValidationSeverity.ERROR:
            self.is_valid = False

    def to_dict(self) -> dict[str, Any]:
        errors = self.errors
        return {
            "is_valid": self.is_valid,
            "issues": [issue.to_dict() for issue in self.issues],
            "warning_count": len(self.issues) - len(errors),
            "error_count": len(errors),
        }


@dataclass
class MappingResult:
    """Result of the normalize() process.

    Attributes:
        success: True if mapping completed successfully
        normalized_metadata: The canonical record (if successful)
        validation: Validation result with any warnings or errors
        raw_source: Original raw record for debugging (if configured)
        schema_version: Version of the canonical schema produced
    """

    success: bool
    normalized_metadata: dict[str, Any] | None = None
    validation: ValidationResult = field(
        default_factory=lambda: ValidationResult(is_valid=True)
    )
    raw_source: dict[str, Any] | None = None
    schema_version: str = "1.0.0"

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization.

        Datetime values in normalized_metadata are left untouched; see
        helpers.convert_datetime_objects for a JSON-safe form.
        """
        result: dict[str, Any] = {
            "success": self.success,
            "schema_version": self.schema_version,
            "validation": self.validation.to_dict(),
        }

        if self.normalized_metadata is not None:
            result["normalized_metadata"] = self.normalized_metadata

        if self.raw_source is not None:
            result["raw_source"] = self.raw_source

        return result


class MetadataMapper(ABC):
    """Abstract base class for tool-specific metadata mappers.

    A mapper translates the raw field names of one metadata extraction tool
    into canonical field names and normalizes the values that need it.

    Example:
        class MyToolMapper(MetadataMapper):
            def get_source_type(self) -> str:
                return "my_tool"

            def validate_input(self, raw_metadata) -> ValidationResult:
                ...

            def map_record(self, raw_metadata) -> dict[str, Any]:
                ...

    Attributes:
        config: Configuration dictionary
    """

    config: dict[str, Any]

    def __init__(self, config: dict[str, Any] | None = None):
        self.config = config or {}

    @abstractmethod
    def get_source_type(self) -> str:
        """Return the source type identifier used by the mapper registry."""

    @abstractmethod
    def validate_input(self, raw_metadata: Mapping[str, Any]) -> ValidationResult:
        """Check a raw record before mapping.

        Args:
            raw_metadata: Raw record from the extraction tool

        Returns:
            ValidationResult with is_valid=False if mapping must not proceed
        """

    @abstractmethod
    def map_record(self, raw_metadata: Mapping[str, Any]) -> dict[str, Any]:
        """Transform one raw record into one canonical record.

        Args:
            raw_metadata: Raw record from the extraction tool

        Returns:
            Canonical record keyed by canonical field name
        """

    @abstractmethod
    def normalize(self, raw_metadata: Mapping[str, Any]) -> MappingResult:
        """Validate, map and report on one raw record.

        Unlike map_record, contract violations are reported in the
        returned MappingResult instead of being raised.
        """

    def get_config_value(self, key: str, default: Any | None = None) -> Any | None:
        """Get a configuration value with optional default."""
        return self.config.get(key, default)
