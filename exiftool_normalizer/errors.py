"""Custom exceptions for exiftool metadata normalization."""

from typing import Any


class MappingError(Exception):
    """Base exception for raw records that break exiftool's output contract."""

    def __init__(self, message: str, details: str | None = None):
        self.message = message
        self.details = details
        super().__init__(self.message)

    def __str__(self):
        if self.details:
            return f"{self.message}: {self.details}"
        return self.message


class MissingGPSReferenceError(MappingError):
    """Raised when a GPS coordinate pair arrives without its reference field."""

    def __init__(self, field_name: str):
        self.field_name = field_name
        super().__init__(
            "Missing GPS reference field",
            f"'{field_name}' is required when GPS coordinates are present",
        )


class InvalidExposureTimeError(MappingError):
    """Raised when an exposure time has no reciprocal."""

    def __init__(self, value: Any):
        self.value = value
        super().__init__("Invalid exposure time", f"cannot take reciprocal of {value!r}")
