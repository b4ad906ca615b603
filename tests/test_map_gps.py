"""
Unit tests for GPS coordinate extraction and resolution.
"""

import pytest

from exiftool_normalizer.errors import MissingGPSReferenceError
from exiftool_normalizer.field_mappers.map_gps import (
    extract_decimal_coordinate,
    extract_dms_coordinate,
    extract_gps_coordinate,
    format_coordinate,
    resolve_gps,
)


class TestExtractDecimalCoordinate:
    """Tests for decimal-degree parsing."""

    def test_sign_is_dropped(self):
        """Test that the magnitude is returned without sign."""
        assert extract_decimal_coordinate("-74.0060") == pytest.approx(74.006)
        assert extract_decimal_coordinate("40.7128") == pytest.approx(40.7128)

    def test_numeric_input(self):
        """Test that already-numeric values are accepted."""
        assert extract_decimal_coordinate(-12.5) == 12.5

    def test_invalid_input(self):
        """Test that non-numeric input yields None."""
        assert extract_decimal_coordinate("40 deg 42' 46.08\"") is None
        assert extract_decimal_coordinate("nan") is None
        assert extract_decimal_coordinate(None) is None


class TestExtractDmsCoordinate:
    """Tests for degree/minute/second parsing."""

    def test_dms_string(self):
        """Test conversion of a DMS string to decimal degrees."""
        assert extract_dms_coordinate("40 deg 42' 46.08\"") == pytest.approx(40.7128)

    def test_fractional_minutes(self):
        """Test that fractional minutes contribute their fraction."""
        assert extract_dms_coordinate("10 deg 30.5' 0\"") == pytest.approx(
            10 + 30.5 / 60
        )

    def test_trailing_reference_is_ignored(self):
        """Test that text after the seconds marker does not prevent a match."""
        assert extract_dms_coordinate("12 deg 30' 0.00\" N") == pytest.approx(12.5)

    def test_non_matching_string(self):
        """Test that strings outside DMS notation yield None."""
        assert extract_dms_coordinate("40.7128") is None
        assert extract_dms_coordinate("-40 deg 42' 46.08\"") is None
        assert extract_dms_coordinate("1.2.3 deg 0' 0\"") is None

    def test_non_string_input(self):
        """Test that non-string input yields None."""
        assert extract_dms_coordinate(40.7128) is None


class TestExtractGpsCoordinate:
    """Tests for mode selection."""

    def test_numeric_mode(self):
        """Test that numeric mode parses decimal degrees."""
        assert extract_gps_coordinate("-1.5", numeric=True) == 1.5
        assert extract_gps_coordinate("1 deg 30' 0\"", numeric=True) is None

    def test_dms_mode(self):
        """Test that DMS mode parses degree/minute/second strings."""
        assert extract_gps_coordinate("1 deg 30' 0\"", numeric=False) == 1.5
        assert extract_gps_coordinate("-1.5", numeric=False) is None


class TestFormatCoordinate:
    """Tests for locale-independent coordinate rendering."""

    def test_plain_decimal(self):
        """Test that decimals are rendered without trailing zeros."""
        assert format_coordinate(-74.006) == "-74.006"
        assert format_coordinate(40.7128) == "40.7128"
        assert format_coordinate(12.0) == "12"

    def test_float_noise_is_trimmed(self):
        """Test that binary rounding noise from DMS sums is not rendered."""
        assert format_coordinate(40 + 42 / 60 + 46.08 / 3600) == "40.7128"

    def test_small_values_have_no_exponent(self):
        """Test that tiny magnitudes are not rendered in scientific notation."""
        assert format_coordinate(0.00005) == "0.00005"

    def test_negative_zero(self):
        """Test that a negated zero renders as zero."""
        assert format_coordinate(-0.0) == "0"


class TestResolveGps:
    """Tests for folding latitude and longitude into the GPS field."""

    def test_combined_value(self):
        """Test that a complete pair becomes a single signed GPS value."""
        raw = {"GPSLatitudeRef": "N", "GPSLongitudeRef": "W"}
        mapped = {"camera": "X100V", "GPSLatitude": 40.7128, "GPSLongitude": 74.006}

        result = resolve_gps(raw, mapped)

        assert result == {"camera": "X100V", "gps": "40.7128,-74.006"}

    def test_south_and_east(self):
        """Test that a southern latitude is negated and an eastern longitude kept."""
        raw = {"GPSLatitudeRef": "South", "GPSLongitudeRef": "East"}
        mapped = {"GPSLatitude": 33.8688, "GPSLongitude": 151.2093}

        assert resolve_gps(raw, mapped)["gps"] == "-33.8688,151.2093"

    def test_reference_is_case_insensitive(self):
        """Test that lower-case references are honoured."""
        raw = {"GPSLatitudeRef": "s", "GPSLongitudeRef": "w"}
        mapped = {"GPSLatitude": 1.5, "GPSLongitude": 2.5}

        assert resolve_gps(raw, mapped)["gps"] == "-1.5,-2.5"

    def test_incomplete_pair_is_dropped(self):
        """Test that a lone coordinate is removed without a GPS value."""
        result = resolve_gps({"GPSLatitudeRef": "N"}, {"GPSLatitude": 40.7128})
        assert result == {}

    def test_unparsed_coordinate_drops_pair(self):
        """Test that a None coordinate drops both entries."""
        raw = {"GPSLatitudeRef": "N", "GPSLongitudeRef": "W"}
        mapped = {"GPSLatitude": None, "GPSLongitude": 74.006}

        assert resolve_gps(raw, mapped) == {}

    def test_missing_reference_raises(self):
        """Test that coordinates without a reference field are rejected."""
        mapped = {"GPSLatitude": 40.7128, "GPSLongitude": 74.006}

        with pytest.raises(MissingGPSReferenceError) as exc_info:
            resolve_gps({"GPSLatitudeRef": "N"}, mapped)

        assert exc_info.value.field_name == "GPSLongitudeRef"

    def test_empty_reference_raises(self):
        """Test that an empty reference field is treated as missing."""
        mapped = {"GPSLatitude": 40.7128, "GPSLongitude": 74.006}

        with pytest.raises(MissingGPSReferenceError):
            resolve_gps({"GPSLatitudeRef": "", "GPSLongitudeRef": "W"}, mapped)
