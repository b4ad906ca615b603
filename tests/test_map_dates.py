"""
Unit tests for the creation date converter.
"""

from datetime import datetime

from exiftool_normalizer.field_mappers.map_dates import convert_create_date


class TestConvertCreateDate:
    """Tests for exiftool date parsing."""

    def test_exiftool_format(self):
        """Test parsing of exiftool's date/time format."""
        assert convert_create_date("2015:03:22 14:30:00") == datetime(
            2015, 3, 22, 14, 30, 0
        )

    def test_unparsable_returns_none(self):
        """Test that malformed dates yield None instead of raising."""
        assert convert_create_date("not-a-date") is None
        assert convert_create_date("2015-03-22 14:30:00") is None
        assert convert_create_date("2015:13:22 14:30:00") is None
        assert convert_create_date("") is None

    def test_non_string_input(self):
        """Test that non-string values other than datetimes yield None."""
        assert convert_create_date(None) is None
        assert convert_create_date(20150322) is None

    def test_datetime_passes_through(self):
        """Test that an already-parsed datetime is returned unchanged."""
        value = datetime(2020, 1, 1, 12, 0, 0)
        assert convert_create_date(value) is value
