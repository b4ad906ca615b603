"""
Unit tests for the helpers module.
"""

from datetime import datetime

import pytest

from exiftool_normalizer.helpers import convert_datetime_objects, parse_bool


class TestParseBool:
    """Tests for configuration flag parsing."""

    def test_booleans_pass_through(self):
        """Test that real booleans are returned unchanged."""
        assert parse_bool(True) is True
        assert parse_bool(False) is False

    def test_true_spellings(self):
        """Test the accepted spellings of true."""
        for value in ("true", "True", " YES ", "1", "on"):
            assert parse_bool(value) is True

    def test_false_spellings(self):
        """Test the accepted spellings of false."""
        for value in ("false", "FALSE", "no", "0", "off", ""):
            assert parse_bool(value) is False

    def test_numbers(self):
        """Test that numbers follow truthiness."""
        assert parse_bool(1) is True
        assert parse_bool(0) is False

    def test_unrecognized_string(self):
        """Test that an unknown spelling raises."""
        with pytest.raises(ValueError, match="boolean flag"):
            parse_bool("dms")


class TestConvertDatetimeObjects:
    """Tests for datetime serialization."""

    def test_nested_datetimes(self):
        """Test that datetimes inside dicts and lists become ISO strings."""
        value = {
            "results": [{"creationdate": datetime(2015, 3, 22, 14, 30)}],
            "count": 1,
        }

        assert convert_datetime_objects(value) == {
            "results": [{"creationdate": "2015-03-22T14:30:00"}],
            "count": 1,
        }
