#!/usr/bin/env python3
"""
Tests for string-specific validation features.
"""
import pytest

# autopep8: off
from utils import setup
setup()
from refschema import ErrorCode, JsonValidator
from refschema.api import Format, MaxLength, MinLength
from refschema.validators.formats import FORMAT_CHECKERS
# autopep8: on


class TestStringValidation:
    """Tests for string-specific schema validation."""

    def setup_method(self):
        """Set up the test environment."""
        self.validator = JsonValidator()

    def test_length(self):
        """Test minLength and maxLength."""
        schema = {"type": "string", "minLength": 2, "maxLength": 4}

        assert self.validator.validate("abc", schema).valid

        result = self.validator.validate("a", schema)
        assert not result.valid
        assert result.errors[0].error == MinLength(expected=2, actual=1)

        result = self.validator.validate("abcde", schema)
        assert not result.valid
        assert result.errors[0].error == MaxLength(expected=4, actual=5)

    def test_length_counts_code_points(self):
        """Test non-ASCII characters count once each."""
        schema = {"maxLength": 5}
        assert self.validator.validate("héllo", schema).valid
        assert self.validator.validate("日本語", {"minLength": 3}).valid

    def test_pattern(self):
        """Test pattern matching is unanchored."""
        schema = {"pattern": "b+"}

        assert self.validator.validate("abbc", schema).valid

        result = self.validator.validate("ac", schema)
        assert not result.valid
        assert result.errors[0].code == ErrorCode.PATTERN
        assert "b+" in result.errors[0].message

    def test_anchored_pattern(self):
        """Test an explicitly anchored pattern."""
        schema = {"pattern": "^[0-9]{3}$"}
        assert self.validator.validate("123", schema).valid
        assert not self.validator.validate("1234", schema).valid

    def test_non_string_data(self):
        """Test string keywords ignore other types."""
        schema = {"minLength": 3, "pattern": "^a", "format": "email"}
        assert self.validator.validate(12, schema).valid
        assert self.validator.validate(None, schema).valid


class TestFormatValidation:
    """Tests for the format keyword."""

    def setup_method(self):
        """Set up the test environment."""
        self.validator = JsonValidator()

    def check(self, format_name, value):
        return self.validator.validate(value, {"format": format_name}).valid

    def test_date_time(self):
        """Test date-time, date and time."""
        assert self.check("date-time", "2024-01-01T12:00:00Z")
        assert self.check("date-time", "2024-01-01T12:00:00.123+02:00")
        assert not self.check("date-time", "2024-01-01 12:00:00")
        assert self.check("date", "2024-02-29")
        assert not self.check("date", "2023-02-29")
        assert not self.check("date", "2024-13-01")
        assert self.check("time", "23:59:59Z")
        assert not self.check("time", "25:00:00Z")
        assert not self.check("time", "12:00:00")

    def test_network_formats(self):
        """Test email, hostname and IP addresses."""
        assert self.check("email", "user@example.com")
        assert not self.check("email", "user.example.com")
        assert self.check("hostname", "www.example.com")
        assert not self.check("hostname", "-bad-.example.com")
        assert self.check("ipv4", "192.168.0.1")
        assert not self.check("ipv4", "256.1.1.1")
        assert self.check("ipv6", "::1")
        assert not self.check("ipv6", "12345::")

    def test_uri_formats(self):
        """Test uri, uri-reference and json-pointer."""
        assert self.check("uri", "http://example.com/a?b=c")
        assert not self.check("uri", "example.com/a")
        assert self.check("uri-reference", "#/definitions/a")
        assert not self.check("uri-reference", "has space")
        assert self.check("json-pointer", "/a/b~0c")
        assert self.check("json-pointer", "")
        assert not self.check("json-pointer", "a/b")
        assert not self.check("json-pointer", "/a~2")

    def test_regex(self):
        """Test the regex format."""
        assert self.check("regex", "^[a-z]+$")
        assert not self.check("regex", "[a-")

    def test_error(self):
        """Test the error reported for a bad value."""
        result = self.validator.validate("nope", {"format": "ipv4"})
        assert result.errors[0].error == Format(expected="ipv4")
        assert result.errors[0].code == ErrorCode.FORMAT

    def test_unknown_format(self):
        """Test formats without a checker always pass."""
        assert "color" not in FORMAT_CHECKERS
        assert self.check("color", "not a color")


if __name__ == "__main__":
    pytest.main(["-xvs", __file__])
