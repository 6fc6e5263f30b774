#!/usr/bin/env python3
"""
Tests for array-specific validation features.
"""
import pytest

# autopep8: off
from utils import setup
setup()
from refschema import ErrorCode, JsonValidator, ValidationError, resolve
from refschema.api import AdditionalItems, Contains, MinItems
from refschema.validators import KEYWORD_VALIDATORS, MinItemsValidator
# autopep8: on


class TestMinItemsValidator:
    """Tests for the minItems keyword validator on its own."""

    def setup_method(self):
        """Set up the test environment."""
        self.schema = {"minItems": 2}
        self.root = resolve(self.schema)
        self.validator = MinItemsValidator()

    def test_registered(self):
        """Test the dispatch table routes minItems to it."""
        assert isinstance(KEYWORD_VALIDATORS["minItems"], MinItemsValidator)
        assert self.validator.keyword == "minItems"

    def test_too_short(self):
        """Test an array below the minimum."""
        errors = self.validator.validate(self.root, self.schema, ("minItems", 2), [1])
        assert errors == [ValidationError(error=MinItems(expected=2, actual=1), path="")]

    def test_exactly_minimum(self):
        """Test an array at the minimum."""
        assert self.validator.validate(self.root, self.schema, ("minItems", 2), [1, 2]) == []

    def test_non_array(self):
        """Test other types are not constrained."""
        assert self.validator.validate(self.root, self.schema, ("minItems", 2), "a") == []
        assert self.validator.validate(self.root, self.schema, ("minItems", 2), {"a": 1}) == []

    def test_other_keyword(self):
        """Test a property for a different keyword is ignored."""
        assert self.validator.validate(self.root, self.schema, ("maxItems", 2), [1]) == []


class TestArrayValidation:
    """Tests for array-specific schema validation."""

    def setup_method(self):
        """Set up the test environment."""
        self.validator = JsonValidator()

    def test_array_constraints(self):
        """Test array-specific constraints."""
        schema = {
            "type": "array",
            "items": {"type": "string"},
            "minItems": 1,
            "maxItems": 5,
            "uniqueItems": True
        }

        # Valid array
        result = self.validator.validate(["red", "green", "blue"], schema)
        assert result.valid

        # Empty array (violates minItems)
        result = self.validator.validate([], schema)
        assert not result.valid
        assert len(result.errors) == 1
        assert result.errors[0].code == ErrorCode.MIN_ITEMS
        assert "minimum" in result.errors[0].message

        # Too many items (violates maxItems)
        result = self.validator.validate(
            ["one", "two", "three", "four", "five", "six"], schema)
        assert not result.valid
        assert len(result.errors) == 1
        assert result.errors[0].code == ErrorCode.MAX_ITEMS
        assert "maximum" in result.errors[0].message

        # Non-unique items
        result = self.validator.validate(["red", "green", "red"], schema)
        assert not result.valid
        assert len(result.errors) == 1
        assert result.errors[0].code == ErrorCode.UNIQUE_ITEMS
        assert "unique" in result.errors[0].message

        # Wrong item type
        result = self.validator.validate(["red", 123, "blue"], schema)
        assert not result.valid
        assert len(result.errors) == 1
        assert result.errors[0].code == ErrorCode.TYPE
        assert result.errors[0].path == "/1"
        assert "string" in result.errors[0].message

    def test_array_in_object(self):
        """Test array validation within an object."""
        schema = {
            "type": "object",
            "properties": {
                "tags": {
                    "type": "array",
                    "items": {"type": "string"},
                    "minItems": 2
                }
            }
        }

        result = self.validator.validate({"tags": ["a", "b"]}, schema)
        assert result.valid

        result = self.validator.validate({"tags": ["a"]}, schema)
        assert not result.valid
        assert result.errors[0].path == "/tags"
        assert result.errors[0].error == MinItems(expected=2, actual=1)

        result = self.validator.validate({"tags": ["a", 2]}, schema)
        assert not result.valid
        assert result.errors[0].path == "/tags/1"

    def test_tuple_items(self):
        """Test positional items with additionalItems false."""
        schema = {
            "type": "array",
            "items": [{"type": "string"}, {"type": "integer"}],
            "additionalItems": False
        }

        assert self.validator.validate(["a", 1], schema).valid
        assert self.validator.validate(["a"], schema).valid

        result = self.validator.validate(["a", 1, 2, 3], schema)
        assert not result.valid
        assert len(result.errors) == 1
        assert result.errors[0].error == AdditionalItems(additional_indices=[2, 3])

        result = self.validator.validate(["a", "b"], schema)
        assert not result.valid
        assert result.errors[0].code == ErrorCode.TYPE
        assert result.errors[0].path == "/1"

    def test_additional_items_schema(self):
        """Test additionalItems as a schema."""
        schema = {
            "items": [{"type": "string"}],
            "additionalItems": {"type": "integer"}
        }

        assert self.validator.validate(["a", 1, 2], schema).valid

        result = self.validator.validate(["a", 1, "x"], schema)
        assert not result.valid
        assert result.errors[0].path == "/2"

    def test_additional_items_without_tuple(self):
        """Test additionalItems does nothing when items is a single schema."""
        schema = {"items": {"type": "string"}, "additionalItems": False}
        assert self.validator.validate(["a", "b", "c"], schema).valid

    def test_contains(self):
        """Test the contains keyword."""
        schema = {"contains": {"type": "integer", "minimum": 5}}

        assert self.validator.validate([1, 7], schema).valid
        assert self.validator.validate("not an array", schema).valid

        result = self.validator.validate([1, 2], schema)
        assert not result.valid
        assert result.errors[0].error == Contains(empty=False)

        result = self.validator.validate([], schema)
        assert not result.valid
        assert result.errors[0].error == Contains(empty=True)

    def test_contains_ignored_in_draft4(self):
        """Test contains does not exist before draft 6."""
        schema = {
            "$schema": "http://json-schema.org/draft-04/schema#",
            "contains": {"type": "integer"}
        }
        assert self.validator.validate(["a"], schema).valid

    def test_unique_items_uses_json_equality(self):
        """Test uniqueItems compares values as JSON."""
        schema = {"uniqueItems": True}

        assert not self.validator.validate([1, 1.0], schema).valid
        assert self.validator.validate([1, True], schema).valid
        assert not self.validator.validate([{"a": 1, "b": 2}, {"b": 2, "a": 1}], schema).valid
        assert self.validator.validate([[1, 2], [2, 1]], schema).valid
        assert self.validator.validate([1, 1], {"uniqueItems": False}).valid

    def test_errors_are_collected(self):
        """Test every failing item is reported."""
        schema = {"items": {"type": "integer"}, "maxItems": 2}

        result = self.validator.validate(["a", 1, "b"], schema)
        assert not result.valid
        assert sorted(error.path for error in result.errors) == ["", "/0", "/2"]


if __name__ == "__main__":
    pytest.main(["-xvs", __file__])
