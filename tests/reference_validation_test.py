#!/usr/bin/env python3
"""
Tests for JSON Schema reference resolution and validation.
"""
import pytest

# autopep8: off
from utils import setup
setup()
from refschema import ROOT, ErrorCode, InvalidSchemaError, JsonValidator, Root, validate
# autopep8: on


class TestReferenceValidation:
    """Tests for validating data through references."""

    def setup_method(self):
        """Set up the test environment."""
        self.validator = JsonValidator()

    def test_basic_reference(self):
        """Test basic reference resolution."""
        schema = {
            "definitions": {
                "positiveInteger": {
                    "type": "integer",
                    "minimum": 1
                }
            },
            "properties": {
                "count": {"$ref": "#/definitions/positiveInteger"}
            }
        }

        # Valid data
        result = self.validator.validate({"count": 5}, schema)
        assert result.valid

        # Invalid data (negative number)
        result = self.validator.validate({"count": -5}, schema)
        assert not result.valid
        assert len(result.errors) == 1
        assert result.errors[0].code == ErrorCode.MINIMUM
        assert result.errors[0].path == "/count"

        # Invalid data (wrong type)
        result = self.validator.validate({"count": "5"}, schema)
        assert not result.valid
        assert len(result.errors) == 1
        assert result.errors[0].code == ErrorCode.TYPE

    def test_nested_references(self):
        """Test nested reference resolution."""
        schema = {
            "definitions": {
                "positiveInteger": {
                    "type": "integer",
                    "minimum": 1
                },
                "count": {
                    "$ref": "#/definitions/positiveInteger"
                },
                "countArray": {
                    "type": "array",
                    "items": {
                        "$ref": "#/definitions/count"
                    }
                }
            },
            "properties": {
                "counts": {"$ref": "#/definitions/countArray"}
            }
        }

        assert self.validator.validate({"counts": [1, 2, 3]}, schema).valid

        result = self.validator.validate({"counts": [1, -2, 3]}, schema)
        assert not result.valid
        assert len(result.errors) == 1
        assert result.errors[0].code == ErrorCode.MINIMUM
        assert result.errors[0].path == "/counts/1"

    def test_ref_overrides_siblings(self):
        """Test keywords next to $ref are not validated."""
        schema = {
            "definitions": {"anything": {}},
            "properties": {"x": {"$ref": "#/definitions/anything", "type": "string"}}
        }
        assert self.validator.validate({"x": 1}, schema).valid

    def test_recursive_schema(self):
        """Test a schema that refers to itself."""
        schema = {
            "definitions": {
                "node": {
                    "type": "object",
                    "properties": {
                        "value": {"type": "integer"},
                        "children": {"type": "array", "items": {"$ref": "#/definitions/node"}}
                    },
                    "required": ["value"]
                }
            },
            "$ref": "#/definitions/node"
        }

        data = {"value": 1, "children": [{"value": 2, "children": [{"value": 3}]}]}
        assert self.validator.validate(data, schema).valid

        data["children"][0]["children"][0]["value"] = "x"
        result = self.validator.validate(data, schema)
        assert not result.valid
        assert [error.path for error in result.errors] == ["/children/0/children/0/value"]

    def test_root_recursion(self):
        """Test "#" references."""
        schema = {
            "type": "object",
            "additionalProperties": {"$ref": "#"},
            "maxProperties": 1
        }
        assert self.validator.validate({"a": {"b": {}}}, schema).valid

        result = self.validator.validate({"a": {"b": {}, "c": {}}}, schema)
        assert not result.valid
        assert result.errors[0].path == "/a"
        assert result.errors[0].code == ErrorCode.MAX_PROPERTIES

    def test_reference_in_logical_operators(self):
        """Test reference resolution within logical operators."""
        schema = {
            "definitions": {
                "positiveInteger": {
                    "type": "integer",
                    "minimum": 1
                },
                "evenInteger": {
                    "type": "integer",
                    "multipleOf": 2
                }
            },
            "properties": {
                "count": {
                    "allOf": [
                        {"$ref": "#/definitions/positiveInteger"},
                        {"$ref": "#/definitions/evenInteger"}
                    ]
                }
            }
        }

        assert self.validator.validate({"count": 2}, schema).valid

        result = self.validator.validate({"count": 3}, schema)
        assert not result.valid
        assert len(result.errors) == 1
        assert result.errors[0].code == ErrorCode.ALL_OF
        assert result.errors[0].error.invalid[0].index == 1

    def test_boolean_definition(self):
        """Test a reference to a boolean definition."""
        schema = {
            "definitions": {"never": False},
            "properties": {"x": {"$ref": "#/definitions/never"}}
        }
        assert self.validator.validate({"y": 1}, schema).valid
        assert not self.validator.validate({"x": 1}, schema).valid

    def test_unresolved_reference(self):
        """Test validating against a schema that was never resolved."""
        root = Root(schema={"$ref": "#/definitions/a"}, location=ROOT)
        with pytest.raises(InvalidSchemaError):
            validate(root, 1)

    def test_non_string_ref_is_not_followed(self):
        """Test a $ref that is not a string is not treated as a reference."""
        schema = {"$schema": "http://json-schema.org/draft-04/schema#", "$ref": 5, "type": "integer"}
        root = self.validator.resolve(schema)
        assert validate(root, 1) == []
        assert [error.code for error in validate(root, "a")] == [ErrorCode.TYPE]


class TestRemoteReferenceValidation:
    """Tests for validating data through references to other documents."""

    def setup_method(self):
        """Set up the test environment."""
        self.documents = {
            "http://example.com/address.json": {
                "type": "object",
                "properties": {
                    "street": {"type": "string"},
                    "city": {"$ref": "#/definitions/city"}
                },
                "required": ["street"],
                "definitions": {"city": {"type": "string", "minLength": 1}}
            },
            "http://example.com/tags.json": {
                "type": "array",
                "items": {"type": "string"},
                "minItems": 1
            }
        }
        self.fetched = []

        def remote_schema_resolver(url):
            self.fetched.append(url)
            return self.documents[url]

        self.validator = JsonValidator(remote_schema_resolver=remote_schema_resolver)

    def test_remote_reference(self):
        """Test data validated against a fetched document."""
        schema = {
            "properties": {
                "home": {"$ref": "http://example.com/address.json"},
                "work": {"$ref": "http://example.com/address.json"},
                "tags": {"$ref": "http://example.com/tags.json#"}
            }
        }
        root = self.validator.resolve(schema)
        assert sorted(self.fetched) == ["http://example.com/address.json", "http://example.com/tags.json"]

        data = {"home": {"street": "Main", "city": "X"}, "work": {"city": ""}, "tags": []}
        result = self.validator.validate(data, root)
        assert not result.valid
        errors = sorted((error.path, error.code.name) for error in result.errors)
        assert errors == [("/tags", "MIN_ITEMS"), ("/work", "REQUIRED"), ("/work/city", "MIN_LENGTH")]

    def test_draft4_remote_reference(self):
        """Test a draft 4 document referring to a remote document."""
        schema = {
            "$schema": "http://json-schema.org/draft-04/schema#",
            "type": "object",
            "properties": {"tags": {"$ref": "http://example.com/tags.json"}}
        }
        root = self.validator.resolve(schema)
        assert root.version == 4
        assert self.validator.validate({"tags": ["a"]}, root).valid
        assert not self.validator.validate({"tags": [1]}, root).valid

    def test_remote_document_keeps_its_draft(self):
        """Test keywords of a fetched document follow that document's draft."""
        self.documents["http://example.com/const.json"] = {"const": 1}
        self.documents["http://example.com/legacy.json"] = {
            "$schema": "http://json-schema.org/draft-04/schema#",
            "const": 1
        }

        draft4 = self.validator.resolve({
            "$schema": "http://json-schema.org/draft-04/schema#",
            "$ref": "http://example.com/const.json"
        })
        assert draft4.version == 4
        assert [error.code for error in validate(draft4, 2)] == [ErrorCode.CONST]
        assert validate(draft4, 1) == []

        draft7 = self.validator.resolve({"$ref": "http://example.com/legacy.json"})
        assert validate(draft7, 2) == []


if __name__ == "__main__":
    pytest.main(["-xvs", __file__])
