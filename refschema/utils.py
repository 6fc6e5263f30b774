"""
Utility classes and functions for refschema.
"""

import re
from typing import Any, List, Sequence, Union
from urllib.parse import unquote

from .api import ROOT


class JsonPointer:
    """
    Utility class for handling JSON Pointers (RFC 6901).

    JSON Pointers are used to reference specific locations within a JSON document.
    """

    _INTEGER = re.compile(r"^[+-]?[0-9]+$")

    @staticmethod
    def from_parts(parts: Sequence[Any]) -> str:
        """
        Create a JSON Pointer from path parts.

        Args:
            parts: List of path segments

        Returns:
            JSON Pointer string
        """
        if not parts:
            return ""

        return "/" + "/".join(JsonPointer.escape_part(part) for part in parts)

    @staticmethod
    def escape_part(part: Any) -> str:
        """
        Escape a JSON Pointer path segment.

        Args:
            part: Path segment to escape

        Returns:
            Escaped path segment
        """
        # Replace ~ with ~0 and / with ~1
        return str(part).replace("~", "~0").replace("/", "~1")

    @staticmethod
    def unescape_part(part: str) -> str:
        """
        Unescape a JSON Pointer path segment.

        Args:
            part: Escaped path segment

        Returns:
            Unescaped path segment
        """
        # Replace ~1 with / and ~0 with ~
        return part.replace("~1", "/").replace("~0", "~")

    @staticmethod
    def fragment_segments(fragment: str) -> List[Union[str, int]]:
        """
        Split a URI fragment holding a JSON Pointer into descriptor segments.

        Each segment is unescaped, then percent-decoded, and becomes an int
        when it parses fully as a decimal integer ("01" and "+1" included).

        Args:
            fragment: Fragment text after '#', empty or starting with '/'

        Returns:
            List of str keys and int indices
        """
        if not fragment:
            return []

        segments: List[Union[str, int]] = []
        for part in fragment[1:].split("/"):
            key = unquote(JsonPointer.unescape_part(part))
            segments.append(int(key) if JsonPointer._INTEGER.match(key) else key)
        return segments

    @staticmethod
    def ref_to_string(path: Sequence[Any]) -> str:
        """
        Render a reference descriptor the way it would be written in $ref.

        Args:
            path: Descriptor, a ROOT or URL head followed by segments

        Returns:
            Reference string, e.g. "#/definitions/foo"
        """
        head, *segments = path
        prefix = "#" if head is ROOT else f"{head}#"
        return prefix + JsonPointer.from_parts(segments)


class TypeUtils:
    """Utilities for working with JSON Schema types."""

    @staticmethod
    def get_json_type(value: Any) -> str:
        """
        Get the JSON Schema type for a Python value.

        Integral values report "integer"; every other number reports "number".

        Args:
            value: Python value

        Returns:
            JSON Schema type name
        """
        if value is None:
            return "null"
        elif isinstance(value, bool):
            return "boolean"
        elif isinstance(value, int):
            return "integer"
        elif isinstance(value, float):
            return "number"
        elif isinstance(value, str):
            return "string"
        elif isinstance(value, list):
            return "array"
        elif isinstance(value, dict):
            return "object"
        else:
            # Best effort for custom types
            return "unknown"

    @staticmethod
    def is_number(value: Any) -> bool:
        """Check for a JSON number; booleans are not numbers."""
        return isinstance(value, (int, float)) and not isinstance(value, bool)

    @staticmethod
    def matches_type(value: Any, json_type: str) -> bool:
        """
        Check whether a value is an instance of a JSON Schema type.

        Args:
            value: Python value
            json_type: JSON Schema type name

        Returns:
            True if the value belongs to the type
        """
        if json_type == "number":
            return TypeUtils.is_number(value)
        if json_type == "integer":
            if isinstance(value, float):
                return value.is_integer()
            return TypeUtils.is_number(value)
        return TypeUtils.get_json_type(value) == json_type

    @staticmethod
    def json_equal(left: Any, right: Any) -> bool:
        """
        Compare two values with JSON semantics.

        1 and 1.0 are equal, true and 1 are not, and object key order does
        not matter.

        Args:
            left: First value
            right: Second value

        Returns:
            True if the values are equal as JSON
        """
        if isinstance(left, bool) or isinstance(right, bool):
            return isinstance(left, bool) and isinstance(right, bool) and left == right
        if TypeUtils.is_number(left) and TypeUtils.is_number(right):
            return left == right
        if isinstance(left, list) and isinstance(right, list):
            return len(left) == len(right) and all(
                TypeUtils.json_equal(a, b) for a, b in zip(left, right))
        if isinstance(left, dict) and isinstance(right, dict):
            return left.keys() == right.keys() and all(
                TypeUtils.json_equal(value, right[key]) for key, value in left.items())
        return type(left) is type(right) and left == right


class SchemaKeywords:
    """Constants for JSON Schema keywords."""

    # Type keywords
    TYPE = "type"

    # Number keywords
    MINIMUM = "minimum"
    MAXIMUM = "maximum"
    EXCLUSIVE_MINIMUM = "exclusiveMinimum"
    EXCLUSIVE_MAXIMUM = "exclusiveMaximum"
    MULTIPLE_OF = "multipleOf"

    # String keywords
    MIN_LENGTH = "minLength"
    MAX_LENGTH = "maxLength"
    PATTERN = "pattern"
    FORMAT = "format"

    # Array keywords
    ITEMS = "items"
    ADDITIONAL_ITEMS = "additionalItems"
    MIN_ITEMS = "minItems"
    MAX_ITEMS = "maxItems"
    UNIQUE_ITEMS = "uniqueItems"
    CONTAINS = "contains"

    # Object keywords
    PROPERTIES = "properties"
    PATTERN_PROPERTIES = "patternProperties"
    ADDITIONAL_PROPERTIES = "additionalProperties"
    REQUIRED = "required"
    PROPERTY_NAMES = "propertyNames"
    MIN_PROPERTIES = "minProperties"
    MAX_PROPERTIES = "maxProperties"
    DEPENDENCIES = "dependencies"

    # Schema composition
    ALL_OF = "allOf"
    ANY_OF = "anyOf"
    ONE_OF = "oneOf"
    NOT = "not"
    IF = "if"
    THEN = "then"
    ELSE = "else"

    # Miscellaneous
    ENUM = "enum"
    CONST = "const"
    DEFAULT = "default"
    EXAMPLES = "examples"

    # References and identification
    REF = "$ref"
    ID = "$id"
    LEGACY_ID = "id"
    SCHEMA = "$schema"
    DEFINITIONS = "definitions"

    # Keywords whose value is a single subschema
    SUBSCHEMA = frozenset({
        NOT, ITEMS, ADDITIONAL_ITEMS, ADDITIONAL_PROPERTIES, CONTAINS,
        PROPERTY_NAMES, IF, THEN, ELSE,
    })

    # Keywords whose value is a list of subschemas
    SUBSCHEMA_LIST = frozenset({ALL_OF, ANY_OF, ONE_OF, ITEMS})

    # Keywords whose value maps names to subschemas
    SUBSCHEMA_MAP = frozenset({PROPERTIES, PATTERN_PROPERTIES, DEPENDENCIES})

    # Draft 4 allows these to be a plain boolean instead of a schema
    BOOLEAN_OR_SCHEMA = frozenset({ADDITIONAL_ITEMS, ADDITIONAL_PROPERTIES})

    # Keywords holding instance data, never schemas
    DATA = frozenset({ENUM, CONST, DEFAULT, EXAMPLES, REQUIRED, TYPE})

    @staticmethod
    def schema_id(schema: dict) -> Any:
        """
        Get the identifier a schema node declares.

        Args:
            schema: Schema object

        Returns:
            The $id (or draft 4 id) string, or None
        """
        for keyword in (SchemaKeywords.ID, SchemaKeywords.LEGACY_ID):
            value = schema.get(keyword)
            if isinstance(value, str):
                return value
        return None
