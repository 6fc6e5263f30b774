"""
Object keyword validators.
"""

import re
from functools import lru_cache
from typing import Any, Dict, List, Pattern

from .base import TypedKeywordValidator, error, subschema_errors
from ..api import (
    AdditionalProperties,
    Dependencies,
    MaxProperties,
    MinProperties,
    PropertyNames,
    Required,
    Root,
    ValidationError,
)
from ..utils import SchemaKeywords


@lru_cache(maxsize=256)
def compile_pattern(pattern: str) -> Pattern:
    """Compile a regular expression once."""
    return re.compile(pattern)


class ObjectKeywordValidator(TypedKeywordValidator):
    """Base class for keywords constraining objects."""

    @property
    def json_type(self) -> str:
        return "object"


class PropertiesValidator(ObjectKeywordValidator):
    """Validates each named property present in the data."""

    keyword = SchemaKeywords.PROPERTIES

    def _validate_type_specific(self, root: Root, schema: Dict[str, Any],
                                value: Dict[str, Any], data: Dict[str, Any]) -> List[ValidationError]:
        errors = []
        for name, property_schema in value.items():
            if name in data:
                errors.extend(subschema_errors(root, property_schema, data[name], name))
        return errors


class PatternPropertiesValidator(ObjectKeywordValidator):
    """Validates each property whose name matches a pattern."""

    keyword = SchemaKeywords.PATTERN_PROPERTIES

    def _validate_type_specific(self, root: Root, schema: Dict[str, Any],
                                value: Dict[str, Any], data: Dict[str, Any]) -> List[ValidationError]:
        errors = []
        for pattern, property_schema in value.items():
            compiled = compile_pattern(pattern)
            for name, item in data.items():
                if compiled.search(name):
                    errors.extend(subschema_errors(root, property_schema, item, name))
        return errors


class AdditionalPropertiesValidator(ObjectKeywordValidator):
    """
    Validates properties matched by neither "properties" nor "patternProperties".

    The value may be a literal boolean (draft 4 style) or a schema.
    """

    keyword = SchemaKeywords.ADDITIONAL_PROPERTIES

    def _validate_type_specific(self, root: Root, schema: Dict[str, Any],
                                value: Any, data: Dict[str, Any]) -> List[ValidationError]:
        if value is True:
            return []

        properties = schema.get(SchemaKeywords.PROPERTIES) or {}
        patterns = [compile_pattern(pattern) for pattern in schema.get(SchemaKeywords.PATTERN_PROPERTIES) or {}]

        errors = []
        for name, item in data.items():
            if name in properties or any(pattern.search(name) for pattern in patterns):
                continue
            if value is False:
                errors.append(error(AdditionalProperties(), name))
            elif isinstance(value, dict):
                errors.extend(subschema_errors(root, value, item, name))
        return errors


class RequiredValidator(ObjectKeywordValidator):
    """Validates "required"."""

    keyword = SchemaKeywords.REQUIRED

    def _validate_type_specific(self, root: Root, schema: Dict[str, Any],
                                value: List[str], data: Dict[str, Any]) -> List[ValidationError]:
        missing = [name for name in value if name not in data]
        if not missing:
            return []
        return [error(Required(missing=missing))]


class MinPropertiesValidator(ObjectKeywordValidator):
    keyword = SchemaKeywords.MIN_PROPERTIES

    def _validate_type_specific(self, root: Root, schema: Dict[str, Any],
                                value: int, data: Dict[str, Any]) -> List[ValidationError]:
        if len(data) >= value:
            return []
        return [error(MinProperties(expected=value, actual=len(data)))]


class MaxPropertiesValidator(ObjectKeywordValidator):
    keyword = SchemaKeywords.MAX_PROPERTIES

    def _validate_type_specific(self, root: Root, schema: Dict[str, Any],
                                value: int, data: Dict[str, Any]) -> List[ValidationError]:
        if len(data) <= value:
            return []
        return [error(MaxProperties(expected=value, actual=len(data)))]


class DependenciesValidator(ObjectKeywordValidator):
    """
    Validates "dependencies".

    A list names properties that must be present alongside the key; a schema
    is applied to the whole object when the key is present.
    """

    keyword = SchemaKeywords.DEPENDENCIES

    def _validate_type_specific(self, root: Root, schema: Dict[str, Any],
                                value: Dict[str, Any], data: Dict[str, Any]) -> List[ValidationError]:
        errors = []
        for name, dependency in value.items():
            if name not in data:
                continue
            if isinstance(dependency, list):
                missing = [required for required in dependency if required not in data]
                if missing:
                    errors.append(error(Dependencies(property=name, missing=missing)))
            elif isinstance(dependency, dict):
                errors.extend(subschema_errors(root, dependency, data))
        return errors


class PropertyNamesValidator(ObjectKeywordValidator):
    """Validates every property name against a schema."""

    keyword = SchemaKeywords.PROPERTY_NAMES
    since = 6

    def _validate_type_specific(self, root: Root, schema: Dict[str, Any],
                                value: Any, data: Dict[str, Any]) -> List[ValidationError]:
        invalid = {}
        for name in data:
            name_errors = subschema_errors(root, value, name)
            if name_errors:
                invalid[name] = name_errors
        if not invalid:
            return []
        return [error(PropertyNames(invalid=invalid))]
