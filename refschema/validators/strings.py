"""
String keyword validators.
"""

from typing import Any, Dict, List

from .base import TypedKeywordValidator, error
from .objects import compile_pattern
from ..api import MaxLength, MinLength, Pattern, Root, ValidationError
from ..utils import SchemaKeywords


class StringKeywordValidator(TypedKeywordValidator):
    """Base class for keywords constraining strings."""

    @property
    def json_type(self) -> str:
        return "string"


class MinLengthValidator(StringKeywordValidator):
    """Validates "minLength", counting code points."""

    keyword = SchemaKeywords.MIN_LENGTH

    def _validate_type_specific(self, root: Root, schema: Dict[str, Any],
                                value: int, data: str) -> List[ValidationError]:
        if len(data) >= value:
            return []
        return [error(MinLength(expected=value, actual=len(data)))]


class MaxLengthValidator(StringKeywordValidator):
    """Validates "maxLength", counting code points."""

    keyword = SchemaKeywords.MAX_LENGTH

    def _validate_type_specific(self, root: Root, schema: Dict[str, Any],
                                value: int, data: str) -> List[ValidationError]:
        if len(data) <= value:
            return []
        return [error(MaxLength(expected=value, actual=len(data)))]


class PatternValidator(StringKeywordValidator):
    """Validates "pattern"; the expression may match anywhere in the string."""

    keyword = SchemaKeywords.PATTERN

    def _validate_type_specific(self, root: Root, schema: Dict[str, Any],
                                value: str, data: str) -> List[ValidationError]:
        if compile_pattern(value).search(data):
            return []
        return [error(Pattern(expected=value))]
