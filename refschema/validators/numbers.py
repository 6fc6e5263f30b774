"""
Numeric keyword validators.
"""

from fractions import Fraction
from typing import Any, Dict, List, Union

from .base import TypedKeywordValidator, error
from ..api import Maximum, Minimum, MultipleOf, Root, ValidationError
from ..utils import SchemaKeywords

Number = Union[int, float]


class NumberKeywordValidator(TypedKeywordValidator):
    """Base class for keywords constraining numbers."""

    @property
    def json_type(self) -> str:
        return "number"


class MinimumValidator(NumberKeywordValidator):
    """
    Validates "minimum".

    A draft 4 boolean "exclusiveMinimum" next to it makes the bound exclusive.
    """

    keyword = SchemaKeywords.MINIMUM

    def _validate_type_specific(self, root: Root, schema: Dict[str, Any],
                                value: Number, data: Number) -> List[ValidationError]:
        exclusive = schema.get(SchemaKeywords.EXCLUSIVE_MINIMUM) is True
        if data > value or (data == value and not exclusive):
            return []
        return [error(Minimum(expected=value, exclusive=exclusive))]


class MaximumValidator(NumberKeywordValidator):
    """
    Validates "maximum".

    A draft 4 boolean "exclusiveMaximum" next to it makes the bound exclusive.
    """

    keyword = SchemaKeywords.MAXIMUM

    def _validate_type_specific(self, root: Root, schema: Dict[str, Any],
                                value: Number, data: Number) -> List[ValidationError]:
        exclusive = schema.get(SchemaKeywords.EXCLUSIVE_MAXIMUM) is True
        if data < value or (data == value and not exclusive):
            return []
        return [error(Maximum(expected=value, exclusive=exclusive))]


class ExclusiveMinimumValidator(NumberKeywordValidator):
    """Validates the numeric "exclusiveMinimum" of drafts 6 and 7."""

    keyword = SchemaKeywords.EXCLUSIVE_MINIMUM
    since = 6

    def _validate_type_specific(self, root: Root, schema: Dict[str, Any],
                                value: Any, data: Number) -> List[ValidationError]:
        if isinstance(value, bool) or data > value:
            return []
        return [error(Minimum(expected=value, exclusive=True))]


class ExclusiveMaximumValidator(NumberKeywordValidator):
    """Validates the numeric "exclusiveMaximum" of drafts 6 and 7."""

    keyword = SchemaKeywords.EXCLUSIVE_MAXIMUM
    since = 6

    def _validate_type_specific(self, root: Root, schema: Dict[str, Any],
                                value: Any, data: Number) -> List[ValidationError]:
        if isinstance(value, bool) or data < value:
            return []
        return [error(Maximum(expected=value, exclusive=True))]


class MultipleOfValidator(NumberKeywordValidator):
    """Validates "multipleOf", exactly for decimal values."""

    keyword = SchemaKeywords.MULTIPLE_OF

    def _validate_type_specific(self, root: Root, schema: Dict[str, Any],
                                value: Number, data: Number) -> List[ValidationError]:
        if isinstance(value, int) and isinstance(data, int):
            remainder = data % value
        else:
            # str() keeps the decimal the document spelled, not the binary float
            remainder = Fraction(str(data)) % Fraction(str(value))
        if remainder == 0:
            return []
        return [error(MultipleOf(expected=value))]
