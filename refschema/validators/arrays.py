"""
Array keyword validators.
"""

from typing import Any, Dict, List

from .base import TypedKeywordValidator, error, subschema_errors
from ..api import AdditionalItems, Contains, MaxItems, MinItems, Root, UniqueItems, ValidationError
from ..utils import SchemaKeywords, TypeUtils


class ArrayKeywordValidator(TypedKeywordValidator):
    """Base class for keywords constraining arrays."""

    @property
    def json_type(self) -> str:
        return "array"


class ItemsValidator(ArrayKeywordValidator):
    """
    Validates "items".

    A single schema applies to every item; a list of schemas applies
    positionally and leaves the remaining items to "additionalItems".
    """

    keyword = SchemaKeywords.ITEMS

    def _validate_type_specific(self, root: Root, schema: Dict[str, Any],
                                value: Any, data: List[Any]) -> List[ValidationError]:
        errors = []
        if isinstance(value, list):
            for index, (item_schema, item) in enumerate(zip(value, data)):
                errors.extend(subschema_errors(root, item_schema, item, index))
        elif isinstance(value, dict):
            for index, item in enumerate(data):
                errors.extend(subschema_errors(root, value, item, index))
        return errors


class AdditionalItemsValidator(ArrayKeywordValidator):
    """Validates "additionalItems"; only meaningful next to a list of "items"."""

    keyword = SchemaKeywords.ADDITIONAL_ITEMS

    def _validate_type_specific(self, root: Root, schema: Dict[str, Any],
                                value: Any, data: List[Any]) -> List[ValidationError]:
        items = schema.get(SchemaKeywords.ITEMS)
        if not isinstance(items, list) or len(data) <= len(items):
            return []

        extra = range(len(items), len(data))
        if value is False:
            return [error(AdditionalItems(additional_indices=list(extra)))]
        if isinstance(value, dict):
            errors = []
            for index in extra:
                errors.extend(subschema_errors(root, value, data[index], index))
            return errors
        return []


class MinItemsValidator(ArrayKeywordValidator):
    """Validates "minItems"."""

    keyword = SchemaKeywords.MIN_ITEMS

    def _validate_type_specific(self, root: Root, schema: Dict[str, Any],
                                value: Any, data: List[Any]) -> List[ValidationError]:
        count = len(data)
        if count >= value:
            return []
        return [error(MinItems(expected=value, actual=count))]


class MaxItemsValidator(ArrayKeywordValidator):
    """Validates "maxItems"."""

    keyword = SchemaKeywords.MAX_ITEMS

    def _validate_type_specific(self, root: Root, schema: Dict[str, Any],
                                value: Any, data: List[Any]) -> List[ValidationError]:
        count = len(data)
        if count <= value:
            return []
        return [error(MaxItems(expected=value, actual=count))]


class UniqueItemsValidator(ArrayKeywordValidator):
    """Validates "uniqueItems" using JSON equality."""

    keyword = SchemaKeywords.UNIQUE_ITEMS

    def _validate_type_specific(self, root: Root, schema: Dict[str, Any],
                                value: Any, data: List[Any]) -> List[ValidationError]:
        if value is not True:
            return []
        for i, item in enumerate(data):
            for other in data[i + 1:]:
                if TypeUtils.json_equal(item, other):
                    return [error(UniqueItems())]
        return []


class ContainsValidator(ArrayKeywordValidator):
    """Validates "contains": at least one item must match."""

    keyword = SchemaKeywords.CONTAINS
    since = 6

    def _validate_type_specific(self, root: Root, schema: Dict[str, Any],
                                value: Any, data: List[Any]) -> List[ValidationError]:
        if not data:
            return [error(Contains(empty=True))]
        if any(not subschema_errors(root, value, item) for item in data):
            return []
        return [error(Contains(empty=False))]
