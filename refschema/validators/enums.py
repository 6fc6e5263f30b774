"""
The "enum" keyword validator.
"""

from typing import Any, Dict, List

from .base import KeywordValidator, error
from ..api import Enum, Root, ValidationError
from ..utils import SchemaKeywords, TypeUtils


class EnumValidator(KeywordValidator):
    """
    Validates a value against an enumeration.
    """

    keyword = SchemaKeywords.ENUM

    def _validate(self, root: Root, schema: Dict[str, Any], value: List[Any], data: Any) -> List[ValidationError]:
        if any(TypeUtils.json_equal(data, allowed) for allowed in value):
            return []
        return [error(Enum(enum=value))]
