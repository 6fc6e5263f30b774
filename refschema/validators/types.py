"""
The "type" keyword validator.
"""

from typing import Any, Dict, List

from .base import KeywordValidator, error
from ..api import Root, Type, ValidationError
from ..utils import SchemaKeywords, TypeUtils


class TypeValidator(KeywordValidator):
    """
    Validates a value's type against one or more possible types.
    """

    keyword = SchemaKeywords.TYPE

    def _validate(self, root: Root, schema: Dict[str, Any], value: Any, data: Any) -> List[ValidationError]:
        types = [value] if isinstance(value, str) else list(value)
        if any(TypeUtils.matches_type(data, json_type) for json_type in types):
            return []
        return [error(Type(expected=types, actual=TypeUtils.get_json_type(data)))]
