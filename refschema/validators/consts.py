"""
The "const" keyword validator.
"""

from typing import Any, Dict, List

from .base import KeywordValidator, error
from ..api import Const, Root, ValidationError
from ..utils import SchemaKeywords, TypeUtils


class ConstValidator(KeywordValidator):
    keyword = SchemaKeywords.CONST
    since = 6

    def _validate(self, root: Root, schema: Dict[str, Any], value: Any, data: Any) -> List[ValidationError]:
        if TypeUtils.json_equal(data, value):
            return []
        return [error(Const(expected=value))]
