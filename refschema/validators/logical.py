"""
Combinator and conditional keyword validators.
"""

from typing import Any, Dict, List

from .base import KeywordValidator, error, subschema_errors
from ..api import AllOf, AnyOf, IfThenElse, InvalidBranch, Not, OneOf, Root, ValidationError
from ..utils import SchemaKeywords


def branch_errors(root: Root, schemas: List[Any], data: Any) -> List[InvalidBranch]:
    """
    Validate data against each schema of a combinator.

    Args:
        root: Resolved root
        schemas: The combinator's member schemas
        data: Data to validate

    Returns:
        One entry per member, in order, with that member's errors (possibly none)
    """
    return [InvalidBranch(index=index, errors=subschema_errors(root, schema, data))
            for index, schema in enumerate(schemas)]


class AllOfValidator(KeywordValidator):
    """Requires a value to satisfy all member schemas."""

    keyword = SchemaKeywords.ALL_OF

    def _validate(self, root: Root, schema: Dict[str, Any], value: List[Any], data: Any) -> List[ValidationError]:
        invalid = [branch for branch in branch_errors(root, value, data) if branch.errors]
        if not invalid:
            return []
        return [error(AllOf(invalid=invalid))]


class AnyOfValidator(KeywordValidator):
    """Requires a value to satisfy at least one member schema."""

    keyword = SchemaKeywords.ANY_OF

    def _validate(self, root: Root, schema: Dict[str, Any], value: List[Any], data: Any) -> List[ValidationError]:
        invalid = []
        for index, member in enumerate(value):
            member_errors = subschema_errors(root, member, data)
            if not member_errors:
                return []
            invalid.append(InvalidBranch(index=index, errors=member_errors))
        return [error(AnyOf(invalid=invalid))]


class OneOfValidator(KeywordValidator):
    """Requires a value to satisfy exactly one member schema."""

    keyword = SchemaKeywords.ONE_OF

    def _validate(self, root: Root, schema: Dict[str, Any], value: List[Any], data: Any) -> List[ValidationError]:
        branches = branch_errors(root, value, data)
        valid_indices = [branch.index for branch in branches if not branch.errors]
        if len(valid_indices) == 1:
            return []
        invalid = [] if valid_indices else branches
        return [error(OneOf(valid_indices=valid_indices, invalid=invalid))]


class NotValidator(KeywordValidator):
    """Requires a value not to satisfy a schema."""

    keyword = SchemaKeywords.NOT

    def _validate(self, root: Root, schema: Dict[str, Any], value: Any, data: Any) -> List[ValidationError]:
        if subschema_errors(root, value, data):
            return []
        return [error(Not())]


class IfThenElseValidator(KeywordValidator):
    """
    Validates the draft 7 "if"/"then"/"else" conditional.

    Registered under "if"; "then" and "else" do nothing on their own.
    """

    keyword = SchemaKeywords.IF
    since = 7

    def _validate(self, root: Root, schema: Dict[str, Any], value: Any, data: Any) -> List[ValidationError]:
        if subschema_errors(root, value, data):
            branch = SchemaKeywords.ELSE
        else:
            branch = SchemaKeywords.THEN

        if branch not in schema:
            return []
        branch_result = subschema_errors(root, schema[branch], data)
        if not branch_result:
            return []
        return [error(IfThenElse(branch=branch, errors=branch_result))]
