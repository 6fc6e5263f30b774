"""
Base keyword validator classes for refschema.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, List, Tuple

from ..api import ErrorKind, Root, ValidationError
from ..utils import JsonPointer, TypeUtils


def subschema_errors(root: Root, schema: Any, data: Any, *parts: Any) -> List[ValidationError]:
    """
    Validate data against a subschema.

    Args:
        root: Resolved root
        schema: Subschema to validate against
        data: Data to validate
        parts: Path segments locating data below the value being validated

    Returns:
        Errors with paths relative to the value being validated
    """
    from ..validator import validation_errors

    return validation_errors(root, schema, data, JsonPointer.from_parts(parts))


def error(kind: ErrorKind, *parts: Any) -> ValidationError:
    """Build a validation error at a path below the value being validated."""
    return ValidationError(error=kind, path=JsonPointer.from_parts(parts))


class KeywordValidator(ABC):
    """
    Base class for all keyword validators.

    A keyword validator is called with the keyword/value pair it should check.
    Pairs for any other keyword are a no-op, so every validator can be probed
    with any keyword.

    Attributes:
        keyword: The schema keyword this validator handles
        since: First draft that defines the keyword
    """

    keyword: str = ""
    since: int = 4

    def validate(self,
                 root: Root,
                 schema: Dict[str, Any],
                 property: Tuple[str, Any],
                 data: Any) -> List[ValidationError]:
        """
        Validate data against one keyword of a schema.

        Args:
            root: Resolved root, used to dereference and recurse
            schema: The schema object the keyword belongs to
            property: (keyword, value) pair
            data: Data to validate

        Returns:
            Errors with paths relative to data; empty if the keyword is not ours
        """
        keyword, value = property
        if keyword != self.keyword:
            return []
        return self._validate(root, schema, value, data)

    @abstractmethod
    def _validate(self, root: Root, schema: Dict[str, Any], value: Any, data: Any) -> List[ValidationError]:
        """
        Validate data against this validator's keyword.

        Args:
            root: Resolved root
            schema: The schema object the keyword belongs to
            value: The keyword's value
            data: Data to validate

        Returns:
            Errors with paths relative to data
        """
        pass

    def __str__(self) -> str:
        """String representation of the validator."""
        return f"{self.__class__.__name__}({self.keyword})"

    def __repr__(self) -> str:
        return self.__str__()


class TypedKeywordValidator(KeywordValidator, ABC):
    """
    Base class for keywords that only constrain one JSON type.

    Data of any other type passes; rejecting it is the job of "type".
    """

    @property
    @abstractmethod
    def json_type(self) -> str:
        """
        Get the JSON Schema type this keyword applies to.

        Returns:
            JSON Schema type name
        """
        pass

    def _validate(self, root: Root, schema: Dict[str, Any], value: Any, data: Any) -> List[ValidationError]:
        if not TypeUtils.matches_type(data, self.json_type):
            return []
        return self._validate_type_specific(root, schema, value, data)

    @abstractmethod
    def _validate_type_specific(self, root: Root, schema: Dict[str, Any],
                                value: Any, data: Any) -> List[ValidationError]:
        """
        Validate data already known to be of this keyword's type.

        Args:
            root: Resolved root
            schema: The schema object the keyword belongs to
            value: The keyword's value
            data: Data to validate (guaranteed to be of the right type)

        Returns:
            Errors with paths relative to data
        """
        pass
