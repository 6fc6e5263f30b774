"""
Validation dispatch.

Walks a resolved schema and the data together, hands each keyword to the
validator registered for it, and collects every error with a JSON Pointer
into the data. Validation never stops at the first error.
"""

from typing import Any, List

from .api import Root, ValidationError
from .exceptions import InvalidSchemaError
from .schema import canonical_schema, get_ref_schema
from .utils import SchemaKeywords
from .validators import KEYWORD_VALIDATORS


def validate(root: Root, data: Any) -> List[ValidationError]:
    """
    Validate data against a resolved root.

    Args:
        root: Resolved root
        data: Data to validate

    Returns:
        Every validation error found; empty if the data is valid
    """
    return validation_errors(root, root.schema, data)


def validation_errors(root: Root, schema: Any, data: Any, path: str = "") -> List[ValidationError]:
    """
    Validate data against one schema node of a resolved root.

    Args:
        root: Resolved root, used to dereference $ref descriptors
        schema: Schema node to validate against
        data: Data to validate
        path: JSON Pointer of data within the document being validated

    Returns:
        Validation errors, with paths prefixed by path
    """
    schema = canonical_schema(schema)
    if not isinstance(schema, dict):
        return []

    ref = schema.get(SchemaKeywords.REF)
    if isinstance(ref, str):
        raise InvalidSchemaError(f"reference {ref} has not been resolved")
    if isinstance(ref, tuple):
        # Other keywords next to $ref were dropped during resolution
        target_root = root.at(ref[0])
        return validation_errors(target_root, get_ref_schema(root, ref), data, path)

    errors = []
    for keyword, value in schema.items():
        validator = KEYWORD_VALIDATORS.get(keyword)
        if validator is None or root.version < validator.since:
            continue
        errors.extend(error.with_prefix(path)
                      for error in validator.validate(root, schema, (keyword, value), data))
    return errors
