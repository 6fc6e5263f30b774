"""
Fatal errors raised while resolving a schema.

Data-level validation problems are not exceptions; they are returned as
ValidationError values (see api.py).
"""

from typing import Sequence


class SchemaError(Exception):
    """Base exception for schema resolution errors."""
    pass


class UnsupportedSchemaVersionError(SchemaError):
    """Raised when $schema names a draft other than 4, 6 or 7."""

    def __init__(self, message: str = "Unsupported schema version, only draft 4, 6, and 7 are supported."):
        super().__init__(message)


class InvalidSchemaError(SchemaError):
    """
    Raised when a schema cannot be resolved.

    Attributes:
        errors: Validation errors against the meta-schema, if that is why
    """

    def __init__(self, message: str = "invalid schema", errors: Sequence = ()):
        super().__init__(message)
        self.errors = list(errors)


class MissingJsonDecoderError(SchemaError):
    """Raised when JSON text must be decoded but no decoder was given."""

    def __init__(self, message: str = "JSON decoder not specified."):
        super().__init__(message)


class UndefinedRemoteSchemaResolverError(SchemaError):
    """Raised when a remote schema must be fetched but no resolver was given."""

    def __init__(self, message: str = (
            "trying to resolve a remote schema but no remote schema resolver function is defined")):
        super().__init__(message)
