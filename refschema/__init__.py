#!/usr/bin/env python3
"""
JSON Schema Resolver and Validator

This package resolves JSON Schema documents (drafts 4, 6 and 7) into
self-contained Roots, fetching remote references through a caller-supplied
resolver, and validates JSON data against them.
"""

import logging

from .api import (
    ROOT,
    ErrorCode,
    JsonValidator,
    Location,
    ResolveResult,
    Root,
    ValidationError,
    ValidationResult
)
from .exceptions import (
    SchemaError,
    UnsupportedSchemaVersionError,
    InvalidSchemaError,
    MissingJsonDecoderError,
    UndefinedRemoteSchemaResolverError
)
from .schema import decode_json, get_ref_schema, resolve, try_resolve
from .utils import JsonPointer
from .validator import validate
from .version import __version__

# Set up logging
logging.basicConfig(
    level=logging.INFO,
    format="%(levelname)s: %(message)s",
)
logger = logging.getLogger("refschema")

# Export public classes and functions
__all__ = [
    "ROOT",
    "ErrorCode",
    "JsonValidator",
    "JsonPointer",
    "Location",
    "ResolveResult",
    "Root",
    "ValidationError",
    "ValidationResult",
    "SchemaError",
    "UnsupportedSchemaVersionError",
    "InvalidSchemaError",
    "MissingJsonDecoderError",
    "UndefinedRemoteSchemaResolverError",
    "decode_json",
    "get_ref_schema",
    "resolve",
    "try_resolve",
    "validate"
]
