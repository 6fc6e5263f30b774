"""
Schema resolution.

Turns a raw JSON Schema document into a Root: every $ref becomes a reference
descriptor that is known to dereference, remote documents are fetched once
and cached in Root.refs, and all definitions are flattened into one pool.
"""

import copy
import logging
import re
from typing import Any, Callable, Dict, List, NamedTuple, Optional, Sequence, Tuple, Union

from .api import ROOT, DefinitionsPool, Location, ResolveResult, Root
from .exceptions import (
    InvalidSchemaError,
    MissingJsonDecoderError,
    SchemaError,
    UndefinedRemoteSchemaResolverError,
    UnsupportedSchemaVersionError,
)
from .meta import DEFAULT_SCHEMA, WELL_KNOWN_URLS, draft_version, is_meta_schema, meta_schema, meta_schema_root
from .utils import JsonPointer, SchemaKeywords
from .validators.objects import compile_pattern

logger = logging.getLogger("refschema")

_JSON_TYPES = ["object", "array", "boolean", "string", "number", "null"]

Descriptor = Tuple[Union[Location, str, int], ...]


def true_schema() -> Dict[str, Any]:
    """Object form of the boolean schema true: matches any value."""
    return {"anyOf": [{"type": json_type} for json_type in _JSON_TYPES]}


def false_schema() -> Dict[str, Any]:
    """Object form of the boolean schema false: matches nothing."""
    return {"not": true_schema()}


def canonical_schema(value: Any) -> Any:
    """Expand a boolean schema into its object form; other values pass through."""
    if value is True:
        return true_schema()
    if value is False:
        return false_schema()
    return value


def decode_json(text: str, decoder: Optional[Callable[[str], Any]] = None) -> Any:
    """
    Decode JSON text with the given decoder.

    Args:
        text: JSON text
        decoder: Callable turning text into a value, e.g. json.loads

    Returns:
        The decoded value

    Raises:
        MissingJsonDecoderError: If no decoder is given
    """
    if decoder is None:
        raise MissingJsonDecoderError()
    return decoder(text)


def resolve(schema: Any, remote_schema_resolver: Optional[Callable[[str], Any]] = None) -> Root:
    """
    Resolve a schema into a Root.

    A Root passed in is resolved again from its source document.

    Args:
        schema: Boolean, decoded JSON object, or Root
        remote_schema_resolver: Called with an absolute URL, returns the raw schema there

    Returns:
        The resolved Root

    Raises:
        UnsupportedSchemaVersionError: If $schema is not draft 4, 6 or 7
        InvalidSchemaError: If the schema is invalid or a $ref cannot be resolved
        UndefinedRemoteSchemaResolverError: If a remote schema is needed and no resolver was given
    """
    resolver = SchemaResolver(remote_schema_resolver)
    if isinstance(schema, Root):
        return resolver.resolve(schema.source, location=schema.location)
    return resolver.resolve(schema)


def try_resolve(schema: Any, remote_schema_resolver: Optional[Callable[[str], Any]] = None) -> ResolveResult:
    """
    Resolve a schema, returning a fatal error instead of raising it.

    Only SchemaError subclasses are captured; exceptions raised by the remote
    schema resolver itself still propagate.

    Args:
        schema: Boolean, decoded JSON object, or Root
        remote_schema_resolver: Called with an absolute URL, returns the raw schema there

    Returns:
        ResolveResult holding either the Root or the error
    """
    try:
        return ResolveResult(root=resolve(schema, remote_schema_resolver))
    except SchemaError as e:
        return ResolveResult(error=e)


def get_ref_schema(root: Root, path: Sequence[Any]) -> Any:
    """
    Dereference a reference descriptor.

    Args:
        root: Resolved root
        path: Descriptor, a ROOT or URL head followed by keys and indices

    Returns:
        The referenced schema; a boolean target is returned in object form

    Raises:
        InvalidSchemaError: If the descriptor does not point at anything
    """
    target = root.targets.get(tuple(path))
    if target is not None:
        return target

    head = path[0]
    document = root.schema if head is ROOT else root.refs.get(head)
    return _walk(document, path)


def _walk(document: Any, path: Sequence[Any]) -> Any:
    message = f"reference {JsonPointer.ref_to_string(path)} could not be resolved"
    if document is None:
        raise InvalidSchemaError(message)

    current = document
    for segment in path[1:]:
        if isinstance(segment, int) and isinstance(current, list):
            if segment < 0 or segment >= len(current):
                raise InvalidSchemaError(message)
            current = current[segment]
        elif isinstance(current, dict) and str(segment) in current:
            current = current[str(segment)]
        else:
            raise InvalidSchemaError(message)

    return canonical_schema(current)


class _Document(NamedTuple):
    """The document a part of the traversal belongs to."""
    location: Union[Location, str]
    raw: Dict[str, Any]
    own_url: Optional[str]


class SchemaResolver:
    """
    Resolves one top-level schema document.

    State (fetched documents, the definitions pool) lives on the instance and
    belongs to a single resolve call; a new resolver is made for every call.
    """

    def __init__(self, remote_schema_resolver: Optional[Callable[[str], Any]] = None):
        """
        Initialize a new schema resolver.

        Args:
            remote_schema_resolver: Called with an absolute URL, returns the raw schema there
        """
        self.remote_schema_resolver = remote_schema_resolver
        self.refs: Dict[str, Any] = {}
        self.definitions: Dict[str, Any] = DefinitionsPool()
        self.versions: Dict[Union[Location, str], int] = {}

    def resolve(self, schema: Any, location: Union[Location, str] = ROOT) -> Root:
        """
        Resolve a raw schema document.

        Args:
            schema: Boolean or decoded JSON object
            location: ROOT, or the URL the document was loaded from

        Returns:
            The resolved Root
        """
        source = copy.deepcopy(schema)

        if isinstance(source, bool):
            return Root(schema=canonical_schema(source), location=location, source=source)

        if not isinstance(source, dict):
            raise InvalidSchemaError(
                f"schema must be an object or a boolean, got {type(source).__name__}")

        resolved, version = self._resolve_document(source, location)
        if location is not ROOT:
            self.refs[location] = resolved
        self.versions[location] = version

        targets: Dict[Descriptor, Any] = {}
        root = Root(
            schema=resolved,
            refs=self.refs,
            definitions=self.definitions,
            location=location,
            version=version,
            source=source,
            targets=targets,
            versions=self.versions,
        )

        # Descriptors double as handles: dereference each one once, up front
        for descriptor in resolved_refs(root):
            if descriptor not in targets:
                targets[descriptor] = get_ref_schema(root, descriptor)
        return root

    def _resolve_document(self, schema: Dict[str, Any],
                          location: Union[Location, str]) -> Tuple[Dict[str, Any], int]:
        version = self._assert_valid_schema(schema)

        own_id = SchemaKeywords.schema_id(schema)
        own_url = own_id.partition("#")[0] if own_id else ""
        document = _Document(location, schema, own_url or None)

        return self._resolve_node(schema, "", document), version

    def _assert_valid_schema(self, schema: Dict[str, Any]) -> int:
        """
        Check the declared draft and validate against its meta-schema.

        Args:
            schema: Raw schema document

        Returns:
            The declared draft version

        Raises:
            UnsupportedSchemaVersionError: If the draft is not 4, 6 or 7
            InvalidSchemaError: If the schema does not pass its meta-schema
        """
        from .validator import validate

        version = draft_version(schema.get(SchemaKeywords.SCHEMA, DEFAULT_SCHEMA))
        if version is None:
            raise UnsupportedSchemaVersionError()

        if is_meta_schema(schema):
            return version

        logger.debug(f"Validating schema against the draft-{version:02d} meta-schema")
        errors = validate(meta_schema_root(version), schema)
        if errors:
            details = "; ".join(str(error) for error in errors)
            raise InvalidSchemaError(
                f"schema did not pass validation against its meta-schema: {details}",
                errors=errors,
            )

        return version

    def _resolve_node(self, schema: Dict[str, Any], scope: str, document: _Document) -> Dict[str, Any]:
        schema_id = SchemaKeywords.schema_id(schema)
        if schema_id is not None:
            scope = scope + schema_id

        # Siblings of $ref are never validated
        if isinstance(schema.get(SchemaKeywords.REF), str):
            schema = {key: value for key, value in schema.items()
                      if key in (SchemaKeywords.REF, SchemaKeywords.DEFINITIONS)}

        return self._in_sorted_order(
            schema, lambda key, value: self._resolve_property(key, value, scope, document))

    def _resolve_property(self, key: str, value: Any, scope: str, document: _Document) -> Any:
        if key == SchemaKeywords.REF and isinstance(value, str):
            return self._resolve_ref(value, scope, document)

        if key == SchemaKeywords.DEFINITIONS and isinstance(value, dict):
            return self._resolve_definitions(value, scope, document)

        if key == SchemaKeywords.PATTERN and isinstance(value, str):
            return self._checked_pattern(value)

        if key == SchemaKeywords.PATTERN_PROPERTIES and isinstance(value, dict):
            for pattern in value:
                self._checked_pattern(pattern)

        if key in SchemaKeywords.DATA:
            return value

        if key in SchemaKeywords.SUBSCHEMA_LIST and isinstance(value, list):
            return [self._resolve_schema(item, scope, document) for item in value]

        if key in SchemaKeywords.SUBSCHEMA:
            return self._resolve_schema(
                value, scope, document, keep_boolean=key in SchemaKeywords.BOOLEAN_OR_SCHEMA)

        if key in SchemaKeywords.SUBSCHEMA_MAP and isinstance(value, dict):
            return self._in_sorted_order(
                value, lambda _, subschema: self._resolve_schema(subschema, scope, document))

        # Unknown keywords: objects are treated as schemas, anything else is kept
        if isinstance(value, dict):
            return self._resolve_node(value, scope, document)
        if isinstance(value, list):
            return [self._resolve_node(item, scope, document) if isinstance(item, dict) else item
                    for item in value]
        return value

    def _resolve_schema(self, value: Any, scope: str, document: _Document,
                        keep_boolean: bool = False) -> Any:
        if isinstance(value, bool):
            return value if keep_boolean else canonical_schema(value)
        if isinstance(value, dict):
            return self._resolve_node(value, scope, document)
        return value

    def _resolve_definitions(self, definitions: Dict[str, Any], scope: str,
                             document: _Document) -> Dict[str, Any]:
        resolved = self._in_sorted_order(
            definitions, lambda _, subschema: self._resolve_schema(subschema, scope, document))
        self.definitions.update(resolved)
        return self.definitions

    @staticmethod
    def _checked_pattern(pattern: str) -> str:
        try:
            compile_pattern(pattern)
        except re.error as e:
            raise InvalidSchemaError(f"invalid regular expression {pattern!r}: {e}") from e
        return pattern

    @staticmethod
    def _in_sorted_order(mapping: Dict[str, Any], resolve_value: Callable[[str, Any], Any]) -> Dict[str, Any]:
        """Resolve values in sorted key order, keeping the mapping's own key order."""
        resolved = {key: resolve_value(key, mapping[key]) for key in sorted(mapping)}
        return {key: resolved[key] for key in mapping}

    def _resolve_ref(self, ref: str, scope: str, document: _Document) -> Descriptor:
        """
        Turn a $ref string into a reference descriptor.

        Args:
            ref: The $ref value
            scope: Base URI accumulated from enclosing ids
            document: Document the $ref appears in

        Returns:
            Descriptor tuple, checked to dereference

        Raises:
            InvalidSchemaError: If the fragment is not a JSON Pointer or the target is missing
        """
        scoped_ref = self._scoped_ref(scope, ref)

        if scoped_ref == "#":
            path: Descriptor = (document.location,)
        else:
            url, _, fragment = scoped_ref.partition("#")
            if fragment and not fragment.startswith("/"):
                raise InvalidSchemaError(f"invalid reference {scoped_ref}")
            head = self._location_for_url(url, document)
            path = (head, *JsonPointer.fragment_segments(fragment))

        # Fail now rather than while validating data
        _walk(self._target(path[0], document), path)
        return path

    @staticmethod
    def _scoped_ref(scope: str, ref: str) -> str:
        if ref.startswith(("http://", "https://")):
            return ref
        return (scope + ref).replace("##", "#")

    def _location_for_url(self, url: str, document: _Document) -> Union[Location, str]:
        if not url or url == document.own_url:
            return document.location
        self._resolve_remote_schema(url)
        return url

    def _target(self, head: Any, document: _Document) -> Any:
        if head == document.location:
            return document.raw
        return self.refs.get(head)

    def _resolve_remote_schema(self, url: str) -> None:
        """
        Fetch, resolve and cache the document at a URL.

        Args:
            url: Absolute URL without fragment
        """
        if url in self.refs:
            return

        if url in WELL_KNOWN_URLS:
            remote_schema = meta_schema(WELL_KNOWN_URLS[url])
        else:
            remote_schema = copy.deepcopy(self._fetch_remote_schema(url))

        if isinstance(remote_schema, bool):
            self.refs[url] = canonical_schema(remote_schema)
            return

        if not isinstance(remote_schema, dict):
            raise InvalidSchemaError(
                f"remote schema {url} must be an object or a boolean, got {type(remote_schema).__name__}")

        # Cache the raw document first so references back into it do not fetch again
        self.refs[url] = remote_schema
        resolved, version = self._resolve_document(remote_schema, url)
        self.refs[url] = resolved
        self.versions[url] = version

    def _fetch_remote_schema(self, url: str) -> Any:
        if self.remote_schema_resolver is None:
            raise UndefinedRemoteSchemaResolverError()
        logger.debug(f"Fetching remote schema {url}")
        return self.remote_schema_resolver(url)


def resolved_refs(root: Root) -> List[Descriptor]:
    """
    Collect every reference descriptor in a resolved root.

    Args:
        root: Resolved root

    Returns:
        Descriptors found in root.schema and in every cached remote document
    """
    found: List[Descriptor] = []
    seen = set()

    def collect(node: Any) -> None:
        if id(node) in seen:
            return
        if isinstance(node, dict):
            seen.add(id(node))
            for key, value in node.items():
                if key == SchemaKeywords.REF and isinstance(value, tuple):
                    found.append(value)
                else:
                    collect(value)
        elif isinstance(node, list):
            seen.add(id(node))
            for item in node:
                collect(item)

    collect(root.schema)
    for document in root.refs.values():
        collect(document)
    return found
