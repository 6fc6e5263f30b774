"""
Public API for the refschema resolver and validator.
"""

from dataclasses import dataclass, field, replace
import enum
import logging
import threading
from typing import Any, Callable, ClassVar, Dict, List, Optional, Union


class ErrorCode(enum.Enum):
    """Enumeration of validation error codes."""
    TYPE = enum.auto()
    ENUM = enum.auto()
    CONST = enum.auto()
    MINIMUM = enum.auto()
    MAXIMUM = enum.auto()
    MULTIPLE_OF = enum.auto()
    MIN_LENGTH = enum.auto()
    MAX_LENGTH = enum.auto()
    PATTERN = enum.auto()
    FORMAT = enum.auto()
    MIN_ITEMS = enum.auto()
    MAX_ITEMS = enum.auto()
    UNIQUE_ITEMS = enum.auto()
    ADDITIONAL_ITEMS = enum.auto()
    CONTAINS = enum.auto()
    REQUIRED = enum.auto()
    ADDITIONAL_PROPERTIES = enum.auto()
    MIN_PROPERTIES = enum.auto()
    MAX_PROPERTIES = enum.auto()
    DEPENDENCIES = enum.auto()
    PROPERTY_NAMES = enum.auto()
    ALL_OF = enum.auto()
    ANY_OF = enum.auto()
    ONE_OF = enum.auto()
    NOT = enum.auto()
    IF_THEN_ELSE = enum.auto()


class ErrorKind:
    """
    Base class for the kind-specific payload of a validation error.

    Subclasses are dataclasses whose fields describe what was expected and
    what was found. Each one names its ErrorCode and renders a message.
    """

    code: ClassVar[ErrorCode]

    @property
    def message(self) -> str:
        return self.code.name.lower()


@dataclass(frozen=True)
class Type(ErrorKind):
    expected: List[str]
    actual: str
    code: ClassVar[ErrorCode] = ErrorCode.TYPE

    @property
    def message(self) -> str:
        return f"Type mismatch. Expected {', '.join(self.expected)} but got {self.actual}."


@dataclass(frozen=True)
class Enum(ErrorKind):
    enum: List[Any]
    code: ClassVar[ErrorCode] = ErrorCode.ENUM

    @property
    def message(self) -> str:
        return f"Value is not allowed in enum {self.enum}."


@dataclass(frozen=True)
class Const(ErrorKind):
    expected: Any
    code: ClassVar[ErrorCode] = ErrorCode.CONST

    @property
    def message(self) -> str:
        return f"Expected {self.expected!r}."


@dataclass(frozen=True)
class Minimum(ErrorKind):
    expected: Union[int, float]
    exclusive: bool = False
    code: ClassVar[ErrorCode] = ErrorCode.MINIMUM

    @property
    def message(self) -> str:
        qualifier = "greater than" if self.exclusive else "greater than or equal to"
        return f"Expected the value to be {qualifier} {self.expected}."


@dataclass(frozen=True)
class Maximum(ErrorKind):
    expected: Union[int, float]
    exclusive: bool = False
    code: ClassVar[ErrorCode] = ErrorCode.MAXIMUM

    @property
    def message(self) -> str:
        qualifier = "less than" if self.exclusive else "less than or equal to"
        return f"Expected the value to be {qualifier} {self.expected}."


@dataclass(frozen=True)
class MultipleOf(ErrorKind):
    expected: Union[int, float]
    code: ClassVar[ErrorCode] = ErrorCode.MULTIPLE_OF

    @property
    def message(self) -> str:
        return f"Expected value to be a multiple of {self.expected}."


@dataclass(frozen=True)
class MinLength(ErrorKind):
    expected: int
    actual: int
    code: ClassVar[ErrorCode] = ErrorCode.MIN_LENGTH

    @property
    def message(self) -> str:
        return f"Expected value to have a minimum length of {self.expected} but was {self.actual}."


@dataclass(frozen=True)
class MaxLength(ErrorKind):
    expected: int
    actual: int
    code: ClassVar[ErrorCode] = ErrorCode.MAX_LENGTH

    @property
    def message(self) -> str:
        return f"Expected value to have a maximum length of {self.expected} but was {self.actual}."


@dataclass(frozen=True)
class Pattern(ErrorKind):
    expected: str
    code: ClassVar[ErrorCode] = ErrorCode.PATTERN

    @property
    def message(self) -> str:
        return f"Does not match pattern {self.expected!r}."


@dataclass(frozen=True)
class Format(ErrorKind):
    expected: str
    code: ClassVar[ErrorCode] = ErrorCode.FORMAT

    @property
    def message(self) -> str:
        return f"Expected to be a valid {self.expected}."


@dataclass(frozen=True)
class MinItems(ErrorKind):
    expected: int
    actual: int
    code: ClassVar[ErrorCode] = ErrorCode.MIN_ITEMS

    @property
    def message(self) -> str:
        return f"Expected a minimum of {self.expected} items but got {self.actual}."


@dataclass(frozen=True)
class MaxItems(ErrorKind):
    expected: int
    actual: int
    code: ClassVar[ErrorCode] = ErrorCode.MAX_ITEMS

    @property
    def message(self) -> str:
        return f"Expected a maximum of {self.expected} items but got {self.actual}."


@dataclass(frozen=True)
class UniqueItems(ErrorKind):
    code: ClassVar[ErrorCode] = ErrorCode.UNIQUE_ITEMS

    @property
    def message(self) -> str:
        return "Expected items to be unique but they were not."


@dataclass(frozen=True)
class AdditionalItems(ErrorKind):
    additional_indices: List[int]
    code: ClassVar[ErrorCode] = ErrorCode.ADDITIONAL_ITEMS

    @property
    def message(self) -> str:
        return f"Schema does not allow additional items, found {len(self.additional_indices)}."


@dataclass(frozen=True)
class Contains(ErrorKind):
    empty: bool
    code: ClassVar[ErrorCode] = ErrorCode.CONTAINS

    @property
    def message(self) -> str:
        if self.empty:
            return "Trying to validate contains against an empty array."
        return "Expected any of the items to match the schema but none did."


@dataclass(frozen=True)
class Required(ErrorKind):
    missing: List[str]
    code: ClassVar[ErrorCode] = ErrorCode.REQUIRED

    @property
    def message(self) -> str:
        return f"Required properties {', '.join(self.missing)} were not present."


@dataclass(frozen=True)
class AdditionalProperties(ErrorKind):
    code: ClassVar[ErrorCode] = ErrorCode.ADDITIONAL_PROPERTIES

    @property
    def message(self) -> str:
        return "Schema does not allow additional properties."


@dataclass(frozen=True)
class MinProperties(ErrorKind):
    expected: int
    actual: int
    code: ClassVar[ErrorCode] = ErrorCode.MIN_PROPERTIES

    @property
    def message(self) -> str:
        return f"Expected a minimum of {self.expected} properties but got {self.actual}."


@dataclass(frozen=True)
class MaxProperties(ErrorKind):
    expected: int
    actual: int
    code: ClassVar[ErrorCode] = ErrorCode.MAX_PROPERTIES

    @property
    def message(self) -> str:
        return f"Expected a maximum of {self.expected} properties but got {self.actual}."


@dataclass(frozen=True)
class Dependencies(ErrorKind):
    property: str
    missing: List[str]
    code: ClassVar[ErrorCode] = ErrorCode.DEPENDENCIES

    @property
    def message(self) -> str:
        return f"Property {self.property} depends on {', '.join(self.missing)} to be present but it was not."


@dataclass(frozen=True)
class PropertyNames(ErrorKind):
    invalid: Dict[str, List["ValidationError"]]
    code: ClassVar[ErrorCode] = ErrorCode.PROPERTY_NAMES

    @property
    def message(self) -> str:
        return f"Expected the property names to be valid but {', '.join(sorted(self.invalid))} were not."


@dataclass(frozen=True)
class InvalidBranch:
    """Errors collected for one member of allOf/anyOf/oneOf."""
    index: int
    errors: List["ValidationError"]


@dataclass(frozen=True)
class AllOf(ErrorKind):
    invalid: List[InvalidBranch]
    code: ClassVar[ErrorCode] = ErrorCode.ALL_OF

    @property
    def message(self) -> str:
        indices = ", ".join(str(branch.index) for branch in self.invalid)
        return f"Expected all of the schemata to match, but the schemata at the following indexes did not: {indices}."


@dataclass(frozen=True)
class AnyOf(ErrorKind):
    invalid: List[InvalidBranch]
    code: ClassVar[ErrorCode] = ErrorCode.ANY_OF

    @property
    def message(self) -> str:
        return "Expected any of the schemata to match but none did."


@dataclass(frozen=True)
class OneOf(ErrorKind):
    valid_indices: List[int]
    invalid: List[InvalidBranch]
    code: ClassVar[ErrorCode] = ErrorCode.ONE_OF

    @property
    def message(self) -> str:
        if self.valid_indices:
            indices = ", ".join(str(index) for index in self.valid_indices)
            return f"Expected exactly one of the schemata to match, but the schemata at the following indexes did: {indices}."
        return "Expected exactly one of the schemata to match, but none of them did."


@dataclass(frozen=True)
class Not(ErrorKind):
    code: ClassVar[ErrorCode] = ErrorCode.NOT

    @property
    def message(self) -> str:
        return "Expected schema not to match but it did."


@dataclass(frozen=True)
class IfThenElse(ErrorKind):
    branch: str
    errors: List["ValidationError"]
    code: ClassVar[ErrorCode] = ErrorCode.IF_THEN_ELSE

    @property
    def message(self) -> str:
        return f"Expected the schema in the {self.branch} branch to match but it did not."


@dataclass(frozen=True)
class ValidationError:
    """
    A data-level validation error.

    Attributes:
        error: Kind-specific payload (e.g. MinItems(expected=2, actual=1))
        path: JSON Pointer to the value that failed validation
    """
    error: ErrorKind
    path: str = ""

    @property
    def code(self) -> ErrorCode:
        return self.error.code

    @property
    def message(self) -> str:
        return self.error.message

    def with_prefix(self, prefix: str) -> "ValidationError":
        """Return a copy located under the given JSON Pointer prefix."""
        if not prefix:
            return self
        return replace(self, path=prefix + self.path)

    def __str__(self) -> str:
        return f"Error at '{self.path}': {self.message}"


@dataclass
class ValidationResult:
    """
    Result of schema validation.

    Attributes:
        valid: Whether the validation was successful
        errors: List of validation errors (if any)
    """
    valid: bool = True
    errors: List[ValidationError] = field(default_factory=list)

    def __bool__(self) -> bool:
        return self.valid


@dataclass
class ResolveResult:
    """
    Result of resolving a schema without raising.

    Attributes:
        root: The resolved root, or None if resolution failed
        error: The fatal error that stopped resolution, if any
    """
    root: Optional["Root"] = None
    error: Optional[Exception] = None

    def __bool__(self) -> bool:
        return self.error is None


class Location(enum.Enum):
    """Location of a document that has no URL of its own."""
    ROOT = "root"

    def __repr__(self) -> str:
        return self.value


ROOT = Location.ROOT


class _Comparisons(threading.local):
    def __init__(self):
        self.pairs = set()


_comparing = _Comparisons()


class DefinitionsPool(dict):
    """
    The merged definitions of a resolved schema.

    Every resolved "definitions" key holds the same pool, so a definition
    with nested definitions contains the pool itself. Equality treats a pair
    of pools already being compared as equal, which lets two such cyclic
    trees be compared.
    """

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, dict):
            return NotImplemented
        in_progress = _comparing.pairs
        pair = (id(self), id(other))
        if pair in in_progress:
            return True
        in_progress.add(pair)
        try:
            return dict.__eq__(self, other)
        finally:
            in_progress.discard(pair)

    def __ne__(self, other: Any) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    __hash__ = None


@dataclass(frozen=True)
class Root:
    """
    A fully resolved schema.

    Attributes:
        schema: The resolved schema tree; every $ref holds a reference descriptor
        refs: Resolved remote documents keyed by absolute URL
        definitions: Every definitions entry found anywhere, merged
        location: ROOT for a top-level document, otherwise its URL
        version: Declared draft (4, 6 or 7)
        source: The raw document the Root was resolved from
        targets: Dereferenced target of every descriptor in the tree
        versions: Declared draft of each document, keyed by ROOT or URL
    """
    schema: Any = None
    refs: Dict[str, Any] = field(default_factory=dict)
    definitions: Dict[str, Any] = field(default_factory=dict)
    location: Union[Location, str] = ROOT
    version: int = 7
    source: Any = None
    targets: Dict[tuple, Any] = field(default_factory=dict, compare=False, repr=False)
    versions: Dict[Any, int] = field(default_factory=dict, compare=False, repr=False)

    def at(self, location: Union[Location, str]) -> "Root":
        """
        View this root from one of its documents.

        Args:
            location: ROOT or the URL of a cached document

        Returns:
            A root sharing this one's state whose version is that document's draft
        """
        version = self.versions.get(location, self.version)
        if version == self.version:
            return self
        return replace(self, version=version)


class JsonValidator:
    """
    Main entrypoint class for JSON schema resolution and validation.

    Collaborators are passed in explicitly; nothing is read from global state.
    """

    def __init__(self,
                 remote_schema_resolver: Optional[Callable[[str], Any]] = None,
                 decode_json: Optional[Callable[[str], Any]] = None,
                 verbose: bool = False):
        """
        Initialize a new JSON validator.

        Args:
            remote_schema_resolver: Called with an absolute URL, returns the raw schema there
            decode_json: Turns JSON text into a value
            verbose: Whether to log resolution details
        """
        self.remote_schema_resolver = remote_schema_resolver
        self.decoder = decode_json
        self.verbose = verbose
        if verbose:
            logging.getLogger("refschema").setLevel(logging.DEBUG)

    def decode(self, text: str) -> Any:
        """Decode JSON text with the configured decoder."""
        from .schema import decode_json

        return decode_json(text, decoder=self.decoder)

    def resolve(self, schema: Any) -> Root:
        """Resolve a raw schema (or re-resolve a Root)."""
        from .schema import resolve

        return resolve(schema, remote_schema_resolver=self.remote_schema_resolver)

    def validate(self, data: Any, schema: Any) -> ValidationResult:
        """
        Validate data against a JSON schema.

        Args:
            data: The data to validate
            schema: A raw JSON schema or an already resolved Root

        Returns:
            ValidationResult containing validation status and any errors
        """
        from .validator import validate

        root = schema if isinstance(schema, Root) else self.resolve(schema)
        errors = validate(root, data)
        return ValidationResult(valid=not errors, errors=errors)
