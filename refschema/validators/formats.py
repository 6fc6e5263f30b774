"""
The "format" keyword validator.

Only the formats listed in FORMAT_CHECKERS are checked; unknown formats
always pass.
"""

import ipaddress
import re
from datetime import date
from typing import Any, Callable, Dict, List

from .base import TypedKeywordValidator, error
from ..api import Format, Root, ValidationError
from ..utils import SchemaKeywords

_DATE = re.compile(r"^(\d{4})-(\d{2})-(\d{2})$")
_TIME = re.compile(r"^(\d{2}):(\d{2}):(\d{2})(\.\d+)?([Zz]|[+-](\d{2}):(\d{2}))$")
_EMAIL = re.compile(r"^[^@\s]+@[^@\s]+$")
_HOSTNAME_LABEL = re.compile(r"^[A-Za-z0-9]([A-Za-z0-9-]{0,61}[A-Za-z0-9])?$")
_URI = re.compile(r"^[A-Za-z][A-Za-z0-9+.-]*:[^\s]*$")
_URI_REFERENCE = re.compile(r"^[^\s]*$")
_JSON_POINTER = re.compile(r"^(/([^/~]|~[01])*)*$")


def is_date(value: str) -> bool:
    match = _DATE.match(value)
    if not match:
        return False
    try:
        date(*(int(part) for part in match.groups()))
    except ValueError:
        return False
    return True


def is_time(value: str) -> bool:
    match = _TIME.match(value)
    if not match:
        return False
    hour, minute, second = (int(part) for part in match.group(1, 2, 3))
    if hour > 23 or minute > 59 or second > 60:
        return False
    if match.group(6) is not None:
        return int(match.group(6)) <= 23 and int(match.group(7)) <= 59
    return True


def is_date_time(value: str) -> bool:
    date_part, separator, time_part = value.partition("T")
    if not separator:
        date_part, separator, time_part = value.partition("t")
    return bool(separator) and is_date(date_part) and is_time(time_part)


def is_hostname(value: str) -> bool:
    if not value or len(value) > 253:
        return False
    return all(_HOSTNAME_LABEL.match(label) for label in value.rstrip(".").split("."))


def is_ipv4(value: str) -> bool:
    try:
        ipaddress.IPv4Address(value)
    except ValueError:
        return False
    return True


def is_ipv6(value: str) -> bool:
    try:
        ipaddress.IPv6Address(value)
    except ValueError:
        return False
    return True


def is_regex(value: str) -> bool:
    try:
        re.compile(value)
    except re.error:
        return False
    return True


FORMAT_CHECKERS: Dict[str, Callable[[str], bool]] = {
    "date-time": is_date_time,
    "date": is_date,
    "time": is_time,
    "email": lambda value: bool(_EMAIL.match(value)),
    "hostname": is_hostname,
    "ipv4": is_ipv4,
    "ipv6": is_ipv6,
    "uri": lambda value: bool(_URI.match(value)),
    "uri-reference": lambda value: bool(_URI_REFERENCE.match(value)),
    "json-pointer": lambda value: bool(_JSON_POINTER.match(value)),
    "regex": is_regex,
}


class FormatValidator(TypedKeywordValidator):
    """Validates "format" for strings."""

    keyword = SchemaKeywords.FORMAT

    @property
    def json_type(self) -> str:
        return "string"

    def _validate_type_specific(self, root: Root, schema: Dict[str, Any],
                                value: Any, data: str) -> List[ValidationError]:
        checker = FORMAT_CHECKERS.get(value)
        if checker is None or checker(data):
            return []
        return [error(Format(expected=value))]
