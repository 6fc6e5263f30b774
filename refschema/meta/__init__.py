"""
Bundled draft 4, 6 and 7 meta-schemas.

The documents ship as JSON package data. Resolved meta-schema roots are
memoized per draft since they never change and never involve fetched
documents.
"""

import copy
import json
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, Optional

from ..utils import SchemaKeywords

CURRENT_DRAFT_SCHEMA_URL = "http://json-schema.org/schema"
DRAFT4_SCHEMA_URL = "http://json-schema.org/draft-04/schema"
DRAFT6_SCHEMA_URL = "http://json-schema.org/draft-06/schema"
DRAFT7_SCHEMA_URL = "http://json-schema.org/draft-07/schema"

DEFAULT_SCHEMA = CURRENT_DRAFT_SCHEMA_URL + "#"

DRAFT_URLS: Dict[int, str] = {
    4: DRAFT4_SCHEMA_URL,
    6: DRAFT6_SCHEMA_URL,
    7: DRAFT7_SCHEMA_URL,
}

# Remote references to these never reach the remote schema resolver
WELL_KNOWN_URLS: Dict[str, int] = {
    CURRENT_DRAFT_SCHEMA_URL: 7,
    DRAFT4_SCHEMA_URL: 4,
    DRAFT6_SCHEMA_URL: 6,
    DRAFT7_SCHEMA_URL: 7,
}

_DOCUMENTS = {
    4: "draft-04.json",
    6: "draft-06.json",
    7: "draft-07.json",
}


def draft_version(url: Any) -> Optional[int]:
    """
    Map a meta-schema URL to the draft it names.

    Matching is by prefix, so "http://json-schema.org/draft-07/schema#"
    and the URL without its fragment both map to 7. The current-draft URL
    maps to 7.

    Args:
        url: Value of $schema, or the URL part of a $ref

    Returns:
        4, 6 or 7, or None for anything else
    """
    if not isinstance(url, str):
        return None
    for version, draft_url in DRAFT_URLS.items():
        if url.startswith(draft_url):
            return version
    if url.startswith(CURRENT_DRAFT_SCHEMA_URL):
        return 7
    return None


def is_meta_schema(schema: Any) -> bool:
    """
    Check whether a document declares one of the draft 4, 6 or 7 meta-schemas.

    Such documents skip meta validation. The unversioned current-draft URL
    does not count.

    Args:
        schema: Raw schema document

    Returns:
        True if $schema starts with a draft 4, 6 or 7 meta-schema URL
    """
    if not isinstance(schema, dict):
        return False
    declared = schema.get(SchemaKeywords.SCHEMA)
    if not isinstance(declared, str):
        return False
    return any(declared.startswith(draft_url) for draft_url in DRAFT_URLS.values())


@lru_cache(maxsize=None)
def _load(version: int) -> Dict[str, Any]:
    path = Path(__file__).parent / _DOCUMENTS[version]
    with open(path, "r", encoding="utf-8") as f:
        return json.load(f)


def meta_schema(version: int) -> Dict[str, Any]:
    """
    Get a fresh copy of the raw meta-schema for a draft.

    Args:
        version: 4, 6 or 7

    Returns:
        The meta-schema document
    """
    return copy.deepcopy(_load(version))


@lru_cache(maxsize=None)
def meta_schema_root(version: int):
    """
    Get the resolved meta-schema for a draft.

    Args:
        version: 4, 6 or 7

    Returns:
        Root of the resolved meta-schema
    """
    from ..schema import resolve

    return resolve(meta_schema(version))
