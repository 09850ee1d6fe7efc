"""Sortable sanitizer.

Sortable controls store an ordered collection of choices as a single
text value.  JSON is the storage encoding: a string that already parses
as JSON is stored as-is, anything else is serialized.  The operation is
idempotent, ``sanitize_sortable(sanitize_sortable(x)) == sanitize_sortable(x)``.
"""
from __future__ import annotations

import json
import reprlib
from collections.abc import Set


def is_serialized(value: object) -> bool:
    """Return ``True`` if *value* is a string holding a JSON document."""
    if not isinstance(value, str):
        return False
    try:
        json.loads(value)
    except (ValueError, RecursionError):
        return False
    return True


def _encode_default(value: object) -> object:
    # Sets have no JSON form; store them sorted so the encoding is stable.
    if isinstance(value, Set):
        return sorted(value, key=repr)
    return str(value)


def _as_text(value: object) -> str:
    try:
        return str(value)
    except RecursionError:
        return reprlib.repr(value)


def sanitize_sortable(value: object) -> str:
    """Return *value* in its JSON encoding, leaving encoded strings untouched."""
    if is_serialized(value):
        return value
    try:
        return json.dumps(value, default=_encode_default)
    except (TypeError, ValueError, RecursionError):
        # Non-string mapping keys, circular references or very deep nesting.
        return json.dumps(_as_text(value))
