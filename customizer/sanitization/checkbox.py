"""Checkbox sanitizer.

A checkbox control submits either a real boolean or the HTML form token
``"on"``.  Both map to ``True``; everything else, including an unset value,
maps to ``False``.  The token comparison is case-sensitive.
"""
from __future__ import annotations

_CHECKED_TOKEN = "on"


def sanitize_checkbox(checked: object = None) -> bool:
    """Return ``True`` iff *checked* is ``True`` or equals ``"on"``."""
    return checked is True or checked == _CHECKED_TOKEN
