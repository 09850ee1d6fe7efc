"""CSS dimension sanitizer.

Rules applied in order
----------------------
1. Strip leading / trailing whitespace.
2. ``"round"`` is shorthand for ``"50%"``.
3. Empty -> ``""``.
4. ``"auto"`` passes through.
5. No digit at all -> ``""``.
6. ``calc(...)`` expressions pass through verbatim.
7. Otherwise the magnitude (see :func:`filter_number`) is joined with the
   unit found in the value.

Unit detection tests the tokens in ``CSS_UNITS`` order by substring
containment and keeps the last hit.  The order matters: ``vmin`` contains
``in``, so ``vmin`` must come after ``in`` to win.  A later token that is
contained in the unit already chosen never replaces it, which keeps
``rem`` from being read as ``em``.
"""
from __future__ import annotations

import re

from customizer.sanitization.number import filter_number

# Order is significant, see module docstring.
CSS_UNITS: tuple[str, ...] = (
    "rem", "em", "ex", "%", "px", "cm", "mm", "in", "pt", "pc", "ch",
    "vh", "vw", "vmin", "vmax",
)

ROUND_VALUE = "50%"

_DIGIT_RE = re.compile(r"[0-9]")


def detect_unit(value: str) -> str:
    """Return the CSS unit present in *value*, or ``""`` if none is."""
    unit_used = ""
    for unit in CSS_UNITS:
        if unit in value and unit not in unit_used:
            unit_used = unit
    return unit_used


def sanitize_css_dimension(value: object) -> str:
    """Return *value* as a clean CSS dimension, or ``""`` if it is not one."""
    value = "" if value is None else str(value).strip()

    if value == "round":
        value = ROUND_VALUE
    if value == "":
        return ""
    if value == "auto":
        return "auto"
    if not _DIGIT_RE.search(value):
        return ""
    if "calc(" in value:
        return value

    return filter_number(value) + detect_unit(value)
