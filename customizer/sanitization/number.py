"""Number sanitizers.

``sanitize_number`` keeps any value that already reads as a number and
coerces everything else to an integer.  "Reads as a number" means:

* an ``int``/``float`` (or other real number type), ``bool`` excluded;
* a string made of optional surrounding whitespace, an optional sign,
  digits with an optional fractional part, and an optional exponent
  (``"42"``, ``" -3.5"``, ``".5"``, ``"1e3"``).

Strings such as ``"nan"``, ``"inf"``, ``"1_000"`` or ``"0x1A"`` are *not*
numeric here even though ``float()``/``int()`` would accept some of them.

``filter_number`` is the character filter used by the CSS dimension
sanitizer: it keeps digits, signs and the decimal point and drops the rest.
"""
from __future__ import annotations

import logging
import math
import numbers
import re
from collections.abc import Sized

logger = logging.getLogger(__name__)

_NUMERIC_RE = re.compile(r"^\s*[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?\s*$")
_INTEGER_RE = re.compile(r"^\s*[+-]?\d+\s*$")
_LEADING_INT_RE = re.compile(r"^\s*([+-]?\d+)")
_NON_NUMBER_CHARS_RE = re.compile(r"[^0-9+\-.]")


def is_numeric(value: object) -> bool:
    """Return ``True`` if *value* is a number or a numeric string."""
    if isinstance(value, bool):
        return False
    if isinstance(value, numbers.Real):
        return True
    if isinstance(value, str):
        return _NUMERIC_RE.match(value) is not None
    return False


def _parse_int(digits: str) -> int:
    # Exact: float() loses digits above 2**53.
    try:
        return int(digits)
    except ValueError:
        # Longer than sys.get_int_max_str_digits().
        logger.debug("to_int: integer string too long (length=%d), using 0", len(digits))
        return 0


def to_int(value: object) -> int:
    """Coerce *value* to an ``int``, returning ``0`` when it cannot be read.

    Floats are truncated toward zero, integer strings are read exactly,
    other numeric strings in full (``"1e3"`` -> 1000) and other strings by
    their leading integer (``"12abc"`` -> 12).  Containers count as 1 when non-empty.
    """
    if value is None:
        return 0
    if isinstance(value, bool):
        return int(value)
    if isinstance(value, numbers.Real):
        return int(value) if math.isfinite(value) else 0
    if isinstance(value, str):
        if _INTEGER_RE.match(value):
            return _parse_int(value.strip())
        if _NUMERIC_RE.match(value):
            parsed = float(value)
            return int(parsed) if math.isfinite(parsed) else 0
        match = _LEADING_INT_RE.match(value)
        return _parse_int(match.group(1)) if match else 0
    if isinstance(value, Sized):
        return 1 if len(value) else 0
    try:
        return int(value)
    except (TypeError, ValueError, OverflowError):
        logger.debug("to_int: cannot coerce %s, using 0", type(value).__name__)
        return 0


def sanitize_number(value: object) -> object:
    """Return *value* unchanged if it is numeric, else ``to_int(value)``."""
    if is_numeric(value):
        return value
    return to_int(value)


def filter_number(value: object) -> str:
    """Strip every character that is not a digit, ``+``, ``-`` or ``.``.

    >>> filter_number("-2.5rem")
    '-2.5'
    """
    if value is None:
        return ""
    return _NON_NUMBER_CHARS_RE.sub("", str(value))
