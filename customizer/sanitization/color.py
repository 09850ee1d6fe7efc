"""Color sanitizers — ``rgba`` and ``color``.

Both take the color parser as a keyword argument so callers can swap in
their own; the default is :func:`customizer.sanitization.color_parser.parse_color`.
"""
from __future__ import annotations

from collections.abc import Callable

from customizer.sanitization.color_parser import ColorValue, parse_color

ColorParser = Callable[[object], ColorValue]

TRANSPARENT = "transparent"


def sanitize_rgba(value: object, *, parse_color: ColorParser = parse_color) -> str:
    """Return *value* as an ``rgba(r,g,b,a)`` string, whatever its notation."""
    return parse_color(value).to_css("rgba")


def sanitize_color(value: object, *, parse_color: ColorParser = parse_color) -> str:
    """Return *value* re-rendered in its own notation.

    Empty input gives ``""`` and ``"transparent"`` is kept as the keyword.
    """
    if value is None or value == "":
        return ""
    if isinstance(value, str) and value.strip() == TRANSPARENT:
        return TRANSPARENT

    color = parse_color(value)
    return color.to_css(color.mode)
