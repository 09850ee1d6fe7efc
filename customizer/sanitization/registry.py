"""Sanitizer registry — dispatch by operation name.

Settings fields name their sanitizer as a string (``"checkbox"``,
``"css_dimension"``, ...).  :class:`Sanitizer` maps those names onto the
sanitizer functions and supplies the external collaborators the page and
color sanitizers need.

The set of operations is closed.  An unknown name is an integration error,
not a data error: it is logged and yields ``None``.
"""
from __future__ import annotations

import logging
from collections.abc import Callable
from enum import StrEnum
from functools import partial

from customizer.sanitization.checkbox import sanitize_checkbox
from customizer.sanitization.color import ColorParser, sanitize_color, sanitize_rgba
from customizer.sanitization.color_parser import parse_color as default_parse_color
from customizer.sanitization.dimension import sanitize_css_dimension
from customizer.sanitization.number import filter_number, sanitize_number
from customizer.sanitization.pages import PUBLISHED_STATUS, StatusLookup, sanitize_dropdown_pages
from customizer.sanitization.sortable import sanitize_sortable

logger = logging.getLogger(__name__)


class SanitizeOperation(StrEnum):
    CHECKBOX = "checkbox"
    NUMBER = "number"
    DROPDOWN_PAGES = "dropdown_pages"
    CSS_DIMENSION = "css_dimension"
    FILTER_NUMBER = "filter_number"
    SORTABLE = "sortable"
    RGBA = "rgba"
    COLOR = "color"
    UNFILTERED = "unfiltered"


def unfiltered(value: object) -> object:
    """Return *value* untouched.  For fields that must not be sanitized."""
    return value


def resolve_operation(name: str) -> SanitizeOperation | None:
    """Return the operation called *name*, or ``None``.

    Field-type spellings such as ``"dropdown-pages"`` are accepted.
    """
    try:
        return SanitizeOperation(str(name).replace("-", "_"))
    except ValueError:
        return None


class Sanitizer:
    """Named-operation front end over the sanitizer functions.

    Parameters
    ----------
    lookup_status:
        ``lookup_status(page_id) -> status`` used by ``dropdown_pages``.
    parse_color:
        Color parser used by ``rgba`` and ``color``.
    published_status:
        Status string ``dropdown_pages`` treats as published.
    """

    def __init__(
        self,
        *,
        lookup_status: StatusLookup,
        parse_color: ColorParser = default_parse_color,
        published_status: str = PUBLISHED_STATUS,
    ) -> None:
        self.lookup_status = lookup_status
        self.parse_color = parse_color
        self.published_status = published_status

    def sanitize(self, name: str, value: object, *, fallback: object = None) -> object:
        """Run operation *name* on *value*.

        *fallback* is only used by ``dropdown_pages``.  Returns ``None`` and
        logs an error when *name* is not an operation.
        """
        operation = resolve_operation(name)
        if operation is None:
            logger.error("Sanitizer.%s does not exist", name)
            return None

        if operation is SanitizeOperation.CHECKBOX:
            return sanitize_checkbox(value)
        if operation is SanitizeOperation.NUMBER:
            return sanitize_number(value)
        if operation is SanitizeOperation.DROPDOWN_PAGES:
            return sanitize_dropdown_pages(
                value,
                fallback,
                lookup_status=self.lookup_status,
                published_status=self.published_status,
            )
        if operation is SanitizeOperation.CSS_DIMENSION:
            return sanitize_css_dimension(value)
        if operation is SanitizeOperation.FILTER_NUMBER:
            return filter_number(value)
        if operation is SanitizeOperation.SORTABLE:
            return sanitize_sortable(value)
        if operation is SanitizeOperation.RGBA:
            return sanitize_rgba(value, parse_color=self.parse_color)
        if operation is SanitizeOperation.COLOR:
            return sanitize_color(value, parse_color=self.parse_color)
        return unfiltered(value)

    def callback(self, name: str, *, fallback: object = None) -> Callable[[object], object]:
        """Return a one-argument ``sanitize_callback`` for operation *name*.

        The name is checked when the callback runs, not here.
        """
        return partial(self.sanitize, name, fallback=fallback)
