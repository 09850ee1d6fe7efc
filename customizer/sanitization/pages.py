"""Drop-down pages sanitizer.

The submitted value must be the ID of a published page.  It is coerced to
a non-negative integer and checked against an injected status lookup
(see :mod:`customizer.cms.status_lookup`); any other page, or a page the
lookup cannot see, yields the caller's fallback (normally the setting's
default).
"""
from __future__ import annotations

import logging
from collections.abc import Callable
from typing import TypeVar

from customizer.sanitization.number import to_int

logger = logging.getLogger(__name__)

PUBLISHED_STATUS = "publish"

StatusLookup = Callable[[int], str | None]

T = TypeVar("T")


def to_absint(value: object) -> int:
    """Return the absolute integer value of *value* (0 when unreadable)."""
    return abs(to_int(value))


def sanitize_dropdown_pages(
    page_id: object,
    fallback: T,
    *,
    lookup_status: StatusLookup,
    published_status: str = PUBLISHED_STATUS,
) -> int | T:
    """Return the page ID if that page is published, else *fallback*.

    Parameters
    ----------
    page_id:
        Raw value submitted by the control.
    fallback:
        Value returned when the page is not published.
    lookup_status:
        ``lookup_status(page_id) -> status``.  Errors it raises propagate.
    published_status:
        Status string that counts as published.
    """
    page_id = to_absint(page_id)
    status = lookup_status(page_id)
    if status == published_status:
        return page_id

    logger.debug("dropdown_pages: page %d has status %r, using fallback", page_id, status)
    return fallback
