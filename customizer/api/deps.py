"""FastAPI dependency injection — the configured Sanitizer."""
from __future__ import annotations

from customizer.cms.status_lookup import HttpStatusLookup, null_status_lookup
from customizer.core.settings import get_settings
from customizer.sanitization.registry import Sanitizer

_sanitizer: Sanitizer | None = None


def get_sanitizer() -> Sanitizer:
    """Return the process-wide Sanitizer, built from settings on first use.

    Without ``CMS_API_URL`` no page counts as published, so
    ``dropdown_pages`` always answers with the fallback.
    """
    global _sanitizer
    if _sanitizer is None:
        settings = get_settings()
        lookup = HttpStatusLookup() if settings.cms_api_url else null_status_lookup
        _sanitizer = Sanitizer(lookup_status=lookup, published_status=settings.published_status)
    return _sanitizer


def close_sanitizer() -> None:
    """Release the Sanitizer's HTTP client, if one was built."""
    global _sanitizer
    if _sanitizer is not None and isinstance(_sanitizer.lookup_status, HttpStatusLookup):
        _sanitizer.lookup_status.close()
    _sanitizer = None
