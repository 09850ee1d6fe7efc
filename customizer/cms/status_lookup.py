"""Published-status lookup against the CMS REST API.

``dropdown_pages`` needs to know whether a page is published.  The CMS
owns that state; this module reads it over HTTP
(``GET {base_url}/wp/v2/pages/{id}`` by default) and returns the page's
``status`` field.

Unauthenticated requests only see public pages, so 401 / 403 / 404 are all
read as "not visible" and return ``None``.  Every other HTTP or transport
error is raised to the caller: there is no retry layer here.
"""
from __future__ import annotations

import logging

import httpx

from customizer.core.settings import get_settings

logger = logging.getLogger(__name__)

_NOT_VISIBLE = frozenset({401, 403, 404})


def null_status_lookup(page_id: int) -> str | None:
    """Lookup used when no CMS is configured: no page is ever published."""
    return None


class HttpStatusLookup:
    """Callable ``lookup(page_id) -> status`` backed by ``httpx``.

    Parameters
    ----------
    base_url:
        CMS REST root (e.g. ``"https://example.com/wp-json"``).  Defaults to
        ``settings.cms_api_url``.
    path:
        Path template with an ``{id}`` placeholder.  Defaults to
        ``settings.cms_status_path``.
    timeout_s:
        Request timeout in seconds.  Defaults to ``settings.cms_timeout_s``.
    client:
        Pre-built ``httpx.Client`` (tests pass one with a mock transport).
    """

    def __init__(
        self,
        base_url: str | None = None,
        *,
        path: str | None = None,
        timeout_s: float | None = None,
        client: httpx.Client | None = None,
    ) -> None:
        settings = get_settings()
        base_url = base_url or settings.cms_api_url
        if not base_url:
            raise ValueError("base_url is required when CMS_API_URL is not set")
        self.base_url = base_url.rstrip("/")
        self.path = path or settings.cms_status_path
        self.timeout_s = timeout_s if timeout_s is not None else settings.cms_timeout_s
        self._client = client or httpx.Client(timeout=self.timeout_s)

    def __call__(self, page_id: int) -> str | None:
        url = self.base_url + self.path.format(id=page_id)
        response = self._client.get(url)
        if response.status_code in _NOT_VISIBLE:
            logger.debug("status_lookup: page %d not visible (HTTP %d)", page_id, response.status_code)
            return None
        response.raise_for_status()

        body = response.json()
        if not isinstance(body, dict):
            logger.debug("status_lookup: page %d answered with a non-object body", page_id)
            return None
        status = body.get("status")
        return status if isinstance(status, str) else None

    def close(self) -> None:
        self._client.close()

    def __enter__(self) -> HttpStatusLookup:
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()
