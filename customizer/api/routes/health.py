"""GET /health — liveness check plus the page-status source in use."""
from __future__ import annotations

from fastapi import APIRouter

from customizer.core.settings import get_settings

router = APIRouter(tags=["health"])


@router.get("/health", summary="Basic health check")
def health_check() -> dict[str, str]:
    settings = get_settings()
    return {
        "status": "ok",
        "service": settings.app_name,
        "version": settings.app_version,
        "environment": settings.app_env,
        # "disabled" means dropdown_pages always returns the fallback
        "status_lookup": "cms" if settings.cms_api_url else "disabled",
    }
