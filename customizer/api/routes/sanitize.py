"""Sanitize routes — run a sanitizer over a submitted value.

POST /sanitize/{operation} takes ``{"value": ..., "fallback": ...}`` and
returns the sanitized value.  ``fallback`` only matters for
``dropdown_pages``.  Errors raised by the page-status lookup are not caught
here.
"""
from __future__ import annotations

import logging
from typing import Any

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel

from customizer.api.deps import get_sanitizer
from customizer.sanitization.registry import SanitizeOperation, Sanitizer, resolve_operation

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/sanitize", tags=["sanitize"])


class SanitizeBody(BaseModel):
    value: Any = None
    fallback: Any = None


@router.get("", summary="List sanitize operations")
def list_operations() -> list[str]:
    return sorted(op.value for op in SanitizeOperation)


@router.post("/{operation}", summary="Sanitize a value")
def sanitize_value(
    operation: str,
    body: SanitizeBody,
    sanitizer: Sanitizer = Depends(get_sanitizer),
):
    resolved = resolve_operation(operation)
    if resolved is None:
        logger.error("Sanitizer.%s does not exist", operation)
        raise HTTPException(status_code=404, detail=f"Unknown sanitize operation: {operation!r}")

    result = sanitizer.sanitize(resolved, body.value, fallback=body.fallback)
    return {"operation": resolved.value, "value": result}
