"""FastAPI application factory.

Assembles CORS and the API routers.  This module is the authoritative app
object — customizer/main.py re-exports it.
"""
from __future__ import annotations

from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from customizer.api.deps import close_sanitizer
from customizer.api.routes.health import router as health_router
from customizer.api.routes.sanitize import router as sanitize_router
from customizer.core.logging import setup_logging
from customizer.core.settings import get_settings


@asynccontextmanager
async def lifespan(_: FastAPI):
    setup_logging()
    yield
    close_sanitizer()


settings = get_settings()

app = FastAPI(
    title=settings.app_name,
    version=settings.app_version,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health_router)
app.include_router(sanitize_router)
