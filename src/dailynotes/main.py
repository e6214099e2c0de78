"""FastAPI application entry point."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from typing import Any

from fastapi import FastAPI

from dailynotes import __version__
from dailynotes.api.dependencies import shutdown_plugin
from dailynotes.api.notes import router as notes_router
from dailynotes.api.settings import router as settings_router
from dailynotes.config import get_settings
from dailynotes.notes.paths import resolve_note_path
from dailynotes.settings import load_settings

logger = logging.getLogger(__name__)

settings = get_settings()


@asynccontextmanager
async def lifespan(_app: FastAPI) -> AsyncIterator[None]:
    """Log resolved configuration at startup and stop the plugin on shutdown."""
    s = get_settings()
    logger.info("Daily notes starting: vault_path=%s, data_path=%s", s.vault_path, s.data_path)
    if not s.vault_path or not s.vault_path.exists():
        logger.error("VAULT PATH NOT CONFIGURED OR MISSING, APIs will return 503 errors")
    yield
    shutdown_plugin()


app = FastAPI(
    title="Daily Notes",
    description="Single-file daily notes for Markdown vaults",
    version=__version__,
    debug=settings.debug,
    lifespan=lifespan,
)

app.include_router(notes_router)
app.include_router(settings_router)


@app.get("/")
async def root() -> dict[str, str]:
    """Return project information."""
    return {
        "name": "Daily Notes",
        "version": __version__,
        "description": "Single-file daily notes for Markdown vaults",
    }


@app.get("/health")
@app.get("/api/v1/health")
async def health() -> dict[str, Any]:
    """Health check endpoint with vault and daily notes file status."""
    s = get_settings()

    checks: dict[str, Any] = {"status": "ok"}

    if not s.vault_path or not s.vault_path.exists():
        checks["status"] = "error"
        checks["vault"] = "not configured or missing"
        return checks

    checks["vault"] = "ok"
    note_path = resolve_note_path(load_settings(s.data_path, write_defaults=False))
    checks["daily_notes_path"] = note_path
    checks["daily_notes_exists"] = (s.vault_path / note_path).is_file()
    if not checks["daily_notes_exists"]:
        checks["status"] = "warning"

    return checks
