"""Settings API endpoints for the daily notes file name, folder and heading level."""

from __future__ import annotations

from fastapi import APIRouter, HTTPException
from pydantic import ValidationError

from dailynotes.api.dependencies import get_plugin
from dailynotes.models import NoteSettingsUpdate
from dailynotes.settings import NoteSettings

router = APIRouter(prefix="/api/v1/settings", tags=["settings"])


@router.get("", response_model=NoteSettings)
async def get_note_settings() -> NoteSettings:
    """Return the current note settings."""
    return get_plugin().settings


@router.put("", response_model=NoteSettings)
async def update_note_settings(body: NoteSettingsUpdate) -> NoteSettings:
    """Update any of the three note settings and persist them."""
    plugin = get_plugin()
    changes = body.model_dump(exclude_none=True)
    try:
        return plugin.update_settings(**changes)
    except ValidationError as e:
        raise HTTPException(status_code=422, detail=str(e)) from e
