"""Daily notes endpoints: open the file and rename vault entities."""

import logging

from fastapi import APIRouter, HTTPException

from dailynotes.api.dependencies import get_plugin
from dailynotes.models import (
    CursorResponse,
    OpenResponse,
    PathResponse,
    RenameRequest,
    RenameResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1", tags=["daily-notes"])


@router.post("/daily-notes/open", response_model=OpenResponse)
async def open_daily_notes() -> OpenResponse:
    """Open today's daily notes, creating the file and today's section if needed."""
    plugin = get_plugin()
    path = plugin.daily_notes_path()
    try:
        created = bool(plugin.settings.note_name) and not plugin.vault.exists(path)
        editor = plugin.open_daily_notes()
    except ValueError as e:
        # InvalidSettingsError, or a hand-edited location that leaves the vault
        raise HTTPException(status_code=422, detail=str(e)) from e

    if editor is None:
        raise HTTPException(status_code=409, detail=f"{path} is a folder")

    return OpenResponse(
        path=editor.path,
        created=created,
        cursor=CursorResponse.from_placement(editor.placement()),
        content=plugin.vault.read(editor.path),
    )


@router.get("/daily-notes/path", response_model=PathResponse)
async def daily_notes_path() -> PathResponse:
    """Return the resolved daily notes path and whether it exists yet."""
    plugin = get_plugin()
    path = plugin.daily_notes_path()
    try:
        exists = plugin.vault.exists(path)
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e)) from e
    return PathResponse(path=path, exists=exists)


@router.post("/vault/rename", response_model=RenameResponse)
async def rename_entity(request: RenameRequest) -> RenameResponse:
    """Rename or move a vault file or folder; the daily notes settings follow it."""
    plugin = get_plugin()
    try:
        entity = plugin.vault.rename(request.old_path, request.new_path)
    except FileNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e)) from e
    except FileExistsError as e:
        raise HTTPException(status_code=409, detail=str(e)) from e
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e)) from e

    return RenameResponse(
        path=entity.path,
        is_folder=entity.is_folder,
        daily_notes_path=plugin.daily_notes_path(),
    )
