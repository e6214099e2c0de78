"""User-configurable note settings stored in data/settings.json."""

from __future__ import annotations

import contextlib
import json
import logging
import os
import tempfile
from pathlib import Path, PurePosixPath
from typing import Any

from pydantic import BaseModel, Field, ValidationError, field_validator

logger = logging.getLogger(__name__)

_SETTINGS_FILE = "settings.json"


class NoteSettings(BaseModel):
    """Where the daily notes file lives and how its sections are headed."""

    note_name: str = "Daily Notes"
    note_location: str = ""  # folder path, "" = vault root
    heading_level: int = Field(default=4, ge=1, le=6)

    @field_validator("note_name", "note_location")
    @classmethod
    def _stay_inside_vault(cls, value: str) -> str:
        path = PurePosixPath(value)
        if path.is_absolute() or ".." in path.parts:
            raise ValueError("must be a path inside the vault")
        return value


DEFAULT_SETTINGS = NoteSettings()


def load_settings(data_path: Path, *, write_defaults: bool = True) -> NoteSettings:
    """Read settings from data_path/settings.json, merged over the defaults.

    Returns the defaults if the file is missing, writing them out unless
    ``write_defaults`` is False. A corrupt or invalid file is logged and ignored
    (but left in place).
    """
    settings_file = data_path / _SETTINGS_FILE
    if settings_file.exists():
        try:
            with open(settings_file, encoding="utf-8") as f:
                stored: dict[str, Any] = json.load(f)
            return NoteSettings.model_validate({**DEFAULT_SETTINGS.model_dump(), **stored})
        except (json.JSONDecodeError, OSError, TypeError):
            logger.warning("Settings file corrupt or unreadable, returning defaults")
        except ValidationError as e:
            logger.warning("Settings file has invalid values, returning defaults: %s", e)
        return DEFAULT_SETTINGS.model_copy()
    # Write defaults so the file exists for next time
    if write_defaults:
        save_settings(data_path, DEFAULT_SETTINGS)
    return DEFAULT_SETTINGS.model_copy()


def save_settings(data_path: Path, settings: NoteSettings) -> None:
    """Write settings to data_path/settings.json using atomic write."""
    data_path.mkdir(parents=True, exist_ok=True)
    settings_file = data_path / _SETTINGS_FILE
    fd, tmp_path = tempfile.mkstemp(dir=str(data_path), suffix=".tmp")
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            json.dump(settings.model_dump(), f, indent=2)
            f.write("\n")
        os.replace(tmp_path, str(settings_file))
    except BaseException:
        with contextlib.suppress(OSError):
            os.unlink(tmp_path)
        raise
