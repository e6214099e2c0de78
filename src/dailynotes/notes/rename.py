"""Keep note settings pointing at the daily notes file after a rename."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import PurePosixPath

from dailynotes.notes.paths import resolve_note_path
from dailynotes.settings import NoteSettings

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RenamedEntity:
    """A file or folder after it was renamed or moved."""

    path: str
    is_folder: bool = False

    @property
    def basename(self) -> str:
        """Last path component, without the extension for files."""
        path = PurePosixPath(self.path)
        return path.name if self.is_folder else path.stem


def _is_inside(path: str, folder: str) -> bool:
    return path.startswith(folder + "/")


def reconcile_rename(
    settings: NoteSettings,
    entity: RenamedEntity,
    old_path: str,
) -> NoteSettings | None:
    """Return updated settings if the rename moved the daily notes file.

    Args:
        settings: Current note settings.
        entity: The renamed file or folder, at its new path.
        old_path: Path of the entity before the rename.

    Returns:
        New settings, or None when the rename does not affect the daily notes file.
    """
    current_path = resolve_note_path(settings)

    if not entity.is_folder and old_path == current_path:
        logger.info("Daily notes file renamed: %s -> %s", old_path, entity.path)
        return settings.model_copy(update={"note_name": entity.basename})

    if entity.is_folder and _is_inside(current_path, old_path):
        new_path = entity.path + current_path[len(old_path) :]
        location, _, _ = new_path.rpartition("/")
        logger.info("Daily notes folder moved: %s -> %s", old_path, entity.path)
        return settings.model_copy(update={"note_location": location})

    return None
