"""Vault storage: vault-relative reads, atomic rewrites and renames."""

from __future__ import annotations

import contextlib
import logging
import os
import tempfile
from collections.abc import Callable
from pathlib import Path, PurePosixPath

from dailynotes.events import ENTITY_RENAMED, EventBus
from dailynotes.notes.rename import RenamedEntity

logger = logging.getLogger(__name__)


class Vault:
    """A directory of Markdown files addressed by vault-relative POSIX paths."""

    def __init__(self, vault_path: Path, events: EventBus | None = None) -> None:
        """Initialize the vault.

        Args:
            vault_path: Path to the vault root.
            events: Bus that receives ``entity-renamed`` events. A private bus is
                created when omitted.
        """
        self.vault_path = vault_path
        self.events = events or EventBus()

    def _full_path(self, path: str) -> Path:
        """Map a vault-relative path onto the filesystem, refusing escapes."""
        relative = PurePosixPath(path)
        if not relative.parts:
            raise ValueError(f"Path must name an entry in the vault: {path!r}")
        if relative.is_absolute() or ".." in relative.parts:
            raise ValueError(f"Path must stay inside the vault: {path!r}")
        return self.vault_path / relative

    def exists(self, path: str) -> bool:
        return self._full_path(path).exists()

    def is_folder(self, path: str) -> bool:
        return self._full_path(path).is_dir()

    def create(self, path: str, text: str = "") -> str:
        """Create a new file (and any missing parent folders)."""
        full_path = self._full_path(path)
        if full_path.exists():
            raise FileExistsError(f"{path} already exists in the vault")
        full_path.parent.mkdir(parents=True, exist_ok=True)
        full_path.write_text(text, encoding="utf-8")
        logger.info("Created %s", path)
        return path

    def read(self, path: str) -> str:
        return self._full_path(path).read_text(encoding="utf-8")

    def process(self, path: str, fn: Callable[[str], str]) -> str:
        """Read ``path``, transform it with ``fn`` and write the result back.

        The write goes through a temp file and ``os.replace`` and is skipped when
        ``fn`` returns the text unchanged.

        Returns:
            The text now stored in the file.
        """
        full_path = self._full_path(path)
        original = full_path.read_text(encoding="utf-8")
        updated = fn(original)
        if updated == original:
            return original

        fd, tmp_path = tempfile.mkstemp(dir=str(full_path.parent), suffix=".tmp")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(updated)
            os.replace(tmp_path, str(full_path))
        except BaseException:
            with contextlib.suppress(OSError):
                os.unlink(tmp_path)
            raise
        logger.debug("Rewrote %s (%d -> %d chars)", path, len(original), len(updated))
        return updated

    def rename(self, old_path: str, new_path: str) -> RenamedEntity:
        """Rename or move a file or folder and publish ``entity-renamed``.

        Raises:
            FileNotFoundError: If ``old_path`` does not exist.
            FileExistsError: If something already exists at ``new_path``.
            ValueError: If either path leaves the vault, or
                ``new_path`` lies inside the folder being moved.
        """
        source = self._full_path(old_path)
        target = self._full_path(new_path)
        if PurePosixPath(new_path).is_relative_to(PurePosixPath(old_path)):
            raise ValueError(f"Cannot move {old_path} into itself ({new_path})")

        if not source.exists():
            raise FileNotFoundError(f"{old_path} not found in the vault")
        if target.exists():
            raise FileExistsError(f"{new_path} already exists in the vault")

        target.parent.mkdir(parents=True, exist_ok=True)
        source.rename(target)

        entity = RenamedEntity(path=str(PurePosixPath(new_path)), is_folder=target.is_dir())
        logger.info("Renamed %s -> %s", old_path, entity.path)
        self.events.emit(ENTITY_RENAMED, entity, str(PurePosixPath(old_path)))
        return entity
