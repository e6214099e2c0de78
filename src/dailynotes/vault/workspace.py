"""Workspace and editor state for opened vault documents."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from dailynotes.events import DOCUMENT_OPENED, EventBus
from dailynotes.notes.cursor import CursorPlacement, CursorPosition, Selection
from dailynotes.vault.store import Vault

logger = logging.getLogger(__name__)


@dataclass
class Editor:
    """Cursor and selection state of an open document."""

    path: str
    cursor: CursorPosition = field(default_factory=lambda: CursorPosition(0, 0))
    selection: tuple[CursorPosition, CursorPosition] | None = None

    def set_cursor(self, line: int, ch: int) -> None:
        self.cursor = CursorPosition(line, ch)
        self.selection = None

    def set_selection(self, anchor: CursorPosition, head: CursorPosition) -> None:
        self.selection = (anchor, head)
        self.cursor = head

    def placement(self) -> CursorPlacement:
        if self.selection is not None:
            return Selection(*self.selection)
        return self.cursor


class Workspace:
    """Opens vault documents; at most one editor is active at a time."""

    def __init__(self, vault: Vault, events: EventBus | None = None) -> None:
        self.vault = vault
        self.events = events or vault.events
        self._active: Editor | None = None

    def open_file(self, path: str) -> Editor:
        """Make ``path`` the active document and publish ``document-opened``."""
        if not self.vault.exists(path):
            raise FileNotFoundError(f"{path} not found in the vault")
        self._active = Editor(path)
        logger.debug("Opened %s", path)
        self.events.emit(DOCUMENT_OPENED, path)
        return self._active

    def get_active_editor(self) -> Editor | None:
        return self._active

    def close(self) -> None:
        self._active = None
