"""Daily notes plugin: wires settings, vault events and the note logic together."""

from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import datetime
from pathlib import Path
from typing import Any

from dailynotes.events import DOCUMENT_OPENED, ENTITY_RENAMED, EventBus
from dailynotes.notes.cursor import CursorPlacement, Selection, position_cursor
from dailynotes.notes.paths import resolve_note_path
from dailynotes.notes.rename import RenamedEntity, reconcile_rename
from dailynotes.notes.updater import updated_note
from dailynotes.settings import NoteSettings, load_settings, save_settings
from dailynotes.vault.store import Vault
from dailynotes.vault.workspace import Editor, Workspace

logger = logging.getLogger(__name__)

EMPTY_NAME_NOTICE = "Daily notes file name cannot be empty. Change this in the plugin settings."


class InvalidSettingsError(ValueError):
    """Note settings do not allow the requested operation."""


class DailyNotesPlugin:
    """Keeps a single daily notes file up to date as it is opened and moved."""

    def __init__(
        self,
        vault: Vault,
        workspace: Workspace,
        data_path: Path,
        events: EventBus | None = None,
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        self.vault = vault
        self.workspace = workspace
        self.data_path = data_path
        self.events = events or vault.events
        self.clock = clock or datetime.now
        self.settings = NoteSettings()
        self._unsubscribers: list[Callable[[], None]] = []

    # -- lifecycle ----------------------------------------------------------

    def load(self) -> NoteSettings:
        self.settings = load_settings(self.data_path)
        return self.settings

    def save(self) -> None:
        save_settings(self.data_path, self.settings)

    def start(self) -> None:
        """Load settings and subscribe to open and rename events."""
        if self._unsubscribers:
            return
        self.load()
        self._unsubscribers = [
            self.events.on(DOCUMENT_OPENED, self.on_file_open),
            self.events.on(ENTITY_RENAMED, self.on_rename),
        ]
        logger.info("Daily notes plugin started (file: %s)", self.daily_notes_path())

    def stop(self) -> None:
        """Unsubscribe every handler registered by start()."""
        for unsubscribe in self._unsubscribers:
            unsubscribe()
        self._unsubscribers = []

    @property
    def running(self) -> bool:
        return bool(self._unsubscribers)

    # -- settings -----------------------------------------------------------

    def daily_notes_path(self) -> str:
        return resolve_note_path(self.settings)

    def update_settings(self, **changes: Any) -> NoteSettings:
        """Validate and persist a partial settings update.

        Raises:
            pydantic.ValidationError: If a value is invalid; nothing is changed.
        """
        merged = {**self.settings.model_dump(), **changes}
        self.settings = NoteSettings.model_validate(merged)
        self.save()
        return self.settings

    # -- event handlers -----------------------------------------------------

    def on_rename(self, entity: RenamedEntity, old_path: str) -> None:
        """Follow the daily notes file when it or one of its folders moves."""
        reconciled = reconcile_rename(self.settings, entity, old_path)
        if reconciled is None:
            return
        self.settings = reconciled
        self.save()
        logger.info("Daily notes file is now %s", self.daily_notes_path())

    def on_file_open(self, path: str | None) -> None:
        """Update the daily notes file if it is the one being opened."""
        if path and path == self.daily_notes_path():
            self.update_daily_note(path)
            self.position_cursor(path)

    # -- operations ---------------------------------------------------------

    def update_daily_note(self, path: str) -> str:
        heading_level = self.settings.heading_level
        now = self.clock()
        return self.vault.process(path, lambda data: updated_note(data, heading_level, now))

    def position_cursor(self, path: str) -> CursorPlacement | None:
        """Place the active editor's cursor in the newest section."""
        editor = self.workspace.get_active_editor()
        if editor is None:
            return None

        placement = position_cursor(self.vault.read(path))
        if isinstance(placement, Selection):
            editor.set_selection(placement.anchor, placement.head)
        else:
            editor.set_cursor(placement.line, placement.ch)
        return placement

    def open_daily_notes(self) -> Editor | None:
        """Open the daily notes file, creating it first if needed.

        Raises:
            InvalidSettingsError: If the note name is empty. Checked before any I/O.
            ValueError: If the configured path leaves the vault.
        """
        if self.settings.note_name == "":
            raise InvalidSettingsError(EMPTY_NAME_NOTICE)

        path = self.daily_notes_path()
        if not self.vault.exists(path):
            self.vault.create(path, "")
        elif self.vault.is_folder(path):
            logger.warning("%s is a folder, not opening it", path)
            return None

        return self.workspace.open_file(path)


def create_plugin(vault_path: Path, data_path: Path) -> DailyNotesPlugin:
    """Build a plugin over a vault directory with its own event bus and workspace."""
    events = EventBus()
    vault = Vault(vault_path, events)
    workspace = Workspace(vault, events)
    return DailyNotesPlugin(vault, workspace, data_path, events)
