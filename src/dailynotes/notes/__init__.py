"""Daily notes text logic: path, section updates, cursor and rename handling."""

from dailynotes.notes.cursor import CursorPosition, Selection, position_cursor
from dailynotes.notes.paths import resolve_note_path
from dailynotes.notes.rename import RenamedEntity, reconcile_rename
from dailynotes.notes.updater import updated_note

__all__ = [
    "CursorPosition",
    "RenamedEntity",
    "Selection",
    "position_cursor",
    "reconcile_rename",
    "resolve_note_path",
    "updated_note",
]
