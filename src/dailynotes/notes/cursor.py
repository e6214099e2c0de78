"""Decide where the cursor goes after the daily notes file is opened."""

from __future__ import annotations

from dataclasses import dataclass

from dailynotes.notes.updater import ENTRY_PLACEHOLDER


@dataclass(frozen=True)
class CursorPosition:
    """A point in the document (0-based line and character)."""

    line: int
    ch: int


@dataclass(frozen=True)
class Selection:
    """A selected range between two positions."""

    anchor: CursorPosition
    head: CursorPosition


CursorPlacement = CursorPosition | Selection

DOCUMENT_START = CursorPosition(0, 0)


def _is_list_item(line: str) -> bool:
    return line.lstrip().startswith("-")


def find_first_entry(lines: list[str]) -> int | None:
    """Index of the first list line, or None if the document has none."""
    for i, line in enumerate(lines):
        if _is_list_item(line):
            return i
    return None


def position_cursor(data: str) -> CursorPlacement:
    """Pick the cursor placement for the newest section of ``data``.

    A fresh ``- entry`` placeholder is selected (minus the ``- ``) so it can be
    typed over. Otherwise the cursor goes to the end of the last entry in the
    first run of list lines. Without any list line it stays at the start.
    """
    lines = data.split("\n")

    first = find_first_entry(lines)
    if first is None:
        return DOCUMENT_START

    if lines[first] == ENTRY_PLACEHOLDER:
        return Selection(
            CursorPosition(first, 2),
            CursorPosition(first, len(lines[first])),
        )

    last = first
    while last + 1 < len(lines) and _is_list_item(lines[last + 1]):
        last += 1

    return CursorPosition(last, len(lines[last]))
