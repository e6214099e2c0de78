"""Pydantic models for the daily notes API."""

from typing import Literal

from pydantic import BaseModel, Field

from dailynotes.notes.cursor import CursorPlacement, Selection


class EditorPositionModel(BaseModel):
    """A 0-based line/character position."""

    line: int
    ch: int


class CursorResponse(BaseModel):
    """Where the cursor ended up after opening the daily notes."""

    kind: Literal["cursor", "selection"]
    anchor: EditorPositionModel
    head: EditorPositionModel

    @classmethod
    def from_placement(cls, placement: CursorPlacement) -> "CursorResponse":
        if isinstance(placement, Selection):
            return cls(
                kind="selection",
                anchor=EditorPositionModel(line=placement.anchor.line, ch=placement.anchor.ch),
                head=EditorPositionModel(line=placement.head.line, ch=placement.head.ch),
            )
        position = EditorPositionModel(line=placement.line, ch=placement.ch)
        return cls(kind="cursor", anchor=position, head=position)


class OpenResponse(BaseModel):
    """Response body for the /daily-notes/open endpoint."""

    path: str
    created: bool
    cursor: CursorResponse | None = None
    content: str


class PathResponse(BaseModel):
    path: str
    exists: bool


class NoteSettingsUpdate(BaseModel):
    """Partial update of the note settings; omitted fields are left alone."""

    note_name: str | None = None
    note_location: str | None = None
    heading_level: int | None = Field(default=None, ge=1, le=6)


class RenameRequest(BaseModel):
    """Request body for the /vault/rename endpoint."""

    old_path: str = Field(min_length=1)
    new_path: str = Field(min_length=1)


class RenameResponse(BaseModel):
    path: str
    is_folder: bool
    daily_notes_path: str
