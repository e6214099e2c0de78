"""Resolve the vault-relative path of the daily notes file."""

from dailynotes.settings import NoteSettings


def resolve_note_path(settings: NoteSettings) -> str:
    """Return the daily notes path, e.g. ``Notes/Personal/Journal.md``.

    An empty ``note_name`` still yields a path (``.md``); callers reject it
    before touching the vault.
    """
    file = settings.note_name + ".md"
    if settings.note_location == "":
        return file
    return f"{settings.note_location}/{file}"
