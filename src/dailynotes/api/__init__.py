"""API route modules."""

from dailynotes.api.notes import router as notes_router
from dailynotes.api.settings import router as settings_router

__all__ = ["notes_router", "settings_router"]
