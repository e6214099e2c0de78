"""FastAPI dependency injection for shared resources."""

import logging
from functools import lru_cache
from pathlib import Path

from fastapi import HTTPException

from dailynotes.config import Settings
from dailynotes.plugin import DailyNotesPlugin, create_plugin

logger = logging.getLogger(__name__)


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


@lru_cache
def get_data_path() -> Path:
    """Get the data directory path."""
    settings = get_settings()
    data_path = Path(settings.data_path) if settings.data_path else Path("data")
    data_path.mkdir(parents=True, exist_ok=True)
    return data_path


@lru_cache
def _build_plugin(vault_path: Path) -> DailyNotesPlugin:
    plugin = create_plugin(vault_path, get_data_path())
    plugin.start()
    return plugin


def get_plugin() -> DailyNotesPlugin:
    """Get the shared, started plugin for the configured vault.

    Raises:
        HTTPException: 503 when the vault path is not configured or missing.
    """
    settings = get_settings()
    if not settings.vault_path or not settings.vault_path.exists():
        raise HTTPException(
            status_code=503, detail="DAILYNOTES_VAULT_PATH not configured or missing"
        )
    return _build_plugin(settings.vault_path)


def shutdown_plugin() -> None:
    """Stop the shared plugin, if one was built, and forget it."""
    if _build_plugin.cache_info().currsize:
        settings = get_settings()
        if settings.vault_path:
            _build_plugin(settings.vault_path).stop()
    _build_plugin.cache_clear()
