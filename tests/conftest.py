"""Shared test fixtures."""

from datetime import datetime
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from dailynotes.main import app
from dailynotes.plugin import DailyNotesPlugin, create_plugin

# A Monday that is not the first of the month
MONDAY = datetime(2026, 10, 19, 9, 30)
# A Sunday on the first of the month
FIRST_OF_MONTH = datetime(2026, 11, 1, 8, 0)


@pytest.fixture
def vault_dir(tmp_path: Path) -> Path:
    path = tmp_path / "vault"
    path.mkdir()
    return path


@pytest.fixture
def data_dir(tmp_path: Path) -> Path:
    return tmp_path / "data"


@pytest.fixture
def plugin(vault_dir: Path, data_dir: Path):
    """A started plugin over an empty vault whose clock is fixed on MONDAY."""
    p: DailyNotesPlugin = create_plugin(vault_dir, data_dir)
    p.clock = lambda: MONDAY
    p.start()
    yield p
    p.stop()


@pytest.fixture
def client():
    return TestClient(app)
