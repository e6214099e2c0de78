"""Tests for the daily notes plugin wiring."""

import json

import pytest
from pydantic import ValidationError

from dailynotes.events import DOCUMENT_OPENED, ENTITY_RENAMED
from dailynotes.notes.cursor import CursorPosition, Selection
from dailynotes.plugin import EMPTY_NAME_NOTICE, InvalidSettingsError, create_plugin
from tests.conftest import FIRST_OF_MONTH, MONDAY


class TestLifecycle:
    def test_start_subscribes_and_stop_unsubscribes(self, vault_dir, data_dir):
        plugin = create_plugin(vault_dir, data_dir)
        plugin.start()
        assert plugin.running
        assert plugin.events.handler_count(DOCUMENT_OPENED) == 1
        assert plugin.events.handler_count(ENTITY_RENAMED) == 1

        plugin.stop()
        assert not plugin.running
        assert plugin.events.handler_count(DOCUMENT_OPENED) == 0
        assert plugin.events.handler_count(ENTITY_RENAMED) == 0

    def test_start_twice_registers_once(self, plugin):
        plugin.start()
        assert plugin.events.handler_count(DOCUMENT_OPENED) == 1

    def test_start_loads_stored_settings(self, vault_dir, data_dir):
        data_dir.mkdir()
        (data_dir / "settings.json").write_text(json.dumps({"note_name": "Journal"}))
        plugin = create_plugin(vault_dir, data_dir)
        plugin.start()
        assert plugin.daily_notes_path() == "Journal.md"
        plugin.stop()

    def test_stopped_plugin_ignores_opens(self, plugin):
        plugin.stop()
        plugin.vault.create("Daily Notes.md", "")
        plugin.workspace.open_file("Daily Notes.md")
        assert plugin.vault.read("Daily Notes.md") == ""


class TestOpenDailyNotes:
    def test_creates_file_with_today_section(self, plugin, vault_dir):
        editor = plugin.open_daily_notes()
        assert editor is not None
        assert editor.path == "Daily Notes.md"
        assert (vault_dir / "Daily Notes.md").read_text() == "#### 19-10-2026, Monday\n- entry\n"

    def test_selects_placeholder(self, plugin):
        editor = plugin.open_daily_notes()
        assert editor.placement() == Selection(CursorPosition(1, 2), CursorPosition(1, 7))

    def test_creates_missing_folder(self, plugin, vault_dir):
        plugin.update_settings(note_location="Notes/Personal", note_name="Journal")
        plugin.open_daily_notes()
        assert (vault_dir / "Notes" / "Personal" / "Journal.md").is_file()

    def test_reopen_same_day_keeps_entries(self, plugin, vault_dir):
        plugin.open_daily_notes()
        text = "#### 19-10-2026, Monday\n- coffee\n- code review\n\n#### 18-10-2026, Sunday\n- x\n"
        (vault_dir / "Daily Notes.md").write_text(text)

        editor = plugin.open_daily_notes()
        assert (vault_dir / "Daily Notes.md").read_text() == text
        assert editor.placement() == CursorPosition(2, len("- code review"))

    def test_next_day_prepends_section(self, plugin, vault_dir):
        (vault_dir / "Daily Notes.md").write_text("#### 18-10-2026, Sunday\n- x\n")
        plugin.open_daily_notes()
        assert (vault_dir / "Daily Notes.md").read_text() == (
            "#### 19-10-2026, Monday\n- entry\n#### 18-10-2026, Sunday\n- x\n"
        )

    def test_first_of_month_separator(self, plugin, vault_dir):
        plugin.clock = lambda: FIRST_OF_MONTH
        plugin.update_settings(heading_level=3)
        plugin.open_daily_notes()
        assert (vault_dir / "Daily Notes.md").read_text() == (
            "### 01-11-2026, Sunday\n- entry\n\n---\n## October 2026\n"
        )

    def test_empty_name_rejected_before_io(self, plugin, vault_dir):
        plugin.update_settings(note_name="")
        with pytest.raises(InvalidSettingsError, match="cannot be empty"):
            plugin.open_daily_notes()
        assert list(vault_dir.iterdir()) == []
        assert str(InvalidSettingsError(EMPTY_NAME_NOTICE)) == EMPTY_NAME_NOTICE

    def test_folder_at_note_path(self, plugin, vault_dir):
        (vault_dir / "Daily Notes.md").mkdir()
        assert plugin.open_daily_notes() is None

    def test_other_documents_untouched(self, plugin):
        plugin.vault.create("Other.md", "plain")
        plugin.workspace.open_file("Other.md")
        assert plugin.vault.read("Other.md") == "plain"

    def test_no_active_editor_skips_cursor(self, plugin):
        plugin.vault.create("Daily Notes.md", "")
        assert plugin.position_cursor("Daily Notes.md") is None


class TestRenames:
    def test_file_rename_updates_and_persists_name(self, plugin, data_dir):
        plugin.open_daily_notes()
        plugin.vault.rename("Daily Notes.md", "Log.md")
        assert plugin.settings.note_name == "Log"
        stored = json.loads((data_dir / "settings.json").read_text())
        assert stored["note_name"] == "Log"

    def test_folder_rename_updates_location(self, plugin, data_dir):
        plugin.update_settings(note_name="Journal", note_location="Notes")
        plugin.open_daily_notes()
        plugin.vault.rename("Notes", "Archive/Notes")
        assert plugin.settings.note_location == "Archive/Notes"
        assert plugin.daily_notes_path() == "Archive/Notes/Journal.md"
        assert plugin.vault.exists(plugin.daily_notes_path())
        stored = json.loads((data_dir / "settings.json").read_text())
        assert stored["note_location"] == "Archive/Notes"

    def test_unrelated_rename_does_not_save(self, plugin, data_dir):
        (data_dir / "settings.json").unlink()
        plugin.vault.create("Other.md")
        plugin.vault.rename("Other.md", "Else.md")
        assert not (data_dir / "settings.json").exists()

    def test_renamed_file_still_updates_on_open(self, plugin, vault_dir):
        plugin.vault.create("Daily Notes.md", "")
        plugin.vault.rename("Daily Notes.md", "Log.md")
        plugin.open_daily_notes()
        assert (vault_dir / "Log.md").read_text().startswith("#### 19-10-2026, Monday")


class TestUpdateSettings:
    def test_persists(self, plugin, data_dir):
        plugin.update_settings(heading_level=2)
        stored = json.loads((data_dir / "settings.json").read_text())
        assert stored["heading_level"] == 2

    def test_invalid_value_leaves_settings(self, plugin):
        with pytest.raises(ValidationError):
            plugin.update_settings(heading_level=9)
        assert plugin.settings.heading_level == 4

    def test_uses_clock_for_day(self, plugin, vault_dir):
        plugin.clock = lambda: MONDAY.replace(day=20)
        plugin.open_daily_notes()
        assert (vault_dir / "Daily Notes.md").read_text().startswith("#### 20-10-2026, Tuesday")
