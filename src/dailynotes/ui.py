"""Gradio settings UI for the daily notes file."""

import logging
from pathlib import Path

import gradio as gr
from pydantic import ValidationError

from dailynotes.config import get_settings
from dailynotes.notes.cursor import Selection
from dailynotes.plugin import DailyNotesPlugin, create_plugin

logger = logging.getLogger(__name__)


def update_note_name(plugin: DailyNotesPlugin, value: str) -> str:
    """Write the note name through to the settings file."""
    try:
        plugin.update_settings(note_name=value)
    except ValidationError:
        gr.Warning("The file name must stay inside the vault")
        return f"Name unchanged (`{plugin.daily_notes_path()}`)"
    return f"Daily notes file: `{plugin.daily_notes_path()}`"


def update_note_location(plugin: DailyNotesPlugin, value: str) -> str:
    """Write the folder through to the settings file."""
    try:
        plugin.update_settings(note_location=value)
    except ValidationError:
        gr.Warning("The folder must be a path inside the vault")
        return f"Location unchanged (`{plugin.daily_notes_path()}`)"
    return f"Daily notes file: `{plugin.daily_notes_path()}`"


def update_heading_level(plugin: DailyNotesPlugin, value: str) -> str:
    """Write the heading level through, keeping the old one if the value is invalid."""
    try:
        plugin.update_settings(heading_level=int(value))
    except (ValueError, ValidationError):
        gr.Warning("Heading level must be a whole number between 1 and 6")
        return f"Heading level unchanged ({plugin.settings.heading_level})"
    return f"Heading level: {plugin.settings.heading_level}"


def open_daily_notes(plugin: DailyNotesPlugin) -> tuple[str, str]:
    """Open the daily notes file; returns (content, cursor description)."""
    try:
        editor = plugin.open_daily_notes()
    except ValueError as e:
        gr.Warning(str(e))
        return "", ""
    if editor is None:
        gr.Warning(f"{plugin.daily_notes_path()} is a folder")
        return "", ""

    placement = editor.placement()
    if isinstance(placement, Selection):
        where = (
            f"Selected line {placement.anchor.line + 1}, "
            f"columns {placement.anchor.ch + 1}-{placement.head.ch}"
        )
    else:
        where = f"Cursor at line {placement.line + 1}, column {placement.ch + 1}"
    return plugin.vault.read(editor.path), where


def create_ui(plugin: DailyNotesPlugin) -> "gr.Blocks":
    """Create the Gradio UI."""
    settings = plugin.settings

    with gr.Blocks(title="Daily Notes") as demo:
        gr.Markdown("## Daily Notes")

        note_name = gr.Textbox(
            label="Name for daily notes file",
            info="Provide a custom name for the daily notes file",
            placeholder="Enter the file name",
            value=settings.note_name,
        )
        note_location = gr.Textbox(
            label="Location of daily notes file",
            info="Provide a path where you want the daily notes file to live (leave empty for root)",
            placeholder="Enter the path",
            value=settings.note_location,
        )
        heading_level = gr.Textbox(
            label="Heading level of daily note sections",
            info="Provide the type of heading that should be used for a daily note (between 1 to 6)",
            placeholder="Enter the heading level",
            value=str(settings.heading_level),
        )
        status = gr.Markdown(f"Daily notes file: `{plugin.daily_notes_path()}`")

        open_btn = gr.Button("Open daily notes", variant="primary")
        cursor_info = gr.Markdown()
        content = gr.Code(language="markdown", label="Daily notes", interactive=False)

        note_name.change(lambda v: update_note_name(plugin, v), inputs=[note_name], outputs=[status])
        note_location.change(
            lambda v: update_note_location(plugin, v), inputs=[note_location], outputs=[status]
        )
        heading_level.change(
            lambda v: update_heading_level(plugin, v), inputs=[heading_level], outputs=[status]
        )
        open_btn.click(lambda: open_daily_notes(plugin), outputs=[content, cursor_info])

    return demo


def main() -> None:
    """Run the Gradio UI."""
    settings = get_settings()

    if not settings.vault_path:
        print("WARNING: DAILYNOTES_VAULT_PATH not set.")
        print("Example: export DAILYNOTES_VAULT_PATH=/path/to/your/vault")
        return

    print(f"Vault path: {settings.vault_path}")
    plugin = create_plugin(Path(settings.vault_path), Path(settings.data_path))
    plugin.start()
    try:
        demo = create_ui(plugin)
        demo.launch(
            server_name=settings.host,
            server_port=settings.gradio_port,
            share=False,
        )
    finally:
        plugin.stop()


if __name__ == "__main__":
    main()
