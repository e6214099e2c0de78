"""CLI entry point for the daily notes file."""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any

from dailynotes.config import get_settings
from dailynotes.notes.cursor import Selection
from dailynotes.plugin import create_plugin
from dailynotes.vault.workspace import Editor

logger = logging.getLogger("dailynotes.scripts")


def _log_structured(event: str, **kwargs: Any) -> None:
    """Log a structured JSON event for daily notes milestones."""
    logger.info(json.dumps({"event": event, **kwargs}))


def _describe_placement(editor: Editor) -> str:
    placement = editor.placement()
    if isinstance(placement, Selection):
        return (
            f"selection {placement.anchor.line}:{placement.anchor.ch}"
            f"-{placement.head.line}:{placement.head.ch}"
        )
    return f"cursor {placement.line}:{placement.ch}"


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Single-file daily notes")
    subparsers = parser.add_subparsers(dest="command", required=True)
    subparsers.add_parser("open", help="Open (and create/update) the daily notes file")
    subparsers.add_parser("path", help="Print the resolved daily notes path")
    rename_parser = subparsers.add_parser("rename", help="Rename a vault file or folder")
    rename_parser.add_argument("old_path", help="Current vault-relative path")
    rename_parser.add_argument("new_path", help="New vault-relative path")
    parser.add_argument(
        "--vault-path",
        type=Path,
        default=None,
        help="Override vault path (default: from config/env)",
    )
    parser.add_argument(
        "--data-path",
        type=Path,
        default=None,
        help="Override data path holding settings.json (default: from config/env)",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable verbose logging",
    )
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    settings = get_settings()
    vault_path = args.vault_path or settings.vault_path
    data_path = args.data_path or settings.data_path

    if vault_path is None:
        logger.error("No vault path configured. Set DAILYNOTES_VAULT_PATH or use --vault-path")
        return 1

    vault_path = Path(vault_path)
    if not vault_path.exists():
        logger.error("Vault path does not exist: %s", vault_path)
        return 1

    plugin = create_plugin(vault_path, Path(data_path))
    plugin.start()
    try:
        if args.command == "path":
            print(plugin.daily_notes_path())

        elif args.command == "open":
            try:
                editor = plugin.open_daily_notes()
            except ValueError as e:
                logger.error("%s", e)
                return 1
            if editor is None:
                logger.error("%s is a folder", plugin.daily_notes_path())
                return 1
            where = _describe_placement(editor)
            print(f"{editor.path} ({where})")
            _log_structured("daily_notes_opened", path=editor.path, placement=where)

        elif args.command == "rename":
            try:
                entity = plugin.vault.rename(args.old_path, args.new_path)
            except (FileNotFoundError, FileExistsError, ValueError) as e:
                logger.error("Rename failed: %s", e)
                return 1
            print(f"{args.old_path} -> {entity.path}")
            _log_structured(
                "entity_renamed",
                old_path=args.old_path,
                new_path=entity.path,
                daily_notes_path=plugin.daily_notes_path(),
            )
    finally:
        plugin.stop()

    return 0


if __name__ == "__main__":
    sys.exit(main())
