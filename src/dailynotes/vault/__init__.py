"""Vault storage and workspace modules."""

from dailynotes.vault.store import Vault
from dailynotes.vault.workspace import Editor, Workspace

__all__ = ["Editor", "Vault", "Workspace"]
