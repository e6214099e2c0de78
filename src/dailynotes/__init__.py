"""Single-file daily notes for Markdown vaults."""

__version__ = "0.1.0"
