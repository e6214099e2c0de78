"""Prepend today's section (and a month separator on the 1st) to the daily notes."""

from __future__ import annotations

import logging
from datetime import datetime, timedelta

logger = logging.getLogger(__name__)

ENTRY_PLACEHOLDER = "- entry"


def today_heading(heading_level: int, now: datetime) -> str:
    """Heading line for ``now``, e.g. ``#### 19-10-2026, Monday``."""
    return "#" * heading_level + " " + now.strftime("%d-%m-%Y, %A")


def month_separator(heading_level: int, now: datetime) -> str:
    """Separator closing the month that ended yesterday.

    Uses one heading level above the daily sections, so level 1 produces an
    unheaded line.
    """
    previous = now - timedelta(days=1)
    return "\n---\n" + "#" * (heading_level - 1) + " " + previous.strftime("%B %Y") + "\n"


def has_section_for(data: str, heading: str) -> bool:
    """Check whether any line starts with ``heading``.

    Plain prefix match: a hand-edited heading in another format is not
    recognised.
    """
    return any(line.startswith(heading) for line in data.split("\n"))


def updated_note(data: str, heading_level: int, now: datetime | None = None) -> str:
    """Return the daily notes text with a section for ``now`` at the top.

    Text that already has today's section is returned unchanged, so repeated
    calls for the same day are no-ops.
    """
    if now is None:
        now = datetime.now()

    heading = today_heading(heading_level, now)
    if has_section_for(data, heading):
        return data

    updated = data
    if now.day == 1:
        updated = month_separator(heading_level, now) + updated

    updated = heading + "\n" + ENTRY_PLACEHOLDER + "\n" + updated
    logger.info("Added section %r", heading)
    return updated
