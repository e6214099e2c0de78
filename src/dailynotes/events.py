"""In-memory named-event bus used by the vault, workspace and plugin."""

from __future__ import annotations

import contextlib
import logging
from collections.abc import Callable
from typing import Any

logger = logging.getLogger(__name__)

DOCUMENT_OPENED = "document-opened"
ENTITY_RENAMED = "entity-renamed"

EventHandler = Callable[..., Any]


class EventBus:
    """Synchronous pub/sub keyed by event name.

    Handlers run in registration order on the emitting call stack; a handler
    exception propagates to the emitter.
    """

    def __init__(self) -> None:
        self._handlers: dict[str, list[EventHandler]] = {}

    def on(self, name: str, handler: EventHandler) -> Callable[[], None]:
        """Register ``handler`` for ``name``. Returns a matching unsubscribe call."""
        self._handlers.setdefault(name, []).append(handler)

        def _unsubscribe() -> None:
            self.off(name, handler)

        return _unsubscribe

    def off(self, name: str, handler: EventHandler) -> None:
        handlers = self._handlers.get(name, [])
        with contextlib.suppress(ValueError):
            handlers.remove(handler)
        if not handlers:
            self._handlers.pop(name, None)

    def emit(self, name: str, *args: Any) -> None:
        handlers = list(self._handlers.get(name, []))
        logger.debug("Emitting %s to %d handler(s)", name, len(handlers))
        for handler in handlers:
            handler(*args)

    def handler_count(self, name: str) -> int:
        return len(self._handlers.get(name, []))
