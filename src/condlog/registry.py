"""Relation registry and resolver."""

from __future__ import annotations

import logging
import re
import threading
from dataclasses import dataclass
from functools import lru_cache
from typing import Callable, Optional

from condlog.clauses import Clause
from condlog.options import TargetOptions

logger = logging.getLogger(__name__)

Generator = Callable[[str, str], list[Clause]]

SELF_RELATION = "self"


@dataclass(frozen=True)
class RelationHandler:
    """Clause generator plus optional target suggestions for one relation."""

    generator: Generator
    target_options: Optional[TargetOptions] = None

    def generate(self, source: str, target: str) -> list[Clause]:
        return list(self.generator(source, target))


class RelationRegistry:
    """Mutable mapping from relation name to handler.

    Keys are case-sensitive and kept in registration order. All reads and
    writes go through one lock so extensions may register from any thread.
    """

    def __init__(self, handlers: Optional[dict[str, RelationHandler]] = None) -> None:
        self._lock = threading.RLock()
        self._handlers: dict[str, RelationHandler] = {}
        for name, handler in (handlers or {}).items():
            self.register(name, handler)

    def register(self, name: str, handler: RelationHandler) -> None:
        """Insert or overwrite the handler for ``name``."""

        with self._lock:
            replaced = name in self._handlers
            self._handlers[name] = handler
        logger.debug("%s relation %r", "Replaced" if replaced else "Registered", name)

    def unregister(self, name: str) -> None:
        """Remove ``name`` if present."""

        with self._lock:
            removed = self._handlers.pop(name, None)
        if removed is not None:
            logger.debug("Unregistered relation %r", name)

    def get(self, name: str) -> Optional[RelationHandler]:
        with self._lock:
            return self._handlers.get(name)

    def names(self) -> list[str]:
        with self._lock:
            return list(self._handlers)

    def list_labels(self) -> list[str]:
        """Relation names offered to users, longest first.

        ``self`` is internal and never listed. Equal lengths keep
        registration order.
        """

        labels = [name for name in self.names() if name != SELF_RELATION]
        return sorted(labels, key=len, reverse=True)

    def resolve(self, relation: str) -> Optional[RelationHandler]:
        """Find the handler for free-text ``relation``.

        Exact key first; otherwise the first key, in registration order,
        that as a case-insensitive regex is found in ``relation``.
        """

        with self._lock:
            handler = self._handlers.get(relation)
            if handler is not None:
                return handler
            entries = list(self._handlers.items())
        for name, candidate in entries:
            pattern = _compile_key(name)
            if pattern is not None and pattern.search(relation):
                logger.debug("Relation %r matched registered key %r", relation, name)
                return candidate
        return None

    def resolve_target_options(self, source: str, relation: str) -> list[str]:
        """Suggested targets for ``relation``; empty when it has none."""

        handler = self.get(relation)
        if handler is None or handler.target_options is None:
            return []
        return handler.target_options.options_for(source)

    def __contains__(self, name: object) -> bool:
        with self._lock:
            return name in self._handlers

    def __len__(self) -> int:
        with self._lock:
            return len(self._handlers)


@lru_cache(maxsize=256)
def _compile_key(name: str) -> Optional[re.Pattern[str]]:
    try:
        return re.compile(name, re.IGNORECASE)
    except re.error as exc:
        logger.warning("Relation key %r is not a valid pattern, skipped in fuzzy match: %s", name, exc)
        return None
