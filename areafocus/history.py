"""Bounded, branch-truncating history of area-focus entries.

This module intentionally has no focus-dispatch concerns.
It behaves like browser history: pushing after going back drops the
forward branch, and the oldest entries fall off once the cap is reached.
"""

from __future__ import annotations

import logging

from .types import FocusAreaEntry

logger = logging.getLogger(__name__)

DEFAULT_MAX_HISTORY = 20


class FocusHistory:
    """Ordered entry buffer plus a cursor.

    ``index`` stays within ``[-1, len(entries) - 1]`` and is ``-1`` only
    while the buffer is empty.
    """

    def __init__(self, max_entries: int = DEFAULT_MAX_HISTORY) -> None:
        """Create an empty history capped at ``max_entries`` (minimum 1)."""
        self.max_entries = max(1, max_entries)
        self.entries: list[FocusAreaEntry] = []
        self.index = -1

    def __len__(self) -> int:
        return len(self.entries)

    @property
    def current(self) -> FocusAreaEntry | None:
        """Return entry under the cursor, or ``None`` when empty."""
        return self.entry_at(0)

    def entry_at(self, delta: int) -> FocusAreaEntry | None:
        """Return entry ``delta`` steps from the cursor without moving it."""
        target = self.index + delta
        if target < 0 or target > len(self.entries) - 1:
            return None
        return self.entries[target]

    def push(self, entry: FocusAreaEntry) -> None:
        """Insert ``entry`` after the cursor, dropping forward and overflow entries."""
        del self.entries[self.index + 1 :]
        self.entries.append(entry)
        self.index = len(self.entries) - 1

        overflow = len(self.entries) - self.max_entries
        if overflow > 0:
            del self.entries[:overflow]
            self.index = max(0, self.index - overflow)
            logger.debug("evicted %d oldest focus entries", overflow)
        logger.debug("pushed focus entry for area %r at index %d", entry.area, self.index)

    def go(self, delta: int) -> bool:
        """Move cursor by ``delta`` when the target is in range; return whether it moved."""
        target = self.index + delta
        if target < 0 or target > len(self.entries) - 1:
            return False
        self.index = target
        logger.debug("moved focus history cursor to %d", target)
        return True

    def clear(self) -> None:
        """Drop every entry and reset the cursor."""
        self.entries.clear()
        self.index = -1
        logger.debug("cleared focus history")
