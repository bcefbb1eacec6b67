"""
Undo history for elevation edits.

A bounded stack of snapshots. When full, the oldest entry is evicted.
There is no redo: an undone state is gone.
"""

import logging
from collections import deque
from dataclasses import dataclass
from typing import Deque, Iterable, Optional, Sequence, Tuple

from elevation_editor.features.track.models import Points, TrackPoint

logger = logging.getLogger(__name__)

DEFAULT_HISTORY_LIMIT = 100


@dataclass(frozen=True)
class HistoryEntry:
    """State saved before one edit gesture."""
    points: Points
    edited_indices: Tuple[int, ...]


class HistoryManager:
    """Bounded undo stack."""

    def __init__(self, limit: int = DEFAULT_HISTORY_LIMIT):
        if limit < 1:
            raise ValueError(f"History limit must be positive, got {limit}")
        self.limit = limit
        self._entries: Deque[HistoryEntry] = deque()

    def __len__(self) -> int:
        return len(self._entries)

    @property
    def can_undo(self) -> bool:
        return bool(self._entries)

    def push(self, points: Sequence[TrackPoint], edited_indices: Iterable[int]) -> HistoryEntry:
        """
        Save a snapshot of the current state.

        Points are immutable, so copying the sequence is a full copy.
        """
        entry = HistoryEntry(
            points=tuple(points),
            edited_indices=tuple(sorted(edited_indices)),
        )
        if len(self._entries) >= self.limit:
            self._entries.popleft()
            logger.debug(f"History limit {self.limit} reached, evicted oldest entry")
        self._entries.append(entry)
        return entry

    def undo(self) -> Optional[HistoryEntry]:
        """
        Pop the most recent entry.

        Returns:
            The entry to restore, or None if there is nothing to undo.
            Any drag in progress is stale once an entry is returned.
        """
        if not self._entries:
            return None
        return self._entries.pop()

    def clear(self) -> None:
        self._entries.clear()
