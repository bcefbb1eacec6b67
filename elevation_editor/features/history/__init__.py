"""
Undo history.

Usage:
    from elevation_editor.features.history import HistoryManager
"""

from .manager import DEFAULT_HISTORY_LIMIT, HistoryEntry, HistoryManager

__all__ = [
    "DEFAULT_HISTORY_LIMIT",
    "HistoryEntry",
    "HistoryManager",
]
