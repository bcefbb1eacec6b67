"""
Interactive editing session.

Usage:
    from elevation_editor.features.editor import EditorSession
"""

from .session import DragPhase, DragState, EditorSession

__all__ = [
    "DragPhase",
    "DragState",
    "EditorSession",
]
