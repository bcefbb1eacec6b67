"""
Point-editing transforms.

Usage:
    from elevation_editor.features.smoothing import smooth_drag, smooth_click
"""

from .engine import affected_indices, smooth_click, smooth_drag

__all__ = [
    "affected_indices",
    "smooth_click",
    "smooth_drag",
]
