"""
Zoom and pan of the chart's distance window.

Usage:
    from elevation_editor.features.zoom import ZoomPanController, ManualFrameScheduler
"""

from .controller import DEFAULT_ANIMATION_MS, Domain, ZoomPanController, ease_out_cubic
from .scheduler import (
    AsyncioFrameScheduler,
    FrameCallback,
    FrameScheduler,
    ManualFrameScheduler,
)

__all__ = [
    # Controller
    "DEFAULT_ANIMATION_MS",
    "Domain",
    "ZoomPanController",
    "ease_out_cubic",
    # Schedulers
    "AsyncioFrameScheduler",
    "FrameCallback",
    "FrameScheduler",
    "ManualFrameScheduler",
]
