"""
Editor Session

Holds the state of one editing session and turns pointer gestures into
engine calls: drag editing, click smoothing, undo, anomaly dismissal and
zoom. Components never call each other; this is where they are composed.
"""

import asyncio
import logging
from dataclasses import dataclass
from enum import Enum
from typing import Dict, FrozenSet, Iterable, List, Optional, Set, Tuple, Union

from elevation_editor.config import Settings, settings as default_settings
from elevation_editor.features.anomalies import (
    AnomalyDetector,
    AnomalyKey,
    AnomalyRegion,
    ButtonOffset,
    PlotArea,
    anomaly_button_offsets,
)
from elevation_editor.features.history import HistoryManager
from elevation_editor.features.smoothing import affected_indices, smooth_click, smooth_drag
from elevation_editor.features.stats import ElevationStats, calculate_stats
from elevation_editor.features.track import Points, Track, write_gpx
from elevation_editor.features.zoom import (
    AsyncioFrameScheduler,
    FrameScheduler,
    ManualFrameScheduler,
    ZoomPanController,
)
from elevation_editor.shared.limits import clamp_radius, clamp_strength, clamp_threshold

logger = logging.getLogger(__name__)


class DragPhase(str, Enum):
    IDLE = "idle"
    DRAGGING = "dragging"


@dataclass
class DragState:
    """
    An active drag. Owns the snapshot every move is applied against, so
    repeated moves never compound.
    """
    index: int
    start_y: float
    start_elevation: float
    elevation_range: float      # Chart elevation span when the drag began
    snapshot: Points
    has_moved: bool = False


class EditorSession:
    """Editing state for one loaded track."""

    # Elevation span (m) below which pixel scaling uses this instead
    MIN_ELEVATION_RANGE = 1.0

    def __init__(
        self,
        track: Track,
        settings: Optional[Settings] = None,
        scheduler: Optional[FrameScheduler] = None
    ):
        self.settings = settings or default_settings
        self.track = track

        self._points: Points = track.points
        self._edited: Set[int] = set()
        self._ignored: Set[AnomalyKey] = set()
        self._drag: Optional[DragState] = None
        self._stats: Optional[ElevationStats] = None
        self._anomalies: Optional[List[AnomalyRegion]] = None

        self._radius = clamp_radius(self.settings.smoothing_radius, len(track))
        self._strength = clamp_strength(self.settings.smoothing_strength)
        self.detector = AnomalyDetector(clamp_threshold(self.settings.anomaly_threshold))

        self.history = HistoryManager(self.settings.history_limit)
        duration_ms = self.settings.animation_duration_ms
        if scheduler is None:
            scheduler, duration_ms = self._default_scheduler(duration_ms)
        self.zoom = ZoomPanController(track.total_distance, scheduler, duration_ms=duration_ms)

    def _default_scheduler(self, duration_ms: float) -> Tuple[FrameScheduler, float]:
        """
        Animate on the running event loop; without one, zoom steps apply at once.
        """
        try:
            asyncio.get_running_loop()
        except RuntimeError:
            logger.debug("No running event loop, zoom steps are not animated")
            return ManualFrameScheduler(), 0.0
        return AsyncioFrameScheduler(self.settings.frame_interval_ms), duration_ms

    # === Parameters (clamped, never rejected) ===

    @property
    def smoothing_radius(self) -> int:
        return self._radius

    @smoothing_radius.setter
    def smoothing_radius(self, value: float) -> None:
        self._radius = clamp_radius(value, len(self._points))

    @property
    def smoothing_strength(self) -> float:
        return self._strength

    @smoothing_strength.setter
    def smoothing_strength(self, value: float) -> None:
        self._strength = clamp_strength(value)

    @property
    def anomaly_threshold(self) -> float:
        return self.detector.threshold

    @anomaly_threshold.setter
    def anomaly_threshold(self, value: float) -> None:
        self.detector.threshold = clamp_threshold(value)
        self._anomalies = None

    # === Derived state ===

    @property
    def points(self) -> Points:
        return self._points

    @property
    def edited_indices(self) -> FrozenSet[int]:
        return frozenset(self._edited)

    @property
    def edited_count(self) -> int:
        return len(self._edited)

    @property
    def can_undo(self) -> bool:
        return self.history.can_undo

    @property
    def drag_phase(self) -> DragPhase:
        return DragPhase.IDLE if self._drag is None else DragPhase.DRAGGING

    @property
    def stats(self) -> ElevationStats:
        if self._stats is None:
            self._stats = calculate_stats(self._points, self.track.total_distance, self.edited_count)
        return self._stats

    @property
    def all_anomalies(self) -> List[AnomalyRegion]:
        """Every detected region, dismissed ones included."""
        if self._anomalies is None:
            self._anomalies = self.detector.detect(self._points)
        return list(self._anomalies)

    @property
    def anomalies(self) -> List[AnomalyRegion]:
        """Detected regions the user has not dismissed."""
        return [r for r in self.all_anomalies if r.key not in self._ignored]

    # === Anomaly dismissal ===

    def ignore_anomaly(self, region: Union[AnomalyRegion, AnomalyKey]) -> None:
        key = region.key if isinstance(region, AnomalyRegion) else tuple(region)
        self._ignored.add(key)

    def restore_anomalies(self) -> None:
        self._ignored.clear()

    def button_offsets(self, plot: PlotArea) -> Dict[AnomalyKey, ButtonOffset]:
        """Dismiss-button placement for the visible anomalies."""
        return anomaly_button_offsets(
            self.anomalies, plot, self.zoom.domain, self.track.total_distance
        )

    # === Gestures ===

    def begin_drag(self, index: int, y: float) -> bool:
        """
        Pointer down on a point.

        Args:
            index: Index of the point under the pointer
            y: Pointer y in chart pixels (grows downward)

        Returns:
            False if the index is not a point of the current track
        """
        if not 0 <= index < len(self._points):
            logger.debug(f"Drag ignored, index {index} out of range")
            return False

        self._drag = DragState(
            index=index,
            start_y=y,
            start_elevation=self._points[index].ele,
            elevation_range=self.stats.elevation_range,
            snapshot=self._points,
        )
        return True

    def move_drag(self, y: float, chart_height: Optional[float] = None) -> bool:
        """
        Pointer moved while pressed.

        History is saved once, on the first movement past the drag
        threshold. Each move re-applies the drag to the drag-start snapshot.

        Returns:
            True if the points changed
        """
        drag = self._drag
        if drag is None:
            return False

        pixel_delta = drag.start_y - y
        if not drag.has_moved and abs(pixel_delta) < self.settings.drag_start_pixels:
            return False

        if not drag.has_moved:
            self.history.push(self._points, self._edited)
            drag.has_moved = True

        height = chart_height if chart_height else self.settings.default_chart_height
        meters_per_pixel = max(drag.elevation_range, self.MIN_ELEVATION_RANGE) / max(height, 1)
        new_elevation = drag.start_elevation + pixel_delta * meters_per_pixel

        self._apply(
            smooth_drag(drag.snapshot, drag.index, new_elevation, self._radius, self._strength),
            affected_indices(drag.index, self._radius, len(drag.snapshot)),
        )
        return True

    def end_drag(self) -> bool:
        """
        Pointer released over the chart.

        A press that never moved is a click: it smooths around the point.

        Returns:
            True if the click smoothed the track
        """
        return self._finish_drag(allow_click=True)

    def leave_chart(self) -> None:
        """Pointer left the chart: finish the drag, never as a click."""
        self._finish_drag(allow_click=False)

    def cancel_drag(self) -> None:
        self._drag = None

    def _finish_drag(self, allow_click: bool) -> bool:
        drag = self._drag
        if drag is None:
            return False

        self._drag = None
        if drag.has_moved or not allow_click or self._strength <= 0:
            return False

        self.history.push(self._points, self._edited)
        self._apply(
            smooth_click(drag.snapshot, drag.index, self._radius, self._strength),
            affected_indices(drag.index, self._radius, len(drag.snapshot)),
        )
        return True

    # === History ===

    def undo(self) -> bool:
        """
        Restore the state before the last edit gesture.

        Returns:
            False if there was nothing to undo
        """
        entry = self.history.undo()
        if entry is None:
            return False

        self._drag = None
        self._points = entry.points
        self._edited = set(entry.edited_indices)
        self._invalidate()
        return True

    def reset(self) -> None:
        """Back to the track as loaded: no edits, no history, full view."""
        self._drag = None
        self._points = self.track.points
        self._edited.clear()
        self._ignored.clear()
        self.history.clear()
        self.zoom.reset()
        self._invalidate()
        logger.info("Editor reset to original track")

    # === Export ===

    def export_gpx(self, original_content: Optional[Union[bytes, str]] = None) -> str:
        """GPX text of the current points, based on the loaded document."""
        source = original_content if original_content is not None else self.track.source
        if source is None:
            raise ValueError("No original GPX document to export into")
        return write_gpx(source, self._points)

    def close(self) -> None:
        """Stop any zoom animation."""
        self.zoom.close()

    # === Internals ===

    def _apply(self, points: Points, touched: Iterable[int]) -> None:
        self._points = points
        self._edited.update(touched)
        self._invalidate()

    def _invalidate(self) -> None:
        self._stats = None
        self._anomalies = None
