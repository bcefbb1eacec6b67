"""
Zoom and pan of the visible distance window.

The domain is None (whole track) or a (min, max) pair with
0 <= min < max <= total_distance. Zoom and pan steps animate with an
ease-out cubic curve; reset() and set_domain() apply immediately,
as does every step when the animation duration is 0.
"""

import logging
from typing import Any, Callable, Optional, Tuple

from .scheduler import FrameScheduler

logger = logging.getLogger(__name__)

Domain = Tuple[float, float]

DEFAULT_ANIMATION_MS = 300.0


def ease_out_cubic(progress: float) -> float:
    """1 - (1 - t)^3"""
    return 1 - (1 - progress) ** 3


class ZoomPanController:
    """Owns the visible window over [0, total_distance]."""

    ZOOM_IN_FACTOR = 0.9
    ZOOM_OUT_FACTOR = 1.1

    # Narrowest allowed window, as a fraction of the track
    MIN_RANGE_FRACTION = 0.05

    # Pan step, as a fraction of the visible range
    PAN_FRACTION = 0.2

    def __init__(
        self,
        total_distance: float,
        scheduler: FrameScheduler,
        duration_ms: float = DEFAULT_ANIMATION_MS,
        on_change: Optional[Callable[[Optional[Domain]], None]] = None
    ):
        """
        Args:
            total_distance: Track length in meters
            scheduler: Source of animation frames
            duration_ms: Length of each zoom/pan animation; 0 applies steps at once
            on_change: Called with the new domain on every update
        """
        self.total_distance = total_distance
        self.scheduler = scheduler
        self.duration_ms = duration_ms
        self.on_change = on_change
        self._domain: Optional[Domain] = None
        self._frame: Any = None
        self._target: Optional[Domain] = None

    # === State ===

    @property
    def domain(self) -> Optional[Domain]:
        return self._domain

    @property
    def target(self) -> Optional[Domain]:
        """Where the running animation ends, or the current domain."""
        return self._target if self.is_animating else self._domain

    @property
    def is_animating(self) -> bool:
        return self._frame is not None

    @property
    def visible_range(self) -> Domain:
        """Current domain, or the whole track."""
        return self._domain if self._domain is not None else (0.0, self.total_distance)

    # === Commands ===

    def zoom_in(self) -> None:
        """Shrink the window to 90% around its center; refuse below 5% of the track."""
        lower, upper = self.visible_range
        new_range = (upper - lower) * self.ZOOM_IN_FACTOR
        new_min, new_max = self._around_center(lower, upper, new_range)

        if new_max - new_min > self.total_distance * self.MIN_RANGE_FRACTION:
            self._animate_to((new_min, new_max))
        else:
            logger.debug(f"Zoom in refused, range {new_max - new_min:.0f} m at floor")

    def zoom_out(self) -> None:
        """Grow the window to 110%; once it covers the track, show the full view."""
        lower, upper = self.visible_range
        new_range = (upper - lower) * self.ZOOM_OUT_FACTOR
        new_min, new_max = self._around_center(lower, upper, new_range)

        if new_max - new_min >= self.total_distance:
            self._set(None)
        else:
            self._animate_to((new_min, new_max))

    def reset(self) -> None:
        self._set(None)

    def pan_left(self) -> None:
        self._pan(-1)

    def pan_right(self) -> None:
        self._pan(1)

    def set_domain(self, domain: Optional[Domain]) -> None:
        """
        Set the window directly, without animation.

        Used for pointer-driven panning. The window is moved inside the
        track keeping its width; a window as wide as the track becomes None.

        Raises:
            ValueError: If min >= max
        """
        if domain is None:
            self._set(None)
            return

        lower, upper = domain
        if lower >= upper:
            raise ValueError(f"Invalid zoom domain: {domain}")

        width = upper - lower
        if width >= self.total_distance:
            self._set(None)
            return

        self._set(self._shift_inside(lower, width))

    def close(self) -> None:
        """Cancel any pending frame; the controller stays usable."""
        self._cancel_animation()

    # === Internals ===

    def _around_center(self, lower: float, upper: float, new_range: float) -> Domain:
        center = (lower + upper) / 2
        return (
            max(0.0, center - new_range / 2),
            min(self.total_distance, center + new_range / 2),
        )

    def _shift_inside(self, lower: float, width: float) -> Domain:
        if lower < 0:
            return (0.0, width)
        if lower + width > self.total_distance:
            return (self.total_distance - width, self.total_distance)
        return (lower, lower + width)

    def _pan(self, direction: int) -> None:
        if self._domain is None:
            return

        lower, upper = self._domain
        width = upper - lower
        step = width * self.PAN_FRACTION * direction
        self._animate_to(self._shift_inside(lower + step, width))

    def _set(self, domain: Optional[Domain]) -> None:
        self._cancel_animation()
        self._update(domain)

    def _update(self, domain: Optional[Domain]) -> None:
        self._domain = domain
        if self.on_change is not None:
            self.on_change(domain)

    def _cancel_animation(self) -> None:
        if self._frame is not None:
            self.scheduler.cancel(self._frame)
            self._frame = None
            logger.debug("Zoom animation cancelled")

    def _animate_to(self, target: Domain) -> None:
        if self.duration_ms <= 0:
            self._set(target)
            return

        self._cancel_animation()

        start_min, start_max = self.visible_range
        target_min, target_max = target
        start_time = self.scheduler.now()
        duration = self.duration_ms
        self._target = target
        logger.debug(
            f"Animating domain ({start_min:.0f}, {start_max:.0f}) -> "
            f"({target_min:.0f}, {target_max:.0f})"
        )

        def frame(now_ms: float) -> None:
            elapsed = now_ms - start_time
            progress = min(elapsed / duration, 1.0)
            eased = ease_out_cubic(progress)

            if progress < 1:
                self._frame = self.scheduler.request(frame)
                self._update((
                    start_min + (target_min - start_min) * eased,
                    start_max + (target_max - start_max) * eased,
                ))
            else:
                self._frame = None
                self._update(target)

        self._frame = self.scheduler.request(frame)
