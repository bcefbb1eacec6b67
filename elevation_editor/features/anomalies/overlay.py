"""
Placement of the per-anomaly dismiss buttons drawn over the chart.

Pure geometry: the renderer supplies the plot area and the visible domain,
this module maps anomaly regions to pixel offsets.
"""

from dataclasses import dataclass
from typing import Dict, Optional, Sequence, Tuple

from .models import AnomalyKey, AnomalyRegion

# Button width/height (px)
BUTTON_SIZE = 20

# Minimum gap between a button and the container edge (px)
BUTTON_PADDING = 4

# Buttons sit this far left of the region's right edge (px)
BUTTON_INSET = 40


@dataclass(frozen=True)
class PlotArea:
    """Plot rectangle inside the chart container, in container pixels."""
    left: float
    top: float
    width: float
    height: float
    container_width: float

    @property
    def right(self) -> float:
        return self.left + self.width


@dataclass(frozen=True)
class ButtonOffset:
    """CSS-style offset of a button from the container's top-right corner."""
    top: float
    right: float


def distance_to_pixel(distance: float, plot: PlotArea, domain: Tuple[float, float]) -> float:
    """Map a distance to an x coordinate in container pixels."""
    lower, upper = domain
    span = upper - lower
    if span <= 0:
        return plot.left
    return plot.left + (distance - lower) / span * plot.width


def anomaly_button_offsets(
    regions: Sequence[AnomalyRegion],
    plot: PlotArea,
    domain: Optional[Tuple[float, float]],
    total_distance: float,
    button_size: float = BUTTON_SIZE,
    padding: float = BUTTON_PADDING,
    inset: float = BUTTON_INSET,
) -> Dict[AnomalyKey, ButtonOffset]:
    """
    Compute a button offset for every visible region.

    Args:
        regions: Regions to place buttons for
        plot: Current plot area
        domain: Visible (min, max) distance, or None for the full track
        total_distance: Track length in meters

    Returns:
        Mapping of region key to offset; regions outside the visible
        domain are left out
    """
    visible = domain if domain is not None else (0.0, total_distance)
    lower, upper = visible
    max_right = plot.container_width - button_size - padding

    offsets: Dict[AnomalyKey, ButtonOffset] = {}
    for region in regions:
        if not region.overlaps(lower, upper):
            continue

        # Areas are clipped to the plot, so the visible right edge is too
        x_end = min(distance_to_pixel(region.end_distance, plot, visible), plot.right)
        raw_right = plot.container_width - x_end + padding - inset
        right = max(padding, min(raw_right, max_right))

        offsets[region.key] = ButtonOffset(top=plot.top, right=right)

    return offsets
