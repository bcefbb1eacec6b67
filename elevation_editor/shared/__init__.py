"""
Shared utilities (NOT business logic).

Usage:
    from elevation_editor.shared import haversine_m, rolling_median
    from elevation_editor.shared.formatters import format_duration
"""
from .geo import (
    haversine_m,
    cumulative_distances,
    EARTH_RADIUS_M,
)
from .elevation import (
    rolling_median,
    calculate_elevation_changes,
    MEDIAN_WINDOW_SIZE,
    ELEVATION_STEP_THRESHOLD,
)
from .timeutils import (
    parse_timestamp,
    to_isoformat,
)
from .units import (
    UnitSystem,
    UnitConverter,
)
from .formatters import (
    format_duration,
    format_distance,
    format_elevation,
    format_speed,
)
from .limits import (
    clamp,
    clamp_radius,
    clamp_strength,
    clamp_threshold,
    max_smoothing_radius,
)

__all__ = [
    # geo
    "haversine_m",
    "cumulative_distances",
    "EARTH_RADIUS_M",
    # elevation
    "rolling_median",
    "calculate_elevation_changes",
    "MEDIAN_WINDOW_SIZE",
    "ELEVATION_STEP_THRESHOLD",
    # time
    "parse_timestamp",
    "to_isoformat",
    # units
    "UnitSystem",
    "UnitConverter",
    # formatters
    "format_duration",
    "format_distance",
    "format_elevation",
    "format_speed",
    # limits
    "clamp",
    "clamp_radius",
    "clamp_strength",
    "clamp_threshold",
    "max_smoothing_radius",
]
