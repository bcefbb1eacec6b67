"""
Track model and GPX file handling.

Usage:
    from elevation_editor.features.track import Track, TrackPoint, read_gpx, write_gpx
"""

from .models import Track, TrackPoint, Points
from .gpx_io import GPXError, read_gpx, write_gpx

__all__ = [
    # Models
    "Track",
    "TrackPoint",
    "Points",
    # GPX
    "GPXError",
    "read_gpx",
    "write_gpx",
]
