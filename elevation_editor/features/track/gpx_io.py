"""
GPX reading and writing.

Reads a GPX document into an immutable Track and writes edited elevations
back into the original document, leaving every other field as it was.
"""

import logging
from typing import List, Sequence, Union

import gpxpy
import gpxpy.gpx

from elevation_editor.shared.elevation import calculate_elevation_changes
from elevation_editor.shared.geo import cumulative_distances
from elevation_editor.shared.timeutils import to_isoformat
from .models import Track, TrackPoint

logger = logging.getLogger(__name__)

# Decimal places kept for exported elevations
EXPORT_PRECISION = 2


class GPXError(ValueError):
    """Raised when a GPX document cannot be read or written."""


def _decode(content: Union[bytes, str]) -> str:
    if not isinstance(content, bytes):
        return content
    try:
        return content.decode('utf-8')
    except UnicodeDecodeError as e:
        logger.error(f"GPX is not valid UTF-8: {e}")
        raise GPXError(f"Invalid GPX file: not UTF-8 text ({e.reason})") from e


def _parse(content: Union[bytes, str]) -> gpxpy.gpx.GPX:
    text = _decode(content)
    try:
        return gpxpy.parse(text)
    except Exception as e:
        logger.error(f"Failed to parse GPX: {e}")
        raise GPXError(f"Invalid GPX file: {e}") from e


def _document_points(gpx: gpxpy.gpx.GPX) -> List[gpxpy.gpx.GPXTrackPoint]:
    """All track points in document order, or route points if there are no tracks."""
    points = [
        point
        for track in gpx.tracks
        for segment in track.segments
        for point in segment.points
    ]
    if not points:
        points = [point for route in gpx.routes for point in route.points]
    return points


def read_gpx(content: Union[bytes, str]) -> Track:
    """
    Parse GPX content into a Track.

    Args:
        content: GPX document as bytes or text

    Returns:
        Track with cumulative distances in meters

    Raises:
        GPXError: If the document is invalid or has no points
    """
    text = _decode(content)
    gpx = _parse(text)
    raw_points = _document_points(gpx)

    if not raw_points:
        raise GPXError("GPX file contains no track or route points")

    distances = cumulative_distances([(p.latitude, p.longitude) for p in raw_points])
    points = tuple(
        TrackPoint(
            lat=p.latitude,
            lon=p.longitude,
            ele=p.elevation if p.elevation is not None else 0.0,
            distance=distance,
            time=to_isoformat(p.time),
            index=i,
        )
        for i, (p, distance) in enumerate(zip(raw_points, distances))
    )
    gain, loss = calculate_elevation_changes([p.ele for p in points])

    name = gpx.name or (gpx.tracks[0].name if gpx.tracks else None)
    logger.info(f"Parsed {len(points)} points, {distances[-1]:.0f} m from GPX '{name or 'untitled'}'")

    return Track(
        points=points,
        total_distance=distances[-1],
        name=name,
        elevation_gain=gain,
        elevation_loss=loss,
        source=text,
    )


def write_gpx(original_content: Union[bytes, str], points: Sequence[TrackPoint]) -> str:
    """
    Write edited elevations into the original GPX document.

    Points are matched to the document in order; only elevations change.

    Args:
        original_content: The GPX document the points were read from
        points: Edited points

    Returns:
        GPX XML text

    Raises:
        GPXError: If the original document cannot be parsed
    """
    gpx = _parse(original_content)
    raw_points = _document_points(gpx)

    if len(raw_points) != len(points):
        logger.warning(
            f"Point count mismatch on export: document has {len(raw_points)}, "
            f"edited track has {len(points)}"
        )

    for raw, point in zip(raw_points, points):
        raw.elevation = round(point.ele, EXPORT_PRECISION)

    logger.info(f"Exported {min(len(raw_points), len(points))} elevations")
    return gpx.to_xml()
