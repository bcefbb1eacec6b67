"""
Command line interface.

Usage:
    elevation-editor stats track.gpx
    elevation-editor anomalies track.gpx --threshold 15
    elevation-editor smooth track.gpx --index 120 --radius 8 -o fixed.gpx
    elevation-editor fix track.gpx -o fixed.gpx
"""

import logging
import sys
from pathlib import Path
from typing import List, Optional

import click

from elevation_editor.config import settings
from elevation_editor.features.anomalies import AnomalyRegion, detect_anomalies
from elevation_editor.features.smoothing import smooth_click
from elevation_editor.features.stats import calculate_stats
from elevation_editor.features.track import GPXError, Points, Track, read_gpx, write_gpx
from elevation_editor.shared.formatters import (
    format_distance,
    format_duration,
    format_elevation,
    format_speed,
)
from elevation_editor.shared.limits import clamp_radius, clamp_strength, clamp_threshold
from elevation_editor.shared.units import UnitConverter, UnitSystem

logger = logging.getLogger(__name__)


def _load(path: str) -> Track:
    try:
        return read_gpx(Path(path).read_bytes())
    except GPXError as e:
        raise click.ClickException(str(e)) from e


def _save(track: Track, points: Points, output: str) -> None:
    Path(output).write_text(write_gpx(track.source, points), encoding="utf-8")
    click.echo(f"Saved: {output}")


def _middle_index(points: Points, region: AnomalyRegion) -> Optional[int]:
    """Index of the middle sample inside a region."""
    inside = [
        i for i, p in enumerate(points)
        if region.start_distance <= p.distance <= region.end_distance
    ]
    if not inside:
        return None
    return inside[len(inside) // 2]


@click.group()
@click.option("--log-level", default=None, help="Override ELEVATION_EDITOR_LOG_LEVEL")
def cli(log_level):
    """Inspect and correct GPX elevation profiles."""
    logging.basicConfig(
        level=getattr(logging, (log_level or settings.log_level).upper(), logging.INFO),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=[
            logging.StreamHandler(sys.stderr),
        ]
    )


@cli.command()
@click.argument("path", type=click.Path(exists=True, dir_okay=False))
@click.option(
    "--units",
    default="metric",
    type=click.Choice([u.value for u in UnitSystem]),
    help="Unit system for output"
)
def stats(path, units):
    """Print elevation and speed statistics."""
    track = _load(path)
    result = calculate_stats(track.points, track.total_distance)
    converter = UnitConverter(UnitSystem(units))

    click.echo(f"Track: {track.name or Path(path).name}")
    click.echo(f"Points: {len(track)}")
    click.echo(f"Distance: {format_distance(result.total_distance, converter)}")
    click.echo(f"Min elevation: {format_elevation(result.min_elevation, converter)}")
    click.echo(f"Max elevation: {format_elevation(result.max_elevation, converter)}")
    click.echo(f"Ascent: {format_elevation(result.total_ascent, converter)}")
    click.echo(f"Descent: {format_elevation(result.total_descent, converter)}")
    click.echo(f"Duration: {format_duration(result.total_duration_ms)}")
    click.echo(f"Average speed: {format_speed(result.average_speed, converter)}")
    click.echo(f"Max speed: {format_speed(result.max_speed, converter)}")


@cli.command()
@click.argument("path", type=click.Path(exists=True, dir_okay=False))
@click.option("--threshold", default=None, type=float, help="Elevation jump (m) to flag, 1-100")
def anomalies(path, threshold):
    """List detected elevation anomalies."""
    track = _load(path)
    threshold = clamp_threshold(threshold if threshold is not None else settings.anomaly_threshold)
    regions = detect_anomalies(track.points, threshold)

    if not regions:
        click.echo("No anomalies found.")
        return

    click.echo(f"{len(regions)} anomalies (threshold {threshold:g} m):")
    for number, region in enumerate(regions, 1):
        click.echo(
            f"  {number}. {region.start_distance / 1000:.2f} - "
            f"{region.end_distance / 1000:.2f} km, severity {region.severity:.2f}"
        )


@cli.command()
@click.argument("path", type=click.Path(exists=True, dir_okay=False))
@click.option("--index", "index", required=True, type=int, help="Point to smooth around")
@click.option("--radius", default=None, type=int, help="Points affected on each side")
@click.option("--strength", default=None, type=float, help="Smoothing strength, 0-1")
@click.option("-o", "--output", required=True, type=click.Path(dir_okay=False), help="Output GPX")
def smooth(path, index, radius, strength, output):
    """Smooth the profile around one point."""
    track = _load(path)
    if not 0 <= index < len(track):
        raise click.BadParameter(f"must be between 0 and {len(track) - 1}", param_hint="--index")

    radius = clamp_radius(radius if radius is not None else settings.smoothing_radius, len(track))
    strength = clamp_strength(strength if strength is not None else settings.smoothing_strength)

    points = smooth_click(track.points, index, radius, strength)
    click.echo(f"Smoothed point {index} (radius {radius}, strength {strength:g})")
    _save(track, points, output)


@cli.command()
@click.argument("path", type=click.Path(exists=True, dir_okay=False))
@click.option("--threshold", default=None, type=float, help="Elevation jump (m) to flag, 1-100")
@click.option("--radius", default=None, type=int, help="Points affected on each side")
@click.option("--strength", default=None, type=float, help="Smoothing strength, 0-1")
@click.option("-o", "--output", required=True, type=click.Path(dir_okay=False), help="Output GPX")
def fix(path, threshold, radius, strength, output):
    """Smooth the middle of every detected anomaly."""
    track = _load(path)
    threshold = clamp_threshold(threshold if threshold is not None else settings.anomaly_threshold)
    radius = clamp_radius(radius if radius is not None else settings.smoothing_radius, len(track))
    strength = clamp_strength(strength if strength is not None else settings.smoothing_strength)

    regions = detect_anomalies(track.points, threshold)
    points = track.points
    fixed: List[int] = []
    for region in regions:
        index = _middle_index(points, region)
        if index is None:
            continue
        points = smooth_click(points, index, radius, strength)
        fixed.append(index)

    click.echo(f"Smoothed {len(fixed)} of {len(regions)} anomalies")
    _save(track, points, output)


if __name__ == "__main__":
    cli()
