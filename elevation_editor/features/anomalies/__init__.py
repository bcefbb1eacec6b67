"""
Elevation anomaly detection.

Usage:
    from elevation_editor.features.anomalies import detect_anomalies, AnomalyRegion

Components:
- detect_anomalies / AnomalyDetector: find implausible elevation changes
- AnomalyRegion: immutable region keyed by its distance bounds
- anomaly_button_offsets: pixel placement of dismiss buttons
"""

from .models import AnomalyKey, AnomalyRegion
from .detector import AnomalyDetector, detect_anomalies
from .overlay import ButtonOffset, PlotArea, anomaly_button_offsets, distance_to_pixel

__all__ = [
    # Models
    "AnomalyKey",
    "AnomalyRegion",
    # Detection
    "AnomalyDetector",
    "detect_anomalies",
    # Overlay
    "ButtonOffset",
    "PlotArea",
    "anomaly_button_offsets",
    "distance_to_pixel",
]
