"""
Unit systems and conversions for display.

All engine values are metric (meters, m/s); conversion happens only at
the presentation edge.
"""
from enum import Enum

METERS_PER_KM = 1000.0
METERS_PER_MILE = 1609.344
FEET_PER_METER = 3.28084
KMH_PER_MS = 3.6
MPH_PER_MS = 2.23693629


class UnitSystem(str, Enum):
    """Measurement system selected by the user."""
    METRIC = "metric"
    IMPERIAL = "imperial"


class UnitConverter:
    """Converts metric engine values into the selected unit system."""

    def __init__(self, system: UnitSystem = UnitSystem.METRIC):
        self.system = UnitSystem(system)

    @property
    def is_metric(self) -> bool:
        return self.system == UnitSystem.METRIC

    @property
    def distance_label(self) -> str:
        return "km" if self.is_metric else "mi"

    @property
    def elevation_label(self) -> str:
        return "m" if self.is_metric else "ft"

    @property
    def speed_label(self) -> str:
        return "km/h" if self.is_metric else "mph"

    def distance(self, meters: float) -> float:
        """Meters to kilometers or miles."""
        if self.is_metric:
            return meters / METERS_PER_KM
        return meters / METERS_PER_MILE

    def elevation(self, meters: float) -> float:
        """Meters to meters or feet."""
        if self.is_metric:
            return meters
        return meters * FEET_PER_METER

    def speed(self, meters_per_second: float) -> float:
        """m/s to km/h or mph."""
        if self.is_metric:
            return meters_per_second * KMH_PER_MS
        return meters_per_second * MPH_PER_MS
