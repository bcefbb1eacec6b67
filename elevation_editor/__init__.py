"""
Elevation Editor

Inspect and hand-correct the elevation profile of a GPS track.
"""

__version__ = "0.1.0"
