"""
Tests for parameter clamping.
"""

import pytest

from elevation_editor.shared.limits import (
    clamp,
    clamp_radius,
    clamp_strength,
    clamp_threshold,
    max_smoothing_radius,
    MAX_SMOOTHING_RADIUS,
)


class TestMaxSmoothingRadius:

    def test_one_eighth_of_points(self):
        assert max_smoothing_radius(80) == 10

    def test_capped(self):
        assert max_smoothing_radius(100_000) == MAX_SMOOTHING_RADIUS == 200

    def test_short_track(self):
        assert max_smoothing_radius(5) == 0


class TestClamping:

    def test_clamp(self):
        assert clamp(5, 0, 3) == 3
        assert clamp(-1, 0, 3) == 0
        assert clamp(2, 0, 3) == 2

    @pytest.mark.parametrize("radius, expected", [(3.6, 4), (-2, 0), (50, 10)])
    def test_radius(self, radius, expected):
        assert clamp_radius(radius, 80) == expected

    @pytest.mark.parametrize("strength, expected", [(-0.5, 0.0), (0.3, 0.3), (7, 1.0)])
    def test_strength(self, strength, expected):
        assert clamp_strength(strength) == expected

    @pytest.mark.parametrize("threshold, expected", [(0, 1.0), (25, 25), (500, 100.0)])
    def test_threshold(self, threshold, expected):
        assert clamp_threshold(threshold) == expected
