"""
Tests for the drag and click smoothing transforms.
"""

import pytest

from elevation_editor.features.smoothing import affected_indices, smooth_click, smooth_drag
from elevation_editor.features.track import TrackPoint


def make_points(elevations):
    return tuple(
        TrackPoint(
            lat=43.0 + i * 0.001,
            lon=76.0,
            ele=ele,
            distance=i * 100.0,
            time=f"2024-05-01T10:{i:02d}:00Z",
            index=i,
        )
        for i, ele in enumerate(elevations)
    )


def elevations(points):
    return [p.ele for p in points]


@pytest.fixture
def flat_points():
    return make_points([100.0] * 11)


# =============================================================================
# Drag smoothing
# =============================================================================

class TestSmoothDrag:
    """Tests for smooth_drag."""

    def test_radius_zero_changes_only_target(self, flat_points):
        result = smooth_drag(flat_points, 5, 180.0, radius=0, strength=0.8)
        assert result[5].ele == 180.0
        for i, (before, after) in enumerate(zip(flat_points, result)):
            if i != 5:
                assert after == before

    def test_strength_zero_changes_only_target(self, flat_points):
        result = smooth_drag(flat_points, 5, 180.0, radius=3, strength=0)
        assert elevations(result) == [100.0] * 5 + [180.0] + [100.0] * 5

    def test_negative_target_clamped(self, flat_points):
        result = smooth_drag(flat_points, 5, -50.0, radius=0, strength=1)
        assert result[5].ele == 0.0

    def test_linear_falloff(self, flat_points):
        """Radius 2: neighbours move 2/3 and 1/3 of the way."""
        result = smooth_drag(flat_points, 5, 200.0, radius=2, strength=1.0)
        assert result[5].ele == 200.0
        assert result[4].ele == pytest.approx(100 + 100 * 2 / 3)
        assert result[6].ele == pytest.approx(100 + 100 * 2 / 3)
        assert result[3].ele == pytest.approx(100 + 100 / 3)
        assert result[7].ele == pytest.approx(100 + 100 / 3)
        assert result[2].ele == 100.0
        assert result[8].ele == 100.0

    def test_strength_scales_influence(self, flat_points):
        result = smooth_drag(flat_points, 5, 200.0, radius=1, strength=0.5)
        # factor 1 - 1/2 = 0.5, influence 0.25
        assert result[4].ele == pytest.approx(125.0)

    def test_strength_above_one_clamped(self, flat_points):
        strong = smooth_drag(flat_points, 5, 200.0, radius=2, strength=5)
        full = smooth_drag(flat_points, 5, 200.0, radius=2, strength=1)
        assert strong == full

    def test_radius_rounded(self, flat_points):
        assert smooth_drag(flat_points, 5, 200.0, 1.6, 1) == smooth_drag(flat_points, 5, 200.0, 2, 1)

    def test_edges_do_not_wrap(self, flat_points):
        """Editing the first point never touches the end of the track."""
        result = smooth_drag(flat_points, 0, 200.0, radius=3, strength=1)
        assert elevations(result)[-3:] == [100.0, 100.0, 100.0]
        assert result[1].ele > 100

    def test_other_fields_preserved(self, flat_points):
        result = smooth_drag(flat_points, 5, 200.0, radius=2, strength=1)
        for before, after in zip(flat_points, result):
            assert (after.lat, after.lon, after.distance, after.time, after.index) == (
                before.lat, before.lon, before.distance, before.time, before.index
            )

    def test_input_untouched(self, flat_points):
        smooth_drag(flat_points, 5, 200.0, radius=2, strength=1)
        assert elevations(flat_points) == [100.0] * 11

    def test_returns_new_sequence(self, flat_points):
        assert smooth_drag(flat_points, 5, 100.0, radius=0, strength=1) is not flat_points

    @pytest.mark.parametrize("index", [-1, 11, 500])
    def test_out_of_range_is_noop(self, flat_points, index):
        assert smooth_drag(flat_points, index, 500.0, radius=2, strength=1) == flat_points

    @pytest.mark.parametrize("target", [-1000.0, 0.0, 5.0, 1e6])
    @pytest.mark.parametrize("strength", [-1.0, 0.5, 3.0])
    @pytest.mark.parametrize("radius", [0, 3, 50])
    def test_never_negative(self, target, strength, radius):
        points = make_points([0.0, 3.0, 10.0, 1.0, 0.5, 20.0, 0.0])
        result = smooth_drag(points, 3, target, radius, strength)
        assert all(p.ele >= 0 for p in result)


# =============================================================================
# Click smoothing
# =============================================================================

class TestSmoothClick:
    """Tests for smooth_click."""

    def test_blends_toward_window_mean(self):
        points = make_points([100.0, 100.0, 160.0, 100.0, 100.0])
        result = smooth_click(points, 2, radius=1, strength=1.0)
        # mean of [100, 160, 100] = 120; neighbours influence 0.5
        assert elevations(result) == pytest.approx([100.0, 110.0, 120.0, 110.0, 100.0])

    def test_radius_two(self):
        points = make_points([100.0] * 10 + [160.0] + [100.0] * 10)
        result = smooth_click(points, 10, radius=2, strength=1.0)
        # mean of window 8..12 = 112
        assert result[10].ele == pytest.approx(112.0)
        assert result[9].ele == pytest.approx(100 + 12 * 2 / 3)
        assert result[8].ele == pytest.approx(100 + 12 / 3)
        assert result[7].ele == 100.0

    def test_strength_zero_unchanged_copy(self):
        points = make_points([100.0, 160.0, 100.0])
        result = smooth_click(points, 1, radius=1, strength=0)
        assert result == points

    def test_radius_zero_only_target(self):
        """With radius 0 the window is the target alone, so it keeps its value."""
        points = make_points([100.0, 160.0, 100.0])
        result = smooth_click(points, 1, radius=0, strength=1)
        assert elevations(result) == [100.0, 160.0, 100.0]

    def test_window_clipped_at_start(self):
        points = make_points([160.0, 100.0, 100.0, 100.0])
        result = smooth_click(points, 0, radius=2, strength=1.0)
        # window 0..2, mean 120
        assert result[0].ele == pytest.approx(120.0)
        assert result[3].ele == 100.0

    @pytest.mark.parametrize("index", [-3, 4, 99])
    def test_out_of_range_is_noop(self, index):
        points = make_points([100.0, 160.0, 100.0, 90.0])
        assert smooth_click(points, index, radius=2, strength=1) == points

    def test_other_fields_preserved(self):
        points = make_points([100.0, 160.0, 100.0])
        result = smooth_click(points, 1, radius=1, strength=1)
        assert [(p.time, p.distance, p.index) for p in result] == [
            (p.time, p.distance, p.index) for p in points
        ]

    def test_never_negative(self):
        points = make_points([0.0, 0.0, 0.0])
        result = smooth_click(points, 1, radius=1, strength=2.0)
        assert all(p.ele >= 0 for p in result)


class TestAffectedIndices:

    def test_middle(self):
        assert list(affected_indices(5, 2, 10)) == [3, 4, 5, 6, 7]

    def test_clipped(self):
        assert list(affected_indices(0, 2, 10)) == [0, 1, 2]
        assert list(affected_indices(9, 2, 10)) == [7, 8, 9]

    def test_radius_zero(self):
        assert list(affected_indices(4, 0, 10)) == [4]

    def test_out_of_range(self):
        assert list(affected_indices(-1, 2, 10)) == []
        assert list(affected_indices(10, 2, 10)) == []
