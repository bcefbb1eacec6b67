"""
Tests for the command line interface.
"""

import pytest
from click.testing import CliRunner

from elevation_editor.cli import cli
from elevation_editor.features.track import read_gpx


def gpx_document(elevations):
    points = "\n".join(
        f'<trkpt lat="43.0" lon="{76.0 + i * 0.0001:.4f}"><ele>{ele}</ele></trkpt>'
        for i, ele in enumerate(elevations)
    )
    return (
        '<?xml version="1.0" encoding="UTF-8"?>\n'
        '<gpx version="1.1" creator="test" xmlns="http://www.topografix.com/GPX/1/1">\n'
        f'<trk><name>Test</name><trkseg>\n{points}\n</trkseg></trk>\n'
        '</gpx>\n'
    )


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def spike_gpx(tmp_path):
    elevations = [100.0] * 50
    elevations[20], elevations[21], elevations[22] = 125.0, 150.0, 125.0
    path = tmp_path / "spike.gpx"
    path.write_text(gpx_document(elevations), encoding="utf-8")
    return path


@pytest.fixture
def flat_gpx(tmp_path):
    path = tmp_path / "flat.gpx"
    path.write_text(gpx_document([100.0] * 20), encoding="utf-8")
    return path


class TestStats:

    def test_stats(self, runner, spike_gpx):
        result = runner.invoke(cli, ["stats", str(spike_gpx)])
        assert result.exit_code == 0, result.output
        assert "Track: Test" in result.output
        assert "Points: 50" in result.output
        assert "Max elevation: 150 m" in result.output
        assert "Duration: —" in result.output

    def test_imperial(self, runner, spike_gpx):
        result = runner.invoke(cli, ["stats", str(spike_gpx), "--units", "imperial"])
        assert result.exit_code == 0, result.output
        assert "ft" in result.output
        assert "mi" in result.output

    def test_invalid_file(self, runner, tmp_path):
        path = tmp_path / "broken.gpx"
        path.write_text("not a gpx", encoding="utf-8")
        result = runner.invoke(cli, ["stats", str(path)])
        assert result.exit_code == 1
        assert "Invalid GPX" in result.output

    def test_binary_file(self, runner, tmp_path):
        path = tmp_path / "binary.gpx"
        path.write_bytes(b"\xff\xfe<gpx>")
        result = runner.invoke(cli, ["stats", str(path)])
        assert result.exit_code == 1
        assert "Invalid GPX" in result.output
        assert not isinstance(result.exception, UnicodeDecodeError)


class TestAnomalies:

    def test_spike_found(self, runner, spike_gpx):
        result = runner.invoke(cli, ["anomalies", str(spike_gpx)])
        assert result.exit_code == 0, result.output
        assert "1 anomalies" in result.output

    def test_none_found(self, runner, flat_gpx):
        result = runner.invoke(cli, ["anomalies", str(flat_gpx)])
        assert result.exit_code == 0, result.output
        assert "No anomalies found." in result.output

    def test_high_threshold(self, runner, spike_gpx):
        result = runner.invoke(cli, ["anomalies", str(spike_gpx), "--threshold", "60"])
        assert "No anomalies found." in result.output


class TestSmooth:

    def test_smooth_point(self, runner, spike_gpx, tmp_path):
        output = tmp_path / "out.gpx"
        result = runner.invoke(cli, [
            "smooth", str(spike_gpx), "--index", "21",
            "--radius", "2", "--strength", "1", "-o", str(output),
        ])
        assert result.exit_code == 0, result.output
        assert f"Saved: {output}" in result.output

        track = read_gpx(output.read_bytes())
        assert track.points[21].ele == pytest.approx(120.0)
        assert track.points[10].ele == 100.0

    def test_index_out_of_range(self, runner, spike_gpx, tmp_path):
        result = runner.invoke(cli, [
            "smooth", str(spike_gpx), "--index", "99", "-o", str(tmp_path / "out.gpx"),
        ])
        assert result.exit_code == 2
        assert not (tmp_path / "out.gpx").exists()


class TestFix:

    def test_fix_spike(self, runner, spike_gpx, tmp_path):
        output = tmp_path / "fixed.gpx"
        result = runner.invoke(cli, ["fix", str(spike_gpx), "-o", str(output)])
        assert result.exit_code == 0, result.output
        assert "Smoothed 1 of 1 anomalies" in result.output

        track = read_gpx(output.read_bytes())
        assert max(p.ele for p in track.points) < 150.0

    def test_fix_clean_track(self, runner, flat_gpx, tmp_path):
        output = tmp_path / "fixed.gpx"
        result = runner.invoke(cli, ["fix", str(flat_gpx), "-o", str(output)])
        assert result.exit_code == 0, result.output
        assert "Smoothed 0 of 0 anomalies" in result.output
        assert [p.ele for p in read_gpx(output.read_bytes()).points] == [100.0] * 20
