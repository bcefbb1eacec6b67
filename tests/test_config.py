"""
Tests for settings loading.
"""

import pytest
from pydantic import ValidationError

from elevation_editor.config import Settings


class TestSettings:

    def test_defaults(self, monkeypatch):
        for name in ("HISTORY_LIMIT", "SMOOTHING_RADIUS", "ANOMALY_THRESHOLD"):
            monkeypatch.delenv(f"ELEVATION_EDITOR_{name}", raising=False)

        settings = Settings(_env_file=None)
        assert settings.history_limit == 100
        assert settings.smoothing_radius == 5
        assert settings.anomaly_threshold == 10.0

    def test_env_override(self, monkeypatch):
        monkeypatch.setenv("ELEVATION_EDITOR_HISTORY_LIMIT", "5")
        monkeypatch.setenv("ELEVATION_EDITOR_SMOOTHING_STRENGTH", "0.8")
        settings = Settings(_env_file=None)
        assert settings.history_limit == 5
        assert settings.smoothing_strength == 0.8

    def test_log_level_normalized(self):
        assert Settings(log_level="debug").log_level == "DEBUG"

    @pytest.mark.parametrize("field, value", [
        ("history_limit", 0),
        ("smoothing_strength", 1.5),
        ("anomaly_threshold", 500),
    ])
    def test_invalid_values(self, field, value):
        with pytest.raises(ValidationError):
            Settings(**{field: value})
