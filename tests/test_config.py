"""Tests for settings."""

import pytest
from pydantic import ValidationError

from py_landscape.config import Settings


class TestSettings:
    """Test environment driven settings."""

    def test_defaults(self):
        settings = Settings(_env_file=None)
        assert settings.image_format == "PNG"
        assert settings.media_type == "image/png"
        assert settings.log_format == "json"
        assert settings.seed is None
        assert settings.max_points == 1_000_000
        assert settings.max_pixels == 16_000_000

    def test_environment_overrides(self, monkeypatch):
        monkeypatch.setenv("LANDSCAPE_SEED", "1234")
        monkeypatch.setenv("LANDSCAPE_IMAGE_FORMAT", "jpeg")

        settings = Settings(_env_file=None)

        assert settings.seed == 1234
        assert settings.image_format == "JPEG"
        assert settings.media_type == "image/jpeg"

    def test_invalid_image_format(self):
        with pytest.raises(ValidationError, match="Invalid image format"):
            Settings(_env_file=None, image_format="GIF")

    def test_invalid_log_format(self):
        with pytest.raises(ValidationError, match="Invalid log format"):
            Settings(_env_file=None, log_format="xml")
