"""
Tests para config.py - Configuración por entorno.
"""

import pytest
from pydantic import ValidationError

from flightreg.config import Settings, get_settings


class TestSettings:
    """Tests para Settings."""

    def test_defaults(self, monkeypatch):
        """Test valores por defecto."""
        for name in ("MIN_AGE", "MAX_AGE", "CLEAR_SCREEN", "THEME", "LOG_LEVEL"):
            monkeypatch.delenv(f"FLIGHTREG_{name}", raising=False)
        settings = Settings(_env_file=None)

        assert settings.min_age == 15
        assert settings.max_age == 120
        assert settings.clear_screen is True
        assert settings.theme == "default"

    def test_from_environment(self, monkeypatch):
        """Test lectura de variables con prefijo."""
        monkeypatch.setenv("FLIGHTREG_MIN_AGE", "18")
        monkeypatch.setenv("FLIGHTREG_CLEAR_SCREEN", "false")
        settings = Settings(_env_file=None)

        assert settings.min_age == 18
        assert settings.clear_screen is False

    def test_invalid_age_range(self):
        """Test edad máxima menor que la mínima."""
        with pytest.raises(ValidationError):
            Settings(_env_file=None, min_age=50, max_age=40)

    def test_get_settings_cached(self):
        """Test get_settings retorna la misma instancia."""
        get_settings.cache_clear()
        assert get_settings() is get_settings()
        get_settings.cache_clear()
