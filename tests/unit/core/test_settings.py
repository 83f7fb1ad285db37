"""
Tests for application settings
"""

import pytest
from pydantic import ValidationError

from core.config import DEFAULT_TEMPLATES, Settings, get_settings

pytestmark = pytest.mark.unit


class TestSettingsDefaults:
    """Default values and environment overrides"""

    def test_default_settings(self, monkeypatch):
        """Test defaults when no overrides are present"""
        for name in ("ENVIRONMENT", "LOG_FORMAT", "SIMULATED_GENERATION_MS", "TEMPLATE_DIR", "OUTPUT_DIR"):
            monkeypatch.delenv(name, raising=False)

        settings = Settings(_env_file=None)

        assert settings.environment == "development"
        assert settings.app_name == "Report Engine API"
        assert settings.app_version == "1.0.0"
        assert settings.service_name == "Report Engine"
        assert settings.template_dir == "reports/templates"
        assert settings.output_dir == "reports/output"
        assert settings.template_extension == "rptdesign"
        assert settings.download_base_path == "/api/reports/download"
        assert settings.simulated_generation_ms == 100
        assert settings.available_templates == DEFAULT_TEMPLATES
        assert settings.log_level == "INFO"
        assert settings.log_format == "json"
        assert settings.prometheus_enabled is True
        assert settings.is_development is True

    def test_environment_overrides(self, monkeypatch):
        """Test environment variables override defaults"""
        monkeypatch.setenv("TEMPLATE_DIR", "/srv/designs")
        monkeypatch.setenv("SIMULATED_GENERATION_MS", "5")
        monkeypatch.setenv("PROMETHEUS_ENABLED", "false")

        settings = Settings(_env_file=None)

        assert settings.template_dir == "/srv/designs"
        assert settings.simulated_generation_ms == 5
        assert settings.prometheus_enabled is False

    def test_test_environment(self):
        """Test suite runs with ENVIRONMENT=test"""
        settings = get_settings()

        assert settings.is_testing is True
        assert settings.is_production is False

    def test_get_settings_is_cached(self):
        assert get_settings() is get_settings()


class TestSettingsValidation:
    """Field validators"""

    def test_unknown_environment(self):
        with pytest.raises(ValidationError) as exc_info:
            Settings(_env_file=None, environment="qa")

        assert "Environment must be one of" in str(exc_info.value)

    def test_log_level_normalized(self):
        assert Settings(_env_file=None, log_level="debug").log_level == "DEBUG"

    def test_unknown_log_level(self):
        with pytest.raises(ValidationError):
            Settings(_env_file=None, log_level="chatty")

    def test_unknown_log_format(self):
        with pytest.raises(ValidationError):
            Settings(_env_file=None, log_format="xml")

    def test_template_extension_dot_stripped(self):
        assert Settings(_env_file=None, template_extension=".xml").template_extension == "xml"

    def test_negative_delay_rejected(self):
        with pytest.raises(ValidationError):
            Settings(_env_file=None, simulated_generation_ms=-1)
