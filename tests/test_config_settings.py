"""
Unit tests for config settings module.
"""

import pytest
from unittest.mock import patch

from config.settings import (
    get_settings,
    export_config,
    Settings,
    ChartSettings,
    ExtractorSettings,
    MonitoringSettings,
    ServiceSettings,
)


class TestExtractorSettings:
    """Test cases for ExtractorSettings."""

    def test_extractor_settings_defaults(self):
        """Test ExtractorSettings default values."""
        settings = ExtractorSettings()

        assert settings.repo_path == "."
        assert settings.output_file == "public/commitMessages.json"
        assert settings.indent == 2

    def test_extractor_settings_negative_indent(self):
        """Test indent must not be negative."""
        with pytest.raises(ValueError):
            ExtractorSettings(indent=-1)


class TestChartSettings:
    """Test cases for ChartSettings."""

    def test_chart_settings_defaults(self):
        """Test ChartSettings default values."""
        settings = ChartSettings()

        assert settings.source == "public/commitMessages.json"
        assert settings.output_file == "public/commitChart.png"
        assert settings.title == "Commit Chart"
        assert settings.dataset_label == "Number of Commits"
        assert settings.dpi == 100

    def test_chart_settings_invalid_timeout(self):
        """Test fetch timeout validation."""
        with pytest.raises(ValueError):
            ChartSettings(fetch_timeout=0)

    def test_chart_settings_invalid_figure_size(self):
        """Test figure size must be positive."""
        with pytest.raises(ValueError):
            ChartSettings(figure_width=0)


class TestMonitoringSettings:
    """Test cases for MonitoringSettings."""

    def test_log_level_normalized(self):
        """Test log level is upper-cased."""
        settings = MonitoringSettings(log_level="debug")
        assert settings.log_level == "DEBUG"

    def test_log_level_invalid(self):
        """Test unknown log levels are rejected."""
        with pytest.raises(ValueError):
            MonitoringSettings(log_level="VERBOSE")


class TestServiceSettings:
    """Test cases for ServiceSettings."""

    def test_service_settings_defaults(self):
        settings = ServiceSettings()
        assert settings.commit_chart_port == 8010


class TestSettings:
    """Test cases for the main Settings class."""

    def test_settings_defaults(self):
        """Test Settings default values."""
        settings = Settings()

        assert settings.app_name == "CommitMoji"
        assert settings.environment == "development"
        assert isinstance(settings.extractor, ExtractorSettings)
        assert isinstance(settings.chart, ChartSettings)

    def test_settings_invalid_environment(self):
        """Test environment validation."""
        with pytest.raises(ValueError):
            Settings(environment="staging")

    def test_settings_debug_in_production(self):
        """Test debug mode is refused in production."""
        with pytest.raises(ValueError):
            Settings(environment="production", debug=True)

    def test_settings_nested_env_override(self):
        """Test nested values can be set through the environment."""
        with patch.dict("os.environ", {"CHART__TITLE": "History", "EXTRACTOR__OUTPUT_FILE": "out.json"}):
            settings = Settings()

        assert settings.chart.title == "History"
        assert settings.extractor.output_file == "out.json"

    def test_get_settings_cached(self):
        """Test get_settings returns a cached instance."""
        assert get_settings() is get_settings()


class TestExportConfig:
    """Test cases for export_config."""

    def test_export_config_sections(self):
        config = export_config()

        assert config["app_name"] == "CommitMoji"
        assert set(config) >= {"extractor", "chart", "monitoring", "service"}
        assert config["extractor"]["output_file"].endswith(".json")
