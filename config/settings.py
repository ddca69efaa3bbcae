"""
Configuration management for CommitMoji.

This module provides centralized configuration with:
- Environment-specific settings
- Type validation and defaults
- Extraction, chart rendering and service settings
- Logging configuration
"""

import logging
from typing import Optional, Dict, Any, List
from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings
from pydantic_settings import BaseSettings as PydanticBaseSettings


class ExtractorSettings(BaseSettings):
    """Commit message extraction settings."""

    repo_path: str = Field(default=".", description="Path to the git working copy")
    output_file: str = Field(
        default="public/commitMessages.json", description="Serialized commit messages document"
    )
    indent: int = Field(default=2, ge=0, description="JSON indentation of the document")


class ChartSettings(BaseSettings):
    """Chart rendering settings."""

    source: str = Field(
        default="public/commitMessages.json",
        description="Commit messages document (local path or http(s) URL)",
    )
    output_file: str = Field(default="public/commitChart.png", description="Rendered chart image")
    title: str = Field(default="Commit Chart", description="Chart title")
    dataset_label: str = Field(default="Number of Commits", description="Dataset legend label")
    figure_width: float = Field(default=8.0, gt=0, description="Figure width in inches")
    figure_height: float = Field(default=6.0, gt=0, description="Figure height in inches")
    dpi: int = Field(default=100, gt=0, description="Figure resolution")
    font_family: str = Field(default="DejaVu Sans", description="Font used for chart labels")
    glyph_font_paths: List[str] = Field(
        default_factory=list,
        description="Extra monochrome emoji font files (e.g. NotoEmoji, Symbola) for bar glyphs",
    )
    discover_glyph_fonts: bool = Field(
        default=True, description="Search installed fonts for emoji coverage"
    )
    fetch_timeout: float = Field(default=10.0, description="Document fetch timeout in seconds")

    @field_validator("fetch_timeout")
    @classmethod
    def validate_fetch_timeout(cls, v):
        if v <= 0:
            raise ValueError("Fetch timeout must be positive")
        return v


class MonitoringSettings(BaseSettings):
    """Logging configuration settings."""

    log_level: str = Field(default="INFO", description="Logging level")
    log_format: str = Field(
        default="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        description="Logging format string",
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v):
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        if v.upper() not in valid_levels:
            raise ValueError(f"Log level must be one of: {valid_levels}")
        return v.upper()


class ServiceSettings(BaseSettings):
    """Chart service configuration settings."""

    host: str = Field(default="127.0.0.1", description="Chart service bind address")
    commit_chart_port: int = Field(default=8010, description="Chart service port")


class Settings(PydanticBaseSettings):
    """
    Main application settings with environment-specific configuration.

    Supports multiple environments:
    - development: Local development settings
    - testing: Test environment settings
    - production: Production environment settings
    """

    # Core application settings
    app_name: str = Field(default="CommitMoji", description="Application name")
    version: str = Field(default="1.0.0", description="Application version")
    environment: str = Field(default="development", description="Environment name")
    debug: bool = Field(default=False, description="Enable debug mode")

    extractor: ExtractorSettings = Field(default_factory=ExtractorSettings)
    chart: ChartSettings = Field(default_factory=ChartSettings)
    monitoring: MonitoringSettings = Field(default_factory=MonitoringSettings)
    service: ServiceSettings = Field(default_factory=ServiceSettings)

    @field_validator("environment")
    @classmethod
    def validate_environment(cls, v):
        valid_environments = ["development", "testing", "production"]
        if v not in valid_environments:
            raise ValueError(f"Environment must be one of: {valid_environments}")
        return v

    @field_validator("debug")
    @classmethod
    def validate_debug_mode(cls, v, info):
        if info.data.get("environment") == "production" and v:
            raise ValueError("Debug mode cannot be enabled in production")
        return v

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": False,
        "env_nested_delimiter": "__",
        "extra": "ignore"
    }


@lru_cache()
def get_settings() -> Settings:
    """
    Get cached application settings.

    Returns:
        Settings: Application configuration object

    Example:
        >>> settings = get_settings()
        >>> print(settings.extractor.output_file)
    """
    return Settings()


# Global settings instance
settings = get_settings()


def export_config() -> Dict[str, Any]:
    """Export configuration for logging at startup."""
    return {
        "app_name": settings.app_name,
        "version": settings.version,
        "environment": settings.environment,
        "debug": settings.debug,
        "extractor": {
            "repo_path": settings.extractor.repo_path,
            "output_file": settings.extractor.output_file,
        },
        "chart": {
            "source": settings.chart.source,
            "output_file": settings.chart.output_file,
            "dpi": settings.chart.dpi,
        },
        "monitoring": {"log_level": settings.monitoring.log_level},
        "service": {
            "host": settings.service.host,
            "commit_chart_port": settings.service.commit_chart_port,
        },
    }


def configure_logging(level: Optional[str] = None) -> None:
    """Configure root logging from the monitoring settings."""
    logging.basicConfig(
        level=getattr(logging, (level or settings.monitoring.log_level).upper()),
        format=settings.monitoring.log_format,
    )


if __name__ == "__main__":
    """Configuration export script."""
    import json

    print("Configuration Export:")
    print(json.dumps(export_config(), indent=2))
