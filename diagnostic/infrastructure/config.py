"""
Centralized configuration management for the diagnostic scoring service.

Provides environment-specific configuration with validation and type safety
using pydantic-settings. Scoring thresholds are constants of the instrument
and live in the domain modules, not here.
"""

from __future__ import annotations

import json
import os
from functools import lru_cache
from pathlib import Path
from typing import Any, Literal

from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings


class LoggingConfig(BaseSettings):
    """
    Logging configuration settings.

    Example:
        >>> log_config = LoggingConfig(level="DEBUG", file_path="./logs/diagnostic.log")
        >>> print(log_config.get_file_handler_config())
    """

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        "INFO", description="Minimum logging level"
    )
    file_path: str | None = Field("./logs/diagnostic.log", description="Log file path")
    max_bytes: int = Field(10 * 1024 * 1024, ge=1024, description="Max log file size in bytes")
    backup_count: int = Field(5, ge=1, description="Number of backup log files")
    structured: bool = Field(True, description="Use structured JSON logging")
    console_enabled: bool = Field(True, description="Enable console output")

    model_config = {"env_prefix": "LOG_", "case_sensitive": False}

    def get_file_handler_config(self) -> dict[str, Any] | None:
        """Get file handler configuration if file logging is enabled."""
        if not self.file_path:
            return None

        return {
            "class": "logging.handlers.RotatingFileHandler",
            "filename": self.file_path,
            "maxBytes": self.max_bytes,
            "backupCount": self.backup_count,
            "encoding": "utf-8",
        }


class ScoringConfig(BaseSettings):
    """
    Boundary behaviour of the scoring pipeline.

    ``strict_responses`` rejects answers outside 1-5 and answers to unknown
    questions instead of scoring them as given. ``warn_on_unresolved_dimensions``
    logs every dimension name that normalization could not map to the registry.
    """

    strict_responses: bool = Field(False, description="Reject out-of-range or orphan responses")
    warn_on_unresolved_dimensions: bool = Field(
        True, description="Log dimension names that do not resolve to the registry"
    )

    model_config = {"env_prefix": "SCORING_", "case_sensitive": False}


class SecurityConfig(BaseSettings):
    """
    Security configuration settings.

    Example:
        >>> sec_config = SecurityConfig()
        >>> print(sec_config.max_questions)
    """

    max_questions: int = Field(500, ge=1, description="Maximum questions per scoring request")
    max_name_length: int = Field(200, ge=10, description="Maximum participant name length")

    cors_origins: list[str] = Field(["*"], description="Allowed CORS origins")
    cors_methods: list[str] = Field(["GET", "POST"], description="Allowed CORS methods")

    model_config = {"env_prefix": "SECURITY_", "case_sensitive": False}

    @field_validator("cors_methods")
    def normalize_methods(cls, v):
        return [method.upper() for method in v]


class ApplicationConfig(BaseSettings):
    """
    Main application configuration.

    Example:
        >>> config = get_settings()
        >>> print(config.app.environment)
    """

    environment: Literal["development", "testing", "production"] = Field(
        "development", description="Application environment"
    )
    debug: bool = Field(False, description="Enable debug mode")
    version: str = Field("0.1.0", description="Application version")
    title: str = Field("IQ+IS Diagnostic API", description="Title shown in the API docs")

    enable_xlsx_export: bool = Field(True, description="Enable spreadsheet export")

    host: str = Field("127.0.0.1", description="Bind address for the development server")
    port: int = Field(8000, ge=1, le=65535, description="Port for the development server")

    model_config = {"env_prefix": "APP_", "case_sensitive": False}

    @model_validator(mode="after")
    def debug_implies_development(self):
        """Ensure debug mode is only enabled outside production."""
        if self.debug and self.environment == "production":
            raise ValueError("Debug mode cannot be enabled in production")
        return self


LOGGING_PRESETS: dict[str, dict[str, Any]] = {
    "development": {"level": "DEBUG", "file_path": "./logs/development.log", "structured": False},
    "testing": {"level": "WARNING", "file_path": None, "console_enabled": False},
    "production": {"level": "WARNING", "file_path": "./logs/production.log", "structured": True},
}


class Settings:
    """
    Complete application settings container.

    Sections are built lazily on first access.

    Example:
        >>> settings = get_settings()
        >>> print(settings.scoring.strict_responses)
        >>> print(settings.app.environment)
    """

    def __init__(self):
        self._app: ApplicationConfig | None = None
        self._logging: LoggingConfig | None = None
        self._scoring: ScoringConfig | None = None
        self._security: SecurityConfig | None = None

    @property
    def app(self) -> ApplicationConfig:
        if self._app is None:
            self._app = ApplicationConfig()
        return self._app

    @property
    def logging(self) -> LoggingConfig:
        if self._logging is None:
            # Environment presets fill in whatever no LOG_* variable sets
            preset = dict(LOGGING_PRESETS[self.app.environment])
            if self.app.debug:
                preset["level"] = "DEBUG"
            explicit = {
                name for name in LoggingConfig.model_fields if f"LOG_{name.upper()}" in os.environ
            }
            self._logging = LoggingConfig(
                **{key: value for key, value in preset.items() if key not in explicit}
            )
        return self._logging

    @property
    def scoring(self) -> ScoringConfig:
        if self._scoring is None:
            self._scoring = ScoringConfig()
        return self._scoring

    @property
    def security(self) -> SecurityConfig:
        if self._security is None:
            self._security = SecurityConfig()
        return self._security

    def is_development(self) -> bool:
        return self.app.environment == "development"

    def is_production(self) -> bool:
        return self.app.environment == "production"

    def is_testing(self) -> bool:
        return self.app.environment == "testing"

    def get_environment_info(self) -> dict[str, Any]:
        """Get summary of current environment configuration."""
        return {
            "environment": self.app.environment,
            "version": self.app.version,
            "debug": self.app.debug,
            "logging_level": self.logging.level,
            "scoring": {
                "strict_responses": self.scoring.strict_responses,
                "warn_on_unresolved_dimensions": self.scoring.warn_on_unresolved_dimensions,
            },
            "features": {"xlsx_export": self.app.enable_xlsx_export},
        }


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """
    Get application settings instance (cached).

    Returns:
        Settings instance with all configuration loaded

    Example:
        >>> settings = get_settings()
        >>> log_level = settings.logging.level
    """
    return Settings()


def load_settings_from_file(file_path: str) -> Settings:
    """
    Load settings from a JSON configuration file.

    Each top-level object is a section whose keys become ``SECTION_KEY``
    environment variables, e.g. ``{"scoring": {"strict_responses": true}}``.

    Raises:
        FileNotFoundError: If configuration file doesn't exist
        ValueError: If file format is unsupported

    Example:
        >>> settings = load_settings_from_file("config/production.json")
        >>> print(settings.app.environment)
    """
    config_path = Path(file_path)
    if not config_path.exists():
        raise FileNotFoundError(f"Configuration file not found: {file_path}")

    if config_path.suffix.lower() != ".json":
        raise ValueError(f"Unsupported configuration file format: {config_path.suffix}")

    with open(config_path, encoding="utf-8") as f:
        config_data = json.load(f)

    for section, values in config_data.items():
        if isinstance(values, dict):
            for key, value in values.items():
                env_key = f"{section.upper()}_{key.upper()}"
                os.environ[env_key] = json.dumps(value) if isinstance(value, list) else str(value)

    get_settings.cache_clear()
    return get_settings()


def override_settings(**kwargs: Any) -> Settings:
    """
    Override specific settings for testing or development.

    Keys are ``<section>_<field>`` and are exported as environment variables.

    Example:
        >>> settings = override_settings(app_environment="testing", scoring_strict_responses=True)
    """
    for key, value in kwargs.items():
        os.environ[key.upper()] = json.dumps(value) if isinstance(value, list) else str(value)

    get_settings.cache_clear()
    return get_settings()


def reset_settings() -> None:
    """Reset settings cache to reload from environment."""
    get_settings.cache_clear()
