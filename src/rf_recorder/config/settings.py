"""
Settings - Pydantic models for type-safe configuration.

This module defines all configuration settings as Pydantic models,
providing validation, type hints, and automatic environment variable loading.

Example:
    >>> from rf_recorder.config import Settings, load_config
    >>> settings = load_config()  # Loads from env, yaml, and defaults
    >>> print(settings.export.backend)
    'browser'
"""

import logging
from typing import Literal, Optional
from pydantic import BaseModel, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from rf_recorder.translator.options import TranslatorConfig

logger = logging.getLogger(__name__)


class ExportSettings(BaseModel):
    """
    Script export settings.

    Attributes:
        backend: Robot Framework library the script targets
        aria_as_text: Prefer ARIA labels / text over plain CSS selectors
        variant: Name of a registered stringifier; overrides backend
            and aria_as_text when set
        file_extension: Extension of written script files
        encoding: Encoding of written script files
    """
    backend: Literal["browser", "selenium"] = "browser"
    aria_as_text: bool = False
    variant: Optional[str] = None
    file_extension: str = Field(default=".robot", min_length=2)
    encoding: str = "utf-8"

    @field_validator("file_extension")
    @classmethod
    def _dotted_extension(cls, value: str) -> str:
        if not value.startswith("."):
            raise ValueError("file_extension must start with '.'")
        return value

    def to_translator_config(self) -> TranslatorConfig:
        """
        Build the translator configuration described by these settings.

        ARIA-as-text has no effect with SeleniumLibrary, which cannot
        locate elements by text.
        """
        if self.backend == "selenium" and self.aria_as_text:
            logger.warning("aria_as_text is ignored by the selenium backend")
        return TranslatorConfig.for_backend(self.backend, prefer_aria_as_text=self.aria_as_text)


class LoggingSettings(BaseModel):
    """
    Logging configuration.

    Attributes:
        level: Log level
        format: Log format string
        file: Log file path (None for console only)
        json_format: Use JSON format for logs
    """
    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "WARNING"
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    file: Optional[str] = None
    json_format: bool = False


class Settings(BaseSettings):
    """
    Root settings container - single source of truth for all configuration.

    Settings are loaded in this priority order (highest to lowest):
    1. Explicit values passed to constructor, such as values read from a config file
    2. Environment variables (prefixed with RF_RECORDER__)
    3. Default values

    Example:
        >>> settings = Settings()  # Load from env vars
        >>> settings = Settings(export=ExportSettings(backend="selenium"))  # Override
    """

    model_config = SettingsConfigDict(
        env_prefix="RF_RECORDER__",
        env_nested_delimiter="__",
        case_sensitive=False,
        extra="ignore",
    )

    export: ExportSettings = Field(default_factory=ExportSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)

    debug: bool = False

    def merge_with(self, overrides: dict) -> "Settings":
        """
        Create a new Settings instance with overrides applied.

        Args:
            overrides: Dictionary of values to override

        Returns:
            New Settings instance with overrides applied
        """
        current = self.model_dump()

        def deep_merge(base: dict, updates: dict) -> dict:
            for key, value in updates.items():
                if key in base and isinstance(base[key], dict) and isinstance(value, dict):
                    deep_merge(base[key], value)
                else:
                    base[key] = value
            return base

        merged = deep_merge(current, overrides)
        return Settings(**merged)
