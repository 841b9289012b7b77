"""Library configuration using Pydantic Settings."""

import logging
import sys

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Library settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="BOXLOG_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Global switch; when False the level functions render nothing
    enabled: bool = True

    # None = detect once from the attached stdout
    colorize: bool | None = None

    # Table defaults
    default_width: str = "medium"
    custom_width: int | None = Field(default=None, ge=0, le=1000)
    default_format: str = "plain"

    # Level for the package's own diagnostic logger
    log_level: str = "WARNING"

    @model_validator(mode="after")
    def _detect_colorization(self) -> "Settings":
        """Resolve colour support once, at construction time."""
        if self.colorize is None:
            self.colorize = _stdout_is_tty()
        return self

    @property
    def colorization_enabled(self) -> bool:
        """Whether ANSI colour codes should wrap rendered tables."""
        return bool(self.colorize)

    @property
    def table_width(self) -> "str | int":
        """Width preset or custom column count used when a call gives none."""
        if self.custom_width is not None:
            return self.custom_width
        return self.default_width


def _stdout_is_tty() -> bool:
    stream = sys.stdout
    try:
        return bool(stream is not None and stream.isatty())
    except (AttributeError, ValueError):
        return False


def configure_logging(config: Settings | None = None) -> None:
    """Set the level of the package logger from settings.

    The root logger is left untouched.
    """
    config = config or settings
    level = getattr(logging, config.log_level.upper(), logging.WARNING)
    logging.getLogger("boxlog").setLevel(level)


# Global settings instance
settings = Settings()
