"""Parser configuration using Pydantic settings."""

import sys
from typing import Optional

from loguru import logger
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

LOG_LEVELS = ("TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL")


class ParserSettings(BaseSettings):
    """Parser settings."""

    # Logging settings
    LOG_LEVEL: str = Field("INFO", description="Minimum level of the stderr log sink")

    # File loading settings
    ENCODING: str = Field("utf-8", description="Encoding used when reading Dockerfiles from disk")

    # Diagnostics settings
    FRAGMENT_WIDTH: int = Field(
        40, ge=1, le=200, description="Max characters of offending text shown in parse errors"
    )

    model_config = SettingsConfigDict(
        env_prefix="DOCKERFILE_PARSER_",
        env_file=".env",
        extra="ignore",
        case_sensitive=True,
    )

    @field_validator("LOG_LEVEL")
    def validate_log_level(cls, v: str) -> str:
        """Validate that the level is one loguru knows about."""
        level = v.upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"Log level must be one of {', '.join(LOG_LEVELS)}")
        return level


# Handler added by the last configure_logging() call
_handler_id: Optional[int] = None


def configure_logging(parser_settings: Optional[ParserSettings] = None) -> int:
    """Enable package logging with a stderr sink.

    Calling it again replaces the sink it added before. Handlers installed
    by the application are left alone.

    Args:
        parser_settings: Settings to read the level from, defaults to the global settings

    Returns:
        int: Identifier of the added loguru handler
    """
    global _handler_id

    parser_settings = parser_settings or settings
    if _handler_id is not None:
        try:
            logger.remove(_handler_id)
        except ValueError:
            logger.debug(f"Handler {_handler_id} was already removed")
    logger.enable("dockerfile_instructions")
    _handler_id = logger.add(
        sys.stderr,
        level=parser_settings.LOG_LEVEL,
        format="{time:HH:mm:ss} | {level: <8} | {name}:{function}:{line} - {message}",
    )
    return _handler_id


settings = ParserSettings()
