import logging
from enum import Enum
from pathlib import Path
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

CONFIG_DIR = Path(__file__).parent


class LogLevel(str, Enum):
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"


class NumericMatchPolicy(str, Enum):
    STRICT = "strict"
    TOWER = "tower"


class FakerSettings(BaseSettings):
    LOG_LEVEL: LogLevel = Field(
        default=LogLevel.WARNING,
        description="Level applied to the 'poseur' logger by configure_logging().",
    )
    LOG_RECORDED_CALLS: bool = Field(
        default=False,
        description="Log every recorded call at DEBUG. Noisy, useful when a spy assertion fails unexpectedly.",
    )
    NUMERIC_MATCH_POLICY: NumericMatchPolicy = Field(
        default=NumericMatchPolicy.STRICT,
        description=(
            "How argument matching treats int and float. 'strict' requires the exact same runtime type "
            "(1 never matches 1.0). 'tower' compares int and float by value. bool is never folded in."
        ),
    )
    MAX_ARGUMENT_REPR: int = Field(
        default=200,
        ge=16,
        description="Width at which argument reprs are truncated in log lines and error messages.",
    )

    @field_validator("LOG_LEVEL", mode="before")
    @classmethod
    def _upper_log_level(cls, v):
        if isinstance(v, str):
            return v.strip().upper()
        return v

    @field_validator("NUMERIC_MATCH_POLICY", mode="before")
    @classmethod
    def _lower_policy(cls, v):
        if isinstance(v, str):
            return v.strip().lower()
        return v

    model_config = SettingsConfigDict(
        env_prefix="POSEUR_",
        env_file=CONFIG_DIR.parent.parent / ".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )


def configure_logging(settings_instance: Optional[FakerSettings] = None) -> logging.Logger:
    """Apply LOG_LEVEL to the package logger and return it."""
    settings_instance = settings_instance or settings
    package_logger = logging.getLogger("poseur")
    package_logger.setLevel(settings_instance.LOG_LEVEL.value)
    return package_logger


def shorten(value, width: Optional[int] = None) -> str:
    width = width or settings.MAX_ARGUMENT_REPR
    text = repr(value)
    if len(text) <= width:
        return text
    return text[: width - 3] + "..."


# Global settings instance
settings = FakerSettings()
