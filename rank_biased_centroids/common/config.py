"""Configuration management for rank fusion.

Settings are read with ``pydantic_settings.BaseSettings`` from environment
variables prefixed with ``RBC_``, an optional ``.env`` file, or defaults.
The fusion functions take explicit arguments and never read configuration
themselves; these settings feed ``RankBiasedCentroids.from_settings`` and
``configure_logging_from_settings`` at application startup.

Usage
- ``settings = get_settings()``
- ``engine = RankBiasedCentroids.from_settings(settings)``
"""

from typing import Any

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
LOG_FORMATS = ("json", "console")


class FusionSettings(BaseSettings):
    """Settings for the Rank-Biased Centroids engine.

    Environment variables
    - ``RBC_PERSISTENCE``: default persistence ``p`` in ``[0, 1)``
    - ``RBC_NORMALIZE``: divide scores by the total run weight
    - ``RBC_WEIGHT_TABLE_SIZE``: rank weights precomputed per engine
    - ``RBC_LOG_LEVEL`` / ``RBC_LOG_FORMAT``: structlog setup
    """

    model_config = SettingsConfigDict(
        env_prefix="RBC_",
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
    )

    persistence: float = Field(default=0.9, ge=0.0, lt=1.0)
    normalize: bool = Field(default=False)
    weight_table_size: int = Field(default=10000, ge=1)

    # Logging
    log_level: str = Field(default="INFO")
    log_format: str = Field(default="console")

    @field_validator("log_level")
    @classmethod
    def _check_log_level(cls, value: str) -> str:
        level = value.upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(LOG_LEVELS)}")
        return level

    @field_validator("log_format")
    @classmethod
    def _check_log_format(cls, value: str) -> str:
        fmt = value.lower()
        if fmt not in LOG_FORMATS:
            raise ValueError(f"log_format must be one of {', '.join(LOG_FORMATS)}")
        return fmt


def get_settings(**overrides: Any) -> FusionSettings:
    """Build settings from the environment, applying keyword overrides."""
    return FusionSettings(**overrides)
