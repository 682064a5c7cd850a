"""
Core configuration module using Pydantic Settings.

Settings are loaded from environment variables prefixed with
``PYDANTIC_CURRENCY_`` or from a local ``.env`` file.
"""

from pathlib import Path
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Package settings loaded from environment variables.

    Settings are validated using Pydantic with type hints.
    """

    model_config = SettingsConfigDict(
        env_prefix="PYDANTIC_CURRENCY_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # -------------------------------------------------------------------------
    # Logging Configuration
    # -------------------------------------------------------------------------
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO"
    )
    log_format: Literal["json", "console"] = Field(default="console")

    # -------------------------------------------------------------------------
    # Reference Data
    # -------------------------------------------------------------------------
    crypto_symbols_file: Path | None = Field(
        default=None,
        description="JSON file replacing the bundled cryptocurrency symbol list",
    )

    # -------------------------------------------------------------------------
    # Length Analysis
    # -------------------------------------------------------------------------
    coverage_thresholds: list[float] = Field(default=[90.0, 95.0, 99.0])
    schema_limit: int = Field(default=10, ge=1)

    @field_validator("coverage_thresholds")
    @classmethod
    def check_thresholds(cls, v: list[float]) -> list[float]:
        """Thresholds are percentages, kept in ascending order."""
        for threshold in v:
            if not 0 < threshold <= 100:
                raise ValueError("coverage thresholds must be between 0 and 100")
        return sorted(v)


# Singleton instance of settings
settings = Settings()
