"""
Library configuration.

Centralized settings read from environment variables (prefix ``VECMAT_``)
or an optional ``.env`` file.
"""

from functools import lru_cache
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Library settings"""

    model_config = SettingsConfigDict(
        env_prefix="VECMAT_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

    # Logging
    LOG_LEVEL: str = "WARNING"
    LOG_FORMAT: str = "text"  # json or text
    LOG_FILE: Optional[str] = None

    # Formatting
    DEFAULT_DECIMALS: int = Field(default=6, ge=0)
    ERROR_DECIMALS: int = Field(default=2, ge=0)

    # Comparison
    DEFAULT_TOLERANCE: float = Field(default=0.001, ge=0.0)

    # Cofactor expansion is O(n!); warn when asked for anything larger
    COFACTOR_WARN_DIMENSION: int = Field(default=8, ge=2)


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance"""
    return Settings()


# Global settings instance
settings = get_settings()
