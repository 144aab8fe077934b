"""Configuration loading for the Dispatch delivery system.

This module provides centralized configuration management:
- Load settings from environment variables and .env files
- Validate configuration using pydantic
- Provide typed access to all settings
"""

from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment.

    Uses pydantic-settings for environment variable handling with
    .env file support via python-dotenv.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Fleet configuration
    fleet_size: int = Field(
        default=1,
        description="Number of simulated delivery drivers",
    )
    delivery_success_rate: float = Field(
        default=1.0,
        description="Probability that a simulated delivery goes through",
    )
    random_seed: int | None = Field(
        default=None,
        description="Seed for the simulated drivers (unset for non-deterministic runs)",
    )
    default_octane_grade: int = Field(
        default=87,
        description="Octane grade used by the refuel command when none is given",
    )

    # Order intake
    accepting_orders: bool = Field(
        default=True,
        description="Whether new orders are accepted at startup",
    )

    # Logging configuration
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO",
        description="Log level",
    )
    log_format: Literal["json", "text"] = Field(
        default="text",
        description="Log format",
    )

    # Development
    debug: bool = Field(
        default=False,
        description="Enable debug mode with verbose logging",
    )

    @field_validator("fleet_size")
    @classmethod
    def validate_fleet_size(cls, v: int) -> int:
        """Ensure fleet size is non-negative."""
        if v < 0:
            raise ValueError("fleet_size must be non-negative")
        return v

    @field_validator("delivery_success_rate")
    @classmethod
    def validate_success_rate(cls, v: float) -> float:
        """Ensure success rate is a probability."""
        if v < 0 or v > 1:
            raise ValueError("delivery_success_rate must be between 0 and 1")
        return v

    @field_validator("default_octane_grade")
    @classmethod
    def validate_octane_grade(cls, v: int) -> int:
        """Ensure octane grade is in a sensible range."""
        if v <= 0 or v > 100:
            raise ValueError("default_octane_grade must be between 1 and 100")
        return v


def load_settings(env_file: str | None = None) -> Settings:
    """Load application settings from environment.

    Args:
        env_file: Optional path to .env file. If not provided,
                 uses the default .env in the current directory.

    Returns:
        Validated Settings instance.

    Raises:
        ValidationError: If settings validation fails.
    """
    if env_file:
        return Settings(_env_file=env_file)  # type: ignore[call-arg]
    return Settings()


__all__ = ["Settings", "load_settings"]
