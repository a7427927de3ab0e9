"""
Configuration module for the Study Buddy tutor.
Uses pydantic-settings for environment variable management.
"""

from functools import lru_cache
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="STUDY_BUDDY_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # ===========================================
    # Runtime
    # ===========================================
    environment: str = Field(default="development", description="Environment name")
    debug: bool = Field(default=False, description="Debug mode")

    # ===========================================
    # Console
    # ===========================================
    user_prompt: str = Field(
        default="You: ", description="Prompt shown before each line of user input"
    )
    tutor_label: str = Field(
        default="Tutor", description="Label printed in front of each tutor reply"
    )

    # ===========================================
    # Logging
    # ===========================================
    # WARNING keeps log lines out of the chat transcript unless asked for
    log_level: str = Field(default="WARNING", description="Logging level")
    log_format: str = Field(
        default="<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | <cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>",
        description="Loguru log format",
    )
    log_file: Optional[str] = Field(
        default=None, description="Optional log file path (rotated daily)"
    )

    # ===========================================
    # Computed Properties
    # ===========================================
    @property
    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.environment.lower() == "production"

    @property
    def effective_log_level(self) -> str:
        """Log level after applying the debug switch."""
        if self.debug:
            return "DEBUG"
        return self.log_level.upper()


@lru_cache()
def get_settings() -> Settings:
    """
    Get cached settings instance.
    Uses lru_cache to ensure settings are only loaded once.
    """
    return Settings()


# Global settings instance for convenience
settings = get_settings()
