"""
Configuration management for Code Invaders.
Uses pydantic-settings for environment variable parsing.

Gameplay tuning lives in gameplay/constants.py and is fixed at build
time; these settings only cover the window, audio and logging.
"""

from functools import lru_cache
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings

from code_invaders.gameplay.languages import available_languages

LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Display
    window_width: int = Field(default=1024, description="Initial window width in pixels")
    window_height: int = Field(default=768, description="Initial window height in pixels")
    fps: int = Field(default=60, description="Frame rate cap for the game loop")

    # Fonts
    font_name: str = Field(default="Consolas", description="System font used for aliens and HUD")
    font_size: int = Field(default=18, description="Alien font size")
    hud_font_size: int = Field(default=20, description="Typed-text and score font size")

    # Audio
    audio_enabled: bool = Field(default=True, description="Play match and miss tones")

    # Session
    language: Optional[str] = Field(
        default=None,
        description="Language to play; skips the selection screen when set"
    )
    seed: Optional[int] = Field(
        default=None,
        description="Seed for the session random source (reproducible games)"
    )

    # Logging
    log_level: str = Field(default="INFO")

    @field_validator("language")
    @classmethod
    def check_language(cls, value: Optional[str]) -> Optional[str]:
        if value is not None and value not in available_languages():
            raise ValueError(f"unknown language '{value}', expected one of {available_languages()}")
        return value

    @field_validator("log_level")
    @classmethod
    def check_log_level(cls, value: str) -> str:
        level = value.upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"unknown log level '{value}', expected one of {list(LOG_LEVELS)}")
        return level

    class Config:
        env_prefix = "CODE_INVADERS_"
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = False


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
