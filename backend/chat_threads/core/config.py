"""
Application configuration using pydantic-settings.

WHAT: Centralized config from environment variables
WHY: Type-safe, validated config with sensible defaults
HOW: Pydantic BaseSettings reads from .env and environment
"""

from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import field_validator
from typing import Literal, Optional
from pathlib import Path
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError


class Settings(BaseSettings):
    """Application settings loaded from environment."""
    
    model_config = SettingsConfigDict(
        # Look for .env in project root first, then backend/.env
        env_file=[
            str(Path(__file__).parent.parent.parent.parent / ".env"),
            str(Path(__file__).parent.parent.parent / ".env"),
        ],
        env_file_encoding="utf-8",
        env_prefix="CHAT_THREADS_",
        case_sensitive=True,
        extra="ignore",
    )
    
    # App metadata
    APP_NAME: str = "Chat Threads"
    APP_VERSION: str = "0.1.0"
    
    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_FILE: Optional[str] = None  # Console only unless set
    
    # Rendering
    DISPLAY_TIMEZONE: Optional[str] = None  # IANA name, None = host local time
    
    # Filtering
    DEFAULT_SORT_ORDER: Literal["asc", "desc"] = "asc"
    
    @field_validator("DISPLAY_TIMEZONE", mode="before")
    @classmethod
    def validate_display_timezone(cls, v):
        """Reject unknown zone names early; blank means local time."""
        if v is None or (isinstance(v, str) and not v.strip()):
            return None
        try:
            ZoneInfo(v)
        except (ZoneInfoNotFoundError, ValueError) as e:
            raise ValueError(f"Unknown timezone: {v}") from e
        return v
    
    def get_display_tz(self) -> Optional[ZoneInfo]:
        """Get the configured display timezone, or None for local time."""
        if self.DISPLAY_TIMEZONE is None:
            return None
        return ZoneInfo(self.DISPLAY_TIMEZONE)


# Singleton instance
settings = Settings()
