"""Configuration management for the TripSage content service."""

from functools import lru_cache
from typing import Optional

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Database (usage ledger)
    database_url: str = "sqlite:///./tripsage.db"

    # Gemini
    # Left unset, every generation request is served from fallback templates
    gemini_api_key: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices("gemini_api_key", "google_ai_api_key"),
    )
    gemini_model: str = "gemini-1.5-flash"
    gemini_base_url: str = "https://generativelanguage.googleapis.com/v1beta"
    gemini_timeout_seconds: float = 60.0
    monthly_spend_cap_usd: float = 10.0

    # Reject generated objects missing top-level keys of the expected shape
    strict_shape_validation: bool = True

    # Admin credentials (admin endpoints disabled when no password is set)
    admin_username: str = "admin"
    admin_password: Optional[str] = None

    # Server
    host: str = "0.0.0.0"
    port: int = 8000
    debug: bool = False
    log_level: str = "INFO"

    class Config:
        env_file = ".env"
        case_sensitive = False
        extra = "ignore"


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
