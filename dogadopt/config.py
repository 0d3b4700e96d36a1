"""
Configuration management for dogadopt.
Loads settings from environment variables and provides typed configuration access.
"""

from typing import List, Optional
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )

    # Application Settings
    log_level: str = Field(default="INFO", description="Logging level")
    debug: bool = Field(default=False, description="Log at DEBUG regardless of log_level")

    # Supabase / PostgREST
    supabase_url: str = Field(
        default="http://localhost:54321",
        description="Supabase project URL (REST API lives under /rest/v1)"
    )
    supabase_anon_key: str = Field(default="", description="Supabase anonymous (publishable) key")
    api_timeout: int = Field(default=30, description="API request timeout in seconds")

    # Geolocation
    geolocation_enable_high_accuracy: bool = Field(
        default=False,
        description="Ask the host for a high accuracy position fix"
    )
    geolocation_timeout_ms: int = Field(
        default=10000,
        ge=0,
        description="Position request timeout in milliseconds"
    )
    geolocation_maximum_age_ms: int = Field(
        default=300000,
        ge=0,
        description="Maximum age of a cached position in milliseconds (5 minutes)"
    )
    secure_context_exempt_hosts: List[str] = Field(
        default_factory=lambda: ["localhost", "127.0.0.1", "::1"],
        description="Hostnames treated as secure even without HTTPS"
    )

    def effective_log_level(self) -> str:
        """Log level after applying the debug switch."""
        return "DEBUG" if self.debug else self.log_level.upper()


# Global settings instance
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Get or create global settings instance."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def reload_settings() -> Settings:
    """Reload settings from environment (useful for testing)."""
    global _settings
    _settings = Settings()
    return _settings


# Convenience access
settings = get_settings()
