"""Configuration management using pydantic-settings"""

from functools import lru_cache
from typing import List

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings"""

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", case_sensitive=False, extra="ignore"
    )

    # Application
    app_name: str = Field(default="MissionPrayerMap")
    app_env: str = Field(default="development")
    debug: bool = Field(default=True)
    log_level: str = Field(default="INFO")

    # Server
    host: str = Field(default="0.0.0.0")
    port: int = Field(default=8000)

    # Upstream spreadsheet / Drive endpoint
    apps_script_exec_url: str = Field(default="", description="Upstream exec URL (required)")
    upstream_timeout_seconds: float = Field(default=30.0)

    # Prayer topic documents
    prayer_documents_dir: str = Field(default="")
    prayer_file_prefix: str = Field(default="선교사를_위한_기도문")

    # Cache
    missionaries_cache_ttl_seconds: int = Field(default=300)
    images_cache_ttl_seconds: int = Field(default=120)
    prayer_list_cache_ttl_seconds: int = Field(default=120)

    # Fuzzy Matching
    fuzzy_match_threshold: int = Field(default=85)

    # CORS
    cors_origins: List[str] = Field(
        default=["http://localhost:3000", "http://localhost:8000"]
    )


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance"""
    return Settings()
