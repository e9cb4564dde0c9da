"""Application configuration management."""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # API Configuration
    app_name: str = "SubRip Service"
    app_version: str = "0.1.0"
    app_description: str = "Parse, validate, shift and re-serialize SubRip (.srt) subtitle files"

    # Environment
    environment: str = "development"  # development, staging, production

    # Server Configuration
    host: str = "0.0.0.0"
    port: int = 8000
    allowed_hosts: list[str] = ["*"]

    # Authentication
    api_key: str | None = None

    # CORS Configuration
    cors_enabled: bool = True
    cors_origins: list[str] = ["*"]
    cors_allow_credentials: bool = True
    cors_allow_methods: list[str] = ["*"]
    cors_allow_headers: list[str] = ["*"]

    # Subtitle input
    max_upload_size: int = 10_485_760  # 10MB in bytes
    fallback_encoding: str = "cp1252"  # legacy single-byte Western European

    # Logging
    log_level: str = "INFO"
    log_to_file: bool = False
    log_dir: str = "./logs"
    enable_log_redaction: bool = True  # Redact sensitive data from logs
    log_max_arg_length: int = 200  # Truncate long string args (subtitle payloads)

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", case_sensitive=False, extra="ignore"
    )


@lru_cache
def get_settings() -> Settings:
    """Return the cached settings instance."""
    return Settings()


# Global settings instance
# Pydantic Settings loads from environment variables automatically
settings = get_settings()
