# core/config.py

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import Optional, List


class Settings(BaseSettings):
    """Application settings with environment variable support"""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application settings
    app_name: str = "MediBridge Medical Translator"
    app_version: str = "1.0.0"
    debug: bool = False
    environment: str = "development"  # development, staging, production

    # Server settings
    host: str = "0.0.0.0"
    port: int = 8000
    reload: bool = False

    # CORS settings
    cors_origins: List[str] = ["http://localhost:3000"]
    cors_allow_credentials: bool = True
    cors_allow_methods: List[str] = ["*"]
    cors_allow_headers: List[str] = ["*"]

    # Translation pipeline
    source_language: str = "en"
    provider_timeout_ms: int = 5000
    glossary_path: Optional[str] = None

    # Providers, in fallback order. A blank URL disables the provider.
    libretranslate_url: str = "https://libretranslate.de/translate"
    libretranslate_api_key: Optional[str] = None
    libretranslate_mirror_url: str = "https://translate.argosopentech.com/translate"
    mymemory_url: str = "https://api.mymemory.translated.net/get"
    mymemory_email: Optional[str] = None

    # Hosted model provider, only enabled when a token is present
    huggingface_api_token: Optional[str] = None
    hosted_model_url_template: str = (
        "https://api-inference.huggingface.co/models/Helsinki-NLP/opus-mt-{source}-{target}"
    )

    # Logging settings
    log_level: str = "INFO"
    log_format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    log_file: Optional[str] = None

    @field_validator("environment")
    @classmethod
    def validate_environment(cls, v):
        """Validate environment setting"""
        allowed_envs = ["development", "staging", "production"]
        if v not in allowed_envs:
            raise ValueError(f"Environment must be one of: {allowed_envs}")
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v):
        """Validate logging level name"""
        allowed_levels = ["CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"]
        v = v.strip().upper()
        if v not in allowed_levels:
            raise ValueError(f"Log level must be one of: {allowed_levels}")
        return v

    @field_validator("provider_timeout_ms")
    @classmethod
    def validate_timeout(cls, v):
        if v <= 0:
            raise ValueError("provider_timeout_ms must be positive")
        return v

    @field_validator("source_language")
    @classmethod
    def validate_source_language(cls, v):
        v = v.strip().lower()
        if not v:
            raise ValueError("source_language cannot be empty")
        return v

    @field_validator("cors_origins", mode="before")
    @classmethod
    def validate_cors_origins(cls, v):
        """Ensure CORS origins are properly formatted"""
        if isinstance(v, str):
            return [v]
        return v


# Global settings instance
settings = Settings()


def get_settings() -> Settings:
    """Get the application settings."""
    return settings
