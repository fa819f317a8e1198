"""Configuration Management."""

import os
from functools import lru_cache
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()


def _api_key_from_env() -> str:
    return os.getenv("GEMINI_API_KEY") or os.getenv("API_KEY") or ""


class Settings(BaseSettings):
    """Application settings from environment."""

    model_config = SettingsConfigDict(
        env_prefix="ZEPP_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",  # Ignore extra environment variables
    )

    # Server
    host: str = Field(default="127.0.0.1", description="HTTP bind address")
    port: int = Field(default=8000, gt=0, lt=65536, description="HTTP port")

    # Model
    gemini_api_key: str = Field(default_factory=_api_key_from_env, description="Gemini API key")
    gemini_model: str = Field(default="gemini-2.0-flash", description="Gemini model name")
    gemini_temperature: float = Field(default=0.4, ge=0.0, le=2.0, description="Model temperature")
    gemini_max_tokens: int = Field(default=4096, gt=0, description="Max output tokens")

    # Logging
    log_level: str = Field(default="INFO", description="Log level")
    json_logs: bool = Field(default=False, description="Use JSON log format")

    # Validation
    max_prompt_length: int = Field(default=2_000, gt=0, description="Max layout prompt length")

    # Export
    archive_name: str = Field(default="zepp-ai-project.zip", description="Download file name")


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
