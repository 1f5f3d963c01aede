"""
Model client configuration.
"""
from functools import lru_cache
from pathlib import Path
from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


def find_env_file() -> str:
    """Find .env file - check local dir, then project root."""
    local_env = Path(".env")
    root_env = Path("../.env")

    if local_env.exists():
        return str(local_env)
    elif root_env.exists():
        return str(root_env)
    return ".env"  # default


class Settings(BaseSettings):
    """Service settings from environment variables."""

    # Default model, by AIModelID name (e.g. GPT_4O)
    azure_llm_model: str = ""

    # Credentials per model id:
    # {"gpt-4o": {"url": "https://...", "key": "..."}}
    azure_credentials: dict[str, dict[str, str]] = {}

    # Fallbacks for models missing a url or key above.
    # The template is formatted with model_id.
    azure_endpoint_template: str = ""
    azure_api_key: str = ""

    # Transport
    request_timeout_seconds: float = 120.0

    # Server
    host: str = "0.0.0.0"
    port: int = 11436

    # Logging
    log_level: str = "INFO"
    log_path: str = ""

    model_config = SettingsConfigDict(
        env_file=find_env_file(),
        env_file_encoding="utf-8",
        env_prefix="",
        case_sensitive=False,
        extra="ignore",
    )

    def get_property(self, key: str) -> str:
        """Return a setting as a string by its (case-insensitive) name, or ""."""
        name = key.lower()
        if name not in type(self).model_fields:
            return ""
        value: Optional[object] = getattr(self, name)
        return "" if value is None else str(value)


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
