# verify_api/config.py — Pydantic settings (env vars)

from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # Verify API credentials
    verify_access_key: str | None = None

    # Transport
    verify_base_url: str = "https://rest.messagebird.com"
    verify_timeout_seconds: float = 10.0
    verify_user_agent: str = "verify-api-python/0.1.0"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @field_validator("verify_base_url")
    @classmethod
    def _validate_base_url(cls, value: str) -> str:
        cleaned = value.strip().rstrip("/")
        if not cleaned:
            raise ValueError("VERIFY_BASE_URL must be set and non-empty")
        return cleaned


@lru_cache
def get_settings() -> Settings:
    return Settings()
