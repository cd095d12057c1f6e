"""Configuration management using Pydantic Settings"""

from functools import lru_cache
from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """SDK configuration loaded from environment variables (PAYMENT_*)"""

    model_config = SettingsConfigDict(
        env_prefix="PAYMENT_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        frozen=True,
    )

    # Payment service
    base_uri: str = "http://localhost:5012/"
    secret: str = "secret"  # Basic auth username
    password: str = ""  # Basic auth password
    locale: Optional[str] = "en"  # Empty string disables the locale parameter

    # SDK
    service_name: str = "payment-connector"
    log_level: str = "INFO"


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Default settings, built once from the environment"""
    return Settings()
