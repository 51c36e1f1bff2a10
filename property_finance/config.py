from functools import lru_cache
from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Engine settings with environment variable loading."""

    app_name: str = "property-finance"
    app_version: str = "1.0.0"
    debug: bool = False
    log_level: Optional[str] = None

    # Display Configuration
    display_locale: str = "sv-SE"
    display_currency: str = "SEK"

    model_config = SettingsConfigDict(
        env_prefix="PROPERTY_FINANCE_",
        env_file=(".env", ".env.dev"),
        case_sensitive=False,
        extra="ignore",
    )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()


settings = get_settings()
