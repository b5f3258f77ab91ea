from functools import lru_cache
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from .models import DEFAULT_MAX_FRIENDS, DEFAULT_MAX_NAME


class Settings(BaseSettings):
    # Limits
    MAX_NAME: int = Field(default=DEFAULT_MAX_NAME, ge=1)
    MAX_FRIENDS: int = Field(default=DEFAULT_MAX_FRIENDS, ge=1)

    # Presentation
    # None keeps the ctime layout, e.g. "Fri Mar  1 12:00:00 2024".
    DATE_FORMAT: Optional[str] = None

    # Logging
    LOG_LEVEL: str = "WARNING"

    model_config = SettingsConfigDict(env_prefix="FRIENDNET_", env_file=".env", extra="ignore")


@lru_cache()
def get_settings() -> Settings:
    return Settings()
