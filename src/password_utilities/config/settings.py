"""Runtime settings loaded from environment variables."""

from functools import lru_cache
from typing import Annotated

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from password_utilities.domain.character_pools import (
    DEFAULT_SPECIAL_CHARACTERS,
    MAX_PASSWORD_LENGTH,
    MIN_PASSWORD_LENGTH,
)

PasswordLength = Annotated[int, Field(ge=MIN_PASSWORD_LENGTH, le=MAX_PASSWORD_LENGTH)]


class Settings(BaseSettings):
    """Environment-driven application settings."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    password_default_length: PasswordLength = Field(
        default=MIN_PASSWORD_LENGTH,
        validation_alias="PASSWORD_DEFAULT_LENGTH",
    )
    password_special_characters: str = Field(
        default=DEFAULT_SPECIAL_CHARACTERS,
        validation_alias="PASSWORD_SPECIAL_CHARACTERS",
    )
    log_level: str = Field(default="INFO", validation_alias="LOG_LEVEL")


@lru_cache(maxsize=1)
def load_settings() -> Settings:
    """Load and cache application settings."""

    return Settings()
