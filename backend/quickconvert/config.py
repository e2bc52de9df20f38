from __future__ import annotations

from functools import lru_cache

from pydantic import AliasChoices, Field, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict


class ConfigurationError(RuntimeError):
    """Raised when required settings are missing or invalid."""


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="QUICKCONVERT_", case_sensitive=False)

    app_name: str = "Quick Convert"
    debug: bool = False
    # The launcher workflow exports this as a plain ``decimal_places`` variable.
    decimal_places: int = Field(
        ge=0,
        validation_alias=AliasChoices("decimal_places", "QUICKCONVERT_DECIMAL_PLACES"),
    )
    host: str = "127.0.0.1"
    port: int = 0  # 0 = pick a free port


def load_settings(**overrides) -> Settings:
    """Build settings from the environment, failing with ConfigurationError."""
    try:
        return Settings(**overrides)
    except ValidationError as e:
        fields = ", ".join(".".join(str(p) for p in err["loc"]) or "settings" for err in e.errors())
        raise ConfigurationError(f"Invalid or missing configuration: {fields}") from e


@lru_cache
def get_settings() -> Settings:
    return load_settings()
