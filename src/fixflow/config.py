"""
Runtime settings, read from FIXFLOW_* environment variables and .env.
"""

from functools import lru_cache
from pathlib import Path

from pydantic import Field, ValidationError, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from fixflow.errors import ConfigError

DEFAULT_BASE_URL = "http://localhost:3000"
DEFAULT_LANGUAGES = {"en": "English", "sv": "Swedish", "fi": "Finnish"}


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="FIXFLOW_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    base_url: str = DEFAULT_BASE_URL
    http_timeout: float = Field(default=30.0, gt=0)

    toast_limit: int = Field(default=1, ge=1)
    # seconds between dismissal and removal
    toast_remove_delay: float = Field(default=1000.0, ge=0)

    default_language: str = "en"
    languages: dict[str, str] = Field(default_factory=lambda: dict(DEFAULT_LANGUAGES))
    translation_cache_size: int = Field(default=1024, ge=1)

    trial_ending_soon_days: int = Field(default=3, ge=0)

    state_dir: Path = Path.home() / ".fixflow"

    @field_validator("base_url")
    @classmethod
    def _strip_slash(cls, v: str) -> str:
        return v.rstrip("/")

    @model_validator(mode="after")
    def _default_language_supported(self) -> "Settings":
        if self.default_language not in self.languages:
            raise ValueError(f"default_language {self.default_language!r} not in languages")
        return self


def load_settings(**overrides) -> Settings:
    try:
        return Settings(**overrides)
    except ValidationError as e:
        raise ConfigError(f"Invalid FixFlow settings: {e}") from e


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return load_settings()
