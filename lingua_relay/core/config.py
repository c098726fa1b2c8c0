from functools import lru_cache
from typing import Optional

from pydantic import Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict


class AppSettings(BaseSettings):
    """Application configuration loaded from environment or .env."""

    app_name: str = Field(default="Lingua Relay", alias="APP_NAME")
    app_env: str = Field(default="dev", alias="APP_ENV")
    debug: bool = Field(default=False, alias="APP_DEBUG")
    api_host: str = Field(default="127.0.0.1", alias="API_HOST")
    api_port: int = Field(default=8000, alias="API_PORT")
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")
    cors_allow_origin: str = Field(default="*", alias="CORS_ALLOW_ORIGIN")

    openai_api_key: Optional[SecretStr] = Field(default=None, alias="OPENAI_API_KEY")
    openai_base_url: str = Field(
        default="https://api.openai.com/v1", alias="OPENAI_BASE_URL"
    )
    openai_translation_model: str = Field(
        default="gpt-4o-mini", alias="OPENAI_TRANSLATION_MODEL"
    )
    openai_translation_temperature: float = Field(
        default=0.3, alias="OPENAI_TRANSLATION_TEMPERATURE"
    )
    openai_speech_model: str = Field(default="tts-1", alias="OPENAI_SPEECH_MODEL")
    tts_cache_max_age: int = Field(default=3600, alias="TTS_CACHE_MAX_AGE")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        populate_by_name=True,
    )

    @property
    def has_openai_credentials(self) -> bool:
        return bool(self.openai_api_key and self.openai_api_key.get_secret_value())


@lru_cache
def get_settings() -> AppSettings:
    """Return cached application settings."""
    return AppSettings()  # type: ignore[call-arg]
