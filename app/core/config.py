"""Locale library configuration settings."""

from typing import Any, Optional
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class LocaleSettings(BaseSettings):
    """Locale resolution and string loading settings.

    LOCALE is the host-provided override: when set, it always wins over the
    registry's tracked default locale.
    """

    LOCALE: Optional[str] = Field(default=None, alias="LOCALE")
    DEFAULT_LOCALE: str = Field(default="en", alias="DEFAULT_LOCALE")
    STRINGS_URL: Optional[str] = Field(default=None, alias="LOCALE_STRINGS_URL")
    STRINGS_DIR: Optional[str] = Field(default=None, alias="LOCALE_STRINGS_DIR")
    LOADER_TIMEOUT: int = Field(default=10, alias="LOCALE_LOADER_TIMEOUT")
    DEFAULT_CURRENCY_LOCALE: str = Field(
        default="en_US", alias="DEFAULT_CURRENCY_LOCALE"
    )

    @field_validator("LOCALE", "STRINGS_URL", "STRINGS_DIR", mode="before")
    @classmethod
    def _blank_to_none(cls, v: Optional[Any]) -> Any:
        """Treat empty environment values as unset."""
        if isinstance(v, str) and not v.strip():
            return None
        return v

    @field_validator("DEFAULT_LOCALE", mode="after")
    @classmethod
    def _validate_default_locale(cls, v: str) -> str:
        """Reject an empty default locale."""
        if not v or not v.strip():
            raise ValueError("DEFAULT_LOCALE must not be empty")
        return v.strip()

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="ignore",
        populate_by_name=True,
    )


class Settings(BaseSettings):
    """Locale library configuration settings."""

    PREFIX: str = ""
    LOG_LEVEL: str = "INFO"

    locale: LocaleSettings

    @property
    def is_production(self) -> bool:
        """Check if the application is running in production."""
        return not bool(self.PREFIX)

    def __init__(self, **kwargs):
        if "locale" not in kwargs:
            kwargs["locale"] = LocaleSettings()
        super().__init__(**kwargs)

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="ignore",
    )


settings = Settings()
