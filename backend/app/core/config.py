from functools import lru_cache
from typing import Annotated

from pydantic import AliasChoices, Field, field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict

PRODUCTION_ENVIRONMENTS = {"production", "prod"}


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        extra="forbid",
        validate_by_name=True,
        populate_by_name=True,
    )
    environment: str = Field(
        default="development",
        validation_alias=AliasChoices("ENVIRONMENT", "APP_ENV"),
    )

    docs_enabled: bool = Field(default=True)
    openapi_enabled: bool = Field(default=True)
    expose_error_details: bool = Field(
        default=False,
        validation_alias=AliasChoices("EXPOSE_ERROR_DETAILS"),
    )

    security_headers_enabled: bool = Field(
        default=True,
        validation_alias=AliasChoices("SECURITY_HEADERS_ENABLED", "SECURE_HEADERS_ENABLED"),
    )

    enable_sentiment_api: bool = Field(
        default=True,
        validation_alias=AliasChoices("ENABLE_SENTIMENT_API", "ENABLE_JOURNAL_SENTIMENT"),
    )
    enable_mood_recommendation: bool = True

    cors_allow_origins: Annotated[list[str], NoDecode] = Field(default_factory=list)
    cors_allow_methods: Annotated[list[str], NoDecode] = Field(default_factory=lambda: [
        "GET",
        "POST",
        "OPTIONS",
    ])
    cors_allow_headers: Annotated[list[str], NoDecode] = Field(default_factory=lambda: [
        "Authorization",
        "Content-Type",
        "Accept",
    ])

    @field_validator(
        "cors_allow_origins",
        "cors_allow_methods",
        "cors_allow_headers",
        mode="before",
    )
    @classmethod
    def _split_csv(cls, value):
        if value is None:
            return []
        if isinstance(value, str):
            if value.strip() == "":
                return []
            return [item.strip() for item in value.split(",") if item.strip()]
        return value

    @property
    def is_production(self) -> bool:
        return self.environment.strip().lower() in PRODUCTION_ENVIRONMENTS

    def validate_required_config(self) -> list[str]:
        """Return human-readable problems that must not ship to production."""
        errors: list[str] = []
        if self.expose_error_details:
            errors.append("EXPOSE_ERROR_DETAILS must be false")
        if self.docs_enabled:
            errors.append("DOCS_ENABLED must be false")
        if self.openapi_enabled:
            errors.append("OPENAPI_ENABLED must be false")
        if "*" in self.cors_allow_origins:
            errors.append("CORS_ALLOW_ORIGINS must not contain '*'")
        return errors


@lru_cache
def get_settings() -> Settings:
    return Settings()
