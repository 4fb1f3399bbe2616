"""Typed configuration models for notary runtime settings."""

from __future__ import annotations

from pathlib import Path
from typing import ClassVar, Literal

from pydantic import BaseModel, Field
from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
    YamlConfigSettingsSource,
)

DEFAULT_CONFIG_PATH = Path.home() / ".config" / "notary" / "notary.yaml"
DEFAULT_API_BASE_URL = "https://appstoreconnect.apple.com/notary/v2"
DEFAULT_PRIVATE_KEY_ENV = "NOTARY_PRIVATE_KEY_BASE64"


class LoggingSettings(BaseModel):
    """Stdout logging configuration."""

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    json_output: bool = False
    service: str = "notary"
    environment: str = "dev"


class ApiSettings(BaseModel):
    """Remote notary service identity and endpoint."""

    base_url: str = DEFAULT_API_BASE_URL
    # Issuer ID from the App Store Connect API Keys page.
    issuer_id: str = ""
    # Private key ID from App Store Connect.
    key_id: str = ""
    private_key_env: str = DEFAULT_PRIVATE_KEY_ENV
    request_timeout_seconds: float = Field(default=30.0, gt=0)


class SubmissionSettings(BaseModel):
    """Submission, upload and polling knobs."""

    submission_timeout_seconds: float = Field(default=300.0, gt=0)
    token_lifetime_seconds: float = Field(default=1200.0, gt=0)
    poll_base_delay_seconds: float = Field(default=10.0, ge=0)
    storage_region: str = "us-west-2"
    content_type: str = "application/zip"


class NotarySettings(BaseSettings):
    """Root runtime settings resolved from init/env/yaml/defaults sources."""

    model_config = SettingsConfigDict(
        env_prefix="NOTARY_",
        env_nested_delimiter="__",
        extra="ignore",
        nested_model_default_partial_update=True,
    )

    logging: LoggingSettings = Field(default_factory=LoggingSettings)
    api: ApiSettings = Field(default_factory=ApiSettings)
    submission: SubmissionSettings = Field(default_factory=SubmissionSettings)

    _config_path: ClassVar[Path] = DEFAULT_CONFIG_PATH

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Apply precedence: init > env > yaml > defaults."""
        return (
            init_settings,
            env_settings,
            YamlConfigSettingsSource(
                settings_cls,
                yaml_file=cls._config_path,
                yaml_file_encoding="utf-8",
            ),
        )
