"""Public API for notary configuration."""

from .loader import load_settings
from .models import (
    DEFAULT_API_BASE_URL,
    DEFAULT_CONFIG_PATH,
    DEFAULT_PRIVATE_KEY_ENV,
    ApiSettings,
    LoggingSettings,
    NotarySettings,
    SubmissionSettings,
)

__all__ = [
    "DEFAULT_API_BASE_URL",
    "DEFAULT_CONFIG_PATH",
    "DEFAULT_PRIVATE_KEY_ENV",
    "ApiSettings",
    "LoggingSettings",
    "NotarySettings",
    "SubmissionSettings",
    "load_settings",
]
