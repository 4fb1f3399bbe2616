"""Construction options for one ``Notarizer``."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from packages.notary_sdk.credential import SigningStrategy
from packages.notary_sdk.errors import ConfigurationError
from packages.notary_shared.config import DEFAULT_API_BASE_URL, NotarySettings

DEFAULT_SUBMISSION_TIMEOUT_SECONDS = 5 * 60.0
DEFAULT_TOKEN_LIFETIME_SECONDS = 20 * 60.0
DEFAULT_POLL_BASE_DELAY_SECONDS = 10.0
DEFAULT_STORAGE_REGION = "us-west-2"
DEFAULT_CONTENT_TYPE = "application/zip"

InfoLogger = Callable[..., None]


def noop_info_logger(message: str, *args: object) -> None:
    """Discard progress messages."""


@dataclass(frozen=True, slots=True)
class NotarizerOptions:
    """Identity, signing strategy and timing for one notarizer.

    ``info_logger`` receives printf-style progress messages (no secrets);
    a ``logging.Logger.info`` bound method fits.
    """

    issuer_id: str
    key_id: str
    signer: SigningStrategy | None
    info_logger: InfoLogger | None = None
    submission_timeout_seconds: float = DEFAULT_SUBMISSION_TIMEOUT_SECONDS
    token_lifetime_seconds: float = DEFAULT_TOKEN_LIFETIME_SECONDS
    poll_base_delay_seconds: float = DEFAULT_POLL_BASE_DELAY_SECONDS
    base_url: str = DEFAULT_API_BASE_URL
    request_timeout_seconds: float = 30.0
    storage_region: str = DEFAULT_STORAGE_REGION
    content_type: str = DEFAULT_CONTENT_TYPE

    def validate(self) -> None:
        """Raise ``ConfigurationError`` for missing or nonsensical options."""
        if self.signer is None:
            raise ConfigurationError(message="signer is required")
        if self.issuer_id.strip() == "":
            raise ConfigurationError(message="issuer_id is required")
        if self.key_id.strip() == "":
            raise ConfigurationError(message="key_id is required")
        for name in (
            "submission_timeout_seconds",
            "token_lifetime_seconds",
            "request_timeout_seconds",
        ):
            if getattr(self, name) <= 0:
                raise ConfigurationError(message=f"{name} must be positive")
        if self.poll_base_delay_seconds < 0:
            raise ConfigurationError(message="poll_base_delay_seconds must not be negative")


def options_from_settings(
    settings: NotarySettings,
    *,
    signer: SigningStrategy | None,
    info_logger: InfoLogger | None = None,
) -> NotarizerOptions:
    """Build notarizer options from resolved runtime settings."""
    return NotarizerOptions(
        issuer_id=settings.api.issuer_id,
        key_id=settings.api.key_id,
        signer=signer,
        info_logger=info_logger,
        submission_timeout_seconds=settings.submission.submission_timeout_seconds,
        token_lifetime_seconds=settings.submission.token_lifetime_seconds,
        poll_base_delay_seconds=settings.submission.poll_base_delay_seconds,
        base_url=settings.api.base_url,
        request_timeout_seconds=settings.api.request_timeout_seconds,
        storage_region=settings.submission.storage_region,
        content_type=settings.submission.content_type,
    )
