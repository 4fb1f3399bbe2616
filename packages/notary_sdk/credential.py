"""Bearer credential construction for the notary API.

The credential is a JWT whose signature is produced by an injected
``SigningStrategy``; key material never reaches this module.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from typing import Any, Protocol

from packages.notary_sdk.errors import ConfigurationError

AUDIENCE = "appstoreconnect-v1"
SCOPE: tuple[str, ...] = ("/notary/v2",)
ALGORITHM = "ES256"


@dataclass(frozen=True, slots=True)
class TokenDescriptor:
    """Unsigned token header and claims handed to a signing strategy."""

    header: Mapping[str, Any]
    claims: Mapping[str, Any]


class SigningStrategy(Protocol):
    """Turns one token descriptor into a compact signed token string."""

    def sign(self, descriptor: TokenDescriptor) -> str: ...


@dataclass(frozen=True, slots=True)
class SignedCredential:
    """Immutable bearer credential reused for every request of one notarizer."""

    token: str = field(repr=False)
    issuer_id: str
    key_id: str
    issued_at: int
    expires_at: int
    audience: str = AUDIENCE
    scope: tuple[str, ...] = SCOPE

    def is_expired(self, now: float) -> bool:
        """Return True once ``now`` (epoch seconds) reaches the expiry claim."""
        return now >= self.expires_at


def build_descriptor(
    *, issuer_id: str, key_id: str, issued_at: int, expires_at: int
) -> TokenDescriptor:
    """Build the header and claims for one notary API token."""
    return TokenDescriptor(
        header={"alg": ALGORITHM, "kid": key_id, "typ": "JWT"},
        claims={
            "iss": issuer_id,
            "iat": issued_at,
            "exp": expires_at,
            "aud": AUDIENCE,
            "scope": list(SCOPE),
        },
    )


def create_signed_credential(
    *,
    issuer_id: str,
    key_id: str,
    signer: SigningStrategy | None,
    lifetime_seconds: float,
    clock: Callable[[], float],
) -> SignedCredential:
    """Sign one credential valid for ``lifetime_seconds`` from ``clock()``."""
    if signer is None:
        raise ConfigurationError(message="a signing strategy is required")

    issued_at = int(clock())
    expires_at = issued_at + int(lifetime_seconds)
    descriptor = build_descriptor(
        issuer_id=issuer_id,
        key_id=key_id,
        issued_at=issued_at,
        expires_at=expires_at,
    )
    try:
        token = signer.sign(descriptor)
    except Exception as exc:
        raise ConfigurationError(message=f"failed to sign API token: {exc}") from exc

    if not isinstance(token, str) or token == "":
        raise ConfigurationError(message="signing strategy returned an empty token")

    return SignedCredential(
        token=token,
        issuer_id=issuer_id,
        key_id=key_id,
        issued_at=issued_at,
        expires_at=expires_at,
    )
