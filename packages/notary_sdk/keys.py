"""ES256 signing strategy and private key loading helper.

Optional: the notarizer only needs some ``SigningStrategy``. This module
supplies the one Apple expects, an ECDSA P-256 key from App Store Connect,
signed through PyJWT.
"""

from __future__ import annotations

import base64
import binascii
import os
from collections.abc import Mapping

import jwt
from cryptography.exceptions import UnsupportedAlgorithm
from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric import ec

from packages.notary_sdk.credential import ALGORITHM, TokenDescriptor
from packages.notary_sdk.errors import ConfigurationError


class Es256Signer:
    """Sign token descriptors as compact ES256 JWS strings."""

    def __init__(self, private_key: ec.EllipticCurvePrivateKey) -> None:
        if not isinstance(private_key.curve, ec.SECP256R1):
            raise ConfigurationError(
                message=f"ES256 requires a P-256 key, got {private_key.curve.name}"
            )
        self._private_key = private_key

    def sign(self, descriptor: TokenDescriptor) -> str:
        return jwt.encode(
            dict(descriptor.claims),
            self._private_key,
            algorithm=ALGORITHM,
            headers=dict(descriptor.header),
        )


def load_private_key_from_pem(pem: bytes) -> ec.EllipticCurvePrivateKey:
    """Parse one unencrypted PEM EC private key."""
    try:
        key = serialization.load_pem_private_key(pem, password=None)
    except (ValueError, TypeError, UnsupportedAlgorithm) as exc:
        raise ConfigurationError(message=f"invalid PEM private key: {exc}") from exc
    if not isinstance(key, ec.EllipticCurvePrivateKey):
        raise ConfigurationError(message="private key is not an EC key")
    return key


def load_private_key_from_env_base64(
    env_key: str, environ: Mapping[str, str] | None = None
) -> ec.EllipticCurvePrivateKey:
    """Load a base64-encoded PEM EC private key from one environment variable."""
    env = os.environ if environ is None else environ
    encoded = env.get(env_key, "").strip()
    if encoded == "":
        raise ConfigurationError(message=f"{env_key} is not set")
    try:
        pem = base64.b64decode(encoded, validate=True)
    except (binascii.Error, ValueError) as exc:
        raise ConfigurationError(message=f"{env_key} is not valid base64") from exc
    return load_private_key_from_pem(pem)
