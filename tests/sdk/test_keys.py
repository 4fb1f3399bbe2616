"""Unit tests for the ES256 signing strategy and key loading helper."""

from __future__ import annotations

import base64

import jwt
import pytest
from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric import ec

from packages.notary_sdk.credential import build_descriptor
from packages.notary_sdk.errors import ConfigurationError
from packages.notary_sdk.keys import Es256Signer, load_private_key_from_env_base64


def _pem(key: ec.EllipticCurvePrivateKey) -> bytes:
    return key.private_bytes(
        encoding=serialization.Encoding.PEM,
        format=serialization.PrivateFormat.PKCS8,
        encryption_algorithm=serialization.NoEncryption(),
    )


def test_es256_signer_produces_verifiable_compact_jws() -> None:
    """The token should verify against the public key with the descriptor's header."""
    key = ec.generate_private_key(ec.SECP256R1())
    descriptor = build_descriptor(
        issuer_id="issuer-1", key_id="KEY123", issued_at=100, expires_at=1300
    )

    token = Es256Signer(key).sign(descriptor)

    assert token.count(".") == 2
    assert jwt.get_unverified_header(token) == {
        "alg": "ES256",
        "kid": "KEY123",
        "typ": "JWT",
    }
    claims = jwt.decode(
        token,
        key.public_key(),
        algorithms=["ES256"],
        audience="appstoreconnect-v1",
        options={"verify_exp": False},
    )
    assert claims == {
        "iss": "issuer-1",
        "iat": 100,
        "exp": 1300,
        "aud": "appstoreconnect-v1",
        "scope": ["/notary/v2"],
    }


def test_es256_signature_fails_against_another_key() -> None:
    """A token signed by one key must not verify under a different key."""
    descriptor = build_descriptor(
        issuer_id="issuer-1", key_id="KEY123", issued_at=100, expires_at=1300
    )
    token = Es256Signer(ec.generate_private_key(ec.SECP256R1())).sign(descriptor)
    other = ec.generate_private_key(ec.SECP256R1())

    with pytest.raises(jwt.InvalidSignatureError):
        jwt.decode(
            token,
            other.public_key(),
            algorithms=["ES256"],
            audience="appstoreconnect-v1",
            options={"verify_exp": False},
        )


def test_es256_signer_rejects_other_curves() -> None:
    """Only P-256 keys are valid for ES256."""
    with pytest.raises(ConfigurationError):
        Es256Signer(ec.generate_private_key(ec.SECP384R1()))


def test_load_private_key_from_env_base64_round_trips_pem() -> None:
    """A base64-wrapped PEM key in the environment should load."""
    key = ec.generate_private_key(ec.SECP256R1())
    environ = {"NOTARY_KEY": base64.b64encode(_pem(key)).decode("ascii")}

    loaded = load_private_key_from_env_base64("NOTARY_KEY", environ)

    assert loaded.private_numbers() == key.private_numbers()


@pytest.mark.parametrize(
    ("environ", "expected"),
    [
        ({}, "NOTARY_KEY is not set"),
        ({"NOTARY_KEY": "%%%not-base64%%%"}, "not valid base64"),
        ({"NOTARY_KEY": base64.b64encode(b"not a pem").decode("ascii")}, "invalid PEM"),
    ],
)
def test_load_private_key_from_env_base64_reports_bad_input(
    environ: dict[str, str], expected: str
) -> None:
    """Unset, non-base64 and non-PEM values should be configuration errors."""
    with pytest.raises(ConfigurationError) as exc_info:
        load_private_key_from_env_base64("NOTARY_KEY", environ)

    assert expected in str(exc_info.value)
