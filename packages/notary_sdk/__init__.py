"""Public notary SDK interface."""

from packages.notary_sdk.config import NotarizerOptions, options_from_settings
from packages.notary_sdk.credential import (
    SignedCredential,
    SigningStrategy,
    TokenDescriptor,
)
from packages.notary_sdk.errors import (
    ArtifactError,
    ConfigurationError,
    DecodeError,
    NotarySdkError,
    SubmissionTimeoutError,
    TransportError,
    UnexpectedStatusError,
    UnexpectedTerminalStatusError,
    UploadError,
)
from packages.notary_sdk.keys import Es256Signer, load_private_key_from_env_base64
from packages.notary_sdk.notarizer import Notarizer
from packages.notary_sdk.polling import PollState
from packages.notary_sdk.storage import ObjectUploader, S3Uploader, StorageCredentials
from packages.notary_sdk.submission import SubmissionResult

__all__ = [
    "ArtifactError",
    "ConfigurationError",
    "DecodeError",
    "Es256Signer",
    "Notarizer",
    "NotarizerOptions",
    "NotarySdkError",
    "ObjectUploader",
    "PollState",
    "S3Uploader",
    "SignedCredential",
    "SigningStrategy",
    "StorageCredentials",
    "SubmissionResult",
    "SubmissionTimeoutError",
    "TokenDescriptor",
    "TransportError",
    "UnexpectedStatusError",
    "UnexpectedTerminalStatusError",
    "UploadError",
    "load_private_key_from_env_base64",
    "options_from_settings",
]
