"""Data models for reporting decoded keys."""

from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives.asymmetric import ec, ed25519
from cryptography.hazmat.primitives.serialization import Encoding, PublicFormat
from pydantic import BaseModel, Field

from pemkeys.defaults import FINGERPRINT_PREFIX
from pemkeys.dispatch import DecodedPrivateKey
from pemkeys.types import Algorithm, Preamble

ED25519_KEY_SIZE = 256


class KeySummary(BaseModel):
    """Display oriented description of a decoded private key."""

    source: str | None = None
    encoding: Preamble
    algorithm: Algorithm
    key_size: int = Field(gt=0)
    curve: str | None = None
    fingerprint: str

    @property
    def encoding_name(self) -> str:
        """Name of the DER encoding, e.g. ``PKCS#8``."""
        return self.encoding.encoding_name


def summarize(decoded: DecodedPrivateKey, source: str | None = None) -> KeySummary:
    """Build a KeySummary for a decoded private key.

    Args:
    ----
        decoded: Result of a successful decode
        source: Optional name of where the key came from, e.g. a file path

    Returns:
    -------
        KeySummary with size, curve and public key fingerprint

    """
    key = decoded.key
    if isinstance(key, ed25519.Ed25519PrivateKey):
        key_size = ED25519_KEY_SIZE
    else:
        key_size = key.key_size
    curve = key.curve.name if isinstance(key, ec.EllipticCurvePrivateKey) else None

    return KeySummary(
        source=source,
        encoding=decoded.preamble,
        algorithm=decoded.algorithm,
        key_size=key_size,
        curve=curve,
        fingerprint=public_key_fingerprint(decoded),
    )


def public_key_fingerprint(decoded: DecodedPrivateKey) -> str:
    """SHA-256 fingerprint of the DER SubjectPublicKeyInfo of the key's public half."""
    spki = decoded.key.public_key().public_bytes(Encoding.DER, PublicFormat.SubjectPublicKeyInfo)
    digest = hashes.Hash(hashes.SHA256())
    digest.update(spki)
    return FINGERPRINT_PREFIX + digest.finalize().hex()
