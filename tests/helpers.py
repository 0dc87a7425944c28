"""Helper functions for pemkeys tests."""

import base64

from cryptography.hazmat.primitives.asymmetric import ed25519
from cryptography.hazmat.primitives.asymmetric.types import PrivateKeyTypes
from cryptography.hazmat.primitives.serialization import Encoding, NoEncryption, PrivateFormat


def private_pem(key: PrivateKeyTypes, private_format: PrivateFormat) -> bytes:
    """Serialize a private key as unencrypted PEM in the given format."""
    return key.private_bytes(Encoding.PEM, private_format, NoEncryption())


def private_der(key: PrivateKeyTypes, private_format: PrivateFormat) -> bytes:
    """Serialize a private key as unencrypted DER in the given format."""
    return key.private_bytes(Encoding.DER, private_format, NoEncryption())


def wrap_pem(label: str, der: bytes, headers: dict[str, str] | None = None) -> bytes:
    """Frame DER bytes in a PEM block with an arbitrary label.

    Args:
    ----
        label: Text placed after ``BEGIN``/``END``
        der: Payload to base64 encode
        headers: Optional RFC 1421 headers

    Returns:
    -------
        PEM encoded bytes

    """
    block = f"-----BEGIN {label}-----\n".encode()
    if headers:
        for key, value in headers.items():
            block += f"{key}: {value}\n".encode()
        block += b"\n"
    block += base64.encodebytes(der)
    block += f"-----END {label}-----\n".encode()
    return block


def key_material(key: object) -> object:
    """Comparable representation of a private key's numeric fields."""
    if isinstance(key, ed25519.Ed25519PrivateKey):
        return key.private_bytes_raw()
    return key.private_numbers()
