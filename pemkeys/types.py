"""Type definitions for pemkeys."""

from enum import StrEnum


class Preamble(StrEnum):
    """Supported PEM labels, each naming one DER encoding convention."""

    RSA_PRIVATE_KEY = "RSA PRIVATE KEY"
    EC_PRIVATE_KEY = "EC PRIVATE KEY"
    PKCS8_PRIVATE_KEY = "PRIVATE KEY"

    @property
    def encoding_name(self) -> str:
        """Human readable name of the DER encoding behind the label."""
        return _ENCODING_NAMES[self]


class Algorithm(StrEnum):
    """Supported private key algorithms."""

    RSA = "RSA"
    ECDSA = "ECDSA"
    ED25519 = "ED25519"


_ENCODING_NAMES = {
    Preamble.RSA_PRIVATE_KEY: "PKCS#1",
    Preamble.EC_PRIVATE_KEY: "SEC1",
    Preamble.PKCS8_PRIVATE_KEY: "PKCS#8",
}
