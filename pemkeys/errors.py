"""Errors reported while decoding a PEM private key.

Each error is returned inside a ``Failure`` by the decode pipeline and carries
the context needed to diagnose the input. None of them is retried or logged by
pemkeys itself.
"""

from pemkeys.types import Preamble


class PrivateKeyDecodeError(Exception):
    """Base class for all private key decode failures."""


class MalformedPEMError(PrivateKeyDecodeError):
    """The input holds no decodable PEM block."""

    def __init__(self, consumed: int, unconsumed: int) -> None:
        super().__init__(f"failed to decode PEM block: decoded bytes {consumed}, undecoded {unconsumed}")
        self.consumed = consumed
        self.unconsumed = unconsumed


class UnrecognizedPreambleError(PrivateKeyDecodeError):
    """The PEM label is not one of the supported private key labels."""

    def __init__(self, label: str) -> None:
        super().__init__(f"unrecognized PEM preamble: {label!r}")
        self.label = label


class KeyDecodeError(PrivateKeyDecodeError):
    """The DER decoder selected by the preamble rejected the payload."""

    def __init__(self, preamble: Preamble, cause: Exception) -> None:
        super().__init__(f"failed to parse private key given PEM preamble '{preamble}': {cause}")
        self.preamble = preamble
        self.cause = cause
        self.__cause__ = cause


class UnsupportedKeyTypeError(PrivateKeyDecodeError):
    """The decoded key is not an RSA, ECDSA or Ed25519 private key."""

    def __init__(self, type_name: str) -> None:
        super().__init__(f"unsupported private key type: {type_name}")
        self.type_name = type_name
