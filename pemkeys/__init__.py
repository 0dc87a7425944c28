"""pemkeys - decode PEM private keys of any common encoding and classify their algorithm."""

from pemkeys.algorithm import PrivateKey, classify_algorithm
from pemkeys.dispatch import DecodedPrivateKey, decode_private_key, load_private_key
from pemkeys.errors import (
    KeyDecodeError,
    MalformedPEMError,
    PrivateKeyDecodeError,
    UnrecognizedPreambleError,
    UnsupportedKeyTypeError,
)
from pemkeys.pem import Envelope, decode_pem
from pemkeys.preamble import classify_preamble, supported_labels
from pemkeys.types import Algorithm, Preamble

__version__ = "0.1.0"

__all__ = [
    "Algorithm",
    "DecodedPrivateKey",
    "Envelope",
    "KeyDecodeError",
    "MalformedPEMError",
    "Preamble",
    "PrivateKey",
    "PrivateKeyDecodeError",
    "UnrecognizedPreambleError",
    "UnsupportedKeyTypeError",
    "classify_algorithm",
    "classify_preamble",
    "decode_pem",
    "decode_private_key",
    "load_private_key",
    "supported_labels",
]
