"""Classify decoded private keys by algorithm."""

import logging

from cryptography.hazmat.primitives.asymmetric import ec, ed25519, rsa

from pemkeys.errors import UnsupportedKeyTypeError
from pemkeys.result import Failure, Result, Success
from pemkeys.types import Algorithm

logger = logging.getLogger(__name__)

PrivateKey = rsa.RSAPrivateKey | ec.EllipticCurvePrivateKey | ed25519.Ed25519PrivateKey

# Key objects and their "numbers" form describe the same key and classify alike.
_ALGORITHM_SHAPES: tuple[tuple[tuple[type, ...], Algorithm], ...] = (
    ((rsa.RSAPrivateKey, rsa.RSAPrivateNumbers), Algorithm.RSA),
    ((ec.EllipticCurvePrivateKey, ec.EllipticCurvePrivateNumbers), Algorithm.ECDSA),
    ((ed25519.Ed25519PrivateKey,), Algorithm.ED25519),
)


def classify_algorithm(key: object) -> Result[Algorithm, UnsupportedKeyTypeError]:
    """Determine the algorithm of a decoded private key from its type.

    Args:
    ----
        key: A private key as returned by one of the DER decode routines

    Returns:
    -------
        Result with the Algorithm or UnsupportedKeyTypeError naming the key's type

    """
    for shapes, algorithm in _ALGORITHM_SHAPES:
        if isinstance(key, shapes):
            logger.debug(f"Classified {type(key).__name__} as {algorithm}")
            return Success(algorithm)

    key_type = type(key)
    return Failure(UnsupportedKeyTypeError(f"{key_type.__module__}.{key_type.__qualname__}"))
