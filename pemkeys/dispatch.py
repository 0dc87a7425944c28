"""Decode PEM private keys of any supported encoding.

The pipeline runs in a fixed order and stops at the first failure:

1. read the first PEM block of the input (trailing data is ignored),
2. map the block label to a Preamble,
3. run the DER decode routine registered for that Preamble,
4. classify the decoded key by algorithm.

Both classifications are closed sets. A key type that PKCS#8 can carry but
that is not RSA, ECDSA or Ed25519 is reported, never guessed.
"""

import logging
from collections.abc import Iterator
from dataclasses import dataclass

from pemkeys.algorithm import PrivateKey, classify_algorithm
from pemkeys.der import ROUTINES
from pemkeys.errors import KeyDecodeError, PrivateKeyDecodeError
from pemkeys.pem import Envelope, decode_pem
from pemkeys.preamble import classify_preamble
from pemkeys.result import Failure, Result, Success
from pemkeys.types import Algorithm, Preamble

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DecodedPrivateKey:
    """A decoded private key together with how it was identified."""

    key: PrivateKey
    algorithm: Algorithm
    preamble: Preamble

    def __iter__(self) -> Iterator[PrivateKey | Algorithm]:
        """Unpack as the ``(key, algorithm)`` pair."""
        return iter((self.key, self.algorithm))


def decode_private_key(raw: bytes) -> Result[DecodedPrivateKey, PrivateKeyDecodeError]:
    """Decode a PEM encoded private key and classify its algorithm.

    Args:
    ----
        raw: Bytes holding a PKCS#1, SEC1 or PKCS#8 private key in PEM format

    Returns:
    -------
        Result with the decoded key or the error that stopped decoding

    """
    pem_result = decode_pem(raw)
    if isinstance(pem_result, Failure):
        return pem_result
    envelope, rest = pem_result.unwrap()
    if rest:
        logger.debug(f"Ignoring {len(rest)} bytes after the first PEM block")

    preamble_result = classify_preamble(envelope.label)
    if isinstance(preamble_result, Failure):
        return preamble_result
    preamble = preamble_result.unwrap()

    key_result = _decode_envelope(envelope, preamble)
    if isinstance(key_result, Failure):
        return key_result
    key = key_result.unwrap()

    algorithm_result = classify_algorithm(key)
    if isinstance(algorithm_result, Failure):
        return algorithm_result

    return Success(DecodedPrivateKey(key=key, algorithm=algorithm_result.unwrap(), preamble=preamble))


def load_private_key(raw: bytes) -> tuple[PrivateKey, Algorithm]:
    """Decode a PEM encoded private key, raising on failure.

    Args:
    ----
        raw: Bytes holding a PKCS#1, SEC1 or PKCS#8 private key in PEM format

    Returns:
    -------
        The private key and its algorithm

    Raises:
    ------
        PrivateKeyDecodeError: The subclass describing why decoding failed

    """
    decoded = decode_private_key(raw).unwrap()
    return decoded.key, decoded.algorithm


def _decode_envelope(envelope: Envelope, preamble: Preamble) -> Result[PrivateKey, KeyDecodeError]:
    routine = ROUTINES.get(preamble)
    # Preamble and the routine registry cover the same closed set
    assert routine is not None, f"no decode routine registered for PEM preamble {preamble!r}"

    if envelope.is_encrypted:
        return Failure(KeyDecodeError(preamble, ValueError("encrypted PEM blocks are not supported")))

    result = routine(envelope.payload)
    if isinstance(result, Failure):
        return Failure(KeyDecodeError(preamble, result.error))
    return result
