"""DER decode routines, one per supported private key encoding.

``cryptography``'s DER loader accepts PKCS#1, SEC1 and PKCS#8 alike, so each
routine first checks the payload against the ASN.1 structure of its own
encoding. A PKCS#8 payload under an ``RSA PRIVATE KEY`` label is rejected
instead of being decoded by whichever format happens to fit.
"""

from collections.abc import Callable, Mapping
from types import MappingProxyType

from cryptography.exceptions import UnsupportedAlgorithm
from cryptography.hazmat.primitives.asymmetric import ec, rsa
from cryptography.hazmat.primitives.asymmetric.types import PrivateKeyTypes
from cryptography.hazmat.primitives.serialization import load_der_private_key
from pyasn1.codec.der import decoder
from pyasn1.error import PyAsn1Error
from pyasn1_alt_modules import rfc3447, rfc5915, rfc5958

from pemkeys.result import Failure, Result, Success
from pemkeys.types import Preamble

DecodeRoutine = Callable[[bytes], Result[PrivateKeyTypes, Exception]]

_SCHEMAS = {
    Preamble.RSA_PRIVATE_KEY: rfc3447.RSAPrivateKey,
    Preamble.EC_PRIVATE_KEY: rfc5915.ECPrivateKey,
    # OneAsymmetricKey is PKCS#8 PrivateKeyInfo plus the optional v2 public key
    Preamble.PKCS8_PRIVATE_KEY: rfc5958.OneAsymmetricKey,
}


def decode_pkcs1(der: bytes) -> Result[PrivateKeyTypes, Exception]:
    """Decode a PKCS#1 ``RSAPrivateKey`` structure.

    Args:
    ----
        der: DER bytes taken from an ``RSA PRIVATE KEY`` block

    Returns:
    -------
        Result with an RSA private key or the error that rejected the payload

    """
    return _decode(der, Preamble.RSA_PRIVATE_KEY, rsa.RSAPrivateKey)


def decode_sec1(der: bytes) -> Result[PrivateKeyTypes, Exception]:
    """Decode a SEC1 ``ECPrivateKey`` structure.

    Args:
    ----
        der: DER bytes taken from an ``EC PRIVATE KEY`` block

    Returns:
    -------
        Result with an elliptic curve private key or the error that rejected the payload

    """
    return _decode(der, Preamble.EC_PRIVATE_KEY, ec.EllipticCurvePrivateKey)


def decode_pkcs8(der: bytes) -> Result[PrivateKeyTypes, Exception]:
    """Decode a PKCS#8 private key of any algorithm ``cryptography`` can load.

    The algorithm is not restricted here; the caller decides whether the
    returned key type is supported.

    Args:
    ----
        der: DER bytes taken from a ``PRIVATE KEY`` block

    Returns:
    -------
        Result with the private key or the error that rejected the payload

    """
    return _decode(der, Preamble.PKCS8_PRIVATE_KEY, None)


ROUTINES: Mapping[Preamble, DecodeRoutine] = MappingProxyType(
    {
        Preamble.RSA_PRIVATE_KEY: decode_pkcs1,
        Preamble.EC_PRIVATE_KEY: decode_sec1,
        Preamble.PKCS8_PRIVATE_KEY: decode_pkcs8,
    }
)


def detect_encoding(der: bytes) -> Preamble | None:
    """Return the encoding whose ASN.1 structure ``der`` matches, if any."""
    for preamble in _SCHEMAS:
        if _fits_schema(der, preamble):
            return preamble
    return None


def _decode(der: bytes, preamble: Preamble, expected: type | None) -> Result[PrivateKeyTypes, Exception]:
    try:
        _check_schema(der, preamble)
        key = load_der_private_key(der, password=None)
    except (ValueError, TypeError, OverflowError, UnsupportedAlgorithm) as e:
        return Failure(e)

    if expected is not None and not isinstance(key, expected):
        return Failure(TypeError(f"{preamble.encoding_name} payload decoded to unexpected {type(key).__name__}"))
    return Success(key)


def _parse_schema(der: bytes, preamble: Preamble) -> bytes:
    """Decode ``der`` against the encoding's ASN.1 structure and return what follows it.

    Raises
    ------
        ValueError: The bytes are not a structure of that encoding

    """
    try:
        _, rest = decoder.decode(der, asn1Spec=_SCHEMAS[preamble]())
    # Oversized DER length fields surface as OverflowError rather than PyAsn1Error
    except (PyAsn1Error, OverflowError) as e:
        raise ValueError(str(e)) from e
    return rest


def _check_schema(der: bytes, preamble: Preamble) -> None:
    """Raise ValueError unless ``der`` is exactly one structure of the given encoding."""
    try:
        rest = _parse_schema(der, preamble)
    except ValueError as e:
        raise ValueError(_describe_mismatch(der, preamble, e)) from e.__cause__
    if rest:
        raise ValueError(f"trailing data after {preamble.encoding_name} structure: {len(rest)} bytes")


def _fits_schema(der: bytes, preamble: Preamble) -> bool:
    try:
        rest = _parse_schema(der, preamble)
    except ValueError:
        return False
    return not rest


def _describe_mismatch(der: bytes, preamble: Preamble, error: ValueError) -> str:
    detected = detect_encoding(der)
    if detected is not None and detected != preamble:
        return (
            f"not a {preamble.encoding_name} private key; payload looks like a "
            f"{detected.encoding_name} private key, use the '{detected}' PEM label"
        )
    return f"not a {preamble.encoding_name} private key: {error}"
