"""PEM envelope reader.

Finds the first RFC 1421 block in a byte buffer and returns its label, its
headers and its base64-decoded payload. Text before the first ``-----BEGIN``
line is skipped. Anything after the first valid block is returned untouched as
the remainder; callers that only want one key ignore it, so trailing data never
makes an otherwise valid input fail.
"""

import base64
import binascii
from dataclasses import dataclass, field

from pemkeys.defaults import PEM_BEGIN, PEM_END, PEM_MARKER_TAIL, PROC_TYPE_ENCRYPTED, PROC_TYPE_HEADER
from pemkeys.errors import MalformedPEMError
from pemkeys.result import Failure, Result, Success


@dataclass(frozen=True)
class Envelope:
    """A decoded PEM block."""

    label: str
    payload: bytes
    headers: dict[str, str] = field(default_factory=dict)

    @property
    def is_encrypted(self) -> bool:
        """Whether the RFC 1421 headers announce an encrypted payload."""
        return self.headers.get(PROC_TYPE_HEADER, "").replace(" ", "") == PROC_TYPE_ENCRYPTED


def decode_pem(data: bytes) -> Result[tuple[Envelope, bytes], MalformedPEMError]:
    """Decode the first PEM block found in ``data``.

    Args:
    ----
        data: Raw bytes that should contain at least one PEM block

    Returns:
    -------
        Result with the envelope and the bytes following it, or MalformedPEMError
        when no valid block exists anywhere in the input

    """
    rest = data
    while True:
        start = _find_begin(rest)
        if start < 0:
            return Failure(MalformedPEMError(consumed=0, unconsumed=len(data)))

        type_line, rest = _get_line(rest[start + len(PEM_BEGIN) :])
        if not type_line.endswith(PEM_MARKER_TAIL):
            continue
        label = type_line[: -len(PEM_MARKER_TAIL)]

        block = _read_block(label, rest)
        if block is not None:
            return Success(block)


def _find_begin(data: bytes) -> int:
    """Offset of the next BEGIN marker that starts a line, or -1."""
    if data.startswith(PEM_BEGIN):
        return 0
    index = data.find(b"\n" + PEM_BEGIN)
    return index + 1 if index >= 0 else -1


def _get_line(data: bytes) -> tuple[bytes, bytes]:
    """Split off the first line, dropping its terminator and trailing blanks."""
    index = data.find(b"\n")
    if index < 0:
        line, rest = data, b""
    else:
        line, rest = data[:index], data[index + 1 :]
    return line.rstrip(b" \t\r"), rest


def _read_block(label: bytes, data: bytes) -> tuple[Envelope, bytes] | None:
    """Parse headers, body and END line following a BEGIN line."""
    headers: dict[str, str] = {}
    rest = data
    while True:
        line, after = _get_line(rest)
        if not line:
            break
        key, sep, value = line.partition(b":")
        if not sep:
            break
        headers[_text(key.strip())] = _text(value.strip())
        rest = after

    # Without headers the END line may directly follow the BEGIN line
    if not headers and rest.startswith(PEM_END):
        end_index = 0
        trailer_index = len(PEM_END)
    else:
        end_index = rest.find(b"\n" + PEM_END)
        if end_index < 0:
            return None
        trailer_index = end_index + 1 + len(PEM_END)

    trailer = rest[trailer_index:]
    if not trailer.startswith(label + PEM_MARKER_TAIL):
        return None
    end_line, remainder = _get_line(trailer[len(label) + len(PEM_MARKER_TAIL) :])
    if end_line:
        return None

    body = bytes(b for b in rest[:end_index] if b not in b" \t\r\n")
    try:
        payload = base64.b64decode(body, validate=True)
    except binascii.Error:
        return None

    envelope = Envelope(label=_text(label), payload=payload, headers=headers)
    return envelope, remainder


def _text(data: bytes) -> str:
    """Decode label or header bytes losslessly."""
    return data.decode("utf-8", "surrogateescape")
