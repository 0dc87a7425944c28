"""Map PEM labels to the DER encoding they announce."""

import logging
from types import MappingProxyType

from pemkeys.errors import UnrecognizedPreambleError
from pemkeys.result import Failure, Result, Success
from pemkeys.types import Preamble

logger = logging.getLogger(__name__)

# Exact, case sensitive label text; nothing is normalized before lookup.
_PREAMBLES = MappingProxyType({preamble.value: preamble for preamble in Preamble})


def classify_preamble(label: str) -> Result[Preamble, UnrecognizedPreambleError]:
    """Identify the encoding convention of a PEM block from its label.

    Args:
    ----
        label: Text between ``-----BEGIN `` and ``-----`` of the block

    Returns:
    -------
        Result with the matching Preamble or UnrecognizedPreambleError

    """
    preamble = _PREAMBLES.get(label)
    if preamble is None:
        return Failure(UnrecognizedPreambleError(label))

    logger.debug(f"PEM label {label!r} selects {preamble.encoding_name} decoding")
    return Success(preamble)


def supported_labels() -> tuple[str, ...]:
    """Return the accepted PEM labels in declaration order."""
    return tuple(_PREAMBLES)
