"""
Identifier codec - binary and text forms

Binary form: exactly 16 bytes, big-endian, high half then low half.
Text form: 36 lowercase hex characters in the 8-4-4-4-12 hyphenated layout.

Decoders never raise. Anything that is not a well-formed identifier decodes
to NIL_IDENTIFIER, which callers detect with `identifier.is_nil`.
"""

import re

from message_ids.kernel.logging import get_logger
from message_ids.kernel.metrics import parse_failures_total
from message_ids.uuid.models import NIL_IDENTIFIER, Identifier

logger = get_logger(__name__)

IDENTIFIER_BYTES = 16
_BUFFER_TYPES = (bytes, bytearray, memoryview)

_TEXT_PATTERN = re.compile(
    r"[0-9a-fA-F]{8}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{12}"
)


def to_bytes(identifier: Identifier | None) -> bytes:
    """
    Encode an identifier as 16 big-endian bytes

    Returns b"" for None.
    """
    if identifier is None:
        return b""
    return identifier.high.to_bytes(8, "big") + identifier.low.to_bytes(8, "big")


def from_bytes(data: bytes | bytearray | memoryview | None) -> Identifier:
    """
    Decode 16 big-endian bytes into an identifier

    Returns NIL_IDENTIFIER when data is not a bytes-like buffer or is not
    exactly 16 bytes long.
    """
    raw = bytes(data) if isinstance(data, _BUFFER_TYPES) else None
    if raw is None or len(raw) != IDENTIFIER_BYTES:
        parse_failures_total.labels(format="bytes").inc()
        logger.debug(
            "Rejected identifier bytes",
            data_type=type(data).__name__,
            length=None if raw is None else len(raw),
        )
        return NIL_IDENTIFIER
    return Identifier(
        high=int.from_bytes(raw[:8], "big"),
        low=int.from_bytes(raw[8:], "big"),
    )


def to_text(identifier: Identifier | None) -> str:
    """
    Encode an identifier in canonical hyphenated lowercase hex

    Returns "" for None. The layout is the same for every version tag.
    """
    if identifier is None:
        return ""
    return str(identifier.as_uuid())


def from_text(text: str | None) -> Identifier:
    """
    Parse a hyphenated hex identifier

    Accepts either letter case and ignores surrounding whitespace. Returns
    NIL_IDENTIFIER for None, blank strings, and anything else that is not
    exactly 8-4-4-4-12 hex digits (braces, "urn:uuid:" prefixes and
    unhyphenated forms are rejected).
    """
    if text is None or not isinstance(text, str) or not text.strip():
        parse_failures_total.labels(format="text").inc()
        logger.debug("Rejected identifier text", text_type=type(text).__name__)
        return NIL_IDENTIFIER

    candidate = text.strip()
    if not _TEXT_PATTERN.fullmatch(candidate):
        parse_failures_total.labels(format="text").inc()
        logger.debug("Rejected identifier text", text=candidate[:64])
        return NIL_IDENTIFIER

    return Identifier.from_int(int(candidate.replace("-", ""), 16))
