"""Decoding of character strings in presentation format."""

from __future__ import annotations

from .errors import ZoneSyntaxError

_BACKSLASH = 0x5C
_ZERO = 0x30


def _to_octets(text: str | bytes | bytearray | memoryview) -> bytes:
    """Return the octets of presentation format text."""
    if isinstance(text, str):
        return text.encode("utf-8")
    return bytes(text)


def _unescape_at(data: bytes, pos: int) -> tuple[int, int]:
    """Decode the escape sequence that starts at ``data[pos]``."""
    if pos + 1 >= len(data):
        raise ZoneSyntaxError("Incomplete escape sequence")
    first = data[pos + 1] - _ZERO
    if not 0 <= first <= 9:
        return data[pos + 1], 2
    digits = data[pos + 2:pos + 4]
    if len(digits) != 2 or not all(0x30 <= d <= 0x39 for d in digits):
        raise ZoneSyntaxError("Invalid decimal escape sequence")
    octet = first * 100 + (digits[0] - _ZERO) * 10 + (digits[1] - _ZERO)
    if octet > 255:
        raise ZoneSyntaxError("Decimal escape sequence out of range")
    return octet, 4


def unescape(text: str | bytes) -> tuple[int, int]:
    """Decode the escape sequence at the start of ``text``.

    ``text`` must begin with a backslash. Returns the decoded octet and the
    number of input characters the sequence occupies (2 or 4).
    """
    data = _to_octets(text)
    if not data or data[0] != _BACKSLASH:
        raise ZoneSyntaxError("Escape sequence must start with a backslash")
    return _unescape_at(data, 0)


def scan_string(text: str | bytes, limit: int = 255) -> bytes:
    """Decode a character string, resolving escapes.

    Raises ZoneSyntaxError on a malformed escape or if more than ``limit``
    octets would result.
    """
    data = _to_octets(text)
    out = bytearray()
    pos = 0
    end = len(data)
    while pos < end:
        if len(out) >= limit:
            raise ZoneSyntaxError(f"Character string exceeds {limit} octets")
        if data[pos] == _BACKSLASH:
            octet, consumed = _unescape_at(data, pos)
            out.append(octet)
            pos += consumed
        else:
            out.append(data[pos])
            pos += 1
    return bytes(out)