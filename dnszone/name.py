"""Conversion of domain names from presentation to wire format."""

from __future__ import annotations

from .constants import NAME_SIZE
from .errors import ZoneSyntaxError
from .text import _to_octets, _unescape_at

_BACKSLASH = 0x5C
_DOT = 0x2E
_MAX_LABEL = 63


def scan_name(text: str | bytes) -> tuple[bytes, bool]:
    """Convert a domain name to wire format.

    Returns the wire octets and whether the name is relative. A relative
    name lacks the terminating root label and still needs an origin.
    Raises ZoneSyntaxError for empty or oversized labels, bad escapes and
    names longer than the wire format allows.
    """
    data = _to_octets(text)
    if data[:1] == b".":
        if len(data) == 1:
            return b"\x00", False
        raise ZoneSyntaxError("Empty label in domain name")

    out = bytearray(b"\x00")
    label = 0
    pos = 0
    end = len(data)
    while pos < end and len(out) < NAME_SIZE:
        char = data[pos]
        if char == _BACKSLASH:
            octet, consumed = _unescape_at(data, pos)
            out.append(octet)
            pos += consumed
        elif char == _DOT:
            size = len(out) - 1 - label
            if size == 0:
                raise ZoneSyntaxError("Empty label in domain name")
            if size > _MAX_LABEL:
                raise ZoneSyntaxError("Label in domain name exceeds 63 octets")
            out[label] = size
            label = len(out)
            out.append(0)
            pos += 1
        else:
            out.append(char)
            pos += 1

    size = len(out) - 1 - label
    if size > _MAX_LABEL:
        raise ZoneSyntaxError("Label in domain name exceeds 63 octets")
    out[label] = size
    if pos != end:
        raise ZoneSyntaxError("Domain name exceeds 255 octets")
    return bytes(out), size != 0