"""Parsing of address prefix list items (APL records)."""

from __future__ import annotations

import ipaddress

from .errors import ZoneSyntaxError
from .text import _to_octets

# family -> (address class, maximum prefix, maximum prefix digits, address length)
_FAMILIES = {
    "1": (ipaddress.IPv4Address, 32, 2, 4),
    "2": (ipaddress.IPv6Address, 128, 3, 16),
}


def scan_apl(text: str | bytes) -> bytes:
    """Convert an item such as ``!1:192.168.32.0/21`` to wire format.

    The result holds the address family, prefix length, negation flag with
    address length, and the full address.
    """
    try:
        item = _to_octets(text).decode("ascii")
    except UnicodeDecodeError:
        raise ZoneSyntaxError("Invalid APL item") from None

    negate = item.startswith("!")
    body = item[1:] if negate else item
    if len(body) < 2 or body[1] != ":":
        raise ZoneSyntaxError("Address family must be followed by a colon")
    try:
        address_class, max_prefix, max_digits, size = _FAMILIES[body[0]]
    except KeyError:
        raise ZoneSyntaxError(f"Unknown address family {body[0]!r}") from None

    address, slash, prefix = body[2:].partition("/")
    if not slash or not 1 <= len(prefix) <= max_digits or not prefix.isdigit():
        raise ZoneSyntaxError("Invalid prefix in APL item")
    length = int(prefix)
    if length > max_prefix:
        raise ZoneSyntaxError(f"Prefix exceeds {max_prefix}")
    if "%" in address:
        raise ZoneSyntaxError("Invalid address in APL item")
    try:
        packed = address_class(address).packed
    except ValueError:
        raise ZoneSyntaxError("Invalid address in APL item") from None

    family = int(body[0])
    return (
        family.to_bytes(2, "big")
        + bytes([length, (int(negate) << 7) | size])
        + packed
    )