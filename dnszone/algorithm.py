"""Parsing of DNSSEC algorithm fields given as mnemonic or number."""

from __future__ import annotations

from .errors import ZoneSyntaxError
from .text import _to_octets

_MASK64 = (1 << 64) - 1
_MAGIC = 29874

# Hash slot -> (mnemonic, algorithm number); empty slots hold None.
_HASH_SLOTS: tuple[tuple[bytes, int] | None, ...] = (
    (b"DH", 2),
    (b"RSASHA512", 10),
    (b"RSASHA1-NSEC3-SHA1", 7),
    (b"RSASHA256", 8),
    (b"ECDSAP256SHA256", 13),
    None,
    (b"DSA-NSEC-SHA1", 6),
    (b"RSAMD5", 1),
    (b"RSASHA1", 5),
    (b"PRIVATEDNS", 253),
    (b"PRIVATEOID", 254),
    (b"INDIRECT", 252),
    (b"ECDSAP384SHA384", 14),
    (b"DSA", 3),
    (b"ECC", 4),
    (b"ECC-GOST", 12),
)


def algorithm_hash(value: int) -> int:
    """Map the first eight octets of a mnemonic, read little-endian, to a slot 0-15."""
    value &= _MASK64
    value32 = ((value >> 32) ^ value) & 0xFFFFFFFF
    return ((value32 * _MAGIC) >> 32) & 0xF


def _scan_int8(data: bytes) -> int:
    if not data.isdigit():
        raise ZoneSyntaxError("Invalid algorithm number")
    number = int(data)
    if number > 255:
        raise ZoneSyntaxError("Algorithm number exceeds 255")
    return number


def scan_algorithm(text: str | bytes) -> int:
    """Return the algorithm number for a mnemonic (any case) or a decimal number."""
    data = _to_octets(text)
    if not data:
        raise ZoneSyntaxError("Missing algorithm")
    if 0x30 <= data[0] <= 0x39:
        return _scan_int8(data)
    name = data.upper()
    key = int.from_bytes(name[:8].ljust(8, b"\x00"), "little")
    slot = _HASH_SLOTS[algorithm_hash(key)]
    if slot is None or slot[0] != name:
        raise ZoneSyntaxError(f"Unknown algorithm {data.decode('latin-1')!r}")
    return slot[1]