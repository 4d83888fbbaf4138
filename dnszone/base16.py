"""Decoding of hexadecimal (base16) data."""

from __future__ import annotations

from .errors import ZoneSyntaxError
from .text import _to_octets

_HEX_VALUES = {
    **{ord(c): i for i, c in enumerate("0123456789")},
    **{ord(c): 10 + i for i, c in enumerate("abcdef")},
    **{ord(c): 10 + i for i, c in enumerate("ABCDEF")},
}


class Base16Decoder:
    """Incremental hexadecimal decoder that may be fed one word at a time.

    Words may hold an uneven number of digits; a dangling digit is carried
    over into the next word.
    """

    def __init__(self) -> None:
        self._carry: int | None = None
        self._failed = False

    @property
    def pending(self) -> bool:
        """True if a single hexadecimal digit awaits its partner."""
        return self._carry is not None

    def decode(self, data: str | bytes) -> bytes:
        """Decode the next word and return the complete octets it yields."""
        if self._failed:
            raise ZoneSyntaxError("Base16 decoder stopped after invalid input")
        out = bytearray()
        for char in _to_octets(data):
            value = _HEX_VALUES.get(char)
            if value is None:
                self._failed = True
                raise ZoneSyntaxError(f"Invalid base16 digit {chr(char)!r}")
            if self._carry is None:
                self._carry = value << 4
            else:
                out.append(self._carry | value)
                self._carry = None
        return bytes(out)

    def finish(self) -> bytes:
        """Return the octet held by a dangling digit, if any, and reset."""
        carry, self._carry = self._carry, None
        return b"" if carry is None else bytes([carry])


def base16_decode(data: str | bytes) -> bytes:
    """Decode hexadecimal text holding an even number of digits."""
    decoder = Base16Decoder()
    octets = decoder.decode(data)
    if decoder.pending:
        raise ZoneSyntaxError("Uneven number of base16 digits")
    return octets


def parse_salt(text: str | bytes) -> bytes:
    """Convert an NSEC3 salt to wire format, a length octet and the salt.

    A single ``-`` denotes an empty salt.
    """
    data = _to_octets(text)
    if data == b"-":
        return b"\x00"
    salt = base16_decode(data)
    if len(salt) > 255:
        raise ZoneSyntaxError("Salt exceeds 255 octets")
    return bytes([len(salt)]) + salt