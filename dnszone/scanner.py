"""Lexical analysis of zone data in presentation format."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

from .errors import ZoneSyntaxError
from .text import _to_octets

_LF = 0x0A
_BACKSLASH = 0x5C
_QUOTE = 0x22
_LEFT_PAREN = 0x28
_RIGHT_PAREN = 0x29
_SEMICOLON = 0x3B
_BLANKS = frozenset(b" \t\r")
_DELIMITERS = _BLANKS | frozenset(b'\n"();')

_IDLE = "idle"
_CONTIGUOUS = "contiguous"
_QUOTED = "quoted"
_COMMENT = "comment"


@dataclass(frozen=True)
class Token:
    """A lexical token.

    ``data`` holds the raw text, escapes unresolved; quoted tokens exclude
    the quotes. ``line`` is the line the token starts on. For line feeds,
    ``newlines`` is the number of lines the feed ends, including line feeds
    that were escaped or quoted since the previous one.
    """

    CONTIGUOUS: ClassVar[str] = "contiguous"
    QUOTED: ClassVar[str] = "quoted"
    LINE_FEED: ClassVar[str] = "line_feed"
    LEFT_PAREN: ClassVar[str] = "left_paren"
    RIGHT_PAREN: ClassVar[str] = "right_paren"

    kind: str
    data: bytes
    line: int
    newlines: int = 0


class Scanner:
    """Incremental scanner; input may be fed in arbitrary chunks."""

    def __init__(self) -> None:
        self._reset()

    def _reset(self) -> None:
        self._state = _IDLE
        self._escaped = False
        self._buffer = bytearray()
        self._start_line = 1
        self._line = 1
        self._deferred = 0
        self._tokens: list[Token] = []

    @property
    def line(self) -> int:
        """Current line number."""
        return self._line

    def feed(self, data: str | bytes) -> list[Token]:
        """Scan the next chunk and return the tokens completed by it."""
        for byte in _to_octets(data):
            self._step(byte)
        tokens, self._tokens = self._tokens, []
        return tokens

    def finish(self) -> list[Token]:
        """Signal end of input, return remaining tokens and reset.

        Raises ZoneSyntaxError if a quoted string is left open.
        """
        if self._state == _QUOTED:
            line = self._start_line
            self._reset()
            raise ZoneSyntaxError(f"Unterminated string starting on line {line}")
        if self._state == _CONTIGUOUS:
            self._emit(Token.CONTIGUOUS)
        tokens = self._tokens
        self._reset()
        return tokens

    def _append(self, byte: int) -> None:
        self._buffer.append(byte)
        if byte == _LF:
            self._deferred += 1
            self._line += 1

    def _emit(self, kind: str) -> None:
        self._tokens.append(Token(kind, bytes(self._buffer), self._start_line))
        self._buffer = bytearray()
        self._state = _IDLE
        self._escaped = False

    def _step(self, byte: int) -> None:
        state = self._state
        if state == _CONTIGUOUS or state == _QUOTED:
            if self._escaped:
                self._escaped = False
                self._append(byte)
                return
            if byte == _BACKSLASH:
                self._escaped = True
                self._buffer.append(byte)
                return
            if state == _QUOTED:
                if byte == _QUOTE:
                    self._emit(Token.QUOTED)
                else:
                    self._append(byte)
                return
            if byte not in _DELIMITERS:
                self._buffer.append(byte)
                return
            self._emit(Token.CONTIGUOUS)
        elif state == _COMMENT:
            if byte != _LF:
                return
            self._state = _IDLE
        self._start(byte)

    def _start(self, byte: int) -> None:
        if byte in _BLANKS:
            return
        if byte == _LF:
            self._tokens.append(
                Token(Token.LINE_FEED, b"\n", self._line, 1 + self._deferred)
            )
            self._deferred = 0
            self._line += 1
        elif byte == _QUOTE:
            self._state = _QUOTED
            self._start_line = self._line
            self._buffer = bytearray()
        elif byte == _LEFT_PAREN:
            self._tokens.append(Token(Token.LEFT_PAREN, b"(", self._line))
        elif byte == _RIGHT_PAREN:
            self._tokens.append(Token(Token.RIGHT_PAREN, b")", self._line))
        elif byte == _SEMICOLON:
            self._state = _COMMENT
        else:
            self._state = _CONTIGUOUS
            self._start_line = self._line
            self._buffer = bytearray([byte])
            self._escaped = byte == _BACKSLASH


def scan(text: str | bytes) -> list[Token]:
    """Scan complete input and return all tokens."""
    scanner = Scanner()
    return scanner.feed(text) + scanner.finish()