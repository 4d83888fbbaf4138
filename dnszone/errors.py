"""Exceptions raised by the parser, one per failure category."""

from __future__ import annotations


class ZoneError(Exception):
    """Base class of every parser error; ``code`` is the numeric result."""

    code: int = -1
    default_message: str = "Zone error"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message if message is not None else self.default_message)
        self.message = message if message is not None else self.default_message


class ZoneSyntaxError(ZoneError):
    """A syntax error occurred."""

    code = -256
    default_message = "Syntax error"


class ZoneSemanticError(ZoneError):
    """A semantic error occurred."""

    code = -512
    default_message = "Semantic error"


class ZoneOutOfMemoryError(ZoneError):
    """The operation failed due to lack of memory."""

    code = -768
    default_message = "Out of memory"


class ZoneBadParameterError(ZoneError):
    """A parameter had a bad value."""

    code = -1024
    default_message = "Bad parameter"


class ZoneReadError(ZoneError):
    """Reading the zone file failed."""

    code = -1280
    default_message = "Read error"


class ZoneNotImplementedError(ZoneError):
    """A control directive or record type is not supported."""

    code = -1536
    default_message = "Not implemented"


class ZoneNotAFileError(ZoneError):
    """The specified file does not exist."""

    code = -1792
    default_message = "Not a file"


class ZoneNotPermittedError(ZoneError):
    """Access to the specified file is not allowed."""

    code = -2048
    default_message = "Not permitted"


_BY_CODE: dict[int, type[ZoneError]] = {
    cls.code: cls
    for cls in (
        ZoneSyntaxError,
        ZoneSemanticError,
        ZoneOutOfMemoryError,
        ZoneBadParameterError,
        ZoneReadError,
        ZoneNotImplementedError,
        ZoneNotAFileError,
        ZoneNotPermittedError,
    )
}


def error_for_code(code: int) -> ZoneError:
    """Return an exception instance for a negative result code.

    Raises ValueError for success (0) or a code that names no error.
    """
    try:
        cls = _BY_CODE[code]
    except KeyError:
        raise ValueError(f"no error is defined for result code {code}") from None
    return cls()