import pytest

from dnszone.errors import (
    ZoneBadParameterError,
    ZoneError,
    ZoneNotAFileError,
    ZoneNotImplementedError,
    ZoneNotPermittedError,
    ZoneOutOfMemoryError,
    ZoneReadError,
    ZoneSemanticError,
    ZoneSyntaxError,
    error_for_code,
)


@pytest.mark.parametrize(
    "code, cls",
    [
        (-256, ZoneSyntaxError),
        (-512, ZoneSemanticError),
        (-768, ZoneOutOfMemoryError),
        (-1024, ZoneBadParameterError),
        (-1280, ZoneReadError),
        (-1536, ZoneNotImplementedError),
        (-1792, ZoneNotAFileError),
        (-2048, ZoneNotPermittedError),
    ],
)
def test_error_for_code_round_trip(code, cls):
    error = error_for_code(code)
    assert type(error) is cls
    assert error.code == code
    assert isinstance(error, ZoneError)


def test_error_for_code_rejects_success():
    with pytest.raises(ValueError):
        error_for_code(0)


def test_error_for_code_rejects_unknown_code():
    with pytest.raises(ValueError):
        error_for_code(-3)


def test_custom_message_is_kept():
    error = ZoneSyntaxError("Invalid owner")
    assert str(error) == "Invalid owner"
    assert error.message == "Invalid owner"


def test_default_message_is_used():
    error = ZoneSemanticError()
    assert str(error) == ZoneSemanticError.default_message


def test_errors_can_be_caught_by_base_class():
    error = error_for_code(-256)
    assert type(error) is ZoneSyntaxError
    with pytest.raises(ZoneError) as info:
        raise error
    assert info.value is error


def test_codes_are_distinct_multiples_of_256():
    codes = [-256 * n for n in range(1, 9)]
    errors = [error_for_code(code) for code in codes]
    assert [error.code for error in errors] == codes
    assert len({type(error) for error in errors}) == len(codes)