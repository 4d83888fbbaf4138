import pytest

from dnszone.constants import (
    LogPriority,
    SvcParamKey,
    ZoneClass,
    ZoneType,
)


@pytest.mark.parametrize(
    "member, code",
    [
        (ZoneClass.IN, 1),
        (ZoneClass.CS, 2),
        (ZoneClass.CH, 3),
        (ZoneClass.HS, 4),
        (ZoneClass.ANY, 255),
    ],
)
def test_class_codes(member, code):
    assert member == code
    assert ZoneClass(code) is member


@pytest.mark.parametrize(
    "name, code",
    [
        ("A", 1),
        ("NSAP_PTR", 23),
        ("DS", 43),
        ("ZONEMD", 63),
        ("EUI48", 108),
        ("EUI64", 109),
        ("URI", 256),
        ("CLA", 263),
        ("TA", 32768),
        ("DLV", 32769),
    ],
)
def test_type_codes(name, code):
    assert ZoneType[name] == code
    assert ZoneType(code).name == name


def test_type_codes_look_up_their_own_member():
    for member in ZoneType:
        assert ZoneType(member.value) is member
        assert ZoneType[member.name] is member


def test_unassigned_type_code_is_rejected():
    with pytest.raises(ValueError):
        ZoneType(31)


def test_svc_param_keys():
    assert SvcParamKey(0) is SvcParamKey.MANDATORY
    assert SvcParamKey(9) is SvcParamKey.TLS_SUPPORTED_GROUPS
    assert SvcParamKey(65535) is SvcParamKey.INVALID_KEY


def test_log_priorities_are_distinct_bits():
    assert LogPriority(1 << 1) is LogPriority.ERROR
    assert LogPriority(1 << 2) is LogPriority.WARNING
    assert LogPriority(1 << 3) is LogPriority.INFO
    mask = LogPriority((1 << 1) | (1 << 3))
    assert LogPriority.ERROR in mask
    assert LogPriority.INFO in mask
    assert LogPriority.WARNING not in mask