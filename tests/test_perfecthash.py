import pytest

from dnszone.algorithm import algorithm_hash, scan_algorithm
from dnszone.perfecthash import (
    ALGORITHMS,
    CERTIFICATES,
    SERVICES,
    TYPES_AND_CLASSES,
    find_algorithm_magic,
    find_certificate_magic,
    main,
    multiplicative_hash,
    name_value,
    render_service_table,
    render_symbol_table,
    service_hash,
)


def test_name_value_single_character():
    assert name_value("A") == ord("A")


def test_name_value_truncates_to_eight_octets():
    assert name_value("RSASHA1-NSEC3-SHA1") == name_value("RSASHA1-")
    assert name_value(b"submission") == name_value("submissions")


def test_name_value_accepts_bytes_and_str_alike():
    assert name_value(b"ECC-GOST") == name_value("ECC-GOST")


@pytest.mark.parametrize("name,code", ALGORITHMS)
def test_multiplicative_hash_agrees_with_algorithm_parser(name, code):
    value = name_value(name)
    assert multiplicative_hash(29874, value) & 0xF == algorithm_hash(value)
    assert scan_algorithm(name) == code


@pytest.mark.parametrize("magic", [1, 29874, 3523216699, 2**40 + 7])
def test_multiplicative_hash_fits_an_octet(magic):
    for name, _code, _is_type in TYPES_AND_CLASSES:
        assert 0 <= multiplicative_hash(magic, name_value(name)) <= 255


def test_algorithm_magic_from_source_is_perfect():
    magic = find_algorithm_magic(29874)
    assert magic == 29874
    slots = {multiplicative_hash(magic, name_value(n)) & 0xF for n, _ in ALGORITHMS}
    assert len(slots) == len(ALGORITHMS)


def test_algorithm_magic_search_ends_at_or_before_known_magic():
    magic = find_algorithm_magic(29870)
    assert 29870 <= magic <= 29874
    slots = {multiplicative_hash(magic, name_value(n)) & 0xF for n, _ in ALGORITHMS}
    assert len(slots) == len(ALGORITHMS)


def test_certificate_magic_is_perfect():
    magic = find_certificate_magic(98112)
    assert magic >= 98112
    slots = {multiplicative_hash(magic, name_value(n)) & 0xF for n, _ in CERTIFICATES}
    assert len(slots) == len(CERTIFICATES)


def test_negative_start_is_rejected():
    with pytest.raises(ValueError):
        find_algorithm_magic(-1)


@pytest.mark.parametrize("name", ["http", "domain-s", "pop3s", "ptp-general"])
def test_service_hash_ignores_case(name):
    upper = name.upper()
    assert service_hash(138261570, name_value(name), len(name)) == service_hash(
        138261570, name_value(upper), len(upper)
    )


def test_service_hash_separates_by_length():
    value = name_value("submission")
    first = service_hash(138261570, value, len("submission"))
    second = service_hash(138261570, value, len("submissions"))
    assert second == (first + 1) & 0x3F


def test_service_hash_range():
    for name, _port in SERVICES:
        assert 0 <= service_hash(138261570, name_value(name), len(name)) < 64


def test_render_symbol_table_layout():
    table = render_symbol_table(3523216699)
    lines = table.splitlines()
    assert lines[0] == "static const symbol_t *hash_to_symbol[256] = {"
    assert lines[-1] == "};"
    rows = lines[1:-1]
    assert len(rows) == 32
    assert all(row.startswith(" ") for row in rows)
    assert not rows[-1].endswith(",")
    cells = sum(row.count("(") for row in rows)
    assert cells == 256


def test_render_symbol_table_never_holds_raw_high_codes():
    table = render_symbol_table(3523216699)
    assert "32768" not in table
    assert "32769" not in table


def test_render_service_table_has_one_line_per_slot():
    table = render_service_table(138261570)
    lines = table.splitlines()
    assert len(lines) == 64
    assert all(
        line.startswith('  SERVICE("') or line == "  UNKNOWN_SERVICE(),"
        for line in lines
    )
    assert sum(line.startswith('  SERVICE("') for line in lines) <= len(SERVICES)


def test_main_reports_algorithm_magic(capsys):
    assert main(["algorithm", "--start", "29874"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == f"i: {len(ALGORITHMS)}, magic: 29874"
    assert len(lines) == 1 + len(ALGORITHMS)
    assert lines[1].startswith("RSAMD5: ")
    assert lines[1].endswith("(1)")


def test_main_reports_certificate_magic(capsys):
    assert main(["certificate", "--start", "98112"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[0].startswith(f"i: {len(CERTIFICATES)}, magic: ")
    assert len(lines) == 1 + len(CERTIFICATES)


def test_main_rejects_unknown_table():
    with pytest.raises(SystemExit):
        main(["bogus"])