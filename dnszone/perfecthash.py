"""Search for multiplicative perfect hash magics over mnemonic tables.

Each table maps mnemonics to a small hash space by their first eight
octets. A magic is perfect for a table when no two mnemonics share a slot.
"""

from __future__ import annotations

import argparse
from collections.abc import Callable, Iterable, Sequence
from typing import TypeVar

_MASK32 = 0xFFFFFFFF
_MASK64 = (1 << 64) - 1
_UINT64_MAX = _MASK64
_UPPER_CASE_MASK = 0xDFDFDFDFDFDFDFDF

ALGORITHM_MAGIC = 29874
CERTIFICATE_MAGIC = 98112
TYPE_MAGIC = 3523216699
SERVICE_MAGIC = 138261570

ALGORITHMS: tuple[tuple[str, int], ...] = (
    ("RSAMD5", 1),
    ("DH", 2),
    ("DSA", 3),
    ("ECC", 4),
    ("RSASHA1", 5),
    ("DSA-NSEC-SHA1", 6),
    ("RSASHA1-NSEC3-SHA1", 7),
    ("RSASHA256", 8),
    ("RSASHA512", 10),
    ("ECC-GOST", 12),
    ("ECDSAP256SHA256", 13),
    ("ECDSAP384SHA384", 14),
    ("INDIRECT", 252),
    ("PRIVATEDNS", 253),
    ("PRIVATEOID", 254),
)

CERTIFICATES: tuple[tuple[str, int], ...] = (
    ("PKIX", 1),
    ("SPKI", 2),
    ("PGP", 3),
    ("IPKIX", 4),
    ("ISPKI", 5),
    ("IPGP", 6),
    ("ACPKIX", 7),
    ("IACPKIX", 8),
    ("OID", 254),
    ("URI", 253),
)

# (mnemonic, code, is_type); entries with is_type False are classes.
TYPES_AND_CLASSES: tuple[tuple[str, int, bool], ...] = (
    ("IN", 1, False),
    ("CS", 2, False),
    ("CH", 3, False),
    ("HS", 4, False),
    ("A", 1, True),
    ("NS", 2, True),
    ("MD", 3, True),
    ("MF", 4, True),
    ("CNAME", 5, True),
    ("SOA", 6, True),
    ("MB", 7, True),
    ("MG", 8, True),
    ("MR", 9, True),
    ("NULL", 10, True),
    ("WKS", 11, True),
    ("PTR", 12, True),
    ("HINFO", 13, True),
    ("MINFO", 14, True),
    ("MX", 15, True),
    ("TXT", 16, True),
    ("RP", 17, True),
    ("AFSDB", 18, True),
    ("X25", 19, True),
    ("ISDN", 20, True),
    ("RT", 21, True),
    ("NSAP", 22, True),
    ("NSAP-PTR", 23, True),
    ("SIG", 24, True),
    ("KEY", 25, True),
    ("PX", 26, True),
    ("GPOS", 27, True),
    ("AAAA", 28, True),
    ("LOC", 29, True),
    ("NXT", 30, True),
    ("SRV", 33, True),
    ("NAPTR", 35, True),
    ("KX", 36, True),
    ("CERT", 37, True),
    ("A6", 38, True),
    ("DNAME", 39, True),
    ("APL", 42, True),
    ("DS", 43, True),
    ("SSHFP", 44, True),
    ("IPSECKEY", 45, True),
    ("RRSIG", 46, True),
    ("NSEC", 47, True),
    ("DNSKEY", 48, True),
    ("DHCID", 49, True),
    ("NSEC3", 50, True),
    ("NSEC3PARAM", 51, True),
    ("TLSA", 52, True),
    ("SMIMEA", 53, True),
    ("HIP", 55, True),
    ("NINFO", 56, True),
    ("RKEY", 57, True),
    ("CDS", 59, True),
    ("CDNSKEY", 60, True),
    ("OPENPGPKEY", 61, True),
    ("CSYNC", 62, True),
    ("ZONEMD", 63, True),
    ("SVCB", 64, True),
    ("HTTPS", 65, True),
    ("SPF", 99, True),
    ("NID", 104, True),
    ("L32", 105, True),
    ("L64", 106, True),
    ("LP", 107, True),
    ("EUI48", 108, True),
    ("EUI64", 109, True),
    ("URI", 256, True),
    ("CAA", 257, True),
    ("AVC", 258, True),
    ("RESINFO", 261, True),
    ("WALLET", 262, True),
    ("CLA", 263, True),
    ("TA", 32768, True),
    ("DLV", 32769, True),
)

SERVICES: tuple[tuple[str, int], ...] = (
    ("tcpmux", 1),
    ("echo", 7),
    ("ftp-data", 20),
    ("ftp", 21),
    ("ssh", 22),
    ("telnet", 23),
    ("lmtp", 24),
    ("smtp", 25),
    ("nicname", 43),
    ("domain", 53),
    ("whoispp", 63),
    ("http", 80),
    ("kerberos", 88),
    ("npp", 92),
    ("pop3", 110),
    ("nntp", 119),
    ("ntp", 123),
    ("imap", 143),
    ("snmp", 161),
    ("snmptrap", 162),
    ("bgmp", 264),
    ("ptp-event", 319),
    ("ptp-general", 320),
    ("nnsp", 433),
    ("https", 443),
    ("submission", 587),
    ("submissions", 465),
    ("nntps", 563),
    ("ldaps", 636),
    ("domain-s", 853),
    ("ftps-data", 989),
    ("ftps", 990),
    ("imaps", 993),
    ("pop3s", 995),
    ("time", 37),
)

# Positions of TA and DLV in the generated symbol table.
_TABLE_INDEX = {32768: 265, 32769: 266}

_T = TypeVar("_T")


def name_value(name: str | bytes) -> int:
    """Return the first eight octets of a mnemonic as a little-endian integer.

    Shorter mnemonics are padded with zero octets.
    """
    data = name.encode("ascii") if isinstance(name, str) else bytes(name)
    return int.from_bytes(data[:8].ljust(8, b"\x00"), "little")


def _fold(value: int) -> int:
    value &= _MASK64
    return ((value >> 32) ^ value) & _MASK32


def multiplicative_hash(magic: int, value: int) -> int:
    """Hash a 64-bit value to an octet using ``magic`` as multiplier."""
    return (((_fold(value) * magic) & _MASK64) >> 32) & 0xFF


def service_hash(magic: int, value: int, length: int) -> int:
    """Hash a service name, case-insensitively, to a slot 0-63.

    The name length is added so that names sharing an eight octet prefix
    can still land in different slots.
    """
    value32 = _fold(value & _UPPER_CASE_MASK)
    return ((((value32 * magic) & _MASK64) >> 32) + length) & 0x3F


def _find_magic(start: int, entries: Iterable[_T], slot: Callable[[int, _T], int]) -> int:
    if start < 0:
        raise ValueError("start must not be negative")
    items = list(entries)
    for magic in range(start, _UINT64_MAX):
        seen: set[int] = set()
        for entry in items:
            key = slot(magic, entry)
            if key in seen:
                break
            seen.add(key)
        else:
            return magic
    raise LookupError("no magic value")


def _nibble_slot(magic: int, entry: tuple) -> int:
    return multiplicative_hash(magic, name_value(entry[0])) & 0xF


def _octet_slot(magic: int, entry: tuple) -> int:
    return multiplicative_hash(magic, name_value(entry[0]))


def _service_slot(magic: int, entry: tuple[str, int]) -> int:
    return service_hash(magic, name_value(entry[0]), len(entry[0]))


def find_algorithm_magic(start: int = ALGORITHM_MAGIC) -> int:
    """Return the first magic from ``start`` that hashes DNSSEC algorithms to 16 distinct slots."""
    return _find_magic(start, ALGORITHMS, _nibble_slot)


def find_certificate_magic(start: int = CERTIFICATE_MAGIC) -> int:
    """Return the first magic from ``start`` that hashes certificate types to 16 distinct slots."""
    return _find_magic(start, CERTIFICATES, _nibble_slot)


def find_type_magic(start: int = TYPE_MAGIC) -> int:
    """Return the first magic from ``start`` that hashes types and classes to 256 distinct slots."""
    return _find_magic(start, TYPES_AND_CLASSES, _octet_slot)


def find_service_magic(start: int = SERVICE_MAGIC) -> int:
    """Return the first magic from ``start`` that hashes service names to 64 distinct slots."""
    return _find_magic(start, SERVICES, _service_slot)


def render_symbol_table(magic: int) -> str:
    """Render the 256-entry hash-to-symbol table for types and classes."""
    keys: list[tuple[int, bool]] = [(0, False)] * 256
    for name, code, is_type in TYPES_AND_CLASSES:
        keys[multiplicative_hash(magic, name_value(name))] = (code, is_type)

    lines = ["static const symbol_t *hash_to_symbol[256] = {\n"]
    for row in range(0, 256, 8):
        cells = []
        for index in range(row, row + 8):
            code, is_type = keys[index]
            code = _TABLE_INDEX.get(code, code)
            macro = "V" if not code else "T" if is_type else "C"
            cell = f" {macro}({code})"[:9]
            cells.append(f"{cell:>7}{',' if index < 255 else ''}")
        lines.append(" " + "".join(cells) + "\n")
    lines.append("};\n")
    return "".join(lines)


def render_service_table(magic: int) -> str:
    """Render the 64-entry hash-to-service table, one entry per line."""
    table: list[tuple[str, int] | None] = [None] * 64
    for name, port in SERVICES:
        table[service_hash(magic, name_value(name), len(name))] = (name, port)
    lines = []
    for entry in table:
        if entry is not None and entry[1]:
            lines.append(f'  SERVICE("{entry[0]}", {entry[1]}),\n')
        else:
            lines.append("  UNKNOWN_SERVICE(),\n")
    return "".join(lines)


def _report_codes(magic: int, entries: Sequence[tuple], mask: int, prefix: str) -> None:
    print(f"i: {len(entries)}, magic: {magic}")
    for entry in entries:
        key = multiplicative_hash(magic, name_value(entry[0])) & mask
        print(f"{prefix}{entry[0]}: {key} ({entry[1]})")


def main(argv: Sequence[str] | None = None) -> int:
    """Search a perfect hash magic for one table and print the result."""
    parser = argparse.ArgumentParser(
        prog="dnszone-hash",
        description="Search a perfect hash magic for a mnemonic table.",
    )
    parser.add_argument(
        "table", choices=("algorithm", "certificate", "type", "service")
    )
    parser.add_argument(
        "--start", type=int, default=None, help="magic to start searching from"
    )
    args = parser.parse_args(argv)

    finders = {
        "algorithm": find_algorithm_magic,
        "certificate": find_certificate_magic,
        "type": find_type_magic,
        "service": find_service_magic,
    }
    finder = finders[args.table]
    try:
        magic = finder() if args.start is None else finder(args.start)
    except LookupError:
        print("no magic value")
        return 1

    if args.table == "algorithm":
        _report_codes(magic, ALGORITHMS, 0xF, "")
    elif args.table == "certificate":
        _report_codes(magic, CERTIFICATES, 0xF, "")
    elif args.table == "type":
        _report_codes(magic, TYPES_AND_CLASSES, 0xFF, "TYPE_")
        print(render_symbol_table(magic), end="")
    else:
        print(f"services: {len(SERVICES)}, magic: {magic}")
        print(render_service_table(magic), end="")
    return 0