"""Numeric codes and sizes used by the presentation format parser."""

from enum import IntEnum, IntFlag

BLOCK_SIZE = 64
"""Number of bytes per scanned block."""

WINDOW_SIZE = 256 * BLOCK_SIZE
"""Number of bytes read from a master file at a time."""

NAME_SIZE = 255
"""Maximum size of a domain name in wire format."""

RDATA_SIZE = 65535
"""Maximum size of an RDATA section."""

TAPE_SIZE = (100 * BLOCK_SIZE) + BLOCK_SIZE
"""Capacity of the token tape kept per file."""


class ZoneClass(IntEnum):
    """Supported CLASS codes."""

    IN = 1
    CS = 2
    CH = 3
    HS = 4
    ANY = 255


class ZoneType(IntEnum):
    """Supported resource record TYPE codes."""

    A = 1
    NS = 2
    MD = 3
    MF = 4
    CNAME = 5
    SOA = 6
    MB = 7
    MG = 8
    MR = 9
    NULL = 10
    WKS = 11
    PTR = 12
    HINFO = 13
    MINFO = 14
    MX = 15
    TXT = 16
    RP = 17
    AFSDB = 18
    X25 = 19
    ISDN = 20
    RT = 21
    NSAP = 22
    NSAP_PTR = 23
    SIG = 24
    KEY = 25
    PX = 26
    GPOS = 27
    AAAA = 28
    LOC = 29
    NXT = 30
    SRV = 33
    NAPTR = 35
    KX = 36
    CERT = 37
    A6 = 38
    DNAME = 39
    APL = 42
    DS = 43
    SSHFP = 44
    IPSECKEY = 45
    RRSIG = 46
    NSEC = 47
    DNSKEY = 48
    DHCID = 49
    NSEC3 = 50
    NSEC3PARAM = 51
    TLSA = 52
    SMIMEA = 53
    HIP = 55
    NINFO = 56
    RKEY = 57
    CDS = 59
    CDNSKEY = 60
    OPENPGPKEY = 61
    CSYNC = 62
    ZONEMD = 63
    SVCB = 64
    HTTPS = 65
    SPF = 99
    NID = 104
    L32 = 105
    L64 = 106
    LP = 107
    EUI48 = 108
    EUI64 = 109
    URI = 256
    CAA = 257
    AVC = 258
    RESINFO = 261
    WALLET = 262
    CLA = 263
    TA = 32768
    DLV = 32769


class SvcParamKey(IntEnum):
    """Supported service parameter keys for SVCB and HTTPS records."""

    MANDATORY = 0
    ALPN = 1
    NO_DEFAULT_ALPN = 2
    PORT = 3
    IPV4HINT = 4
    ECH = 5
    IPV6HINT = 6
    DOHPATH = 7
    OHTTP = 8
    TLS_SUPPORTED_GROUPS = 9
    INVALID_KEY = 65535


class LogPriority(IntFlag):
    """Log categories; combine them to build a mask of suppressed messages."""

    ERROR = 1 << 1
    WARNING = 1 << 2
    INFO = 1 << 3