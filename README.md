# dnszone

Building blocks for reading DNS zone files (master files) in presentation
format and turning their fields into wire format.

## What is included

- `dnszone.constants`: the `ZoneClass`, `ZoneType`, `SvcParamKey` and
  `LogPriority` enumerations with the registered codes. It also holds the
  sizes `BLOCK_SIZE`, `WINDOW_SIZE`, `NAME_SIZE`, `RDATA_SIZE` and
  `TAPE_SIZE`.
- `dnszone.errors`: the `ZoneError` hierarchy (`ZoneSyntaxError`,
  `ZoneSemanticError`, `ZoneOutOfMemoryError`, `ZoneBadParameterError`,
  `ZoneReadError`, `ZoneNotImplementedError`, `ZoneNotAFileError`,
  `ZoneNotPermittedError`). Each class carries its numeric `code`.
  `error_for_code` returns an exception instance for a negative result
  code and raises `ValueError` for any other code.
- `dnszone.scanner`: `Scanner` (incremental, with `feed`, `finish` and a
  `line` property) and `scan` split zone text into `Token` values. A token
  is contiguous, quoted, a line feed, a left parenthesis or a right
  parenthesis. The scanner skips comments, keeps escapes unresolved,
  counts lines across input chunks, and raises `ZoneSyntaxError` on an
  unterminated quoted string.
- `dnszone.text`: `unescape` decodes one `\X` or `\DDD` escape.
  `scan_string` decodes a character string up to a given octet limit
  (255 by default).
- `dnszone.name`: `scan_name` turns a domain name into wire format. It
  returns the octets and whether the name is relative.
- `dnszone.base16`: `base16_decode` and `parse_salt` (NSEC3 salt with its
  length octet, `-` for an empty salt). The streaming `Base16Decoder`
  accepts words with an uneven number of digits; `finish` returns the
  dangling octet.
- `dnszone.algorithm`: `scan_algorithm` takes a DNSSEC algorithm mnemonic
  (any case) or a decimal number and returns its code. `algorithm_hash`
  is the slot function used for the mnemonic lookup.
- `dnszone.apl`: `scan_apl` converts one Address Prefix List item, such as
  `!1:192.168.32.0/21`, to wire format.
- `dnszone.bits`: `trailing_zeroes` and `leading_zeroes` for 64-bit masks.
- `dnszone.perfecthash`: searches for the magic multipliers of the perfect
  hashes over the algorithm, certificate, type/class and service
  mnemonic tables. It can also render the resulting lookup tables.

## Installation

```
pip install .
```

Install the test extra with `pip install .[test]` and run the tests with
`pytest`.

## Examples

```python
from dnszone.scanner import scan
from dnszone.name import scan_name
from dnszone.text import scan_string
from dnszone.algorithm import scan_algorithm
from dnszone.errors import ZoneSyntaxError

for token in scan('foo. 3600 IN TXT "hello world"\n'):
    print(token.kind, token.data, token.line)

wire, relative = scan_name("www.example.")   # relative is False

data = scan_string("foo\\032bar", 255)        # b"foo bar"

code = scan_algorithm("rsasha256")            # 8

try:
    scan_name("..")
except ZoneSyntaxError as exc:
    print("rejected:", exc)
```

## Command line

`dnszone-perfecthash` searches for the magic multiplier of a perfect hash
over one of the fixed mnemonic tables and prints the slot of each entry:

```
dnszone-perfecthash algorithm
dnszone-perfecthash certificate --start 98112
```

The table is one of `algorithm`, `certificate`, `type` or `service`.
`--start` sets the magic to search from; by default the search starts at
the known magic for that table. For `type` the 256-entry symbol table is
printed as well, and for `service` the 64-entry service table. If no
magic is found the command prints `no magic value` and exits with
status 1.

## What it does not do

The package provides the scanner and field converters, not a complete
zone file parser. It does not read zone files from disk. It does not
process `$ORIGIN`, `$TTL` or `$INCLUDE` directives, and it does not
assemble resource records or call back for each of them. Only the field
types listed above are converted to wire format.