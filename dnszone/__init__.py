"""Scanner, field converters and perfect-hash tools for DNS zone files in presentation format."""

__version__ = "0.2.0"

__all__ = [
    "algorithm",
    "apl",
    "base16",
    "bits",
    "constants",
    "errors",
    "name",
    "perfecthash",
    "scanner",
    "text",
]