"""UUID values with parsing and formatting, Gregorian tick helpers, MD5/SHA-1 digests and JSON serialization."""

__version__ = "0.1.0"

__all__ = [
    "errors",
    "gregorian",
    "hexutil",
    "identifier",
    "md5",
    "serialization",
    "sha1",
]