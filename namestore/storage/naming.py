"""Name encoding for stored files.

Maps an arbitrary logical name to a filesystem-safe relative path and back.

Format: {prefix}{base32 chunks joined by os.sep}{suffix}

Chunks are 32 characters wide so that no single path component grows past
common filename length limits, and so long names fan out into a shallow
directory tree.

Examples:
    >>> from namestore.storage.naming import encode_name, decode_name
    >>> encode_name("reports/q1.csv", "f_", ".bin")
    'f_OJSXA33SORZS64JRFZRXG5Q=.bin'
    >>> decode_name("f_OJSXA33SORZS64JRFZRXG5Q=.bin", "f_", ".bin")
    b'reports/q1.csv'
"""

from __future__ import annotations

import base64
import os
import re
import string
from dataclasses import dataclass

from namestore.storage.exceptions import ConfigurationError, MalformedNameError

CHUNK_WIDTH = 32

BASE32_ALPHABET = frozenset(string.ascii_uppercase + "234567=")

PATH_SEPARATORS = tuple(sorted({"/", os.sep, os.altsep or os.sep}))

LogicalName = str | bytes


def to_bytes(name: LogicalName) -> bytes:
    """Normalize a logical name to bytes (str is UTF-8 encoded)."""
    if isinstance(name, str):
        return name.encode("utf-8")
    return bytes(name)


def chunk(encoded: str, width: int = CHUNK_WIDTH) -> list[str]:
    """Split an encoded string into consecutive pieces of ``width`` characters.

    The last piece may be shorter. An empty string yields no pieces.
    """
    return [encoded[i:i + width] for i in range(0, len(encoded), width)]


def encode_name(name: LogicalName, prefix: str, suffix: str) -> str:
    """Encode a logical name into a relative physical path.

    Args:
        name: Logical name (str is UTF-8 encoded first).
        prefix: Literal marker prepended to the first chunk.
        suffix: Literal marker appended to the last chunk.

    Returns:
        Relative path string.
    """
    encoded = base64.b32encode(to_bytes(name)).decode("ascii")
    return f"{prefix}{os.sep.join(chunk(encoded))}{suffix}"


def decode_name(path: str, prefix: str, suffix: str) -> bytes:
    """Decode a relative physical path back into the logical name.

    Rules:
        - The path must start with prefix and end with suffix
        - All path separators are removed (undoes chunking)
        - Prefix is removed once from the start, suffix once from the end
        - The remainder is Base32, case-insensitive, padding optional

    Args:
        path: Relative physical path.
        prefix: Expected leading marker.
        suffix: Expected trailing marker.

    Returns:
        Logical name bytes.

    Raises:
        MalformedNameError: If the markers are missing or the remainder
            is not valid Base32.
    """
    if not path.startswith(prefix) or not path.endswith(suffix):
        raise MalformedNameError(
            path, prefix, suffix, "it does not use the defined prefix or suffix"
        )

    joined = path
    for sep in PATH_SEPARATORS:
        joined = joined.replace(sep, "")
    joined = re.sub(r"\A" + re.escape(prefix), "", joined, count=1)
    joined = re.sub(re.escape(suffix) + r"\Z", "", joined, count=1)

    # Restore padding stripped by other writers
    joined += "=" * (-len(joined) % 8)
    try:
        return base64.b32decode(joined, casefold=True)
    except ValueError as e:
        raise MalformedNameError(path, prefix, suffix, f"invalid base32 ({e})") from e


def validate_marker(kind: str, marker: str) -> None:
    """Check that a prefix or suffix can never be confused with encoded data.

    Raises:
        ConfigurationError: If the marker is empty, contains a Base32 alphabet
            character or a path separator.
    """
    if not marker:
        raise ConfigurationError(f"{kind} must not be empty")
    clashing = sorted(set(marker) & BASE32_ALPHABET)
    if clashing:
        raise ConfigurationError(
            f"{kind} {marker!r} contains base32 characters: {''.join(clashing)}"
        )
    if any(sep in marker for sep in PATH_SEPARATORS):
        raise ConfigurationError(f"{kind} {marker!r} contains a path separator")


@dataclass(frozen=True)
class NameCodec:
    """Validated prefix/suffix pair bound to encode_name/decode_name.

    Attributes:
        prefix: Leading marker of every managed entry.
        suffix: Trailing marker of every managed entry.
    """

    prefix: str
    suffix: str

    def __post_init__(self) -> None:
        validate_marker("prefix", self.prefix)
        validate_marker("suffix", self.suffix)
        # Scanning trims trailing dots off relative paths
        if self.suffix.endswith("."):
            raise ConfigurationError(f"suffix {self.suffix!r} must not end with '.'")

    def encode(self, name: LogicalName) -> str:
        return encode_name(name, self.prefix, self.suffix)

    def decode(self, path: str) -> bytes:
        return decode_name(path, self.prefix, self.suffix)
