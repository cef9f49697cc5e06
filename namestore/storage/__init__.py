"""File storage addressed by logical name.

Logical names are encoded into chunked, filesystem-safe paths under a
root directory and decoded back when the root is scanned.

Examples:
    >>> from namestore.storage import StorageIndex, StorageConfig
    >>> index = StorageIndex.from_config(StorageConfig(root="./data", prefix="f_", suffix=".bin"))
    >>> index.dump("any name: even/with slashes", b"payload")
"""

from namestore.storage.base import Storage
from namestore.storage.config import StorageConfig
from namestore.storage.exceptions import (
    ConfigurationError,
    MalformedNameError,
    NotFoundError,
    ScanInvariantError,
    StorageError,
)
from namestore.storage.file import StoredFile
from namestore.storage.index import StorageIndex
from namestore.storage.naming import CHUNK_WIDTH, NameCodec, decode_name, encode_name

__all__ = [
    "CHUNK_WIDTH",
    "ConfigurationError",
    "MalformedNameError",
    "NameCodec",
    "NotFoundError",
    "ScanInvariantError",
    "Storage",
    "StorageConfig",
    "StorageError",
    "StorageIndex",
    "StoredFile",
    "decode_name",
    "encode_name",
]
