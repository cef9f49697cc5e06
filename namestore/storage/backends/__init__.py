"""Filesystem backends for storage I/O."""

from namestore.storage.backends.base import FilesystemBackend
from namestore.storage.backends.local import LocalFilesystemBackend
from namestore.storage.backends.memory import MemoryFilesystemBackend

__all__ = ["FilesystemBackend", "LocalFilesystemBackend", "MemoryFilesystemBackend"]
