"""Handle for a file held in storage.

A StoredFile is never persisted: it carries just enough to re-derive the
physical path from the logical name.

Examples:
    >>> from namestore.storage.file import StoredFile
    >>> f = StoredFile(root="/data", name=b"a", prefix="f_", suffix=".bin")
    >>> f.relative_path
    'f_ME======.bin'
    >>> f.path
    '/data/f_ME======.bin'
"""

from __future__ import annotations

import os
from typing import TYPE_CHECKING

from pydantic import BaseModel, ConfigDict

from namestore.storage.naming import encode_name

if TYPE_CHECKING:
    from namestore.storage.backends.base import FilesystemBackend


class StoredFile(BaseModel):
    """A logical name resolved against a storage root."""

    model_config = ConfigDict(frozen=True)

    root: str
    name: bytes
    prefix: str
    suffix: str

    @property
    def relative_path(self) -> str:
        """Encoded path relative to the root."""
        return encode_name(self.name, self.prefix, self.suffix)

    @property
    def path(self) -> str:
        """Absolute physical path."""
        return os.path.join(self.root, self.relative_path)

    @property
    def display_name(self) -> str:
        """Logical name as text, undecodable bytes replaced."""
        return self.name.decode("utf-8", errors="replace")

    def remove(self, backend: FilesystemBackend) -> None:
        """Delete this entry, and everything below it if it is a directory."""
        backend.remove(self.path, recursive=True)

    def __str__(self) -> str:
        return self.path
