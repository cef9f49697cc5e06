"""Storage index: files under logical names inside a root directory.

Every logical name is encoded into a chunked physical path by the naming
module; listing walks the root and decodes whatever matches the
prefix/suffix conventions.

Examples:
    >>> from namestore.storage import StorageConfig, StorageIndex
    >>> index = StorageIndex.from_config(StorageConfig(root="/tmp/s", prefix="f_", suffix=".bin"))
    >>> index.dump("reports/q1.csv", b"a,b,c").relative_path
    'f_OJSXA33SORZS64JRFZRXG5Q=.bin'
"""

from __future__ import annotations

import logging
import os
from collections.abc import Iterator
from typing import TYPE_CHECKING

from namestore.storage.backends.base import FilesystemBackend
from namestore.storage.backends.local import LocalFilesystemBackend
from namestore.storage.base import Storage
from namestore.storage.config import StorageConfig
from namestore.storage.exceptions import MalformedNameError, NotFoundError, ScanInvariantError
from namestore.storage.file import StoredFile
from namestore.storage.naming import PATH_SEPARATORS, LogicalName, NameCodec, to_bytes

if TYPE_CHECKING:
    from namestore.config import Settings

logger = logging.getLogger(__name__)

# Stripped off the end of scanned paths before the suffix check
_TRAILING_ARTIFACTS = os.curdir + "".join(PATH_SEPARATORS)


class StorageIndex(Storage):
    """Storage over a local (or injected) filesystem backend.

    Attributes:
        config: Immutable root/prefix/suffix.
        codec: Validated name codec built from config.
        backend: Filesystem backend for I/O.
    """

    def __init__(self, config: StorageConfig, backend: FilesystemBackend | None = None) -> None:
        self.config = config
        self.codec = NameCodec(config.prefix, config.suffix)
        self.backend = backend or LocalFilesystemBackend()

    @classmethod
    def from_config(cls, config: StorageConfig) -> "StorageIndex":
        """Create a StorageIndex on the local filesystem from config."""
        return cls(config=config, backend=LocalFilesystemBackend())

    @classmethod
    def from_settings(cls, settings: Settings | None = None) -> "StorageIndex":
        """Create a StorageIndex from environment settings.

        Args:
            settings: Settings to use (defaults to the cached get_settings()).
        """
        if settings is None:
            from namestore.config import get_settings

            settings = get_settings()
        return cls.from_config(settings.get_storage_config())

    @property
    def root(self) -> str:
        return self.config.root

    def get(self, name: LogicalName) -> StoredFile:
        self._ensure_initialized()
        path = self._absolute_path(name)
        if not self.backend.exists(path):
            raise NotFoundError(to_bytes(name), path)
        return self._file(name)

    def exists(self, name: LogicalName) -> bool:
        self._ensure_initialized()
        return self.backend.exists(self._absolute_path(name))

    def touch(self, name: LogicalName) -> StoredFile:
        """Create an empty file, creating the chunk directories it needs."""
        self._ensure_initialized()
        path = self._absolute_path(name)
        parent = os.path.dirname(path)
        if not self.backend.exists(parent):
            self.backend.mkdir(parent, recursive=True)
        self.backend.touch(path)
        return self._file(name)

    def dump(self, name: LogicalName, contents: bytes) -> StoredFile:
        """Touch the file, then overwrite it with contents.

        Not atomic: a failed write leaves an empty file behind.
        """
        file = self.touch(name)
        self.backend.write(file.path, contents)
        logger.debug(f"Wrote {len(contents)} bytes to {file.path}")
        return file

    def read(self, name: LogicalName) -> bytes:
        self._ensure_initialized()
        path = self._absolute_path(name)
        if not self.backend.exists(path):
            raise NotFoundError(to_bytes(name), path)
        return self.backend.read(path)

    def mkdir(self, name: LogicalName) -> StoredFile:
        self._ensure_initialized()
        self.backend.mkdir(self._absolute_path(name), recursive=True)
        return self._file(name)

    def remove(self, name: LogicalName) -> None:
        self._ensure_initialized()
        path = self._absolute_path(name)
        if not self.backend.exists(path):
            raise NotFoundError(to_bytes(name), path)
        self.backend.remove(path, recursive=True)
        logger.info(f"Removed {path}")

    def all(self) -> list[StoredFile]:
        self._ensure_initialized()
        return [self._file(self._decode(rel)) for rel in self._relative_paths()]

    def count(self) -> int:
        self._ensure_initialized()
        # Decode every entry so a malformed one fails here as it does in all()
        return sum(1 for rel in self._relative_paths() if self._decode(rel) is not None)

    def clear(self) -> None:
        """Remove every recognized entry. Stops at the first failure."""
        self._ensure_initialized()
        files = self.all()
        for file in files:
            file.remove(self.backend)
        logger.info(f"Cleared {len(files)} entries from {self.root}")

    def _ensure_initialized(self) -> None:
        if not self.backend.exists(self.root):
            logger.info(f"Creating storage root {self.root}")
            self.backend.mkdir(self.root, recursive=True)

    def _absolute_path(self, name: LogicalName) -> str:
        return os.path.join(self.root, self.codec.encode(name))

    def _file(self, name: LogicalName) -> StoredFile:
        return StoredFile(
            root=self.root,
            name=to_bytes(name),
            prefix=self.codec.prefix,
            suffix=self.codec.suffix,
        )

    def _admits(self, relative_path: str) -> bool:
        """Recognition filter for a scanned entry.

        Entries must start with the prefix, and must not sit directly inside
        a directory ending with the suffix: such a directory is itself an
        entry created by mkdir, and its contents are not.
        """
        return relative_path.startswith(self.codec.prefix) and not os.path.dirname(
            relative_path
        ).endswith(self.codec.suffix)

    def _relative_paths(self) -> Iterator[str]:
        """Relative paths of every recognized entry under the root."""
        for relative_path, _ in self.backend.list_recursive(self.root, descend=self._admits):
            trimmed = relative_path.rstrip(_TRAILING_ARTIFACTS)
            if not self._admits(trimmed):
                logger.debug(f"Skipping foreign entry {relative_path}")
                continue
            # Intermediate chunk directories never carry the suffix
            if trimmed.endswith(self.codec.suffix):
                yield trimmed

    def _decode(self, relative_path: str) -> bytes:
        try:
            return self.codec.decode(relative_path)
        except MalformedNameError as e:
            logger.error(f"Recognized entry failed to decode: {e}")
            raise ScanInvariantError(self.root, relative_path) from e
