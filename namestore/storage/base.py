"""Abstract storage interface.

Anything that stores files under logical names implements Storage, so
callers and tests can swap implementations freely.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterator

from namestore.storage.file import StoredFile
from namestore.storage.naming import LogicalName


class Storage(ABC):
    """Files addressed by logical name.

    Iterating yields every stored file; ``len()`` counts them and ``in``
    checks existence.
    """

    @abstractmethod
    def get(self, name: LogicalName) -> StoredFile:
        """Get a handle for an existing file.

        Raises:
            NotFoundError: If nothing is stored under the name.
        """

    @abstractmethod
    def exists(self, name: LogicalName) -> bool:
        """Check whether something is stored under the name."""

    @abstractmethod
    def touch(self, name: LogicalName) -> StoredFile:
        """Create an empty file unless one already exists."""

    @abstractmethod
    def dump(self, name: LogicalName, contents: bytes) -> StoredFile:
        """Create or overwrite a file with contents."""

    @abstractmethod
    def read(self, name: LogicalName) -> bytes:
        """Read a stored file.

        Raises:
            NotFoundError: If nothing is stored under the name.
        """

    @abstractmethod
    def mkdir(self, name: LogicalName) -> StoredFile:
        """Create a directory entry under the name."""

    @abstractmethod
    def remove(self, name: LogicalName) -> None:
        """Delete a stored file or directory entry.

        Raises:
            NotFoundError: If nothing is stored under the name.
        """

    @abstractmethod
    def all(self) -> list[StoredFile]:
        """Every stored entry, in no particular order."""

    @abstractmethod
    def count(self) -> int:
        """Number of stored entries."""

    @abstractmethod
    def clear(self) -> None:
        """Remove every stored entry."""

    def is_empty(self) -> bool:
        return self.count() == 0

    def __len__(self) -> int:
        return self.count()

    def __iter__(self) -> Iterator[StoredFile]:
        return iter(self.all())

    def __contains__(self, name: object) -> bool:
        if not isinstance(name, (str, bytes)):
            return False
        return self.exists(name)
