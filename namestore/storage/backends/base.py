"""Abstract base class for filesystem backends."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable, Iterator


class FilesystemBackend(ABC):
    """Abstract filesystem collaborator used by StorageIndex.

    Implementations perform raw I/O only; they know nothing about
    name encoding. Failures surface as ``OSError`` subclasses.
    """

    @abstractmethod
    def exists(self, path: str) -> bool:
        """Check if a path exists.

        Args:
            path: Path to check.

        Returns:
            True if the path exists.
        """

    @abstractmethod
    def is_dir(self, path: str) -> bool:
        """Check if a path is an existing directory."""

    @abstractmethod
    def mkdir(self, path: str, recursive: bool = True) -> None:
        """Create a directory. Creating an existing directory is not an error.

        Args:
            path: Directory path.
            recursive: Create missing parent directories too.
        """

    @abstractmethod
    def touch(self, path: str) -> None:
        """Create an empty file if it does not exist; keep existing content.

        Args:
            path: Full file path.
        """

    @abstractmethod
    def write(self, path: str, data: bytes) -> None:
        """Overwrite a file with binary data.

        Args:
            path: Full file path.
            data: Binary data to write.
        """

    @abstractmethod
    def read(self, path: str) -> bytes:
        """Read the full contents of a file.

        Args:
            path: Full file path.

        Returns:
            File contents.
        """

    @abstractmethod
    def remove(self, path: str, recursive: bool = True) -> None:
        """Delete a file, or a directory and all of its contents.

        Args:
            path: Path to delete.
            recursive: Allow deleting non-empty directories.
        """

    @abstractmethod
    def list_recursive(
        self,
        root: str,
        descend: Callable[[str], bool] | None = None,
    ) -> Iterator[tuple[str, bool]]:
        """Walk everything below root, top-down, following symlinks.

        Args:
            root: Directory to walk.
            descend: Called with a directory's relative path; returning
                False skips everything below that directory.

        Yields:
            (relative_path, is_directory) for every entry except root itself.
        """
