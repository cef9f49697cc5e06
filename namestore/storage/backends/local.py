"""Local filesystem backend using pathlib."""

from __future__ import annotations

import logging
import os
import shutil
from collections.abc import Callable, Iterator
from pathlib import Path

from namestore.storage.backends.base import FilesystemBackend

logger = logging.getLogger(__name__)


def _raise(error: OSError) -> None:
    raise error


class LocalFilesystemBackend(FilesystemBackend):
    """Pathlib-based local filesystem backend."""

    def exists(self, path: str) -> bool:
        """Check if a local path exists."""
        return Path(path).exists()

    def is_dir(self, path: str) -> bool:
        return Path(path).is_dir()

    def mkdir(self, path: str, recursive: bool = True) -> None:
        """Create a local directory."""
        Path(path).mkdir(parents=recursive, exist_ok=True)

    def touch(self, path: str) -> None:
        Path(path).touch(exist_ok=True)

    def write(self, path: str, data: bytes) -> None:
        """Write binary data to a local file."""
        p = Path(path)
        p.parent.mkdir(parents=True, exist_ok=True)
        p.write_bytes(data)

    def read(self, path: str) -> bytes:
        return Path(path).read_bytes()

    def remove(self, path: str, recursive: bool = True) -> None:
        """Delete a local file or directory.

        Symlinks are unlinked, never followed.
        """
        p = Path(path)
        if p.is_symlink() or not p.is_dir():
            p.unlink()
        elif recursive:
            shutil.rmtree(p)
        else:
            p.rmdir()

    def list_recursive(
        self,
        root: str,
        descend: Callable[[str], bool] | None = None,
    ) -> Iterator[tuple[str, bool]]:
        """Walk a local directory tree with os.walk, following symlinks."""
        for dirpath, dirnames, filenames in os.walk(root, onerror=_raise, followlinks=True):
            rel_dir = os.path.relpath(dirpath, root)
            if rel_dir == os.curdir:
                rel_dir = ""

            kept = []
            for dirname in dirnames:
                rel = os.path.join(rel_dir, dirname)
                yield rel, True
                if descend is None or descend(rel):
                    kept.append(dirname)
                else:
                    logger.debug(f"Pruned {rel}")
            # os.walk only descends into what is left in dirnames
            dirnames[:] = kept

            for filename in filenames:
                yield os.path.join(rel_dir, filename), False
