"""In-memory filesystem backend.

Keeps a directory tree in dicts so StorageIndex can run without touching
disk. Errors mirror what pathlib raises for the same calls. Symlinks are
not modelled.

Examples:
    >>> from namestore.storage.backends.memory import MemoryFilesystemBackend
    >>> fs = MemoryFilesystemBackend()
    >>> fs.mkdir("/store/a")
    >>> fs.write("/store/a/x", b"1")
    >>> sorted(fs.list_recursive("/store"))
    [('a', True), ('a/x', False)]
"""

from __future__ import annotations

import errno
import os
from collections.abc import Callable, Iterator

from namestore.storage.backends.base import FilesystemBackend


def _error(cls: type[OSError], code: int, path: str) -> OSError:
    return cls(code, os.strerror(code), path)


class MemoryFilesystemBackend(FilesystemBackend):
    """Dict-backed filesystem backend.

    Attributes:
        files: Normalized file path -> contents.
        dirs: Normalized directory paths.
    """

    def __init__(self) -> None:
        self.files: dict[str, bytes] = {}
        self.dirs: set[str] = set()

    @staticmethod
    def _norm(path: str) -> str:
        return os.path.normpath(path)

    @staticmethod
    def _is_anchor(path: str) -> bool:
        # Filesystem root, or the implicit parent of a relative path
        return path in ("", os.curdir) or os.path.dirname(path) == path

    def _dir_exists(self, path: str) -> bool:
        return self._is_anchor(path) or path in self.dirs

    def _require_parent(self, path: str) -> None:
        parent = os.path.dirname(path)
        if parent in self.files:
            raise _error(NotADirectoryError, errno.ENOTDIR, parent)
        if not self._dir_exists(parent):
            raise _error(FileNotFoundError, errno.ENOENT, path)

    def _children(self, path: str) -> list[str]:
        return [
            p for p in (*self.files, *self.dirs)
            if (os.path.dirname(p) or os.curdir) == path and p != path
        ]

    def exists(self, path: str) -> bool:
        p = self._norm(path)
        return p in self.files or self._dir_exists(p)

    def is_dir(self, path: str) -> bool:
        return self._dir_exists(self._norm(path))

    def mkdir(self, path: str, recursive: bool = True) -> None:
        p = self._norm(path)
        if p in self.files:
            raise _error(FileExistsError, errno.EEXIST, p)
        if self._dir_exists(p):
            return
        parent = os.path.dirname(p)
        if recursive and not self._dir_exists(parent) and parent not in self.files:
            self.mkdir(parent, recursive=True)
        self._require_parent(p)
        self.dirs.add(p)

    def touch(self, path: str) -> None:
        p = self._norm(path)
        if p in self.files or p in self.dirs:
            return
        self._require_parent(p)
        self.files[p] = b""

    def write(self, path: str, data: bytes) -> None:
        p = self._norm(path)
        if self._dir_exists(p):
            raise _error(IsADirectoryError, errno.EISDIR, p)
        self.mkdir(os.path.dirname(p) or os.curdir)
        self.files[p] = bytes(data)

    def read(self, path: str) -> bytes:
        p = self._norm(path)
        if self._dir_exists(p):
            raise _error(IsADirectoryError, errno.EISDIR, p)
        try:
            return self.files[p]
        except KeyError:
            raise _error(FileNotFoundError, errno.ENOENT, p) from None

    def remove(self, path: str, recursive: bool = True) -> None:
        p = self._norm(path)
        if p in self.files:
            del self.files[p]
            return
        if p not in self.dirs:
            raise _error(FileNotFoundError, errno.ENOENT, p)

        below = p + os.sep
        nested = [k for k in (*self.files, *self.dirs) if k.startswith(below)]
        if nested and not recursive:
            raise _error(OSError, errno.ENOTEMPTY, p)
        for k in nested:
            self.files.pop(k, None)
            self.dirs.discard(k)
        self.dirs.discard(p)

    def list_recursive(
        self,
        root: str,
        descend: Callable[[str], bool] | None = None,
    ) -> Iterator[tuple[str, bool]]:
        r = self._norm(root)
        if r in self.files:
            raise _error(NotADirectoryError, errno.ENOTDIR, r)
        if not self._dir_exists(r):
            raise _error(FileNotFoundError, errno.ENOENT, r)
        yield from self._walk(r, "", descend)

    def _walk(
        self,
        path: str,
        rel_dir: str,
        descend: Callable[[str], bool] | None,
    ) -> Iterator[tuple[str, bool]]:
        children = sorted(self._children(path))
        kept = []
        for child in children:
            if child in self.dirs:
                rel = os.path.join(rel_dir, os.path.basename(child))
                yield rel, True
                if descend is None or descend(rel):
                    kept.append((child, rel))
        for child in children:
            if child in self.files:
                yield os.path.join(rel_dir, os.path.basename(child)), False
        for child, rel in kept:
            yield from self._walk(child, rel, descend)
