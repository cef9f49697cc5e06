"""Exceptions raised by the storage layer.

Backend I/O failures are not wrapped: they surface as the ``OSError``
raised by the backend.
"""

from __future__ import annotations


class StorageError(Exception):
    """Base exception for storage errors."""


class ConfigurationError(StorageError, ValueError):
    """Invalid storage configuration (markers, root, settings)."""


class MalformedNameError(StorageError, ValueError):
    """A physical path could not be decoded into a logical name.

    Attributes:
        path: The physical path presented for decoding.
        prefix: Expected leading marker.
        suffix: Expected trailing marker.
        reason: Short description of what failed.
    """

    def __init__(self, path: str, prefix: str, suffix: str, reason: str) -> None:
        """Initialize malformed name error.

        Args:
            path: Physical path that failed to decode.
            prefix: Expected leading marker.
            suffix: Expected trailing marker.
            reason: What failed.
        """
        super().__init__(reason)
        self.path = path
        self.prefix = prefix
        self.suffix = suffix
        self.reason = reason

    def __str__(self) -> str:
        return (
            f"Failed to decode name '{self.path}' "
            f"(prefix '{self.prefix}', suffix '{self.suffix}'): {self.reason}"
        )


class NotFoundError(StorageError, KeyError):
    """A logical name has no entry in storage.

    Attributes:
        name: The logical name that was looked up.
        path: The physical path that was checked.
    """

    def __init__(self, name: bytes, path: str) -> None:
        super().__init__(name)
        self.name = name
        self.path = path

    def __str__(self) -> str:
        return f"File {self.name!r} does not exist in storage ({self.path})"


class ScanInvariantError(StorageError, RuntimeError):
    """A scanned entry passed the recognition filter but did not decode.

    Always chained from the underlying MalformedNameError.

    Attributes:
        root: Storage root that was being scanned.
        path: Offending entry, relative to root.
    """

    def __init__(self, root: str, path: str) -> None:
        self.root = root
        self.path = path
        super().__init__(root, path)

    def __str__(self) -> str:
        return (
            f"Entry '{self.path}' under {self.root} passed the recognition "
            f"filter but is not a valid encoded name"
        )
