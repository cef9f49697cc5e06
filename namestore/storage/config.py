"""Storage configuration model."""

from __future__ import annotations

import os
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


class StorageConfig(BaseModel):
    """Configuration for a storage root.

    Immutable once built; prefix/suffix are checked by NameCodec when the
    storage is constructed.

    Attributes:
        root: Root directory holding the encoded entries (str or os.PathLike).
        prefix: Leading marker of every managed entry.
        suffix: Trailing marker of every managed entry.
    """

    model_config = ConfigDict(frozen=True)

    root: str = Field(min_length=1, description="Storage root directory")
    prefix: str = Field(description="Leading marker of managed entries")
    suffix: str = Field(description="Trailing marker of managed entries")

    @field_validator("root", mode="before")
    @classmethod
    def coerce_root(cls, v: Any) -> Any:
        """Accept pathlib.Path and other path-like roots."""
        if isinstance(v, os.PathLike):
            return os.fspath(v)
        return v
