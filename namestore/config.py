"""Application configuration with Pydantic Settings.

Settings are loaded from environment variables and .env files.

Examples:
    >>> from namestore.config import get_settings
    >>> get_settings().STORAGE_SUFFIX
    '.bin'

    >>> get_settings().get_storage_config()
    StorageConfig(root='./data/namestore', prefix='f_', suffix='.bin')

Tests:
    - tests/unit/test_config.py
"""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from namestore.storage.config import StorageConfig


class Settings(BaseSettings):
    """Storage settings.

    Prefix and suffix are checked for clashes with encoded names when a
    StorageIndex is built from them, not here.

    Attributes:
        STORAGE_ROOT: Root directory for stored files.
        STORAGE_PREFIX: Leading marker of managed entries.
        STORAGE_SUFFIX: Trailing marker of managed entries.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

    STORAGE_ROOT: str = Field(
        default="./data/namestore",
        description="Storage root directory",
    )
    STORAGE_PREFIX: str = Field(
        default="f_",
        description="Leading marker of managed entries",
    )
    STORAGE_SUFFIX: str = Field(
        default=".bin",
        description="Trailing marker of managed entries",
    )

    @field_validator("STORAGE_ROOT")
    @classmethod
    def validate_root(cls, v: str) -> str:
        """Reject an empty or blank root."""
        if not v.strip():
            raise ValueError("STORAGE_ROOT must not be empty")
        return v

    def get_storage_config(self) -> StorageConfig:
        """Build the storage configuration.

        Returns:
            StorageConfig: root, prefix and suffix from these settings.
        """
        return StorageConfig(
            root=self.STORAGE_ROOT,
            prefix=self.STORAGE_PREFIX,
            suffix=self.STORAGE_SUFFIX,
        )


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance.

    Returns:
        Settings: The application settings.
    """
    return Settings()
