"""
Pytest configuration and fixtures for namestore tests.

Storage fixtures come in two flavours: rooted in pytest's tmp_path on the
local filesystem, or backed by the in-memory filesystem.
"""
import sys
from pathlib import Path

import pytest

# Add package to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from namestore.storage.backends.local import LocalFilesystemBackend
from namestore.storage.backends.memory import MemoryFilesystemBackend
from namestore.storage.config import StorageConfig
from namestore.storage.index import StorageIndex

PREFIX = "f_"
SUFFIX = ".bin"


# ============================================
# Storage Fixtures
# ============================================

@pytest.fixture
def storage_root(tmp_path: Path) -> Path:
    """Root directory for a local storage (not created yet)."""
    return tmp_path / "store"


@pytest.fixture
def storage_config(storage_root: Path) -> StorageConfig:
    return StorageConfig(root=storage_root, prefix=PREFIX, suffix=SUFFIX)


@pytest.fixture
def local_index(storage_config: StorageConfig) -> StorageIndex:
    """StorageIndex on the local filesystem under tmp_path."""
    return StorageIndex(config=storage_config, backend=LocalFilesystemBackend())


@pytest.fixture
def memory_backend() -> MemoryFilesystemBackend:
    return MemoryFilesystemBackend()


@pytest.fixture
def memory_index(memory_backend: MemoryFilesystemBackend) -> StorageIndex:
    """StorageIndex on the in-memory filesystem."""
    config = StorageConfig(root="/store", prefix=PREFIX, suffix=SUFFIX)
    return StorageIndex(config=config, backend=memory_backend)


@pytest.fixture(params=["local", "memory"])
def index(request) -> StorageIndex:
    """StorageIndex on each backend in turn."""
    return request.getfixturevalue(f"{request.param}_index")


# ============================================
# Pytest Configuration
# ============================================

def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line(
        "markers", "fast: Fast unit tests (no filesystem access)"
    )
    config.addinivalue_line(
        "markers", "slow: Slow tests (large names, deep trees)"
    )
