"""Pytest configuration and fixtures."""

import tempfile
from pathlib import Path

import pytest

from filecache.models.model_config import StoreConfig
from filecache.storage.cache.file_caching import FileCache
from filecache.storage.paths import PathResolver


class FakeClock:
    """Clock returning a fixed time until advanced."""

    def __init__(self, now: float = 1_700_000_000.0):
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def temp_dir():
    """Create a temporary directory for testing."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def resolver(temp_dir: Path) -> PathResolver:
    """Create a PathResolver with the temporary directory as document root."""
    return PathResolver(document_root=temp_dir)


@pytest.fixture
def make_cache(temp_dir: Path, resolver: PathResolver, clock: FakeClock):
    """Factory opening stores in the temporary directory with the fake clock."""

    def _make(name: str = "test_store", config: StoreConfig | None = None, **options) -> FileCache:
        options.setdefault("path", temp_dir)
        options.setdefault("resolver", resolver)
        options.setdefault("clock", clock)
        return FileCache(name, config, **options)

    return _make


@pytest.fixture
def file_cache(make_cache) -> FileCache:
    """Create a variable ttl FileCache in the temporary directory."""
    return make_cache()
