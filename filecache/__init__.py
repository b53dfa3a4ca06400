"""File-backed key-value cache stores with per-item time-to-live."""

from filecache.broker import CacheBroker
from filecache.exceptions import (
    AlreadyExistsError,
    ConfigurationError,
    EmptyCandidateError,
    FileCacheError,
    InvalidArgumentError,
    InvalidKeyError,
    InvalidNameError,
    NotFoundError,
    PathError,
    ReadError,
    SerializeError,
    StoreDestroyedError,
    WriteError,
)
from filecache.models import FileModeProfile, StoreConfig, StoreSettings
from filecache.storage.cache.file_caching import FileCache
from filecache.storage.paths import PathResolver
from filecache.storage.registry import list_instances

__all__ = [
    "AlreadyExistsError",
    "CacheBroker",
    "ConfigurationError",
    "EmptyCandidateError",
    "FileCache",
    "FileCacheError",
    "FileModeProfile",
    "InvalidArgumentError",
    "InvalidKeyError",
    "InvalidNameError",
    "NotFoundError",
    "PathError",
    "PathResolver",
    "ReadError",
    "SerializeError",
    "StoreConfig",
    "StoreDestroyedError",
    "StoreSettings",
    "WriteError",
    "list_instances",
]
