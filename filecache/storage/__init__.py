"""Storage backends for cache stores.

This module provides:
- Cache, ManageableCache, BackupCache: Abstract base classes for cache stores
- FileCache: File-based cache store with TTL, backup and candidate support
- PathResolver: Resolution and creation of store directories
- PermanentStorage: Abstract base class for persistent settings storage
- SettingsManager: File-based store settings persistence
"""

from filecache.storage.cache.base import BackupCache, Cache, ManageableCache
from filecache.storage.cache.file_caching import FileCache
from filecache.storage.paths import PathResolver
from filecache.storage.permanent_storage.base import PermanentStorage
from filecache.storage.permanent_storage.settings_manager import SettingsManager

__all__ = [
    "BackupCache",
    "Cache",
    "FileCache",
    "ManageableCache",
    "PathResolver",
    "PermanentStorage",
    "SettingsManager",
]
