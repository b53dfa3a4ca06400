"""Discovery of persisted stores, for management tooling."""

import logging
from pathlib import Path

from filecache.consts import DEFAULT_CACHE_PATH
from filecache.exceptions import InvalidNameError
from filecache.models.model_config import StoreConfig
from filecache.storage.cache.file_caching import FileCache
from filecache.storage.cache.key_validation import validate_name
from filecache.storage.paths import PathResolver
from filecache.storage.permanent_storage.settings_manager import SettingsManager

logger = logging.getLogger(__name__)


def list_instances(
    path: Path | str | None = None,
    resolver: PathResolver | None = None,
    config: StoreConfig | None = None,
) -> list[FileCache]:
    """Instantiate every store found below a base path.

    A store is found by its settings file; a store directory without one
    isn't listed.
    """
    stores = FileCache.list_instances(path, resolver=resolver, config=config)
    logger.debug(f"Found {len(stores)} stores")
    return stores


def find_store(
    name: str,
    path: Path | str | None = None,
    resolver: PathResolver | None = None,
    config: StoreConfig | None = None,
) -> FileCache | None:
    """Open a persisted store by name, without creating it if it doesn't exist.

    Raises:
        InvalidNameError: Illegal store name.
    """
    if not validate_name(name):
        raise InvalidNameError(f"Arg name is not valid, name[{name}].")
    resolver = resolver or PathResolver()
    base_dir = resolver.resolve(path if path is not None else DEFAULT_CACHE_PATH)
    if not SettingsManager(base_dir).exists(name):
        return None
    return FileCache(name, config, path=base_dir, resolver=resolver)
