"""Cache broker, decoupling code using caches from the store configuration.

Code asks the broker for a store by name and type alias; the broker creates
the store once and hands out the same instance afterwards. Hold a broker in
your application's container rather than creating one per use.
"""

import logging
from pathlib import Path
from typing import Any

from filecache.exceptions import InvalidArgumentError, InvalidNameError
from filecache.models.model_config import STORE_PRESETS, StoreConfig
from filecache.storage.cache.base import Cache
from filecache.storage.cache.file_caching import FileCache
from filecache.storage.cache.key_validation import validate_name
from filecache.storage.paths import PathResolver

logger = logging.getLogger(__name__)

# Type aliases, for searching code for usage
CACHE_BASE = "base"
CACHE_DEFAULT = "default"
CACHE_VARIABLE_TTL = "variable_ttl"
CACHE_FIXED_TTL = "fixed_ttl"
CACHE_PERSISTENT = "persistent"
CACHE_KEY_LONG_VARIABLE_TTL = "key_long_variable_ttl"
CACHE_KEY_LONG_FIXED_TTL = "key_long_fixed_ttl"
CACHE_KEY_LONG_PERSISTENT = "key_long_persistent"


class CacheBroker:
    """Creates and keeps cache stores by name."""

    def __init__(
        self,
        path: Path | str | None = None,
        resolver: PathResolver | None = None,
        presets: dict[str, Any] | None = None,
    ):
        """Initialize CacheBroker.

        Args:
            path: Base path of the stores it creates.
            resolver: PathResolver shared by the stores it creates.
            presets: Alias to StoreConfig factory mapping; defaults to STORE_PRESETS.
        """
        self.path = path
        self.resolver = resolver or PathResolver()
        self.presets = dict(presets or STORE_PRESETS)
        self._stores: dict[str, Cache] = {}

    def get_store(self, name: str, alias: str = CACHE_DEFAULT, **options: Any) -> Cache:
        """Get a store, creating it on first request.

        Args:
            name: Store name.
            alias: Preset alias; empty means default. Ignored if the store
                has already been created.
            **options: Passed to the FileCache constructor.

        Raises:
            InvalidNameError: Illegal store name.
            InvalidArgumentError: Unknown alias.
        """
        self._validate_name(name)
        if name in self._stores:
            return self._stores[name]

        config = self._config(alias)
        options.setdefault("path", self.path)
        options.setdefault("resolver", self.resolver)
        store = FileCache(name, config, **options)
        self._stores[name] = store
        logger.debug(f"Broker created store {name} of type {alias or CACHE_DEFAULT}")
        return store

    def has_store(self, name: str) -> bool:
        """Check whether this broker holds a store by that name."""
        self._validate_name(name)
        return name in self._stores

    def register_store(self, name: str, store: Cache) -> bool:
        """Register an externally created store, replacing any by that name."""
        self._validate_name(name)
        self._stores[name] = store
        return True

    def __getitem__(self, name: str) -> Cache:
        return self._stores[name]

    def __contains__(self, name: object) -> bool:
        return name in self._stores

    def __iter__(self):
        return iter(self._stores)

    def _config(self, alias: str) -> StoreConfig:
        factory = self.presets.get(alias or CACHE_DEFAULT)
        if factory is None:
            raise InvalidArgumentError(f"Unsupported cache type alias[{alias}].")
        return factory()

    @staticmethod
    def _validate_name(name: str) -> None:
        if not validate_name(name):
            raise InvalidNameError(f"Arg name is not valid, name[{name}].")
