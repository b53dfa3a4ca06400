"""Abstract base classes for cache stores.

Cache is the simple get/set/delete/clear contract with per-item time-to-live.
ManageableCache adds store management, BackupCache whole-store backup and
safe-mode rebuilding via a candidate store.
"""

from abc import ABC, abstractmethod
from collections.abc import Iterable, Mapping
from datetime import timedelta
from typing import Any

Ttl = int | timedelta | None


class Cache(ABC):
    """Abstract base class for cache implementations."""

    @abstractmethod
    def get(self, key: str, default: Any = None) -> Any:
        """Get a value from the cache.

        Args:
            key: Unique identifier for the cached value.
            default: Returned if the item doesn't exist or has expired.

        Returns:
            Cached value if found and not expired, default otherwise.
        """
        ...

    @abstractmethod
    def set(self, key: str, value: Any, ttl: Ttl = None) -> bool:
        """Store a value in the cache.

        Args:
            key: Unique identifier for the cached value.
            value: Value to cache.
            ttl: Time-to-live. None uses the store's default, 0 means forever.

        Returns:
            True; failures raise.
        """
        ...

    @abstractmethod
    def delete(self, key: str) -> bool:
        """Delete a value from the cache; deleting a missing item succeeds."""
        ...

    @abstractmethod
    def clear(self) -> int:
        """Delete all items of the store.

        Returns:
            Number of items deleted.
        """
        ...

    @abstractmethod
    def has(self, key: str) -> bool:
        """Check if a key exists in the cache and is not expired."""
        ...

    @abstractmethod
    def validate_key(self, key: Any) -> bool:
        """Check that a key is legal for this store."""
        ...

    def get_multiple(self, keys: Iterable[str], default: Any = None) -> dict[str, Any]:
        """Get several values; missing or expired items map to default."""
        keys = list(keys)
        self._validate_keys(keys)
        return {key: self.get(key, default) for key in keys}

    def set_multiple(self, values: Mapping[str, Any] | Iterable[tuple[str, Any]], ttl: Ttl = None) -> bool:
        """Set several values.

        Keys are validated up front. Writing stops at the first failing item,
        and items written before it are not rolled back.
        """
        pairs = list(values.items()) if isinstance(values, Mapping) else list(values)
        self._validate_keys([key for key, _ in pairs])
        for key, value in pairs:
            self.set(key, value, ttl)
        return True

    def delete_multiple(self, keys: Iterable[str]) -> bool:
        """Delete several items."""
        keys = list(keys)
        self._validate_keys(keys)
        for key in keys:
            self.delete(key)
        return True

    @abstractmethod
    def _validate_keys(self, keys: Iterable[Any]) -> None:
        """Raise on the first invalid key."""
        ...


class ManageableCache(Cache):
    """Cache with store management operations."""

    @abstractmethod
    def is_empty(self) -> bool:
        """Check whether the store holds no items at all, expired or not."""
        ...

    @abstractmethod
    def set_ttl_default(self, ttl: Ttl) -> None:
        """Change the store's default time-to-live and persist it."""
        ...

    @abstractmethod
    def set_ttl_ignore(self, ignore: bool) -> None:
        """Control whether ttl arguments of item setters are ignored."""
        ...

    @abstractmethod
    def clear_expired(self) -> int:
        """Delete all items past end of life (and grace).

        Returns:
            Number of items deleted.
        """
        ...

    @abstractmethod
    def destroy(self) -> bool:
        """Delete all items, the store's settings and its directory."""
        ...

    @abstractmethod
    def export(self) -> dict[str, Any]:
        """Read all non-expired, non-None items into a dict ordered by key."""
        ...

    @classmethod
    @abstractmethod
    def list_instances(cls, *args: Any, **kwargs: Any) -> list["ManageableCache"]:
        """Find and instantiate all persisted stores."""
        ...


class BackupCache(Cache):
    """Cache supporting whole-store backup, restore and candidate promotion."""

    @abstractmethod
    def backup(self, backup_name: str | None = None) -> int:
        """Copy all items to a named backup.

        Returns:
            Number of items copied.
        """
        ...

    @abstractmethod
    def restore(self, backup_name: str) -> bool:
        """Replace the store with a backup; the backup ceases to exist."""
        ...

    @abstractmethod
    def set_candidate(self) -> None:
        """Make setters write to a candidate store instead of the live one.

        Facilitates building a complete new cache without exposing it to
        readers before all items have been set.
        """
        ...

    @abstractmethod
    def promote_candidate(self, backup_name: str | None = None) -> bool:
        """Back up the live store and replace it with the candidate.

        Returns:
            False if there is no candidate.
        """
        ...
