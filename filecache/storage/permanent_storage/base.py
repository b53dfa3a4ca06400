"""Abstract base class for permanent storage backends.

Permanent storage holds store configuration that must outlive the process.
Unlike cache items, nothing in permanent storage expires.
"""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any


class PermanentStorage(ABC):
    """Abstract base class for permanent storage implementations.

    Records are keyed by store name.
    """

    @abstractmethod
    def save(self, key: str, data: Any) -> Path:
        """Save a record, fully replacing any previous one.

        Args:
            key: Store name.
            data: Record to store.

        Returns:
            Path where the record was stored.
        """
        ...

    @abstractmethod
    def load(self, key: str) -> Any | None:
        """Load a record.

        Args:
            key: Store name.

        Returns:
            The record if found, None otherwise.
        """
        ...

    @abstractmethod
    def delete(self, key: str) -> bool:
        """Delete a record.

        Args:
            key: Store name.

        Returns:
            True if a record was deleted, False if not found.
        """
        ...

    @abstractmethod
    def exists(self, key: str) -> bool:
        """Check if a record exists.

        Args:
            key: Store name.
        """
        ...

    @abstractmethod
    def list_keys(self) -> list[str]:
        """List the names of all stored records, sorted."""
        ...
