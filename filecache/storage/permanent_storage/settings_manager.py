"""File-based persistence of store settings sidecars.

Each store has one flat JSON file beside the store directories:

    {base}/
    ├── stores/{store}/...
    ├── tmp/
    └── {store}.json    # {"ttl_default": 0, "ttl_ignore": false, "file_mode": "group_write"}
"""

import logging
import os
import tempfile
from pathlib import Path

from pydantic import ValidationError

from filecache.consts import SETTINGS_EXTENSION, TMP_DIR
from filecache.exceptions import ReadError, WriteError
from filecache.models.model_settings import StoreSettings
from filecache.storage.cache.key_validation import validate_name
from filecache.storage.permanent_storage.base import PermanentStorage

logger = logging.getLogger(__name__)


class SettingsManager(PermanentStorage):
    """Loads and saves StoreSettings sidecars below a base path."""

    def __init__(self, base_dir: Path | str):
        """Initialize SettingsManager.

        Args:
            base_dir: Resolved base path of the stores.
        """
        self.base_dir = Path(base_dir)

    def path(self, key: str) -> Path:
        """Get the sidecar path of a store."""
        return self.base_dir / f"{key}{SETTINGS_EXTENSION}"

    def save(self, key: str, data: StoreSettings) -> Path:
        """Write a store's settings, replacing the file atomically.

        Args:
            key: Store name.
            data: Settings to persist.

        Returns:
            Path of the sidecar.

        Raises:
            WriteError: If the file cannot be written.
        """
        path = self.path(key)
        tmp_dir = self.base_dir / TMP_DIR
        if not tmp_dir.is_dir():
            tmp_dir = self.base_dir

        try:
            fd, tmp_name = tempfile.mkstemp(dir=tmp_dir, prefix=f"{key}.", suffix=".tmp")
        except OSError as e:
            raise WriteError(f"Failed to create temp file in dir[{tmp_dir}]: {e}") from e

        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(data.model_dump_json(indent=2))
            os.replace(tmp_name, path)
            path.chmod(data.file_mode.file_mode)
        except OSError as e:
            Path(tmp_name).unlink(missing_ok=True)
            raise WriteError(f"Failed to write store settings to file[{path}]: {e}") from e

        logger.info(f"Saved settings of store {key}: {data.model_dump(mode='json')}")
        return path

    def load(self, key: str) -> StoreSettings | None:
        """Load a store's settings.

        Args:
            key: Store name.

        Returns:
            StoreSettings, or None if the store has no sidecar (new store).

        Raises:
            ReadError: If the file exists but cannot be read or parsed.
        """
        path = self.path(key)
        try:
            content = path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return None
        except OSError as e:
            raise ReadError(f"Failed to read store settings, file[{path}]: {e}") from e

        try:
            return StoreSettings.model_validate_json(content)
        except ValidationError as e:
            raise ReadError(f"Invalid store settings, file[{path}]: {e}") from e

    def delete(self, key: str) -> bool:
        """Remove a store's sidecar.

        Raises:
            WriteError: If the file exists but cannot be removed.
        """
        path = self.path(key)
        try:
            path.unlink()
        except FileNotFoundError:
            return False
        except OSError as e:
            raise WriteError(f"Failed to remove store settings file[{path}]: {e}") from e
        logger.debug(f"Deleted settings of store {key}")
        return True

    def exists(self, key: str) -> bool:
        return self.path(key).is_file()

    def list_keys(self) -> list[str]:
        """List names of all stores having a sidecar.

        Files whose stem isn't a valid store name are skipped.
        """
        if not self.base_dir.is_dir():
            return []

        keys = []
        for path in self.base_dir.glob(f"*{SETTINGS_EXTENSION}"):
            if path.is_file() and validate_name(path.stem):
                keys.append(path.stem)
        return sorted(keys)
