"""File-based cache store.

Every item is a file named after its key; the file's modification time is the
item's end of life. Items are written to a temp file and renamed into place,
so a reader never sees a partially written item.

Directory structure:
    {base}/
    ├── stores/{store}/{key}                  # live items, mtime = end of life
    ├── tmp/                                  # temp files of atomic writes
    ├── candidates/{store}/{key}              # candidate store being built
    ├── backup/{store}/{backup name}/{key}    # backups, mtimes preserved
    └── {store}.json                          # store settings

Stores are safe to use from several processes at once, as far as rename is
atomic. Store objects do no locking of their own.
"""

import logging
import os
import shutil
import stat
import tempfile
import time
from collections.abc import Callable, Iterable, Iterator
from datetime import UTC, datetime, timedelta
from pathlib import Path
from typing import Any

from filecache.consts import (
    BACKUP_DIR,
    BACKUP_NAME_FORMAT,
    CANDIDATES_DIR,
    DEFAULT_CACHE_PATH,
    FOREVER_TIMESTAMP,
    GRACE_FACTOR,
    GRACE_FALLBACK_SECONDS,
    STORES_DIR,
    TMP_DIR,
)
from filecache.exceptions import (
    AlreadyExistsError,
    EmptyCandidateError,
    InvalidArgumentError,
    InvalidKeyError,
    InvalidNameError,
    NotFoundError,
    ReadError,
    SerializeError,
    StoreDestroyedError,
    WriteError,
)
from filecache.models.model_config import StoreConfig
from filecache.models.model_settings import FileModeProfile, StoreSettings
from filecache.serializers import PickleSerializer, Serializer
from filecache.storage.cache.base import BackupCache, ManageableCache, Ttl
from filecache.storage.cache.key_validation import validate_key, validate_long_key, validate_name
from filecache.storage.paths import PathResolver
from filecache.storage.permanent_storage.settings_manager import SettingsManager

logger = logging.getLogger(__name__)

# Valid keys naming a directory rather than an item file
DIRECTORY_KEYS = frozenset({".", ".."})


class FileCache(ManageableCache, BackupCache):
    """File-based cache store with time-to-live, backup and candidate support.

    Time-to-live semantics:
        - ttl_default 0 and ttl_ignore: expiry is disabled entirely.
        - ttl_ignore: every item gets ttl_default; ttl arguments are ignored.
        - otherwise: ttl None means ttl_default, 0 means forever.

    An expired item is left on disk for a grace period (half of ttl_default,
    or 15 minutes), to lessen the risk of deleting an item that a concurrent
    writer is just refreshing. It's still reported as a miss.
    """

    CACHE_TYPE = "file"

    def __init__(
        self,
        name: str,
        config: StoreConfig | None = None,
        *,
        path: Path | str | None = None,
        ttl_default: Ttl = None,
        ttl_ignore: bool | None = None,
        file_mode: FileModeProfile | str | None = None,
        serializer: Serializer | None = None,
        resolver: PathResolver | None = None,
        clock: Callable[[], float] | None = None,
    ):
        """Open a store, creating it if it doesn't exist.

        Options left as None fall back to the store's saved settings, then to
        the config preset.

        Args:
            name: Store name; same rules as a cache key.
            config: Preset supplying defaults and key length limit.
            path: Base path; relative is relative to the document root.
            ttl_default: Default time-to-live, 0 for forever.
            ttl_ignore: Whether to ignore ttl arguments of set().
            file_mode: Permission profile of directories and files.
            serializer: Serializer of item values. Defaults to pickle.
            resolver: PathResolver to share ensured-path bookkeeping with.
            clock: Returns current Unix time; defaults to time.time.

        Raises:
            InvalidNameError: Illegal store name.
            InvalidArgumentError: Illegal option value.
            ConfigurationError: Relative path and no document root.
            PathError: Directories cannot be created or aren't writable.
        """
        if not validate_name(name):
            raise InvalidNameError(f"Arg name is empty or contains illegal char(s), name[{name}].")
        self._name = name
        self.config = config or StoreConfig.variable_ttl()
        self.serializer = serializer or PickleSerializer()
        self.resolver = resolver or PathResolver()
        self._clock = clock or time.time
        self._path = path if path is not None else DEFAULT_CACHE_PATH

        self.base_dir = self.resolver.resolve(self._path)
        self.store_dir = self.base_dir / STORES_DIR / name
        self.tmp_dir = self.base_dir / TMP_DIR
        self.candidate_dir = self.base_dir / CANDIDATES_DIR / name
        self.backup_root = self.base_dir / BACKUP_DIR / name
        self._settings_manager = SettingsManager(self.base_dir)

        self._is_new = not self.store_dir.is_dir()
        self._candidate = False
        self._destroyed = False

        stored = self._settings_manager.load(name)
        self._settings = self._resolve_settings(stored, ttl_default, ttl_ignore, file_mode)

        self._ensure_directories()
        if self._settings != stored:
            self._settings_manager.save(name, self._settings)

        if self._is_new:
            logger.info(f"Created store {name} in {self.base_dir}")

    # === PROPERTIES ===

    @property
    def name(self) -> str:
        return self._name

    @property
    def type(self) -> str:
        return self.CACHE_TYPE

    @property
    def path(self) -> Path:
        """Resolved base path."""
        return self.base_dir

    @property
    def settings(self) -> StoreSettings:
        return self._settings

    @property
    def ttl_default(self) -> int:
        return self._settings.ttl_default

    @property
    def ttl_ignore(self) -> bool:
        return self._settings.ttl_ignore

    @property
    def file_mode(self) -> FileModeProfile:
        return self._settings.file_mode

    @property
    def max_key_length(self) -> int:
        return self.config.max_key_length

    @property
    def is_new(self) -> bool:
        """Whether the store's directory didn't exist at instantiation."""
        return self._is_new

    @property
    def is_candidate(self) -> bool:
        """Whether setters currently write to the candidate store."""
        return self._candidate

    @property
    def destroyed(self) -> bool:
        return self._destroyed

    @property
    def grace(self) -> float:
        """Seconds an expired item is left on disk before being deleted."""
        if self._settings.ttl_default > 0:
            return self._settings.ttl_default * GRACE_FACTOR
        return GRACE_FALLBACK_SECONDS

    # === CACHE OPERATIONS ===

    def validate_key(self, key: Any) -> bool:
        return validate_key(key, self.config.max_key_length)

    def get(self, key: str, default: Any = None) -> Any:
        """Get a value from the cache.

        Args:
            key: Item key.
            default: Returned if the item doesn't exist or has expired.

        Returns:
            The unserialized value, or default.

        Raises:
            InvalidKeyError: Illegal key.
            StoreDestroyedError: Store has been destroyed.
            ReadError: Existing item cannot be read or unserialized.
        """
        self._check(key)
        return self._read(self.store_dir / key, default)

    def set(self, key: str, value: Any, ttl: Ttl = None) -> bool:
        """Store a value in the cache.

        Args:
            key: Item key.
            value: Value to cache; must be serializable by the serializer.
            ttl: Seconds or timedelta. None: store default. 0: forever.
                Ignored if the store ignores ttl arguments.

        Returns:
            True.

        Raises:
            InvalidKeyError: Illegal key.
            InvalidArgumentError: Negative or wrongly typed ttl.
            StoreDestroyedError: Store has been destroyed.
            SerializeError: Value cannot be serialized.
            WriteError: Writing the file or setting its end of life failed.
        """
        self._check(key)
        if key in DIRECTORY_KEYS:
            raise InvalidKeyError(f"Arg key names a directory, key[{key}].")
        time_to_live = self._item_ttl(ttl)

        try:
            serialized = self.serializer.dumps(value)
        except Exception as e:
            raise SerializeError(f"Failed to serialize value of key[{key}]: {e}") from e

        target_dir = self.candidate_dir if self._candidate else self.store_dir
        path = target_dir / key
        self._write(path, serialized)

        if not self._settings.ttl_disabled:
            now = self._clock()
            end_of_life = now + time_to_live if time_to_live else FOREVER_TIMESTAMP
            try:
                os.utime(path, (now, end_of_life))
            except OSError as e:
                raise WriteError(f"Failed to set future modified time of file[{path}]: {e}") from e

        logger.debug(f"Set {key} in store {self.name} (ttl={time_to_live}s)")
        return True

    def delete(self, key: str) -> bool:
        """Delete an item; a missing item isn't an error.

        Raises:
            InvalidKeyError: Illegal key.
            StoreDestroyedError: Store has been destroyed.
            WriteError: Item exists but cannot be removed.
        """
        self._check(key)
        if key not in DIRECTORY_KEYS and self._unlink(self.store_dir / key):
            logger.debug(f"Deleted {key} from store {self.name}")
        return True

    def has(self, key: str) -> bool:
        """Check if an item exists and hasn't expired.

        Expired items past grace are deleted, as by get().
        """
        self._check(key)
        path = self.store_dir / key
        if self._settings.ttl_disabled:
            return path.is_file()

        end_of_life = self._end_of_life(path)
        if end_of_life is None:
            return False
        return not self._evict_if_expired(path, end_of_life)

    def clear(self) -> int:
        """Delete all items, skipping those that vanish meanwhile.

        Returns:
            Number of items deleted.
        """
        self._check_alive()
        count = 0
        for path in self._scan(self.store_dir):
            if self._unlink(path):
                count += 1
        logger.info(f"Cleared {count} items from store {self.name}")
        return count

    def _validate_keys(self, keys: Iterable[Any]) -> None:
        for key in keys:
            if not self.validate_key(key):
                raise InvalidKeyError(f"Arg key is not valid, key[{key}].")

    # === MANAGEMENT OPERATIONS ===

    def is_empty(self) -> bool:
        """Check whether the store holds no items, expired or not."""
        self._check_alive()
        return next(self._scan(self.store_dir), None) is None

    def set_ttl_default(self, ttl: Ttl) -> None:
        """Change the default time-to-live and persist it.

        Raises:
            InvalidArgumentError: ttl is None, negative or wrongly typed.
        """
        self._check_alive()
        if ttl is None:
            raise InvalidArgumentError("Arg ttl cannot be None.")
        self._update_settings(ttl_default=self._seconds(ttl))

    def set_ttl_ignore(self, ignore: bool) -> None:
        """Control whether ttl arguments of set() are ignored, and persist it."""
        self._check_alive()
        self._update_settings(ttl_ignore=bool(ignore))

    def clear_expired(self) -> int:
        """Delete all items past end of life plus grace.

        Returns:
            Number of items deleted; always 0 if expiry is disabled.
        """
        self._check_alive()
        if self._settings.ttl_disabled:
            return 0

        now = self._clock()
        grace = self.grace
        count = 0
        for path in self._scan(self.store_dir):
            end_of_life = self._end_of_life(path)
            if end_of_life is not None and now > end_of_life + grace and self._unlink(path):
                count += 1

        logger.info(f"Cleared {count} expired items from store {self.name}")
        return count

    def destroy(self) -> bool:
        """Delete all items, the settings file and the store directory.

        There is no rollback; on failure the error message tells which
        steps were done.

        Raises:
            StoreDestroyedError: Already destroyed.
            WriteError: A step failed.
        """
        self._check_alive()
        self.clear()
        try:
            self._settings_manager.delete(self.name)
        except WriteError as e:
            raise WriteError(f"Store {self.name} cleared, but settings not removed: {e}") from e

        try:
            self.store_dir.rmdir()
        except FileNotFoundError:
            pass
        except OSError as e:
            raise WriteError(
                f"Store {self.name} cleared and settings removed, "
                f"but failed to remove dir[{self.store_dir}]: {e}"
            ) from e

        self.resolver.forget(self.store_dir)
        self._candidate = False
        self._destroyed = True
        logger.info(f"Destroyed store {self.name}")
        return True

    def export(self) -> dict[str, Any]:
        """Read all non-expired, non-None items.

        Files named like a long key are exported whatever the store's key
        length limit, as stores listed from disk use the standard limit.

        Returns:
            Dict of values, ordered by key.
        """
        self._check_alive()
        items: dict[str, Any] = {}
        for key in sorted(path.name for path in self._scan(self.store_dir)):
            if not validate_long_key(key):
                continue
            value = self._read(self.store_dir / key, None)
            if value is not None:
                items[key] = value
        return items

    @classmethod
    def list_instances(
        cls,
        path: Path | str | None = None,
        resolver: PathResolver | None = None,
        config: StoreConfig | None = None,
    ) -> list["FileCache"]:
        """Instantiate every store that has a settings file below a base path.

        Args:
            path: Base path; defaults to DEFAULT_CACHE_PATH.
            resolver: PathResolver, also passed on to the stores.
            config: Preset of the stores; only its key length matters, since
                the saved settings win over the preset.

        Returns:
            Stores ordered by name.
        """
        resolver = resolver or PathResolver()
        base_dir = resolver.resolve(path if path is not None else DEFAULT_CACHE_PATH)
        names = SettingsManager(base_dir).list_keys()
        return [cls(name, config, path=base_dir, resolver=resolver) for name in names]

    # === BACKUP AND CANDIDATE OPERATIONS ===

    def backup(self, backup_name: str | None = None) -> int:
        """Copy all items to backup/{store}/{backup_name}, keeping end of life.

        Args:
            backup_name: Defaults to a timestamp like 20250101_120000.

        Returns:
            Number of items copied.

        Raises:
            InvalidNameError: Illegal backup name.
            AlreadyExistsError: Backup by that name exists.
            WriteError: Copying failed; the backup is left incomplete.
        """
        self._check_alive()
        backup_name = self._backup_name(backup_name)
        backup_dir = self.backup_root / backup_name
        if backup_dir.exists():
            raise AlreadyExistsError(f"Backup {backup_name} of store {self.name} already exists.")

        profile = self._settings.file_mode
        self.resolver.ensure_dir(self.backup_root, profile)
        try:
            backup_dir.mkdir()
            backup_dir.chmod(profile.dir_mode)
        except FileExistsError as e:
            raise AlreadyExistsError(f"Backup {backup_name} of store {self.name} already exists.") from e
        except OSError as e:
            raise WriteError(f"Failed to create backup dir[{backup_dir}]: {e}") from e

        count = 0
        for path in self._scan(self.store_dir):
            target = backup_dir / path.name
            try:
                shutil.copy2(path, target)
                target.chmod(profile.file_mode)
            except FileNotFoundError:
                if path.exists():
                    raise WriteError(f"Failed to copy file[{path}] to backup dir[{backup_dir}].")
                continue
            except OSError as e:
                raise WriteError(
                    f"Failed to copy file[{path}], backup dir[{backup_dir}] is incomplete: {e}"
                ) from e
            count += 1

        logger.info(f"Backed up {count} items of store {self.name} to {backup_name}")
        return count

    def restore(self, backup_name: str) -> bool:
        """Replace the live store with a backup.

        The backup directory is moved, not copied, so it's gone afterwards.

        Raises:
            InvalidNameError: Illegal backup name.
            NotFoundError: No such backup.
            WriteError: Removing the live store or moving the backup failed.
        """
        self._check_alive()
        if not validate_name(backup_name):
            raise InvalidNameError(f"Arg backup_name is not valid, backup_name[{backup_name}].")
        backup_dir = self.backup_root / backup_name
        if not backup_dir.is_dir():
            raise NotFoundError(f"Backup {backup_name} of store {self.name} doesn't exist.")

        self.clear()
        try:
            self.store_dir.rmdir()
        except FileNotFoundError:
            pass
        except OSError as e:
            raise WriteError(f"Store {self.name} cleared, but failed to remove dir[{self.store_dir}]: {e}") from e

        try:
            os.rename(backup_dir, self.store_dir)
        except OSError as e:
            raise WriteError(
                f"Store {self.name} has no live dir, failed to move backup dir[{backup_dir}] into place: {e}"
            ) from e

        logger.info(f"Restored store {self.name} from backup {backup_name}")
        return True

    def set_candidate(self) -> None:
        """Make set() write to candidates/{store}; get() and has() still read live."""
        self._check_alive()
        self.resolver.ensure_dir(self.candidate_dir, self._settings.file_mode)
        self._candidate = True
        logger.info(f"Store {self.name} now writes to candidate dir {self.candidate_dir}")

    def promote_candidate(self, backup_name: str | None = None) -> bool:
        """Back up the live store by renaming it, then rename the candidate to live.

        Not atomic: if the second rename fails, the store has no live dir
        until restored from the backup.

        Args:
            backup_name: Name of the backup of the replaced store.
                Defaults to a timestamp.

        Returns:
            False if there is no candidate, True when promoted.

        Raises:
            EmptyCandidateError: Candidate holds no items.
            AlreadyExistsError: Backup by that name exists.
            WriteError: A rename failed.
        """
        self._check_alive()
        if not self.candidate_dir.is_dir():
            logger.info(f"Store {self.name} has no candidate to promote")
            return False
        if next(self._scan(self.candidate_dir), None) is None:
            raise EmptyCandidateError(f"Refusing to promote empty candidate of store {self.name}.")

        backup_name = self._backup_name(backup_name)
        backup_dir = self.backup_root / backup_name
        if backup_dir.exists():
            raise AlreadyExistsError(f"Backup {backup_name} of store {self.name} already exists.")
        self.resolver.ensure_dir(self.backup_root, self._settings.file_mode)

        if self.store_dir.is_dir():
            try:
                os.rename(self.store_dir, backup_dir)
            except OSError as e:
                raise WriteError(f"Failed to move dir[{self.store_dir}] to backup dir[{backup_dir}]: {e}") from e

        try:
            os.rename(self.candidate_dir, self.store_dir)
        except OSError as e:
            raise WriteError(
                f"Store {self.name} has no live dir, failed to move candidate dir[{self.candidate_dir}] "
                f"into place; restore backup {backup_name}: {e}"
            ) from e

        self.resolver.forget(self.candidate_dir)
        self._candidate = False
        logger.info(f"Promoted candidate of store {self.name}, previous items in backup {backup_name}")
        return True

    def list_backups(self) -> list[str]:
        """List backup names of this store, newest first."""
        self._check_alive()
        if not self.backup_root.is_dir():
            return []
        backups = []
        for entry in os.scandir(self.backup_root):
            if entry.is_dir(follow_symlinks=False):
                backups.append((entry.stat().st_mtime, entry.name))
        return [name for _, name in sorted(backups, reverse=True)]

    # === INTERNALS ===

    def _check_alive(self) -> None:
        if self._destroyed:
            raise StoreDestroyedError(f"Store {self.name} has been destroyed.")

    def _check(self, key: Any) -> None:
        """Validate key, then check that the store is usable."""
        if not self.validate_key(key):
            raise InvalidKeyError(f"Arg key is not valid, key[{key}].")
        self._check_alive()

    def _resolve_settings(
        self,
        stored: StoreSettings | None,
        ttl_default: Ttl,
        ttl_ignore: bool | None,
        file_mode: FileModeProfile | str | None,
    ) -> StoreSettings:
        """Effective settings: option, else stored setting, else preset."""
        if ttl_default is not None:
            ttl_default = self._seconds(ttl_default)
        elif stored is not None:
            ttl_default = stored.ttl_default
        else:
            ttl_default = self.config.ttl_default

        if ttl_ignore is None:
            ttl_ignore = stored.ttl_ignore if stored is not None else self.config.ttl_ignore

        if file_mode is not None:
            try:
                file_mode = FileModeProfile(file_mode)
            except ValueError as e:
                raise InvalidArgumentError(f"Option file_mode is not valid, file_mode[{file_mode}].") from e
        else:
            file_mode = stored.file_mode if stored is not None else self.config.file_mode

        return StoreSettings(ttl_default=ttl_default, ttl_ignore=bool(ttl_ignore), file_mode=file_mode)

    def _update_settings(self, **changes: Any) -> None:
        settings = self._settings.model_copy(update=changes)
        if settings != self._settings:
            self._settings_manager.save(self.name, settings)
            self._settings = settings

    def _ensure_directories(self) -> None:
        profile = self._settings.file_mode
        self.resolver.ensure_dir(self.base_dir, profile)
        self.resolver.ensure_dir(self.store_dir, profile)
        self.resolver.ensure_dir(self.tmp_dir, profile)

    @staticmethod
    def _seconds(ttl: int | timedelta) -> int:
        """Convert a ttl argument to non-negative seconds."""
        if isinstance(ttl, timedelta):
            seconds = int(ttl.total_seconds())
        elif isinstance(ttl, int) and not isinstance(ttl, bool):
            seconds = ttl
        else:
            raise InvalidArgumentError(f"Time-to-live must be int, timedelta or None, saw {type(ttl).__name__}.")
        if seconds < 0:
            raise InvalidArgumentError(f"Time-to-live cannot be negative, saw [{ttl}].")
        return seconds

    def _item_ttl(self, ttl: Ttl) -> int:
        if self._settings.ttl_ignore or ttl is None:
            return self._settings.ttl_default
        return self._seconds(ttl)

    def _backup_name(self, backup_name: str | None) -> str:
        if backup_name is None:
            backup_name = datetime.fromtimestamp(self._clock(), UTC).strftime(BACKUP_NAME_FORMAT)
        if not validate_name(backup_name):
            raise InvalidNameError(f"Arg backup_name is not valid, backup_name[{backup_name}].")
        return backup_name

    def _read(self, path: Path, default: Any) -> Any:
        """Read and unserialize an item file, applying the expiry test."""
        if self._settings.ttl_disabled:
            if not path.is_file():
                return default
        else:
            end_of_life = self._end_of_life(path)
            if end_of_life is None or self._evict_if_expired(path, end_of_life):
                return default

        try:
            data = path.read_bytes()
        except OSError as e:
            if isinstance(e, FileNotFoundError) or not path.exists():
                logger.warning(f"Item {path.name} of store {self.name} vanished while being read")
                return default
            raise ReadError(f"Failed to read file[{path}]: {e}") from e

        try:
            return self.serializer.loads(data)
        except Exception as e:
            raise ReadError(f"Failed to unserialize file[{path}]: {e}") from e

    def _end_of_life(self, path: Path) -> float | None:
        """Modified time of an item file, None if there is no item file."""
        try:
            st = path.stat()
        except FileNotFoundError:
            return None
        except OSError as e:
            raise ReadError(f"Failed to get modified time of file[{path}]: {e}") from e
        # '.' and '..' are valid keys but name directories
        if stat.S_ISDIR(st.st_mode):
            return None
        return st.st_mtime

    def _evict_if_expired(self, path: Path, end_of_life: float) -> bool:
        """Check for expiry, and delete the file if also past grace.

        Returns:
            True if the item has expired.
        """
        now = self._clock()
        if end_of_life >= now:
            return False
        if now > end_of_life + self.grace:
            self._unlink(path)
            logger.debug(f"Deleted expired item {path.name} of store {self.name}")
        else:
            logger.debug(f"Expired item {path.name} of store {self.name} kept within grace")
        return True

    def _unlink(self, path: Path) -> bool:
        """Remove a file.

        Returns:
            True if removed, False if it didn't exist.
        """
        try:
            path.unlink()
        except FileNotFoundError:
            return False
        except OSError as e:
            raise WriteError(f"Failed to remove file[{path}]: {e}") from e
        return True

    def _write(self, path: Path, data: bytes) -> None:
        """Write to a temp file, and rename it over the target."""
        try:
            fd, tmp_name = tempfile.mkstemp(dir=self.tmp_dir, prefix=f"{self.name}.", suffix=".tmp")
        except OSError as e:
            raise WriteError(f"Failed to create temp file in dir[{self.tmp_dir}]: {e}") from e

        try:
            with os.fdopen(fd, "wb") as f:
                f.write(data)
            os.replace(tmp_name, path)
        except OSError as e:
            Path(tmp_name).unlink(missing_ok=True)
            raise WriteError(f"Failed to write to file[{path}]: {e}") from e

        try:
            path.chmod(self._settings.file_mode.file_mode)
        except OSError as e:
            raise WriteError(f"Failed to set mode of file[{path}]: {e}") from e

    @staticmethod
    def _scan(directory: Path) -> Iterator[Path]:
        """Yield the non-directory entries of a directory, if it exists."""
        try:
            entries = list(os.scandir(directory))
        except FileNotFoundError:
            return
        except OSError as e:
            raise ReadError(f"Failed to list dir[{directory}]: {e}") from e
        for entry in entries:
            if not entry.is_dir(follow_symlinks=False):
                yield Path(entry.path)


def main() -> None:
    """Example usage of FileCache."""
    logging.basicConfig(level=logging.DEBUG)

    with tempfile.TemporaryDirectory() as tmpdir:
        cache = FileCache("example", StoreConfig.variable_ttl(), path=tmpdir)

        print("=== FileCache Example ===\n")

        print("1. Storing values...")
        cache.set("user.123", {"name": "Alice"})
        cache.set("session.abc", {"user": "user.123"}, ttl=timedelta(minutes=20))
        print(f"   Export: {cache.export()}")

        print("\n2. Backing up and clearing...")
        print(f"   Copied {cache.backup('before_clear')} items")
        print(f"   Cleared {cache.clear()} items, empty: {cache.is_empty()}")

        print("\n3. Restoring...")
        cache.restore("before_clear")
        print(f"   user.123 = {cache.get('user.123')}")

        print("\n4. Building and promoting a candidate...")
        cache.set_candidate()
        cache.set("user.123", {"name": "Alice", "verified": True})
        print(f"   Before promotion: {cache.get('user.123')}")
        cache.promote_candidate("before_candidate")
        print(f"   After promotion: {cache.get('user.123')}")
        print(f"   Backups: {cache.list_backups()}")

        print("\n5. Listing stores...")
        for store in FileCache.list_instances(tmpdir):
            print(f"   {store.name}: ttl_default={store.ttl_default}, ttl_ignore={store.ttl_ignore}")

        cache.destroy()
        print(f"\n6. Destroyed: {cache.destroyed}")


if __name__ == "__main__":
    main()
