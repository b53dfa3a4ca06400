"""Resolution of store base paths and creation of store directories.

A relative base path is taken relative to the document root of the hosting
environment, so '../private/cache' ends up beside the document root rather
than beneath it.
"""

import logging
import os
import threading
from pathlib import Path

from filecache.consts import DOCUMENT_ROOT_ENV_VARS
from filecache.exceptions import ConfigurationError, PathError
from filecache.models.model_settings import DEFAULT_FILE_MODE, FileModeProfile

logger = logging.getLogger(__name__)


class PathResolver:
    """Resolves base paths and ensures directories exist, once per path.

    Paths already ensured are remembered, so repeated store instantiation
    doesn't hit the filesystem again. Call reset() to forget them.
    """

    def __init__(self, document_root: Path | str | None = None):
        """Initialize PathResolver.

        Args:
            document_root: Root that relative paths resolve against.
                Defaults to the first set env var of DOCUMENT_ROOT_ENV_VARS.
        """
        self._document_root = Path(document_root) if document_root else None
        self._ensured: set[Path] = set()
        self._lock = threading.Lock()

    @property
    def document_root(self) -> Path:
        """The document root; ConfigurationError if it can't be determined."""
        if self._document_root is not None:
            return self._document_root
        for var in DOCUMENT_ROOT_ENV_VARS:
            value = os.environ.get(var)
            if value:
                return Path(value)
        raise ConfigurationError(
            "Cannot resolve document root, none of the environment variables "
            f"{', '.join(DOCUMENT_ROOT_ENV_VARS)} is set."
        )

    def resolve(self, path: Path | str) -> Path:
        """Resolve a base path to an absolute path.

        Args:
            path: Absolute path, or path relative to the document root.

        Returns:
            Absolute, normalized path.
        """
        path = Path(path).expanduser()
        if not path.is_absolute():
            path = self.document_root / path
        return Path(os.path.normpath(path))

    def ensure_dir(self, path: Path, profile: FileModeProfile = DEFAULT_FILE_MODE) -> Path:
        """Create a directory chain if missing, and check that it's writable.

        Args:
            path: Absolute directory path.
            profile: Permission profile applied to directories created here.

        Returns:
            The path.

        Raises:
            PathError: If the directory cannot be created or isn't writable.
        """
        with self._lock:
            if path in self._ensured:
                return path

            if not path.is_dir():
                missing = [p for p in (path, *path.parents) if not p.exists()]
                try:
                    path.mkdir(parents=True, exist_ok=True)
                    # mkdir's mode is subject to umask, and ignores setgid
                    for created in missing:
                        created.chmod(profile.dir_mode)
                except OSError as e:
                    raise PathError(f"Failed to create directory[{path}]: {e}") from e
                logger.debug(f"Created directory {path}")

            if not os.access(path, os.W_OK):
                raise PathError(f"Not writable directory[{path}].")

            self._ensured.add(path)
            return path

    def forget(self, path: Path) -> None:
        """Forget a single path, typically because it has been removed."""
        with self._lock:
            self._ensured.discard(path)

    def reset(self) -> None:
        """Forget all ensured paths."""
        with self._lock:
            self._ensured.clear()
