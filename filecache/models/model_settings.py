"""Persisted per-store settings and file permission profiles."""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class FileModeProfile(str, Enum):
    """Permission modes applied to a store's directories and item files."""

    USER_WRITE = "user_write"
    GROUP_READ = "group_read"
    GROUP_WRITE = "group_write"
    GROUP_SETGID = "group_setgid"

    @property
    def dir_mode(self) -> int:
        """Mode for directories created by the store."""
        return _DIR_MODES[self]

    @property
    def file_mode(self) -> int:
        """Mode for item files written by the store."""
        return _FILE_MODES[self]


_DIR_MODES = {
    FileModeProfile.USER_WRITE: 0o700,
    FileModeProfile.GROUP_READ: 0o750,
    FileModeProfile.GROUP_WRITE: 0o770,
    FileModeProfile.GROUP_SETGID: 0o2770,
}

_FILE_MODES = {
    FileModeProfile.USER_WRITE: 0o600,
    FileModeProfile.GROUP_READ: 0o640,
    FileModeProfile.GROUP_WRITE: 0o660,
    FileModeProfile.GROUP_SETGID: 0o660,
}

DEFAULT_FILE_MODE = FileModeProfile.GROUP_WRITE


class StoreSettings(BaseModel):
    """Settings sidecar stored in {base}/{store}.json.

    Written when a store is created, and rewritten whenever the effective
    settings of a later instantiation differ from what's on disk.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    ttl_default: int = Field(default=0, ge=0, description="Seconds; 0 means forever")
    ttl_ignore: bool = Field(default=False, description="Ignore ttl argument of item setters")
    file_mode: FileModeProfile = Field(default=DEFAULT_FILE_MODE)

    @property
    def ttl_disabled(self) -> bool:
        """Whether expiry is switched off entirely; forever and ttl arguments ignored."""
        return self.ttl_default == 0 and self.ttl_ignore
