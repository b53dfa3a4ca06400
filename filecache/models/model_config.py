"""Store configuration presets.

A preset supplies the class defaults of a store. Explicit constructor options
override on-disk settings, which override the preset.
"""

from pydantic import BaseModel, ConfigDict, Field

from filecache.consts import FIXED_TTL_DEFAULT, KEY_LENGTH_MAX, KEY_LONG_LENGTH_MAX, TTL_NONE
from filecache.models.model_settings import DEFAULT_FILE_MODE, FileModeProfile


class StoreConfig(BaseModel):
    """Default settings and key length limit of a store."""

    model_config = ConfigDict(frozen=True)

    ttl_default: int = Field(default=TTL_NONE, ge=0)
    ttl_ignore: bool = False
    file_mode: FileModeProfile = DEFAULT_FILE_MODE
    max_key_length: int = Field(default=KEY_LENGTH_MAX, ge=KEY_LENGTH_MAX, le=KEY_LONG_LENGTH_MAX)

    @classmethod
    def variable_ttl(cls) -> "StoreConfig":
        """Items live forever unless set with a ttl."""
        return cls()

    @classmethod
    def fixed_ttl(cls) -> "StoreConfig":
        """Every item lives 30 minutes; ttl arguments are ignored."""
        return cls(ttl_default=FIXED_TTL_DEFAULT, ttl_ignore=True)

    @classmethod
    def persistent(cls) -> "StoreConfig":
        """Items live forever; expiry is never checked."""
        return cls(ttl_default=TTL_NONE, ttl_ignore=True)

    @classmethod
    def key_long_variable_ttl(cls) -> "StoreConfig":
        return cls(max_key_length=KEY_LONG_LENGTH_MAX)

    @classmethod
    def key_long_fixed_ttl(cls) -> "StoreConfig":
        return cls(
            ttl_default=FIXED_TTL_DEFAULT,
            ttl_ignore=True,
            max_key_length=KEY_LONG_LENGTH_MAX,
        )

    @classmethod
    def key_long_persistent(cls) -> "StoreConfig":
        return cls(ttl_default=TTL_NONE, ttl_ignore=True, max_key_length=KEY_LONG_LENGTH_MAX)


# Aliases understood by CacheBroker
STORE_PRESETS = {
    "base": StoreConfig.variable_ttl,
    "default": StoreConfig.variable_ttl,
    "variable_ttl": StoreConfig.variable_ttl,
    "fixed_ttl": StoreConfig.fixed_ttl,
    "persistent": StoreConfig.persistent,
    "key_long_variable_ttl": StoreConfig.key_long_variable_ttl,
    "key_long_fixed_ttl": StoreConfig.key_long_fixed_ttl,
    "key_long_persistent": StoreConfig.key_long_persistent,
}
