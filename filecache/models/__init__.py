"""Pydantic models for filecache."""

from filecache.models.model_config import STORE_PRESETS, StoreConfig
from filecache.models.model_settings import (
    DEFAULT_FILE_MODE,
    FileModeProfile,
    StoreSettings,
)

__all__ = [
    "DEFAULT_FILE_MODE",
    "STORE_PRESETS",
    "FileModeProfile",
    "StoreConfig",
    "StoreSettings",
]
