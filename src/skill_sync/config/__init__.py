"""Configuration loading and resolution."""

from skill_sync.config.loader import (
    load_config,
    load_settings,
    resolve_codex_home,
    resolve_source_dir,
    resolve_target_dir,
)
from skill_sync.config.schema import SyncConfig, SyncMode, SyncSettings

__all__ = [
    # Loader functions
    "load_config",
    "load_settings",
    "resolve_codex_home",
    "resolve_source_dir",
    "resolve_target_dir",
    # Schema classes
    "SyncConfig",
    "SyncMode",
    "SyncSettings",
]
