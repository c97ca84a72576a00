"""Configuration loader resolving source, target and exclusions."""

import os
from collections.abc import Mapping
from pathlib import Path
from typing import Optional

import yaml

from skill_sync.config.defaults import (
    CODEX_HOME_ENV,
    DEFAULT_CODEX_DIRNAME,
    DEFAULT_EXCLUDES,
    DEFAULT_SETTINGS_PATH,
    SOURCE_SUBDIR,
    TARGET_SUBDIR,
)
from skill_sync.config.schema import SyncConfig, SyncSettings
from skill_sync.utils.paths import PACKAGE_ROOT, REPO_ROOT, expand_path, is_checkout


def resolve_codex_home(
    env: Mapping[str, str], settings: Optional[SyncSettings] = None
) -> Path:
    """Resolve the Codex base directory.

    Precedence (highest first):
    1. CODEX_HOME from the environment, when set and non-empty
    2. codex_home from the settings file
    3. <home>/.codex, where <home> is HOME from the environment

    Args:
        env: Environment mapping to read variables from
        settings: Optional user settings

    Returns:
        Absolute, symlink-resolved base directory
    """
    if codex_home := env.get(CODEX_HOME_ENV):
        return expand_path(codex_home, home=env.get("HOME"))

    if settings is not None and settings.codex_home:
        return expand_path(settings.codex_home, home=env.get("HOME"))

    home = env.get("HOME")
    base = Path(home) if home else Path.home()
    return (base / DEFAULT_CODEX_DIRNAME).resolve()


def resolve_target_dir(
    env: Mapping[str, str], settings: Optional[SyncSettings] = None
) -> Path:
    """Resolve the directory skills are synchronized into."""
    return resolve_codex_home(env, settings) / TARGET_SUBDIR


def resolve_source_dir(repo_root: Optional[Path] = None) -> Path:
    """Resolve the skills directory shipped alongside this tool.

    The location is derived from the tool's own install path, never from
    the caller's working directory. A source checkout uses its top-level
    skills/ directory; an installed wheel uses the copy packaged inside
    skill_sync.
    """
    if repo_root is not None:
        root = Path(repo_root)
    elif is_checkout(REPO_ROOT):
        root = REPO_ROOT
    else:
        root = PACKAGE_ROOT
    return (root / SOURCE_SUBDIR).resolve()


def load_settings(
    path: Optional[Path] = None, env: Optional[Mapping[str, str]] = None
) -> SyncSettings:
    """Load user settings from a YAML file.

    Args:
        path: Settings file. Defaults to ~/.config/skill-sync/config.yaml
        env: Environment mapping whose HOME locates the default file

    Returns:
        Validated SyncSettings. Defaults when the default file is absent.

    Raises:
        FileNotFoundError: If an explicit path doesn't exist
        yaml.YAMLError: If the file contains invalid YAML
        ValidationError: If the file content doesn't match the schema
    """
    if path is None:
        if env is None:
            env = os.environ
        path = expand_path(DEFAULT_SETTINGS_PATH, home=env.get("HOME"))
        if not path.exists():
            return SyncSettings()
    elif not path.exists():
        raise FileNotFoundError(f"Settings file not found: {path}")

    with open(path, "r") as f:
        content = yaml.safe_load(f)

    if content is None:
        return SyncSettings()
    if not isinstance(content, dict):
        raise ValueError(f"Settings file must contain a mapping: {path}")

    return SyncSettings(**content)


def merge_excludes(*pattern_lists: list[str]) -> list[str]:
    """Concatenate pattern lists, dropping duplicates but keeping order."""
    merged: list[str] = []
    for patterns in pattern_lists:
        for pattern in patterns:
            if pattern not in merged:
                merged.append(pattern)
    return merged


def load_config(
    env: Optional[Mapping[str, str]] = None,
    config_path: Optional[Path] = None,
    repo_root: Optional[Path] = None,
) -> SyncConfig:
    """Resolve the configuration for a sync run.

    Args:
        env: Environment mapping (defaults to os.environ)
        config_path: Optional explicit settings file
        repo_root: Optional repository root holding the skills directory

    Returns:
        Resolved SyncConfig
    """
    if env is None:
        env = os.environ

    settings = load_settings(config_path, env)

    return SyncConfig(
        source_dir=resolve_source_dir(repo_root),
        target_dir=resolve_target_dir(env, settings),
        exclude=merge_excludes(DEFAULT_EXCLUDES, settings.exclude),
    )
