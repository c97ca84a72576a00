"""Path helpers for locating the skills directory and the sync target."""

from pathlib import Path
from typing import Optional

from skill_sync.errors import DirectoryCreationError

# Installed package directory; wheels carry the skills under it
PACKAGE_ROOT = Path(__file__).resolve().parents[1]

# Directory holding src/ when running from a checkout
REPO_ROOT = Path(__file__).resolve().parents[3]


def is_checkout(root: Path) -> bool:
    """Return True if root looks like a source checkout of this project."""
    return (root / "src" / "skill_sync").is_dir()


def expand_path(path: str, home: Optional[str] = None) -> Path:
    """Expand ~ and make a path absolute and symlink-free.

    Args:
        path: Path string that may start with ~ or be relative
        home: Home directory substituted for a leading ~. When omitted
              the process home directory is used.

    Returns:
        Absolute Path object
    """
    expanded = Path(path)
    if home and expanded.parts and expanded.parts[0] == "~":
        expanded = Path(home).joinpath(*expanded.parts[1:])
    return expanded.expanduser().resolve()


def ensure_target_dir(path: Path) -> Path:
    """Create the sync target and any missing parents.

    Raises:
        DirectoryCreationError: If the directory can't be created, e.g. a
            parent is a regular file or permission is denied
    """
    try:
        path.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise DirectoryCreationError(
            f"Cannot create target directory {path}: {e}"
        ) from e
    return path
