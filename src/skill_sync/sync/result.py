"""Outcome of a synchronization run."""

from dataclasses import dataclass
from pathlib import Path

from skill_sync.config.schema import SyncMode


@dataclass
class SyncResult:
    """Describes a completed (or, for dry runs, planned) sync."""

    source: Path
    target: Path
    mode: SyncMode
    strategy: str
    dry_run: bool = False
