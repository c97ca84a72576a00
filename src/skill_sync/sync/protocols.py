"""Abstract interface for copying a source tree into a target tree."""

from pathlib import Path
from typing import Protocol

from skill_sync.config.schema import SyncMode
from skill_sync.sync.result import SyncResult


class SyncStrategy(Protocol):
    """Abstract interface for the mechanisms that copy skills."""

    name: str
    supports_mirror: bool

    def synchronize(
        self, source: Path, target: Path, mode: SyncMode, exclusions: list[str]
    ) -> SyncResult:
        """Copy the contents of source into target.

        Args:
            source: Existing directory to copy from
            target: Existing directory to copy into
            mode: Mirror or additive reconciliation
            exclusions: Filename patterns neither copied nor deleted

        Returns:
            SyncResult describing the run

        Raises:
            SyncToolError: If the copy itself fails
        """
        ...
