"""One-way synchronization of the skills directory."""

from pathlib import Path

from skill_sync.config.schema import SyncMode
from skill_sync.errors import (
    CapabilityUnavailableError,
    SourceNotFoundError,
)
from skill_sync.sync.protocols import SyncStrategy
from skill_sync.sync.result import SyncResult
from skill_sync.sync.strategies import MIRROR_UNAVAILABLE
from skill_sync.utils.paths import ensure_target_dir


class DirectorySynchronizer:
    """Copies a source tree into a target tree using a single strategy.

    The run is a linear sequence: resolve paths, refuse modes the strategy
    cannot honor, create the target, copy. Any failure aborts the run;
    partial state is left for the next run to converge.
    """

    def __init__(self, strategy: SyncStrategy):
        """Initialize the synchronizer.

        Args:
            strategy: Copy mechanism chosen by the capability probe
        """
        self.strategy = strategy

    def check_mode(self, mode: SyncMode) -> None:
        """Fail closed when mirror mode is requested but unsupported.

        Raises:
            CapabilityUnavailableError: If the strategy cannot delete
        """
        if mode is SyncMode.MIRROR and not self.strategy.supports_mirror:
            raise CapabilityUnavailableError(MIRROR_UNAVAILABLE)

    def run(
        self,
        source: Path,
        target: Path,
        mode: SyncMode,
        exclusions: list[str],
        dry_run: bool = False,
    ) -> SyncResult:
        """Synchronize source into target.

        Args:
            source: Skills directory to copy from
            target: Directory to copy into, created if missing
            mode: Mirror or additive reconciliation
            exclusions: Filename patterns neither copied nor deleted
            dry_run: Resolve and validate only, without touching the target

        Returns:
            SyncResult naming the resolved target

        Raises:
            SourceNotFoundError: If source is not a directory
            CapabilityUnavailableError: If mirror mode can't be honored
            DirectoryCreationError: If target can't be created
            SyncToolError: If the copy fails
        """
        source = Path(source).expanduser().resolve()
        target = Path(target).expanduser().resolve()

        if not source.is_dir():
            raise SourceNotFoundError(f"Skills directory not found: {source}")

        self.check_mode(mode)

        if dry_run:
            return SyncResult(
                source=source,
                target=target,
                mode=mode,
                strategy=self.strategy.name,
                dry_run=True,
            )

        ensure_target_dir(target)

        return self.strategy.synchronize(source, target, mode, list(exclusions))
