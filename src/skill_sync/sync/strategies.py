"""Copy mechanisms: rsync when installed, a plain recursive copy otherwise."""

import shutil
import subprocess
from collections.abc import Callable
from pathlib import Path
from typing import Optional

from skill_sync.config.schema import SyncMode
from skill_sync.errors import CapabilityUnavailableError, SyncToolError
from skill_sync.sync.protocols import SyncStrategy
from skill_sync.sync.result import SyncResult

RSYNC = "rsync"

MIRROR_UNAVAILABLE = (
    "rsync not found; --delete (mirror mode) requires rsync, which is not installed"
)


class RsyncStrategy:
    """Synchronize with rsync in archive mode.

    rsync handles incremental copies, exclusion patterns and, in mirror
    mode, deletion of target entries missing from the source. Excluded
    entries in the target are protected from deletion.
    """

    name = "rsync"
    supports_mirror = True

    def __init__(self, executable: str = RSYNC):
        self.executable = executable

    def build_command(
        self, source: Path, target: Path, mode: SyncMode, exclusions: list[str]
    ) -> list[str]:
        """Build the rsync argument vector for a run."""
        command = [self.executable, "-a"]
        if mode is SyncMode.MIRROR:
            command.append("--delete")
        for pattern in exclusions:
            command.extend(["--exclude", pattern])
        # Trailing slashes copy the contents of source, not source itself
        command.append(f"{source}/")
        command.append(f"{target}/")
        return command

    def synchronize(
        self, source: Path, target: Path, mode: SyncMode, exclusions: list[str]
    ) -> SyncResult:
        command = self.build_command(source, target, mode, exclusions)

        try:
            completed = subprocess.run(command, capture_output=True, text=True)
        except OSError as e:
            raise SyncToolError(f"Failed to run {self.executable}: {e}") from e

        if completed.returncode != 0:
            stderr = completed.stderr.strip()
            message = f"{self.name} exited with status {completed.returncode}"
            if stderr:
                message = f"{message}: {stderr}"
            raise SyncToolError(
                message, returncode=completed.returncode, stderr=completed.stderr
            )

        return SyncResult(source=source, target=target, mode=mode, strategy=self.name)


class CopyStrategy:
    """Fallback recursive copy used when rsync is not installed.

    Files are copied over existing ones in place and symlinks are followed,
    so a dangling symlink in the source fails the copy where rsync would
    recreate the link. Exclusions match basenames only. Nothing in the
    target is ever removed, so this strategy refuses mirror mode.
    """

    name = "copy"
    supports_mirror = False

    def synchronize(
        self, source: Path, target: Path, mode: SyncMode, exclusions: list[str]
    ) -> SyncResult:
        if mode is SyncMode.MIRROR:
            raise CapabilityUnavailableError(MIRROR_UNAVAILABLE)

        try:
            shutil.copytree(
                source,
                target,
                ignore=shutil.ignore_patterns(*exclusions),
                dirs_exist_ok=True,
            )
        except (shutil.Error, OSError) as e:
            raise SyncToolError(str(e)) from e

        return SyncResult(source=source, target=target, mode=mode, strategy=self.name)


def probe_strategy(
    which: Callable[[str], Optional[str]] = shutil.which,
) -> SyncStrategy:
    """Pick the most capable copy mechanism available on this system.

    Args:
        which: Executable lookup, shutil.which by default

    Returns:
        RsyncStrategy if rsync is on PATH, otherwise CopyStrategy
    """
    executable = which(RSYNC)
    if executable:
        return RsyncStrategy(executable)
    return CopyStrategy()
