"""Example demonstrating programmatic use of the synchronizer.

This resolves the same paths as the sync-skills command but lets the caller
pick the environment, which is handy for syncing into a scratch Codex home.
"""

import tempfile
from pathlib import Path

from skill_sync.config.loader import load_config
from skill_sync.config.schema import SyncMode
from skill_sync.errors import SyncError
from skill_sync.sync.strategies import probe_strategy
from skill_sync.sync.synchronizer import DirectorySynchronizer


def main():
    """Sync the bundled skills into a temporary Codex home."""
    with tempfile.TemporaryDirectory() as codex_home:
        cfg = load_config(env={"CODEX_HOME": codex_home})
        strategy = probe_strategy()

        print(f"Source:    {cfg.source_dir}")
        print(f"Target:    {cfg.target_dir}")
        print(f"Mechanism: {strategy.name}")

        # Mirror mode only when rsync is available
        mode = SyncMode.MIRROR if strategy.supports_mirror else SyncMode.ADDITIVE

        try:
            result = DirectorySynchronizer(strategy).run(
                cfg.source_dir, cfg.target_dir, mode, cfg.exclude
            )
        except SyncError as e:
            print(f"✗ Sync failed: {e}")
            return

        print(f"✓ Synced ({result.mode.value}) to {result.target}")
        for path in sorted(Path(result.target).rglob("*")):
            if path.is_file():
                print(f"  {path.relative_to(result.target)}")


if __name__ == "__main__":
    main()
