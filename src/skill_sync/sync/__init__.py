"""Directory synchronization."""

from skill_sync.sync.protocols import SyncStrategy
from skill_sync.sync.result import SyncResult
from skill_sync.sync.strategies import CopyStrategy, RsyncStrategy, probe_strategy
from skill_sync.sync.synchronizer import DirectorySynchronizer

__all__ = [
    "CopyStrategy",
    "DirectorySynchronizer",
    "RsyncStrategy",
    "SyncResult",
    "SyncStrategy",
    "probe_strategy",
]
