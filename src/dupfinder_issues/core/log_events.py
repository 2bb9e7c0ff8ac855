"""Registry of structured logging event identifiers."""

from __future__ import annotations

from enum import Enum

__all__ = ["LogEvents"]


class LogEvents(str, Enum):
    """Strongly typed registry of UnifiedLogger events."""

    READ_START = "dupfinder.read.start"
    READ_FINISH = "dupfinder.read.finish"
    READ_FAILED = "dupfinder.read.failed"
    CLUSTER_SKIPPED = "dupfinder.cluster.skipped"
    FRAGMENT_SKIPPED = "dupfinder.fragment.skipped"
    CLI_RUN_START = "cli.run.start"
    CLI_RUN_FINISH = "cli.run.finish"

    def __str__(self) -> str:
        return self.value
