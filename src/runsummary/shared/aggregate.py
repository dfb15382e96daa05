"""Where: src/runsummary/shared/aggregate.py
What: Read-only snapshots of aggregated test results and render options.
Why: Give renderers immutable inputs supplied whole by the result collector.
Assumptions: - Timestamps are epoch milliseconds.
Trade-offs: - Only the counters the summary reads are modelled.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from .errors import InvalidArgumentError


@dataclass(frozen=True)
class SnapshotCounts:
    """Snapshot assertion counters."""

    added: int = 0
    unmatched: int = 0
    matched: int = 0
    updated: int = 0
    total: int = 0


@dataclass(frozen=True)
class AggregateCounts:
    """Aggregated suite, test and snapshot counters for one run."""

    suites_failed: int = 0
    suites_passed: int = 0
    suites_pending: int = 0
    suites_total: int = 0
    tests_failed: int = 0
    tests_passed: int = 0
    tests_pending: int = 0
    tests_total: int = 0
    snapshot: SnapshotCounts = field(default_factory=SnapshotCounts)
    start_time: float = 0.0
    # Collector-supplied count of suites that actually ran, when known.
    suites_run: int | None = None

    @property
    def run_suites(self) -> int:
        """Number of suites that actually ran."""

        if self.suites_run is not None:
            return self.suites_run
        return self.suites_failed + self.suites_passed

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "AggregateCounts":
        """Build counts from a collector payload using its camelCase keys.

        Args:
            data: Aggregated result mapping, e.g. ``{"numFailedTests": 1, ...}``.

        Returns:
            AggregateCounts: Immutable snapshot of the payload.
        """
        snapshot_data: Mapping[str, Any] = data.get("snapshot") or {}
        snapshot = SnapshotCounts(
            added=int(snapshot_data.get("added", 0)),
            unmatched=int(snapshot_data.get("unmatched", 0)),
            matched=int(snapshot_data.get("matched", 0)),
            updated=int(snapshot_data.get("updated", 0)),
            total=int(snapshot_data.get("total", 0)),
        )
        return cls(
            suites_failed=int(data.get("numFailedTestSuites", 0)),
            suites_passed=int(data.get("numPassedTestSuites", 0)),
            suites_pending=int(data.get("numPendingTestSuites", 0)),
            suites_total=int(data.get("numTotalTestSuites", 0)),
            tests_failed=int(data.get("numFailedTests", 0)),
            tests_passed=int(data.get("numPassedTests", 0)),
            tests_pending=int(data.get("numPendingTests", 0)),
            tests_total=int(data.get("numTotalTests", 0)),
            snapshot=snapshot,
            start_time=float(data.get("startTime", 0)),
        )


@dataclass(frozen=True)
class RenderOptions:
    """Optional render features; ``None`` leaves the feature disabled."""

    estimated_seconds: float | None = None
    round_time: bool = False
    columns: int | None = None

    def __post_init__(self) -> None:
        if self.estimated_seconds is not None and self.estimated_seconds < 0:
            raise InvalidArgumentError(
                f"estimated_seconds must be non-negative, got {self.estimated_seconds}"
            )
        if self.columns is not None and self.columns < 0:
            raise InvalidArgumentError(f"columns must be non-negative, got {self.columns}")


__all__ = ["AggregateCounts", "RenderOptions", "SnapshotCounts"]
