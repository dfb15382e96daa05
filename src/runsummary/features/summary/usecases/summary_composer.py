"""
Summary: Compose the suites, tests, snapshots and time lines of a run summary.
Why: Turn aggregated counters into the text printed at the end of a run.
"""

from __future__ import annotations

import math
import time
from collections.abc import Sequence
from typing import final

from runsummary.features.summary.usecases.progress_renderer import ProgressRenderer
from runsummary.platform.logging import logger
from runsummary.shared.aggregate import AggregateCounts, RenderOptions
from runsummary.shared.styling import BOLD, FAILED, PASSED, SKIPPED, Styler

SUITES_LABEL = "Test Suites: "
TESTS_LABEL = "Tests:       "
SNAPSHOTS_LABEL = "Snapshots:   "


@final
class SummaryComposer:
    """Build the multi-line summary for an aggregated test run."""

    styler: Styler
    progress_renderer: ProgressRenderer

    def __init__(self, styler: Styler, progress_renderer: ProgressRenderer | None = None) -> None:
        """Initialize the composer.

        Args:
            styler: Styling capability used for labels and counts.
            progress_renderer: Renderer for the time line. Defaults to one
                sharing ``styler``.
        """
        self.styler = styler
        self.progress_renderer = progress_renderer or ProgressRenderer(styler)

    def summarize(
        self,
        counts: AggregateCounts,
        options: RenderOptions | None = None,
        now: float | None = None,
    ) -> str:
        """Render the summary.

        Args:
            counts: Aggregated counters for the run.
            options: Estimate, rounding and width settings.
            now: Current time in epoch milliseconds. Defaults to the wall clock.

        Returns:
            str: Suites, tests, snapshots and time lines joined by ``\\n``.
        """
        options = options or RenderOptions()
        now_ms = time.time() * 1000 if now is None else now

        run_time: float = (now_ms - counts.start_time) / 1000
        if options.round_time:
            run_time = math.floor(run_time)

        lines = [
            self._suites_line(counts),
            self._tests_line(counts),
            self._snapshots_line(counts),
            self.progress_renderer.render(
                run_time,
                options.estimated_seconds or 0,
                options.columns or 0,
            ),
        ]
        logger.debug(
            "Composed run summary",
            extra={"render_event": "render.summary.composed", "run_time": run_time},
        )
        return "\n".join(lines)

    def _suites_line(self, counts: AggregateCounts) -> str:
        run = counts.run_suites
        total = counts.suites_total
        tally = f"{run} of {total}" if run != total else f"{total}"
        return (
            self.styler(SUITES_LABEL, BOLD)
            + self._clauses(
                [
                    (counts.suites_failed, "failed", FAILED),
                    (counts.suites_pending, "skipped", SKIPPED),
                    (counts.suites_passed, "passed", PASSED),
                ]
            )
            + f"{tally} total"
        )

    def _tests_line(self, counts: AggregateCounts) -> str:
        return (
            self.styler(TESTS_LABEL, BOLD)
            + self._clauses(
                [
                    (counts.tests_failed, "failed", FAILED),
                    (counts.tests_pending, "skipped", SKIPPED),
                    (counts.tests_passed, "passed", PASSED),
                ]
            )
            + f"{counts.tests_total} total"
        )

    def _snapshots_line(self, counts: AggregateCounts) -> str:
        snapshot = counts.snapshot
        return (
            self.styler(SNAPSHOTS_LABEL, BOLD)
            + self._clauses(
                [
                    (snapshot.unmatched, "failed", FAILED),
                    (snapshot.updated, "updated", PASSED),
                    (snapshot.added, "added", PASSED),
                    (snapshot.matched, "passed", PASSED),
                ]
            )
            + f"{snapshot.total} total"
        )

    def _clauses(self, clauses: Sequence[tuple[int, str, str]]) -> str:
        """Join non-zero ``(count, label, style)`` clauses, each followed by ``", "``."""

        return "".join(
            self.styler(f"{count} {label}", style) + ", "
            for count, label, style in clauses
            if count
        )


__all__ = ["SummaryComposer"]
