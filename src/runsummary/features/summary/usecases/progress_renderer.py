"""
Summary: Render the elapsed-time line and an optional proportional bar.
Why: Show how far a run has progressed against its estimated duration.
"""

from __future__ import annotations

import math
from typing import final

from runsummary.config.settings import PROGRESS_BAR_WIDTH, PROGRESS_MIN_ESTIMATE
from runsummary.features.summary.domain.wording import format_seconds
from runsummary.platform.logging import logger
from runsummary.shared.errors import InvalidArgumentError
from runsummary.shared.styling import BAR_EMPTY, BAR_FILLED, BOLD, FAILED, Styler

TIME_LABEL = "Time:"
TIME_PADDING = "        "


@final
class ProgressRenderer:
    """Build the ``Time:`` line of a run summary."""

    styler: Styler
    bar_width: int
    min_estimate: float

    def __init__(
        self,
        styler: Styler,
        bar_width: int = PROGRESS_BAR_WIDTH,
        min_estimate: float = PROGRESS_MIN_ESTIMATE,
    ) -> None:
        """Initialize the renderer.

        Args:
            styler: Styling capability used for labels and bar blocks.
            bar_width: Upper bound on the bar width in columns.
            min_estimate: Estimates at or below this many seconds draw no bar.
        """
        if bar_width <= 0:
            raise InvalidArgumentError(f"bar_width must be positive, got {bar_width}")
        self.styler = styler
        self.bar_width = bar_width
        self.min_estimate = min_estimate

    def render(self, run_time: float, estimated: float, width: int) -> str:
        """Render the time line, plus a bar line while the estimate is ahead.

        Args:
            run_time: Elapsed seconds.
            estimated: Estimated total seconds; ``0`` disables the estimate.
            width: Available columns for the bar; ``0`` disables the bar.

        Returns:
            str: One line, or two when a bar is drawn.

        Raises:
            InvalidArgumentError: If ``width`` or ``estimated`` is negative.
        """
        if width < 0:
            raise InvalidArgumentError(f"width must be non-negative, got {width}")
        if estimated < 0:
            raise InvalidArgumentError(f"estimated must be non-negative, got {estimated}")

        rendered_time = f"{format_seconds(run_time)}s"
        # More than one second over the estimate.
        if estimated and run_time >= estimated + 1:
            rendered_time = self.styler(rendered_time, FAILED)

        line = self.styler(TIME_LABEL, BOLD) + f"{TIME_PADDING}{rendered_time}"
        if run_time < estimated:
            line += f", estimated {format_seconds(estimated)}s"

        if estimated > self.min_estimate and run_time < estimated and width:
            bar = self._render_bar(run_time, estimated, min(self.bar_width, width))
            if bar:
                line += "\n" + bar
        return line

    def _render_bar(self, run_time: float, estimated: float, available: int) -> str:
        if available < 2:
            return ""

        filled = min(math.floor(run_time / estimated * available), available)
        filled = max(filled, 0)
        logger.debug(
            "Rendered progress bar",
            extra={
                "render_event": "render.progress.bar",
                "filled": filled,
                "bar_width": available,
                "run_time": run_time,
                "estimated": estimated,
            },
        )
        return self.styler(" ", BAR_FILLED) * filled + self.styler(" ", BAR_EMPTY) * (
            available - filled
        )


__all__ = ["ProgressRenderer"]
