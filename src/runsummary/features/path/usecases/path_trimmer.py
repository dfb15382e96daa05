"""
Summary: Fit a styled test path into a column budget, favouring the basename.
Why: Keep file names readable in narrow terminals without overflowing lines.
"""

from __future__ import annotations

import os
from typing import Final, final

from runsummary.features.path.domain.path_parts import PathParts, relative_path
from runsummary.platform.logging import logger
from runsummary.shared.errors import InvalidArgumentError
from runsummary.shared.styling import BOLD, DIM, Styler

ELLIPSIS: Final[str] = "..."

# Ellipsis plus the separator that follows it.
_TRUNCATION_OVERHEAD: Final[int] = len(ELLIPSIS) + 1


def format_test_path(
    styler: Styler,
    root_dir: str | os.PathLike[str],
    test_path: str | os.PathLike[str],
    separator: str = os.sep,
) -> str:
    """Return the untruncated path: dimmed directory, emphasized basename."""

    parts = relative_path(root_dir, test_path)
    return styler(parts.directory + separator, DIM) + styler(parts.basename, BOLD)


@final
class PathTrimmer:
    """Truncate paths to a column budget.

    Rules are tried in order and the first one that fits wins:

    1. The whole path fits.
    2. The basename fits with room to spare: the directory loses characters
       from its left end and gains a ``...`` prefix.
    3. The basename fits exactly after ``.../``: the directory is dropped.
    4. The basename itself is cut from the left behind ``...``.
    """

    styler: Styler
    separator: str

    def __init__(self, styler: Styler, separator: str = os.sep) -> None:
        self.styler = styler
        self.separator = separator

    def trim(self, pad: int, columns: int, parts: PathParts) -> str:
        """Render ``parts`` in at most ``columns - pad`` visible columns.

        Args:
            pad: Columns reserved for a prefix on the same line.
            columns: Terminal width.
            parts: Directory and basename to render.

        Returns:
            str: Styled path whose visible length never exceeds the budget.

        Raises:
            InvalidArgumentError: If ``columns`` does not exceed ``pad``.
        """
        budget = columns - pad
        if budget <= 0:
            raise InvalidArgumentError(
                f"columns ({columns}) must be greater than pad ({pad})"
            )

        directory = parts.directory
        basename = parts.basename
        sep = self.separator

        if len(directory + sep + basename) <= budget:
            return self._styled(directory, basename)

        if len(basename) + _TRUNCATION_OVERHEAD < budget:
            keep = budget - _TRUNCATION_OVERHEAD - len(basename)
            trimmed = ELLIPSIS + directory[len(directory) - keep :]
            self._log_trim("directory", budget, parts)
            return self._styled(trimmed, basename)

        if len(basename) + _TRUNCATION_OVERHEAD == budget:
            self._log_trim("drop-directory", budget, parts)
            return self._styled(ELLIPSIS, basename)

        self._log_trim("basename", budget, parts)
        if budget < _TRUNCATION_OVERHEAD:
            # Not even the ellipsis fits; show the tail of the name.
            return self.styler(basename[max(len(basename) - budget, 0) :], BOLD)
        keep = budget - _TRUNCATION_OVERHEAD
        return self.styler(ELLIPSIS + basename[len(basename) - keep :], BOLD)

    def trim_path(
        self,
        pad: int,
        columns: int,
        root_dir: str | os.PathLike[str],
        test_path: str | os.PathLike[str],
    ) -> str:
        """Split ``test_path`` relative to ``root_dir`` and trim it."""

        return self.trim(pad, columns, relative_path(root_dir, test_path))

    def _styled(self, directory: str, basename: str) -> str:
        return self.styler(directory + self.separator, DIM) + self.styler(basename, BOLD)

    def _log_trim(self, rule: str, budget: int, parts: PathParts) -> None:
        logger.debug(
            "Trimmed path",
            extra={
                "render_event": "render.path.trimmed",
                "rule": rule,
                "budget": budget,
                "path": parts.join(self.separator),
            },
        )


__all__ = ["ELLIPSIS", "PathTrimmer", "format_test_path"]
