"""
Summary: Tokenize styled strings into plain and zero-width marker spans.
Why: Let width math count visible characters without touching escape codes.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from typing import Final

# SGR sequences introduced by ESC[ or the single-byte CSI.
MARKER_PATTERN: Final[re.Pattern[str]] = re.compile(r"[\u001b\u009b]\[[0-9;]*m")


class SpanKind(Enum):
    """Kind of a run inside a styled string."""

    PLAIN = "plain"
    MARKER = "marker"


@dataclass(frozen=True)
class StyledSpan:
    """Contiguous run of a styled string."""

    kind: SpanKind
    text: str

    @property
    def width(self) -> int:
        """Number of terminal columns the span occupies."""

        return len(self.text) if self.kind is SpanKind.PLAIN else 0


def split_styled_spans(styled: str) -> list[StyledSpan]:
    """Split ``styled`` into ordered spans.

    Concatenating the ``text`` of the returned spans reproduces ``styled``.
    Empty plain runs are never emitted.

    Args:
        styled: String that may contain SGR escape sequences.

    Returns:
        list[StyledSpan]: Plain and marker spans in input order.
    """
    spans: list[StyledSpan] = []
    last_index = 0

    for match in MARKER_PATTERN.finditer(styled):
        if match.start() != last_index:
            spans.append(StyledSpan(SpanKind.PLAIN, styled[last_index : match.start()]))
        spans.append(StyledSpan(SpanKind.MARKER, match.group(0)))
        last_index = match.end()

    if last_index < len(styled):
        spans.append(StyledSpan(SpanKind.PLAIN, styled[last_index:]))

    return spans


def strip_markers(styled: str) -> str:
    """Return ``styled`` without any zero-width markers."""

    return MARKER_PATTERN.sub("", styled)


def visible_length(styled: str) -> int:
    """Return the visible width of ``styled``."""

    return sum(span.width for span in split_styled_spans(styled))


__all__ = [
    "MARKER_PATTERN",
    "SpanKind",
    "StyledSpan",
    "split_styled_spans",
    "strip_markers",
    "visible_length",
]
