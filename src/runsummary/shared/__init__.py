# Where: runsummary.shared.__init__
# What: Provide a concise import surface for shared value objects and helpers.
# Why: Keep feature modules importing a single definition of each type.

"""Shared cross-cutting utilities exposed at the package level."""

from .aggregate import AggregateCounts, RenderOptions, SnapshotCounts
from .errors import InvalidArgumentError
from .styled_text import SpanKind, StyledSpan, split_styled_spans, strip_markers, visible_length
from .styling import Styler, plain_styler

__all__ = [
    "AggregateCounts",
    "InvalidArgumentError",
    "RenderOptions",
    "SnapshotCounts",
    "SpanKind",
    "StyledSpan",
    "Styler",
    "plain_styler",
    "split_styled_spans",
    "strip_markers",
    "visible_length",
]
