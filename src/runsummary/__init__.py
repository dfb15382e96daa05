"""Terminal-width-aware status text for test-run reports."""

from runsummary.features.path import PathParts, PathTrimmer, format_test_path, relative_path
from runsummary.features.summary import ProgressRenderer, SummaryComposer, pluralize
from runsummary.features.text import wrap_ansi_string
from runsummary.shared.aggregate import AggregateCounts, RenderOptions, SnapshotCounts
from runsummary.shared.errors import InvalidArgumentError

__all__ = [
    "AggregateCounts",
    "InvalidArgumentError",
    "PathParts",
    "PathTrimmer",
    "ProgressRenderer",
    "RenderOptions",
    "SnapshotCounts",
    "SummaryComposer",
    "format_test_path",
    "pluralize",
    "relative_path",
    "wrap_ansi_string",
]
