# Path: `src/runsummary/features/path/__init__.py`
# Summary: Export path splitting and trimming symbols.
# Why: Provide a stable import surface for reporters and tests.

from .domain.path_parts import PathParts, relative_path
from .usecases.path_trimmer import ELLIPSIS, PathTrimmer, format_test_path

__all__ = [
    "ELLIPSIS",
    "PathParts",
    "PathTrimmer",
    "format_test_path",
    "relative_path",
]
