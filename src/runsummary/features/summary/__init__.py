# Path: `src/runsummary/features/summary/__init__.py`
# Summary: Export run summary and progress rendering symbols.
# Why: Provide a stable import surface for reporters and tests.

from .domain.wording import format_seconds, pluralize
from .usecases.progress_renderer import ProgressRenderer
from .usecases.summary_composer import SummaryComposer

__all__ = ["ProgressRenderer", "SummaryComposer", "format_seconds", "pluralize"]
