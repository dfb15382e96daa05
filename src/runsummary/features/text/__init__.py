# Path: `src/runsummary/features/text/__init__.py`
# Summary: Export the styled text wrapper.
# Why: Provide a stable import surface for reporters and tests.

from .domain.ansi_wrapper import wrap_ansi_string

__all__ = ["wrap_ansi_string"]
