"""Rich-backed styling adapter exports."""

from .rich_styler import RichStyler, default_styler

__all__ = ["RichStyler", "default_styler"]
