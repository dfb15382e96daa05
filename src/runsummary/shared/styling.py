"""
Summary: Styling capability contract and the style tags used by renderers.
Why: Keep layout code free of any concrete coloring library.
"""

from __future__ import annotations

from typing import Callable, Final

# (text, style_tag) -> text wrapped in zero-width markers
Styler = Callable[[str, str], str]

DIM: Final[str] = "dim"
BOLD: Final[str] = "bold"
FAILED: Final[str] = "bold red"
SKIPPED: Final[str] = "bold yellow"
PASSED: Final[str] = "bold green"
BAR_FILLED: Final[str] = "green reverse"
BAR_EMPTY: Final[str] = "white reverse"


def plain_styler(text: str, style: str) -> str:
    """Return ``text`` unchanged; used when output must carry no markers."""

    del style
    return text


__all__ = [
    "BAR_EMPTY",
    "BAR_FILLED",
    "BOLD",
    "DIM",
    "FAILED",
    "PASSED",
    "SKIPPED",
    "Styler",
    "plain_styler",
]
