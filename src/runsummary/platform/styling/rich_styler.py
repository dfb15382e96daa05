"""
Summary: Styler implementation that emits SGR markers through Rich styles.
Why: Supply the renderers' styling capability without hand-written escape codes.
"""

from __future__ import annotations

from typing import Final, final

from rich.color import ColorSystem
from rich.errors import StyleSyntaxError
from rich.style import Style

from runsummary.shared.errors import InvalidArgumentError

_COLOR_SYSTEMS: Final[dict[str, ColorSystem | None]] = {
    "none": None,
    "standard": ColorSystem.STANDARD,
    "256": ColorSystem.EIGHT_BIT,
    "truecolor": ColorSystem.TRUECOLOR,
    "windows": ColorSystem.WINDOWS,
}


@final
class RichStyler:
    """Wrap text in the escape sequences of a Rich style definition."""

    color_system: ColorSystem | None

    def __init__(self, color_system: str = "standard") -> None:
        """Initialize the styler.

        Args:
            color_system: One of ``none``, ``standard``, ``256``, ``truecolor``
                or ``windows``. ``none`` returns text unstyled.
        """
        try:
            self.color_system = _COLOR_SYSTEMS[color_system]
        except KeyError as exc:
            raise InvalidArgumentError(f"Unknown color system: {color_system!r}") from exc

    def __call__(self, text: str, style: str) -> str:
        """Return ``text`` wrapped in the markers for ``style``."""

        try:
            parsed = Style.parse(style)
        except StyleSyntaxError as exc:
            raise InvalidArgumentError(f"Invalid style tag: {style!r}") from exc
        return parsed.render(text, color_system=self.color_system)


def default_styler() -> RichStyler:
    """Build a styler from the configured color system."""

    from runsummary.config.settings import COLOR_SYSTEM

    return RichStyler(COLOR_SYSTEM)


__all__ = ["RichStyler", "default_styler"]
