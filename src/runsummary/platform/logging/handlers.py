"""Rich logging handler for structured render events."""

from __future__ import annotations

import logging
from typing import Any, ClassVar

from rich.console import ConsoleRenderable
from rich.logging import RichHandler
from rich.style import Style
from rich.text import Text


class RenderEventRichHandler(RichHandler):
    """Rich handler that renders ``render_event`` records as compact one-liners."""

    _EVENT_STYLES: ClassVar[dict[str, tuple[str, str]]] = {
        "render.path.trimmed": ("✂️", "magenta"),
        "render.text.wrapped": ("↩️", "cyan"),
        "render.progress.bar": ("⏳", "green"),
        "render.summary.composed": ("📋", "blue"),
    }
    _DETAIL_KEYS: ClassVar[tuple[str, ...]] = (
        "rule",
        "budget",
        "width",
        "lines",
        "filled",
        "bar_width",
        "run_time",
        "estimated",
    )

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        """Initialize the handler with compact defaults.

        Args:
            *args: Positional arguments to pass to RichHandler.
            **kwargs: Keyword arguments to pass to RichHandler.
        """
        kwargs["show_time"] = False
        kwargs["show_path"] = False
        kwargs.setdefault("show_level", True)
        kwargs["rich_tracebacks"] = True
        kwargs["markup"] = False
        super().__init__(*args, **kwargs)

    def _render_event_message(self, record: logging.LogRecord, message: str) -> Text | None:
        """Render a structured render event, or ``None`` for ordinary records."""

        event = getattr(record, "render_event", None)
        if not isinstance(event, str):
            return None

        icon, color = self._EVENT_STYLES.get(event, ("ℹ️", "blue"))
        text = Text()
        _ = text.append(f"{icon} ", style=Style(color=color, bold=True))
        _ = text.append(message, style=Style(color=color))

        details = [
            f"{key}={getattr(record, key)}"
            for key in self._DETAIL_KEYS
            if getattr(record, key, None) is not None
        ]
        if details:
            _ = text.append(" [" + ", ".join(details) + "]", style=Style(dim=True))

        path = getattr(record, "path", None)
        if path:
            _ = text.append(" @ ")
            _ = text.append(str(path), style=Style(color="white"))
        return text

    def render_message(self, record: logging.LogRecord, message: str) -> ConsoleRenderable:
        """Render message with custom styling for render events."""

        event_text = self._render_event_message(record, message)
        if event_text is not None:
            return event_text
        return super().render_message(record, message)


__all__ = ["RenderEventRichHandler"]
