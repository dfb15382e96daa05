"""
Summary: Hard-wrap styled text to a visible width, keeping markers intact.
Why: Escape sequences occupy characters but no columns, so len() overcounts.
"""

from __future__ import annotations

from runsummary.platform.logging import logger
from runsummary.shared.errors import InvalidArgumentError
from runsummary.shared.styled_text import SpanKind, split_styled_spans


def wrap_ansi_string(styled: str, width: int) -> str:
    """Wrap ``styled`` into lines of at most ``width`` visible characters.

    Markers are copied through verbatim and never split. Plain text is cut at
    character granularity; word boundaries are not considered.

    Args:
        styled: Text that may contain SGR escape sequences.
        width: Maximum visible characters per line.

    Returns:
        str: Lines joined with ``\\n``. The last line may be shorter.

    Raises:
        InvalidArgumentError: If ``width`` is not positive.
    """
    if width <= 0:
        raise InvalidArgumentError(f"width must be positive, got {width}")

    lines: list[str] = [""]
    line_length = 0

    for span in split_styled_spans(styled):
        if span.kind is SpanKind.MARKER:
            lines[-1] += span.text
            continue

        token = span.text
        if line_length + len(token) <= width:
            lines[-1] += token
            line_length += len(token)
            continue

        while token:
            room = width - line_length
            lines[-1] += token[:room]
            line_length += len(token[:room])
            token = token[room:]
            if token:
                lines.append("")
                line_length = 0

    if len(lines) > 1:
        logger.debug(
            "Wrapped styled text",
            extra={"render_event": "render.text.wrapped", "width": width, "lines": len(lines)},
        )
    return "\n".join(lines)


__all__ = ["wrap_ansi_string"]
