"""Number and word formatting shared by the summary lines."""

from __future__ import annotations


def pluralize(word: str, count: int) -> str:
    """Return ``"<count> <word>"`` with an ``s`` unless ``count`` is 1."""

    return f"{count} {word}{'' if count == 1 else 's'}"


def format_seconds(value: float) -> str:
    """Format a duration without a trailing ``.0`` for whole numbers.

    Examples:
        >>> format_seconds(5.0)
        '5'
        >>> format_seconds(5.25)
        '5.25'
    """
    if isinstance(value, int):
        return str(value)
    if float(value).is_integer():
        return str(int(value))
    return repr(float(value))


__all__ = ["format_seconds", "pluralize"]
