"""Tests for wrapping styled text by visible width."""

from __future__ import annotations

import pytest
from pytest_mock import MockerFixture

from runsummary.features.text import wrap_ansi_string
from runsummary.shared.errors import InvalidArgumentError
from runsummary.shared.styled_text import MARKER_PATTERN, strip_markers, visible_length
from runsummary.shared.styling import Styler

BOLD = "\x1b[1m"
UNBOLD = "\x1b[22m"
RED = "\x1b[31m"
RESET = "\x1b[39m"


def test_wrap_short_text_is_unchanged() -> None:
    """Text within the width stays on one line."""

    assert wrap_ansi_string("hello", 10) == "hello"


def test_wrap_empty_string() -> None:
    """An empty input produces an empty output."""

    assert wrap_ansi_string("", 5) == ""


@pytest.mark.parametrize(
    ("text", "width", "expected"),
    [
        ("abcdef", 3, "abc\ndef"),
        ("abcdefg", 3, "abc\ndef\ng"),
        ("abcdef", 1, "a\nb\nc\nd\ne\nf"),
    ],
)
def test_wrap_plain_text_cuts_at_character_granularity(text: str, width: int, expected: str) -> None:
    """Plain text is hard-cut without regard to word boundaries."""

    assert wrap_ansi_string(text, width) == expected


def test_wrap_markers_do_not_count_toward_width() -> None:
    """Escape sequences are copied verbatim and occupy no columns."""

    styled = f"{RED}abcdef{RESET}"

    assert wrap_ansi_string(styled, 3) == f"{RED}abc\ndef{RESET}"


def test_wrap_marker_at_line_boundary_stays_on_current_line() -> None:
    """A marker reached when the line is full is kept whole before the break."""

    assert wrap_ansi_string(f"ab{RED}cd", 2) == f"ab{RED}\ncd"


def test_wrap_keeps_single_trailing_character_after_last_marker() -> None:
    """One plain character after the final marker must survive wrapping."""

    assert wrap_ansi_string(f"{BOLD}ab{UNBOLD}c", 10) == f"{BOLD}ab{UNBOLD}c"
    assert wrap_ansi_string(f"{BOLD}ab{UNBOLD}c", 2) == f"{BOLD}ab{UNBOLD}\nc"


def test_wrap_continues_counting_across_spans() -> None:
    """Visible width accumulates across plain runs separated by markers."""

    styled = f"ab{RED}cd{RESET}ef"

    assert wrap_ansi_string(styled, 3) == f"ab{RED}c\nd{RESET}ef"


def test_wrap_recognizes_single_byte_csi() -> None:
    """The 8-bit CSI introducer is treated as a marker too."""

    assert wrap_ansi_string("\x9b31mabcd", 2) == "\x9b31mab\ncd"


@pytest.mark.parametrize("width", [0, -3])
def test_wrap_rejects_non_positive_width(width: int) -> None:
    """Widths below one column are contract violations."""

    with pytest.raises(InvalidArgumentError):
        _ = wrap_ansi_string("abc", width)


@pytest.mark.parametrize("width", range(1, 13))
def test_wrap_preserves_content_and_respects_width(ansi: Styler, width: int) -> None:
    """Visible content is unchanged, markers are intact and lines fit the width."""

    styled = (
        ansi("Test Suites: ", "bold")
        + ansi("1 failed", "bold red")
        + ", "
        + ansi("12 passed", "bold green")
        + ", 13 total"
    )

    wrapped = wrap_ansi_string(styled, width)
    lines = wrapped.split("\n")

    assert strip_markers(wrapped).replace("\n", "") == strip_markers(styled)
    assert MARKER_PATTERN.findall(wrapped) == MARKER_PATTERN.findall(styled)
    assert all(visible_length(line) <= width for line in lines)


def test_wrap_logs_when_lines_are_split(mocker: MockerFixture) -> None:
    """Wrapping that produces several lines is logged as a render event."""

    mock_debug = mocker.patch("runsummary.features.text.domain.ansi_wrapper.logger.debug")

    _ = wrap_ansi_string("abcdef", 3)

    extra = mock_debug.call_args.kwargs["extra"]
    assert extra == {"render_event": "render.text.wrapped", "width": 3, "lines": 2}
