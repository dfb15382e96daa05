"""Shared pytest fixtures for renderer tests."""

from __future__ import annotations

import pytest

from runsummary.platform.styling import RichStyler
from runsummary.shared.styling import Styler


def tag_styler(text: str, style: str) -> str:
    """Mark styled spans with readable pseudo-tags instead of escape codes."""

    return f"<{style}>{text}</{style}>"


@pytest.fixture
def tags() -> Styler:
    """Provide a styler whose output is easy to assert on."""

    return tag_styler


@pytest.fixture
def ansi() -> Styler:
    """Provide a styler emitting real SGR markers."""

    return RichStyler("standard")
