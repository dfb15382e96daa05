"""Tests for the logger bootstrap."""

from __future__ import annotations

import logging
import logging.handlers
from collections.abc import Iterator
from io import StringIO
from pathlib import Path

import pytest
from rich.console import Console

from runsummary.platform.logging import RenderEventRichHandler, logger, setup_logger


@pytest.fixture(autouse=True)
def restore_logger() -> Iterator[None]:
    """Reinstall the default handlers after each test."""

    yield
    _ = setup_logger()


def test_setup_logger_installs_rich_console_handler() -> None:
    configured = setup_logger()

    assert configured is logger
    assert configured.name == "runsummary"
    assert len(configured.handlers) == 1
    assert isinstance(configured.handlers[0], RenderEventRichHandler)
    assert configured.handlers[0].level == logging.INFO


def test_setup_logger_is_idempotent() -> None:
    """Calling setup twice must not stack handlers."""

    _ = setup_logger()
    configured = setup_logger()

    assert len(configured.handlers) == 1


def test_setup_logger_writes_debug_events_to_file(tmp_path: Path) -> None:
    log_file = tmp_path / "logs" / "runsummary.log"
    console = Console(file=StringIO(), force_terminal=False)

    configured = setup_logger(log_file=log_file, console=console)
    configured.debug("Wrapped styled text", extra={"render_event": "render.text.wrapped"})
    for handler in configured.handlers:
        handler.flush()

    file_handlers = [
        h for h in configured.handlers if isinstance(h, logging.handlers.RotatingFileHandler)
    ]
    assert len(file_handlers) == 1
    assert "DEBUG - Wrapped styled text" in log_file.read_text(encoding="utf-8")
    # DEBUG stays out of the INFO console.
    assert "Wrapped styled text" not in console.file.getvalue()  # type: ignore[attr-defined]
