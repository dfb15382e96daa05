"""Tests for validated settings derived from the configuration."""

from __future__ import annotations

import importlib
from collections.abc import Iterator

import pytest

import runsummary.config.config as config_module
import runsummary.config.settings as settings
from runsummary.config.config import Config


@pytest.fixture
def reload_settings(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Reload settings against a patched config and restore afterwards."""

    yield
    monkeypatch.undo()
    _ = importlib.reload(settings)


def _load(monkeypatch: pytest.MonkeyPatch, **values: object) -> None:
    monkeypatch.setattr(config_module, "config", Config(**values))  # type: ignore[arg-type]
    _ = importlib.reload(settings)


def test_valid_values_pass_through(reload_settings: None, monkeypatch: pytest.MonkeyPatch) -> None:
    _load(monkeypatch, progress_bar_width=20, progress_min_estimate=0.5, color_system="256")

    assert settings.PROGRESS_BAR_WIDTH == 20
    assert settings.PROGRESS_MIN_ESTIMATE == 0.5
    assert settings.COLOR_SYSTEM == "256"


@pytest.mark.parametrize("width", [0, -4, True, "wide"])
def test_invalid_bar_width_falls_back(
    reload_settings: None, monkeypatch: pytest.MonkeyPatch, width: object
) -> None:
    _load(monkeypatch, progress_bar_width=width)

    assert settings.PROGRESS_BAR_WIDTH == 40


def test_negative_min_estimate_falls_back(
    reload_settings: None, monkeypatch: pytest.MonkeyPatch
) -> None:
    _load(monkeypatch, progress_min_estimate=-1)

    assert settings.PROGRESS_MIN_ESTIMATE == 2.0


def test_color_system_is_normalized(reload_settings: None, monkeypatch: pytest.MonkeyPatch) -> None:
    _load(monkeypatch, color_system="  TrueColor ")

    assert settings.COLOR_SYSTEM == "truecolor"


def test_unknown_color_system_falls_back(
    reload_settings: None, monkeypatch: pytest.MonkeyPatch
) -> None:
    _load(monkeypatch, color_system="sixteen")

    assert settings.COLOR_SYSTEM == "standard"
