"""Where: src/runsummary/config/settings.py
What: Derived runtime settings sourced from the loaded configuration.
Why: Expose validated constants to renderers without file I/O.
Assumptions: - Config defaults remain compatible with current runtime expectations.
Trade-offs: - Validation is limited to simple boundary checks.
"""

from __future__ import annotations

from runsummary.config.config import (
    COLOR_SYSTEM_DEFAULT,
    PROGRESS_BAR_WIDTH_DEFAULT,
    PROGRESS_MIN_ESTIMATE_DEFAULT,
    config as app_config,
)
from runsummary.platform.logging import setup_logger

# Progress bar -----------------------------------------------------------------

_bar_width = getattr(app_config, "progress_bar_width", PROGRESS_BAR_WIDTH_DEFAULT)
PROGRESS_BAR_WIDTH: int = (
    _bar_width
    if isinstance(_bar_width, int) and not isinstance(_bar_width, bool) and _bar_width > 0
    else PROGRESS_BAR_WIDTH_DEFAULT
)

_min_estimate = getattr(app_config, "progress_min_estimate", PROGRESS_MIN_ESTIMATE_DEFAULT)
PROGRESS_MIN_ESTIMATE: float = (
    float(_min_estimate)
    if isinstance(_min_estimate, (int, float))
    and not isinstance(_min_estimate, bool)
    and _min_estimate >= 0
    else PROGRESS_MIN_ESTIMATE_DEFAULT
)


# Styling ----------------------------------------------------------------------

# Accepted values mirror rich's color systems plus "none".
_COLOR_SYSTEMS: tuple[str, ...] = ("none", "standard", "256", "truecolor", "windows")

_color_system = str(getattr(app_config, "color_system", COLOR_SYSTEM_DEFAULT)).strip().lower()
COLOR_SYSTEM: str = _color_system if _color_system in _COLOR_SYSTEMS else COLOR_SYSTEM_DEFAULT


# Logging ----------------------------------------------------------------------

LOG_FILE = app_config.log_file
if LOG_FILE is not None:
    _ = setup_logger(log_file=LOG_FILE)


__all__ = [
    "COLOR_SYSTEM",
    "LOG_FILE",
    "PROGRESS_BAR_WIDTH",
    "PROGRESS_MIN_ESTIMATE",
]
