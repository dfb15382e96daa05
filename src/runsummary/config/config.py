"""Configuration management for runsummary."""

import tomllib
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any, ClassVar

from runsummary.config.paths import default_config_path
from runsummary.platform.logging import logger

PROGRESS_BAR_WIDTH_DEFAULT = 40
PROGRESS_MIN_ESTIMATE_DEFAULT = 2.0
COLOR_SYSTEM_DEFAULT = "standard"


def _path_field(default: Path | None = None) -> Any:
    """Create a field for Path objects with proper conversion.

    Args:
        default: Default value for the field.

    Returns:
        Field with proper metadata for path handling.
    """
    return field(default=default, metadata={"path": True})


@dataclass
class Config:
    """Library configuration."""

    # Maximum width of the progress bar, in columns
    progress_bar_width: int = PROGRESS_BAR_WIDTH_DEFAULT

    # Estimates at or below this many seconds never draw a bar
    progress_min_estimate: float = PROGRESS_MIN_ESTIMATE_DEFAULT

    # Rich color system for the default styler ("none" disables styling)
    color_system: str = COLOR_SYSTEM_DEFAULT

    # Log file path
    log_file: Path | None = _path_field()

    # Singleton instance
    _instance: ClassVar["Config | None"] = None
    _loaded_from: ClassVar[Path | None] = None

    def __post_init__(self) -> None:
        """Convert string paths to ``Path`` objects using field metadata."""

        for f in fields(self):
            if not f.metadata.get("path", False):
                continue
            value = getattr(self, f.name)
            if isinstance(value, str):
                setattr(self, f.name, Path(value).expanduser() if value.strip() else None)

    @classmethod
    def load(cls) -> "Config":
        """Load configuration from the TOML file.

        A missing file yields the defaults; nothing is written to disk.

        Returns:
            Config: Loaded configuration object.
        """
        if cls._instance is not None:
            return cls._instance

        config_file = default_config_path()

        try:
            if config_file.exists():
                with open(config_file, "rb") as f:
                    config_dict = tomllib.load(f)

                known = {f.name for f in fields(cls)}
                unknown = sorted(set(config_dict) - known)
                if unknown:
                    logger.warning(
                        "Ignoring unknown configuration keys in %s: %s",
                        config_file,
                        ", ".join(unknown),
                    )
                instance = cls(**{key: value for key, value in config_dict.items() if key in known})
                logger.debug("Configuration loaded from %s", config_file)
            else:
                instance = cls()
                logger.debug("No configuration at %s, using defaults", config_file)

            cls._instance = instance
            cls._loaded_from = config_file
            return instance

        except Exception as e:
            logger.error("Failed to load configuration: %s", e)
            raise


config = Config.load()


__all__ = [
    "COLOR_SYSTEM_DEFAULT",
    "Config",
    "PROGRESS_BAR_WIDTH_DEFAULT",
    "PROGRESS_MIN_ESTIMATE_DEFAULT",
    "config",
]
