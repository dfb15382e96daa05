"""
Summary: Split test paths into directory and basename relative to a root.
Why: Let display code style and truncate each part independently.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import PurePath

from runsummary.shared.errors import InvalidArgumentError


@dataclass(frozen=True)
class PathParts:
    """Directory and basename of a path relative to a project root."""

    directory: str
    basename: str

    def join(self, separator: str = os.sep) -> str:
        """Reconstruct the relative path."""

        return self.directory + separator + self.basename


def relative_path(root_dir: str | os.PathLike[str], test_path: str | os.PathLike[str]) -> PathParts:
    """Split ``test_path`` relative to ``root_dir``.

    Args:
        root_dir: Project root the path is displayed relative to.
        test_path: Path of the test file.

    Returns:
        PathParts: ``directory`` is ``"."`` for files directly under the root.

    Raises:
        InvalidArgumentError: If ``test_path`` is not located under ``root_dir``
            or names the root itself.
    """
    # Collapse ".." first; relative_to only compares path text.
    root = PurePath(os.path.normpath(root_dir))
    target = PurePath(os.path.normpath(test_path))
    try:
        relative = target.relative_to(root)
    except ValueError as exc:
        raise InvalidArgumentError(f"{test_path} is not under {root_dir}") from exc

    if not relative.name:
        raise InvalidArgumentError(f"{test_path} does not name a file under {root_dir}")

    return PathParts(directory=str(relative.parent), basename=relative.name)


__all__ = ["PathParts", "relative_path"]
