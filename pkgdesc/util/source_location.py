# SPDX-License-Identifier: MIT
"""Track where in a manifest script something was declared."""

from __future__ import annotations

import inspect
from dataclasses import dataclass
from pathlib import Path

# Frames from these files are skipped when looking for the caller.
_PKGDESC_ROOT = Path(__file__).resolve().parent.parent


@dataclass(frozen=True)
class SourceLocation:
    """A position in user code.

    Attributes:
        filename: Path of the file.
        lineno: 1-based line number.
        function: Name of the enclosing function, or "<module>".
    """

    filename: str
    lineno: int
    function: str = "<module>"

    def __str__(self) -> str:
        return f"{self.filename}:{self.lineno}"


def _is_internal(filename: str) -> bool:
    try:
        return Path(filename).resolve().is_relative_to(_PKGDESC_ROOT)
    except (OSError, ValueError):
        return False


def get_caller_location() -> SourceLocation | None:
    """Return the location of the first frame outside the pkgdesc package.

    Returns:
        The caller's location, or None if no such frame exists.
    """
    frame = inspect.currentframe()
    try:
        while frame is not None:
            filename = frame.f_code.co_filename
            if not _is_internal(filename):
                return SourceLocation(filename, frame.f_lineno, frame.f_code.co_name)
            frame = frame.f_back
        return None
    finally:
        del frame
