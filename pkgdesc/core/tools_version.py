# SPDX-License-Identifier: MIT
"""Manifest tools versions.

The tools version declared by a manifest decides which construction
surface it sees. Per-language settings groups and system library
targets exist from version 5 on.
"""

from __future__ import annotations

import re
from typing import NamedTuple

from pkgdesc.core.errors import UnsupportedToolsVersionError

_VERSION_RE = re.compile(r"^(\d+)(?:\.(\d+))?(?:\.(\d+))?$")
_HEADER_RE = re.compile(
    r"^\s*#\s*pkgdesc-tools-version\s*:\s*(\S+)\s*$", re.IGNORECASE
)


class ToolsVersion(NamedTuple):
    """A major.minor.patch tools version, ordered numerically."""

    major: int
    minor: int = 0
    patch: int = 0

    def __str__(self) -> str:
        return f"{self.major}.{self.minor}.{self.patch}"


MINIMUM_VERSION = ToolsVersion(4)
SETTINGS_MIN_VERSION = ToolsVersion(5)


def parse_tools_version(text: str) -> ToolsVersion:
    """Parse a version such as "5", "5.0" or "4.2.1".

    Raises:
        UnsupportedToolsVersionError: If the text is malformed or the
            version predates MINIMUM_VERSION.
    """
    match = _VERSION_RE.match(text.strip())
    if match is None:
        raise UnsupportedToolsVersionError(text)
    version = ToolsVersion(*(int(part or 0) for part in match.groups()))
    if version < MINIMUM_VERSION:
        raise UnsupportedToolsVersionError(text)
    return version


def read_tools_version_header(text: str) -> ToolsVersion | None:
    """Read the tools version declared on the first line of a manifest.

    The declaration looks like ``# pkgdesc-tools-version: 5.0``.

    Returns:
        The declared version, or None if the first line declares none.
    """
    first_line = text.split("\n", 1)[0]
    match = _HEADER_RE.match(first_line)
    if match is None:
        return None
    return parse_tools_version(match.group(1))
