# SPDX-License-Identifier: MIT
"""Custom exceptions for pkgdesc.

All pkgdesc exceptions inherit from PkgDescError, which includes
optional source location information for better error messages.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pkgdesc.util.source_location import SourceLocation


class PkgDescError(Exception):
    """Base class for all pkgdesc exceptions.

    Attributes:
        message: The error message.
        location: Optional source location where the error occurred.
    """

    def __init__(
        self,
        message: str,
        location: SourceLocation | None = None,
    ) -> None:
        self.message = message
        self.location = location
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        if self.location:
            return f"{self.location}: {self.message}"
        return self.message


class InvalidTargetError(PkgDescError):
    """A target was declared with a combination of fields that makes no sense.

    Raised when system-library metadata (pkg_config, providers) is given
    to a regular or test target.

    Attributes:
        target: Name of the offending target.
    """

    def __init__(
        self,
        target: str,
        reason: str,
        location: SourceLocation | None = None,
    ) -> None:
        self.target = target
        super().__init__(f"invalid target {target!r}: {reason}", location)


class UnsupportedToolsVersionError(PkgDescError):
    """Declared tools version is malformed or not supported.

    Attributes:
        version: The version text as written.
    """

    def __init__(
        self,
        version: str,
        location: SourceLocation | None = None,
    ) -> None:
        self.version = version
        super().__init__(f"unsupported tools version: {version!r}", location)


class ManifestError(PkgDescError):
    """Manifest script failed to evaluate or declared no package."""
