# SPDX-License-Identifier: MIT
"""System package providers for system-library targets.

A provider names the system package manager packages that supply a
library, so tools can suggest how to install it when it is missing.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Literal

if TYPE_CHECKING:
    from collections.abc import Iterable

ProviderKind = Literal["brew", "apt", "yum"]


@dataclass(frozen=True)
class SystemPackageProvider:
    """Packages to install through one system package manager.

    Attributes:
        kind: Package manager ("brew", "apt" or "yum").
        packages: Package names, in the order given.
    """

    kind: ProviderKind
    packages: tuple[str, ...]

    @classmethod
    def brew(cls, packages: Iterable[str]) -> SystemPackageProvider:
        """Packages installed with Homebrew."""
        return cls("brew", tuple(packages))

    @classmethod
    def apt(cls, packages: Iterable[str]) -> SystemPackageProvider:
        """Packages installed with APT."""
        return cls("apt", tuple(packages))

    @classmethod
    def yum(cls, packages: Iterable[str]) -> SystemPackageProvider:
        """Packages installed with Yum."""
        return cls("yum", tuple(packages))

    def to_dict(self) -> dict[str, Any]:
        return {"name": self.kind, "values": list(self.packages)}
