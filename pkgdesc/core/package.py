# SPDX-License-Identifier: MIT
"""Package aggregate for one manifest evaluation."""

from __future__ import annotations

from typing import TYPE_CHECKING

from pkgdesc.util.source_location import SourceLocation, get_caller_location

if TYPE_CHECKING:
    from collections.abc import Iterable

    from pkgdesc.core.target import Target


class Package:
    """A package manifest: a name and its targets.

    Creating a Package registers it so the manifest runner can collect
    it after the script finishes. Target names are not checked for
    uniqueness here; that is left to the package graph.

    Example:
        api = pkgdesc.manifest_api()
        Package("MyPackage", targets=[
            api.target("Core", dependencies=["Utils"]),
            api.target("Utils"),
            api.test_target("CoreTests", dependencies=["Core"]),
        ])

    Attributes:
        name: Package name.
        targets: Targets in declaration order.
        defined_at: Where the package was created in the manifest.
    """

    def __init__(
        self,
        name: str,
        targets: Iterable[Target] = (),
        *,
        defined_at: SourceLocation | None = None,
    ) -> None:
        self.name = name
        self.targets: list[Target] = list(targets)
        self.defined_at = defined_at or get_caller_location()

        from pkgdesc import _register_package

        _register_package(self)

    def __repr__(self) -> str:
        names = ", ".join(t.name for t in self.targets)
        return f"Package({self.name!r}, targets=[{names}])"
