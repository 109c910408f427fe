# SPDX-License-Identifier: MIT
"""Construction surfaces for targets, one per manifest tools version.

A manifest only sees the surface matching its declared tools version:

- PackageDescription4: ``target`` and ``test_target`` without settings
  groups; no system library targets.
- PackageDescription5: the same constructors with the four optional
  settings groups, plus ``system_library``.

Both build targets through the one Target constructor. For the same
shared arguments, the two surfaces produce equal targets.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from pkgdesc.core.dependency import DependencyFactory
from pkgdesc.core.target import Target, TargetType
from pkgdesc.core.tools_version import SETTINGS_MIN_VERSION

if TYPE_CHECKING:
    from collections.abc import Iterable

    from pkgdesc.core.dependency import DependencyLike
    from pkgdesc.core.providers import SystemPackageProvider
    from pkgdesc.core.tools_version import ToolsVersion


class PackageDescription4:
    """Construction surface for tools version 4 manifests."""

    Dependency = DependencyFactory

    @staticmethod
    def target(
        name: str,
        dependencies: Iterable[DependencyLike] = (),
        path: str | None = None,
        exclude: Iterable[str] = (),
        sources: Iterable[str] | None = None,
        public_headers_path: str | None = None,
    ) -> Target:
        """Create a library or executable target.

        Args:
            name: The name of the target.
            dependencies: Targets in the package or products from
                package dependencies. Strings are by-name dependencies.
            path: Custom target path relative to the package root.
                Must not escape the package root.
            exclude: Paths, relative to the target path, never
                considered source files.
            sources: Explicit list of source files. None means every
                source file under the target path.
            public_headers_path: Directory containing public headers of
                a C-family library target.
        """
        return Target(
            name,
            type=TargetType.REGULAR,
            dependencies=dependencies,
            path=path,
            exclude=exclude,
            sources=sources,
            public_headers_path=public_headers_path,
        )

    @staticmethod
    def test_target(
        name: str,
        dependencies: Iterable[DependencyLike] = (),
        path: str | None = None,
        exclude: Iterable[str] = (),
        sources: Iterable[str] | None = None,
    ) -> Target:
        """Create a test target.

        Test targets usually depend on the targets they test. Arguments
        are as for ``target``.
        """
        return Target(
            name,
            type=TargetType.TEST,
            dependencies=dependencies,
            path=path,
            exclude=exclude,
            sources=sources,
        )


class PackageDescription5:
    """Construction surface for tools version 5 manifests."""

    Dependency = DependencyFactory

    @staticmethod
    def target(
        name: str,
        dependencies: Iterable[DependencyLike] = (),
        path: str | None = None,
        exclude: Iterable[str] = (),
        sources: Iterable[str] | None = None,
        public_headers_path: str | None = None,
        *,
        c_settings: Iterable[Any] | None = None,
        cxx_settings: Iterable[Any] | None = None,
        swift_settings: Iterable[Any] | None = None,
        linker_settings: Iterable[Any] | None = None,
    ) -> Target:
        """Create a library or executable target.

        Takes the arguments of PackageDescription4.target plus the four
        settings groups. A group left as None is absent from the target,
        which is not the same as an empty group.
        """
        return Target(
            name,
            type=TargetType.REGULAR,
            dependencies=dependencies,
            path=path,
            exclude=exclude,
            sources=sources,
            public_headers_path=public_headers_path,
            c_settings=c_settings,
            cxx_settings=cxx_settings,
            swift_settings=swift_settings,
            linker_settings=linker_settings,
        )

    @staticmethod
    def test_target(
        name: str,
        dependencies: Iterable[DependencyLike] = (),
        path: str | None = None,
        exclude: Iterable[str] = (),
        sources: Iterable[str] | None = None,
        *,
        c_settings: Iterable[Any] | None = None,
        cxx_settings: Iterable[Any] | None = None,
        swift_settings: Iterable[Any] | None = None,
        linker_settings: Iterable[Any] | None = None,
    ) -> Target:
        """Create a test target with optional settings groups."""
        return Target(
            name,
            type=TargetType.TEST,
            dependencies=dependencies,
            path=path,
            exclude=exclude,
            sources=sources,
            c_settings=c_settings,
            cxx_settings=cxx_settings,
            swift_settings=swift_settings,
            linker_settings=linker_settings,
        )

    @staticmethod
    def system_library(
        name: str,
        path: str | None = None,
        pkg_config: str | None = None,
        providers: Iterable[SystemPackageProvider] | None = None,
    ) -> Target:
        """Create a system library target.

        System library targets adapt a library installed by a system
        package manager (Homebrew, APT, ...) so that other targets can
        use it. They have no dependencies, sources or settings.

        Args:
            name: The name of the target.
            path: Custom target path relative to the package root.
            pkg_config: Name of the library's pkg-config file.
            providers: Packages that provide the library.
        """
        return Target(
            name,
            type=TargetType.SYSTEM,
            path=path,
            pkg_config=pkg_config,
            providers=providers,
        )


ConstructionSurface = type[PackageDescription4] | type[PackageDescription5]


def surface_for(version: ToolsVersion) -> ConstructionSurface:
    """Return the construction surface a manifest of this version sees."""
    if version >= SETTINGS_MIN_VERSION:
        return PackageDescription5
    return PackageDescription4
