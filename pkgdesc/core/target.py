# SPDX-License-Identifier: MIT
"""Target descriptor.

A Target declares one compilation unit of a package: a library or
executable, a test suite, or an adapter for a library installed on the
system. It only describes the unit; finding its source files, resolving
its dependencies and compiling it are done by other tools from the
serialized form.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import TYPE_CHECKING, Any

from pkgdesc.core.dependency import DependencyList
from pkgdesc.core.errors import InvalidTargetError
from pkgdesc.util.source_location import SourceLocation, get_caller_location

if TYPE_CHECKING:
    from collections.abc import Iterable

    from pkgdesc.core.dependency import DependencyLike
    from pkgdesc.core.providers import SystemPackageProvider

logger = logging.getLogger(__name__)


class TargetType(str, Enum):
    """Kind of target. The value is the serialized name."""

    REGULAR = "regular"
    TEST = "test"
    SYSTEM = "system"


def _optional_list(values: Iterable[Any] | None) -> list[Any] | None:
    if values is None:
        return None
    if isinstance(values, str):
        raise TypeError("expected a sequence, not a single string")
    return list(values)


class Target:
    """A declared target of a package.

    Targets are normally created through a construction surface
    (PackageDescription4 or PackageDescription5), which picks the right
    defaults for the manifest's tools version. The constructor here is
    the single place every surface funnels into.

    Example:
        core = PackageDescription5.target(
            "Core",
            dependencies=["Utils", Dependency.product("Logging", package="swift-log")],
        )
        core.exclude.append("Fixtures")

    Attributes:
        name: Target name.
        path: Target directory relative to the package root, or None to
            search the default locations.
        sources: Explicit source paths relative to ``path``, or None to
            use every source file found there.
        exclude: Paths never considered sources; wins over ``sources``.
        dependencies: Targets and products this target depends on.
        public_headers_path: Directory of public headers for C-family
            targets, or None for the default ("include").
        c_settings: C settings, or None if not supplied.
        cxx_settings: C++ settings, or None if not supplied.
        swift_settings: Swift settings, or None if not supplied.
        linker_settings: Linker settings, or None if not supplied.
        defined_at: Where this target was created in the manifest.
    """

    __slots__ = (
        "name",
        "path",
        "_sources",
        "_exclude",
        "_dependencies",
        "public_headers_path",
        "_type",
        "_pkg_config",
        "_providers",
        "_c_settings",
        "_cxx_settings",
        "_swift_settings",
        "_linker_settings",
        "defined_at",
    )

    def __init__(
        self,
        name: str,
        *,
        type: TargetType,
        dependencies: Iterable[DependencyLike] = (),
        path: str | None = None,
        exclude: Iterable[str] = (),
        sources: Iterable[str] | None = None,
        public_headers_path: str | None = None,
        pkg_config: str | None = None,
        providers: Iterable[SystemPackageProvider] | None = None,
        c_settings: Iterable[Any] | None = None,
        cxx_settings: Iterable[Any] | None = None,
        swift_settings: Iterable[Any] | None = None,
        linker_settings: Iterable[Any] | None = None,
        defined_at: SourceLocation | None = None,
    ) -> None:
        """Create a target.

        Raises:
            InvalidTargetError: If pkg_config or providers is given for a
                target that is not a system library.
        """
        self.defined_at = defined_at or get_caller_location()
        target_type = TargetType(type)
        if target_type is not TargetType.SYSTEM:
            if pkg_config is not None:
                raise InvalidTargetError(
                    name,
                    f"pkg_config is only allowed on system library targets, "
                    f"not {target_type.value} targets",
                    self.defined_at,
                )
            if providers is not None:
                raise InvalidTargetError(
                    name,
                    f"providers are only allowed on system library targets, "
                    f"not {target_type.value} targets",
                    self.defined_at,
                )

        self.name = name
        self.path = path
        self.sources = sources
        self.exclude = exclude
        self.dependencies = dependencies
        self.public_headers_path = public_headers_path
        self._type = target_type
        self._pkg_config = pkg_config
        self._providers = _optional_list(providers)
        self.c_settings = c_settings
        self.cxx_settings = cxx_settings
        self.swift_settings = swift_settings
        self.linker_settings = linker_settings

        logger.debug("Declared %s target %r", target_type.value, name)

    # Fixed at construction

    @property
    def type(self) -> TargetType:
        """The kind of target."""
        return self._type

    @property
    def pkg_config(self) -> str | None:
        """pkg-config name used to find flags for a system library."""
        return self._pkg_config

    @property
    def providers(self) -> list[SystemPackageProvider] | None:
        """System package providers for a system library."""
        if self._providers is None:
            return None
        return list(self._providers)

    @property
    def is_test(self) -> bool:
        """True if this is a test target."""
        return self._type is TargetType.TEST

    # Mutable, normalized on assignment

    @property
    def sources(self) -> list[str] | None:
        return self._sources

    @sources.setter
    def sources(self, value: Iterable[str] | None) -> None:
        self._sources = _optional_list(value)

    @property
    def exclude(self) -> list[str]:
        return self._exclude

    @exclude.setter
    def exclude(self, value: Iterable[str]) -> None:
        if value is None:
            raise TypeError("exclude must be a sequence, use [] for no exclusions")
        self._exclude = _optional_list(value)

    @property
    def dependencies(self) -> DependencyList:
        """Dependencies; strings written into the list become by-name dependencies."""
        return self._dependencies

    @dependencies.setter
    def dependencies(self, value: Iterable[DependencyLike]) -> None:
        self._dependencies = DependencyList(value)

    @property
    def c_settings(self) -> list[Any] | None:
        return self._c_settings

    @c_settings.setter
    def c_settings(self, value: Iterable[Any] | None) -> None:
        self._c_settings = _optional_list(value)

    @property
    def cxx_settings(self) -> list[Any] | None:
        return self._cxx_settings

    @cxx_settings.setter
    def cxx_settings(self, value: Iterable[Any] | None) -> None:
        self._cxx_settings = _optional_list(value)

    @property
    def swift_settings(self) -> list[Any] | None:
        return self._swift_settings

    @swift_settings.setter
    def swift_settings(self, value: Iterable[Any] | None) -> None:
        self._swift_settings = _optional_list(value)

    @property
    def linker_settings(self) -> list[Any] | None:
        return self._linker_settings

    @linker_settings.setter
    def linker_settings(self, value: Iterable[Any] | None) -> None:
        self._linker_settings = _optional_list(value)

    def add_dependency(self, dependency: DependencyLike) -> Target:
        """Append a dependency (fluent API).

        Args:
            dependency: A dependency or a name for a by-name dependency.

        Returns:
            self for method chaining.
        """
        self._dependencies.append(dependency)
        return self

    def _state(self) -> tuple[Any, ...]:
        return (
            self.name,
            self.path,
            self._sources,
            self._exclude,
            self._dependencies,
            self.public_headers_path,
            self._type,
            self._pkg_config,
            self._providers,
            self._c_settings,
            self._cxx_settings,
            self._swift_settings,
            self._linker_settings,
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Target):
            return NotImplemented
        return self._state() == other._state()

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        deps = ", ".join(d.name for d in self._dependencies)
        return f"Target({self.name!r}, type={self._type.value}, deps=[{deps}])"
