# SPDX-License-Identifier: MIT
"""
pkgdesc: declarative package manifests in Python.

A manifest declares a package's targets (libraries, executables, test
suites and system library adapters) through a construction surface
chosen by the manifest's tools version. pkgdesc validates and
canonicalizes the declarations and serializes them to JSON for the
build-graph builder.
"""

from __future__ import annotations

import logging
import os
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pkgdesc.core.package import Package
    from pkgdesc.core.surface import ConstructionSurface
    from pkgdesc.core.tools_version import ToolsVersion

# Re-export commonly used classes for convenient imports
from pkgdesc.core.dependency import (  # noqa: E402
    ByNameDependency,
    ProductDependency,
    TargetDependency,
)
from pkgdesc.core.errors import InvalidTargetError, PkgDescError  # noqa: E402
from pkgdesc.core.package import Package  # noqa: E402, F811
from pkgdesc.core.providers import SystemPackageProvider  # noqa: E402
from pkgdesc.core.settings import (  # noqa: E402
    BuildSetting,
    BuildSettingCondition,
    CSetting,
    CXXSetting,
    LinkerSetting,
    SwiftSetting,
)
from pkgdesc.core.surface import (  # noqa: E402
    PackageDescription4,
    PackageDescription5,
    surface_for,
)
from pkgdesc.core.target import Target, TargetType  # noqa: E402
from pkgdesc.core.tools_version import parse_tools_version  # noqa: E402

__version__ = "0.1.0"

logger = logging.getLogger(__name__)

DEFAULT_TOOLS_VERSION = "5.0"

# Global registry for Package instances
_registered_packages: list[Package] = []


def _register_package(package: Package) -> None:
    """Register a package (called by Package.__init__)."""
    _registered_packages.append(package)


def get_registered_packages() -> list[Package]:
    """Get all registered packages."""
    return list(_registered_packages)


def _clear_registered_packages() -> None:
    """Clear the registry (called by the manifest runner before a script)."""
    _registered_packages.clear()


def get_tools_version(default: str = DEFAULT_TOOLS_VERSION) -> ToolsVersion:
    """Get the tools version the current manifest is evaluated with.

    The version can be set with:
        pkgdesc dump --tools-version=4

    Or when running a manifest directly:
        PKGDESC_TOOLS_VERSION=4 python Package.py

    Args:
        default: Version used when PKGDESC_TOOLS_VERSION is not set.

    Returns:
        The parsed tools version.

    Raises:
        UnsupportedToolsVersionError: If the version is malformed or too old.
    """
    return parse_tools_version(os.environ.get("PKGDESC_TOOLS_VERSION") or default)


def get_indent(default: int = 2) -> int | None:
    """JSON indentation for dumps, from PKGDESC_INDENT.

    A value of "none" (or any negative number) gives compact output.
    """
    value = os.environ.get("PKGDESC_INDENT")
    if value is None or value == "":
        return default
    if value.lower() == "none":
        return None
    try:
        indent = int(value)
    except ValueError:
        logger.warning(
            "Ignoring invalid PKGDESC_INDENT=%r, using %d", value, default
        )
        return default
    return indent if indent >= 0 else None


def manifest_api(version: ToolsVersion | None = None) -> ConstructionSurface:
    """Return the construction surface for a tools version.

    Args:
        version: Tools version; defaults to get_tools_version().

    Example:
        api = manifest_api()
        core = api.target("Core", dependencies=["Utils"])
    """
    return surface_for(version if version is not None else get_tools_version())


# Public API exports
__all__ = [
    # Version
    "__version__",
    # Configuration
    "get_tools_version",
    "get_indent",
    "manifest_api",
    # Package registry (for the manifest runner)
    "get_registered_packages",
    "_register_package",
    "_clear_registered_packages",
    # Core classes
    "Package",
    "Target",
    "TargetType",
    "TargetDependency",
    "ProductDependency",
    "ByNameDependency",
    "SystemPackageProvider",
    "BuildSetting",
    "BuildSettingCondition",
    "CSetting",
    "CXXSetting",
    "SwiftSetting",
    "LinkerSetting",
    # Construction surfaces
    "PackageDescription4",
    "PackageDescription5",
    "surface_for",
    "parse_tools_version",
    # Errors
    "PkgDescError",
    "InvalidTargetError",
]
