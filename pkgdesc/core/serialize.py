# SPDX-License-Identifier: MIT
"""Canonical serialized form of targets.

Targets are handed to the build-graph builder as JSON objects with a
fixed key order:

    name, path, sources, exclude, dependencies, publicHeadersPath,
    type, pkgConfig, providers, [cSettings], [cxxSettings],
    [swiftSettings], [linkerSettings]

The first nine keys are always written, with null for absent values.
A settings key is written only when its group was supplied, so
manifests that never use settings serialize the same under every tools
version.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

from pkgdesc.core.dependency import (
    ByNameDependency,
    ProductDependency,
    TargetDependency,
)

if TYPE_CHECKING:
    from collections.abc import Iterable

    from pkgdesc.core.dependency import Dependency
    from pkgdesc.core.package import Package
    from pkgdesc.core.target import Target

# Target attribute -> serialized key, for the optional settings groups.
SETTINGS_KEYS = (
    ("c_settings", "cSettings"),
    ("cxx_settings", "cxxSettings"),
    ("swift_settings", "swiftSettings"),
    ("linker_settings", "linkerSettings"),
)

_JSON_SCALARS = (str, int, float, bool, type(None))


def dependency_to_dict(dependency: Dependency) -> dict[str, Any]:
    """Serialize a dependency as a tagged object.

    Returns:
        ``{"type": "target", "name": ...}``,
        ``{"type": "product", "name": ..., "package": ...}`` or
        ``{"type": "byname", "name": ...}``.
    """
    if isinstance(dependency, TargetDependency):
        return {"type": "target", "name": dependency.name}
    if isinstance(dependency, ProductDependency):
        return {
            "type": "product",
            "name": dependency.name,
            "package": dependency.package,
        }
    if isinstance(dependency, ByNameDependency):
        return {"type": "byname", "name": dependency.name}
    raise TypeError(f"not a dependency: {dependency!r}")


def record_to_json(record: Any) -> Any:
    """Serialize an opaque record (setting or provider).

    Objects with a ``to_dict()`` method are converted with it; plain
    JSON values pass through.
    """
    to_dict = getattr(record, "to_dict", None)
    if callable(to_dict):
        return to_dict()
    if isinstance(record, _JSON_SCALARS):
        return record
    if isinstance(record, (list, tuple)):
        return [record_to_json(item) for item in record]
    if isinstance(record, dict):
        return {str(k): record_to_json(v) for k, v in record.items()}
    raise TypeError(f"cannot serialize {type(record).__name__} record: {record!r}")


def _records(values: Iterable[Any] | None) -> list[Any] | None:
    if values is None:
        return None
    return [record_to_json(v) for v in values]


def target_to_dict(target: Target) -> dict[str, Any]:
    """Serialize a target to its canonical ordered mapping."""
    result: dict[str, Any] = {
        "name": target.name,
        "path": target.path,
        "sources": None if target.sources is None else list(target.sources),
        "exclude": list(target.exclude),
        "dependencies": [dependency_to_dict(d) for d in target.dependencies],
        "publicHeadersPath": target.public_headers_path,
        "type": target.type.value,
        "pkgConfig": target.pkg_config,
        "providers": _records(target.providers),
    }
    for attr, key in SETTINGS_KEYS:
        group = getattr(target, attr)
        if group is not None:
            result[key] = _records(group)
    return result


def package_to_dict(package: Package) -> dict[str, Any]:
    """Serialize a package and its targets, in declaration order."""
    return {
        "name": package.name,
        "targets": [target_to_dict(t) for t in package.targets],
    }


def dump_package(package: Package, indent: int | None = 2) -> str:
    """Serialize a package as a JSON object."""
    return json.dumps(package_to_dict(package), indent=indent)
