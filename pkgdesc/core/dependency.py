# SPDX-License-Identifier: MIT
"""Dependency references from a target to another entity.

A target can depend on three kinds of things:

- another target in the same package (TargetDependency),
- a product vended by a package dependency (ProductDependency),
- a bare name that the package graph resolves later to one of the
  above (ByNameDependency).

A plain string is shorthand for a by-name dependency. The conversion
happens when the dependency list is built, so a target never stores
raw strings.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, SupportsIndex, Union

if TYPE_CHECKING:
    from collections.abc import Iterable


@dataclass(frozen=True)
class TargetDependency:
    """A dependency on a target in the same package."""

    name: str


@dataclass(frozen=True)
class ProductDependency:
    """A dependency on a product from a package dependency.

    Attributes:
        name: Product name.
        package: Name of the package vending the product. Only needed
            when several package dependencies vend a product with the
            same name.
    """

    name: str
    package: str | None = None


@dataclass(frozen=True)
class ByNameDependency:
    """A dependency resolved to a target or a product once the graph is loaded."""

    name: str


Dependency = Union[TargetDependency, ProductDependency, ByNameDependency]

# Anything accepted where a dependency is expected.
DependencyLike = Union[Dependency, str]

DEPENDENCY_TYPES = (TargetDependency, ProductDependency, ByNameDependency)


def target(name: str) -> TargetDependency:
    """A dependency on a target in the same package."""
    return TargetDependency(name)


def product(name: str, package: str | None = None) -> ProductDependency:
    """A dependency on a product from a package dependency."""
    return ProductDependency(name, package)


def by_name(name: str) -> ByNameDependency:
    """A dependency on a target or product, decided by the package graph."""
    return ByNameDependency(name)


def as_dependency(value: DependencyLike) -> Dependency:
    """Normalize a dependency or its string shorthand.

    Args:
        value: A dependency, or a string naming one.

    Returns:
        The dependency; strings become ByNameDependency.

    Raises:
        TypeError: If value is neither a dependency nor a string.
    """
    if isinstance(value, DEPENDENCY_TYPES):
        return value
    if isinstance(value, str):
        return ByNameDependency(value)
    raise TypeError(
        f"expected a dependency or a string, got {type(value).__name__}"
    )


def as_dependencies(values: Iterable[DependencyLike]) -> list[Dependency]:
    """Normalize a sequence of dependencies, preserving order and duplicates."""
    if isinstance(values, str):
        raise TypeError("dependencies must be a sequence, not a single string")
    return [as_dependency(v) for v in values]


class DependencyList(list):
    """A list of dependencies that applies the string shorthand on every write.

    Targets hand this out from ``Target.dependencies`` so that editing the
    list in place (``deps.append("Utils")``) stores a ByNameDependency,
    just like passing the string to the constructor.
    """

    def __init__(self, values: Iterable[DependencyLike] = ()) -> None:
        super().__init__(as_dependencies(values))

    def append(self, value: DependencyLike) -> None:
        super().append(as_dependency(value))

    def insert(self, index: SupportsIndex, value: DependencyLike) -> None:
        super().insert(index, as_dependency(value))

    def extend(self, values: Iterable[DependencyLike]) -> None:
        super().extend(as_dependencies(values))

    def __iadd__(self, values: Iterable[DependencyLike]) -> DependencyList:  # type: ignore[override]
        self.extend(values)
        return self

    def __setitem__(self, index, value) -> None:  # type: ignore[no-untyped-def]
        if isinstance(index, slice):
            super().__setitem__(index, as_dependencies(value))
        else:
            super().__setitem__(index, as_dependency(value))


class DependencyFactory:
    """Namespace exposing the dependency builders on a construction surface.

    Manifests written against either surface spell dependencies as
    ``Dependency.target(...)``, ``Dependency.product(...)`` and
    ``Dependency.by_name(...)``.
    """

    target = staticmethod(target)
    product = staticmethod(product)
    by_name = staticmethod(by_name)
