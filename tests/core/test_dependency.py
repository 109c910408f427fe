# SPDX-License-Identifier: MIT
"""Tests for pkgdesc.core.dependency."""

import pytest

from pkgdesc.core.dependency import (
    ByNameDependency,
    DependencyFactory,
    ProductDependency,
    TargetDependency,
    as_dependencies,
    as_dependency,
    by_name,
    product,
    target,
)


class TestBuilders:
    def test_target(self):
        assert target("Utils") == TargetDependency("Utils")

    def test_product_without_package(self):
        dep = product("Logging")
        assert dep == ProductDependency("Logging")
        assert dep.package is None

    def test_product_with_package(self):
        dep = product("Logging", package="swift-log")
        assert dep.name == "Logging"
        assert dep.package == "swift-log"

    def test_by_name(self):
        assert by_name("Utils") == ByNameDependency("Utils")

    def test_factory_exposes_builders(self):
        assert DependencyFactory.target("A") == TargetDependency("A")
        assert DependencyFactory.product("B", "pkg") == ProductDependency("B", "pkg")
        assert DependencyFactory.by_name("C") == ByNameDependency("C")

    def test_no_name_validation(self):
        assert target("").name == ""
        assert by_name("not a valid identifier!").name == "not a valid identifier!"


class TestVariantsAreDistinct:
    def test_same_name_different_kind(self):
        assert TargetDependency("X") != ByNameDependency("X")
        assert ProductDependency("X") != ByNameDependency("X")
        assert TargetDependency("X") != ProductDependency("X")

    def test_hashable(self):
        deps = {by_name("X"), by_name("X"), target("X")}
        assert len(deps) == 2

    def test_frozen(self):
        dep = product("Logging")
        with pytest.raises(AttributeError):
            dep.name = "Other"  # type: ignore[misc]


class TestShorthand:
    def test_string_is_by_name(self):
        assert as_dependency("Utils") == by_name("Utils")

    def test_dependency_passes_through(self):
        dep = product("Logging", "swift-log")
        assert as_dependency(dep) is dep

    def test_rejects_other_types(self):
        with pytest.raises(TypeError):
            as_dependency(42)  # type: ignore[arg-type]

    def test_sequence_normalization(self):
        deps = as_dependencies(["A", target("B"), "A"])
        assert deps == [by_name("A"), target("B"), by_name("A")]

    def test_single_string_is_not_a_sequence(self):
        with pytest.raises(TypeError):
            as_dependencies("Utils")
