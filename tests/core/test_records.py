# SPDX-License-Identifier: MIT
"""Tests for pkgdesc.core.settings and pkgdesc.core.providers."""

import pytest

from pkgdesc.core.providers import SystemPackageProvider
from pkgdesc.core.settings import (
    BuildSetting,
    BuildSettingCondition,
    CSetting,
    CXXSetting,
    LinkerSetting,
    SwiftSetting,
)


class TestSystemPackageProvider:
    def test_builders(self):
        assert SystemPackageProvider.brew(["zlib"]).kind == "brew"
        assert SystemPackageProvider.apt(["zlib1g-dev"]).kind == "apt"
        assert SystemPackageProvider.yum(["zlib-devel"]).kind == "yum"

    def test_packages_kept_in_order(self):
        provider = SystemPackageProvider.apt(["b", "a"])
        assert provider.packages == ("b", "a")
        assert provider.to_dict() == {"name": "apt", "values": ["b", "a"]}


class TestBuildSetting:
    def test_define(self):
        assert CSetting.define("DEBUG").value == ("DEBUG",)
        assert CXXSetting.define("LEVEL", "2").value == ("LEVEL=2",)
        assert SwiftSetting.define("TESTING").value == ("TESTING",)

    @pytest.mark.parametrize(
        "setting, tool",
        [
            (CSetting.define("X"), "c"),
            (CXXSetting.header_search_path("inc"), "cxx"),
            (SwiftSetting.unsafe_flags(["-Onone"]), "swift"),
            (LinkerSetting.link_library("z"), "linker"),
        ],
    )
    def test_builders_set_tool(self, setting, tool):
        assert setting.tool == tool
        assert setting.to_dict()["tool"] == tool

    def test_same_setting_for_different_tools_differs(self):
        c = CSetting.define("DEBUG")
        cxx = CXXSetting.define("DEBUG")
        assert c != cxx
        assert c.to_dict() != cxx.to_dict()

    def test_unsafe_flags(self):
        setting = LinkerSetting.unsafe_flags(["-Xfoo", "-O3"])
        assert setting.name == "unsafeFlags"
        assert setting.value == ("-Xfoo", "-O3")

    def test_wire_form(self):
        assert LinkerSetting.link_framework("Cocoa").to_dict() == {
            "tool": "linker",
            "name": "linkedFramework",
            "value": ["Cocoa"],
            "condition": None,
        }

    def test_builders_need_a_tool(self):
        with pytest.raises(TypeError):
            BuildSetting.unsafe_flags(["-g"])

    def test_linker_has_no_define(self):
        assert not hasattr(LinkerSetting, "define")

    def test_condition(self):
        condition = BuildSettingCondition.when(["linux"], "debug")
        setting = CSetting.header_search_path("inc", condition)
        assert setting.to_dict()["condition"] == {
            "platforms": ["linux"],
            "config": "debug",
        }

    def test_condition_without_platforms(self):
        condition = BuildSettingCondition.when(configuration="release")
        assert condition.to_dict() == {"platforms": None, "config": "release"}
