# SPDX-License-Identifier: MIT
"""Per-language build setting records.

Targets carry four optional groups of settings (C, C++, Swift and
linker). The target model treats each group as an ordered list of
opaque records; it never looks inside them. CSetting, CXXSetting,
SwiftSetting and LinkerSetting are the record types shipped with
pkgdesc, one per group, but any object with a ``to_dict()`` method
(or a plain JSON value) can be stored in a group.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Literal

if TYPE_CHECKING:
    from collections.abc import Iterable

BuildConfiguration = Literal["debug", "release"]
SettingTool = Literal["c", "cxx", "swift", "linker"]


@dataclass(frozen=True)
class BuildSettingCondition:
    """Restricts a setting to some platforms and/or a build configuration.

    Attributes:
        platforms: Platform names (e.g. "linux", "macos"); empty means all.
        config: Build configuration, or None for all configurations.
    """

    platforms: tuple[str, ...] = ()
    config: BuildConfiguration | None = None

    @classmethod
    def when(
        cls,
        platforms: Iterable[str] = (),
        configuration: BuildConfiguration | None = None,
    ) -> BuildSettingCondition:
        return cls(tuple(platforms), configuration)

    def to_dict(self) -> dict[str, Any]:
        return {"platforms": list(self.platforms) or None, "config": self.config}


@dataclass(frozen=True)
class BuildSetting:
    """One build setting for one tool.

    Build settings through the per-tool subclasses, e.g.
    ``CSetting.define("DEBUG")`` or ``LinkerSetting.link_library("z")``.

    Attributes:
        tool: Tool the setting applies to ("c", "cxx", "swift" or "linker").
        name: Setting kind, e.g. "define" or "linkedLibrary".
        value: Setting arguments, in order.
        condition: Optional restriction on when the setting applies.
    """

    tool: SettingTool
    name: str
    value: tuple[str, ...] = field(default_factory=tuple)
    condition: BuildSettingCondition | None = None

    # Set by subclasses.
    TOOL = None

    @classmethod
    def _make(
        cls,
        name: str,
        value: Iterable[str],
        condition: BuildSettingCondition | None,
    ) -> BuildSetting:
        if cls.TOOL is None:
            raise TypeError(
                "use CSetting, CXXSetting, SwiftSetting or LinkerSetting "
                "to build settings"
            )
        return cls(cls.TOOL, name, tuple(value), condition)

    @classmethod
    def unsafe_flags(
        cls, flags: Iterable[str], condition: BuildSettingCondition | None = None
    ) -> BuildSetting:
        """Raw tool flags, passed through untouched."""
        return cls._make("unsafeFlags", flags, condition)

    def to_dict(self) -> dict[str, Any]:
        return {
            "tool": self.tool,
            "name": self.name,
            "value": list(self.value),
            "condition": self.condition.to_dict() if self.condition else None,
        }


class _CFamilySetting(BuildSetting):
    @classmethod
    def define(
        cls,
        name: str,
        value: str | None = None,
        condition: BuildSettingCondition | None = None,
    ) -> BuildSetting:
        """Preprocessor define, NAME or NAME=value."""
        text = name if value is None else f"{name}={value}"
        return cls._make("define", (text,), condition)

    @classmethod
    def header_search_path(
        cls, path: str, condition: BuildSettingCondition | None = None
    ) -> BuildSetting:
        return cls._make("headerSearchPath", (path,), condition)


class CSetting(_CFamilySetting):
    """A setting for C compilation."""

    TOOL = "c"


class CXXSetting(_CFamilySetting):
    """A setting for C++ compilation."""

    TOOL = "cxx"


class SwiftSetting(BuildSetting):
    """A setting for Swift compilation."""

    TOOL = "swift"

    @classmethod
    def define(
        cls, name: str, condition: BuildSettingCondition | None = None
    ) -> BuildSetting:
        """Compilation condition; Swift defines take no value."""
        return cls._make("define", (name,), condition)


class LinkerSetting(BuildSetting):
    """A setting for linking."""

    TOOL = "linker"

    @classmethod
    def link_library(
        cls, library: str, condition: BuildSettingCondition | None = None
    ) -> BuildSetting:
        return cls._make("linkedLibrary", (library,), condition)

    @classmethod
    def link_framework(
        cls, framework: str, condition: BuildSettingCondition | None = None
    ) -> BuildSetting:
        return cls._make("linkedFramework", (framework,), condition)
