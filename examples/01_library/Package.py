# pkgdesc-tools-version: 5.0
# SPDX-License-Identifier: MIT
"""Manifest for a library with a test suite.

This example demonstrates:
- Dependencies by name, on a local target and on a package product
- A linker settings group on one target only
- A test target depending on the library it tests
"""

from pkgdesc import LinkerSetting, Package, manifest_api

api = manifest_api()

Package(
    "Example",
    targets=[
        api.target(
            "Core",
            dependencies=[
                "Utils",
                api.Dependency.product("Logging", package="swift-log"),
            ],
        ),
        api.target(
            "Utils",
            exclude=["Fixtures"],
            linker_settings=[LinkerSetting.link_library("m")],
        ),
        api.test_target("CoreTests", dependencies=[api.Dependency.target("Core")]),
    ],
)
