# pkgdesc-tools-version: 5.0
# SPDX-License-Identifier: MIT
"""Manifest adapting the system zlib.

Demonstrates a system library target with a pkg-config name and
package providers, and a regular target that uses it.
"""

from pkgdesc import Package, SystemPackageProvider, manifest_api

api = manifest_api()

Package(
    "Compression",
    targets=[
        api.system_library(
            "CZlib",
            path="Sources/CZlib",
            pkg_config="zlib",
            providers=[
                SystemPackageProvider.brew(["zlib"]),
                SystemPackageProvider.apt(["zlib1g-dev"]),
            ],
        ),
        api.target("Compression", dependencies=["CZlib"]),
    ],
)
