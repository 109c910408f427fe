# pkgdesc-tools-version: 4.2
# SPDX-License-Identifier: MIT
"""Manifest written against tools version 4.

Version 4 manifests have no settings groups and no system library
targets; their JSON matches a version 5 manifest that uses neither.
"""

from pkgdesc import Package, manifest_api

api = manifest_api()

clib = api.target(
    "CLib",
    path="native",
    sources=["clib.c", "util.c"],
    public_headers_path="headers",
)

Package("Legacy", targets=[clib, api.test_target("CLibTests", dependencies=["CLib"])])
