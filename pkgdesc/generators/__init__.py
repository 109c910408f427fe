# SPDX-License-Identifier: MIT
"""Output generators for pkgdesc."""

from pkgdesc.generators.generator import BaseGenerator, Generator
from pkgdesc.generators.manifest_json import ManifestJSONGenerator

__all__ = [
    "BaseGenerator",
    "Generator",
    "ManifestJSONGenerator",
]
