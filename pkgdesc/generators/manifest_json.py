# SPDX-License-Identifier: MIT
"""Canonical JSON manifest generator.

Writes ``<output_dir>/<package>.json`` in the format read by the
build-graph builder:

    {
        "name": "MyPackage",
        "targets": [
            {"name": "Core", "path": null, "sources": null, ...},
            ...
        ]
    }
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import TYPE_CHECKING

from pkgdesc.core.serialize import package_to_dict
from pkgdesc.generators.generator import BaseGenerator

if TYPE_CHECKING:
    from pkgdesc.core.package import Package

logger = logging.getLogger(__name__)


class ManifestJSONGenerator(BaseGenerator):
    """Generator for the canonical JSON manifest.

    Example:
        generator = ManifestJSONGenerator()
        generator.generate(package, Path("build"))
        # Creates build/<package name>.json
    """

    def __init__(self, indent: int | None = 2) -> None:
        super().__init__("manifest_json")
        self.indent = indent

    def generate(self, package: Package, output_dir: Path) -> Path:
        output_dir = Path(output_dir)
        output_dir.mkdir(parents=True, exist_ok=True)
        output_file = output_dir / f"{package.name}.json"

        with open(output_file, "w") as f:
            json.dump(package_to_dict(package), f, indent=self.indent)
            f.write("\n")

        logger.info("Wrote manifest for %s to %s", package.name, output_file)
        return output_file
