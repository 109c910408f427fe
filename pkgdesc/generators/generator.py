# SPDX-License-Identifier: MIT
"""Generator protocol for manifest output.

Generators take an evaluated Package and write files describing it
for other tools (e.g., the JSON consumed by the build-graph builder).
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from pkgdesc.core.package import Package


@runtime_checkable
class Generator(Protocol):
    """Protocol for manifest generators."""

    @property
    def name(self) -> str:
        """Generator name (e.g., 'manifest_json')."""
        ...

    def generate(self, package: Package, output_dir: Path) -> Path:
        """Generate output for a package.

        Args:
            package: The evaluated package.
            output_dir: Directory to write output files to.

        Returns:
            Path of the written file.
        """
        ...


class BaseGenerator:
    """Base class for generators with common functionality."""

    def __init__(self, name: str) -> None:
        self._name = name

    @property
    def name(self) -> str:
        return self._name

    def generate(self, package: Package, output_dir: Path) -> Path:
        """Generate output. Subclasses must implement."""
        raise NotImplementedError

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.name!r})"
