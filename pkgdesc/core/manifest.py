# SPDX-License-Identifier: MIT
"""Evaluate manifest scripts.

A manifest is a Python script that creates one or more Package
objects. The runner picks the tools version, runs the script in this
process and collects the packages it registered.
"""

from __future__ import annotations

import logging
import os
import runpy
from contextlib import contextmanager
from pathlib import Path
from typing import TYPE_CHECKING

from pkgdesc.core.errors import ManifestError, PkgDescError
from pkgdesc.core.tools_version import parse_tools_version, read_tools_version_header

if TYPE_CHECKING:
    from collections.abc import Iterator

    from pkgdesc.core.package import Package
    from pkgdesc.core.tools_version import ToolsVersion

logger = logging.getLogger(__name__)

DEFAULT_MANIFEST = "Package.py"


def resolve_tools_version(
    manifest_text: str, override: str | None = None
) -> ToolsVersion:
    """Decide the tools version for a manifest.

    Precedence (highest to lowest):
        1. override (the --tools-version option)
        2. the manifest's ``# pkgdesc-tools-version:`` header
        3. PKGDESC_TOOLS_VERSION / the default
    """
    from pkgdesc import get_tools_version

    if override:
        return parse_tools_version(override)
    declared = read_tools_version_header(manifest_text)
    if declared is not None:
        return declared
    return get_tools_version()


@contextmanager
def _tools_version_env(version: ToolsVersion) -> Iterator[None]:
    old = os.environ.get("PKGDESC_TOOLS_VERSION")
    os.environ["PKGDESC_TOOLS_VERSION"] = str(version)
    try:
        yield
    finally:
        if old is None:
            del os.environ["PKGDESC_TOOLS_VERSION"]
        else:
            os.environ["PKGDESC_TOOLS_VERSION"] = old


def evaluate_manifest(
    script_path: Path | str, tools_version: str | None = None
) -> list[Package]:
    """Run a manifest script and return the packages it declared.

    Args:
        script_path: Path to the manifest script.
        tools_version: Explicit tools version overriding the manifest's.

    Returns:
        Packages in creation order.

    Raises:
        PkgDescError: If a declaration in the manifest is invalid.
        ManifestError: If the script fails or declares no package.
    """
    from pkgdesc import _clear_registered_packages, get_registered_packages

    script = Path(script_path)
    try:
        text = script.read_text()
    except OSError as e:
        raise ManifestError(f"cannot read manifest {script}: {e}") from e

    version = resolve_tools_version(text, tools_version)
    logger.info("Evaluating %s with tools version %s", script, version)

    _clear_registered_packages()
    with _tools_version_env(version):
        try:
            runpy.run_path(str(script), run_name="__main__")
        except PkgDescError:
            raise
        except SystemExit as e:
            if e.code not in (None, 0):
                raise ManifestError(
                    f"manifest {script} exited with status {e.code}"
                ) from e
        except Exception as e:
            raise ManifestError(f"manifest {script} failed: {e}") from e

    packages = get_registered_packages()
    if not packages:
        raise ManifestError(f"manifest {script} declares no package")
    logger.debug("Manifest %s declared %d package(s)", script, len(packages))
    return packages
