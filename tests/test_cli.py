# SPDX-License-Identifier: MIT
"""Tests for pkgdesc CLI."""

from __future__ import annotations

import json
import subprocess
import sys
from pathlib import Path

import pytest

from pkgdesc.cli import find_manifest, main, setup_logging

MANIFEST = '''\
# pkgdesc-tools-version: 5.0
"""Test manifest.

Variables: none.
"""
from pkgdesc import Package, manifest_api

api = manifest_api()
Package("Pkg", targets=[api.target("Core", dependencies=["Utils"])])
'''


class TestFindManifest:
    """Tests for find_manifest function."""

    def test_find_existing_manifest(self, tmp_path: Path) -> None:
        script = tmp_path / "Package.py"
        script.write_text("# test manifest")

        assert find_manifest("Package.py", tmp_path) == script

    def test_manifest_not_found(self, tmp_path: Path) -> None:
        assert find_manifest("Package.py", tmp_path) is None

    def test_find_manifest_ignores_directories(self, tmp_path: Path) -> None:
        (tmp_path / "Package.py").mkdir()

        assert find_manifest("Package.py", tmp_path) is None


class TestSetupLogging:
    """Tests for setup_logging function."""

    def test_setup_logging_normal(self) -> None:
        setup_logging(verbose=False, debug=False)

    def test_setup_logging_verbose(self) -> None:
        setup_logging(verbose=True, debug=False)

    def test_setup_logging_debug(self) -> None:
        setup_logging(verbose=False, debug=True)


class TestDump:
    """Tests for the dump command, run in-process."""

    def test_dump_to_stdout(self, tmp_path: Path, capsys) -> None:
        script = tmp_path / "Package.py"
        script.write_text(MANIFEST)

        assert main(["dump", str(script)]) == 0
        data = json.loads(capsys.readouterr().out)
        assert data["name"] == "Pkg"
        assert data["targets"][0]["dependencies"] == [
            {"type": "byname", "name": "Utils"}
        ]

    def test_dump_to_output_dir(self, tmp_path: Path, capsys) -> None:
        script = tmp_path / "Package.py"
        script.write_text(MANIFEST)
        output_dir = tmp_path / "out"

        assert main(["dump", str(script), "-o", str(output_dir)]) == 0
        data = json.loads((output_dir / "Pkg.json").read_text())
        assert data["name"] == "Pkg"
        assert data["targets"][0]["name"] == "Core"
        assert capsys.readouterr().out == ""

    def test_dump_output_dir_one_file_per_package(self, tmp_path: Path) -> None:
        script = tmp_path / "Package.py"
        script.write_text(
            "from pkgdesc import Package\nPackage('A')\nPackage('B')\n"
        )
        output_dir = tmp_path / "out"

        assert main(["dump", str(script), "--output-dir", str(output_dir)]) == 0
        assert sorted(p.name for p in output_dir.iterdir()) == ["A.json", "B.json"]
        assert json.loads((output_dir / "B.json").read_text())["targets"] == []

    def test_dump_multiple_packages_is_array(self, tmp_path: Path, capsys) -> None:
        script = tmp_path / "Package.py"
        script.write_text(
            "from pkgdesc import Package\nPackage('A')\nPackage('B')\n"
        )

        assert main(["dump", str(script)]) == 0
        data = json.loads(capsys.readouterr().out)
        assert [p["name"] for p in data] == ["A", "B"]

    def test_dump_invalid_target_fails(self, tmp_path: Path, caplog) -> None:
        script = tmp_path / "Package.py"
        script.write_text(
            "from pkgdesc import Target\n"
            "Target('Core', type='test', pkg_config='zlib')\n"
        )

        assert main(["dump", str(script)]) == 1
        assert "invalid target 'Core'" in caplog.text

    def test_dump_tools_version_override(self, tmp_path: Path) -> None:
        script = tmp_path / "Package.py"
        script.write_text(
            "from pkgdesc import Package, manifest_api\n"
            "Package('P', targets=[manifest_api().system_library('S')])\n"
        )

        assert main(["dump", "-t", "4", str(script)]) == 1
        assert main(["dump", "-t", "5", str(script)]) == 0

    def test_dump_missing_manifest(self, tmp_path: Path) -> None:
        assert main(["dump", str(tmp_path / "Nope.py")]) == 1

    def test_dump_default_manifest(self, tmp_path: Path, monkeypatch, capsys) -> None:
        (tmp_path / "Package.py").write_text(MANIFEST)
        monkeypatch.chdir(tmp_path)

        assert main(["dump"]) == 0
        assert json.loads(capsys.readouterr().out)["name"] == "Pkg"


class TestInfo:
    def test_info(self, tmp_path: Path, capsys) -> None:
        script = tmp_path / "Package.py"
        script.write_text(MANIFEST)

        assert main(["info", str(script)]) == 0
        out = capsys.readouterr().out
        assert "Tools version: 5.0.0" in out
        assert "Test manifest." in out

    def test_info_without_declaration(self, tmp_path: Path, capsys) -> None:
        script = tmp_path / "Package.py"
        script.write_text("x = 1\n")

        assert main(["info", str(script)]) == 0
        out = capsys.readouterr().out
        assert "(not declared)" in out
        assert "(No docstring found in manifest)" in out

    def test_info_syntax_error(self, tmp_path: Path) -> None:
        script = tmp_path / "Package.py"
        script.write_text("def (\n")

        assert main(["info", str(script)]) == 1


class TestCLICommands:
    """Tests running the CLI as a subprocess."""

    def test_pkgdesc_help(self) -> None:
        result = subprocess.run(
            [sys.executable, "-m", "pkgdesc.cli", "--help"],
            capture_output=True,
            text=True,
        )
        assert result.returncode == 0
        assert "pkgdesc" in result.stdout
        assert "dump" in result.stdout
        assert "info" in result.stdout

    def test_pkgdesc_version(self) -> None:
        result = subprocess.run(
            [sys.executable, "-m", "pkgdesc", "--version"],
            capture_output=True,
            text=True,
        )
        assert result.returncode == 0
        assert "pkgdesc" in result.stdout

    @pytest.mark.parametrize("command", ["dump", "info"])
    def test_subcommand_help(self, command: str) -> None:
        result = subprocess.run(
            [sys.executable, "-m", "pkgdesc.cli", command, "--help"],
            capture_output=True,
            text=True,
        )
        assert result.returncode == 0
        assert "manifest" in result.stdout
