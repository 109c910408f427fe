# SPDX-License-Identifier: MIT
"""Command-line interface for pkgdesc."""

from __future__ import annotations

import argparse
import ast
import json
import logging
import sys
from pathlib import Path

from pkgdesc.core.errors import PkgDescError
from pkgdesc.core.manifest import DEFAULT_MANIFEST, evaluate_manifest
from pkgdesc.core.serialize import dump_package, package_to_dict
from pkgdesc.core.tools_version import read_tools_version_header
from pkgdesc.generators.manifest_json import ManifestJSONGenerator

# Set up logging
logger = logging.getLogger("pkgdesc")


def setup_logging(verbose: bool = False, debug: bool = False) -> None:
    """Configure logging based on verbosity level."""
    if debug:
        level = logging.DEBUG
        fmt = "%(levelname)s: %(name)s: %(message)s"
    elif verbose:
        level = logging.INFO
        fmt = "%(levelname)s: %(message)s"
    else:
        level = logging.WARNING
        fmt = "%(levelname)s: %(message)s"

    logging.basicConfig(level=level, format=fmt)


def find_manifest(name: str, search_dir: Path | None = None) -> Path | None:
    """Find a manifest script by name.

    Args:
        name: Script name (e.g., 'Package.py')
        search_dir: Directory to search in (default: current dir)

    Returns:
        Path to script if found, None otherwise.
    """
    if search_dir is None:
        search_dir = Path.cwd()

    script_path = search_dir / name
    if script_path.exists() and script_path.is_file():
        return script_path

    return None


def _locate_manifest(manifest: str | None) -> Path | None:
    if manifest:
        script = Path(manifest)
        if not script.is_file():
            logger.error("Manifest not found: %s", manifest)
            return None
        return script

    found = find_manifest(DEFAULT_MANIFEST)
    if found is None:
        logger.error("No %s found in current directory", DEFAULT_MANIFEST)
    return found


def cmd_dump(args: argparse.Namespace) -> int:
    """Evaluate a manifest and write its canonical JSON.

    On stdout a single package is written as an object, several as an
    array. With --output-dir each package goes to <dir>/<name>.json.
    """
    from pkgdesc import get_indent

    setup_logging(args.verbose, args.debug)

    script = _locate_manifest(args.manifest)
    if script is None:
        return 1

    try:
        packages = evaluate_manifest(script, args.tools_version)
    except PkgDescError as e:
        logger.error("%s", e)
        return 1

    indent = get_indent()

    if args.output_dir:
        generator = ManifestJSONGenerator(indent=indent)
        for package in packages:
            generator.generate(package, Path(args.output_dir))
    elif len(packages) == 1:
        print(dump_package(packages[0], indent=indent))
    else:
        print(json.dumps([package_to_dict(p) for p in packages], indent=indent))

    return 0


def cmd_info(args: argparse.Namespace) -> int:
    """Show the manifest's declared tools version and docstring."""
    setup_logging(args.verbose, args.debug)

    script = _locate_manifest(args.manifest)
    if script is None:
        return 1

    try:
        source = script.read_text()
        docstring = ast.get_docstring(ast.parse(source))
        declared = read_tools_version_header(source)
    except SyntaxError as e:
        logger.error("Failed to parse %s: %s", script, e)
        return 1
    except PkgDescError as e:
        logger.error("%s", e)
        return 1

    print(f"Manifest: {script}")
    if declared is not None:
        print(f"Tools version: {declared}")
    else:
        print("Tools version: (not declared)")
    print()
    if docstring:
        print(docstring)
    else:
        print("(No docstring found in manifest)")

    return 0


def add_common_args(parser: argparse.ArgumentParser) -> None:
    """Add common arguments to a parser."""
    parser.add_argument("-v", "--verbose", action="store_true", help="Verbose output")
    parser.add_argument("--debug", action="store_true", help="Debug output")


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the pkgdesc CLI."""
    parser = argparse.ArgumentParser(
        prog="pkgdesc",
        description="Evaluate package manifests and emit their canonical JSON.",
        epilog="Run 'pkgdesc <command> --help' for command-specific help.",
    )
    from pkgdesc import __version__

    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {__version__}"
    )

    subparsers = parser.add_subparsers(dest="command", help="Commands")

    # pkgdesc dump
    dump_parser = subparsers.add_parser(
        "dump", help="Evaluate a manifest and print its JSON"
    )
    add_common_args(dump_parser)
    dump_parser.add_argument(
        "-t",
        "--tools-version",
        metavar="VERSION",
        help="Tools version, overriding the manifest's declaration",
    )
    dump_parser.add_argument(
        "-o",
        "--output-dir",
        metavar="DIR",
        help="Write each package to DIR/<package>.json instead of stdout",
    )
    dump_parser.add_argument(
        "manifest", nargs="?", help=f"Manifest script (default: {DEFAULT_MANIFEST})"
    )
    dump_parser.set_defaults(func=cmd_dump)

    # pkgdesc info
    info_parser = subparsers.add_parser(
        "info", help="Show manifest tools version and docstring"
    )
    add_common_args(info_parser)
    info_parser.add_argument(
        "manifest", nargs="?", help=f"Manifest script (default: {DEFAULT_MANIFEST})"
    )
    info_parser.set_defaults(func=cmd_info)

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 1

    result: int = args.func(args)
    return result


if __name__ == "__main__":
    sys.exit(main())
