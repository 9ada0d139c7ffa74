"""Argument parser construction for the gomod-sbom CLI.

Every action input has a matching flag; flags left unset fall back to the
config file, then to INPUT_* environment variables.
"""

from __future__ import annotations

import argparse
from pathlib import Path
from typing import Any, Dict

# Flag destination → action input name
INPUT_FLAGS: Dict[str, str] = {
    "tool_version": "version",
    "output": "output",
    "type": "type",
    "module": "module",
    "include_stdlib": "include-stdlib",
    "include_test": "include-test",
    "json": "json",
    "omit_serial_number": "omit-serial-number",
    "omit_version_prefix": "omit-version-prefix",
    "reproducible": "reproducible",
    "resolve_licenses": "resolve-licenses",
}


def _add_global_options(parser: argparse.ArgumentParser) -> None:
    """Add options that control the CLI itself."""
    parser.add_argument(
        "--version",
        action="store_true",
        help="Show gomod-sbom version and exit.",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging.",
    )
    parser.add_argument(
        "--quiet", "-q",
        action="store_true",
        help="Reduce logging output to warnings and errors.",
    )
    parser.add_argument(
        "--config",
        type=Path,
        help="YAML file with action inputs (keys as in action.yml).",
    )


def _add_input_options(parser: argparse.ArgumentParser) -> None:
    """Add one option per action input."""
    group = parser.add_argument_group("action inputs")
    group.add_argument(
        "--tool-version",
        help='cyclonedx-gomod version: "latest" or a semver range such as "^1.4.0".',
    )
    group.add_argument(
        "--output",
        help='Where to write the SBOM (default: "-" for stdout).',
    )
    group.add_argument(
        "--type",
        help='Type of the main component (default: "application").',
    )
    group.add_argument(
        "--module",
        help="Path to the Go module to generate an SBOM for.",
    )

    switches = {
        "--include-stdlib": "Include the Go standard library as a component.",
        "--include-test": "Include test dependencies.",
        "--json": "Output in JSON format.",
        "--omit-serial-number": "Omit the serial number from the SBOM.",
        "--omit-version-prefix": 'Omit the "v" prefix from versions.',
        "--reproducible": "Make the SBOM reproducible (omit timestamps).",
        "--resolve-licenses": "Resolve module licenses.",
    }
    for flag, help_text in switches.items():
        # None keeps the lower-precedence sources in play
        group.add_argument(flag, action="store_true", default=None, help=help_text)


def build_parser() -> argparse.ArgumentParser:
    """Build the gomod-sbom argument parser."""
    parser = argparse.ArgumentParser(
        prog="gomod-sbom",
        description=(
            "Download the matching cyclonedx-gomod release and generate "
            "a CycloneDX SBOM for a Go module."
        ),
    )
    _add_global_options(parser)
    _add_input_options(parser)
    return parser


def args_to_overrides(args: argparse.Namespace) -> Dict[str, Any]:
    """Convert parsed arguments to input overrides, skipping unset flags."""
    overrides: Dict[str, Any] = {}
    for dest, input_name in INPUT_FLAGS.items():
        value = getattr(args, dest, None)
        if value is not None:
            overrides[input_name] = value
    return overrides
