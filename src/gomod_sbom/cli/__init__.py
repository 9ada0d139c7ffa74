"""Command-line entry point for gomod-sbom."""

from __future__ import annotations

from typing import Iterable, Optional

from gomod_sbom.cli.runner import CLIRunner


def main(argv: Optional[Iterable[str]] = None) -> int:
    """Run gomod-sbom and return its exit code."""
    return CLIRunner().run(argv)


__all__ = ["main", "CLIRunner"]
