"""CLI runner orchestration.

Loads inputs, wires the run pipeline together and turns any failure into
exactly one error message and a non-zero exit code.
"""

from __future__ import annotations

import traceback
from typing import Iterable, Mapping, Optional

from importlib.metadata import version, PackageNotFoundError

from gomod_sbom.bootstrap.installer import ArtifactInstaller
from gomod_sbom.bootstrap.releases import ReleaseCatalogClient
from gomod_sbom.bootstrap.versions import VersionResolver
from gomod_sbom.cli.arguments import args_to_overrides, build_parser
from gomod_sbom.cli.exit_codes import (
    EXIT_FAILURE,
    EXIT_INVALID_USAGE,
    EXIT_SUCCESS,
)
from gomod_sbom.config import load_inputs
from gomod_sbom.core.errors import ConfigurationError
from gomod_sbom.core.logging import configure_logging, get_logger
from gomod_sbom.pipeline.orchestrator import Orchestrator

LOGGER = get_logger(__name__)


def get_version() -> str:
    """Get gomod-sbom version.

    Returns:
        Version string from package metadata or fallback.
    """
    try:
        return version("gomod-sbom")
    except PackageNotFoundError:
        # Fallback for editable installs that have not yet built metadata.
        from gomod_sbom import __version__
        return __version__


def build_orchestrator(environ: Optional[Mapping[str, str]] = None) -> Orchestrator:
    """Wire the default pipeline against GitHub and the current host."""
    resolver = VersionResolver(ReleaseCatalogClient(environ=environ))
    return Orchestrator(resolver=resolver, installer=ArtifactInstaller(environ=environ))


class CLIRunner:
    """Parses arguments and runs one gomod-sbom invocation."""

    def __init__(self, environ: Optional[Mapping[str, str]] = None) -> None:
        self.parser = build_parser()
        self._version = get_version()
        self._environ = environ

    def run(self, argv: Optional[Iterable[str]] = None) -> int:
        """Run the CLI.

        Args:
            argv: Command-line arguments (defaults to sys.argv).

        Returns:
            Exit code.
        """
        args = self.parser.parse_args(list(argv) if argv is not None else None)

        configure_logging(debug=args.debug, quiet=args.quiet, environ=self._environ)

        if args.version:
            print(self._version)
            return EXIT_SUCCESS

        try:
            inputs = load_inputs(
                environ=self._environ,
                config_path=args.config,
                cli_overrides=args_to_overrides(args),
            )
        except ConfigurationError as e:
            LOGGER.error(str(e))
            return EXIT_INVALID_USAGE

        try:
            result = build_orchestrator(self._environ).run(inputs)
        except Exception as e:
            if args.debug:
                traceback.print_exc()
            LOGGER.error(f"Run failed: {e}")
            return EXIT_FAILURE

        if result.success:
            return EXIT_SUCCESS

        LOGGER.error(str(result.error), exc_info=result.error if args.debug else None)
        if isinstance(result.error, ConfigurationError):
            return EXIT_INVALID_USAGE
        return EXIT_FAILURE
