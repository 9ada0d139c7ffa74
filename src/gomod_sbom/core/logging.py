from __future__ import annotations

import logging
import os
import sys
from typing import Mapping, Optional

DEFAULT_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

# Workflow command per level; INFO records are printed as plain lines.
_WORKFLOW_COMMANDS = {
    logging.DEBUG: "debug",
    logging.WARNING: "warning",
    logging.ERROR: "error",
    logging.CRITICAL: "error",
}


def escape_command_data(value: str) -> str:
    """Escape a message for use as workflow command data."""
    return value.replace("%", "%25").replace("\r", "%0D").replace("\n", "%0A")


def running_in_actions(environ: Optional[Mapping[str, str]] = None) -> bool:
    env = os.environ if environ is None else environ
    return env.get("GITHUB_ACTIONS", "").lower() == "true"


class ActionsFormatter(logging.Formatter):
    """Render records as GitHub Actions workflow commands.

    Warnings and errors become annotations, debug records are only shown
    when step debug logging is enabled on the runner.
    """

    def format(self, record: logging.LogRecord) -> str:
        message = record.getMessage()
        if record.exc_info and record.levelno >= logging.ERROR:
            message = f"{message}\n{self.formatException(record.exc_info)}"
        command = _WORKFLOW_COMMANDS.get(record.levelno)
        if command is None:
            return message
        return f"::{command}::{escape_command_data(message)}"


def configure_logging(
    *,
    debug: bool = False,
    quiet: bool = False,
    environ: Optional[Mapping[str, str]] = None,
) -> None:
    """Configure root logging for a run.

    Precedence:
    - debug (or RUNNER_DEBUG=1) → DEBUG
    - quiet → WARNING
    - default → INFO
    """

    env = os.environ if environ is None else environ

    if debug or env.get("RUNNER_DEBUG") == "1":
        level = logging.DEBUG
    elif quiet:
        level = logging.WARNING
    else:
        level = logging.INFO

    # Workflow commands are only recognised on stdout. Elsewhere stdout may
    # carry the SBOM itself.
    if running_in_actions(env):
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(ActionsFormatter())
    else:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(DEFAULT_FORMAT))

    logging.basicConfig(level=level, handlers=[handler], force=True)


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return a module-level logger."""

    return logging.getLogger(name if name is not None else __name__)
