"""Subprocess runner for the installed tool.

The tool's stdout and stderr are inherited so its output reaches the CI log
unchanged and in order.
"""

from __future__ import annotations

import shlex
import subprocess
from pathlib import Path
from typing import List, Optional, Union

from gomod_sbom.core.errors import MissingExecutableError, SubprocessError
from gomod_sbom.core.logging import get_logger

LOGGER = get_logger(__name__)


def run_tool(
    cmd: List[str],
    cwd: Optional[Union[str, Path]] = None,
) -> subprocess.CompletedProcess:
    """Run a command, forwarding its output streams.

    Args:
        cmd: Command and arguments to run.
        cwd: Working directory for the command (defaults to the current one).

    Returns:
        CompletedProcess of a successful run.

    Raises:
        MissingExecutableError: If the executable does not exist.
        SubprocessError: If the command cannot be started or exits non-zero.
    """
    LOGGER.info(f"[command]{shlex.join(cmd)}")

    try:
        result = subprocess.run(
            cmd,
            cwd=str(cwd) if cwd is not None else None,
            check=False,
        )
    except FileNotFoundError as e:
        raise MissingExecutableError(f"Executable not found: {cmd[0]}") from e
    except OSError as e:
        raise SubprocessError(f"Failed to run {cmd[0]}: {e}", returncode=-1) from e

    if result.returncode != 0:
        raise SubprocessError(
            f"{Path(cmd[0]).name} failed with exit code {result.returncode}",
            returncode=result.returncode,
        )
    return result
