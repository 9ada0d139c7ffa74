"""Per-run working directories for downloaded tool releases.

Every run extracts into a freshly created directory, so an interrupted run
never leaves state that a later run picks up.
"""

from __future__ import annotations

import os
import tempfile
from pathlib import Path
from typing import Mapping, Optional

# Environment variable to override the work directory root
GOMOD_SBOM_HOME_ENV = "GOMOD_SBOM_HOME"

# Temporary directory provided by GitHub Actions runners
RUNNER_TEMP_ENV = "RUNNER_TEMP"


def get_work_root(environ: Optional[Mapping[str, str]] = None) -> Optional[Path]:
    """Get the directory under which per-run directories are created.

    Resolution order:
    1. GOMOD_SBOM_HOME environment variable (if set)
    2. RUNNER_TEMP environment variable (if set)
    3. None, meaning the system temporary directory

    Returns:
        Path to the work root, or None for the system default.
    """
    env = os.environ if environ is None else environ
    for name in (GOMOD_SBOM_HOME_ENV, RUNNER_TEMP_ENV):
        value = env.get(name)
        if value:
            return Path(value)
    return None


def new_install_dir(
    version: str,
    root: Optional[Path] = None,
    environ: Optional[Mapping[str, str]] = None,
) -> Path:
    """Create a fresh, empty install directory for one run.

    Args:
        version: Release version, used as part of the directory name.
        root: Parent directory; defaults to get_work_root(environ).
        environ: Environment to resolve the work root from.

    Returns:
        Path to the newly created directory.
    """
    parent = root if root is not None else get_work_root(environ)
    if parent is not None:
        parent.mkdir(parents=True, exist_ok=True)
    return Path(
        tempfile.mkdtemp(
            prefix=f"cyclonedx-gomod-{version}-",
            dir=str(parent) if parent is not None else None,
        )
    )
