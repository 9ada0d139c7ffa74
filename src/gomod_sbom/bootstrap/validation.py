"""Checks for companion tools the wrapped binary relies on."""

from __future__ import annotations

import shutil
from pathlib import Path
from typing import Optional

from gomod_sbom.core.errors import MissingDependencyError
from gomod_sbom.core.logging import get_logger

LOGGER = get_logger(__name__)

# cyclonedx-gomod shells out to the Go toolchain
REQUIRED_TOOL = "go"


def find_tool(name: str) -> Optional[Path]:
    """Return the resolved path of a tool on PATH, if any."""
    location = shutil.which(name)
    return Path(location) if location else None


def require_tool(name: str = REQUIRED_TOOL) -> Path:
    """Return the path of a required tool, failing fast if it is missing.

    Raises:
        MissingDependencyError: If the tool is not on PATH.
    """
    location = find_tool(name)
    if location is None:
        raise MissingDependencyError(f"Unable to locate executable file: {name}")
    LOGGER.debug(f"Found {name} at {location}")
    return location
