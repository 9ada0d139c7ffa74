"""Host detection for release artifact selection.

Platform names follow ``sys.platform`` (win32, linux, darwin, ...) and
architecture names follow the release naming (x64, ia32, arm64, ...).
"""

from __future__ import annotations

import platform
import sys
from dataclasses import dataclass

# Machine name normalization map
_ARCH_MAP = {
    "x86_64": "x64",
    "amd64": "x64",
    "x64": "x64",
    "i386": "ia32",
    "i686": "ia32",
    "x86": "ia32",
    "aarch64": "arm64",
    "arm64": "arm64",
    "armv7l": "arm",
    "armv6l": "arm",
}


def normalize_arch(machine: str) -> str:
    """Normalize a raw machine name to the release architecture vocabulary.

    Unknown names are returned lower-cased instead of rejected.

    Args:
        machine: Raw architecture string from platform.machine()

    Returns:
        Normalized architecture string.
    """
    lowered = machine.lower()
    return _ARCH_MAP.get(lowered, lowered)


def detect_platform() -> str:
    """Return the current platform name (sys.platform)."""
    return sys.platform


def detect_arch() -> str:
    """Return the normalized CPU architecture of the current host."""
    return normalize_arch(platform.machine())


@dataclass(frozen=True)
class HostDescriptor:
    """Operating system and CPU architecture of the running host.

    Attributes:
        platform: Platform name (win32, linux, darwin, ...).
        arch: CPU architecture (x64, ia32, arm64, ...).
    """

    platform: str
    arch: str


def get_host_descriptor() -> HostDescriptor:
    """Detect and return the current host descriptor."""
    return HostDescriptor(platform=detect_platform(), arch=detect_arch())
