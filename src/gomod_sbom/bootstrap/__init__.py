"""Bootstrap module for cyclonedx-gomod binary management.

This module handles:
- Host detection (platform + architecture)
- Release version resolution against the GitHub release index
- Archive download and extraction into a per-run directory
- Companion tool validation (go)
"""

from gomod_sbom.bootstrap.installer import ArtifactInstaller
from gomod_sbom.bootstrap.platform import HostDescriptor, get_host_descriptor
from gomod_sbom.bootstrap.releases import ReleaseCatalogClient
from gomod_sbom.bootstrap.validation import require_tool
from gomod_sbom.bootstrap.versions import MINIMUM_SUPPORTED_VERSION, VersionResolver

__all__ = [
    "ArtifactInstaller",
    "HostDescriptor",
    "get_host_descriptor",
    "ReleaseCatalogClient",
    "require_tool",
    "MINIMUM_SUPPORTED_VERSION",
    "VersionResolver",
]
