"""Release artifact naming for cyclonedx-gomod."""

from __future__ import annotations

from dataclasses import dataclass

from gomod_sbom.bootstrap.platform import HostDescriptor

TOOL_NAME = "cyclonedx-gomod"

# Default base URL for release downloads
DEFAULT_DOWNLOAD_BASE_URL = "https://github.com/CycloneDX/cyclonedx-gomod/releases/download"


@dataclass(frozen=True)
class ArchiveName:
    """Normalized naming parts of a release archive."""

    platform: str
    arch: str
    extension: str


@dataclass(frozen=True)
class ArchiveDescriptor:
    """Download location of a release archive for one host."""

    download_url: str
    file_extension: str


def name_archive(platform: str, arch: str) -> ArchiveName:
    """Normalize platform and architecture to release archive naming.

    Values other than the handful that need renaming pass through verbatim.

    Args:
        platform: Platform name as reported by the host.
        arch: Architecture name as reported by the host.

    Returns:
        ArchiveName with the normalized platform, architecture and extension.
    """
    extension = "tar.gz"
    if platform == "win32":
        platform = "windows"
        extension = "zip"

    if arch in ("ia32", "x32"):
        arch = "x86"

    return ArchiveName(platform=platform, arch=arch, extension=extension)


def build_archive_descriptor(
    version: str,
    host: HostDescriptor,
    base_url: str = DEFAULT_DOWNLOAD_BASE_URL,
) -> ArchiveDescriptor:
    """Construct the download URL for a release archive.

    Args:
        version: Numeric release version, without a leading "v".
        host: Host the archive has to run on.
        base_url: Base URL for release downloads.

    Returns:
        ArchiveDescriptor for the given version and host.
    """
    name = name_archive(host.platform, host.arch)
    filename = f"{TOOL_NAME}_{version}_{name.platform}_{name.arch}.{name.extension}"
    return ArchiveDescriptor(
        download_url=f"{base_url.rstrip('/')}/v{version}/{filename}",
        file_extension=name.extension,
    )


def executable_name(host: HostDescriptor) -> str:
    """Return the file name of the tool binary inside the archive."""
    if name_archive(host.platform, host.arch).platform == "windows":
        return f"{TOOL_NAME}.exe"
    return TOOL_NAME
