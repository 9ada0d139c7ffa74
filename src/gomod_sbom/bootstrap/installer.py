"""Download and unpack a cyclonedx-gomod release for the current host."""

from __future__ import annotations

import os
import tempfile
from pathlib import Path
from typing import Callable, Mapping, Optional

from gomod_sbom.bootstrap.artifacts import (
    DEFAULT_DOWNLOAD_BASE_URL,
    ArchiveDescriptor,
    build_archive_descriptor,
    executable_name,
)
from gomod_sbom.bootstrap.download import download_file
from gomod_sbom.bootstrap.extract import extract_archive
from gomod_sbom.bootstrap.paths import new_install_dir
from gomod_sbom.bootstrap.platform import HostDescriptor, get_host_descriptor
from gomod_sbom.core.errors import MissingExecutableError
from gomod_sbom.core.logging import get_logger

LOGGER = get_logger(__name__)

Downloader = Callable[[str, Path], None]
Extractor = Callable[[Path, Path, str], Path]


class ArtifactInstaller:
    """Install a cyclonedx-gomod release into a fresh per-run directory.

    Binary management:
    - Downloads from https://github.com/CycloneDX/cyclonedx-gomod/releases/
    - Extracts to {work root}/cyclonedx-gomod-{version}-XXXX/
    - Never reuses a previous run's directory
    """

    def __init__(
        self,
        host: Optional[HostDescriptor] = None,
        base_url: str = DEFAULT_DOWNLOAD_BASE_URL,
        work_root: Optional[Path] = None,
        downloader: Downloader = download_file,
        extractor: Extractor = extract_archive,
        environ: Optional[Mapping[str, str]] = None,
    ) -> None:
        self._host = host if host is not None else get_host_descriptor()
        self._base_url = base_url
        self._work_root = work_root
        self._downloader = downloader
        self._extractor = extractor
        self._environ = environ

    def describe(self, version: str) -> ArchiveDescriptor:
        """Return the archive descriptor for a version on this host."""
        return build_archive_descriptor(version, self._host, self._base_url)

    def install(self, version: str) -> Path:
        """Download and extract a release, returning the binary path.

        Args:
            version: Numeric release version, without a leading "v".

        Returns:
            Path to the extracted cyclonedx-gomod executable.

        Raises:
            DownloadError: If the archive cannot be downloaded.
            ExtractionError: If the archive cannot be extracted.
            MissingExecutableError: If the archive has no cyclonedx-gomod binary.
        """
        LOGGER.info(f"Installing cyclonedx-gomod {version}")
        descriptor = self.describe(version)

        # Use delete=False and clean up manually to avoid Windows file locking issues
        fd, tmp_name = tempfile.mkstemp(suffix=f".{descriptor.file_extension}")
        os.close(fd)
        archive_path = Path(tmp_name)
        try:
            self._downloader(descriptor.download_url, archive_path)
            install_dir = new_install_dir(version, self._work_root, self._environ)
            self._extractor(archive_path, install_dir, descriptor.file_extension)
        finally:
            archive_path.unlink(missing_ok=True)

        binary_path = install_dir / executable_name(self._host)
        if not binary_path.is_file():
            raise MissingExecutableError(
                f"Archive {descriptor.download_url} does not contain {binary_path.name}"
            )

        if os.name != "nt":
            binary_path.chmod(binary_path.stat().st_mode | 0o111)

        LOGGER.info(f"cyclonedx-gomod {version} installed to {binary_path}")
        return binary_path
