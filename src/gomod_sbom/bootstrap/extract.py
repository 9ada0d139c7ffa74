"""Archive extraction confined to a target directory."""

from __future__ import annotations

import tarfile
import zipfile
from pathlib import Path

from gomod_sbom.core.errors import ExtractionError
from gomod_sbom.core.logging import get_logger

LOGGER = get_logger(__name__)


def _check_member(dest_dir: Path, member_name: str) -> None:
    """Reject archive members that would land outside dest_dir."""
    member_path = (dest_dir / member_name).resolve()
    if not member_path.is_relative_to(dest_dir.resolve()):
        raise ExtractionError(f"Path traversal detected: {member_name}")


def extract_zip(archive_path: Path, dest_dir: Path) -> None:
    """Extract a .zip archive."""
    with zipfile.ZipFile(archive_path, "r") as zf:
        for name in zf.namelist():
            _check_member(dest_dir, name)
        zf.extractall(dest_dir)


def extract_tarball(archive_path: Path, dest_dir: Path) -> None:
    """Extract a .tar.gz archive."""
    with tarfile.open(archive_path, "r:gz") as tar:
        for member in tar.getmembers():
            _check_member(dest_dir, member.name)
            if member.issym():
                _check_member(dest_dir, str(Path(member.name).parent / member.linkname))
            elif member.islnk():
                _check_member(dest_dir, member.linkname)
        if hasattr(tarfile, "data_filter"):
            tar.extractall(dest_dir, filter="data")
        else:
            tar.extractall(dest_dir)


def extract_archive(archive_path: Path, dest_dir: Path, extension: str) -> Path:
    """Extract a release archive into dest_dir.

    Args:
        archive_path: Path to the downloaded archive.
        dest_dir: Directory to extract into; created if missing.
        extension: Archive extension, "zip" or "tar.gz".

    Returns:
        The extraction directory.

    Raises:
        ExtractionError: If the archive is corrupt or contains unsafe paths.
    """
    LOGGER.info("Extracting archive")
    dest_dir.mkdir(parents=True, exist_ok=True)

    try:
        if extension == "zip":
            extract_zip(archive_path, dest_dir)
        else:
            extract_tarball(archive_path, dest_dir)
    except ExtractionError:
        raise
    except (tarfile.TarError, zipfile.BadZipFile, OSError) as e:
        raise ExtractionError(f"Failed to extract {archive_path.name}: {e}") from e

    return dest_dir
