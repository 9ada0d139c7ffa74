"""Version resolution for cyclonedx-gomod releases.

Turns a version specifier ("latest" or a node-semver range such as
"^1.4.0") into one concrete release version.
"""

from __future__ import annotations

from typing import List, Optional, Protocol

import nodesemver

from gomod_sbom.core.errors import (
    InvalidRangeError,
    NoMatchError,
    UnsupportedVersionError,
)
from gomod_sbom.core.logging import get_logger

LOGGER = get_logger(__name__)

LATEST = "latest"

# Oldest release whose command line matches the flags we emit
MINIMUM_SUPPORTED_VERSION = "v0.8.1"

RANGE_SYNTAX_URL = "https://github.com/npm/node-semver#advanced-range-syntax"


class ReleaseCatalog(Protocol):
    def fetch_latest(self) -> str: ...

    def fetch_all(self) -> List[str]: ...


def strip_version_prefix(tag: str) -> str:
    """Strip a single leading "v" from a release tag."""
    return tag[1:] if tag.startswith("v") else tag


def is_latest(specifier: str) -> bool:
    return specifier.strip().lower() == LATEST


def is_valid_version(tag: str) -> bool:
    return nodesemver.parse(tag, False) is not None


def is_valid_range(version_range: str) -> bool:
    try:
        return nodesemver.valid_range(version_range, False) is not None
    except (ValueError, TypeError):
        return False


def max_satisfying(tags: List[str], version_range: str) -> Optional[str]:
    """Return the highest tag satisfying a range, or None.

    Tags that do not parse as semantic versions are ignored. Pre-release
    tags only match when the range itself names a pre-release of the same
    major.minor.patch.
    """
    candidates = [tag for tag in tags if is_valid_version(tag)]
    return nodesemver.max_satisfying(candidates, version_range, False)


class VersionResolver:
    """Resolve a version specifier against the release catalog.

    Args:
        catalog: Release index to query.
        minimum_version: Releases strictly below this tag are rejected.
    """

    def __init__(
        self,
        catalog: ReleaseCatalog,
        minimum_version: str = MINIMUM_SUPPORTED_VERSION,
    ) -> None:
        self._catalog = catalog
        self._minimum_version = minimum_version

    @property
    def minimum_version(self) -> str:
        return self._minimum_version

    def resolve(self, specifier: str) -> str:
        """Resolve a specifier to a release version without a leading "v".

        Raises:
            InvalidRangeError: If the specifier is not a valid range.
            NoMatchError: If no release satisfies the range.
            UnsupportedVersionError: If the release is below the minimum version.
            ReleaseCatalogError: If the release index cannot be queried.
        """
        if is_latest(specifier):
            LOGGER.warning(
                'Using version "latest" is not recommended, '
                "please use version ranges instead!"
            )
            tag = self._resolve_latest()
        else:
            tag = self._resolve_range(specifier.strip())

        self._check_minimum(tag)
        return strip_version_prefix(tag)

    def _resolve_latest(self) -> str:
        LOGGER.info("Determining latest release version of cyclonedx-gomod")
        tag = self._catalog.fetch_latest()
        LOGGER.info(f"Latest release version is: {tag}")
        return tag

    def _resolve_range(self, version_range: str) -> str:
        if not version_range or not is_valid_range(version_range):
            raise InvalidRangeError(
                f'Invalid version range "{version_range}": version must be '
                f"a valid version range, see {RANGE_SYNTAX_URL}"
            )

        LOGGER.info(
            "Determining latest release version of cyclonedx-gomod "
            f'satisfying "{version_range}"'
        )
        tags = self._catalog.fetch_all()
        matched = max_satisfying(tags, version_range)
        LOGGER.info(f'Latest release version matching "{version_range}" is: {matched}')

        if matched is None:
            raise NoMatchError(
                f'No release of cyclonedx-gomod satisfies "{version_range}"'
            )
        return matched

    def _check_minimum(self, tag: str) -> None:
        if not is_valid_version(tag):
            raise UnsupportedVersionError(
                f'Release tag "{tag}" is not a valid semantic version'
            )
        if nodesemver.lt(tag, self._minimum_version, False):
            raise UnsupportedVersionError(
                f"cyclonedx-gomod versions below {self._minimum_version} "
                f"are not supported (resolved {tag})"
            )
