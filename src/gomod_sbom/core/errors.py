"""Error taxonomy for gomod-sbom.

Every failure raised by a pipeline stage derives from GomodSbomError so the
top-level handler can render it as a single message.
"""

from __future__ import annotations

from typing import Optional


class GomodSbomError(Exception):
    """Base class for all run failures."""

    pass


class ConfigurationError(GomodSbomError):
    """Invalid or missing action input."""

    pass


class InvalidRangeError(ConfigurationError):
    """Version specifier is neither 'latest' nor a valid semver range."""

    pass


class ReleaseCatalogError(GomodSbomError):
    """The release index could not be queried."""

    pass


class NotFoundError(ReleaseCatalogError):
    """The release index reports that no releases exist."""

    pass


class UnexpectedStatusError(ReleaseCatalogError):
    """The release index answered with a non-success status other than 404."""

    def __init__(self, status: int, url: Optional[str] = None) -> None:
        self.status = status
        self.url = url
        super().__init__(f"Unexpected response status: {status}")


class NoMatchError(GomodSbomError):
    """No published release satisfies the requested range."""

    pass


class UnsupportedVersionError(GomodSbomError):
    """Resolved release is below the minimum supported version."""

    pass


class DownloadError(GomodSbomError):
    """Release archive could not be downloaded."""

    pass


class ExtractionError(GomodSbomError):
    """Release archive could not be extracted."""

    pass


class MissingExecutableError(GomodSbomError):
    """Extracted archive does not contain the expected binary."""

    pass


class SubprocessError(GomodSbomError):
    """The installed tool exited with a non-zero status."""

    def __init__(self, message: str, returncode: int) -> None:
        self.returncode = returncode
        super().__init__(message)


class MissingDependencyError(GomodSbomError):
    """A required companion tool is not available on PATH."""

    pass
