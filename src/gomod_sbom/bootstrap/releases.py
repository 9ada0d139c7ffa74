"""Client for the cyclonedx-gomod release index (GitHub REST API)."""

from __future__ import annotations

import json
import os
from typing import Any, Callable, Dict, List, Mapping, Optional
from urllib.error import HTTPError, URLError
from urllib.request import Request

from gomod_sbom.bootstrap.download import USER_AGENT, secure_urlopen
from gomod_sbom.core.errors import (
    NotFoundError,
    ReleaseCatalogError,
    UnexpectedStatusError,
)
from gomod_sbom.core.logging import get_logger

LOGGER = get_logger(__name__)

DEFAULT_API_URL = "https://api.github.com/repos/CycloneDX/cyclonedx-gomod"

# Runner-issued tokens are only valid on the server that issued them
GITHUB_SERVER_URL = "https://github.com"

# GitHub caps page size at 100
RELEASES_PER_PAGE = 100


def default_token(environ: Optional[Mapping[str, str]] = None) -> Optional[str]:
    """Return GITHUB_TOKEN when the workflow runs on github.com.

    On GitHub Enterprise Server the runner token is not accepted by
    api.github.com, so requests are sent unauthenticated instead.
    """
    env = os.environ if environ is None else environ
    server = (env.get("GITHUB_SERVER_URL") or GITHUB_SERVER_URL).rstrip("/")
    if server.lower() != GITHUB_SERVER_URL:
        LOGGER.debug(f"Not sending GITHUB_TOKEN issued by {server} to {DEFAULT_API_URL}")
        return None
    return env.get("GITHUB_TOKEN") or None


class ReleaseCatalogClient:
    """Query the release index for published release tags.

    Each call performs exactly one request and never retries.
    """

    def __init__(
        self,
        api_url: str = DEFAULT_API_URL,
        token: Optional[str] = None,
        opener: Callable[..., Any] = secure_urlopen,
        timeout: float = 30.0,
        environ: Optional[Mapping[str, str]] = None,
    ) -> None:
        self._api_url = api_url.rstrip("/")
        self._token = token if token is not None else default_token(environ)
        self._opener = opener
        self._timeout = timeout

    def fetch_latest(self) -> str:
        """Return the tag of the latest published release.

        Raises:
            NotFoundError: If no release has been published.
            UnexpectedStatusError: On any other non-success status.
            ReleaseCatalogError: If the index cannot be reached.
        """
        release = self._get_json(f"{self._api_url}/releases/latest")
        if not isinstance(release, dict) or "tag_name" not in release:
            raise ReleaseCatalogError("Latest release response has no tag_name")
        return release["tag_name"]

    def fetch_all(self) -> List[str]:
        """Return the tags of all releases, in the order the index lists them.

        Raises:
            NotFoundError: If no release has been published.
            UnexpectedStatusError: On any other non-success status.
            ReleaseCatalogError: If the index cannot be reached.
        """
        releases = self._get_json(
            f"{self._api_url}/releases?per_page={RELEASES_PER_PAGE}"
        )
        if not isinstance(releases, list):
            raise ReleaseCatalogError("Release list response is not a list")
        return [
            release["tag_name"]
            for release in releases
            if isinstance(release, dict) and release.get("tag_name")
        ]

    def _headers(self) -> Dict[str, str]:
        headers = {
            "User-Agent": USER_AGENT,
            "Accept": "application/vnd.github+json",
        }
        if self._token:
            headers["Authorization"] = f"Bearer {self._token}"
        return headers

    def _get_json(self, url: str) -> Any:
        LOGGER.debug(f"GET {url}")
        request = Request(url, headers=self._headers())
        try:
            with self._opener(request, timeout=self._timeout) as response:
                status = getattr(response, "status", 200)
                if not 200 <= status < 300:
                    raise UnexpectedStatusError(status, url)
                return json.loads(response.read().decode("utf-8"))
        except HTTPError as e:
            if e.code == 404:
                raise NotFoundError(
                    "Fetching releases of cyclonedx-gomod failed: not found"
                ) from e
            raise UnexpectedStatusError(e.code, url) from e
        except URLError as e:
            raise ReleaseCatalogError(f"Failed to query {url}: {e.reason}") from e
        except json.JSONDecodeError as e:
            raise ReleaseCatalogError(f"Invalid JSON from {url}: {e}") from e
