"""Secure download utilities with SSL certificate handling.

Every request is verified against certifi's CA bundle so downloads behave
the same on self-hosted runners whose system store is incomplete.
"""

from __future__ import annotations

import shutil
import ssl
from pathlib import Path
from typing import Mapping, Optional, Union
from urllib.error import HTTPError, URLError
from urllib.request import Request, urlopen

import certifi

from gomod_sbom import __version__
from gomod_sbom.core.errors import DownloadError
from gomod_sbom.core.logging import get_logger

LOGGER = get_logger(__name__)

USER_AGENT = f"gomod-sbom/{__version__}"


def get_ssl_context() -> ssl.SSLContext:
    """Get an SSL context that uses certifi's CA bundle."""
    return ssl.create_default_context(cafile=certifi.where())


def secure_urlopen(
    url: Union[str, Request],
    timeout: Optional[float] = 30.0,
    headers: Optional[Mapping[str, str]] = None,
):
    """Open a URL with proper SSL certificate verification.

    Args:
        url: The URL (or prepared Request) to open.
        timeout: Connection timeout in seconds.
        headers: Extra request headers, ignored when a Request is passed.

    Returns:
        A file-like object for reading the response.

    Raises:
        HTTPError: If the server answers with an error status.
        URLError: If the URL cannot be opened.
        ValueError: If the URL is not HTTPS.
    """
    if isinstance(url, Request):
        request = url
    else:
        request = Request(url, headers={"User-Agent": USER_AGENT, **(headers or {})})

    if not request.full_url.startswith("https://"):
        raise ValueError(f"Only HTTPS URLs are supported: {request.full_url}")

    return urlopen(request, timeout=timeout, context=get_ssl_context())  # nosec B310


def download_file(url: str, dest_path: Path, timeout: Optional[float] = 60.0) -> None:
    """Download a file from a URL with proper SSL certificate verification.

    Args:
        url: The URL to download from.
        dest_path: Path to save the downloaded file.
        timeout: Connection timeout in seconds.

    Raises:
        DownloadError: If the download fails for any transport or HTTP reason.
    """
    LOGGER.info(f"Downloading {url}")
    try:
        with secure_urlopen(url, timeout=timeout) as response:
            total_size = response.headers.get("Content-Length")
            if total_size:
                LOGGER.debug(f"Archive size: {int(total_size) / 1024 / 1024:.1f} MB")
            with open(dest_path, "wb") as f:
                shutil.copyfileobj(response, f)
    except HTTPError as e:
        raise DownloadError(
            f"Failed to download {url}: HTTP {e.code} - {e.reason}"
        ) from e
    except URLError as e:
        raise DownloadError(
            f"Failed to download {url}: {e.reason}. Check your network connection."
        ) from e
    except (OSError, ValueError) as e:
        raise DownloadError(f"Failed to download {url}: {e}") from e
