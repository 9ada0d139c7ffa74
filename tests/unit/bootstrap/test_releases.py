"""Tests for the release catalog client."""

from __future__ import annotations

import json
from typing import Any
from unittest.mock import MagicMock
from urllib.error import HTTPError, URLError

import pytest

from gomod_sbom.bootstrap.releases import (
    DEFAULT_API_URL,
    ReleaseCatalogClient,
    default_token,
)
from gomod_sbom.core.errors import (
    NotFoundError,
    ReleaseCatalogError,
    UnexpectedStatusError,
)


def _response(payload: Any, status: int = 200) -> MagicMock:
    response = MagicMock()
    response.status = status
    response.read.return_value = json.dumps(payload).encode("utf-8")
    response.__enter__.return_value = response
    return response


def _http_error(code: int) -> HTTPError:
    return HTTPError(DEFAULT_API_URL, code, "error", hdrs=None, fp=None)  # type: ignore[arg-type]


class TestFetchLatest:
    """Tests for ReleaseCatalogClient.fetch_latest."""

    def test_returns_tag_name(self) -> None:
        opener = MagicMock(return_value=_response({"tag_name": "v1.4.0"}))
        client = ReleaseCatalogClient(token="", opener=opener)

        assert client.fetch_latest() == "v1.4.0"

        request = opener.call_args.args[0]
        assert request.full_url == f"{DEFAULT_API_URL}/releases/latest"
        assert opener.call_count == 1

    def test_not_found(self) -> None:
        opener = MagicMock(side_effect=_http_error(404))
        client = ReleaseCatalogClient(token="", opener=opener)
        with pytest.raises(NotFoundError, match="not found"):
            client.fetch_latest()

    def test_unexpected_status(self) -> None:
        opener = MagicMock(side_effect=_http_error(500))
        client = ReleaseCatalogClient(token="", opener=opener)
        with pytest.raises(UnexpectedStatusError) as exc_info:
            client.fetch_latest()
        assert exc_info.value.status == 500
        assert "500" in str(exc_info.value)

    def test_non_success_status_without_exception(self) -> None:
        opener = MagicMock(return_value=_response({}, status=302))
        client = ReleaseCatalogClient(token="", opener=opener)
        with pytest.raises(UnexpectedStatusError):
            client.fetch_latest()

    def test_missing_tag_name(self) -> None:
        opener = MagicMock(return_value=_response({"name": "no tag"}))
        client = ReleaseCatalogClient(token="", opener=opener)
        with pytest.raises(ReleaseCatalogError, match="tag_name"):
            client.fetch_latest()

    def test_transport_failure(self) -> None:
        opener = MagicMock(side_effect=URLError("connection refused"))
        client = ReleaseCatalogClient(token="", opener=opener)
        with pytest.raises(ReleaseCatalogError, match="connection refused"):
            client.fetch_latest()

    def test_does_not_retry(self) -> None:
        opener = MagicMock(side_effect=_http_error(502))
        client = ReleaseCatalogClient(token="", opener=opener)
        with pytest.raises(UnexpectedStatusError):
            client.fetch_latest()
        assert opener.call_count == 1


class TestFetchAll:
    """Tests for ReleaseCatalogClient.fetch_all."""

    def test_returns_tags_in_index_order(self) -> None:
        payload = [{"tag_name": "v1.1.0"}, {"tag_name": "v0.9.0"}, {"tag_name": "v1.0.0"}]
        opener = MagicMock(return_value=_response(payload))
        client = ReleaseCatalogClient(token="", opener=opener)

        assert client.fetch_all() == ["v1.1.0", "v0.9.0", "v1.0.0"]
        request = opener.call_args.args[0]
        assert request.full_url.startswith(f"{DEFAULT_API_URL}/releases?")
        assert "per_page=100" in request.full_url

    def test_skips_entries_without_tag(self) -> None:
        payload = [{"tag_name": "v1.0.0"}, {"name": "draft"}]
        opener = MagicMock(return_value=_response(payload))
        client = ReleaseCatalogClient(token="", opener=opener)
        assert client.fetch_all() == ["v1.0.0"]

    def test_not_found(self) -> None:
        opener = MagicMock(side_effect=_http_error(404))
        client = ReleaseCatalogClient(token="", opener=opener)
        with pytest.raises(NotFoundError):
            client.fetch_all()

    def test_unexpected_status(self) -> None:
        opener = MagicMock(side_effect=_http_error(403))
        client = ReleaseCatalogClient(token="", opener=opener)
        with pytest.raises(UnexpectedStatusError):
            client.fetch_all()

    def test_non_list_payload(self) -> None:
        opener = MagicMock(return_value=_response({"message": "oops"}))
        client = ReleaseCatalogClient(token="", opener=opener)
        with pytest.raises(ReleaseCatalogError):
            client.fetch_all()


class TestHeaders:
    """Tests for request headers."""

    def test_token_sent_as_bearer(self) -> None:
        opener = MagicMock(return_value=_response({"tag_name": "v1.0.0"}))
        client = ReleaseCatalogClient(token="secret", opener=opener)
        client.fetch_latest()

        request = opener.call_args.args[0]
        assert request.get_header("Authorization") == "Bearer secret"
        assert request.get_header("Accept") == "application/vnd.github+json"

    def test_no_authorization_without_token(self) -> None:
        opener = MagicMock(return_value=_response({"tag_name": "v1.0.0"}))
        client = ReleaseCatalogClient(token="", opener=opener)
        client.fetch_latest()

        request = opener.call_args.args[0]
        assert request.get_header("Authorization") is None

    def test_token_read_from_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("GITHUB_TOKEN", "from-env")
        monkeypatch.delenv("GITHUB_SERVER_URL", raising=False)
        opener = MagicMock(return_value=_response({"tag_name": "v1.0.0"}))
        ReleaseCatalogClient(opener=opener).fetch_latest()

        request = opener.call_args.args[0]
        assert request.get_header("Authorization") == "Bearer from-env"

    def test_token_read_from_injected_environment(
        self, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("GITHUB_TOKEN", "process-token")
        opener = MagicMock(return_value=_response({"tag_name": "v1.0.0"}))
        client = ReleaseCatalogClient(
            opener=opener, environ={"GITHUB_TOKEN": "injected-token"}
        )
        client.fetch_latest()

        request = opener.call_args.args[0]
        assert request.get_header("Authorization") == "Bearer injected-token"

    def test_enterprise_token_not_sent_to_github_com(self) -> None:
        opener = MagicMock(return_value=_response({"tag_name": "v1.0.0"}))
        env = {
            "GITHUB_TOKEN": "ghes-token",
            "GITHUB_SERVER_URL": "https://github.example.com",
        }
        ReleaseCatalogClient(opener=opener, environ=env).fetch_latest()

        request = opener.call_args.args[0]
        assert request.get_header("Authorization") is None


class TestDefaultToken:
    """Tests for picking up the runner token."""

    def test_github_com_server(self) -> None:
        env = {"GITHUB_TOKEN": "t", "GITHUB_SERVER_URL": "https://github.com/"}
        assert default_token(env) == "t"

    def test_server_url_unset(self) -> None:
        assert default_token({"GITHUB_TOKEN": "t"}) == "t"

    def test_enterprise_server(self) -> None:
        env = {"GITHUB_TOKEN": "t", "GITHUB_SERVER_URL": "https://ghe.corp.example"}
        assert default_token(env) is None

    def test_empty_token(self) -> None:
        assert default_token({"GITHUB_TOKEN": ""}) is None
