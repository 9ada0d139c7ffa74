"""Tests for companion tool validation."""

from __future__ import annotations

from pathlib import Path
from unittest.mock import patch

import pytest

from gomod_sbom.bootstrap.validation import (
    REQUIRED_TOOL,
    find_tool,
    require_tool,
)
from gomod_sbom.core.errors import MissingDependencyError


class TestRequireTool:
    def test_returns_path(self) -> None:
        with patch("shutil.which", return_value="/usr/local/go/bin/go"):
            assert require_tool() == Path("/usr/local/go/bin/go")

    def test_default_is_go(self) -> None:
        assert REQUIRED_TOOL == "go"

    def test_missing_raises(self) -> None:
        with patch("shutil.which", return_value=None):
            with pytest.raises(MissingDependencyError, match="go"):
                require_tool("go")

    def test_find_tool_none(self) -> None:
        with patch("shutil.which", return_value=None):
            assert find_tool("definitely-not-installed") is None
