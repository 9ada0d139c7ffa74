"""Shared fixtures for gomod-sbom tests."""

from __future__ import annotations

import logging
from typing import Iterator

import pytest

from helpers import FakeCatalog


@pytest.fixture
def fake_catalog() -> FakeCatalog:
    return FakeCatalog(
        tags=["v0.8.0", "v0.8.1", "v0.9.0", "v1.0.0", "v1.1.0", "v1.2.0-rc.1"],
        latest="v1.1.0",
    )


@pytest.fixture(autouse=True)
def restore_root_logger() -> Iterator[None]:
    """Undo handler and level changes made by configure_logging()."""
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
