"""Test helpers shared across test modules."""

from __future__ import annotations

import io
import tarfile
import zipfile
from pathlib import Path
from typing import Dict, List, Optional


class FakeCatalog:
    """In-memory release catalog recording how it was queried."""

    def __init__(
        self,
        tags: Optional[List[str]] = None,
        latest: Optional[str] = None,
    ) -> None:
        self.tags = tags or []
        self.latest = latest
        self.calls: List[str] = []

    def fetch_latest(self) -> str:
        self.calls.append("latest")
        assert self.latest is not None
        return self.latest

    def fetch_all(self) -> List[str]:
        self.calls.append("all")
        return list(self.tags)


def make_tarball(path: Path, members: Dict[str, bytes]) -> Path:
    """Write a .tar.gz archive with the given member names and contents."""
    with tarfile.open(path, "w:gz") as tar:
        for name, content in members.items():
            info = tarfile.TarInfo(name=name)
            info.size = len(content)
            info.mode = 0o644
            tar.addfile(info, io.BytesIO(content))
    return path


def make_zip(path: Path, members: Dict[str, bytes]) -> Path:
    """Write a .zip archive with the given member names and contents."""
    with zipfile.ZipFile(path, "w") as zf:
        for name, content in members.items():
            zf.writestr(name, content)
    return path
