"""Tests for host detection."""

from __future__ import annotations

from unittest.mock import patch

from gomod_sbom.bootstrap.platform import (
    HostDescriptor,
    detect_arch,
    detect_platform,
    get_host_descriptor,
    normalize_arch,
)


class TestNormalizeArch:
    """Tests for architecture normalization."""

    def test_normalize_x86_64(self) -> None:
        assert normalize_arch("x86_64") == "x64"

    def test_normalize_windows_amd64(self) -> None:
        assert normalize_arch("AMD64") == "x64"

    def test_normalize_i686(self) -> None:
        assert normalize_arch("i686") == "ia32"

    def test_normalize_aarch64(self) -> None:
        assert normalize_arch("aarch64") == "arm64"

    def test_normalize_armv7l(self) -> None:
        assert normalize_arch("armv7l") == "arm"

    def test_normalize_unknown_passes_through_lowercased(self) -> None:
        assert normalize_arch("RISCV64") == "riscv64"


class TestDetect:
    """Tests for platform and architecture detection."""

    def test_detect_platform_uses_sys_platform(self) -> None:
        with patch("gomod_sbom.bootstrap.platform.sys.platform", "win32"):
            assert detect_platform() == "win32"

    def test_detect_arch(self) -> None:
        with patch("platform.machine", return_value="x86_64"):
            assert detect_arch() == "x64"

    def test_get_host_descriptor(self) -> None:
        with patch("gomod_sbom.bootstrap.platform.sys.platform", "darwin"):
            with patch("platform.machine", return_value="arm64"):
                host = get_host_descriptor()
        assert host == HostDescriptor(platform="darwin", arch="arm64")
