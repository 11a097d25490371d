"""Unit tests for raw host facts."""
from unittest.mock import patch

import pytest

from hostprobe_core.platform import get_os_name, get_raw_arch


class TestOsName:
    """Tests for OS tag detection."""

    @pytest.mark.parametrize("system, expected", [
        ("Linux", "linux"),
        ("Darwin", "darwin"),
        ("FreeBSD", "freebsd"),
        ("Windows", "windows"),
        ("Plan9", "plan9"),
    ])
    def test_lower_cased(self, system, expected):
        with patch("hostprobe_core.platform.platform.system", return_value=system):
            assert get_os_name() == expected


class TestRawArch:
    """Tests for architecture name normalisation."""

    @pytest.mark.parametrize("machine, expected", [
        ("x86_64", "x86_64"),
        ("AMD64", "x86_64"),
        ("i686", "i386"),
        ("arm64", "aarch64"),
        ("aarch64", "aarch64"),
        ("armv7l", "arm"),
        ("ppc64le", "powerpc64le"),
        ("sun4v", "sparc64"),
    ])
    def test_aliases(self, machine, expected):
        with patch("hostprobe_core.platform.platform.machine", return_value=machine):
            assert get_raw_arch() == expected

    @patch("hostprobe_core.platform.platform.machine", return_value="mips64")
    def test_unknown_passes_through(self, mock_machine):
        assert get_raw_arch() == "mips64"
