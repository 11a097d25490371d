"""Shared fixtures for hostprobe tests."""
from pathlib import Path
from unittest.mock import patch

import pytest

from hostprobe_core.config import HostProbeConfig, reset_config


@pytest.fixture(autouse=True)
def fresh_config():
    """Start every test without a cached global config."""
    reset_config()
    yield
    reset_config()


@pytest.fixture
def etc_dir(tmp_path: Path) -> Path:
    """An empty directory standing in for /etc."""
    path = tmp_path / "etc"
    path.mkdir()
    return path


@pytest.fixture
def probe_config(etc_dir: Path) -> HostProbeConfig:
    """Config pointing every release file into etc_dir."""
    return HostProbeConfig(
        os_release_paths=[str(etc_dir / "os-release"), str(etc_dir / "usr-lib-os-release")],
        lsb_release_command="lsb_release",
        redhat_release_path=str(etc_dir / "redhat-release"),
        debian_version_path=str(etc_dir / "debian_version"),
    )


@pytest.fixture
def no_lsb_release():
    """Pretend lsb_release is not installed."""
    with patch("hostprobe_core.probes.find_executable", return_value=None) as mock_find:
        yield mock_find
