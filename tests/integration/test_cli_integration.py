import json
from unittest.mock import patch

from packaging.version import Version
from typer.testing import CliRunner

from hostprobe_core.exceptions import DistroNotFoundError, NoCompatibleArchError
from hostprobe_core.schemas import Architecture, LinuxDistro, OSFamily, PlatformRequest

from cli.main import app

runner = CliRunner()

FEDORA_REQUEST = PlatformRequest(
    architecture=Architecture.A_64,
    family=OSFamily.linux(LinuxDistro.FEDORA),
    version=Version("38"),
)


def test_cli_help():
    result = runner.invoke(app, ["--help"])
    assert result.exit_code == 0
    assert "hostprobe" in result.stdout


def test_cli_version():
    result = runner.invoke(app, ["version"])
    assert result.exit_code == 0
    assert "hostprobe v" in result.stdout


@patch("hostprobe_core.api.platform_request", return_value=FEDORA_REQUEST)
def test_detect_table(mock_request):
    result = runner.invoke(app, ["detect"])
    assert result.exit_code == 0
    assert "x86_64" in result.stdout
    assert "fedora" in result.stdout
    assert "38" in result.stdout


@patch("hostprobe_core.api.platform_request", return_value=FEDORA_REQUEST)
def test_detect_json(mock_request):
    result = runner.invoke(app, ["detect", "--json"])
    assert result.exit_code == 0
    assert json.loads(result.stdout) == {
        "architecture": "x86_64",
        "platform": "linux",
        "distro": "fedora",
        "version": "38",
    }


@patch("hostprobe_core.api.platform_request", side_effect=NoCompatibleArchError("mips"))
def test_detect_unsupported_arch(mock_request):
    result = runner.invoke(app, ["detect"])
    assert result.exit_code == 1
    assert "mips" in result.stdout


@patch("hostprobe_core.api.platform_request", side_effect=DistroNotFoundError())
def test_detect_distro_not_found(mock_request):
    result = runner.invoke(app, ["detect"])
    assert result.exit_code == 1
    assert "Error" in result.stdout


def test_config_show():
    result = runner.invoke(app, ["config", "show"])
    assert result.exit_code == 0
    assert "lsb_release_command" in result.stdout


def test_config_path():
    result = runner.invoke(app, ["config", "path"])
    assert result.exit_code == 0
    assert "config.json" in result.stdout
