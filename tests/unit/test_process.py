"""Unit tests for the I/O collaborators."""
import sys
from unittest.mock import patch

import pytest

from hostprobe_core.exceptions import ProcessError
from hostprobe_core.process import CommandResult, execute_out, find_executable, read_text


class TestExecuteOut:
    """Tests for execute_out."""

    def test_captures_stdout_and_status(self):
        result = execute_out(sys.executable, ["-c", "import sys; print('hello'); sys.exit(3)"])

        assert result.stdout.strip() == "hello"
        assert result.returncode == 3
        assert not result.ok

    def test_invalid_bytes_replaced(self):
        result = execute_out(sys.executable, ["-c", "import sys; sys.stdout.buffer.write(b'ok\\xff')"])

        assert result == CommandResult(stdout="ok�", returncode=0)
        assert result.ok

    def test_working_directory(self, tmp_path):
        result = execute_out(sys.executable, ["-c", "import os; print(os.getcwd())"], cwd=tmp_path)

        assert result.stdout.strip() == str(tmp_path.resolve())

    def test_missing_command(self):
        with pytest.raises(ProcessError) as exc_info:
            execute_out("definitely-not-a-real-command-xyz", [])
        assert exc_info.value.command == "definitely-not-a-real-command-xyz"

    def test_timeout(self):
        with pytest.raises(ProcessError) as exc_info:
            execute_out(sys.executable, ["-c", "import time; time.sleep(10)"], timeout=0.2)
        assert "timed out" in str(exc_info.value)


class TestFindExecutable:
    """Tests for find_executable."""

    @patch("hostprobe_core.process.shutil.which", return_value="/usr/bin/lsb_release")
    def test_found(self, mock_which):
        assert find_executable("lsb_release") == "/usr/bin/lsb_release"

    @patch("hostprobe_core.process.shutil.which", return_value=None)
    def test_not_found(self, mock_which):
        assert find_executable("lsb_release") is None


class TestReadText:
    """Tests for read_text."""

    def test_reads(self, tmp_path):
        path = tmp_path / "file"
        path.write_text("content\n")
        assert read_text(path) == "content\n"

    def test_missing(self, tmp_path):
        with pytest.raises(OSError):
            read_text(tmp_path / "missing")
