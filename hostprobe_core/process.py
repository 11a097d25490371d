"""I/O collaborators used by the probes: commands, files, PATH lookup."""
import logging
import shutil
import subprocess
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional, Union

from .exceptions import ProcessError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CommandResult:
    """Captured output of a finished command."""
    stdout: str
    returncode: int

    @property
    def ok(self) -> bool:
        return self.returncode == 0


def execute_out(
    command: str,
    args: List[str],
    cwd: Optional[Path] = None,
    timeout: Optional[float] = None,
) -> CommandResult:
    """Run a command to completion and capture its standard output.

    Output is decoded as UTF-8; invalid byte sequences are replaced.

    Args:
        command: Executable name or path.
        args: Arguments passed to the executable.
        cwd: Optional working directory.
        timeout: Optional limit in seconds. None waits indefinitely.

    Returns:
        CommandResult with decoded stdout and exit status.

    Raises:
        ProcessError: If the command cannot be started or times out.
    """
    cmd = [command, *args]
    logger.debug(f"Running: {' '.join(cmd)}")

    try:
        result = subprocess.run(
            cmd,
            cwd=str(cwd) if cwd else None,
            stdout=subprocess.PIPE,
            stderr=subprocess.DEVNULL,
            timeout=timeout,
        )
    except subprocess.TimeoutExpired as e:
        raise ProcessError(command, f"timed out after {timeout}s") from e
    except OSError as e:
        raise ProcessError(command, str(e)) from e

    return CommandResult(
        stdout=result.stdout.decode("utf-8", errors="replace"),
        returncode=result.returncode,
    )


def find_executable(name: str) -> Optional[str]:
    """Return the full path of an executable on PATH, or None."""
    return shutil.which(name)


def read_text(path: Union[str, Path]) -> str:
    """Read a text file.

    Raises:
        OSError: If the file is missing or unreadable.
        UnicodeDecodeError: If the file is not valid UTF-8.
    """
    with open(path, "r", encoding="utf-8") as f:
        return f.read()
