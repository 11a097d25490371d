import logging
from abc import ABC, abstractmethod
from typing import List, Optional

from packaging.version import Version

from hostprobe_core.config import HostProbeConfig, get_config
from hostprobe_core.exceptions import ProcessError
from hostprobe_core.process import execute_out
from hostprobe_core.schemas import Platform, PlatformResult
from hostprobe_core.versions import try_parse_version

logger = logging.getLogger(__name__)


class PlatformAdapter(ABC):
    """Abstract base class for OS-family specific detection."""

    platform: Platform

    def __init__(self, config: Optional[HostProbeConfig] = None):
        self.config = config or get_config()

    @abstractmethod
    def detect(self) -> PlatformResult:
        """Resolve the OS family and its version."""
        raise NotImplementedError

    def command_version(self, command: str, args: List[str]) -> Optional[Version]:
        """Run a version-reporting command and parse its output.

        Returns None when the command cannot run, exits non-zero, or
        prints something that is not a version.
        """
        try:
            result = execute_out(command, args, timeout=self.config.command_timeout)
        except ProcessError as e:
            logger.debug(str(e))
            return None

        if not result.ok:
            logger.debug(f"{command} exited with status {result.returncode}")
            return None

        return try_parse_version(result.stdout)
