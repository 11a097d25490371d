from functools import partial
from typing import List

from hostprobe_core.classifiers import classify_distro
from hostprobe_core.exceptions import DistroNotFoundError
from hostprobe_core.probes import (
    Probe,
    first_success,
    try_debian_version,
    try_lsb_release_cmd,
    try_os_release,
    try_redhat_release,
)
from hostprobe_core.schemas import OSFamily, Platform, PlatformResult
from hostprobe_core.versions import try_parse_version

from .base import PlatformAdapter


class LinuxAdapter(PlatformAdapter):
    platform = Platform.LINUX

    def probes(self) -> List[Probe]:
        """Release-info probes in priority order."""
        config = self.config
        return [
            partial(try_os_release, config.os_release_paths),
            partial(try_lsb_release_cmd, config.lsb_release_command, config.command_timeout),
            partial(try_redhat_release, config.redhat_release_path),
            partial(try_debian_version, config.debian_version_path),
        ]

    def detect(self) -> PlatformResult:
        found = first_success(self.probes())
        if found is None:
            raise DistroNotFoundError()

        return PlatformResult(
            family=OSFamily(platform=self.platform, distro=classify_distro(found.name)),
            version=try_parse_version(found.version),
        )
