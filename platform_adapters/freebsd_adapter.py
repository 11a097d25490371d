from hostprobe_core.schemas import OSFamily, Platform, PlatformResult

from .base import PlatformAdapter

FREEBSD_VERSION_CMD = "freebsd-version"


class FreeBSDAdapter(PlatformAdapter):
    platform = Platform.FREEBSD

    def detect(self) -> PlatformResult:
        version = self.command_version(FREEBSD_VERSION_CMD, [])
        return PlatformResult(family=OSFamily(platform=self.platform), version=version)
