from hostprobe_core.schemas import OSFamily, Platform, PlatformResult

from .base import PlatformAdapter

SW_VERS_CMD = "sw_vers"


class MacOSAdapter(PlatformAdapter):
    platform = Platform.DARWIN

    def detect(self) -> PlatformResult:
        version = self.command_version(SW_VERS_CMD, ["-productVersion"])
        return PlatformResult(family=OSFamily(platform=self.platform), version=version)
