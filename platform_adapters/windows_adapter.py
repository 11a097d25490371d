from hostprobe_core.schemas import OSFamily, Platform, PlatformResult

from .base import PlatformAdapter


class WindowsAdapter(PlatformAdapter):
    platform = Platform.WINDOWS

    def detect(self) -> PlatformResult:
        # No version source is consulted on Windows
        return PlatformResult(family=OSFamily(platform=self.platform), version=None)
