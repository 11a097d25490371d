"""Platform adapters for OS-family specific detection."""
from typing import Optional

from .base import PlatformAdapter
from .windows_adapter import WindowsAdapter
from .linux_adapter import LinuxAdapter
from .macos_adapter import MacOSAdapter
from .freebsd_adapter import FreeBSDAdapter
from hostprobe_core.config import HostProbeConfig
from hostprobe_core.exceptions import NoCompatiblePlatformError
from hostprobe_core.platform import WINDOWS_TAGS, get_os_name


def get_adapter(os_tag: Optional[str] = None, config: Optional[HostProbeConfig] = None) -> PlatformAdapter:
    """Get a fresh platform adapter for an OS tag (default: the running OS).

    Raises:
        NoCompatiblePlatformError: If the tag is not a supported OS family.
    """
    tag = os_tag if os_tag is not None else get_os_name()
    key = tag.lower()
    if key == "linux":
        return LinuxAdapter(config)
    elif key == "darwin":
        return MacOSAdapter(config)
    elif key == "freebsd":
        return FreeBSDAdapter(config)
    elif key in WINDOWS_TAGS:
        return WindowsAdapter(config)
    raise NoCompatiblePlatformError(tag)


__all__ = [
    "PlatformAdapter",
    "WindowsAdapter",
    "LinuxAdapter",
    "MacOSAdapter",
    "FreeBSDAdapter",
    "get_adapter",
]
