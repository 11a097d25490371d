"""hostprobe Public API - high-level detection functions.

Each call probes the host from scratch; nothing is cached.
"""
import logging
from typing import Optional

from .classifiers import classify_architecture
from .config import HostProbeConfig
from .platform import get_raw_arch
from .schemas import Architecture, PlatformRequest, PlatformResult

logger = logging.getLogger(__name__)


def get_architecture(raw_arch: Optional[str] = None) -> Architecture:
    """Classify the host CPU architecture.

    Args:
        raw_arch: Architecture name to classify. Defaults to the running host's.

    Raises:
        NoCompatibleArchError: If the architecture is not supported.
    """
    return classify_architecture(raw_arch if raw_arch is not None else get_raw_arch())


def get_platform(
    os_tag: Optional[str] = None,
    config: Optional[HostProbeConfig] = None,
) -> PlatformResult:
    """Resolve the OS family, distro and version.

    Args:
        os_tag: OS family tag ('linux', 'darwin', ...). Defaults to the running host's.
        config: Optional configuration; defaults to the global config.

    Returns:
        PlatformResult for the host.

    Raises:
        NoCompatiblePlatformError: If the OS tag is not supported.
        DistroNotFoundError: If on Linux and no release source is available.
    """
    from platform_adapters import get_adapter

    result = get_adapter(os_tag, config).detect()
    logger.debug(f"Identified Platform as: {result}")
    return result


def platform_request(
    config: Optional[HostProbeConfig] = None,
    os_tag: Optional[str] = None,
    raw_arch: Optional[str] = None,
) -> PlatformRequest:
    """Detect architecture and platform of the host.

    The architecture is checked first; an unsupported architecture fails
    before any platform probing happens.

    Raises:
        NoCompatibleArchError: If the architecture is not supported.
        NoCompatiblePlatformError: If the OS tag is not supported.
        DistroNotFoundError: If on Linux and no release source is available.
    """
    architecture = get_architecture(raw_arch)
    result = get_platform(os_tag, config)
    return PlatformRequest.from_result(architecture, result)
