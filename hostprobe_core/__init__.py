"""
hostprobe Core Module - host platform identification for toolchain managers.
"""
__version__ = "0.1.0"

from .exceptions import (
    HostProbeError,
    PlatformDetectionError,
    NoCompatibleArchError,
    NoCompatiblePlatformError,
    DistroNotFoundError,
    VersionParseError,
    ProcessError,
    ConfigError,
)
from .schemas import (
    Architecture,
    Platform,
    LinuxDistro,
    OSFamily,
    PlatformResult,
    PlatformRequest,
)
from .config import get_config, get_config_manager
from .versions import parse_version, try_parse_version
from .api import get_architecture, get_platform, platform_request
from . import api
from . import probes
from . import classifiers

__all__ = [
    "__version__",
    # Exceptions
    "HostProbeError",
    "PlatformDetectionError",
    "NoCompatibleArchError",
    "NoCompatiblePlatformError",
    "DistroNotFoundError",
    "VersionParseError",
    "ProcessError",
    "ConfigError",
    # Results
    "Architecture",
    "Platform",
    "LinuxDistro",
    "OSFamily",
    "PlatformResult",
    "PlatformRequest",
    # Config
    "get_config",
    "get_config_manager",
    # Detection
    "parse_version",
    "try_parse_version",
    "get_architecture",
    "get_platform",
    "platform_request",
    # Submodules
    "api",
    "probes",
    "classifiers",
]
