"""hostprobe Exception Hierarchy."""


class HostProbeError(Exception):
    """Base exception for all hostprobe errors."""
    pass


class PlatformDetectionError(HostProbeError):
    """Base exception for failures that end a detection run."""
    pass


class NoCompatibleArchError(PlatformDetectionError):
    """Raised when the CPU architecture is not in the supported table."""
    def __init__(self, arch: str):
        self.arch = arch
        super().__init__(f"No compatible architecture found: {arch!r}")


class NoCompatiblePlatformError(PlatformDetectionError):
    """Raised when the OS family tag is not supported."""
    def __init__(self, platform: str):
        self.platform = platform
        super().__init__(f"No compatible platform found: {platform!r}")


class DistroNotFoundError(PlatformDetectionError):
    """Raised when running on Linux but no release source could be read."""
    def __init__(self):
        super().__init__(
            "Unable to detect the Linux distribution: no os-release file, "
            "lsb_release command, redhat-release or debian_version file found"
        )


class VersionParseError(HostProbeError):
    """Raised when a version string cannot be parsed."""
    def __init__(self, text: str, reason: str = ""):
        self.text = text
        self.reason = reason
        msg = f"Invalid version: {text!r}"
        if reason:
            msg += f" ({reason})"
        super().__init__(msg)


class ProcessError(HostProbeError):
    """Raised when an external command cannot be run to completion."""
    def __init__(self, command: str, reason: str = ""):
        self.command = command
        self.reason = reason
        msg = f"Failed to run command: {command}"
        if reason:
            msg += f" ({reason})"
        super().__init__(msg)


class ConfigError(HostProbeError):
    """Raised for invalid configuration values."""
    def __init__(self, field: str, message: str):
        self.field = field
        self.message = message
        super().__init__(f"Configuration error for '{field}': {message}")
