"""Raw host facts: the OS family tag and the architecture name.

This module is intentionally standalone with no dependencies on other
hostprobe modules to avoid circular imports between hostprobe_core and
platform_adapters.
"""
import platform

# Names Python reports for machines, mapped onto the classifier's vocabulary
MACHINE_ALIASES = {
    "amd64": "x86_64",
    "x64": "x86_64",
    "i486": "i386",
    "i586": "i386",
    "i686": "i386",
    "x86": "i386",
    "arm64": "aarch64",
    "armv6l": "arm",
    "armv7": "arm",
    "armv7l": "arm",
    "ppc": "powerpc",
    "ppc64": "powerpc64",
    "ppc64le": "powerpc64le",
    "sun4u": "sparc64",
    "sun4v": "sparc64",
}

WINDOWS_TAGS = ("windows", "mingw32")


def get_os_name() -> str:
    """Return the lower-cased OS tag: 'linux', 'darwin', 'freebsd', 'windows', ..."""
    return platform.system().lower()


def get_raw_arch() -> str:
    """Return the machine name in canonical form ('x86_64', 'aarch64', ...).

    Unknown machine names are returned unchanged.
    """
    machine = platform.machine()
    return MACHINE_ALIASES.get(machine.lower(), machine)

