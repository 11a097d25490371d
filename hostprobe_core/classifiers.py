"""Pure classifiers from raw host strings to known enum values."""
import re
from typing import Dict, List, Tuple

from .exceptions import NoCompatibleArchError
from .schemas import Architecture, LinuxDistro

# Exact raw names only, no case folding
ARCHITECTURES: Dict[str, Architecture] = {
    "x86_64": Architecture.A_64,
    "i386": Architecture.A_32,
    "powerpc": Architecture.A_POWERPC,
    "powerpc64": Architecture.A_POWERPC64,
    "powerpc64le": Architecture.A_POWERPC64,
    "sparc": Architecture.A_SPARC,
    "sparc64": Architecture.A_SPARC64,
    "arm": Architecture.A_ARM,
    "aarch64": Architecture.A_ARM64,
}

# First matching group wins
DISTRO_WORDS: List[Tuple[LinuxDistro, Tuple[str, ...]]] = [
    (LinuxDistro.DEBIAN, ("debian",)),
    (LinuxDistro.UBUNTU, ("ubuntu",)),
    (LinuxDistro.MINT, ("linuxmint", "Linux Mint")),
    (LinuxDistro.FEDORA, ("fedora",)),
    (LinuxDistro.CENTOS, ("centos",)),
    (LinuxDistro.REDHAT, ("Red Hat",)),
    (LinuxDistro.ALPINE, ("alpine",)),
    (LinuxDistro.EXHERBO, ("exherbo",)),
    (LinuxDistro.GENTOO, ("gentoo",)),
    (LinuxDistro.AMAZON_LINUX, ("amazonlinux", "Amazon Linux")),
]


def word_pattern(word: str) -> re.Pattern:
    """Compile a case-insensitive whole-word pattern for a literal word."""
    return re.compile(rf"\b{re.escape(word)}\b", re.IGNORECASE)


_DISTRO_PATTERNS = [
    (distro, [word_pattern(w) for w in words]) for distro, words in DISTRO_WORDS
]


def classify_architecture(raw: str) -> Architecture:
    """Map a raw architecture name to an Architecture.

    Args:
        raw: Architecture name as reported by the host (e.g. "x86_64").

    Returns:
        The matching Architecture.

    Raises:
        NoCompatibleArchError: If the name is not in the known table.
    """
    try:
        return ARCHITECTURES[raw]
    except KeyError:
        raise NoCompatibleArchError(raw) from None


def classify_distro(name: str) -> LinuxDistro:
    """Map a free-text distro name to a LinuxDistro.

    Never fails; unrecognised names give UNKNOWN_LINUX.
    """
    for distro, patterns in _DISTRO_PATTERNS:
        if any(p.search(name) for p in patterns):
            return distro
    return LinuxDistro.UNKNOWN_LINUX
