"""Linux release-information probes.

Each probe reads exactly one source and returns a :class:`ProbeResult`,
or None when the source is absent or unusable. Only absence-type errors
(``OSError``, ``UnicodeDecodeError``, :class:`ProcessError`) are treated
as "probe did not apply"; anything else propagates.

Probes are tried in a fixed priority order by :func:`first_success`:

1. os-release file (``NAME`` / ``VERSION_ID``)
2. ``lsb_release -si`` / ``lsb_release -sr``
3. ``/etc/redhat-release`` free text
4. ``/etc/debian_version``
"""
import logging
import re
import shlex
from pathlib import Path
from typing import Callable, Dict, Iterable, NamedTuple, Optional, Sequence, Union

from .classifiers import word_pattern
from .exceptions import ProcessError
from .process import execute_out, find_executable, read_text

logger = logging.getLogger(__name__)

OS_RELEASE_PATHS = ("/etc/os-release", "/usr/lib/os-release")
LSB_RELEASE_CMD = "lsb_release"
REDHAT_RELEASE = "/etc/redhat-release"
DEBIAN_VERSION = "/etc/debian_version"

REDHAT_NAMES = ("CentOS", "Fedora", "Red Hat")
VERSION_PATTERN = re.compile(r"\b[0-9]+(?:\.[0-9]+)*\b")


class ProbeResult(NamedTuple):
    """Raw distro name and optional version text from one source."""
    name: str
    version: Optional[str] = None


Probe = Callable[[], Optional[ProbeResult]]


def parse_os_release(text: str) -> Dict[str, str]:
    """Parse os-release content into a key/value dict.

    Values are unquoted shell-style. Blank lines, comments and lines that
    fail to parse are skipped.
    """
    data: Dict[str, str] = {}
    for raw_line in text.splitlines():
        line = raw_line.strip()
        if not line or line.startswith("#") or "=" not in line:
            continue

        key, value = line.split("=", 1)
        try:
            tokens = shlex.split(value)
        except ValueError:
            logger.debug(f"Skipping malformed os-release line: {raw_line!r}")
            continue
        data[key.strip()] = " ".join(tokens)
    return data


def try_os_release(paths: Sequence[Union[str, Path]] = OS_RELEASE_PATHS) -> Optional[ProbeResult]:
    """Read NAME and VERSION_ID from the first readable os-release file."""
    for path in paths:
        try:
            content = read_text(path)
        except (OSError, UnicodeDecodeError) as e:
            logger.debug(f"Cannot read {path}: {e}")
            continue

        fields = parse_os_release(content)
        name = fields.get("NAME")
        if not name:
            logger.debug(f"{path} has no NAME field")
            return None
        return ProbeResult(name, fields.get("VERSION_ID") or None)

    return None


def try_lsb_release_cmd(
    command: str = LSB_RELEASE_CMD,
    timeout: Optional[float] = None,
) -> Optional[ProbeResult]:
    """Ask the lsb_release tool for distributor id and release."""
    if find_executable(command) is None:
        logger.debug(f"{command} not found on PATH")
        return None

    try:
        name = execute_out(command, ["-si"], timeout=timeout).stdout.strip()
        version = execute_out(command, ["-sr"], timeout=timeout).stdout.strip()
    except ProcessError as e:
        logger.debug(str(e))
        return None

    return ProbeResult(name, version or None)


def try_redhat_release(path: Union[str, Path] = REDHAT_RELEASE) -> Optional[ProbeResult]:
    """Extract a RedHat-family name and version from redhat-release."""
    try:
        content = read_text(path)
    except (OSError, UnicodeDecodeError) as e:
        logger.debug(f"Cannot read {path}: {e}")
        return None

    for candidate in REDHAT_NAMES:
        match = word_pattern(candidate).search(content)
        if match:
            version = VERSION_PATTERN.search(content)
            return ProbeResult(match.group(0), version.group(0) if version else None)

    logger.debug(f"No known distro name in {path}")
    return None


def try_debian_version(path: Union[str, Path] = DEBIAN_VERSION) -> Optional[ProbeResult]:
    """Read the Debian version file; the name is always "debian"."""
    try:
        content = read_text(path)
    except (OSError, UnicodeDecodeError) as e:
        logger.debug(f"Cannot read {path}: {e}")
        return None

    return ProbeResult("debian", content)


def first_success(probes: Iterable[Probe]) -> Optional[ProbeResult]:
    """Run probes in order and return the first result, or None."""
    for probe in probes:
        result = probe()
        if result is not None:
            logger.debug(f"Release info found: name={result.name!r} version={result.version!r}")
            return result
    return None
