"""Version string parsing.

Wraps ``packaging.version`` so callers get a structured, ordered,
comparable value or a :class:`VersionParseError`. Vendor-suffixed text
such as FreeBSD's ``13.2-RELEASE-p4`` is ordered by its leading numeric
release while the original text is kept for display.
"""
import logging
import re
from typing import Optional

from packaging.version import InvalidVersion, Version

from .exceptions import VersionParseError

logger = logging.getLogger(__name__)

LEADING_RELEASE = re.compile(r"^[0-9]+(?:\.[0-9]+)*")


class VersionInfo(Version):
    """A parsed version that remembers the text it came from.

    Compares like a ``packaging`` Version; ``str()`` gives the original text
    so "22.04" stays "22.04".
    """

    def __init__(self, text: str, release: Optional[str] = None):
        super().__init__(release if release is not None else text)
        self.raw = text

    def __str__(self) -> str:
        return self.raw

    def __repr__(self) -> str:
        return f"<VersionInfo({self.raw!r})>"


def parse_version(text: str) -> VersionInfo:
    """Parse free-form version text.

    Args:
        text: Raw version text, e.g. "38", "22.04", "14.1-RELEASE" or "12\\n".

    Returns:
        The parsed version.

    Raises:
        VersionParseError: If the text is empty or has no numeric release.
    """
    stripped = text.strip()
    if not stripped:
        raise VersionParseError(text, "empty version string")

    try:
        return VersionInfo(stripped)
    except InvalidVersion as e:
        match = LEADING_RELEASE.match(stripped)
        if match is None:
            raise VersionParseError(text, str(e)) from e
        return VersionInfo(stripped, release=match.group(0))


def try_parse_version(text: Optional[str]) -> Optional[VersionInfo]:
    """Parse version text, returning None instead of raising."""
    if text is None:
        return None

    try:
        return parse_version(text)
    except VersionParseError as e:
        logger.debug(f"Ignoring unparseable version: {e}")
        return None
