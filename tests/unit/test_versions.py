"""Unit tests for version parsing."""
import pytest
from packaging.version import Version

from hostprobe_core.exceptions import HostProbeError, VersionParseError
from hostprobe_core.versions import parse_version, try_parse_version


class TestParseVersion:
    """Tests for parse_version."""

    def test_simple(self):
        assert parse_version("38") == Version("38")

    def test_dotted(self):
        assert parse_version("7.9.2009") == Version("7.9.2009")

    def test_surrounding_whitespace(self):
        assert parse_version("12\n") == Version("12")

    def test_ordering(self):
        assert parse_version("22.04") < parse_version("24.04")
        assert parse_version("9.2") > parse_version("9")

    @pytest.mark.parametrize("text", ["", "   \n", "bookworm/sid", "not a version"])
    def test_invalid(self, text):
        with pytest.raises(VersionParseError) as exc_info:
            parse_version(text)
        assert exc_info.value.text == text

    def test_error_is_hostprobe_error(self):
        assert issubclass(VersionParseError, HostProbeError)


class TestTryParseVersion:
    """Tests for try_parse_version."""

    def test_valid(self):
        assert try_parse_version("3.18.4") == Version("3.18.4")

    def test_invalid_is_none(self):
        assert try_parse_version("rolling") is None

    def test_none_is_none(self):
        assert try_parse_version(None) is None


class TestVendorSuffixedVersions:
    """Tests for versions with a vendor suffix after the release number."""

    @pytest.mark.parametrize("text, release", [
        ("14.1-RELEASE", "14.1"),
        ("13.2-RELEASE-p4\n", "13.2"),
        ("15.0-CURRENT", "15.0"),
    ])
    def test_ordered_by_leading_release(self, text, release):
        version = parse_version(text)
        assert version == Version(release)
        assert str(version) == text.strip()

    def test_ordering_across_suffixes(self):
        assert parse_version("13.2-RELEASE-p4") < parse_version("14.1-RELEASE")

    def test_original_text_kept(self):
        assert str(parse_version("22.04")) == "22.04"
        assert parse_version("22.04") == Version("22.4")

    def test_no_leading_number(self):
        with pytest.raises(VersionParseError):
            parse_version("RELEASE-14.1")
