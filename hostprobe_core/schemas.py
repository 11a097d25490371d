"""Pydantic schemas and enums for detection results.

Results are immutable value objects; nothing here is cached or persisted.
"""
from enum import Enum
from typing import Any, Dict, Optional

from packaging.version import Version
from pydantic import BaseModel, ConfigDict, model_validator


class Architecture(Enum):
    """Supported CPU architectures."""
    A_32 = "i386"
    A_64 = "x86_64"
    A_POWERPC = "powerpc"
    A_POWERPC64 = "powerpc64"
    A_SPARC = "sparc"
    A_SPARC64 = "sparc64"
    A_ARM = "arm"
    A_ARM64 = "aarch64"


class Platform(Enum):
    """Supported OS families."""
    LINUX = "linux"
    DARWIN = "darwin"
    FREEBSD = "freebsd"
    WINDOWS = "windows"


class LinuxDistro(Enum):
    """Known Linux distributions. UNKNOWN_LINUX is the catch-all."""
    DEBIAN = "debian"
    UBUNTU = "ubuntu"
    MINT = "mint"
    FEDORA = "fedora"
    CENTOS = "centos"
    REDHAT = "redhat"
    ALPINE = "alpine"
    EXHERBO = "exherbo"
    GENTOO = "gentoo"
    AMAZON_LINUX = "amazonlinux"
    UNKNOWN_LINUX = "unknown"


_PLATFORM_LABELS = {
    Platform.LINUX: "Linux",
    Platform.DARWIN: "Darwin",
    Platform.FREEBSD: "FreeBSD",
    Platform.WINDOWS: "Windows",
}

_DISTRO_LABELS = {
    LinuxDistro.DEBIAN: "Debian",
    LinuxDistro.UBUNTU: "Ubuntu",
    LinuxDistro.MINT: "Mint",
    LinuxDistro.FEDORA: "Fedora",
    LinuxDistro.CENTOS: "CentOS",
    LinuxDistro.REDHAT: "RedHat",
    LinuxDistro.ALPINE: "Alpine",
    LinuxDistro.EXHERBO: "Exherbo",
    LinuxDistro.GENTOO: "Gentoo",
    LinuxDistro.AMAZON_LINUX: "AmazonLinux",
    LinuxDistro.UNKNOWN_LINUX: "UnknownLinux",
}


class ResultModel(BaseModel):
    """Base for immutable result models."""
    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)


class OSFamily(ResultModel):
    """An OS family. Only Linux carries a distro."""
    platform: Platform
    distro: Optional[LinuxDistro] = None

    @model_validator(mode="after")
    def check_distro(self) -> "OSFamily":
        if self.platform is Platform.LINUX and self.distro is None:
            raise ValueError("Linux platform requires a distro")
        if self.platform is not Platform.LINUX and self.distro is not None:
            raise ValueError(f"{self.platform.value} platform cannot carry a distro")
        return self

    @classmethod
    def linux(cls, distro: LinuxDistro) -> "OSFamily":
        return cls(platform=Platform.LINUX, distro=distro)

    @classmethod
    def darwin(cls) -> "OSFamily":
        return cls(platform=Platform.DARWIN)

    @classmethod
    def freebsd(cls) -> "OSFamily":
        return cls(platform=Platform.FREEBSD)

    @classmethod
    def windows(cls) -> "OSFamily":
        return cls(platform=Platform.WINDOWS)

    def __str__(self) -> str:
        label = _PLATFORM_LABELS[self.platform]
        if self.distro is not None:
            return f"{label} ({_DISTRO_LABELS[self.distro]})"
        return label

    def to_dict(self) -> Dict[str, Any]:
        return {
            "platform": self.platform.value,
            "distro": self.distro.value if self.distro is not None else None,
        }


class PlatformResult(ResultModel):
    """Resolved OS family plus best-effort version."""
    family: OSFamily
    version: Optional[Version] = None

    def __str__(self) -> str:
        if self.version is None:
            return str(self.family)
        return f"{self.family}, {self.version}"

    def to_dict(self) -> Dict[str, Any]:
        return {
            **self.family.to_dict(),
            "version": str(self.version) if self.version is not None else None,
        }


class PlatformRequest(ResultModel):
    """Architecture, OS family and version of the running host."""
    architecture: Architecture
    family: OSFamily
    version: Optional[Version] = None

    @classmethod
    def from_result(cls, architecture: Architecture, result: PlatformResult) -> "PlatformRequest":
        return cls(architecture=architecture, family=result.family, version=result.version)

    def __str__(self) -> str:
        text = f"{self.architecture.value} / {self.family}"
        if self.version is not None:
            text += f", {self.version}"
        return text

    def to_dict(self) -> Dict[str, Any]:
        return {
            "architecture": self.architecture.value,
            **self.family.to_dict(),
            "version": str(self.version) if self.version is not None else None,
        }
