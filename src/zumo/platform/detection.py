#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Runtime detection of the host operating system family."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Sequence
from enum import Enum
import platform

from provide.foundation import logger

from zumo.exceptions import UnsupportedPlatformError


class OSFamily(Enum):
    """Coarse operating system families the client can report."""

    WINDOWS = "Windows"
    OSX = "OSX"
    LINUX = "Linux"

    @property
    def display_name(self) -> str:
        """Label used for the user agent; OSX is shown as MacOS."""
        if self is OSFamily.OSX:
            return "MacOS"
        return self.value


class PlatformProbe(ABC):
    """Recognizes one OS family and describes the host it runs on."""

    family: OSFamily

    @abstractmethod
    def matches(self, system: str) -> bool:
        """Return True if the normalized system name belongs to this family."""

    def describe(self) -> str:
        """Human-readable OS description in ``sysname release version`` form."""
        return " ".join((platform.system(), platform.release(), platform.version()))


class WindowsProbe(PlatformProbe):
    family = OSFamily.WINDOWS

    def matches(self, system: str) -> bool:
        return system == "windows"

    def describe(self) -> str:
        return f"Microsoft Windows {platform.version()}"


class MacOSProbe(PlatformProbe):
    family = OSFamily.OSX

    def matches(self, system: str) -> bool:
        return system in ("darwin", "macos")


class LinuxProbe(PlatformProbe):
    family = OSFamily.LINUX

    def matches(self, system: str) -> bool:
        return system == "linux"


# Checked in this order; the first match wins.
DEFAULT_PROBES: tuple[PlatformProbe, ...] = (WindowsProbe(), MacOSProbe(), LinuxProbe())


def detect_os_family(system: str, probes: Sequence[PlatformProbe] = DEFAULT_PROBES) -> PlatformProbe:
    """Return the first probe that recognizes ``system``.

    Args:
        system: Normalized host system name (e.g. "windows", "darwin", "linux")
        probes: Candidate probes in priority order

    Returns:
        The matching probe

    Raises:
        UnsupportedPlatformError: If no probe matches
    """
    normalized = system.strip().lower()
    for probe in probes:
        if probe.matches(normalized):
            logger.debug("Detected OS family", system=normalized, family=probe.family.value)
            return probe

    logger.error("No OS family matched host system", system=normalized, probes=len(probes))
    raise UnsupportedPlatformError(system)


# 🌶️📦🔚
