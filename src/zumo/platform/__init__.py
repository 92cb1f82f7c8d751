#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Operating system detection for the client user agent."""

from __future__ import annotations

from zumo.platform.descriptor import EnvironmentDescriptor, parse_os_version
from zumo.platform.detection import (
    DEFAULT_PROBES,
    LinuxProbe,
    MacOSProbe,
    OSFamily,
    PlatformProbe,
    WindowsProbe,
    detect_os_family,
)
from zumo.platform.information import UNKNOWN_VALUE, PlatformInformation
from zumo.platform.manager import (
    configure_platform,
    get_platform,
    reset_platform,
    set_platform,
)
from zumo.platform.resolver import EnvironmentResolver

__all__ = [
    "DEFAULT_PROBES",
    "UNKNOWN_VALUE",
    "EnvironmentDescriptor",
    "EnvironmentResolver",
    "LinuxProbe",
    "MacOSProbe",
    "OSFamily",
    "PlatformInformation",
    "PlatformProbe",
    "WindowsProbe",
    "configure_platform",
    "detect_os_family",
    "get_platform",
    "parse_os_version",
    "reset_platform",
    "set_platform",
]

# 🌶️📦🔚
