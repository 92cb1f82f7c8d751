#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Read-only platform information consumed by the HTTP client."""

from __future__ import annotations

from provide.foundation.utils import get_version

from zumo.platform.descriptor import EnvironmentDescriptor
from zumo.platform.resolver import EnvironmentResolver

# Reported for any operating system value that resolved to an empty string.
UNKNOWN_VALUE = "--"

USER_AGENT_PRODUCT = "ZUMO"
USER_AGENT_LANGUAGE = "Python"

SDK_VERSION = get_version("zumo-platform", caller_file=__file__)


def _or_unknown(value: str) -> str:
    return value or UNKNOWN_VALUE


class PlatformInformation:
    """Operating system and SDK details for the current process."""

    def __init__(self, resolver: EnvironmentResolver | None = None) -> None:
        self.resolver = resolver if resolver is not None else EnvironmentResolver()

    @property
    def descriptor(self) -> EnvironmentDescriptor:
        return self.resolver.resolve()

    @property
    def operating_system_name(self) -> str:
        return _or_unknown(self.descriptor.os_name)

    @property
    def operating_system_version(self) -> str:
        return _or_unknown(self.descriptor.os_version)

    @property
    def operating_system_architecture(self) -> str:
        return _or_unknown(self.descriptor.os_architecture)

    @property
    def is_emulator(self) -> bool:
        """Desktop runtimes never run under a device emulator."""
        return False

    @property
    def version(self) -> str:
        return SDK_VERSION

    def user_agent(self, product: str = USER_AGENT_PRODUCT) -> str:
        """Build the ``User-Agent`` header value.

        Example:
            ``ZUMO/1.2 (lang=Python; os=Linux; os_version=5.15.0; arch=Linux; version=1.2.3)``
        """
        major_minor = ".".join(self.version.split(".")[:2])
        return (
            f"{product}/{major_minor} ("
            f"lang={USER_AGENT_LANGUAGE}; "
            f"os={self.operating_system_name}; "
            f"os_version={self.operating_system_version}; "
            f"arch={self.operating_system_architecture}; "
            f"version={self.version})"
        )


# 🌶️📦🔚
