#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Custom exceptions for zumo-platform."""

from __future__ import annotations

from provide.foundation.errors import FoundationError


class ZumoError(FoundationError):
    """Base exception for all zumo platform errors."""

    pass


class UnsupportedPlatformError(ZumoError):
    """Raised when the host matches none of the supported OS families."""

    def __init__(self, system: str) -> None:
        self.system = system
        super().__init__(
            f"Could not identify operating system {system!r}; no Windows, MacOS or Linux probe matched"
        )


class MalformedDescriptionError(ZumoError):
    """Raised when the OS description has too few tokens to carry a version."""

    def __init__(self, description: str) -> None:
        self.description = description
        super().__init__(f"OS description has no version token at position 2: {description!r}")


class MissingConfigurationError(ZumoError):
    """Raised when a required platform override is absent."""

    def __init__(self, setting: str) -> None:
        self.setting = setting
        super().__init__(f"Platform setting '{setting}' must be set")


class StorageError(ZumoError):
    """Raised for invalid or failed storage stream requests."""

    pass


# 🌶️📦🔚
