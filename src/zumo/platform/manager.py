#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Guarded access to the shared PlatformInformation instance."""

from __future__ import annotations

import threading

from provide.foundation import logger

from zumo.config.platform import PlatformConfig
from zumo.exceptions import ZumoError
from zumo.platform.information import PlatformInformation
from zumo.platform.resolver import EnvironmentResolver

_platform: PlatformInformation | None = None
_lock = threading.Lock()


def get_platform() -> PlatformInformation:
    """Return the shared platform, building it from the environment on first use."""
    global _platform
    current = _platform
    if current is not None:
        return current

    with _lock:
        if _platform is None:
            logger.debug("Creating shared platform from environment")
            _platform = PlatformInformation(EnvironmentResolver(PlatformConfig.from_env()))
        return _platform


def configure_platform(config: PlatformConfig) -> PlatformInformation:
    """Install a shared platform built from ``config``.

    Raises:
        ZumoError: If the shared platform has already resolved its descriptor
    """
    global _platform
    with _lock:
        if _platform is None:
            _platform = PlatformInformation(EnvironmentResolver(config))
        else:
            with _platform.resolver.hold_unresolved() as unresolved:
                if not unresolved:
                    raise ZumoError("Platform overrides must be configured before the platform is first read")
                _platform = PlatformInformation(EnvironmentResolver(config))
        logger.debug("Configured shared platform", require_storage=config.require_storage)
        return _platform


def set_platform(platform_info: PlatformInformation) -> None:
    """Replace the shared platform, e.g. with a stub in tests."""
    global _platform
    with _lock:
        _platform = platform_info


def reset_platform() -> None:
    """Drop the shared platform so the next read rebuilds it."""
    global _platform
    with _lock:
        _platform = None


# 🌶️📦🔚
