#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""zumo-platform core package exports."""

from __future__ import annotations

from provide.foundation.utils import get_version

from zumo.config import PlatformConfig, ZumoRuntimeConfig
from zumo.exceptions import (
    MalformedDescriptionError,
    MissingConfigurationError,
    StorageError,
    UnsupportedPlatformError,
    ZumoError,
)
from zumo.platform import (
    EnvironmentDescriptor,
    EnvironmentResolver,
    OSFamily,
    PlatformInformation,
    configure_platform,
    get_platform,
    reset_platform,
    set_platform,
)
from zumo.storage import FileAccess, FileMode, LocalStorageOperations, StorageOperations
from zumo.telemetry import setup_telemetry

__version__ = get_version("zumo-platform", caller_file=__file__)

__all__ = [
    "EnvironmentDescriptor",
    "EnvironmentResolver",
    "FileAccess",
    "FileMode",
    "LocalStorageOperations",
    "MalformedDescriptionError",
    "MissingConfigurationError",
    "OSFamily",
    "PlatformConfig",
    "PlatformInformation",
    "StorageError",
    "StorageOperations",
    "UnsupportedPlatformError",
    "ZumoError",
    "ZumoRuntimeConfig",
    "__version__",
    "configure_platform",
    "get_platform",
    "reset_platform",
    "set_platform",
    "setup_telemetry",
]

# 🌶️📦🔚
