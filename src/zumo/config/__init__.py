#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""zumo-platform configuration built on the Provide Foundation config stack."""

from __future__ import annotations

from zumo.config.platform import PlatformConfig
from zumo.config.runtime import ZumoRuntimeConfig

__all__ = [
    "PlatformConfig",
    "ZumoRuntimeConfig",
]

# 🌶️📦🔚
