#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Foundation logging setup for applications embedding zumo-platform."""

from __future__ import annotations

from attrs import evolve
from provide.foundation import TelemetryConfig, get_hub

from zumo.config.runtime import ZumoRuntimeConfig


def setup_telemetry(runtime_config: ZumoRuntimeConfig | None = None) -> TelemetryConfig:
    """Initialize Foundation logging with zumo-platform's log level.

    Configure via environment variables:
    - ZUMO_LOG_LEVEL: Log level for platform resolution
    - ZUMO_SETUP_LOG_LEVEL: Control Foundation's initialization logs
    - PROVIDE_LOG_FILE: Write logs to file
    """
    if runtime_config is None:
        runtime_config = ZumoRuntimeConfig.from_env()

    base_telemetry = TelemetryConfig.from_env()
    telemetry_config = evolve(
        base_telemetry,
        service_name="zumo-platform",
        logging=evolve(
            base_telemetry.logging,
            default_level=runtime_config.log_level,  # type: ignore[arg-type]
        ),
    )

    get_hub().initialize_foundation(telemetry_config)
    return telemetry_config


# 🌶️📦🔚
