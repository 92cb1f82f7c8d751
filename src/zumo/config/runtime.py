#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Environment-driven runtime configuration for zumo-platform."""

from __future__ import annotations

from attrs import define
from provide.foundation.config.base import field
from provide.foundation.config.env import RuntimeConfig

VALID_LOG_LEVELS = {"TRACE", "DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
TRUE_VALUES = {"1", "true", "yes", "on"}
FALSE_VALUES = {"", "0", "false", "no", "off"}


def parse_log_level(value: str) -> str:
    """Validate and normalize log levels."""
    normalized = value.strip().upper()
    if normalized not in VALID_LOG_LEVELS:
        raise ValueError(f"Invalid log level: {value}")
    return normalized


def parse_bool(value: str | bool) -> bool:
    """Parse a boolean flag from an environment string."""
    if isinstance(value, bool):
        return value
    normalized = value.strip().lower()
    if normalized in TRUE_VALUES:
        return True
    if normalized in FALSE_VALUES:
        return False
    raise ValueError(f"Invalid boolean value: {value}")


def parse_optional_str(value: str | None) -> str | None:
    """Treat blank strings as unset; other values are kept verbatim."""
    if value is None or not value.strip():
        return None
    return value


@define
class ZumoRuntimeConfig(RuntimeConfig):
    """zumo-platform settings read from the process environment."""

    log_level: str = field(
        default="WARNING",
        env_var="ZUMO_LOG_LEVEL",
        converter=parse_log_level,
        metadata={"help": "Log level for platform resolution (TRACE, DEBUG, INFO, WARNING, ERROR, CRITICAL)"},
    )

    setup_log_level: str = field(
        default="WARNING",
        env_var="ZUMO_SETUP_LOG_LEVEL",
        converter=parse_log_level,
        metadata={"help": "Log level for Foundation setup messages during initialization"},
    )

    os_name: str | None = field(
        default=None,
        env_var="ZUMO_OS_NAME",
        converter=parse_optional_str,
        metadata={"help": "Override for the operating system name reported in the user agent"},
    )

    os_version: str | None = field(
        default=None,
        env_var="ZUMO_OS_VERSION",
        converter=parse_optional_str,
        metadata={"help": "Override for the operating system version reported in the user agent"},
    )

    os_architecture: str | None = field(
        default=None,
        env_var="ZUMO_OS_ARCHITECTURE",
        converter=parse_optional_str,
        metadata={"help": "Override for the platform architecture reported in the user agent"},
    )

    local_app_data_dir: str | None = field(
        default=None,
        env_var="ZUMO_LOCAL_APP_DATA_DIR",
        converter=parse_optional_str,
        metadata={"help": "Path to the application's local data storage"},
    )

    require_storage: bool = field(
        default=False,
        env_var="ZUMO_REQUIRE_STORAGE",
        converter=parse_bool,
        metadata={"help": "Fail validation unless a data directory and storage operations are supplied"},
    )


# 🌶️📦🔚
