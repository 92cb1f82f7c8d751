#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Platform override configuration, built before any descriptor is resolved."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from attrs import define, field

from zumo.config.runtime import ZumoRuntimeConfig, parse_optional_str
from zumo.exceptions import MissingConfigurationError

if TYPE_CHECKING:
    from zumo.storage import StorageOperations


@define(frozen=True)
class PlatformConfig:
    """Caller-supplied overrides for the environment descriptor.

    Any string left as ``None``, empty or all whitespace falls back to the
    value detected from the host. Other values are used verbatim, without
    stripping. Instances are frozen, so a resolver always sees the
    overrides exactly as they were when it was created.

    Set ``require_storage`` on hosts without native file APIs; validation
    then insists on both ``local_app_data_dir`` and ``storage_ops``.
    """

    os_name: str | None = field(default=None, converter=parse_optional_str)
    os_version: str | None = field(default=None, converter=parse_optional_str)
    os_architecture: str | None = field(default=None, converter=parse_optional_str)
    local_app_data_dir: Path | None = field(
        default=None,
        converter=lambda value: Path(value) if value else None,
    )
    storage_ops: StorageOperations | None = None
    require_storage: bool = False

    @classmethod
    def from_env(cls, storage_ops: StorageOperations | None = None) -> PlatformConfig:
        """Build a config from ``ZUMO_*`` environment variables."""
        runtime = ZumoRuntimeConfig.from_env()
        return cls(
            os_name=runtime.os_name,
            os_version=runtime.os_version,
            os_architecture=runtime.os_architecture,
            local_app_data_dir=runtime.local_app_data_dir,
            storage_ops=storage_ops,
            require_storage=runtime.require_storage,
        )

    def validate(self) -> None:
        """Raise MissingConfigurationError if a required override is absent."""
        if not self.require_storage:
            return
        if self.local_app_data_dir is None:
            raise MissingConfigurationError("local_app_data_dir")
        if self.storage_ops is None:
            raise MissingConfigurationError("storage_ops")


# 🌶️📦🔚
