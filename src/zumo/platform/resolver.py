#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Lazy, thread-safe resolution of the environment descriptor."""

from __future__ import annotations

from collections.abc import Callable, Iterator, Sequence
from contextlib import contextmanager
import threading

from provide.foundation import logger
from provide.foundation.platform import get_os_name

from zumo.config.platform import PlatformConfig
from zumo.platform.descriptor import EnvironmentDescriptor, parse_os_version
from zumo.platform.detection import DEFAULT_PROBES, PlatformProbe, detect_os_family


class EnvironmentResolver:
    """Resolves the host's ``(name, version, architecture)`` exactly once.

    Overrides come from the ``PlatformConfig`` given at construction, which
    is validated eagerly. The first call to ``resolve()`` runs detection;
    every later call, from any thread, returns the same descriptor.
    """

    def __init__(
        self,
        config: PlatformConfig | None = None,
        probes: Sequence[PlatformProbe] = DEFAULT_PROBES,
        system: Callable[[], str] = get_os_name,
    ) -> None:
        self.config = config if config is not None else PlatformConfig()
        self.config.validate()
        self.probes = tuple(probes)
        self._system = system
        self._descriptor: EnvironmentDescriptor | None = None
        self._lock = threading.Lock()

    @property
    def is_resolved(self) -> bool:
        return self._descriptor is not None

    @contextmanager
    def hold_unresolved(self) -> Iterator[bool]:
        """Block resolution for the duration; yield True if it has not run yet.

        A resolution already in progress on another thread finishes first.
        """
        with self._lock:
            yield self._descriptor is None

    def resolve(self) -> EnvironmentDescriptor:
        """Return the cached descriptor, computing it on first use."""
        descriptor = self._descriptor
        if descriptor is not None:
            return descriptor

        with self._lock:
            if self._descriptor is None:
                self._descriptor = self._compute()
            return self._descriptor

    def with_overrides(self, config: PlatformConfig) -> EnvironmentResolver:
        """Return a resolver using ``config``, unless this one already resolved.

        Overrides only count before the first read; once resolved, the
        cached values stand and this resolver is returned unchanged.
        """
        if self.is_resolved:
            logger.warning(
                "Ignoring platform overrides supplied after resolution",
                os_name=config.os_name,
                os_version=config.os_version,
                os_architecture=config.os_architecture,
            )
            return self
        return EnvironmentResolver(config, probes=self.probes, system=self._system)

    def _compute(self) -> EnvironmentDescriptor:
        probe = detect_os_family(self._system(), self.probes)
        default_name = probe.family.display_name
        config = self.config

        os_version = config.os_version
        if os_version is None:
            os_version = parse_os_version(probe.describe())

        descriptor = EnvironmentDescriptor(
            os_family=probe.family,
            os_name=config.os_name or default_name,
            os_version=os_version,
            os_architecture=config.os_architecture or default_name,
        )
        logger.debug(
            "Resolved environment descriptor",
            os_family=descriptor.os_family.value,
            os_name=descriptor.os_name,
            os_version=descriptor.os_version,
            os_architecture=descriptor.os_architecture,
            overridden=[
                name
                for name in ("os_name", "os_version", "os_architecture")
                if getattr(config, name) is not None
            ],
        )
        return descriptor


# 🌶️📦🔚
