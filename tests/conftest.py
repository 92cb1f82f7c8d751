#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Shared pytest fixtures and helpers for zumo-platform tests."""

from __future__ import annotations

from collections.abc import Callable, Iterator
import os

import provide.testkit  # noqa: F401 - Installs setproctitle blocker early
from provide.testkit.logger import reset_foundation_setup_for_testing
import pytest

from zumo.platform import OSFamily, PlatformProbe, reset_platform

HOST_SYSTEMS = {
    OSFamily.WINDOWS: "windows",
    OSFamily.OSX: "darwin",
    OSFamily.LINUX: "linux",
}

HOST_DESCRIPTIONS = {
    OSFamily.WINDOWS: "Microsoft Windows 10.0.19041",
    OSFamily.OSX: "Darwin 23.6.0 Darwin Kernel Version 23.6.0",
    OSFamily.LINUX: "Linux 5.15.0-88-generic #98-Ubuntu SMP Mon Oct 2 15:18:56 UTC 2023",
}


class StaticProbe(PlatformProbe):
    """Probe with a fixed family and description that counts describe() calls."""

    def __init__(self, family: OSFamily, description: str) -> None:
        self.family = family
        self.description = description
        self.describe_calls = 0

    def matches(self, system: str) -> bool:
        return system == HOST_SYSTEMS[self.family]

    def describe(self) -> str:
        self.describe_calls += 1
        return self.description


def pytest_configure(config: pytest.Config) -> None:
    """Register custom markers."""
    config.addinivalue_line("markers", "unit: mark test as a fast unit test")


@pytest.fixture(autouse=True)
def reset_foundation_logging() -> Iterator[None]:
    """Reset foundation logging state before each test to avoid conflicts."""
    reset_foundation_setup_for_testing()
    yield
    reset_foundation_setup_for_testing()


@pytest.fixture(autouse=True)
def reset_shared_platform() -> Iterator[None]:
    """Make sure no test leaks the shared platform into the next."""
    reset_platform()
    yield
    reset_platform()


@pytest.fixture
def clean_zumo_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Remove any ZUMO_* variables inherited from the developer's shell."""
    for name in list(os.environ):
        if name.startswith("ZUMO_"):
            monkeypatch.delenv(name, raising=False)


@pytest.fixture
def static_probes() -> Callable[..., tuple[StaticProbe, ...]]:
    """Factory for a Windows/MacOS/Linux probe set with custom descriptions."""

    def factory(**descriptions: str) -> tuple[StaticProbe, ...]:
        return tuple(
            StaticProbe(family, descriptions.get(family.name.lower(), HOST_DESCRIPTIONS[family]))
            for family in (OSFamily.WINDOWS, OSFamily.OSX, OSFamily.LINUX)
        )

    return factory
