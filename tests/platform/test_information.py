#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Test PlatformInformation accessors and the user agent string."""

from __future__ import annotations

from collections.abc import Callable

from conftest import StaticProbe
import pytest

from zumo.config import PlatformConfig
from zumo.platform import UNKNOWN_VALUE, EnvironmentResolver, OSFamily, PlatformInformation
from zumo.platform import information


def make_info(probes: tuple[StaticProbe, ...], system: str, **overrides: str) -> PlatformInformation:
    resolver = EnvironmentResolver(PlatformConfig(**overrides), probes=probes, system=lambda: system)
    return PlatformInformation(resolver)


@pytest.mark.unit
class TestPlatformInformation:
    """Read-only accessors."""

    def test_accessors_follow_descriptor(self, static_probes: Callable[..., tuple[StaticProbe, ...]]) -> None:
        info = make_info(static_probes(), "windows")

        assert info.operating_system_name == "Windows"
        assert info.operating_system_version == "10.0.19041"
        assert info.operating_system_architecture == "Windows"
        assert info.descriptor.os_family is OSFamily.WINDOWS

    def test_is_emulator_false(self, static_probes: Callable[..., tuple[StaticProbe, ...]]) -> None:
        assert make_info(static_probes(), "linux").is_emulator is False

    def test_empty_version_reported_as_unknown(
        self, static_probes: Callable[..., tuple[StaticProbe, ...]]
    ) -> None:
        info = make_info(static_probes(linux="Linux 6.1 "), "linux")

        assert info.descriptor.os_version == ""
        assert info.operating_system_version == UNKNOWN_VALUE

    def test_resolution_is_lazy(self, static_probes: Callable[..., tuple[StaticProbe, ...]]) -> None:
        info = make_info(static_probes(), "plan9")

        assert not info.resolver.is_resolved

    def test_version_is_sdk_version(self, static_probes: Callable[..., tuple[StaticProbe, ...]]) -> None:
        assert make_info(static_probes(), "linux").version == information.SDK_VERSION


@pytest.mark.unit
class TestUserAgent:
    """User agent header value."""

    def test_user_agent_format(
        self,
        static_probes: Callable[..., tuple[StaticProbe, ...]],
        monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        monkeypatch.setattr(information, "SDK_VERSION", "2.1.7")
        info = make_info(static_probes(), "windows", os_architecture="Win32NT")

        assert info.user_agent() == (
            "ZUMO/2.1 (lang=Python; os=Windows; os_version=10.0.19041; arch=Win32NT; version=2.1.7)"
        )

    def test_custom_product(
        self,
        static_probes: Callable[..., tuple[StaticProbe, ...]],
        monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        monkeypatch.setattr(information, "SDK_VERSION", "3.0.0")
        info = make_info(static_probes(), "darwin", os_version="14.6")

        assert info.user_agent(product="MyApp").startswith("MyApp/3.0 (lang=Python; os=MacOS; os_version=14.6;")
