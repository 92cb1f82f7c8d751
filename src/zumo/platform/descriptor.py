#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""The resolved operating system descriptor and description parsing."""

from __future__ import annotations

from attrs import define

from zumo.exceptions import MalformedDescriptionError
from zumo.platform.detection import OSFamily

VERSION_TOKEN_INDEX = 2


@define(frozen=True)
class EnvironmentDescriptor:
    """Operating system values reported in the HTTP user agent."""

    os_family: OSFamily
    os_name: str
    os_version: str
    os_architecture: str

    def as_tuple(self) -> tuple[str, str, str]:
        """Return ``(os_name, os_version, os_architecture)``."""
        return (self.os_name, self.os_version, self.os_architecture)


def parse_os_version(description: str) -> str:
    """Pick the version token out of an OS description.

    The description is split on single spaces and the third token is taken,
    so "Microsoft Windows 10.0.19041" yields "10.0.19041".

    Raises:
        MalformedDescriptionError: If there are fewer than three tokens
    """
    tokens = description.split(" ")
    if len(tokens) <= VERSION_TOKEN_INDEX:
        raise MalformedDescriptionError(description)
    return tokens[VERSION_TOKEN_INDEX]


# 🌶️📦🔚
