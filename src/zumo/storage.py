#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Pluggable storage operations for hosts without direct file-system access."""

from __future__ import annotations

from enum import Enum
import os
from pathlib import Path
from typing import BinaryIO, Protocol, runtime_checkable

from provide.foundation import logger
from provide.foundation.file.directory import ensure_parent_dir

from zumo.exceptions import StorageError


class FileMode(Enum):
    """How the operating system should open a file."""

    CREATE_NEW = "create_new"  # Fail if the file exists
    CREATE = "create"  # Create, or truncate an existing file
    OPEN = "open"  # Fail if the file is missing
    OPEN_OR_CREATE = "open_or_create"
    TRUNCATE = "truncate"  # Existing file, emptied
    APPEND = "append"  # Create if missing, write at the end


class FileAccess(Enum):
    """What the caller intends to do with the stream."""

    READ = "read"
    WRITE = "write"
    READ_WRITE = "read_write"

    @property
    def can_write(self) -> bool:
        return self is not FileAccess.READ


@runtime_checkable
class StorageOperations(Protocol):
    """Supplies byte streams for paths in application storage."""

    def open_stream(self, path: str | Path, mode: FileMode, access: FileAccess) -> BinaryIO: ...


_MODE_FLAGS = {
    FileMode.CREATE_NEW: os.O_CREAT | os.O_EXCL,
    FileMode.CREATE: os.O_CREAT | os.O_TRUNC,
    FileMode.OPEN: 0,
    FileMode.OPEN_OR_CREATE: os.O_CREAT,
    FileMode.TRUNCATE: os.O_TRUNC,
    FileMode.APPEND: os.O_CREAT | os.O_APPEND,
}

_ACCESS_FLAGS = {
    FileAccess.READ: (os.O_RDONLY, "rb"),
    FileAccess.WRITE: (os.O_WRONLY, "wb"),
    FileAccess.READ_WRITE: (os.O_RDWR, "r+b"),
}

_WRITE_ONLY_MODES = {FileMode.CREATE_NEW, FileMode.CREATE, FileMode.TRUNCATE, FileMode.APPEND}


def check_mode_access(mode: FileMode, access: FileAccess) -> None:
    """Reject mode/access combinations the OS would not honor.

    Raises:
        StorageError: If ``mode`` needs write access that ``access`` lacks,
            or APPEND is combined with read access
    """
    if mode in _WRITE_ONLY_MODES and not access.can_write:
        raise StorageError(f"File mode {mode.name} requires write access, got {access.name}")
    if mode is FileMode.APPEND and access is not FileAccess.WRITE:
        raise StorageError(f"File mode APPEND can only be used with WRITE access, got {access.name}")


class LocalStorageOperations:
    """StorageOperations over the local file system.

    Relative paths are resolved against ``root`` when one is given.
    """

    def __init__(self, root: str | Path | None = None) -> None:
        self.root = Path(root) if root is not None else None

    def resolve_path(self, path: str | Path) -> Path:
        candidate = Path(path)
        if self.root is not None and not candidate.is_absolute():
            return self.root / candidate
        return candidate

    def open_stream(self, path: str | Path, mode: FileMode, access: FileAccess) -> BinaryIO:
        """Open ``path`` and return a binary stream.

        Args:
            path: File to open, relative to ``root`` if not absolute
            mode: How to open or create the file
            access: Read, write, or both

        Returns:
            An open binary file object; the caller closes it

        Raises:
            StorageError: For invalid mode/access combinations, a missing
                file with OPEN/TRUNCATE, or an existing file with CREATE_NEW
        """
        check_mode_access(mode, access)
        target = self.resolve_path(path)

        flags = _MODE_FLAGS[mode]
        access_flag, file_mode = _ACCESS_FLAGS[access]
        if mode is FileMode.APPEND:
            file_mode = "ab"
        flags |= access_flag | getattr(os, "O_BINARY", 0)

        if flags & os.O_CREAT:
            ensure_parent_dir(target)

        logger.debug("Opening storage stream", path=str(target), mode=mode.name, access=access.name)
        try:
            fd = os.open(target, flags, 0o600)
        except FileExistsError as e:
            raise StorageError(f"File already exists: {target}") from e
        except FileNotFoundError as e:
            raise StorageError(f"File not found: {target}") from e
        except OSError as e:
            raise StorageError(f"Could not open {target}: {e}") from e

        try:
            return os.fdopen(fd, file_mode)
        except BaseException:
            os.close(fd)
            raise


# 🌶️📦🔚
