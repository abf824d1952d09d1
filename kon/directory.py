"""Filesystem paths together with what the filesystem says about them."""

from __future__ import annotations

import enum
import os
from dataclasses import dataclass

from kon.strings import ShortString, String
from kon.util import bit


class FilePermissions(enum.IntFlag):
    """What the current process may do with a path."""

    NONE = bit(0)
    READ = bit(1)
    WRITE = bit(2)
    EXECUTE = bit(3)


@dataclass(frozen=True)
class PathStat:
    """Whether a path exists, whether it is a directory, its size and access."""

    valid: bool
    directory: bool
    size: int
    permissions: FilePermissions


_INVALID = PathStat(False, False, 0, FilePermissions.NONE)


def get_path_stat(path: object) -> PathStat:
    """Query the filesystem about ``path``."""
    text = str(path)
    try:
        result = os.stat(text)
    except (OSError, ValueError):
        return _INVALID

    permissions = FilePermissions(0)
    for mode, flag in (
        (os.R_OK, FilePermissions.READ),
        (os.W_OK, FilePermissions.WRITE),
        (os.X_OK, FilePermissions.EXECUTE),
    ):
        if os.access(text, mode):
            permissions |= flag
    if not permissions:
        permissions = FilePermissions.NONE

    return PathStat(
        valid=True,
        directory=os.path.isdir(text),
        size=result.st_size,
        permissions=permissions,
    )


class Directory:
    """A path string and its stat, taken when the path is set."""

    def __init__(self, path: object = "") -> None:
        if isinstance(path, Directory):
            self._path = path._path
            self._stat = path._stat
        else:
            self._path = str(path)
            self._stat = get_path_stat(self._path)

    @property
    def stat(self) -> PathStat:
        return self._stat

    @property
    def valid(self) -> bool:
        return self._stat.valid

    @property
    def path(self) -> str:
        return self._path

    def _after_last(self, separator: str) -> ShortString:
        return ShortString(self._path[self._path.rfind(separator) + 1:])

    def file_name(self) -> ShortString:
        """Everything after the last '/', or the whole path when there is none."""
        return self._after_last("/")

    def file_extension(self) -> ShortString:
        """Everything after the last '.', or the whole path when there is none."""
        return self._after_last(".")

    def __add__(self, other: object) -> Directory:
        if not isinstance(other, (str, String, ShortString, Directory)):
            return NotImplemented
        return Directory(self._path + str(other))

    def __iadd__(self, other: object) -> Directory:
        if not isinstance(other, (str, String, ShortString, Directory)):
            return NotImplemented
        self._path += str(other)
        self._stat = get_path_stat(self._path)
        return self

    def __str__(self) -> str:
        return self._path

    def __repr__(self) -> str:
        return f"Directory({self._path!r})"


def iterate_directory(path: object) -> list[Directory]:
    """The entries of directory ``path``, sorted by name."""
    base = str(path)
    with os.scandir(base) as entries:
        names = sorted(entry.name for entry in entries)
    return [Directory(os.path.join(base, name)) for name in names]


def is_valid(directory: Directory) -> bool:
    return directory.valid


def is_directory(directory: Directory) -> bool:
    return directory.valid and directory.stat.directory


def is_file(directory: Directory) -> bool:
    return directory.valid and not directory.stat.directory