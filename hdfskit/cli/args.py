"""Parsing of chmod/chown arguments and selection of file tests."""

from __future__ import annotations

import enum
import re
import stat
from typing import Optional

_OCTAL_RE = re.compile(r"[0-7]+")


def parse_owner(spec: str) -> tuple[str, str]:
    """Split OWNER[:GROUP]; without a group, the owner's name is used for it."""
    owner, sep, group = spec.partition(":")
    if not sep:
        return owner, owner
    return owner, group


def parse_mode(spec: str) -> int:
    """Parse an octal mode that fits in 32 bits."""
    if not _OCTAL_RE.fullmatch(spec) or int(spec, 8) >= 1 << 32:
        raise ValueError(f"invalid octal mode: {spec}")
    return int(spec, 8)


class StatTest(enum.Enum):
    """A test applied to a path's stat result (None when it does not exist)."""

    EXISTS = "e"
    DIR = "d"
    FILE = "f"
    NONEMPTY = "s"
    EMPTY = "z"

    def __call__(self, info: Optional[object]) -> bool:
        if self is StatTest.EXISTS:
            return info is not None
        if info is None:
            return False
        if self is StatTest.DIR:
            return stat.S_ISDIR(info.st_mode)
        if self is StatTest.FILE:
            return not stat.S_ISDIR(info.st_mode)
        if self is StatTest.NONEMPTY:
            return info.st_size != 0
        return info.st_size == 0


def select_stat_test(exists: bool, file: bool, dir: bool, empty: bool, nonempty: bool) -> StatTest:
    """Return the single test chosen by the flags."""
    if sum(map(bool, (exists, file, dir, empty, nonempty))) != 1:
        raise ValueError("exactly one test flag must be specified")
    if exists:
        return StatTest.EXISTS
    if dir:
        return StatTest.DIR
    if file:
        return StatTest.FILE
    if nonempty:
        return StatTest.NONEMPTY
    return StatTest.EMPTY