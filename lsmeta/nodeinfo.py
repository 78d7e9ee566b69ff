"""Inode numbers, hard link counts and ownership of files."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Callable, Optional

try:
    import grp
    import pwd
except ImportError:  # not available on every platform
    grp = None  # type: ignore[assignment]
    pwd = None  # type: ignore[assignment]

Colorizer = Callable[[str, str], str]

_HAS_UNIX_IDS = os.name != "nt"


def _apply(colorize: Optional[Colorizer], text: str, elem: str) -> str:
    return colorize(text, elem) if colorize is not None else text


@dataclass(frozen=True)
class INode:
    """An inode number, unknown on platforms without one."""

    index: Optional[int] = None

    @classmethod
    def from_stat(cls, st: os.stat_result) -> "INode":
        """The inode of a stat result."""
        return cls(st.st_ino if _HAS_UNIX_IDS else None)

    def render(self, colorize: Optional[Colorizer] = None) -> str:
        """The inode number, or ``-`` if unknown."""
        if self.index is None:
            return _apply(colorize, "-", "inode_invalid")
        return _apply(colorize, str(self.index), "inode_valid")


@dataclass(frozen=True)
class Links:
    """A hard link count, unknown on platforms without one."""

    nlink: Optional[int] = None

    @classmethod
    def from_stat(cls, st: os.stat_result) -> "Links":
        """The link count of a stat result."""
        return cls(st.st_nlink if _HAS_UNIX_IDS else None)

    def render(self, colorize: Optional[Colorizer] = None) -> str:
        """The link count, or ``-`` if unknown."""
        if self.nlink is None:
            return _apply(colorize, "-", "links_invalid")
        return _apply(colorize, str(self.nlink), "links_valid")


def _user_name(uid: int) -> str:
    if pwd is not None:
        try:
            return pwd.getpwuid(uid).pw_name
        except (KeyError, OverflowError):
            pass
    return str(uid)


def _group_name(gid: int) -> str:
    if grp is not None:
        try:
            return grp.getgrgid(gid).gr_name
        except (KeyError, OverflowError):
            pass
    return str(gid)


@dataclass(frozen=True)
class Owner:
    """The user and group owning a file."""

    user: str
    group: str

    @classmethod
    def from_stat(cls, st: os.stat_result) -> "Owner":
        """Names of the owner and group, or their numeric ids if unknown."""
        return cls(_user_name(st.st_uid), _group_name(st.st_gid))

    def render_user(self, colorize: Optional[Colorizer] = None) -> str:
        """The coloured user name."""
        return _apply(colorize, self.user, "user")

    def render_group(self, colorize: Optional[Colorizer] = None) -> str:
        """The coloured group name."""
        return _apply(colorize, self.group, "group")