"""Unix permission bits and their rendering as ``rwx`` or octal strings."""

from __future__ import annotations

import enum
import os
import stat
from dataclasses import dataclass
from functools import partial
from typing import Callable, Optional

Colorizer = Callable[[str, str], str]


def _apply(colorize: Optional[Colorizer], text: str, elem: str) -> str:
    return colorize(text, elem) if colorize is not None else text


class PermissionFlag(enum.Enum):
    """How permissions are displayed."""

    RWX = "rwx"
    OCTAL = "octal"


def _octal_digit(r: bool, w: bool, x: bool) -> int:
    return r * 4 + w * 2 + x


@dataclass(frozen=True)
class Permissions:
    """The permission and special-mode bits of a file."""

    user_read: bool = False
    user_write: bool = False
    user_execute: bool = False
    group_read: bool = False
    group_write: bool = False
    group_execute: bool = False
    other_read: bool = False
    other_write: bool = False
    other_execute: bool = False
    sticky: bool = False
    setgid: bool = False
    setuid: bool = False

    @classmethod
    def from_mode(cls, mode: int) -> "Permissions":
        """Build permissions from a ``st_mode`` value."""

        def has(bit: int) -> bool:
            return mode & bit == bit

        return cls(
            user_read=has(stat.S_IRUSR),
            user_write=has(stat.S_IWUSR),
            user_execute=has(stat.S_IXUSR),
            group_read=has(stat.S_IRGRP),
            group_write=has(stat.S_IWGRP),
            group_execute=has(stat.S_IXGRP),
            other_read=has(stat.S_IROTH),
            other_write=has(stat.S_IWOTH),
            other_execute=has(stat.S_IXOTH),
            sticky=has(stat.S_ISVTX),
            setgid=has(stat.S_ISGID),
            setuid=has(stat.S_ISUID),
        )

    @classmethod
    def from_path(cls, path: "os.PathLike[str] | str") -> "Permissions":
        """Read the permissions of the file at ``path``."""
        return cls.from_mode(os.stat(path).st_mode)

    def render(
        self,
        flag: PermissionFlag = PermissionFlag.RWX,
        colorize: Optional[Colorizer] = None,
    ) -> str:
        """Render as ``rwxr-xr-x`` or as four octal digits."""
        paint = partial(_apply, colorize)

        if flag is PermissionFlag.OCTAL:
            digits = "".join(
                str(d)
                for d in (
                    _octal_digit(self.setuid, self.setgid, self.sticky),
                    _octal_digit(self.user_read, self.user_write, self.user_execute),
                    _octal_digit(self.group_read, self.group_write, self.group_execute),
                    _octal_digit(self.other_read, self.other_write, self.other_execute),
                )
            )
            return paint(digits, "octal")

        def bit(is_set: bool, char: str, elem: str) -> str:
            return paint(char, elem) if is_set else paint("-", "no_access")

        def special(execute: bool, special_bit: bool, upper: str, lower: str) -> str:
            if special_bit:
                return paint(lower if execute else upper, "exec_sticky")
            return paint("x", "exec") if execute else paint("-", "no_access")

        return "".join(
            (
                bit(self.user_read, "r", "read"),
                bit(self.user_write, "w", "write"),
                special(self.user_execute, self.setuid, "S", "s"),
                bit(self.group_read, "r", "read"),
                bit(self.group_write, "w", "write"),
                special(self.group_execute, self.setgid, "S", "s"),
                bit(self.other_read, "r", "read"),
                bit(self.other_write, "w", "write"),
                special(self.other_execute, self.sticky, "T", "t"),
            )
        )

    def is_executable(self) -> bool:
        """True if anyone may execute the file."""
        return self.user_execute or self.group_execute or self.other_execute