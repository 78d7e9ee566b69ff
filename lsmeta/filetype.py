"""The kind of a file system entry and its one-letter rendering."""

from __future__ import annotations

import enum
import os
import stat
from dataclasses import dataclass
from typing import Callable, Optional

from lsmeta.permissions import Permissions

Colorizer = Callable[[str, str], str]


def _apply(colorize: Optional[Colorizer], text: str, elem: str) -> str:
    return colorize(text, elem) if colorize is not None else text


class FileKind(enum.Enum):
    """Kinds of file system entries."""

    BLOCK_DEVICE = "block_device"
    CHAR_DEVICE = "char_device"
    DIRECTORY = "directory"
    FILE = "file"
    SYMLINK = "symlink"
    PIPE = "pipe"
    SOCKET = "socket"
    SPECIAL = "special"


_LETTERS = {
    FileKind.DIRECTORY: ("d", "dir"),
    FileKind.PIPE: ("|", "pipe"),
    FileKind.SYMLINK: ("l", "symlink"),
    FileKind.BLOCK_DEVICE: ("b", "block_device"),
    FileKind.CHAR_DEVICE: ("c", "char_device"),
    FileKind.SOCKET: ("s", "socket"),
    FileKind.SPECIAL: ("?", "special"),
}


@dataclass(frozen=True)
class FileType:
    """A file kind together with the flags that matter for display.

    ``uid`` applies to files and directories, ``exec`` to files and
    ``is_dir`` to symbolic links (whether the target is a directory).
    """

    kind: FileKind
    uid: bool = False
    exec: bool = False
    is_dir: bool = False

    @classmethod
    def from_stat(
        cls,
        st: os.stat_result,
        target_st: Optional[os.stat_result] = None,
        permissions: Optional[Permissions] = None,
    ) -> "FileType":
        """Classify an entry from its ``lstat`` result.

        ``target_st`` is the stat of a symlink's target, or None if the link
        is broken or the entry is not a link.
        """
        perms = permissions if permissions is not None else Permissions.from_mode(st.st_mode)
        mode = st.st_mode
        if stat.S_ISREG(mode):
            return cls(FileKind.FILE, uid=perms.setuid, exec=perms.is_executable())
        if stat.S_ISDIR(mode):
            return cls(FileKind.DIRECTORY, uid=perms.setuid)
        if stat.S_ISFIFO(mode):
            return cls(FileKind.PIPE)
        if stat.S_ISLNK(mode):
            target_is_dir = target_st is not None and stat.S_ISDIR(target_st.st_mode)
            return cls(FileKind.SYMLINK, is_dir=target_is_dir)
        if stat.S_ISCHR(mode):
            return cls(FileKind.CHAR_DEVICE)
        if stat.S_ISBLK(mode):
            return cls(FileKind.BLOCK_DEVICE)
        if stat.S_ISSOCK(mode):
            return cls(FileKind.SOCKET)
        return cls(FileKind.SPECIAL)

    def is_dirlike(self) -> bool:
        """True for directories and for links pointing at directories."""
        return self.kind is FileKind.DIRECTORY or (
            self.kind is FileKind.SYMLINK and self.is_dir
        )

    def render(self, colorize: Optional[Colorizer] = None) -> str:
        """The one-letter type column."""
        if self.kind is FileKind.FILE:
            return _apply(colorize, ".", "file_exec" if self.exec else "file")
        letter, elem = _LETTERS[self.kind]
        return _apply(colorize, letter, elem)