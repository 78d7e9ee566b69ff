"""File names: escaping, relative paths, hyperlinks and coloured rendering."""

from __future__ import annotations

import functools
import os
import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, Optional

from lsmeta.filetype import FileKind, FileType

Colorizer = Callable[[str, str], str]

_ESCAPES = {"\t": "\\t", "\r": "\\r", "\n": "\\n"}


def _plain(text: str, elem: str) -> str:
    return text


def _is_printable(char: str) -> bool:
    return char >= "\x20" and char != "\x7f"


def _escape_char(char: str) -> str:
    if _is_printable(char):
        return char
    return _ESCAPES.get(char, f"\\u{{{ord(char):x}}}")


def _final_name(path: Path) -> Optional[str]:
    """The last normal component of ``path``, or None if there is none."""
    name = path.name
    if not name or name == "..":
        return None
    return name


@dataclass(frozen=True)
class DisplayOption:
    """What part of a path is shown as its name.

    By default only the file name is shown. With ``base_path`` the path is
    shown relative to it; with ``full_path`` the path is shown as given.
    """

    base_path: Optional[Path] = None
    full_path: bool = False

    def __post_init__(self) -> None:
        if self.base_path is not None and self.full_path:
            raise ValueError("a display option is either relative or full, not both")
        if self.base_path is not None:
            object.__setattr__(self, "base_path", Path(self.base_path))


@functools.total_ordering
@dataclass(eq=False)
class Name:
    """The displayed name of a file, compared case-insensitively."""

    path: Path
    file_type: FileType
    name: str = field(init=False)
    _extension: Optional[str] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self.path = Path(self.path)
        final = _final_name(self.path)
        self.name = final if final is not None else str(self.path)
        self._extension = None
        if final is not None:
            dot = final.rfind(".")
            if dot > 0:
                self._extension = final[dot + 1 :]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Name):
            return NotImplemented
        return self.name.lower() == other.name.lower()

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Name):
            return NotImplemented
        return self.name.lower() < other.name.lower()

    def __hash__(self) -> int:
        return hash(self.name.lower())

    def file_name(self) -> str:
        """The last component of the path, or the whole name if there is none."""
        final = _final_name(self.path)
        return final if final is not None else self.name

    def extension(self) -> Optional[str]:
        """The text after the last dot, or None (also for dot files)."""
        return self._extension

    def relative_path(self, base_path: "os.PathLike[str] | str") -> Path:
        """This path expressed relative to ``base_path``."""
        base = Path(base_path)
        if self.path == base:
            return Path(".")
        shared = 0
        for own, other in zip(self.path.parts, base.parts):
            if own != other:
                break
            shared += 1
        ups = [".."] * (len(base.parts) - shared)
        return Path(*ups, *self.path.parts[shared:])

    def escape(self, text: str, should_quote: bool = False) -> str:
        """Quote for the shell if asked, and escape control characters."""
        if should_quote:
            if "\\" in text or '"' in text:
                text = "'" + text.replace("'", "'\\''") + "'"
            elif "'" in text:
                text = f'"{text}"'
            elif " " in text or "$" in text:
                text = f"'{text}'"
        if all(_is_printable(c) for c in text):
            return text
        return "".join(_escape_char(c) for c in text)

    def hyperlink(self, text: str, enabled: bool = False) -> str:
        """Wrap ``text`` in a terminal hyperlink to the file when enabled."""
        if not enabled:
            return text
        try:
            real = self.path.resolve(strict=True)
        except FileNotFoundError:
            # A broken link; its colour already tells the user.
            return text
        except (OSError, RuntimeError) as err:
            print(f"lsmeta: {text}: {err}", file=sys.stderr)
            return text
        try:
            url = real.as_uri()
        except ValueError:
            print(f"lsmeta: {text}: unable to form url.", file=sys.stderr)
            return text
        return f"\x1b]8;;{url}\x1b\\{text}\x1b]8;;\x1b\\"

    def _elem(self) -> str:
        file_type = self.file_type
        if file_type.kind is FileKind.CHAR_DEVICE:
            return "char_device"
        if file_type.kind is FileKind.DIRECTORY:
            return "dir_uid" if file_type.uid else "dir"
        if file_type.kind is FileKind.SYMLINK:
            return "symlink"
        if file_type.kind is FileKind.FILE:
            return (
                "file"
                + ("_exec" if file_type.exec else "")
                + ("_uid" if file_type.uid else "")
            )
        return "file"

    def render(
        self,
        display_option: Optional[DisplayOption] = None,
        hyperlink: bool = False,
        quote: bool = False,
        icon: str = "",
        colorize: Optional[Colorizer] = None,
    ) -> str:
        """The icon and the escaped, possibly linked name, coloured by type."""
        option = display_option or DisplayOption()
        if option.base_path is not None:
            shown = str(self.relative_path(option.base_path))
        elif option.full_path:
            shown = str(self.path)
        else:
            shown = self.file_name()
        content = icon + self.hyperlink(self.escape(shown, quote), hyperlink)
        return (colorize or _plain)(content, self._elem())