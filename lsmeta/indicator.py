"""Trailing type indicators such as ``/`` for directories."""

from __future__ import annotations

from dataclasses import dataclass

from lsmeta.filetype import FileKind, FileType

_SYMBOLS = {
    FileKind.DIRECTORY: "/",
    FileKind.PIPE: "|",
    FileKind.SOCKET: "=",
    FileKind.SYMLINK: "@",
}


@dataclass(frozen=True)
class Indicator:
    """The symbol appended to a name to show its type."""

    symbol: str = ""

    @classmethod
    def from_file_type(cls, file_type: FileType) -> "Indicator":
        """The indicator for ``file_type``."""
        if file_type.kind is FileKind.FILE:
            return cls("*" if file_type.exec else "")
        return cls(_SYMBOLS.get(file_type.kind, ""))

    def render(self, display_indicators: bool = False) -> str:
        """The symbol, or nothing when indicators are off."""
        return self.symbol if display_indicators else ""