"""Symbolic link targets and their ``⇒ target`` rendering."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Optional

Colorizer = Callable[[str, str], str]

DEFAULT_ARROW = "\u21d2"


def _apply(colorize: Optional[Colorizer], text: str, elem: str) -> str:
    return colorize(text, elem) if colorize is not None else text


@dataclass(frozen=True)
class SymLink:
    """The target of a link and whether that target exists."""

    target: Optional[str] = None
    valid: bool = False

    @classmethod
    def from_path(cls, path: "os.PathLike[str] | str") -> "SymLink":
        """Read the link at ``path``; a non-link gives an empty SymLink."""
        try:
            target = os.readlink(path)
        except (OSError, ValueError):
            return cls()
        target_path = Path(target)
        if not target_path.is_absolute():
            target_path = Path(path).parent / target_path
        return cls(target=os.fspath(target), valid=target_path.exists())

    def symlink_string(self) -> Optional[str]:
        """The target as text, or None for a non-link."""
        return self.target

    def render(
        self, arrow: str = DEFAULT_ARROW, colorize: Optional[Colorizer] = None
    ) -> str:
        """`` ⇒ target`` coloured by validity, or nothing for a non-link."""
        if self.target is None:
            return ""
        elem = "symlink" if self.valid else "missing_symlink_target"
        return f" {arrow} " + _apply(colorize, self.target, elem)