"""ACL and security-context markers read from extended attributes."""

from __future__ import annotations

import enum
import os
from dataclasses import dataclass
from typing import Callable, Optional

Colorizer = Callable[[str, str], str]


def _apply(colorize: Optional[Colorizer], text: str, elem: str) -> str:
    return colorize(text, elem) if colorize is not None else text


class _Method(enum.Enum):
    ACL = "system.posix_acl_access"
    SELINUX = "security.selinux"
    SMACK = "security.SMACK64"


def _read_xattr(path: "os.PathLike[str] | str", method: _Method) -> bytes:
    getxattr = getattr(os, "getxattr", None)
    if getxattr is None:
        return b""
    try:
        return getxattr(path, method.value)
    except OSError:
        return b""


@dataclass(frozen=True)
class AccessControl:
    """Whether a file has an ACL, and its SELinux and SMACK contexts."""

    has_acl: bool = False
    selinux_context: str = ""
    smack_context: str = ""

    @classmethod
    def for_path(cls, path: "os.PathLike[str] | str") -> "AccessControl":
        """Read the access-control attributes of ``path``; missing ones are empty."""
        return cls.from_data(
            bool(_read_xattr(path, _Method.ACL)),
            _read_xattr(path, _Method.SELINUX),
            _read_xattr(path, _Method.SMACK),
        )

    @classmethod
    def from_data(
        cls, has_acl: bool, selinux_context: bytes, smack_context: bytes
    ) -> "AccessControl":
        """Build from raw attribute values."""
        return cls(
            has_acl,
            bytes(selinux_context).decode("utf-8", errors="replace"),
            bytes(smack_context).decode("utf-8", errors="replace"),
        )

    def render_method(self, colorize: Optional[Colorizer] = None) -> str:
        """``+`` for an ACL, ``.`` for a security context, otherwise nothing."""
        if self.has_acl:
            return _apply(colorize, "+", "acl")
        if self.selinux_context or self.smack_context:
            return _apply(colorize, ".", "context")
        return _apply(colorize, "", "acl")

    def render_context(self, colorize: Optional[Colorizer] = None) -> str:
        """The contexts joined by ``+``, or ``?`` when there are none."""
        context = "+".join(c for c in (self.selinux_context, self.smack_context) if c)
        return _apply(colorize, context or "?", "context")