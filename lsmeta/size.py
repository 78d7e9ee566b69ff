"""File sizes and their human-readable rendering."""

from __future__ import annotations

import enum
import math
from dataclasses import dataclass
from typing import Callable, Optional

Colorizer = Callable[[str, str], str]

KB = 1024
MB = 1024**2
GB = 1024**3
TB = 1024**4


def _apply(colorize: Optional[Colorizer], text: str, elem: str) -> str:
    return colorize(text, elem) if colorize is not None else text


class SizeFlag(enum.Enum):
    """How sizes are displayed."""

    DEFAULT = "default"
    SHORT = "short"
    BYTES = "bytes"


class Unit(enum.Enum):
    """Unit a size is expressed in."""

    BYTE = 1
    KILO = KB
    MEGA = MB
    GIGA = GB
    TERA = TB


_LONG_UNITS = {
    Unit.BYTE: "B",
    Unit.KILO: "KB",
    Unit.MEGA: "MB",
    Unit.GIGA: "GB",
    Unit.TERA: "TB",
}

_SHORT_UNITS = {
    Unit.BYTE: "B",
    Unit.KILO: "K",
    Unit.MEGA: "M",
    Unit.GIGA: "G",
    Unit.TERA: "T",
}


def _format_number(number: float) -> str:
    return f"{number:.1f}" if number < 10.0 else f"{number:.0f}"


@dataclass(frozen=True)
class Size:
    """A size in bytes."""

    bytes: int

    def unit(self, flag: SizeFlag = SizeFlag.DEFAULT) -> Unit:
        """The unit this size is shown in under ``flag``."""
        if flag is SizeFlag.BYTES or self.bytes < KB:
            return Unit.BYTE
        if self.bytes < MB:
            return Unit.KILO
        if self.bytes < GB:
            return Unit.MEGA
        if self.bytes < TB:
            return Unit.GIGA
        return Unit.TERA

    def value_string(self, flag: SizeFlag = SizeFlag.DEFAULT) -> str:
        """The numeric part, rounded to one decimal place."""
        unit = self.unit(flag)
        if unit is Unit.BYTE:
            return str(self.bytes)
        rounded = math.floor(self.bytes / unit.value * 10.0 + 0.5) / 10.0
        return _format_number(rounded)

    def unit_string(self, flag: SizeFlag = SizeFlag.DEFAULT) -> str:
        """The unit suffix."""
        if flag is SizeFlag.BYTES:
            return ""
        table = _SHORT_UNITS if flag is SizeFlag.SHORT else _LONG_UNITS
        return table[self.unit(flag)]

    def _paint(self, text: str, colorize: Optional[Colorizer]) -> str:
        if self.bytes >= GB:
            elem = "file_large"
        elif self.bytes >= MB:
            elem = "file_medium"
        else:
            elem = "file_small"
        return _apply(colorize, text, elem)

    def render_value(
        self, flag: SizeFlag = SizeFlag.DEFAULT, colorize: Optional[Colorizer] = None
    ) -> str:
        """The coloured numeric part."""
        return self._paint(self.value_string(flag), colorize)

    def render_unit(
        self, flag: SizeFlag = SizeFlag.DEFAULT, colorize: Optional[Colorizer] = None
    ) -> str:
        """The coloured unit suffix."""
        return self._paint(self.unit_string(flag), colorize)

    def render(
        self,
        flag: SizeFlag = SizeFlag.DEFAULT,
        val_alignment: Optional[int] = None,
        colorize: Optional[Colorizer] = None,
    ) -> str:
        """Value and unit, with the value right-aligned to ``val_alignment``."""
        value = self.value_string(flag)
        pad = ""
        if val_alignment is not None:
            if val_alignment < len(value):
                raise ValueError(
                    f"alignment {val_alignment} is narrower than value {value!r}"
                )
            pad = " " * (val_alignment - len(value))
        separator = "" if flag is SizeFlag.SHORT else " "
        return (
            pad
            + self._paint(value, colorize)
            + separator
            + self.render_unit(flag, colorize)
        )