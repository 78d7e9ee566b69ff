"""Modification dates and their rendering in several formats."""

from __future__ import annotations

import enum
import functools
import locale as pylocale
import os
import re
from contextlib import contextmanager
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Callable, Iterator, Optional, Union

import humanize

Colorizer = Callable[[str, str], str]

DEFAULT_LOCALE = "en_US"

_LOCALE_PATTERN = re.compile(r"^[a-z]{2,3}(_[A-Z][A-Za-z0-9]+)?$")
_LOCALE_VARIABLES = ("LC_ALL", "LC_MESSAGES", "LANG")

_DAYS = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")
_MONTHS = (
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
)

# Half of an average Gregorian year.
_ISO_RECENT = timedelta(seconds=15_778_476)
_NOW_WINDOW = timedelta(seconds=10)
_MIN_DATETIME = datetime.min.replace(tzinfo=timezone.utc)


def _apply(colorize: Optional[Colorizer], text: str, elem: str) -> str:
    return colorize(text, elem) if colorize is not None else text


def _locale_str() -> str:
    for variable in _LOCALE_VARIABLES:
        value = os.environ.get(variable)
        if value:
            return value.split(".", 1)[0].split("@", 1)[0].replace("-", "_")
    return ""


@functools.lru_cache(maxsize=None)
def current_locale() -> str:
    """The user's locale as ``ll_CC``, falling back to ``en_US``."""
    name = _locale_str()
    return name if _LOCALE_PATTERN.match(name) else DEFAULT_LOCALE


class DateFlag(enum.Enum):
    """How dates are displayed."""

    DATE = "date"
    LOCALE = "locale"
    RELATIVE = "relative"
    ISO = "iso"
    FORMATTED = "formatted"


@dataclass(frozen=True)
class DateFormat:
    """A date display mode, with the format string for ``FORMATTED``."""

    flag: DateFlag = DateFlag.DATE
    fmt: str = ""

    def __post_init__(self) -> None:
        if self.flag is DateFlag.FORMATTED and not self.fmt:
            raise ValueError("a formatted date needs a format string")


def _classic_c(value: datetime) -> str:
    return (
        f"{_DAYS[value.weekday()]} {_MONTHS[value.month - 1]} "
        f"{value.day:2d} {value:%H:%M:%S} {value.year}"
    )


@contextmanager
def _time_locale(name: str) -> Iterator[bool]:
    try:
        previous = pylocale.setlocale(pylocale.LC_TIME)
    except pylocale.Error:
        previous = None
    applied = False
    if previous is not None:
        for candidate in (f"{name}.UTF-8", f"{name}.utf8", name):
            try:
                pylocale.setlocale(pylocale.LC_TIME, candidate)
            except pylocale.Error:
                continue
            applied = True
            break
    try:
        yield applied
    finally:
        if applied:
            pylocale.setlocale(pylocale.LC_TIME, previous)


def _format_localized(value: datetime, fmt: str, name: str) -> str:
    with _time_locale(name) as applied:
        if not applied and fmt == "%c":
            return _classic_c(value)
        return value.strftime(fmt)


def _relative(value: datetime, now: datetime) -> str:
    delta = now - value
    if abs(delta) < _NOW_WINDOW:
        return "now"
    return humanize.naturaltime(delta)


@functools.total_ordering
@dataclass(frozen=True)
class Date:
    """A modification time, or an invalid one when it cannot be represented."""

    value: Optional[datetime] = None

    @classmethod
    def from_timestamp(cls, timestamp: float) -> "Date":
        """A local date from seconds since the epoch; invalid if out of range."""
        try:
            value = datetime.fromtimestamp(timestamp, tz=timezone.utc).astimezone()
        except (OverflowError, OSError, ValueError):
            return cls(None)
        return cls(value)

    @classmethod
    def from_stat(cls, st: os.stat_result) -> "Date":
        """The modification date of a stat result."""
        return cls.from_timestamp(st.st_mtime_ns / 1_000_000_000)

    def _key(self) -> tuple:
        return (self.value is None, self.value or _MIN_DATETIME)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Date):
            return NotImplemented
        return self._key() < other._key()

    def age_elem(self, now: Optional[datetime] = None) -> str:
        """``hour_old``, ``day_old`` or ``older`` relative to ``now``."""
        if self.value is None:
            return "older"
        current = now or datetime.now(timezone.utc).astimezone()
        if self.value > current - timedelta(hours=1):
            return "hour_old"
        if self.value > current - timedelta(days=1):
            return "day_old"
        return "older"

    def date_string(self, flag: Union[DateFlag, DateFormat] = DateFlag.DATE) -> str:
        """The date as text in the requested format, or ``-`` if invalid."""
        fmt = flag if isinstance(flag, DateFormat) else DateFormat(flag)
        value = self.value
        if value is None:
            return "-"
        now = datetime.now(timezone.utc).astimezone()
        if fmt.flag is DateFlag.DATE:
            return _classic_c(value)
        if fmt.flag is DateFlag.LOCALE:
            return _format_localized(value, "%c", current_locale())
        if fmt.flag is DateFlag.RELATIVE:
            return _relative(value, now)
        if fmt.flag is DateFlag.ISO:
            if value > now - _ISO_RECENT:
                return f"{value:%m-%d %H:%M}"
            return f"{value.year:04d}-{value:%m-%d}"
        return _format_localized(value, fmt.fmt, current_locale())

    def render(
        self,
        flag: Union[DateFlag, DateFormat] = DateFlag.DATE,
        colorize: Optional[Colorizer] = None,
    ) -> str:
        """The date text coloured by its age."""
        return _apply(colorize, self.date_string(flag), self.age_elem())