"""Calendar dates backed by Unix timestamps."""

from __future__ import annotations

import calendar
import functools
import time

__all__ = [
    "Date",
    "now",
    "fulltime",
    "day",
    "year",
    "hour",
    "month",
    "minute",
    "second",
]


@functools.total_ordering
class Date:
    """A date and time held as calendar fields, local or UTC.

    With no year the current time is taken. Fields left out when a year is
    given are zero (the month defaults to January); out-of-range values are
    normalised, so a day of 0 means the last day of the previous month.
    """

    def __init__(
        self,
        year: int | bool | None = None,
        month: int | None = None,
        day: int | None = None,
        hour: int | None = None,
        minute: int | None = None,
        second: int | None = None,
        utc: bool = False,
    ) -> None:
        if isinstance(year, bool):
            utc, year = year, None
        self._utc = bool(utc)
        if year is None:
            if any(v is not None for v in (month, day, hour, minute, second)):
                raise ValueError("a year is required when other fields are given")
            self.set_stamp(int(time.time()), self._utc)
            return
        self._year = year
        self._month = 1 if month is None else month
        self._day = day or 0
        self._hour = hour or 0
        self._minute = minute or 0
        self._second = second or 0

    @classmethod
    def _from_stamp(cls, stamp: int, utc: bool = False) -> Date:
        out = cls(utc=utc)
        out.set_stamp(stamp, utc)
        return out

    def set_stamp(self, stamp: int, utc: bool = False) -> None:
        """Set every field from a Unix timestamp."""
        tm = time.gmtime(stamp) if utc else time.localtime(stamp)
        self._utc = bool(utc)
        self._year = tm.tm_year
        self._month = tm.tm_mon
        self._day = tm.tm_mday
        self._hour = tm.tm_hour
        self._minute = tm.tm_min
        self._second = tm.tm_sec

    @property
    def stamp(self) -> int:
        """The Unix timestamp of the held fields."""
        year = self._year + (self._month - 1) // 12
        month = (self._month - 1) % 12 + 1
        parts = (year, month, self._day, self._hour, self._minute, self._second, 0, 0, -1)
        if self._utc:
            return calendar.timegm(parts)
        return int(time.mktime(parts))

    @property
    def utc(self) -> bool:
        """True when the fields are read as UTC."""
        return self._utc

    def _struct(self) -> time.struct_time:
        stamp = self.stamp
        return time.gmtime(stamp) if self._utc else time.localtime(stamp)

    @property
    def year(self) -> int:
        return self._struct().tm_year

    @year.setter
    def year(self, value: int) -> None:
        self._year = value

    @property
    def month(self) -> int:
        return self._struct().tm_mon

    @month.setter
    def month(self, value: int) -> None:
        self._month = value

    @property
    def day(self) -> int:
        return self._struct().tm_mday

    @day.setter
    def day(self, value: int) -> None:
        self._day = value

    @property
    def hour(self) -> int:
        return self._struct().tm_hour

    @hour.setter
    def hour(self, value: int) -> None:
        self._hour = value

    @property
    def minute(self) -> int:
        return self._struct().tm_min

    @minute.setter
    def minute(self, value: int) -> None:
        self._minute = value

    @property
    def second(self) -> int:
        return self._struct().tm_sec

    @second.setter
    def second(self, value: int) -> None:
        self._second = value

    def fulltime(self) -> str:
        """The local time in ctime format, ending with a newline."""
        return time.ctime(self.stamp) + "\n"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Date):
            return NotImplemented
        return self.stamp == other.stamp

    def __lt__(self, other: Date) -> bool:
        if not isinstance(other, Date):
            return NotImplemented
        return self.stamp < other.stamp

    __hash__ = None  # type: ignore[assignment]

    def __add__(self, other: Date) -> Date:
        return Date._from_stamp(self.stamp + other.stamp)

    def __sub__(self, other: Date) -> Date:
        return Date._from_stamp(self.stamp - other.stamp)

    def __mul__(self, other: Date) -> Date:
        return Date._from_stamp(self.stamp * other.stamp)

    def __floordiv__(self, other: Date) -> Date:
        return Date._from_stamp(self.stamp // other.stamp)

    __truediv__ = __floordiv__

    def __iadd__(self, other: Date) -> Date:
        self.set_stamp(self.stamp + other.stamp, self._utc)
        return self

    def __isub__(self, other: Date) -> Date:
        self.set_stamp(self.stamp - other.stamp, self._utc)
        return self

    def __imul__(self, other: Date) -> Date:
        self.set_stamp(self.stamp * other.stamp, self._utc)
        return self

    def __ifloordiv__(self, other: Date) -> Date:
        self.set_stamp(self.stamp // other.stamp, self._utc)
        return self

    __itruediv__ = __ifloordiv__

    def __repr__(self) -> str:
        return (
            f"Date({self.year}, {self.month}, {self.day}, {self.hour}, "
            f"{self.minute}, {self.second}, utc={self._utc})"
        )


def now() -> int:
    """The current Unix timestamp."""
    return Date().stamp


def fulltime() -> str:
    """The current local time in ctime format."""
    return Date().fulltime()


def day(utc: bool = False) -> int:
    return Date(utc=utc).day


def year(utc: bool = False) -> int:
    return Date(utc=utc).year


def hour(utc: bool = False) -> int:
    return Date(utc=utc).hour


def month(utc: bool = False) -> int:
    return Date(utc=utc).month


def minute(utc: bool = False) -> int:
    return Date(utc=utc).minute


def second(utc: bool = False) -> int:
    return Date(utc=utc).second