"""Headers that carry an HTTP date, and the date type itself."""

from __future__ import annotations

import re
from collections.abc import Iterable
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import ClassVar

from .core import Header, HeaderError, just_one
from .durations import parse_seconds

__all__ = [
    "HttpDate",
    "Date",
    "Expires",
    "LastModified",
    "IfModifiedSince",
    "IfUnmodifiedSince",
    "RetryAfter",
]

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)
_ONE_SECOND = timedelta(seconds=1)
_MAX_TIMESTAMP = int((datetime(9999, 12, 31, 23, 59, 59, tzinfo=timezone.utc) - _EPOCH) // _ONE_SECOND)

_WEEKDAYS = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")
_LONG_WEEKDAYS = ("Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday")
_MONTHS = ("Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")

_WD = "|".join(_WEEKDAYS)
_LWD = "|".join(_LONG_WEEKDAYS)
_MON = "|".join(_MONTHS)
_TIME = r"([0-9]{2}):([0-9]{2}):([0-9]{2})"

_IMF_FIXDATE = re.compile(rf"({_WD}), ([0-9]{{2}}) ({_MON}) ([0-9]{{4}}) {_TIME} GMT")
_RFC850 = re.compile(rf"({_LWD}), ([0-9]{{2}})-({_MON})-([0-9]{{2}}) {_TIME} GMT")
_ASCTIME = re.compile(rf"({_WD}) ({_MON}) ( [0-9]|[0-9]{{2}}) {_TIME} ([0-9]{{4}})")


def _timestamp(weekday: int, day: int, month: int, year: int, hour: int, minute: int, second: int) -> int:
    if not 1970 <= year <= 9999 or hour >= 24 or minute >= 60 or second >= 60:
        raise HeaderError()
    try:
        when = datetime(year, month, day, hour, minute, second, tzinfo=timezone.utc)
    except ValueError:
        raise HeaderError() from None
    if when.weekday() != weekday:
        raise HeaderError()
    return int((when - _EPOCH) // _ONE_SECOND)


@dataclass(frozen=True, order=True)
class HttpDate:
    """A point in time with one-second precision, as used by HTTP."""

    timestamp: int

    def __post_init__(self) -> None:
        if not 0 <= self.timestamp <= _MAX_TIMESTAMP:
            raise ValueError("date out of range for an HTTP date")

    @classmethod
    def parse(cls, text: str) -> HttpDate:
        """Parse an IMF-fixdate, RFC 850 or asctime date, raising HeaderError if invalid."""
        if match := _IMF_FIXDATE.fullmatch(text):
            wd, day, mon, year, hour, minute, sec = match.groups()
            year_num = int(year)
            weekday = _WEEKDAYS.index(wd)
        elif match := _RFC850.fullmatch(text):
            wd, day, mon, year, hour, minute, sec = match.groups()
            short_year = int(year)
            year_num = 2000 + short_year if short_year < 70 else 1900 + short_year
            weekday = _LONG_WEEKDAYS.index(wd)
        elif match := _ASCTIME.fullmatch(text):
            wd, mon, day, hour, minute, sec, year = match.groups()
            year_num = int(year)
            weekday = _WEEKDAYS.index(wd)
        else:
            raise HeaderError()
        return cls(
            _timestamp(
                weekday,
                int(day.strip()),
                _MONTHS.index(mon) + 1,
                year_num,
                int(hour),
                int(minute),
                int(sec),
            )
        )

    @classmethod
    def from_datetime(cls, when: datetime) -> HttpDate:
        """Build a date from a datetime, dropping sub-second precision.

        A naive datetime is taken to be in UTC.
        """
        if when.tzinfo is None:
            when = when.replace(tzinfo=timezone.utc)
        return cls(int((when - _EPOCH) // _ONE_SECOND))

    def to_datetime(self) -> datetime:
        """Return the date as an aware UTC datetime."""
        return _EPOCH + timedelta(seconds=self.timestamp)

    def __str__(self) -> str:
        when = self.to_datetime()
        return (
            f"{_WEEKDAYS[when.weekday()]}, {when.day:02d} {_MONTHS[when.month - 1]} "
            f"{when.year:04d} {when.hour:02d}:{when.minute:02d}:{when.second:02d} GMT"
        )


def _decode_date(values: Iterable[str]) -> HttpDate:
    value = just_one(values)
    if value is None:
        raise HeaderError()
    return HttpDate.parse(value)


@dataclass(frozen=True, order=True)
class _DateHeader(Header):
    """A header holding a single HTTP date; accepts an HttpDate or a datetime."""

    date: HttpDate

    def __post_init__(self) -> None:
        if isinstance(self.date, datetime):
            object.__setattr__(self, "date", HttpDate.from_datetime(self.date))
        elif not isinstance(self.date, HttpDate):
            raise TypeError("expected an HttpDate or a datetime")


class Date(_DateHeader):
    """The ``Date`` header: when the message was originated."""

    header_name: ClassVar[str] = "date"

    @classmethod
    def decode(cls, values: Iterable[str]) -> Date:
        return cls(_decode_date(values))

    def encode(self) -> list[str]:
        return [str(self.date)]


class Expires(_DateHeader):
    """The ``Expires`` header: when the response becomes stale."""

    header_name: ClassVar[str] = "expires"

    @classmethod
    def decode(cls, values: Iterable[str]) -> Expires:
        return cls(_decode_date(values))

    def encode(self) -> list[str]:
        return [str(self.date)]


class LastModified(_DateHeader):
    """The ``Last-Modified`` header."""

    header_name: ClassVar[str] = "last-modified"

    @classmethod
    def decode(cls, values: Iterable[str]) -> LastModified:
        return cls(_decode_date(values))

    def encode(self) -> list[str]:
        return [str(self.date)]


class IfModifiedSince(_DateHeader):
    """The ``If-Modified-Since`` header."""

    header_name: ClassVar[str] = "if-modified-since"

    def is_modified(self, last_modified: datetime) -> bool:
        """Return True if ``last_modified`` is later than this header's date."""
        return self.date < HttpDate.from_datetime(last_modified)

    @classmethod
    def decode(cls, values: Iterable[str]) -> IfModifiedSince:
        return cls(_decode_date(values))

    def encode(self) -> list[str]:
        return [str(self.date)]


class IfUnmodifiedSince(_DateHeader):
    """The ``If-Unmodified-Since`` header."""

    header_name: ClassVar[str] = "if-unmodified-since"

    def precondition_passes(self, last_modified: datetime) -> bool:
        """Return True if ``last_modified`` is not later than this header's date."""
        return self.date >= HttpDate.from_datetime(last_modified)

    @classmethod
    def decode(cls, values: Iterable[str]) -> IfUnmodifiedSince:
        return cls(_decode_date(values))

    def encode(self) -> list[str]:
        return [str(self.date)]


@dataclass(frozen=True)
class RetryAfter(Header):
    """The ``Retry-After`` header: either a date or a delay in whole seconds."""

    header_name: ClassVar[str] = "retry-after"
    after: HttpDate | int

    @classmethod
    def date(cls, when: datetime) -> RetryAfter:
        """Retry after the given point in time."""
        return cls(HttpDate.from_datetime(when))

    @classmethod
    def delay(cls, delta: timedelta) -> RetryAfter:
        """Retry after the given duration, in whole seconds."""
        if delta < timedelta(0):
            raise ValueError("delay must not be negative")
        return cls(delta // _ONE_SECOND)

    @classmethod
    def decode(cls, values: Iterable[str]) -> RetryAfter:
        value = next(iter(values), None)
        if value is None:
            raise HeaderError()
        try:
            return cls(parse_seconds(value))
        except HeaderError:
            return cls(HttpDate.parse(value))

    def encode(self) -> list[str]:
        return [str(self.after)]