"""Headers that carry a number of whole seconds."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from datetime import timedelta
from typing import ClassVar

from .core import Header, HeaderError, just_one

__all__ = ["parse_seconds", "Age", "AccessControlMaxAge"]

_MAX_SECONDS = 2**64 - 1
_ONE_SECOND = timedelta(seconds=1)


def parse_seconds(text: str) -> int:
    """Parse a delta-seconds value, raising HeaderError if it is not one."""
    digits = text[1:] if text.startswith("+") else text
    if not digits or not (digits.isascii() and digits.isdigit()):
        raise HeaderError()
    seconds = int(digits)
    if seconds > _MAX_SECONDS:
        raise HeaderError()
    return seconds


def _seconds_from_timedelta(delta: timedelta) -> int:
    if delta < timedelta(0):
        raise ValueError("duration must not be negative")
    return delta // _ONE_SECOND


def _decode_seconds(values: Iterable[str]) -> int:
    value = just_one(values)
    if value is None:
        raise HeaderError()
    return parse_seconds(value)


@dataclass(frozen=True, order=True)
class _SecondsHeader(Header):
    seconds: int

    def __post_init__(self) -> None:
        if not 0 <= self.seconds <= _MAX_SECONDS:
            raise ValueError("seconds out of range")


class Age(_SecondsHeader):
    """The ``Age`` header: seconds since the response was generated."""

    header_name: ClassVar[str] = "age"

    @classmethod
    def from_secs(cls, secs: int) -> Age:
        """Build an ``Age`` from whole seconds."""
        return cls(secs)

    def as_secs(self) -> int:
        """Return the number of seconds."""
        return self.seconds

    @classmethod
    def from_timedelta(cls, delta: timedelta) -> Age:
        """Build the header from a duration, dropping any fraction of a second."""
        return cls(_seconds_from_timedelta(delta))

    def as_timedelta(self) -> timedelta:
        """Return the value as a duration."""
        return timedelta(seconds=self.seconds)

    @classmethod
    def decode(cls, values: Iterable[str]) -> Age:
        return cls(_decode_seconds(values))

    def encode(self) -> list[str]:
        return [str(self.seconds)]


class AccessControlMaxAge(_SecondsHeader):
    """The ``Access-Control-Max-Age`` header."""

    header_name: ClassVar[str] = "access-control-max-age"

    @classmethod
    def from_timedelta(cls, delta: timedelta) -> AccessControlMaxAge:
        """Build the header from a duration, dropping any fraction of a second."""
        return cls(_seconds_from_timedelta(delta))

    def as_timedelta(self) -> timedelta:
        """Return the value as a duration."""
        return timedelta(seconds=self.seconds)

    @classmethod
    def decode(cls, values: Iterable[str]) -> AccessControlMaxAge:
        return cls(_decode_seconds(values))

    def encode(self) -> list[str]:
        return [str(self.seconds)]