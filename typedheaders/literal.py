"""Headers whose values are fixed literals or a single raw value."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import ClassVar

from .core import Header, HeaderError, is_valid_header_value, just_one

__all__ = ["Expect", "AccessControlAllowCredentials", "SecWebsocketVersion", "Pragma"]


def _first(values: Iterable[str]) -> str | None:
    return next(iter(values), None)


@dataclass(frozen=True)
class Expect(Header):
    """The ``Expect: 100-continue`` header."""

    header_name: ClassVar[str] = "expect"
    CONTINUE: ClassVar[Expect]

    @classmethod
    def decode(cls, values: Iterable[str]) -> Expect:
        if just_one(values) == "100-continue":
            return cls.CONTINUE
        raise HeaderError()

    def encode(self) -> list[str]:
        return ["100-continue"]

    def __repr__(self) -> str:
        return "Expect('100-continue')"


Expect.CONTINUE = Expect()


@dataclass(frozen=True)
class AccessControlAllowCredentials(Header):
    """The ``Access-Control-Allow-Credentials: true`` header."""

    header_name: ClassVar[str] = "access-control-allow-credentials"

    @classmethod
    def decode(cls, values: Iterable[str]) -> AccessControlAllowCredentials:
        if _first(values) == "true":
            return cls()
        raise HeaderError()

    def encode(self) -> list[str]:
        return ["true"]


@dataclass(frozen=True)
class SecWebsocketVersion(Header):
    """The ``Sec-Websocket-Version`` header; only version 13 is supported."""

    header_name: ClassVar[str] = "sec-websocket-version"
    V13: ClassVar[SecWebsocketVersion]
    version: int = 13

    @classmethod
    def decode(cls, values: Iterable[str]) -> SecWebsocketVersion:
        if _first(values) == "13":
            return cls.V13
        raise HeaderError()

    def encode(self) -> list[str]:
        return ["13"]


SecWebsocketVersion.V13 = SecWebsocketVersion(13)


@dataclass(frozen=True)
class Pragma(Header):
    """The HTTP/1.0 ``Pragma`` header."""

    header_name: ClassVar[str] = "pragma"
    value: str

    @classmethod
    def no_cache(cls) -> Pragma:
        """Return the literal ``no-cache`` pragma."""
        return cls("no-cache")

    def is_no_cache(self) -> bool:
        """Return whether this pragma is ``no-cache``."""
        return self.value == "no-cache"

    @classmethod
    def decode(cls, values: Iterable[str]) -> Pragma:
        value = _first(values)
        if value is None or not is_valid_header_value(value):
            raise HeaderError()
        return cls(value)

    def encode(self) -> list[str]:
        return [self.value]