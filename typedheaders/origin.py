"""The ``Origin`` header and the CORS ``Access-Control-Allow-Origin`` header."""

from __future__ import annotations

import re
from collections.abc import Iterable
from dataclasses import dataclass
from typing import ClassVar

from .core import Header, HeaderError, is_valid_header_value, just_one
from .uri import Host

__all__ = ["InvalidOrigin", "Origin", "AccessControlAllowOrigin"]

_SCHEME = re.compile(r"[A-Za-z][A-Za-z0-9+\-.]*")
_AUTHORITY_END = re.compile(r"[/?#]")


class InvalidOrigin(ValueError):
    """Raised when scheme, host and port do not form a valid origin."""


def _parse_origin(value: str) -> tuple[str, Host]:
    scheme, sep, rest = value.partition("://")
    if not sep or not _SCHEME.fullmatch(scheme):
        raise HeaderError()
    end = _AUTHORITY_END.search(rest)
    if end is None:
        authority, tail = rest, ""
    else:
        authority, tail = rest[: end.start()], rest[end.start():]
    if tail not in ("", "/") or not authority:
        raise HeaderError()
    try:
        return scheme, Host(authority)
    except ValueError:
        raise HeaderError() from None


@dataclass(frozen=True)
class Origin(Header):
    """The ``Origin`` header: a scheme and authority, or the literal ``null``."""

    header_name: ClassVar[str] = "origin"
    NULL: ClassVar[Origin]
    parts: tuple[str, Host] | None = None

    def is_null(self) -> bool:
        """Return whether this is the ``null`` origin."""
        return self.parts is None

    def scheme(self) -> str:
        """Return the scheme, or an empty string for ``null``."""
        return "" if self.parts is None else self.parts[0]

    def hostname(self) -> str:
        """Return the host name, or an empty string for ``null``."""
        return "" if self.parts is None else self.parts[1].hostname()

    def port(self) -> int | None:
        """Return the port, if one is given."""
        return None if self.parts is None else self.parts[1].port()

    @classmethod
    def try_from_parts(cls, scheme: str, host: str, port: int | None = None) -> Origin:
        """Build an origin from its parts, raising InvalidOrigin if they are not valid."""
        suffix = "" if port is None else f":{port}"
        text = f"{scheme}://{host}{suffix}"
        try:
            return cls.from_value(text)
        except HeaderError:
            raise InvalidOrigin("invalid origin") from None

    @classmethod
    def from_value(cls, value: str) -> Origin:
        """Parse one raw header value, raising HeaderError if it is not an origin."""
        if not is_valid_header_value(value):
            raise HeaderError()
        if value == "null":
            return cls.NULL
        return cls(_parse_origin(value))

    def __str__(self) -> str:
        if self.parts is None:
            return "null"
        scheme, authority = self.parts
        return f"{scheme}://{authority}"

    @classmethod
    def decode(cls, values: Iterable[str]) -> Origin:
        value = just_one(values)
        if value is None:
            raise HeaderError()
        return cls.from_value(value)

    def encode(self) -> list[str]:
        return [str(self)]


Origin.NULL = Origin(None)


@dataclass(frozen=True)
class AccessControlAllowOrigin(Header):
    """The ``Access-Control-Allow-Origin`` header; ``allowed`` of None means ``*``."""

    header_name: ClassVar[str] = "access-control-allow-origin"
    ANY: ClassVar[AccessControlAllowOrigin]
    NULL: ClassVar[AccessControlAllowOrigin]
    allowed: Origin | None = None

    def origin(self) -> Origin | None:
        """Return the origin, or None when any origin is allowed."""
        return self.allowed

    @classmethod
    def from_str(cls, text: str) -> AccessControlAllowOrigin:
        """Build the header from an origin string, raising HeaderError if invalid."""
        return cls(Origin.from_value(text))

    @classmethod
    def decode(cls, values: Iterable[str]) -> AccessControlAllowOrigin:
        value = just_one(values)
        if value is None:
            raise HeaderError()
        if value == "*":
            return cls.ANY
        return cls(Origin.from_value(value))

    def encode(self) -> list[str]:
        return ["*" if self.allowed is None else str(self.allowed)]


AccessControlAllowOrigin.ANY = AccessControlAllowOrigin(None)
AccessControlAllowOrigin.NULL = AccessControlAllowOrigin(Origin.NULL)