"""Headers carrying URIs, hosts and product strings."""

from __future__ import annotations

import functools
from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import ClassVar

from .core import Header, HeaderError, is_valid_header_value, just_one

__all__ = [
    "ContentLocation",
    "Location",
    "InvalidReferer",
    "Referer",
    "InvalidServer",
    "Server",
    "Host",
]

_AUTHORITY_CHARS = frozenset(
    "abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ0123456789"
    "-._~!$&'()*+,;=:@[]%"
)


def _first_valid(values: Iterable[str]) -> str:
    value = next(iter(values), None)
    if value is None or not is_valid_header_value(value):
        raise HeaderError()
    return value


def _is_visible_string(text: str) -> bool:
    return all(ch == "\t" or " " <= ch <= "~" for ch in text)


@dataclass(frozen=True)
class _ValueHeader(Header):
    value: str


class ContentLocation(_ValueHeader):
    """The ``Content-Location`` header."""

    header_name: ClassVar[str] = "content-location"

    @classmethod
    def decode(cls, values: Iterable[str]) -> ContentLocation:
        return cls(_first_valid(values))

    def encode(self) -> list[str]:
        return [self.value]


class Location(_ValueHeader):
    """The ``Location`` header."""

    header_name: ClassVar[str] = "location"

    @classmethod
    def decode(cls, values: Iterable[str]) -> Location:
        return cls(_first_valid(values))

    def encode(self) -> list[str]:
        return [self.value]


class InvalidReferer(ValueError):
    """Raised when a string is not a valid ``Referer`` value."""


class Referer(_ValueHeader):
    """The ``Referer`` header."""

    header_name: ClassVar[str] = "referer"

    def __post_init__(self) -> None:
        if not is_valid_header_value(self.value):
            raise InvalidReferer("invalid Referer value")

    @classmethod
    def from_str(cls, text: str) -> Referer:
        """Build a ``Referer``, raising InvalidReferer if ``text`` is not a legal value."""
        return cls(text)

    @classmethod
    def decode(cls, values: Iterable[str]) -> Referer:
        return cls(_first_valid(values))

    def encode(self) -> list[str]:
        return [self.value]


class InvalidServer(ValueError):
    """Raised when a string is not a valid ``Server`` value."""


@dataclass(frozen=True, order=True)
class Server(Header):
    """The ``Server`` header: the software used by the origin server."""

    header_name: ClassVar[str] = "server"
    value: str

    def __post_init__(self) -> None:
        if not _is_visible_string(self.value):
            raise InvalidServer("invalid Server value")

    @classmethod
    def from_str(cls, text: str) -> Server:
        """Build a ``Server``, raising InvalidServer if ``text`` is not a legal value."""
        return cls(text)

    def as_str(self) -> str:
        """Return the value as a string."""
        return self.value

    def __str__(self) -> str:
        return self.value

    @classmethod
    def decode(cls, values: Iterable[str]) -> Server:
        value = just_one(values)
        if value is None or not _is_visible_string(value):
            raise HeaderError()
        return cls(value)

    def encode(self) -> list[str]:
        return [self.value]


def _parse_authority(text: str) -> tuple[str, int | None]:
    if not text or any(ch not in _AUTHORITY_CHARS for ch in text):
        raise ValueError(f"invalid authority: {text!r}")
    userinfo, _, host_port = text.rpartition("@")
    if not host_port or "[" in userinfo or "]" in userinfo:
        raise ValueError(f"invalid authority: {text!r}")
    port_text: str | None
    if host_port.startswith("["):
        close = host_port.find("]")
        if close < 0:
            raise ValueError(f"invalid authority: {text!r}")
        host, rest = host_port[: close + 1], host_port[close + 1 :]
        if "[" in host[1:] or "[" in rest or "]" in rest:
            raise ValueError(f"invalid authority: {text!r}")
        if rest and not rest.startswith(":"):
            raise ValueError(f"invalid authority: {text!r}")
        port_text = rest[1:] if rest else None
    else:
        if "[" in host_port or "]" in host_port:
            raise ValueError(f"invalid authority: {text!r}")
        host, colon, port_text = host_port.partition(":")
        if ":" in port_text:
            raise ValueError(f"invalid authority: {text!r}")
        if not colon:
            port_text = None
        if "%" in host:
            raise ValueError(f"invalid authority: {text!r}")
    if not host:
        raise ValueError(f"invalid authority: {text!r}")
    if not port_text:
        return host, None
    if not (port_text.isascii() and port_text.isdigit()) or int(port_text) > 0xFFFF:
        raise ValueError(f"invalid port in authority: {text!r}")
    return host, int(port_text)


@functools.total_ordering
@dataclass(frozen=True, eq=False)
class Host(Header):
    """The ``Host`` header: an authority such as ``example.com:8080``."""

    header_name: ClassVar[str] = "host"
    authority: str
    _host: str = field(init=False, repr=False)
    _port: int | None = field(init=False, repr=False)

    def __post_init__(self) -> None:
        host, port = _parse_authority(self.authority)
        object.__setattr__(self, "_host", host)
        object.__setattr__(self, "_port", port)

    def hostname(self) -> str:
        """Return the host part, such as ``example.com``."""
        return self._host

    def port(self) -> int | None:
        """Return the port number, if one is given."""
        return self._port

    def __str__(self) -> str:
        return self.authority

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Host):
            return NotImplemented
        return self.authority.lower() == other.authority.lower()

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Host):
            return NotImplemented
        return self.authority.lower() < other.authority.lower()

    def __hash__(self) -> int:
        return hash(self.authority.lower())

    @classmethod
    def decode(cls, values: Iterable[str]) -> Host:
        value = next(iter(values), None)
        if value is None:
            raise HeaderError()
        try:
            return cls(value)
        except ValueError:
            raise HeaderError() from None

    def encode(self) -> list[str]:
        return [self.authority]