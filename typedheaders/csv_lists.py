"""Headers whose values are comma-separated lists of tokens."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import ClassVar

from .core import FlatCsv, Header, HeaderError, is_token

__all__ = [
    "AcceptRanges",
    "AccessControlAllowHeaders",
    "AccessControlAllowMethods",
    "AccessControlExposeHeaders",
    "AccessControlRequestHeaders",
    "AccessControlRequestMethod",
    "Allow",
    "Connection",
    "ContentEncoding",
]


def _header_name(text: str) -> str | None:
    """Return ``text`` as a lower-case header name, or None if it is not one."""
    return text.lower() if is_token(text) else None


def _checked_names(names: Iterable[str]) -> list[str]:
    checked = []
    for name in names:
        parsed = _header_name(str(name))
        if parsed is None:
            raise ValueError(f"invalid header name: {name!r}")
        checked.append(parsed)
    return checked


def _checked_methods(methods: Iterable[str]) -> list[str]:
    checked = []
    for method in methods:
        method = str(method)
        if not is_token(method):
            raise ValueError(f"invalid method: {method!r}")
        checked.append(method)
    return checked


def _valid_names(items: FlatCsv) -> Iterator[str]:
    """Yield the valid header names, skipping invalid ones."""
    for item in items:
        name = _header_name(item)
        if name is not None:
            yield name


def _valid_methods(items: FlatCsv) -> Iterator[str]:
    """Yield the valid methods, skipping invalid ones."""
    return (item for item in items if is_token(item))


@dataclass(frozen=True)
class _CsvHeader(Header):
    items: FlatCsv = FlatCsv()


class AcceptRanges(_CsvHeader):
    """The ``Accept-Ranges`` header."""

    header_name: ClassVar[str] = "accept-ranges"

    @classmethod
    def bytes(cls) -> AcceptRanges:
        """Return ``Accept-Ranges: bytes``."""
        return cls(FlatCsv("bytes"))

    @classmethod
    def decode(cls, values: Iterable[str]) -> AcceptRanges:
        return cls(FlatCsv.from_values(values))

    def encode(self) -> list[str]:
        return [self.items.value]


class AccessControlAllowHeaders(_CsvHeader):
    """The ``Access-Control-Allow-Headers`` header."""

    header_name: ClassVar[str] = "access-control-allow-headers"

    @classmethod
    def from_names(cls, names: Iterable[str]) -> AccessControlAllowHeaders:
        """Build the header from header names, which are lower-cased."""
        return cls(FlatCsv.from_items(_checked_names(names)))

    def __iter__(self) -> Iterator[str]:
        """Yield header names up to the first invalid one."""
        for item in self.items:
            name = _header_name(item)
            if name is None:
                return
            yield name

    @classmethod
    def decode(cls, values: Iterable[str]) -> AccessControlAllowHeaders:
        return cls(FlatCsv.from_values(values))

    def encode(self) -> list[str]:
        return [self.items.value]


class AccessControlAllowMethods(_CsvHeader):
    """The ``Access-Control-Allow-Methods`` header."""

    header_name: ClassVar[str] = "access-control-allow-methods"

    @classmethod
    def from_methods(cls, methods: Iterable[str]) -> AccessControlAllowMethods:
        """Build the header from request methods."""
        return cls(FlatCsv.from_items(_checked_methods(methods)))

    def __iter__(self) -> Iterator[str]:
        """Yield the valid methods, skipping invalid ones."""
        return _valid_methods(self.items)

    @classmethod
    def decode(cls, values: Iterable[str]) -> AccessControlAllowMethods:
        return cls(FlatCsv.from_values(values))

    def encode(self) -> list[str]:
        return [self.items.value]


class AccessControlExposeHeaders(_CsvHeader):
    """The ``Access-Control-Expose-Headers`` header."""

    header_name: ClassVar[str] = "access-control-expose-headers"

    @classmethod
    def from_names(cls, names: Iterable[str]) -> AccessControlExposeHeaders:
        """Build the header from header names, which are lower-cased."""
        return cls(FlatCsv.from_items(_checked_names(names)))

    def __iter__(self) -> Iterator[str]:
        """Yield the valid header names, skipping invalid ones."""
        return _valid_names(self.items)

    @classmethod
    def decode(cls, values: Iterable[str]) -> AccessControlExposeHeaders:
        return cls(FlatCsv.from_values(values))

    def encode(self) -> list[str]:
        return [self.items.value]


class AccessControlRequestHeaders(_CsvHeader):
    """The ``Access-Control-Request-Headers`` header."""

    header_name: ClassVar[str] = "access-control-request-headers"

    @classmethod
    def from_names(cls, names: Iterable[str]) -> AccessControlRequestHeaders:
        """Build the header from header names, which are lower-cased."""
        return cls(FlatCsv.from_items(_checked_names(names)))

    def __iter__(self) -> Iterator[str]:
        """Yield the valid header names, skipping invalid ones."""
        return _valid_names(self.items)

    @classmethod
    def decode(cls, values: Iterable[str]) -> AccessControlRequestHeaders:
        return cls(FlatCsv.from_values(values))

    def encode(self) -> list[str]:
        return [self.items.value]


@dataclass(frozen=True)
class AccessControlRequestMethod(Header):
    """The ``Access-Control-Request-Method`` header."""

    header_name: ClassVar[str] = "access-control-request-method"
    method: str

    def __post_init__(self) -> None:
        if not is_token(self.method):
            raise ValueError(f"invalid method: {self.method!r}")

    @classmethod
    def decode(cls, values: Iterable[str]) -> AccessControlRequestMethod:
        value = next(iter(values), None)
        if value is None or not is_token(value):
            raise HeaderError()
        return cls(value)

    def encode(self) -> list[str]:
        return [self.method]


class Allow(_CsvHeader):
    """The ``Allow`` header: methods supported by the target resource."""

    header_name: ClassVar[str] = "allow"

    @classmethod
    def from_methods(cls, methods: Iterable[str]) -> Allow:
        """Build the header from request methods."""
        return cls(FlatCsv.from_items(_checked_methods(methods)))

    def __iter__(self) -> Iterator[str]:
        """Yield the valid methods, skipping invalid ones."""
        return _valid_methods(self.items)

    @classmethod
    def decode(cls, values: Iterable[str]) -> Allow:
        return cls(FlatCsv.from_values(values))

    def encode(self) -> list[str]:
        return [self.items.value]


class Connection(_CsvHeader):
    """The ``Connection`` header: control options for the connection."""

    header_name: ClassVar[str] = "connection"

    @classmethod
    def close(cls) -> Connection:
        """Return ``Connection: close``."""
        return cls(FlatCsv("close"))

    @classmethod
    def keep_alive(cls) -> Connection:
        """Return ``Connection: keep-alive``."""
        return cls(FlatCsv("keep-alive"))

    @classmethod
    def upgrade(cls) -> Connection:
        """Return ``Connection: upgrade``."""
        return cls(FlatCsv("upgrade"))

    @classmethod
    def from_names(cls, names: Iterable[str]) -> Connection:
        """Build the header from header names, which are lower-cased."""
        return cls(FlatCsv.from_items(_checked_names(names)))

    def __iter__(self) -> Iterator[str]:
        """Yield the valid option names, skipping invalid ones."""
        return _valid_names(self.items)

    def contains(self, name: str) -> bool:
        """Return whether the option is present, ignoring ASCII case."""
        wanted = str(name).lower()
        return any(option.lower() == wanted for option in self.items)

    @classmethod
    def decode(cls, values: Iterable[str]) -> Connection:
        return cls(FlatCsv.from_values(values))

    def encode(self) -> list[str]:
        return [self.items.value]


class ContentEncoding(_CsvHeader):
    """The ``Content-Encoding`` header."""

    header_name: ClassVar[str] = "content-encoding"

    @classmethod
    def gzip(cls) -> ContentEncoding:
        """Return ``Content-Encoding: gzip``."""
        return cls(FlatCsv("gzip"))

    def contains(self, coding: str) -> bool:
        """Return whether the coding is present, matching case exactly."""
        return any(item == coding for item in self.items)

    @classmethod
    def decode(cls, values: Iterable[str]) -> ContentEncoding:
        return cls(FlatCsv.from_values(values))

    def encode(self) -> list[str]:
        return [self.items.value]