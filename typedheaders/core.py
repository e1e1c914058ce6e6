"""Core types shared by every typed header: the error, the base class and CSV helpers."""

from __future__ import annotations

import abc
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import ClassVar, TypeVar

__all__ = [
    "HeaderError",
    "Header",
    "FlatCsv",
    "decode_header",
    "try_decode",
    "encode_header",
    "split_csv",
    "just_one",
    "is_valid_header_value",
    "is_token",
]

_TCHARS = frozenset(
    "!#$%&'*+-.^_`|~0123456789"
    "abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ"
)

H = TypeVar("H", bound="Header")


class HeaderError(ValueError):
    """Raised when a header value cannot be decoded."""

    def __init__(self, message: str = "invalid HTTP header") -> None:
        super().__init__(message)


class Header(abc.ABC):
    """A typed HTTP header that can be decoded from and encoded to raw values."""

    header_name: ClassVar[str]

    @classmethod
    @abc.abstractmethod
    def decode(cls, values):
        """Build the header from its raw string values, raising HeaderError if invalid."""

    @abc.abstractmethod
    def encode(self) -> list[str]:
        """Return the raw string values of this header."""


def is_valid_header_value(text: str) -> bool:
    """Return True if ``text`` holds no control characters other than tab."""
    return all(ch == "\t" or (ch >= " " and ch != "\x7f") for ch in text)


def _is_visible_ascii(text: str) -> bool:
    return all(ch == "\t" or " " <= ch <= "~" for ch in text)


def is_token(text: str) -> bool:
    """Return True if ``text`` is a non-empty HTTP token."""
    return bool(text) and all(ch in _TCHARS for ch in text)


def just_one(values: Iterable[str]) -> str | None:
    """Return the only value, or None when there are none or more than one."""
    found = None
    for count, value in enumerate(values):
        if count:
            return None
        found = value
    return found


def split_csv(values: Iterable[str], separator: str = ",") -> Iterator[str]:
    """Yield the trimmed, non-empty items of comma-delimited header values."""
    for value in values:
        if not _is_visible_ascii(value):
            continue
        for item in value.split(separator):
            item = item.strip()
            if item:
                yield item


@dataclass(frozen=True)
class FlatCsv:
    """A list of items held as one header value joined by a separator."""

    value: str = ""
    separator: str = ","

    @classmethod
    def from_values(cls, values: Iterable[str], separator: str = ",") -> FlatCsv:
        """Join several raw header values into one list."""
        values = list(values)
        if not all(is_valid_header_value(v) for v in values):
            raise HeaderError()
        return cls(f"{separator} ".join(values), separator)

    @classmethod
    def from_items(cls, items: Iterable[str], separator: str = ",") -> FlatCsv:
        """Build a list from individual items."""
        items = [str(item) for item in items]
        if not all(is_valid_header_value(item) for item in items):
            raise ValueError("item is not a valid header value")
        return cls(f"{separator} ".join(items), separator)

    def __iter__(self) -> Iterator[str]:
        if not _is_visible_ascii(self.value):
            return
        quoted = False
        current: list[str] = []
        for ch in self.value:
            if quoted:
                if ch == '"':
                    quoted = False
            elif ch == self.separator:
                yield "".join(current).strip()
                current = []
                continue
            elif ch == '"':
                quoted = True
            current.append(ch)
        yield "".join(current).strip()


def decode_header(header_cls: type[H], values: Iterable[str]) -> H:
    """Decode ``header_cls`` from raw values, raising HeaderError if invalid."""
    return header_cls.decode(list(values))


def try_decode(header_cls: type[H], values: Iterable[str]) -> H | None:
    """Decode ``header_cls``; return None when absent or invalid."""
    values = list(values)
    if not values:
        return None
    try:
        return header_cls.decode(values)
    except HeaderError:
        return None


def encode_header(header: Header) -> list[tuple[str, str]]:
    """Return the (name, value) pairs that represent ``header``."""
    return [(header.header_name, value) for value in header.encode()]