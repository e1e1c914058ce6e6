"""The ``Cookie`` and ``Set-Cookie`` headers."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import ClassVar

from .core import FlatCsv, Header, HeaderError, is_valid_header_value

__all__ = ["Cookie", "SetCookie"]


@dataclass(frozen=True)
class Cookie(Header):
    """The ``Cookie`` header: semicolon-separated name/value pairs."""

    header_name: ClassVar[str] = "cookie"
    pairs: FlatCsv = FlatCsv(separator=";")

    def get(self, name: str) -> str | None:
        """Return the value of the first cookie called ``name``."""
        return next((value for key, value in self if key == name), None)

    def __len__(self) -> int:
        return sum(1 for _ in self)

    def __iter__(self) -> Iterator[tuple[str, str]]:
        """Yield (name, value) pairs, skipping entries without ``=``."""
        for item in self.pairs:
            key, sep, value = item.partition("=")
            if sep:
                yield key.strip(), value.strip()

    @classmethod
    def decode(cls, values: Iterable[str]) -> Cookie:
        return cls(FlatCsv.from_values(values, ";"))

    def encode(self) -> list[str]:
        return [self.pairs.value]


@dataclass(frozen=True)
class SetCookie(Header):
    """The ``Set-Cookie`` header; every value is kept as its own line."""

    header_name: ClassVar[str] = "set-cookie"
    values: tuple[str, ...]

    @classmethod
    def decode(cls, values: Iterable[str]) -> SetCookie:
        collected = tuple(values)
        if not collected or not all(is_valid_header_value(v) for v in collected):
            raise HeaderError()
        return cls(collected)

    def encode(self) -> list[str]:
        return list(self.values)