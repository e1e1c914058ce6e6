"""Entity tags and the conditional headers built on them."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from datetime import datetime
from typing import ClassVar

from .core import FlatCsv, Header, HeaderError, just_one
from .dates import HttpDate, LastModified

__all__ = [
    "EntityTag",
    "InvalidETag",
    "ETag",
    "IfMatch",
    "IfNoneMatch",
    "IfRange",
]


def _is_etagc(ch: str) -> bool:
    code = ord(ch)
    return code == 0x21 or 0x23 <= code <= 0x7E or code >= 0x80


@dataclass(frozen=True)
class EntityTag:
    """An opaque validator, optionally marked weak."""

    tag: str
    weak: bool = False

    def __post_init__(self) -> None:
        if not all(_is_etagc(ch) for ch in self.tag):
            raise ValueError("invalid character in entity tag")

    @classmethod
    def parse(cls, text: str) -> EntityTag:
        """Parse ``"tag"`` or ``W/"tag"``, raising HeaderError if invalid."""
        weak = text.startswith('W/"')
        body = text[2:] if weak else text
        if len(body) < 2 or not body.startswith('"') or not body.endswith('"'):
            raise HeaderError()
        tag = body[1:-1]
        if not all(_is_etagc(ch) for ch in tag):
            raise HeaderError()
        return cls(tag, weak)

    def strong_eq(self, other: EntityTag) -> bool:
        """Both tags are strong and have the same opaque value."""
        return not self.weak and not other.weak and self.tag == other.tag

    def weak_eq(self, other: EntityTag) -> bool:
        """The opaque values match, whatever the weakness."""
        return self.tag == other.tag

    def __str__(self) -> str:
        prefix = "W/" if self.weak else ""
        return f'{prefix}"{self.tag}"'


class InvalidETag(ValueError):
    """Raised when a string is not a valid entity tag."""


@dataclass(frozen=True)
class ETag(Header):
    """The ``ETag`` header."""

    header_name: ClassVar[str] = "etag"
    entity_tag: EntityTag

    @classmethod
    def parse(cls, text: str) -> ETag:
        """Parse an ETag, raising InvalidETag if ``text`` is not one."""
        try:
            return cls(EntityTag.parse(text))
        except HeaderError:
            raise InvalidETag("invalid ETag") from None

    def __str__(self) -> str:
        return str(self.entity_tag)

    @classmethod
    def decode(cls, values: Iterable[str]) -> ETag:
        value = just_one(values)
        if value is None:
            raise HeaderError()
        return cls(EntityTag.parse(value))

    def encode(self) -> list[str]:
        return [str(self.entity_tag)]


def _tags_in(tags: FlatCsv) -> Iterable[EntityTag]:
    for item in tags:
        try:
            yield EntityTag.parse(item)
        except HeaderError:
            continue


def _decode_range(values: Iterable[str]) -> FlatCsv | None:
    values = list(values)
    if not values:
        raise HeaderError()
    flat = FlatCsv.from_values(values)
    return None if flat.value == "*" else flat


@dataclass(frozen=True)
class IfMatch(Header):
    """The ``If-Match`` header; ``tags`` of None means ``*``."""

    header_name: ClassVar[str] = "if-match"
    tags: FlatCsv | None = None

    @classmethod
    def any(cls) -> IfMatch:
        """Return ``If-Match: *``."""
        return cls(None)

    @classmethod
    def from_etag(cls, etag: ETag) -> IfMatch:
        """Return an ``If-Match`` holding a single entity tag."""
        return cls(FlatCsv(str(etag.entity_tag)))

    def is_any(self) -> bool:
        """Return whether this is ``If-Match: *``."""
        return self.tags is None

    def precondition_passes(self, etag: ETag) -> bool:
        """Return whether ``etag`` strongly matches one of the listed tags."""
        if self.tags is None:
            return True
        return any(tag.strong_eq(etag.entity_tag) for tag in _tags_in(self.tags))

    @classmethod
    def decode(cls, values: Iterable[str]) -> IfMatch:
        return cls(_decode_range(values))

    def encode(self) -> list[str]:
        return ["*" if self.tags is None else self.tags.value]


@dataclass(frozen=True)
class IfNoneMatch(Header):
    """The ``If-None-Match`` header; ``tags`` of None means ``*``."""

    header_name: ClassVar[str] = "if-none-match"
    tags: FlatCsv | None = None

    @classmethod
    def any(cls) -> IfNoneMatch:
        """Return ``If-None-Match: *``."""
        return cls(None)

    @classmethod
    def from_etag(cls, etag: ETag) -> IfNoneMatch:
        """Return an ``If-None-Match`` holding a single entity tag."""
        return cls(FlatCsv(str(etag.entity_tag)))

    def precondition_passes(self, etag: ETag) -> bool:
        """Return whether ``etag`` weakly matches none of the listed tags."""
        if self.tags is None:
            return False
        return not any(tag.weak_eq(etag.entity_tag) for tag in _tags_in(self.tags))

    @classmethod
    def decode(cls, values: Iterable[str]) -> IfNoneMatch:
        return cls(_decode_range(values))

    def encode(self) -> list[str]:
        return ["*" if self.tags is None else self.tags.value]


@dataclass(frozen=True)
class IfRange(Header):
    """The ``If-Range`` header: an entity tag or a date."""

    header_name: ClassVar[str] = "if-range"
    validator: EntityTag | HttpDate

    @classmethod
    def etag(cls, tag: ETag) -> IfRange:
        """Build an ``If-Range`` with an entity tag."""
        return cls(tag.entity_tag)

    @classmethod
    def date(cls, when: datetime) -> IfRange:
        """Build an ``If-Range`` with a date."""
        return cls(HttpDate.from_datetime(when))

    def is_modified(self, etag: ETag | None, last_modified: LastModified | None) -> bool:
        """Return True if the resource changed and the range cannot be served."""
        if isinstance(self.validator, HttpDate):
            if last_modified is None:
                return True
            return self.validator < last_modified.date
        if etag is None:
            return True
        return not etag.entity_tag.strong_eq(self.validator)

    @classmethod
    def decode(cls, values: Iterable[str]) -> IfRange:
        value = next(iter(values), None)
        if value is None:
            raise HeaderError()
        try:
            return cls(EntityTag.parse(value))
        except HeaderError:
            return cls(HttpDate.parse(value))

    def encode(self) -> list[str]:
        return [str(self.validator)]