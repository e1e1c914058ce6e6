"""The ``Content-Length`` and ``Content-Type`` headers."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import ClassVar

from .core import Header, HeaderError, is_token

__all__ = ["ContentLength", "ContentType"]

_MAX_U64 = 2**64 - 1


def _parse_u64(text: str) -> int:
    digits = text[1:] if text.startswith("+") else text
    if not digits or not (digits.isascii() and digits.isdigit()):
        raise HeaderError()
    number = int(digits)
    if number > _MAX_U64:
        raise HeaderError()
    return number


@dataclass(frozen=True)
class ContentLength(Header):
    """The ``Content-Length`` header: the body size in octets."""

    header_name: ClassVar[str] = "content-length"
    length: int

    def __post_init__(self) -> None:
        if not 0 <= self.length <= _MAX_U64:
            raise ValueError("content length out of range")

    @classmethod
    def decode(cls, values: Iterable[str]) -> ContentLength:
        # Repeated values are accepted only when they all agree.
        length: int | None = None
        for value in values:
            parsed = _parse_u64(value)
            if length is not None and length != parsed:
                raise HeaderError()
            length = parsed
        if length is None:
            raise HeaderError()
        return cls(length)

    def encode(self) -> list[str]:
        return [str(self.length)]


def _skip_spaces(text: str, pos: int) -> int:
    while pos < len(text) and text[pos] in " \t":
        pos += 1
    return pos


def _read_token(text: str, pos: int) -> tuple[str, int]:
    end = pos
    while end < len(text) and is_token(text[end]):
        end += 1
    if end == pos:
        raise HeaderError()
    return text[pos:end], end


def _read_quoted(text: str, pos: int) -> tuple[str, int]:
    chars: list[str] = []
    pos += 1
    while pos < len(text):
        ch = text[pos]
        if ch == "\\":
            if pos + 1 >= len(text):
                raise HeaderError()
            chars.append(text[pos + 1])
            pos += 2
            continue
        if ch == '"':
            return "".join(chars), pos + 1
        chars.append(ch)
        pos += 1
    raise HeaderError()


def _parse_mime(text: str) -> tuple[str, str, tuple[tuple[str, str], ...]]:
    if not text.isascii():
        raise HeaderError()
    main, pos = _read_token(text, 0)
    if pos >= len(text) or text[pos] != "/":
        raise HeaderError()
    sub, pos = _read_token(text, pos + 1)
    params: list[tuple[str, str]] = []
    while True:
        pos = _skip_spaces(text, pos)
        if pos == len(text):
            break
        if text[pos] != ";":
            raise HeaderError()
        pos = _skip_spaces(text, pos + 1)
        if pos == len(text):
            break
        name, pos = _read_token(text, pos)
        if pos >= len(text) or text[pos] != "=":
            raise HeaderError()
        pos += 1
        if pos < len(text) and text[pos] == '"':
            value, pos = _read_quoted(text, pos)
        else:
            value, pos = _read_token(text, pos)
        name = name.lower()
        if name == "charset":
            value = value.lower()
        params.append((name, value))
    return main.lower(), sub.lower(), tuple(params)


def _format_param_value(value: str) -> str:
    if is_token(value):
        return value
    escaped = value.replace("\\", "\\\\").replace('"', '\\"')
    return f'"{escaped}"'


@dataclass(frozen=True)
class ContentType(Header):
    """The ``Content-Type`` header: a media type with optional parameters."""

    header_name: ClassVar[str] = "content-type"
    mime_type: str
    subtype: str
    params: tuple[tuple[str, str], ...] = ()

    @classmethod
    def json(cls) -> ContentType:
        """``application/json``"""
        return cls("application", "json")

    @classmethod
    def text(cls) -> ContentType:
        """``text/plain``"""
        return cls("text", "plain")

    @classmethod
    def text_utf8(cls) -> ContentType:
        """``text/plain; charset=utf-8``"""
        return cls("text", "plain", (("charset", "utf-8"),))

    @classmethod
    def html(cls) -> ContentType:
        """``text/html``"""
        return cls("text", "html")

    @classmethod
    def xml(cls) -> ContentType:
        """``text/xml``"""
        return cls("text", "xml")

    @classmethod
    def form_url_encoded(cls) -> ContentType:
        """``application/x-www-form-urlencoded``"""
        return cls("application", "x-www-form-urlencoded")

    @classmethod
    def jpeg(cls) -> ContentType:
        """``image/jpeg``"""
        return cls("image", "jpeg")

    @classmethod
    def png(cls) -> ContentType:
        """``image/png``"""
        return cls("image", "png")

    @classmethod
    def octet_stream(cls) -> ContentType:
        """``application/octet-stream``"""
        return cls("application", "octet-stream")

    def __str__(self) -> str:
        params = "".join(f"; {name}={_format_param_value(value)}" for name, value in self.params)
        return f"{self.mime_type}/{self.subtype}{params}"

    @classmethod
    def decode(cls, values: Iterable[str]) -> ContentType:
        value = next(iter(values), None)
        if value is None:
            raise HeaderError()
        return cls(*_parse_mime(value))

    def encode(self) -> list[str]:
        return [str(self)]