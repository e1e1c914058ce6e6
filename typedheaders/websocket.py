"""WebSocket handshake headers."""

from __future__ import annotations

import base64
import hashlib
from collections.abc import Iterable
from dataclasses import dataclass
from typing import ClassVar

from .core import Header, HeaderError, is_valid_header_value

__all__ = ["SecWebsocketKey", "SecWebsocketAccept"]

_WEBSOCKET_GUID = b"258EAFA5-E914-47DA-95CA-C5AB0DC85B11"


def _single_value(values: Iterable[str]) -> str:
    value = next(iter(values), None)
    if value is None or not is_valid_header_value(value):
        raise HeaderError()
    return value


@dataclass(frozen=True)
class SecWebsocketKey(Header):
    """The ``Sec-Websocket-Key`` header."""

    header_name: ClassVar[str] = "sec-websocket-key"
    value: str

    @classmethod
    def decode(cls, values: Iterable[str]) -> SecWebsocketKey:
        return cls(_single_value(values))

    def encode(self) -> list[str]:
        return [self.value]


@dataclass(frozen=True)
class SecWebsocketAccept(Header):
    """The ``Sec-Websocket-Accept`` header, a signature of the client's key."""

    header_name: ClassVar[str] = "sec-websocket-accept"
    value: str

    @classmethod
    def from_key(cls, key: SecWebsocketKey) -> SecWebsocketAccept:
        """Sign a ``Sec-Websocket-Key`` to build the matching accept header."""
        digest = hashlib.sha1(key.value.encode("utf-8") + _WEBSOCKET_GUID).digest()
        return cls(base64.b64encode(digest).decode("ascii"))

    @classmethod
    def decode(cls, values: Iterable[str]) -> SecWebsocketAccept:
        return cls(_single_value(values))

    def encode(self) -> list[str]:
        return [self.value]