"""The ``Authorization`` and ``Proxy-Authorization`` headers and their credentials."""

from __future__ import annotations

import abc
import base64
import binascii
from collections.abc import Iterable
from dataclasses import dataclass
from typing import ClassVar

from .core import Header, HeaderError

__all__ = [
    "InvalidBearerToken",
    "Credentials",
    "Basic",
    "Bearer",
    "Authorization",
    "ProxyAuthorization",
]


class InvalidBearerToken(ValueError):
    """Raised when a bearer token cannot be used in a header value."""


def _is_visible_string(text: str) -> bool:
    return all(ch == "\t" or " " <= ch <= "~" for ch in text)


class Credentials(abc.ABC):
    """Credentials carried by an authorization header."""

    SCHEME: ClassVar[str]

    @classmethod
    @abc.abstractmethod
    def decode(cls, value: str) -> Credentials:
        """Decode credentials from a value starting with the scheme, raising HeaderError."""

    @abc.abstractmethod
    def encode(self) -> str:
        """Return the header value, starting with the scheme."""


@dataclass(frozen=True)
class Basic(Credentials):
    """Credentials for Basic authentication: ``username:password``."""

    SCHEME: ClassVar[str] = "Basic"
    decoded: str
    colon_pos: int

    def __post_init__(self) -> None:
        if not 0 <= self.colon_pos < len(self.decoded) or self.decoded[self.colon_pos] != ":":
            raise ValueError("colon_pos must point at the separating colon")

    def username(self) -> str:
        """Return the decoded user name."""
        return self.decoded[: self.colon_pos]

    def password(self) -> str:
        """Return the decoded password."""
        return self.decoded[self.colon_pos + 1 :]

    @classmethod
    def decode(cls, value: str) -> Basic:
        prefix = "Basic "
        if not value.startswith(prefix):
            raise HeaderError()
        encoded = value[len(prefix) :].lstrip(" ")
        if not encoded:
            raise HeaderError()
        try:
            raw = base64.b64decode(encoded, validate=True)
            decoded = raw.decode("utf-8")
        except (binascii.Error, ValueError):
            raise HeaderError() from None
        colon_pos = decoded.find(":")
        if colon_pos < 0:
            raise HeaderError()
        return cls(decoded, colon_pos)

    def encode(self) -> str:
        encoded = base64.b64encode(self.decoded.encode("utf-8")).decode("ascii")
        return f"Basic {encoded}"


@dataclass(frozen=True)
class Bearer(Credentials):
    """A bearer token, most often seen with OAuth."""

    SCHEME: ClassVar[str] = "Bearer"
    value: str

    def __post_init__(self) -> None:
        if not self.value.startswith("Bearer ") or not _is_visible_string(self.value):
            raise InvalidBearerToken("invalid bearer token")

    def token(self) -> str:
        """Return the token part."""
        return self.value[len("Bearer ") :]

    @classmethod
    def decode(cls, value: str) -> Bearer:
        try:
            return cls(value)
        except ValueError:
            raise HeaderError() from None

    def encode(self) -> str:
        return self.value


def _decode_credentials(values: Iterable[str], credentials: type[Credentials]) -> Credentials:
    value = next(iter(values), None)
    scheme = credentials.SCHEME
    if (
        value is None
        or not value.startswith(scheme)
        or len(value) <= len(scheme)
        or value[len(scheme)] != " "
    ):
        raise HeaderError()
    return credentials.decode(value)


@dataclass(frozen=True)
class _CredentialsHeader(Header):
    credentials: Credentials


class Authorization(_CredentialsHeader):
    """The ``Authorization`` header."""

    header_name: ClassVar[str] = "authorization"

    @classmethod
    def basic(cls, username: str, password: str) -> Authorization:
        """Build a Basic authorization header."""
        return cls(Basic(f"{username}:{password}", len(username)))

    @classmethod
    def bearer(cls, token: str) -> Authorization:
        """Build a Bearer authorization header, raising InvalidBearerToken if invalid."""
        return cls(Bearer(f"Bearer {token}"))

    def _basic(self) -> Basic:
        if not isinstance(self.credentials, Basic):
            raise TypeError("credentials are not Basic")
        return self.credentials

    def username(self) -> str:
        """Return the Basic user name."""
        return self._basic().username()

    def password(self) -> str:
        """Return the Basic password."""
        return self._basic().password()

    def token(self) -> str:
        """Return the Bearer token."""
        if not isinstance(self.credentials, Bearer):
            raise TypeError("credentials are not Bearer")
        return self.credentials.token()

    @classmethod
    def decode(cls, values: Iterable[str], credentials: type[Credentials] = Basic) -> Authorization:
        """Decode the header with the given credentials type (Basic by default)."""
        return cls(_decode_credentials(values, credentials))

    def encode(self) -> list[str]:
        return [self.credentials.encode()]


class ProxyAuthorization(_CredentialsHeader):
    """The ``Proxy-Authorization`` header."""

    header_name: ClassVar[str] = "proxy-authorization"

    @classmethod
    def decode(
        cls, values: Iterable[str], credentials: type[Credentials] = Basic
    ) -> ProxyAuthorization:
        """Decode the header with the given credentials type (Basic by default)."""
        return cls(_decode_credentials(values, credentials))

    def encode(self) -> list[str]:
        return [self.credentials.encode()]