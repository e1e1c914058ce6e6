"""The ``Cache-Control`` header."""

from __future__ import annotations

import enum
from collections.abc import Iterable
from dataclasses import dataclass, replace
from datetime import timedelta
from typing import ClassVar

from .core import Header, split_csv
from .durations import parse_seconds

__all__ = ["CacheControl"]

_ONE_SECOND = timedelta(seconds=1)


class _Flags(enum.Flag):
    NONE = 0
    NO_CACHE = 1
    NO_STORE = 2
    NO_TRANSFORM = 4
    ONLY_IF_CACHED = 8
    MUST_REVALIDATE = 16
    PUBLIC = 32
    PRIVATE = 64
    PROXY_REVALIDATE = 128


_FLAG_DIRECTIVES = (
    (_Flags.NO_CACHE, "no-cache"),
    (_Flags.NO_STORE, "no-store"),
    (_Flags.NO_TRANSFORM, "no-transform"),
    (_Flags.ONLY_IF_CACHED, "only-if-cached"),
    (_Flags.MUST_REVALIDATE, "must-revalidate"),
    (_Flags.PUBLIC, "public"),
    (_Flags.PRIVATE, "private"),
    (_Flags.PROXY_REVALIDATE, "proxy-revalidate"),
)
_FLAGS_BY_NAME = {name: flag for flag, name in _FLAG_DIRECTIVES}

_ARG_DIRECTIVES = (
    ("max-age", "max_age_secs"),
    ("max-stale", "max_stale_secs"),
    ("min-fresh", "min_fresh_secs"),
    ("s-maxage", "s_max_age_secs"),
)
_FIELDS_BY_NAME = dict(_ARG_DIRECTIVES)


def _whole_seconds(delta: timedelta) -> int:
    if delta < timedelta(0):
        raise ValueError("duration must not be negative")
    return delta // _ONE_SECOND


def _as_delta(seconds: int | None) -> timedelta | None:
    return None if seconds is None else timedelta(seconds=seconds)


@dataclass(frozen=True)
class CacheControl(Header):
    """The ``Cache-Control`` header; unknown directives are ignored."""

    header_name: ClassVar[str] = "cache-control"
    flags: _Flags = _Flags.NONE
    max_age_secs: int | None = None
    max_stale_secs: int | None = None
    min_fresh_secs: int | None = None
    s_max_age_secs: int | None = None

    def no_cache(self) -> bool:
        """Whether ``no-cache`` is set."""
        return _Flags.NO_CACHE in self.flags

    def no_store(self) -> bool:
        """Whether ``no-store`` is set."""
        return _Flags.NO_STORE in self.flags

    def no_transform(self) -> bool:
        """Whether ``no-transform`` is set."""
        return _Flags.NO_TRANSFORM in self.flags

    def only_if_cached(self) -> bool:
        """Whether ``only-if-cached`` is set."""
        return _Flags.ONLY_IF_CACHED in self.flags

    def public(self) -> bool:
        """Whether ``public`` is set."""
        return _Flags.PUBLIC in self.flags

    def private(self) -> bool:
        """Whether ``private`` is set."""
        return _Flags.PRIVATE in self.flags

    def max_age(self) -> timedelta | None:
        """The ``max-age`` value, if set."""
        return _as_delta(self.max_age_secs)

    def max_stale(self) -> timedelta | None:
        """The ``max-stale`` value, if set."""
        return _as_delta(self.max_stale_secs)

    def min_fresh(self) -> timedelta | None:
        """The ``min-fresh`` value, if set."""
        return _as_delta(self.min_fresh_secs)

    def s_max_age(self) -> timedelta | None:
        """The ``s-maxage`` value, if set."""
        return _as_delta(self.s_max_age_secs)

    def _with_flag(self, flag: _Flags) -> CacheControl:
        return replace(self, flags=self.flags | flag)

    def with_no_cache(self) -> CacheControl:
        """Return a copy with ``no-cache`` set."""
        return self._with_flag(_Flags.NO_CACHE)

    def with_no_store(self) -> CacheControl:
        """Return a copy with ``no-store`` set."""
        return self._with_flag(_Flags.NO_STORE)

    def with_no_transform(self) -> CacheControl:
        """Return a copy with ``no-transform`` set."""
        return self._with_flag(_Flags.NO_TRANSFORM)

    def with_only_if_cached(self) -> CacheControl:
        """Return a copy with ``only-if-cached`` set."""
        return self._with_flag(_Flags.ONLY_IF_CACHED)

    def with_private(self) -> CacheControl:
        """Return a copy with ``private`` set."""
        return self._with_flag(_Flags.PRIVATE)

    def with_public(self) -> CacheControl:
        """Return a copy with ``public`` set."""
        return self._with_flag(_Flags.PUBLIC)

    def with_max_age(self, delta: timedelta) -> CacheControl:
        """Return a copy with ``max-age`` set, in whole seconds."""
        return replace(self, max_age_secs=_whole_seconds(delta))

    def with_max_stale(self, delta: timedelta) -> CacheControl:
        """Return a copy with ``max-stale`` set, in whole seconds."""
        return replace(self, max_stale_secs=_whole_seconds(delta))

    def with_min_fresh(self, delta: timedelta) -> CacheControl:
        """Return a copy with ``min-fresh`` set, in whole seconds."""
        return replace(self, min_fresh_secs=_whole_seconds(delta))

    def with_s_max_age(self, delta: timedelta) -> CacheControl:
        """Return a copy with ``s-maxage`` set, in whole seconds."""
        return replace(self, s_max_age_secs=_whole_seconds(delta))

    @classmethod
    def decode(cls, values: Iterable[str]) -> CacheControl:
        flags = _Flags.NONE
        seconds: dict[str, int] = {}
        for item in split_csv(values):
            flag = _FLAGS_BY_NAME.get(item)
            if flag is not None:
                flags |= flag
                continue
            key, sep, arg = item.partition("=")
            if not sep or not arg:
                continue
            field_name = _FIELDS_BY_NAME.get(key)
            if field_name is None:
                continue
            seconds[field_name] = parse_seconds(arg.strip('"'))
        return cls(flags, **seconds)

    def encode(self) -> list[str]:
        parts = [name for flag, name in _FLAG_DIRECTIVES if flag in self.flags]
        for name, field_name in _ARG_DIRECTIVES:
            value = getattr(self, field_name)
            if value is not None:
                parts.append(f"{name}={value}")
        return [", ".join(parts)]