import pytest

from typedheaders.core import HeaderError, encode_header, try_decode
from typedheaders.cookies import Cookie, SetCookie


def test_parse():
    cookie = try_decode(Cookie, ["foo=bar"])
    assert cookie.get("foo") == "bar"
    assert cookie.get("bar") is None


def test_multiple_same_name():
    cookie = try_decode(Cookie, ["foo=bar; foo=baz"])
    assert cookie.get("foo") == "bar"


def test_multiple_lines():
    cookie = try_decode(Cookie, ["foo=bar", "lol = cat"])
    assert cookie.get("foo") == "bar"
    assert cookie.get("lol") == "cat"


def test_iter_skips_entries_without_equals():
    cookie = try_decode(Cookie, ["foo=bar; invalid ; ;; baz=quux; empty="])
    assert list(cookie) == [("foo", "bar"), ("baz", "quux"), ("empty", "")]
    assert len(cookie) == 3


def test_value_may_contain_equals():
    cookie = try_decode(Cookie, ["middle=equals=in=the=middle"])
    assert cookie.get("middle") == "equals=in=the=middle"


def test_cookie_encode_joins_lines():
    cookie = try_decode(Cookie, ["foo=bar", "baz=quux"])
    assert encode_header(cookie) == [("cookie", "foo=bar; baz=quux")]


def test_set_cookie_decode():
    set_cookie = try_decode(SetCookie, ["foo=bar", "baz=quux"])
    assert len(set_cookie.values) == 2
    assert set_cookie.values[0] == "foo=bar"
    assert set_cookie.values[1] == "baz=quux"


def test_set_cookie_encode():
    set_cookie = SetCookie(("foo=bar", "baz=quux"))
    assert encode_header(set_cookie) == [
        ("set-cookie", "foo=bar"),
        ("set-cookie", "baz=quux"),
    ]


def test_set_cookie_empty_is_error():
    with pytest.raises(HeaderError):
        SetCookie.decode([])


def test_set_cookie_rejects_control_characters():
    with pytest.raises(HeaderError):
        SetCookie.decode(["foo=\nbar"])