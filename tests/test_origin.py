import pytest

from typedheaders.core import HeaderError, encode_header, try_decode
from typedheaders.origin import AccessControlAllowOrigin, InvalidOrigin, Origin

SAMPLE = "http://web-platform.test:8000"


def test_origin_decode_and_encode():
    origin = try_decode(Origin, [SAMPLE])
    assert origin.scheme() == "http"
    assert origin.hostname() == "web-platform.test"
    assert origin.port() == 8000
    assert encode_header(origin) == [("origin", SAMPLE)]


def test_origin_null():
    assert try_decode(Origin, ["null"]) == Origin.NULL
    assert Origin.NULL.is_null()
    assert encode_header(Origin.NULL) == [("origin", "null")]


def test_null_parts_are_empty():
    assert Origin.NULL.scheme() == ""
    assert Origin.NULL.hostname() == ""
    assert Origin.NULL.port() is None


def test_trailing_slash_is_accepted_and_dropped():
    origin = Origin.from_value("https://example.com/")
    assert origin.hostname() == "example.com"
    assert origin.port() is None
    assert origin.encode() == ["https://example.com"]


@pytest.mark.parametrize(
    "value",
    ["http://example.com/path", "http://example.com?q=1", "example.com", "http://", ""],
)
def test_invalid_origins(value):
    assert try_decode(Origin, [value]) is None


def test_origin_requires_exactly_one_value():
    assert try_decode(Origin, [SAMPLE, SAMPLE]) is None


def test_try_from_parts():
    origin = Origin.try_from_parts("http", "web-platform.test", 8000)
    assert str(origin) == SAMPLE
    assert Origin.try_from_parts("https", "example.com").port() is None


def test_try_from_parts_invalid():
    with pytest.raises(InvalidOrigin):
        Origin.try_from_parts("http", "bad host", None)


def test_allow_origin_decode():
    allow = try_decode(AccessControlAllowOrigin, [SAMPLE])
    origin = allow.origin()
    assert origin.scheme() == "http"
    assert origin.hostname() == "web-platform.test"
    assert origin.port() == 8000
    assert encode_header(allow) == [("access-control-allow-origin", SAMPLE)]


def test_allow_origin_from_str():
    allow = AccessControlAllowOrigin.from_str(SAMPLE)
    origin = allow.origin()
    assert origin.scheme() == "http"
    assert origin.hostname() == "web-platform.test"
    assert origin.port() == 8000
    assert allow.encode() == [SAMPLE]


def test_allow_origin_from_str_rejects_star():
    with pytest.raises(HeaderError):
        AccessControlAllowOrigin.from_str("*")


def test_allow_origin_any():
    allow = try_decode(AccessControlAllowOrigin, ["*"])
    assert allow == AccessControlAllowOrigin.ANY
    assert allow.origin() is None
    assert allow.encode() == ["*"]


def test_allow_origin_null():
    allow = try_decode(AccessControlAllowOrigin, ["null"])
    assert allow == AccessControlAllowOrigin.NULL
    assert allow.encode() == ["null"]