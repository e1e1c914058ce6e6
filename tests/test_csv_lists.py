import pytest

from typedheaders.core import HeaderError, encode_header, try_decode
from typedheaders.csv_lists import (
    AcceptRanges,
    AccessControlAllowHeaders,
    AccessControlAllowMethods,
    AccessControlExposeHeaders,
    AccessControlRequestHeaders,
    AccessControlRequestMethod,
    Allow,
    Connection,
    ContentEncoding,
)


def encoded(header):
    return [value for _, value in encode_header(header)]


@pytest.mark.parametrize(
    "cls", [AccessControlAllowHeaders, AccessControlExposeHeaders, AccessControlRequestHeaders]
)
def test_header_names_iter(cls):
    header = try_decode(cls, ["foo, bar"])
    assert list(header) == ["foo", "bar"]


@pytest.mark.parametrize(
    "cls, name",
    [
        (AccessControlAllowHeaders, "access-control-allow-headers"),
        (AccessControlExposeHeaders, "access-control-expose-headers"),
        (AccessControlRequestHeaders, "access-control-request-headers"),
    ],
)
def test_header_names_from_names(cls, name):
    header = cls.from_names(["cache-control", "if-range"])
    assert encode_header(header) == [(name, "cache-control, if-range")]


def test_allow_headers_with_invalid():
    header = try_decode(AccessControlAllowHeaders, ["foo foo, bar"])
    assert list(header) == []


def test_expose_headers_skips_invalid():
    header = try_decode(AccessControlExposeHeaders, ["foo foo, bar"])
    assert list(header) == ["bar"]


def test_from_names_lowercases():
    header = AccessControlRequestHeaders.from_names(["Accept-Language", "Date"])
    assert encoded(header) == ["accept-language, date"]


def test_from_names_rejects_invalid():
    with pytest.raises(ValueError):
        AccessControlAllowHeaders.from_names(["bad name"])


def test_allow_methods_iter():
    allowed = try_decode(AccessControlAllowMethods, ["GET, PUT"])
    assert list(allowed) == ["GET", "PUT"]


def test_allow_methods_from_methods():
    allowed = AccessControlAllowMethods.from_methods(["GET", "PUT"])
    assert encode_header(allowed) == [("access-control-allow-methods", "GET, PUT")]


def test_allow_joins_multiple_values():
    allow = try_decode(Allow, ["GET", "POST, fOObAr"])
    assert list(allow) == ["GET", "POST", "fOObAr"]


def test_allow_roundtrip():
    allow = Allow.from_methods(["GET", "POST"])
    assert Allow.decode(allow.encode()) == allow


def test_allow_rejects_invalid_method():
    with pytest.raises(ValueError):
        Allow.from_methods(["GE T"])


def test_request_method_roundtrip():
    method = AccessControlRequestMethod("GET")
    assert encode_header(method) == [("access-control-request-method", "GET")]
    assert AccessControlRequestMethod.decode(["PATCH"]).method == "PATCH"


def test_request_method_invalid():
    with pytest.raises(HeaderError):
        AccessControlRequestMethod.decode(["GE T"])
    with pytest.raises(HeaderError):
        AccessControlRequestMethod.decode([])


def test_accept_ranges_bytes():
    assert encode_header(AcceptRanges.bytes()) == [("accept-ranges", "bytes")]
    assert try_decode(AcceptRanges, ["bytes"]) == AcceptRanges.bytes()


def test_connection_contains():
    conn = Connection.keep_alive()
    assert not conn.contains("close")
    assert not conn.contains("upgrade")
    assert conn.contains("keep-alive")
    assert conn.contains("Keep-Alive")


def test_connection_constructors():
    assert encoded(Connection.close()) == ["close"]
    assert encoded(Connection.upgrade()) == ["upgrade"]


def test_connection_from_names():
    conn = Connection.from_names(["Upgrade", "keep-alive"])
    assert encoded(conn) == ["upgrade, keep-alive"]
    assert conn.contains("UPGRADE")


def test_content_encoding_contains():
    enc = ContentEncoding.gzip()
    assert enc.contains("gzip")
    assert not enc.contains("br")
    assert not enc.contains("GZIP")


def test_content_encoding_decode():
    enc = try_decode(ContentEncoding, ["gzip, br"])
    assert enc.contains("br")
    assert encoded(enc) == ["gzip, br"]


def test_decode_rejects_control_characters():
    with pytest.raises(HeaderError):
        Allow.decode(["GET\x01"])
    assert try_decode(Connection, []) is None