import pytest

from typedheaders.core import HeaderError, encode_header, try_decode
from typedheaders.uri import (
    ContentLocation,
    Host,
    InvalidReferer,
    InvalidServer,
    Location,
    Referer,
    Server,
)


@pytest.mark.parametrize("cls", [ContentLocation, Location])
def test_absolute_uri(cls):
    s = "http://www.example.net/index.html"
    assert try_decode(cls, [s]) == cls(s)


@pytest.mark.parametrize("cls", [ContentLocation, Location])
def test_relative_uri_with_fragment(cls):
    s = "/People.html#tim"
    assert try_decode(cls, [s]) == cls(s)


def test_location_encode():
    assert encode_header(Location("/next")) == [("location", "/next")]
    assert encode_header(ContentLocation("/here")) == [("content-location", "/here")]


def test_location_invalid_value():
    with pytest.raises(HeaderError):
        Location.decode(["bad\nvalue"])


def test_referer_from_str():
    referer = Referer.from_str("/People.html#tim")
    assert referer.encode() == ["/People.html#tim"]
    assert try_decode(Referer, ["/People.html#tim"]) == referer


def test_server_round_trip():
    server = Server.from_str("hyper/0.12.2")
    assert server.as_str() == "hyper/0.12.2"
    assert str(server) == "hyper/0.12.2"
    assert encode_header(server) == [("server", "hyper/0.12.2")]
    assert try_decode(Server, ["CERN/3.0 libwww/2.17"]) == Server("CERN/3.0 libwww/2.17")


def test_server_invalid():
    with pytest.raises(InvalidServer):
        Server.from_str("caf\u00e9")
    with pytest.raises(HeaderError):
        Server.decode(["a", "b"])


def test_server_ordering():
    assert sorted([Server("b"), Server("a")]) == [Server("a"), Server("b")]


def test_host_with_port():
    host = Host.decode(["example.com:8080"])
    assert host.hostname() == "example.com"
    assert host.port() == 8080
    assert str(host) == "example.com:8080"
    assert encode_header(host) == [("host", "example.com:8080")]


def test_host_without_port():
    host = Host.decode(["example.com"])
    assert host.hostname() == "example.com"
    assert host.port() is None


def test_host_ipv6():
    host = Host("[::1]:443")
    assert host.hostname() == "[::1]"
    assert host.port() == 443


def test_host_equality_ignores_case():
    assert Host("Example.COM") == Host("example.com")
    assert hash(Host("Example.COM")) == hash(Host("example.com"))


@pytest.mark.parametrize("text", ["exa mple.com", "", "example.com:port", "a:1:2", "example.com:70000"])
def test_host_invalid(text):
    with pytest.raises(HeaderError):
        Host.decode([text])


def test_host_constructor_invalid():
    with pytest.raises(ValueError):
        Host("bad host")