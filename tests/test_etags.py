from datetime import datetime, timedelta, timezone

import pytest

from typedheaders.core import HeaderError, encode_header, try_decode
from typedheaders.dates import LastModified
from typedheaders.etags import (
    EntityTag,
    ETag,
    IfMatch,
    IfNoneMatch,
    IfRange,
    InvalidETag,
)


@pytest.mark.parametrize(
    "raw, weak, tag",
    [
        ('"xyzzy"', False, "xyzzy"),
        ('W/"xyzzy"', True, "xyzzy"),
        ('""', False, ""),
        ('"foobar"', False, "foobar"),
        ('W/"weak-etag"', True, "weak-etag"),
        ('W/"\x65\x62"', True, "eb"),
        ('W/""', True, ""),
    ],
)
def test_etag_decode_valid(raw, weak, tag):
    etag = try_decode(ETag, [raw])
    assert etag == ETag(EntityTag(tag, weak))


@pytest.mark.parametrize(
    "raw",
    [
        "no-dquotes",
        'w/"the-first-w-is-case-sensitive"',
        "",
        '"unmatched-dquotes1',
        'unmatched-dquotes2"',
        'matched-"dquotes"',
        '"',
    ],
)
def test_etag_decode_invalid(raw):
    assert try_decode(ETag, [raw]) is None


def test_etag_parse_and_encode():
    etag = ETag.parse('W/"abc"')
    assert encode_header(etag) == [("etag", 'W/"abc"')]


def test_etag_parse_invalid():
    with pytest.raises(InvalidETag):
        ETag.parse("nope")


def test_entity_tag_comparisons():
    strong = EntityTag.parse('"foo"')
    weak = EntityTag.parse('W/"foo"')
    assert strong.strong_eq(strong)
    assert not strong.strong_eq(weak)
    assert strong.weak_eq(weak)
    assert not strong.weak_eq(EntityTag.parse('"bar"'))


def test_if_match_is_any():
    assert IfMatch.any().is_any()
    assert not IfMatch.from_etag(ETag.parse('"yolo"')).is_any()


def test_if_match_precondition_fails():
    if_match = IfMatch.from_etag(ETag.parse('"foo"'))
    assert not if_match.precondition_passes(ETag.parse('"bar"'))
    assert not if_match.precondition_passes(ETag.parse('W/"foo"'))


def test_if_match_precondition_passes():
    foo = ETag.parse('"foo"')
    assert IfMatch.from_etag(foo).precondition_passes(foo)


def test_if_match_precondition_any():
    assert IfMatch.any().precondition_passes(ETag.parse('"foo"'))


def test_if_match_decode_list_and_star():
    if_match = try_decode(IfMatch, ['"xyzzy", "r2d2xxxx"', '"c3piozzzz"'])
    assert if_match.precondition_passes(ETag.parse('"c3piozzzz"'))
    assert not if_match.precondition_passes(ETag.parse('"other"'))
    assert try_decode(IfMatch, ["*"]) == IfMatch.any()
    assert encode_header(IfMatch.any()) == [("if-match", "*")]


def test_if_none_match_precondition_fails():
    foo = ETag.parse('"foo"')
    if_none = IfNoneMatch.from_etag(foo)
    assert not if_none.precondition_passes(foo)
    assert not if_none.precondition_passes(ETag.parse('W/"foo"'))


def test_if_none_match_precondition_passes():
    if_none = IfNoneMatch.from_etag(ETag.parse('"foo"'))
    assert if_none.precondition_passes(ETag.parse('"bar"'))
    assert if_none.precondition_passes(ETag.parse('W/"bar"'))


def test_if_none_match_precondition_any():
    assert not IfNoneMatch.any().precondition_passes(ETag.parse('"foo"'))


@pytest.mark.parametrize(
    "raw",
    [
        '"xyzzy"',
        'W/"xyzzy"',
        '"xyzzy", "r2d2xxxx", "c3piozzzz"',
        'W/"xyzzy", W/"r2d2xxxx", W/"c3piozzzz"',
        "*",
    ],
)
def test_if_none_match_roundtrip(raw):
    decoded = try_decode(IfNoneMatch, [raw])
    assert encode_header(decoded) == [("if-none-match", raw)]


def test_if_none_match_decode_empty_raises():
    with pytest.raises(HeaderError):
        IfNoneMatch.decode([])


def test_if_range_is_modified_etag():
    etag = ETag.parse('"xyzzy"')
    if_range = IfRange.etag(etag)
    assert not if_range.is_modified(etag, None)
    assert if_range.is_modified(ETag.parse('W/"xyzzy"'), None)
    assert if_range.is_modified(None, None)


def test_if_range_is_modified_date():
    fetched = datetime(2020, 1, 1, tzinfo=timezone.utc)
    if_range = IfRange.date(fetched)
    assert not if_range.is_modified(None, LastModified(fetched))
    assert if_range.is_modified(None, LastModified(fetched + timedelta(seconds=5)))
    assert if_range.is_modified(None, None)


@pytest.mark.parametrize("raw", ["Sat, 29 Oct 1994 19:43:31 GMT", '"xyzzy"'])
def test_if_range_roundtrip(raw):
    decoded = try_decode(IfRange, [raw])
    assert encode_header(decoded) == [("if-range", raw)]


def test_if_range_invalid():
    assert try_decode(IfRange, ["this-is-invalid"]) is None