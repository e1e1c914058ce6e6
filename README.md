# typedheaders

Typed HTTP header fields for Python. Each header is a small immutable class
that is decoded from the raw string values of one header field and encoded
back into them. Invalid input raises `HeaderError`, a subclass of
`ValueError`.

The package has no runtime dependencies and needs Python 3.10 or later.

## Installing

    pip install typedheaders

## Decoding and encoding

Every header class has:

- `decode(values)`, a class method that takes an iterable of raw values and
  raises `HeaderError` when they do not form a valid header;
- `encode()`, which returns the list of values to send;
- `header_name`, the lower-case field name.

`typedheaders.core` adds helpers that work with any header class:

```python
from typedheaders.core import decode_header, try_decode, encode_header
from typedheaders.cache_control import CacheControl

cc = decode_header(CacheControl, ["max-age=100, private"])
assert cc.private()

# None when the values are missing or invalid
assert try_decode(CacheControl, ["max-age=lolz"]) is None

encode_header(CacheControl().with_no_cache().with_private())
# [('cache-control', 'no-cache, private')]
```

The same module holds the lower-level pieces the headers share: `FlatCsv`
(a separator-joined list held as one value), `split_csv`, `just_one`,
`is_token` and `is_valid_header_value`.

## Available headers

| Module | Contents |
| --- | --- |
| `typedheaders.literal` | `Expect`, `AccessControlAllowCredentials`, `SecWebsocketVersion`, `Pragma` |
| `typedheaders.durations` | `Age`, `AccessControlMaxAge`, `parse_seconds` |
| `typedheaders.websocket` | `SecWebsocketKey`, `SecWebsocketAccept` |
| `typedheaders.dates` | `HttpDate`, `Date`, `Expires`, `LastModified`, `IfModifiedSince`, `IfUnmodifiedSince`, `RetryAfter` |
| `typedheaders.uri` | `ContentLocation`, `Location`, `Referer`, `Server`, `Host` |
| `typedheaders.etags` | `EntityTag`, `ETag`, `IfMatch`, `IfNoneMatch`, `IfRange` |
| `typedheaders.content` | `ContentLength`, `ContentType` |
| `typedheaders.csv_lists` | `AcceptRanges`, `AccessControlAllowHeaders`, `AccessControlAllowMethods`, `AccessControlExposeHeaders`, `AccessControlRequestHeaders`, `AccessControlRequestMethod`, `Allow`, `Connection`, `ContentEncoding` |
| `typedheaders.origin` | `Origin`, `AccessControlAllowOrigin` |
| `typedheaders.cookies` | `Cookie`, `SetCookie` |
| `typedheaders.authorization` | `Authorization`, `ProxyAuthorization`, `Credentials`, `Basic`, `Bearer` |
| `typedheaders.cache_control` | `CacheControl` |

Constructors that take a string raise their own `ValueError` subclasses:
`InvalidETag` from `ETag.parse`, `InvalidReferer` from `Referer.from_str`,
`InvalidServer` from `Server.from_str`, `InvalidOrigin` from
`Origin.try_from_parts` and `InvalidBearerToken` from `Authorization.bearer`.

## Examples

Dates accept IMF-fixdate, RFC 850 and asctime forms and always encode as
IMF-fixdate. Naive datetimes are taken to be UTC.

```python
from datetime import timedelta
from typedheaders.dates import RetryAfter

RetryAfter.decode(["Sunday, 06-Nov-94 08:49:37 GMT"]).encode()
# ['Sun, 06 Nov 1994 08:49:37 GMT']
RetryAfter.delay(timedelta(seconds=300)).encode()
# ['300']
```

Conditional requests:

```python
from typedheaders.etags import ETag, IfNoneMatch

etag = ETag.parse('"foo"')
if_none = IfNoneMatch.from_etag(etag)
assert not if_none.precondition_passes(etag)
```

Authorization. `Authorization.decode` and `ProxyAuthorization.decode` take a
`credentials` argument, `Basic` by default, that selects the scheme they
accept:

```python
from typedheaders.authorization import Authorization, Bearer

password = "password"
auth = Authorization.basic("Aladdin", password)
assert Authorization.decode(auth.encode()).username() == "Aladdin"

bearer = Authorization.decode(["Bearer token"], credentials=Bearer)
assert bearer.token() == "token"
```

WebSocket handshake:

```python
from typedheaders.websocket import SecWebsocketKey, SecWebsocketAccept

key = SecWebsocketKey.decode(["dGhlIHNhbXBsZSBub25jZQ=="])
SecWebsocketAccept.from_key(key).encode()
# ['s3pPLMBiTxaQ9kYGzzhZRbK+xOo=']
```

Cookies:

```python
from typedheaders.cookies import Cookie

cookie = Cookie.decode(["session=placeholder", "lang = en-US"])
cookie.get("lang")  # 'en-US'
len(cookie)         # 2
```

## What it does not do

- There is no header-map type. Headers are decoded from, and encoded to, the
  values of one field at a time; collecting those values from a request or
  response is left to the caller.
- Only the fields listed above are covered. There are no classes for fields
  such as Range, Content-Range, Content-Disposition, Transfer-Encoding,
  Upgrade, User-Agent or Vary.

## Running the tests

    pip install -e ".[test]"
    pytest