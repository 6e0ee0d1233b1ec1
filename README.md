# gcskit

Building blocks for clients of an object-storage service, in plain Python
with no third-party dependencies.

## What is inside

- **`gcskit.requests`**: dataclasses that describe storage operations:
  `CreateObjectRequest`, `CopyObjectRequest`, `MoveObjectRequest`,
  `ComposeObjectsRequest` (with `ComposeSource`), `ReadObjectRequest`,
  `StatObjectRequest`, `ListObjectsRequest`, `UpdateObjectRequest` and
  `DeleteObjectRequest`, plus the `Listing` result. `ByteRange` is a
  half-open `[start, limit)` range that prints as `[start, limit)`; its
  bounds must lie in `0 .. 2**64 - 1`, otherwise `ValueError` is raised.
  `CreateObjectRequest` likewise raises `ValueError` for a `crc32c` outside
  the 32-bit range or an `md5` that is not 16 bytes. The module also defines
  `MAX_SOURCES_PER_COMPOSE_REQUEST` (32), `MAX_COMPONENT_COUNT` (1024) and
  `MAX_BYTE_OFFSET`.
- **`gcskit.path`**: `encode_path_segment` percent-encodes a string (as UTF-8,
  with upper-case hex) so that it is a valid URL path segment under RFC 3986.
  `should_escape_for_path_segment` tells whether a single byte needs escaping.
- **`gcskit.multipart`**: `MultipartReader` streams a `multipart/related` body
  built from a sequence of `ContentTypedReader` parts, reading each part
  lazily. `content_type()` gives the matching header value. A boundary may be
  passed in; otherwise `random_boundary()` supplies 30 random bytes in hex.
- **`gcskit.request`**: `new_request` builds an `HttpRequest` with its
  `User-Agent` header and `host` set, keeping the URL exactly as given.
  `HttpResponse` represents a reply.
- **`gcskit.debugging`**: `DebuggingRoundTripper` wraps any object with
  `round_trip(req)` and `cancel_request(req)` methods and logs a full dump of
  each request and response at INFO level. `fill_in_content_length`,
  `dump_request` and `dump_response` are available on their own; the dump
  functions buffer the body and put it back, so it can still be read.
- **`gcskit.throughput`**: `RepeatReader` yields the whole contents of a file
  a given number of times in a row, rewinding it before the first read.
- **`gcskit.speed`**: `read_once` times a random read of a given size within
  an object (time to first byte and to the full body) and returns a
  `ReadResult`. `percentile` picks a truncated-index percentile from sorted
  values, and `describe_results` renders a text summary of latency and
  throughput percentiles (0, 50, 95, 99, 100).

## Examples

Encoding a path segment:

```python
from gcskit.path import encode_path_segment

encode_path_segment("photos/2015 summer.jpg")
# 'photos%2F2015%20summer.jpg'
```

Byte ranges:

```python
from gcskit.requests import ByteRange

str(ByteRange(10, 20))
# '[10, 20)'
```

Building a multipart body:

```python
import io
from gcskit.multipart import ContentTypedReader, MultipartReader

body = MultipartReader(
    [ContentTypedReader("text/plain", io.BytesIO(b"hi"))], boundary="b"
)
body.content_type()
# 'multipart/related; boundary=b'
body.read()
# b'--b\r\nContent-Type: text/plain\r\n\r\nhi\r\n--b--\r\n'
```

Repeating a file's contents:

```python
import io
from gcskit.throughput import RepeatReader

RepeatReader(io.BytesIO(b"ab"), 3).read()
# b'ababab'
```

Summarizing latencies:

```python
from gcskit.speed import percentile

percentile(sorted([5, 1, 3, 2, 4]), 50)
# 3
```

## What this package does not do

It contains no client that talks to a storage service. There is no bucket
implementation, no authentication, no retrying or backoff, and no code that
sends the JSON bodies for metadata updates. `read_once` and
`DebuggingRoundTripper` work with whatever bucket or round-tripper object you
pass them. The package installs no command-line programs.

## Requirements

Python 3.10 or later. The test suite uses pytest (`pip install .[test]`).