"""Plain HTTP request and response records and a request constructor."""

from __future__ import annotations

import threading
from dataclasses import dataclass, field
from typing import BinaryIO, Optional
from urllib.parse import urlsplit


@dataclass
class HttpRequest:
    """An outgoing HTTP request.

    ``content_length`` is the number of bytes ``body`` yields, or -1 when
    that is unknown. ``cancel``, when set, signals that the request should
    be abandoned.
    """

    method: str
    url: str
    headers: dict[str, str] = field(default_factory=dict)
    body: Optional[BinaryIO] = None
    content_length: int = 0
    host: str = ""
    proto: str = "HTTP/1.1"
    proto_major: int = 1
    proto_minor: int = 1
    cancel: Optional[threading.Event] = None

    @property
    def request_uri(self) -> str:
        """The path and query of the URL, as sent on the request line."""
        parts = urlsplit(self.url)
        uri = parts.path or "/"
        if parts.query:
            uri = f"{uri}?{parts.query}"
        return uri


@dataclass
class HttpResponse:
    """An HTTP response with a readable body."""

    status_code: int
    reason: str = ""
    headers: dict[str, str] = field(default_factory=dict)
    body: Optional[BinaryIO] = None
    proto: str = "HTTP/1.1"


def new_request(
    method: str,
    url: str,
    body: Optional[BinaryIO],
    body_length: int,
    user_agent: str,
    cancel: Optional[threading.Event] = None,
) -> HttpRequest:
    """Build a request carrying the given body and a User-Agent header.

    The URL is kept exactly as given, so escaped slashes in the path stay
    escaped. ``body_length`` must be the total size of ``body``, or -1 if
    unknown; no attempt is made to work it out.
    """
    return HttpRequest(
        method=method,
        url=url,
        headers={"User-Agent": user_agent},
        body=body,
        content_length=body_length,
        host=urlsplit(url).netloc,
        cancel=cancel,
    )