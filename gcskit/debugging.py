"""A round tripper that logs full HTTP requests and responses."""

from __future__ import annotations

import io
import logging
from typing import Any, Optional

from gcskit.request import HttpRequest, HttpResponse

_default_logger = logging.getLogger(__name__)


def fill_in_content_length(req: HttpRequest) -> None:
    """Buffer the request body so that its content length is known."""
    if req.body is None:
        req.content_length = 0
        return

    try:
        contents = req.body.read()
    except Exception as exc:
        raise OSError(f"ReadAll: {exc}") from exc

    req.body.close()
    req.content_length = len(contents)
    req.body = io.BytesIO(contents)


def _take_body(stream: Any) -> tuple[bytes, Optional[io.BytesIO]]:
    if stream is None:
        return b"", None
    data = stream.read()
    return data, io.BytesIO(data)


def dump_request(req: HttpRequest) -> bytes:
    """Render the request as it would go on the wire, body included.

    The body is buffered and put back, so the request can still be sent.
    """
    body, req.body = _take_body(req.body)
    lines = [f"{req.method} {req.request_uri} {req.proto}", f"Host: {req.host}"]
    lines.extend(f"{name}: {value}" for name, value in sorted(req.headers.items()))
    if req.content_length > 0 and "Content-Length" not in req.headers:
        lines.append(f"Content-Length: {req.content_length}")
    head = "\r\n".join(lines) + "\r\n\r\n"
    return head.encode("utf-8") + body


def dump_response(resp: HttpResponse) -> bytes:
    """Render the response with its body; the body is put back afterwards."""
    body, resp.body = _take_body(resp.body)
    status = f"{resp.proto} {resp.status_code}"
    if resp.reason:
        status = f"{status} {resp.reason}"
    lines = [status]
    lines.extend(f"{name}: {value}" for name, value in sorted(resp.headers.items()))
    head = "\r\n".join(lines) + "\r\n\r\n"
    return head.encode("utf-8") + body


class DebuggingRoundTripper:
    """Wraps a round tripper, logging every request and response in full."""

    def __init__(
        self, wrapped: Any, logger: Optional[logging.Logger] = None
    ) -> None:
        self.wrapped = wrapped
        self.logger = logger if logger is not None else _default_logger

    def round_trip(self, req: HttpRequest) -> HttpResponse:
        """Send ``req`` through the wrapped round tripper, logging both ways."""
        try:
            fill_in_content_length(req)
        except OSError as exc:
            raise OSError(f"fill_in_content_length: {exc}") from exc

        dumped = dump_request(req)
        self.logger.info(
            "========== REQUEST:\n%s", dumped.decode("utf-8", "replace")
        )

        resp = self.wrapped.round_trip(req)

        dumped = dump_response(resp)
        self.logger.info(
            "========== RESPONSE:\n%s", dumped.decode("utf-8", "replace")
        )
        self.logger.info("====================")
        return resp

    def cancel_request(self, req: HttpRequest) -> None:
        """Pass the cancellation through to the wrapped round tripper."""
        self.wrapped.cancel_request(req)