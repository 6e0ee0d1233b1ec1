"""Streaming generation of multipart/related HTTP bodies."""

from __future__ import annotations

import io
import os
from dataclasses import dataclass
from typing import BinaryIO, Iterable, Optional

_BOUNDARY_BYTES = 30


@dataclass
class ContentTypedReader:
    """A part of a multipart body: its content type and a reader for it."""

    content_type: str
    reader: BinaryIO


def random_boundary() -> str:
    """Return a fresh random boundary of 30 bytes in hex."""
    return os.urandom(_BOUNDARY_BYTES).hex()


class MultipartReader:
    """A reader that yields a multipart body built from the given parts.

    Each part is preceded by a boundary line and its Content-Type header,
    and the body ends with the closing boundary. Parts are read lazily.
    """

    def __init__(
        self,
        ctrs: Iterable[ContentTypedReader],
        boundary: Optional[str] = None,
    ) -> None:
        self.boundary = boundary if boundary is not None else random_boundary()
        self._readers: list[BinaryIO] = []
        for index, ctr in enumerate(ctrs):
            lead = "" if index == 0 else "\r\n"
            header = (
                f"{lead}--{self.boundary}\r\n"
                f"Content-Type: {ctr.content_type}\r\n"
                "\r\n"
            )
            self._readers.append(io.BytesIO(header.encode("utf-8")))
            self._readers.append(ctr.reader)
        trailer = f"\r\n--{self.boundary}--\r\n"
        self._readers.append(io.BytesIO(trailer.encode("utf-8")))
        self._index = 0

    def read(self, size: int = -1) -> bytes:
        """Read up to ``size`` bytes, or everything left if ``size`` < 0."""
        if size is None or size < 0:
            remaining = self._readers[self._index:]
            self._index = len(self._readers)
            return b"".join(reader.read() for reader in remaining)

        out = bytearray()
        while len(out) < size and self._index < len(self._readers):
            chunk = self._readers[self._index].read(size - len(out))
            if chunk:
                out += chunk
            else:
                self._index += 1
        return bytes(out)

    def content_type(self) -> str:
        """The Content-Type header value for a request using this body."""
        return f"multipart/related; boundary={self.boundary}"