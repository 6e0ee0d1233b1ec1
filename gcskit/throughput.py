"""A reader that yields the contents of a file several times over."""

from __future__ import annotations

import io
from typing import BinaryIO

_READ_ALL_CHUNK = 1 << 16


class RepeatReader:
    """Reads the whole of ``f`` from its start, ``n`` times in a row.

    The file is rewound on the first read, so its position beforehand does
    not matter. A count of zero or less yields nothing.
    """

    def __init__(self, f: BinaryIO, n: int) -> None:
        self.f = f
        self.n = n
        self._first_seek_done = False

    def read(self, size: int = -1) -> bytes:
        """Read up to ``size`` bytes, or everything left if ``size`` < 0.

        Returns b"" once every repetition has been consumed.
        """
        if size is None or size < 0:
            return b"".join(iter(lambda: self.read(_READ_ALL_CHUNK), b""))

        if not self._first_seek_done:
            self._seek_start()
            self._first_seek_done = True
            if self.n <= 0:
                return b""
            self.n -= 1

        if size == 0:
            return b""

        while True:
            data = self.f.read(size)
            if data:
                return data
            if self.n <= 0:
                return b""
            self._seek_start()
            self.n -= 1

    def _seek_start(self) -> None:
        try:
            self.f.seek(0, io.SEEK_SET)
        except OSError as exc:
            raise OSError(f"Seek: {exc}") from exc