import io

import pytest

from gcskit.throughput import RepeatReader


def test_reads_contents_repeated():
    reader = RepeatReader(io.BytesIO(b"abc"), 3)
    assert reader.read() == b"abc" * 3


def test_zero_repeats_yields_nothing():
    reader = RepeatReader(io.BytesIO(b"abc"), 0)
    assert reader.read(10) == b""


def test_negative_repeats_yields_nothing():
    reader = RepeatReader(io.BytesIO(b"abc"), -2)
    assert reader.read() == b""


@pytest.mark.parametrize("chunk", [1, 2, 3, 5, 100])
def test_chunked_reads_match_full_read(chunk):
    content = b"hello world"
    reader = RepeatReader(io.BytesIO(content), 4)
    pieces = list(iter(lambda: reader.read(chunk), b""))
    assert b"".join(pieces) == content * 4
    assert all(len(p) <= chunk for p in pieces)


def test_rewinds_file_on_first_read():
    f = io.BytesIO(b"xyz")
    f.seek(0, io.SEEK_END)
    reader = RepeatReader(f, 2)
    assert reader.read() == b"xyzxyz"


def test_empty_file_yields_nothing():
    reader = RepeatReader(io.BytesIO(b""), 5)
    assert reader.read(4) == b""
    assert reader.n == 0


def test_stays_at_end_after_exhaustion():
    reader = RepeatReader(io.BytesIO(b"ab"), 1)
    assert reader.read() == b"ab"
    assert reader.read(1) == b""
    assert reader.read() == b""


def test_works_with_real_file(tmp_path):
    path = tmp_path / "data.bin"
    path.write_bytes(b"\x00\x01\x02")
    with path.open("rb") as f:
        reader = RepeatReader(f, 2)
        assert reader.read() == b"\x00\x01\x02" * 2