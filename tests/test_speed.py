import io
import random
from dataclasses import dataclass

import pytest

from gcskit.speed import ReadResult, describe_results, percentile, read_once


@dataclass
class FakeObject:
    name: str
    generation: int
    size: int


class FakeReader(io.BytesIO):
    def __init__(self, data, close_error=None):
        super().__init__(data)
        self.closed_called = False
        self.close_error = close_error

    def close(self):
        self.closed_called = True
        super().close()
        if self.close_error is not None:
            raise self.close_error


class FakeBucket:
    def __init__(self, content, close_error=None):
        self.content = content
        self.close_error = close_error
        self.requests = []
        self.readers = []

    def new_reader(self, req, cancel=None):
        self.requests.append(req)
        data = self.content[req.range.start:req.range.limit]
        reader = FakeReader(data, self.close_error)
        self.readers.append(reader)
        return reader


def test_percentile_endpoints():
    vals = [1, 2, 3, 4]
    assert percentile(vals, 0) == 1
    assert percentile(vals, 100) == 4


def test_percentile_truncates_index():
    vals = [10, 20, 30, 40]
    assert percentile(vals, 50) == vals[2]
    assert percentile(vals, 99) == vals[3]


def test_percentile_rejects_empty_and_out_of_range():
    with pytest.raises(ValueError):
        percentile([], 50)
    with pytest.raises(ValueError):
        percentile([1], 101)
    with pytest.raises(ValueError):
        percentile([1], -1)


def test_read_once_reads_requested_range():
    content = bytes(range(256)) * 4
    bucket = FakeBucket(content)
    obj = FakeObject(name="big", generation=7, size=len(content))

    result = read_once(bucket, obj, 100, random.Random(1))

    assert result.bytes_read == 100
    req = bucket.requests[0]
    assert req.name == "big"
    assert req.generation == 7
    assert 0 <= req.range.start < len(content) - 100
    assert req.range.limit == req.range.start + 100
    assert result.full_body_duration >= result.first_byte_latency >= 0
    assert bucket.readers[0].closed_called


def test_read_once_object_too_small():
    bucket = FakeBucket(b"abc")
    obj = FakeObject(name="small", generation=1, size=3)
    with pytest.raises(ValueError, match="not large enough"):
        read_once(bucket, obj, 10, random.Random(0))
    assert bucket.requests == []


def test_read_once_empty_body_raises_and_closes():
    bucket = FakeBucket(b"")
    obj = FakeObject(name="o", generation=1, size=100)
    with pytest.raises(EOFError):
        read_once(bucket, obj, 10, random.Random(0))
    assert bucket.readers[0].closed_called


def test_read_once_close_error_reported():
    content = b"x" * 50
    bucket = FakeBucket(content, close_error=RuntimeError("boom"))
    obj = FakeObject(name="o", generation=1, size=50)
    with pytest.raises(OSError, match="Close"):
        read_once(bucket, obj, 5, random.Random(0))


def test_describe_results_structure():
    results = [
        ReadResult(bytes_read=10, first_byte_latency=0.001, full_body_duration=1.0),
        ReadResult(bytes_read=10, first_byte_latency=0.002, full_body_duration=2.0),
    ]
    text = describe_results(results, 1_000_000)
    lines = text.splitlines()
    assert lines[0] == "Made 2 reads."
    assert "First byte latency stats:" in lines
    assert "Full body stats:" in lines
    assert sum("ptile:" in line for line in lines) == 10
    assert "    0 ptile: 1ms" in lines


def test_describe_results_formats_durations_and_bandwidth():
    results = [
        ReadResult(bytes_read=10, first_byte_latency=0.0015, full_body_duration=1.0)
    ]
    text = describe_results(results, 1_000_000)
    assert "   50 ptile: 1.5ms" in text
    assert "  100 ptile: 1s (1.000000 MB/s)" in text


def test_describe_results_empty_raises():
    with pytest.raises(ValueError):
        describe_results([], 10)