"""Random-read latency and throughput measurement within a large object."""

from __future__ import annotations

import random
import threading
import time
from dataclasses import dataclass
from typing import Any, Optional, Sequence

from gcskit.requests import ByteRange, ReadObjectRequest

PERCENTILES = (0, 50, 95, 99, 100)
DEFAULT_READ_SIZE = 1 << 21

_READ_CHUNK = 1 << 16


@dataclass(frozen=True)
class ReadResult:
    """The outcome of one timed read.

    Both durations are in seconds and are measured from the moment the
    reader was requested.
    """

    bytes_read: int
    first_byte_latency: float
    full_body_duration: float


def percentile(vals: Sequence[Any], n: int) -> Any:
    """Return the ``n``th percentile of the sorted, non-empty ``vals``.

    The index is truncated rather than interpolated.
    """
    if not vals:
        raise ValueError("percentile of an empty sequence")
    if not 0 <= n <= 100:
        raise ValueError(f"percentile must be in [0, 100], got {n}")
    if n == 0:
        return vals[0]
    if n == 100:
        return vals[-1]
    return vals[int((n / 100) * len(vals))]


def _with_fraction(whole: int, frac: int, digits: int) -> str:
    fraction = str(frac).rjust(digits, "0").rstrip("0")
    return f"{whole}.{fraction}" if fraction else str(whole)


def _format_duration(seconds: float) -> str:
    ns = round(seconds * 1e9)
    if ns == 0:
        return "0s"
    sign = "-" if ns < 0 else ""
    ns = abs(ns)

    if ns < 1_000:
        return f"{sign}{ns}ns"
    if ns < 1_000_000:
        return f"{sign}{_with_fraction(ns // 1_000, ns % 1_000, 3)}µs"
    if ns < 1_000_000_000:
        return f"{sign}{_with_fraction(ns // 1_000_000, ns % 1_000_000, 6)}ms"

    hours, rest = divmod(ns, 3_600_000_000_000)
    minutes, rest = divmod(rest, 60_000_000_000)
    secs = _with_fraction(rest // 1_000_000_000, rest % 1_000_000_000, 9)
    if hours:
        return f"{sign}{hours}h{minutes}m{secs}s"
    if minutes:
        return f"{sign}{minutes}m{secs}s"
    return f"{sign}{secs}s"


def _format_bandwidth(read_size: int, seconds: float) -> str:
    if seconds <= 0:
        return "+Inf"
    return f"{read_size / seconds / 1e6:f}"


def describe_results(results: Sequence[ReadResult], read_size: int) -> str:
    """Summarize latency and throughput percentiles over ``results``."""
    lines = [f"Made {len(results)} reads.", ""]

    latencies = sorted(r.first_byte_latency for r in results)
    lines.append("First byte latency stats:")
    for ptile in PERCENTILES:
        value = percentile(latencies, ptile)
        lines.append(f"  {ptile:3d} ptile: {_format_duration(value)}")

    durations = sorted(r.full_body_duration for r in results)
    lines.append("")
    lines.append("Full body stats:")
    for ptile in PERCENTILES:
        value = percentile(durations, ptile)
        lines.append(
            f"  {ptile:3d} ptile: {_format_duration(value)} "
            f"({_format_bandwidth(read_size, value)} MB/s)"
        )

    return "\n".join(lines) + "\n"


def read_once(
    bucket: Any,
    obj: Any,
    read_size: int,
    rng: Optional[random.Random] = None,
    cancel: Optional[threading.Event] = None,
) -> ReadResult:
    """Read ``read_size`` bytes at a random offset within ``obj`` and time it.

    ``obj`` needs ``name``, ``generation`` and ``size``; ``bucket`` needs
    ``new_reader(request, cancel=...)``.
    """
    if obj.size < read_size:
        raise ValueError(
            f"Object of size {obj.size} not large enough "
            f"for read size {read_size}"
        )

    rng = rng if rng is not None else random.Random()
    start_offset = rng.randrange(obj.size - read_size)
    req = ReadObjectRequest(
        name=obj.name,
        generation=obj.generation,
        range=ByteRange(start_offset, start_offset + read_size),
    )

    started = time.monotonic()
    reader = bucket.new_reader(req, cancel=cancel)
    failed = False
    try:
        if not reader.read(1):
            raise EOFError("Read: EOF")
        first_byte_latency = time.monotonic() - started

        rest = sum(len(chunk) for chunk in iter(lambda: reader.read(_READ_CHUNK), b""))
        full_body_duration = time.monotonic() - started
    except BaseException:
        failed = True
        raise
    finally:
        try:
            reader.close()
        except Exception as exc:
            if not failed:
                raise OSError(f"Close: {exc}") from exc

    return ReadResult(
        bytes_read=rest + 1,
        first_byte_latency=first_byte_latency,
        full_body_duration=full_body_duration,
    )