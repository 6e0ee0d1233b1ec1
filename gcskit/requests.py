"""Request and response records for bucket operations."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, BinaryIO, Optional

MAX_SOURCES_PER_COMPOSE_REQUEST = 32
"""The maximum number of sources a compose request may contain."""

MAX_COMPONENT_COUNT = 1024
"""The maximum number of components a composite object may have."""

MAX_BYTE_OFFSET = 2**64 - 1
"""The largest byte offset a ByteRange can express."""

MD5_SIZE = 16
_MAX_UINT32 = 2**32 - 1


@dataclass
class CreateObjectRequest:
    """A request to create an object.

    ``name`` must be non-empty, at most 1024 bytes of UTF-8, and free of line
    feeds and carriage returns. ``contents`` supplies the object's data.
    ``crc32c`` and ``md5``, when set, make creation fail on a checksum
    mismatch. A generation precondition of zero means the object must not
    exist.
    """

    name: str = ""
    contents: Optional[BinaryIO] = None
    content_type: str = ""
    content_language: str = ""
    content_encoding: str = ""
    cache_control: str = ""
    metadata: Optional[dict[str, str]] = None
    crc32c: Optional[int] = None
    md5: Optional[bytes] = None
    generation_precondition: Optional[int] = None
    meta_generation_precondition: Optional[int] = None

    def __post_init__(self) -> None:
        if self.crc32c is not None and not 0 <= self.crc32c <= _MAX_UINT32:
            raise ValueError(f"crc32c out of range: {self.crc32c}")
        if self.md5 is not None and len(self.md5) != MD5_SIZE:
            raise ValueError(
                f"md5 must be {MD5_SIZE} bytes, got {len(self.md5)}"
            )


@dataclass
class CopyObjectRequest:
    """A request to copy an object to a new name, preserving metadata.

    A source generation of zero means the latest generation.
    """

    src_name: str = ""
    dst_name: str = ""
    src_generation: int = 0
    src_meta_generation_precondition: Optional[int] = None


@dataclass
class MoveObjectRequest:
    """A request to move an object to a new name, preserving metadata.

    A source generation of zero means the latest generation.
    """

    src_name: str = ""
    dst_name: str = ""
    src_generation: int = 0
    src_meta_generation_precondition: Optional[int] = None


@dataclass
class ComposeSource:
    """One source of a compose request; generation zero means the latest."""

    name: str = ""
    generation: int = 0


@dataclass
class ComposeObjectsRequest:
    """A request to compose one or more objects into a composite object.

    ``sources`` must be non-empty; see MAX_SOURCES_PER_COMPOSE_REQUEST and
    MAX_COMPONENT_COUNT.
    """

    dst_name: str = ""
    dst_generation_precondition: Optional[int] = None
    dst_meta_generation_precondition: Optional[int] = None
    sources: list[ComposeSource] = field(default_factory=list)
    content_type: str = ""
    metadata: Optional[dict[str, str]] = None


@dataclass
class ByteRange:
    """A [start, limit) range of bytes within an object.

    A limit at or below start is an empty range. The effective range is the
    intersection with [0, L), L being the object's length.
    """

    start: int = 0
    limit: int = 0

    def __post_init__(self) -> None:
        for label, value in (("start", self.start), ("limit", self.limit)):
            if not 0 <= value <= MAX_BYTE_OFFSET:
                raise ValueError(f"{label} out of range: {value}")

    def __str__(self) -> str:
        return f"[{self.start}, {self.limit})"


@dataclass
class ReadObjectRequest:
    """A request to read an object; generation zero means the latest."""

    name: str = ""
    generation: int = 0
    range: Optional[ByteRange] = None


@dataclass
class StatObjectRequest:
    """A request for an object's metadata."""

    name: str = ""


@dataclass
class ListObjectsRequest:
    """A request to list objects.

    With a non-empty ``delimiter``, runs of names of the form
    ``<prefix><S><delimiter>...`` collapse into a single entry
    ``<prefix><S><delimiter>``. A ``max_results`` of zero means a default.
    """

    prefix: str = ""
    delimiter: str = ""
    continuation_token: str = ""
    max_results: int = 0


@dataclass
class Listing:
    """Objects and collapsed runs returned by a listing.

    A non-empty ``continuation_token`` means the listing is incomplete and
    may be continued by passing it back in a ListObjectsRequest.
    """

    objects: list[Any] = field(default_factory=list)
    collapsed_runs: list[str] = field(default_factory=list)
    continuation_token: str = ""


@dataclass
class UpdateObjectRequest:
    """A request to update an object's metadata.

    For each string field: None leaves it untouched, the empty string removes
    it, anything else sets it. In ``metadata``, a None value deletes the key
    and a string sets it; keys not mentioned are untouched.
    """

    name: str = ""
    generation: int = 0
    meta_generation_precondition: Optional[int] = None
    content_type: Optional[str] = None
    content_encoding: Optional[str] = None
    content_language: Optional[str] = None
    cache_control: Optional[str] = None
    metadata: Optional[dict[str, Optional[str]]] = None


@dataclass
class DeleteObjectRequest:
    """A request to delete an object; a missing object is not an error."""

    name: str = ""
    generation: int = 0
    meta_generation_precondition: Optional[int] = None