"""Percent-encoding of URL path segments."""

from __future__ import annotations

_HEX = "0123456789ABCDEF"
_ALLOWED_PUNCTUATION = frozenset(b"-._~!$&'()*+,;=:@")


def should_escape_for_path_segment(c: int) -> bool:
    """Return whether byte ``c`` must be escaped in an RFC 3986 segment.

    Everything outside unreserved characters, sub-delims, ':' and '@' is
    escaped.
    """
    if (
        ord("A") <= c <= ord("Z")
        or ord("a") <= c <= ord("z")
        or ord("0") <= c <= ord("9")
    ):
        return False
    return c not in _ALLOWED_PUNCTUATION


def encode_path_segment(s: str) -> str:
    """Percent-encode ``s`` so it matches the RFC 3986 'segment' grammar.

    The string is encoded as UTF-8 and each byte needing escape becomes
    ``%XX`` with upper-case hex digits.
    """
    raw = s.encode("utf-8")
    if not any(should_escape_for_path_segment(c) for c in raw):
        return s
    return "".join(
        f"%{_HEX[c >> 4]}{_HEX[c & 15]}"
        if should_escape_for_path_segment(c)
        else chr(c)
        for c in raw
    )