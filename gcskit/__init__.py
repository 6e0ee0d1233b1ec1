"""Building blocks for object-storage clients: request types, path encoding, multipart bodies, HTTP helpers and read timing."""

__version__ = "0.1.0"

__all__ = [
    "debugging",
    "multipart",
    "path",
    "request",
    "requests",
    "speed",
    "throughput",
]