"""Deno Trailer - Packaged executable trailer format."""
from .errors import (
    UnpackError,
    TruncatedTrailer,
    InvalidMagic,
    InvalidRange,
    TruncatedPayload,
    UnpackIOError,
)
from .reader import read_trailer, u64_from_bytes

__all__ = [
    "UnpackError",
    "TruncatedTrailer",
    "InvalidMagic",
    "InvalidRange",
    "TruncatedPayload",
    "UnpackIOError",
    "read_trailer",
    "u64_from_bytes",
]
