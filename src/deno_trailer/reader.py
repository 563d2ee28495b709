from __future__ import annotations

import os
import struct
from typing import BinaryIO

from deno_trailer.errors import InvalidMagic, TruncatedTrailer, UnpackIOError
from deno_trailer.protocol import MAGIC_TRAILER, OFFSET_LEN, TRAILER_LEN


def source_length(f: BinaryIO) -> int:
    """Total length of a seekable source, in bytes."""
    return f.seek(0, os.SEEK_END)


def u64_from_bytes(b: bytes) -> int:
    """Decode an unsigned 64-bit big-endian integer from exactly 8 bytes."""
    if len(b) != OFFSET_LEN:
        raise ValueError(f"Expected {OFFSET_LEN} bytes for u64, got {len(b)}")
    return struct.unpack(">Q", b)[0]


def read_trailer(f: BinaryIO) -> tuple[int, int]:
    """Read the 24-byte trailer at the end of `f`.

    Returns (bundle_offset, metadata_offset). The read position of `f`
    is left at end of file.
    """
    try:
        total = source_length(f)
        if total < TRAILER_LEN:
            raise TruncatedTrailer(f"{total} bytes, need {TRAILER_LEN}")

        f.seek(total - TRAILER_LEN)
        trailer = f.read(TRAILER_LEN)
    except OSError as e:
        raise UnpackIOError(str(e), stage="trailer") from e

    if len(trailer) < TRAILER_LEN:
        raise TruncatedTrailer(f"read {len(trailer)} of {TRAILER_LEN} bytes")

    magic = trailer[:8]
    if magic != MAGIC_TRAILER:
        raise InvalidMagic(f"found {magic!r}")

    # Fixed slices, so the 8-byte guard in u64_from_bytes cannot trip here.
    bundle_pos = u64_from_bytes(trailer[8:16])
    metadata_pos = u64_from_bytes(trailer[16:24])
    return bundle_pos, metadata_pos
