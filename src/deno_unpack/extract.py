from __future__ import annotations

from typing import BinaryIO
from warnings import warn

from deno_trailer.errors import InvalidRange, TruncatedPayload, UnpackIOError
from deno_trailer.protocol import TRAILER_LEN
from deno_trailer.reader import source_length


def payload_length(bundle_offset: int, metadata_offset: int) -> int:
    # Compare first: unsigned offsets must never wrap into a huge length.
    if metadata_offset < bundle_offset:
        raise InvalidRange(f"bundle {bundle_offset} > metadata {metadata_offset}")
    return metadata_offset - bundle_offset


def check_bundle_range(f: BinaryIO, bundle_offset: int, metadata_offset: int) -> int:
    """Validate [bundle_offset, metadata_offset) against the length of `f`.

    Returns the bundle length. A range ending past end of file fails as
    truncated before anything is read.
    """
    length = payload_length(bundle_offset, metadata_offset)

    try:
        total = source_length(f)
    except OSError as e:
        raise UnpackIOError(str(e), stage="payload") from e

    if metadata_offset > total:
        raise TruncatedPayload(f"bundle ends at {metadata_offset}, file is {total} bytes")

    if metadata_offset > total - TRAILER_LEN:
        warn(f"Bundle range [{bundle_offset}, {metadata_offset}) overlaps the trailer")
    if length == 0:
        warn(f"Empty bundle at offset {bundle_offset}")
    return length


def extract_payload(f: BinaryIO, bundle_offset: int, metadata_offset: int) -> bytes:
    """Read the bundle bytes [bundle_offset, metadata_offset) from `f`."""
    length = check_bundle_range(f, bundle_offset, metadata_offset)

    try:
        f.seek(bundle_offset)
        data = f.read(length)
    except OSError as e:
        raise UnpackIOError(str(e), stage="payload") from e

    if len(data) != length:
        raise TruncatedPayload(f"read {len(data)} of {length} bytes")
    return data
