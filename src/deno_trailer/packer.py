"""Trailer writer, the inverse of the reader. Used by fixtures and demo tooling."""
import struct

from deno_trailer.protocol import MAGIC_TRAILER, TRAILER_FMT


def pack_trailer(bundle_pos: int, metadata_pos: int, magic: bytes = MAGIC_TRAILER) -> bytes:
    return struct.pack(TRAILER_FMT, magic, bundle_pos, metadata_pos)


def build_packed(prefix: bytes, bundle: bytes, metadata: bytes = b"", magic: bytes = MAGIC_TRAILER) -> bytes:
    """Lay out [prefix | bundle | metadata | trailer] with the bundle offsets filled in."""
    bundle_pos = len(prefix)
    return prefix + bundle + metadata + pack_trailer(bundle_pos, bundle_pos + len(bundle), magic)
