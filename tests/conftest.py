import io

import pytest

from deno_trailer.packer import build_packed
from deno_trailer.protocol import MAGIC_TRAILER


class ShortReads(io.BytesIO):
    """Reports a full length but hands back at most half of each read."""

    def read(self, size=-1):
        data = super().read(size)
        return data[: len(data) // 2]


@pytest.fixture
def short_reads():
    return ShortReads


@pytest.fixture
def write_packed(tmp_path):
    def _write(bundle: bytes, prefix: bytes = bytes(range(100)), metadata: bytes = b"",
               magic: bytes = MAGIC_TRAILER, name: str = "app.bin"):
        p = tmp_path / name
        p.write_bytes(build_packed(prefix, bundle, metadata, magic))
        return p
    return _write
