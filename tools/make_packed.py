"""Build a synthetic packaged executable for demos and end-to-end tests.

Layout: [runtime prefix | bundle | metadata | trailer(24)]
"""
import os
import sys
from pathlib import Path

from deno_trailer.packer import build_packed

DEFAULT_PREFIX_LEN = 100
DEMO_SOURCE = b'console.log("hello from the bundle");\n'
DEMO_METADATA = b'{"argv":[],"unstable":false}'


def write_packed(out_path, bundle: bytes = DEMO_SOURCE, prefix_len: int = DEFAULT_PREFIX_LEN) -> Path:
    out = Path(out_path)
    out.parent.mkdir(parents=True, exist_ok=True)
    # Stand-in for the runtime binary.
    prefix = b"\x7fELF" + os.urandom(max(prefix_len - 4, 0))
    out.write_bytes(build_packed(prefix[:prefix_len], bundle, DEMO_METADATA))
    print(f"GENERATED: {out} (bundle {len(bundle)} bytes at offset {prefix_len})")
    return out


if __name__ == "__main__":
    # Usage:
    #   python tools/make_packed.py OUT_FILE [SOURCE_FILE] [--prefix-len N]
    args = [a for a in sys.argv[1:] if a]

    prefix_len = DEFAULT_PREFIX_LEN
    if "--prefix-len" in args:
        i = args.index("--prefix-len")
        if i + 1 >= len(args):
            raise SystemExit("--prefix-len requires a value")
        prefix_len = int(args[i + 1])
        args = args[:i] + args[i + 2:]

    if not args:
        print("Usage: make_packed.py OUT_FILE [SOURCE_FILE] [--prefix-len N]")
        raise SystemExit(2)

    bundle = Path(args[1]).read_bytes() if len(args) > 1 else DEMO_SOURCE
    write_packed(args[0], bundle, prefix_len)
