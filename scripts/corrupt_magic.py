import sys
from pathlib import Path

from deno_trailer.protocol import TRAILER_LEN

def main():
    if len(sys.argv) != 2:
        print("Usage: corrupt_magic.py <file>")
        raise SystemExit(2)

    p = Path(sys.argv[1])
    b = bytearray(p.read_bytes())
    if len(b) < TRAILER_LEN:
        print("File too small to hold a trailer.")
        raise SystemExit(2)

    # Flip one bit in the first magic byte of the trailer.
    idx = len(b) - TRAILER_LEN
    b[idx] ^= 0x01
    p.write_bytes(bytes(b))
    print(f"Corrupted 1 byte at offset {idx} in {p}")

if __name__ == "__main__":
    main()
