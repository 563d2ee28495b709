from __future__ import annotations

from pathlib import Path

from deno_trailer.errors import UnpackIOError
from deno_trailer.protocol import SOURCE_SUFFIX


def output_path_for(base: str | Path) -> Path:
    """Append the source suffix: `source` -> `source.ts`, `out/app` -> `out/app.ts`."""
    return Path(f"{base}{SOURCE_SUFFIX}")


def write_output(buffer: bytes, destination: Path) -> Path:
    """Write `buffer` to `destination`, creating parent directories."""
    destination = Path(destination)
    try:
        destination.parent.mkdir(parents=True, exist_ok=True)
        with open(destination, "wb") as f:
            f.write(buffer)
    except OSError as e:
        raise UnpackIOError(str(e), stage="output") from e
    return destination
