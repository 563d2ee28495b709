import hashlib
import json
from pathlib import Path

from deno_trailer.errors import UnpackError, UnpackIOError
from deno_trailer.protocol import DEFAULT_OUTPUT
from deno_trailer.reader import read_trailer

from .extract import check_bundle_range, extract_payload
from .output import output_path_for, write_output

CANONICAL_JSON_KW = {"sort_keys": True, "separators": (",", ":"), "ensure_ascii": False}


def canonical_json(obj) -> str:
    return json.dumps(obj, **CANONICAL_JSON_KW)


def _read_bundle(input_path: Path) -> tuple[int, int, bytes]:
    try:
        f = open(input_path, "rb")
    except OSError as e:
        raise UnpackIOError(str(e), stage="input") from e
    with f:
        bundle_pos, metadata_pos = read_trailer(f)
        data = extract_payload(f, bundle_pos, metadata_pos)
    return bundle_pos, metadata_pos, data


def unpack(input_path: Path, output_base: str | Path = DEFAULT_OUTPUT) -> dict:
    """Extract the embedded bundle of `input_path` into `<output_base>.ts`.

    Nothing is written until the bundle has been read in full, so a
    rejected input leaves no output file behind.
    """
    input_path = Path(input_path)
    bundle_pos, metadata_pos, data = _read_bundle(input_path)
    out = write_output(data, output_path_for(output_base))
    return {
        "status": "PASS",
        "input": str(input_path),
        "output": str(out),
        "bundle_offset": bundle_pos,
        "metadata_offset": metadata_pos,
        "length": len(data),
        "sha256": hashlib.sha256(data).hexdigest(),
    }


def inspect_trailer(input_path: Path) -> dict:
    """Report the trailer and bundle range of `input_path` without extracting anything."""
    input_path = Path(input_path)
    try:
        try:
            f = open(input_path, "rb")
        except OSError as e:
            raise UnpackIOError(str(e), stage="input") from e
        with f:
            bundle_pos, metadata_pos = read_trailer(f)
            length = check_bundle_range(f, bundle_pos, metadata_pos)
    except UnpackError as e:
        return {"status": "FAIL", "error_count": 1, "errors": [e.as_dict()]}

    return {
        "status": "PASS",
        "error_count": 0,
        "errors": [],
        "input": str(input_path),
        "bundle_offset": bundle_pos,
        "metadata_offset": metadata_pos,
        "length": length,
    }
