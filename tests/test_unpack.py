import hashlib
import os

import pytest

from deno_trailer import InvalidMagic, TruncatedPayload, TruncatedTrailer, UnpackIOError
from deno_trailer.packer import pack_trailer
from deno_unpack import inspect_trailer, output_path_for, unpack


def test_concrete_scenario(write_packed, tmp_path):
    payload = os.urandom(50)
    exe = write_packed(payload, prefix=os.urandom(100))

    report = unpack(exe, tmp_path / "source")

    out = tmp_path / "source.ts"
    assert out.read_bytes() == payload
    assert report["status"] == "PASS"
    assert report["bundle_offset"] == 100
    assert report["metadata_offset"] == 150
    assert report["length"] == 50
    assert report["sha256"] == hashlib.sha256(payload).hexdigest()
    assert report["output"] == str(out)


def test_empty_bundle_round_trip(write_packed, tmp_path):
    exe = write_packed(b"")
    with pytest.warns(UserWarning):
        unpack(exe, tmp_path / "empty")
    assert (tmp_path / "empty.ts").read_bytes() == b""


def test_bad_magic_writes_nothing(write_packed, tmp_path):
    exe = write_packed(b"P" * 50, magic=b"XXXXXXXX")
    with pytest.raises(InvalidMagic):
        unpack(exe, tmp_path / "nested" / "source")
    assert not (tmp_path / "nested").exists()


def test_short_file(tmp_path):
    exe = tmp_path / "tiny.bin"
    exe.write_bytes(b"d3n0l4nd")
    with pytest.raises(TruncatedTrailer):
        unpack(exe, tmp_path / "source")
    assert not (tmp_path / "source.ts").exists()


def test_missing_input_is_io_error(tmp_path):
    with pytest.raises(UnpackIOError) as exc:
        unpack(tmp_path / "missing.bin", tmp_path / "source")
    assert exc.value.stage == "input"
    assert exc.value.code == "E_IO"


def test_creates_parent_directories(write_packed, tmp_path):
    exe = write_packed(b"let x = 1;")
    unpack(exe, tmp_path / "a" / "b" / "app")
    assert (tmp_path / "a" / "b" / "app.ts").read_bytes() == b"let x = 1;"


def test_bare_filename_output(write_packed, tmp_path, monkeypatch):
    exe = write_packed(b"bare")
    monkeypatch.chdir(tmp_path)
    unpack(exe)
    assert (tmp_path / "source.ts").read_bytes() == b"bare"


def test_output_directory_collision_is_io_error(write_packed, tmp_path):
    exe = write_packed(b"data")
    (tmp_path / "taken.ts").mkdir()
    with pytest.raises(UnpackIOError) as exc:
        unpack(exe, tmp_path / "taken")
    assert exc.value.stage == "output"


def test_idempotent_and_truncates_previous_output(write_packed, tmp_path):
    out = tmp_path / "source.ts"
    out.write_bytes(b"a much longer previous output than the bundle")
    exe = write_packed(b"short")

    unpack(exe, tmp_path / "source")
    first = out.read_bytes()
    unpack(exe, tmp_path / "source")

    assert first == b"short"
    assert out.read_bytes() == first


def test_output_path_for():
    assert str(output_path_for("source")) == "source.ts"
    assert output_path_for("out/app").as_posix() == "out/app.ts"


def test_inspect_reports_without_writing(write_packed, tmp_path):
    exe = write_packed(b"P" * 50, metadata=b"meta")
    result = inspect_trailer(exe)
    assert result == {
        "status": "PASS",
        "error_count": 0,
        "errors": [],
        "input": str(exe),
        "bundle_offset": 100,
        "metadata_offset": 150,
        "length": 50,
    }
    assert sorted(p.name for p in tmp_path.iterdir()) == ["app.bin"]


def test_inspect_failure_shape(write_packed):
    exe = write_packed(b"P", magic=b"XXXXXXXX")
    result = inspect_trailer(exe)
    assert result["status"] == "FAIL"
    assert result["error_count"] == 1
    assert result["errors"][0]["code"] == "E_TRAILER_MAGIC"
    assert result["errors"][0]["stage"] == "trailer"


def test_inspect_agrees_with_unpack_on_bundle_past_eof(tmp_path):
    exe = tmp_path / "long.bin"
    exe.write_bytes(b"\x00" * 120 + pack_trailer(100, 10_000))

    result = inspect_trailer(exe)
    assert result["status"] == "FAIL"
    assert result["errors"][0]["code"] == "E_PAYLOAD_TRUNCATED"
    assert result["errors"][0]["stage"] == "payload"

    with pytest.raises(TruncatedPayload):
        unpack(exe, tmp_path / "source")


def test_inspect_reports_invalid_range(tmp_path):
    exe = tmp_path / "backwards.bin"
    exe.write_bytes(b"\x00" * 200 + pack_trailer(150, 100))
    result = inspect_trailer(exe)
    assert result["errors"][0]["code"] == "E_PAYLOAD_RANGE"


def test_truncated_bundle_file(tmp_path):
    exe = tmp_path / "cut.bin"
    exe.write_bytes(b"\x00" * 120 + pack_trailer(100, 200))
    with pytest.raises(TruncatedPayload):
        unpack(exe, tmp_path / "source")
