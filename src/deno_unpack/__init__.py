"""Deno Unpack - Extract embedded sources from packaged executables."""
from .extract import extract_payload
from .output import output_path_for, write_output
from .logic import unpack, inspect_trailer

__all__ = ["extract_payload", "output_path_for", "write_output", "unpack", "inspect_trailer"]
