"""Deno Unpack - Packaged executable to source extractor."""
from __future__ import annotations

import sys
from pathlib import Path

import click

from deno_trailer.errors import UnpackError
from deno_trailer.protocol import DEFAULT_OUTPUT, SOURCE_SUFFIX
from deno_unpack.logic import canonical_json, inspect_trailer, unpack

SUCCESS_MESSAGE = "Sources are successfully saved in the file!"


def _resolve_input(input_arg: Path | None, input_opt: Path | None) -> Path:
    if input_opt is None and input_arg is None:
        raise click.UsageError("Missing option '--input'.")
    if input_opt is not None and input_arg is not None and input_opt != input_arg:
        raise click.UsageError(f"Conflicting inputs: --input {input_opt} and {input_arg}")
    return input_opt if input_opt is not None else input_arg


@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.argument("input_arg", metavar="[INPUT]", required=False, type=click.Path(path_type=Path))
@click.option("--input", "input_opt", metavar="PATH", type=click.Path(path_type=Path),
              help="Sets an input path of file to unpack")
@click.option("--output", metavar="PATH", default=DEFAULT_OUTPUT, show_default=True,
              help=f"Sets an output path for unpacked source ({SOURCE_SUFFIX} is appended)")
@click.option("--json", "as_json", is_flag=True, help="Print the extraction report as JSON")
@click.option("--inspect", "inspect_only", is_flag=True, help="Report the trailer without writing output")
def main(input_arg: Path | None, input_opt: Path | None, output: str, as_json: bool, inspect_only: bool) -> None:
    """Extract the embedded source bundle from a packaged executable."""
    input_path = _resolve_input(input_arg, input_opt)

    if inspect_only:
        result = inspect_trailer(input_path)
        click.echo(canonical_json(result))
        if result["status"] != "PASS":
            err = result["errors"][0]
            click.echo(f"Failed to unpack file: [{err['code']}] {err['stage']}: {err['message']}", err=True)
            raise SystemExit(1)
        return

    try:
        report = unpack(input_path, output)
    except UnpackError as e:
        # Fail closed with a single-line reason.
        click.echo(f"Failed to unpack file: {e.one_line()}", err=True)
        raise SystemExit(1)

    click.echo(canonical_json(report) if as_json else SUCCESS_MESSAGE)


def run(argv: list[str] | None = None) -> None:
    """Console entry point: every failure, argument errors included, exits 1."""
    try:
        code = main.main(args=argv, prog_name="deno-unpack", standalone_mode=False)
    except click.ClickException as e:
        click.echo(f"Failed to parse args: {e.format_message()}", err=True)
        sys.exit(1)
    except click.Abort:
        sys.exit(1)
    sys.exit(code or 0)


if __name__ == "__main__":
    run()
