"""crashtrace CLI

실행 방법:
    crashtrace render trace.txt
    node app.js 2>&1 | crashtrace render
"""

import logging
import sys
from pathlib import Path

import typer

from crashtrace.core.config import settings
from crashtrace.core.styles import DEFAULT_COLORS, PLAIN_COLORS
from crashtrace.models.error import TraceInput
from crashtrace.models.options import TraceOptions
from crashtrace.services.decoder import decode as decode_error
from crashtrace.services.renderer import render as render_error

app = typer.Typer(help="Decode and render stack traces as a tree")


@app.callback()
def main() -> None:
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )


def _read_trace(file: Path | None, message: str | None, code: str | None) -> TraceInput:
    text = file.read_text(encoding="utf-8") if file else sys.stdin.read()
    if not text.strip():
        typer.secho("No stack trace given", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)
    return TraceInput.from_text(text, message=message, code=code)


def _build_options(
    *,
    prefix: str | None,
    no_color: bool,
    keep_unknown: bool,
    ignore_paths: list[str] | None,
) -> TraceOptions:
    return TraceOptions(
        sink=typer.echo,
        prefix=settings.prefix if prefix is None else prefix,
        colors=PLAIN_COLORS if no_color or not settings.color else DEFAULT_COLORS,
        filter_unknown=settings.filter_unknown and not keep_unknown,
        support_alternate_format=settings.support_alternate_format,
        ignore_paths=ignore_paths or settings.ignore_paths,
    )


@app.command()
def render(
    file: Path | None = typer.Argument(None, exists=True, dir_okay=False, help="Trace file (default: stdin)"),
    message: str | None = typer.Option(None, "--message", "-m", help="Error message (default: first line)"),
    code: str | None = typer.Option(None, help="Error code, e.g. BABEL_PARSE_ERROR"),
    prefix: str | None = typer.Option(None, help="Header prefix (empty string to disable)"),
    no_color: bool = typer.Option(False, "--no-color", help="Disable ANSI styling"),
    keep_unknown: bool = typer.Option(False, "--keep-unknown", help="Keep unparseable lines"),
    ignore_path: list[str] | None = typer.Option(None, "--ignore-path", help="Regex of paths to hide"),
) -> None:
    """Print a trace as a colored tree."""
    error = _read_trace(file, message, code)
    options = _build_options(
        prefix=prefix,
        no_color=no_color,
        keep_unknown=keep_unknown,
        ignore_paths=ignore_path,
    )
    render_error(error, options)


@app.command()
def decode(
    file: Path | None = typer.Argument(None, exists=True, dir_okay=False, help="Trace file (default: stdin)"),
    message: str | None = typer.Option(None, "--message", "-m", help="Error message (default: first line)"),
    code: str | None = typer.Option(None, help="Error code, e.g. BABEL_PARSE_ERROR"),
    keep_unknown: bool = typer.Option(False, "--keep-unknown", help="Keep unparseable lines"),
    ignore_path: list[str] | None = typer.Option(None, "--ignore-path", help="Regex of paths to hide"),
) -> None:
    """Print the decoded trace as JSON."""
    error = _read_trace(file, message, code)
    options = _build_options(
        prefix=None,
        no_color=True,
        keep_unknown=keep_unknown,
        ignore_paths=ignore_path,
    )
    report = decode_error(error, options)
    typer.echo(report.model_dump_json(indent=2))
