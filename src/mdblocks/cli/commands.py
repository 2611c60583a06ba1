"""CLI command implementations"""

import logging
import sys
from pathlib import Path
from typing import Annotated, Optional

import typer

from mdblocks.config import Settings, load_config
from mdblocks.core.export import build_payload, dump_blocks, to_json
from mdblocks.core.parse import strip_frontmatter
from mdblocks.core.pipeline import convert, run_convert


def _fail(msg: str, cause: Exception = None) -> None:
    """Print a user-friendly error to stderr and exit 1."""
    typer.echo(f"Error: {msg}", err=True)
    if cause:
        typer.echo(f"  {cause}", err=True)
    raise typer.Exit(1)


def _settings(overrides: dict = None) -> Settings:
    """Load config with standard CLI error handling."""
    try:
        return load_config(overrides=overrides)
    except ValueError as e:
        _fail(str(e))


def _configure_logging(settings: Settings, verbose: bool) -> None:
    level = logging.DEBUG if verbose else getattr(logging, settings.log_level.upper(), logging.WARNING)
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s", stream=sys.stderr)


def _read_source(path: str) -> str:
    """Markdown body from a file path or '-' for stdin, frontmatter removed."""
    if path == "-":
        raw = sys.stdin.read()
    else:
        p = Path(path)
        if not p.is_file():
            _fail(f"No such file: {path}")
        raw = p.read_text(encoding="utf-8")
    _, body = strip_frontmatter(raw)
    return body


def convert_cmd(
    path: Annotated[str, typer.Argument(help="Markdown file to convert, or '-' for stdin")],
    parser: Annotated[Optional[str], typer.Option("--parser-config", help="MarkdownIt preset name")] = None,
    cell_width: Annotated[Optional[int], typer.Option("--max-cell-width", help="Max characters per table cell")] = None,
    table_style: Annotated[Optional[str], typer.Option("--table-style", help="simple or bordered")] = None,
    payload: Annotated[bool, typer.Option("--payload", help="Wrap blocks in a message payload")] = False,
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Log skipped tokens")] = False,
    ):
    """Convert one markdown document and print its blocks as JSON."""
    settings = _settings(overrides={
        "parser_config": parser, "max_cell_width": cell_width, "table_style": table_style,
    })
    _configure_logging(settings, verbose)

    try:
        body = _read_source(path)
        blocks = convert(body, settings.parsing_options(), settings.parser_config)
    except (ValueError, KeyError) as e:
        _fail(f"Failed to convert {path}", e)

    data = build_payload(blocks) if payload else dump_blocks(blocks)
    typer.echo(to_json(data, settings.indent))


def export_cmd(
    path: Annotated[str, typer.Argument(help="File or directory to convert")],
    out: Annotated[Optional[str], typer.Option("--out-dir", help="Output directory")] = None,
    parser: Annotated[Optional[str], typer.Option("--parser-config", help="MarkdownIt preset name")] = None,
    cell_width: Annotated[Optional[int], typer.Option("--max-cell-width", help="Max characters per table cell")] = None,
    table_style: Annotated[Optional[str], typer.Option("--table-style", help="simple or bordered")] = None,
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Log skipped tokens")] = False,
    ):
    """Recursively convert markdown files and write one JSON block list per document."""
    settings = _settings(overrides={
        "output_dir": out, "parser_config": parser,
        "max_cell_width": cell_width, "table_style": table_style,
    })
    _configure_logging(settings, verbose)
    output_dir = Path(settings.output_dir)

    if not Path(path).exists():
        _fail(f"No such file or directory: {path}")
    try:
        results = run_convert(path, output_dir, settings.parsing_options(), settings.parser_config, settings.indent)
    except RuntimeError as e:
        _fail(str(e))

    if not results:
        typer.echo(f"No markdown files found under {path}.")
        raise typer.Exit(1)
    for src, out_file in results:
        typer.echo(f"  {src} -> {out_file}")
    typer.echo(f"Exported {len(results)} document(s) to {output_dir}/")
