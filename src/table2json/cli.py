"""Typer CLI entry point for table2json."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console

from . import conversion, ingestion, serialization
from .errors import TableConversionError

console = Console(stderr=True)
app = typer.Typer(help="table2json: convert fixed-width text tables to JSON")


def configure_logger(verbose: bool) -> logging.Logger:
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
    )
    return logging.getLogger("table2json")


@app.command()
def convert(
    search: Optional[str] = typer.Option(
        None, "--search", help="Only output the table with this exact title. Must include the '*' in the title."
    ),
    pretty: bool = typer.Option(False, "--pretty", help="Pretty print the JSON output."),
    source: Optional[Path] = typer.Option(
        None, "--input", "-i", exists=True, dir_okay=False, readable=True, path_type=Path, help="Read tables from a file instead of stdin."
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging."),
):
    """Read fixed-width tables and print them as JSON."""

    logger = configure_logger(verbose)
    config = conversion.ConvertConfig(search=search, pretty=pretty)

    try:
        with ingestion.open_source(source) as stream:
            payload = conversion.convert(stream, config, logger)
    except TableConversionError as exc:
        console.print(f"Error: {exc}", style="red", markup=False, highlight=False)
        raise typer.Exit(code=1) from exc

    typer.echo(serialization.render_json(payload, pretty=config.pretty))


if __name__ == "__main__":
    app()
