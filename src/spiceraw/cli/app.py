"""spiceraw CLI application entry point.

Inspects and exports binary raw files written by circuit simulators.

Usage:
    spiceraw version
    spiceraw info <raw-file>
    spiceraw export <raw-file> --output <csv-file>
"""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console
from rich.markup import escape

from spiceraw.errors import RawFileError
from spiceraw.io.line_scanner import DEFAULT_MAX_LINE_LENGTH

app = typer.Typer(
    name="spiceraw",
    help="Decode binary raw files written by circuit simulators.",
    no_args_is_help=True,
)

console = Console()

MaxLineLength = Annotated[
    int,
    typer.Option(
        "--max-line-length",
        min=1,
        help="Maximum header line length in 16-bit characters",
    ),
]


@app.command()
def version() -> None:
    """Show the current version."""
    from spiceraw import __version__

    console.print(f"spiceraw {__version__}")


@app.command()
def info(
    raw_file: Annotated[Path, typer.Argument(help="Path to a .raw file")],
    max_line_length: MaxLineLength = DEFAULT_MAX_LINE_LENGTH,
) -> None:
    """Show the header and variable table of a raw file."""
    from spiceraw.cli.display import display_metadata, display_variables
    from spiceraw.io.raw_reader import read_raw_header

    try:
        meta = read_raw_header(raw_file, max_line_length=max_line_length)
    except RawFileError as e:
        console.print(f"[bold red]Error:[/bold red] {escape(str(e))}")
        raise typer.Exit(code=1) from e

    display_metadata(meta, console, title=raw_file.name)
    console.print()
    display_variables(meta, console)


@app.command()
def export(
    raw_file: Annotated[Path, typer.Argument(help="Path to a .raw file")],
    output: Annotated[
        Path,
        typer.Option("--output", "-o", help="CSV file to write"),
    ],
    max_line_length: MaxLineLength = DEFAULT_MAX_LINE_LENGTH,
) -> None:
    """Decode a raw file and write its samples as CSV."""
    from spiceraw.io.raw_reader import read_raw

    console.print(f"\n[bold blue][1/2][/bold blue] Decoding {raw_file.name}...")
    try:
        dataset = read_raw(raw_file, max_line_length=max_line_length)
    except RawFileError as e:
        console.print(f"[bold red]Error:[/bold red] {escape(str(e))}")
        raise typer.Exit(code=1) from e

    console.print(
        f"[bold blue][2/2][/bold blue] Writing {len(dataset)} points "
        f"x {len(dataset.variable_names)} variables..."
    )
    dataset.to_dataframe().to_csv(output, index=False)
    console.print(f"\n[green]Samples written to {output}[/green]")

