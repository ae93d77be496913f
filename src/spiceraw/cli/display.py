"""Rich display helpers for terminal output."""

from __future__ import annotations

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from spiceraw.models.metadata import FieldWidth, RawFileMetadata

_WIDTH_STYLES: dict[FieldWidth, str] = {
    FieldWidth.SINGLE: "dim",
    FieldWidth.DOUBLE: "green",
    FieldWidth.COMPLEX: "magenta",
}


def display_metadata(meta: RawFileMetadata, console: Console, title: str = "Raw File") -> None:
    """Print a panel with the header fields of a raw file.

    Args:
        meta: Parsed header metadata.
        console: Rich Console for output.
        title: Panel title, usually the filename.
    """
    lines = [
        f"[bold]Title:[/bold] {escape(meta.title)}",
        f"[bold]Date:[/bold] {escape(meta.date)}",
        f"[bold]Plotname:[/bold] {escape(meta.plotname)}",
        f"[bold]Flags:[/bold] {escape(meta.flags)}",
        f"[bold]Points:[/bold] {meta.no_points}",
        f"[bold]Variables:[/bold] {len(meta.variables)}",
        f"[bold]Offset:[/bold] {meta.offset}",
    ]
    if meta.command:
        lines.append(f"[bold]Command:[/bold] {escape(meta.command)}")
    for key, values in meta.extra.items():
        for value in values:
            lines.append(f"[dim]{escape(key)}:[/dim] {escape(value)}")

    console.print(Panel("\n".join(lines), title=title, expand=False))


def display_variables(meta: RawFileMetadata, console: Console) -> None:
    """Print the variable table in binary column order."""
    table = Table(title="Variables", show_lines=False)
    table.add_column("#", justify="right", style="dim")
    table.add_column("Name", style="bold cyan", no_wrap=True)
    table.add_column("Type")
    table.add_column("Bytes", justify="right")

    for var in meta.variables:
        table.add_row(
            str(var.index),
            escape(var.name),
            escape(var.var_type),
            f"[{_WIDTH_STYLES[var.width]}]{int(var.width)}[/{_WIDTH_STYLES[var.width]}]",
        )

    console.print(table)
    console.print(f"\n[bold]{meta.row_size}[/bold] bytes per point")
