#!/usr/bin/env python3
"""
filesize CLI

Convert integral sizes between Byte, KB, MB, GB and TB and print them in human-readable form.
"""

import typer
from dotenv import load_dotenv
from rich import box
from rich.console import Console
from rich.table import Table

from src.filesize.size_unit import (
    MAX_INT64,
    MIN_INT64,
    InvalidQuantityError,
    SizeUnit,
    UnknownSizeUnitError,
    convert,
    readable_size,
)
from src.utils.config import get_default_unit_label
from src.utils.logging import add_log_context, get_logger

# Load environment variables
load_dotenv()

logger = get_logger(__name__)

app = typer.Typer(
    name="filesize",
    help="Binary (1024-based) file size conversion and formatting",
    add_completion=False,
)
console = Console()

# negative quantities such as -5 are arguments, not options
SIGNED_ARGS = {"ignore_unknown_options": True}


def log_warning(message: str) -> None:
    """Log warning message with emoji."""
    console.print(f"⚠️  {message}", style="yellow")


def log_error(message: str) -> None:
    """Log error message with emoji."""
    console.print(f"❌ {message}", style="red")


def resolve_unit(label: str | None) -> SizeUnit:
    """Resolve a unit label, falling back to FILESIZE_DEFAULT_UNIT.

    Exits with code 1 when the label is unknown.
    """
    try:
        return SizeUnit.from_label(label or get_default_unit_label())
    except UnknownSizeUnitError as e:
        log_error(str(e))
        raise typer.Exit(1)


@app.command("convert", context_settings=SIGNED_ARGS)
def convert_command(
    quantity: int = typer.Argument(..., help="Quantity expressed in FROM_UNIT"),
    from_unit: str = typer.Argument(..., help="Unit of the quantity: Byte, KB, MB, GB or TB"),
    to_unit: str = typer.Argument(..., help="Unit to convert into"),
) -> None:
    """Convert QUANTITY from one unit into another."""
    add_log_context(command="convert")
    source = resolve_unit(from_unit)
    target = resolve_unit(to_unit)

    try:
        result = convert(quantity, source, target)
    except InvalidQuantityError as e:
        log_error(str(e))
        raise typer.Exit(1)

    logger.debug("Converted size", quantity=quantity, from_unit=source.label, to_unit=target.label)
    console.print(str(result))
    scaling_up = source.multiplier > target.multiplier
    if scaling_up and result in (MAX_INT64, MIN_INT64):
        log_warning(f"Result saturated at the 64-bit limit converting {quantity}{source} to {target}")


@app.command(context_settings=SIGNED_ARGS)
def readable(
    size: int = typer.Argument(..., help="Size expressed in --unit"),
    unit: str | None = typer.Option(None, "--unit", "-u", help="Unit of SIZE (default: Byte)"),
) -> None:
    """Print SIZE in human-readable form, e.g. 1.5KB."""
    add_log_context(command="readable")
    source = resolve_unit(unit)

    try:
        text = readable_size(size, source)
    except InvalidQuantityError as e:
        log_error(str(e))
        raise typer.Exit(1)

    if text:
        console.print(text)


@app.command(context_settings=SIGNED_ARGS)
def table(
    quantity: int = typer.Argument(..., help="Quantity expressed in --unit"),
    unit: str | None = typer.Option(None, "--unit", "-u", help="Unit of QUANTITY (default: Byte)"),
) -> None:
    """Show QUANTITY expressed in every unit."""
    add_log_context(command="table")
    source = resolve_unit(unit)

    try:
        rows = [(target, convert(quantity, source, target)) for target in SizeUnit]
        text = readable_size(quantity, source)
    except InvalidQuantityError as e:
        log_error(str(e))
        raise typer.Exit(1)

    size_table = Table(box=box.ROUNDED, title=f"{quantity} {source}")
    size_table.add_column("Unit", style="cyan")
    size_table.add_column("Value", justify="right", style="green")
    for target, value in rows:
        size_table.add_row(target.label, str(value))

    console.print(size_table)
    if text:
        console.print(f"[dim]Readable:[/dim] {text}")


if __name__ == "__main__":
    app()
