"""Single line commands."""

import typer

from src.cli.display import (
    display_action_line,
    display_command_line,
    display_error,
    display_info,
)
from src.config import get_settings
from src.tas.command_line import parse_command
from src.tas.parser import classify_line, parse
from src.tas.types import LineKind

app = typer.Typer(help="Inspect single script lines")


@app.command()
def inspect(
    line: str = typer.Argument(..., help="Script line to parse"),
    strict_floats: bool = typer.Option(
        False, "--strict-floats", help="Reject invalid feather angles/magnitudes"
    ),
) -> None:
    """Show how a script line is parsed."""
    kind = classify_line(line)

    if kind is LineKind.ACTION:
        ignore_invalid_floats = get_settings().ignore_invalid_floats and not strict_floats
        action_line = parse(line, ignore_invalid_floats)
        if action_line is None:
            display_error("Invalid feather angle or magnitude")
            raise typer.Exit(1)
        display_action_line(action_line)
        return

    if kind is LineKind.COMMAND:
        command_line = parse_command(line)
        if command_line is None:
            display_error("Command line has no content")
            raise typer.Exit(1)
        display_command_line(command_line)
        return

    display_info(f"{kind.value.capitalize()} line")
