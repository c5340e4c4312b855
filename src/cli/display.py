"""Rich display helpers for CLI output."""

from rich import box
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from src.tas.actions import (
    Actions,
    char_for_action,
    get_dash_only,
    get_move_only,
    sorted_actions,
)
from src.tas.serializer import serialize
from src.tas.types import ActionLine, CommandLine


# Shared console instance
console = Console()


def display_error(message: str) -> None:
    """Display error message.

    Args:
        message: Error message.
    """
    console.print(f"[bold red]Error:[/bold red] {message}")


def display_warning(message: str) -> None:
    """Display warning message.

    Args:
        message: Warning message.
    """
    console.print(f"[bold yellow]Warning:[/bold yellow] {message}")


def display_success(message: str) -> None:
    """Display success message.

    Args:
        message: Success message.
    """
    console.print(f"[bold green]{message}[/bold green]")


def display_info(message: str) -> None:
    """Display info message.

    Args:
        message: Info message.
    """
    console.print(f"[dim]{message}[/dim]")


def _describe_action(action: Actions, action_line: ActionLine) -> str:
    if action == Actions.DASH_ONLY:
        directions = get_dash_only(action_line.actions)
    elif action == Actions.MOVE_ONLY:
        directions = get_move_only(action_line.actions)
    elif action == Actions.PRESSED_KEY:
        return escape(", ".join(sorted(action_line.custom_bindings))) or "-"
    else:
        return ""
    return ", ".join(direction.name for direction in directions) or "-"


def display_action_line(action_line: ActionLine) -> None:
    """Display a parsed action line as a table of its inputs.

    Args:
        action_line: Parsed action line.
    """
    table = Table(title=f"Action Line ({action_line.frames} frames)", box=box.ROUNDED)
    table.add_column("Char", justify="center", style="cyan")
    table.add_column("Action", style="white")
    table.add_column("Details", style="yellow")

    for action in sorted_actions(action_line.actions):
        details = _describe_action(action, action_line)
        if action == Actions.FEATHER:
            angle = action_line.feather_angle if action_line.feather_angle is not None else "-"
            magnitude = action_line.feather_magnitude if action_line.feather_magnitude is not None else "-"
            details = f"angle {angle}, magnitude {magnitude}"
        table.add_row(char_for_action(action), action.name, details)

    console.print(table)
    console.print(f"[bold]Canonical:[/bold] {escape(repr(serialize(action_line)))}")


def display_command_line(command_line: CommandLine) -> None:
    """Display a tokenized command line.

    Args:
        command_line: Parsed command line.
    """
    table = Table(title=f"Command: {escape(command_line.command)}", box=box.ROUNDED)
    table.add_column("#", justify="right", style="cyan")
    table.add_column("Argument", style="white")

    for position, argument in enumerate(command_line.arguments, start=1):
        table.add_row(str(position), escape(argument))

    console.print(table)
    console.print(f"[bold]Separator:[/bold] {escape(repr(command_line.argument_separator))}")
