"""Main CLI application for TAS script tools."""

import logging

import typer

from src.cli.commands import line, script
from src.config import get_settings

# Create main app
app = typer.Typer(
    name="tas",
    help="Parse, check and format TAS script lines",
    add_completion=True,
)

# Add sub-commands
app.add_typer(line.app, name="line")
app.add_typer(script.app, name="script")


@app.command()
def inspect(
    text: str = typer.Argument(..., help="Script line to parse"),
) -> None:
    """Quick inspect - show how a script line is parsed.

    This is a shortcut for 'tas line inspect'.
    """
    # Pass explicit defaults since Typer Option objects aren't resolved
    # when calling function directly (not via CLI)
    line.inspect(line=text, strict_floats=False)


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
) -> None:
    """TAS script tools.

    Use 'tas script check FILE' to validate a script, 'tas script format FILE'
    to canonicalize it.
    """
    settings = get_settings()
    level = logging.DEBUG if verbose else settings.effective_log_level
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")


if __name__ == "__main__":
    app()
