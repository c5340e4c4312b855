"""Script file commands."""

import logging
from pathlib import Path

import typer
from rich.markup import escape

from src.cli.display import display_error, display_success, display_warning
from src.config import get_settings
from src.tas.parser import classify_line, parse
from src.tas.serializer import serialize
from src.tas.types import MAX_FRAMES, LineKind

logger = logging.getLogger(__name__)

app = typer.Typer(help="Check and format TAS script files")


def _read_lines(path: Path) -> list[str]:
    """Read a script file, exiting if it is missing or not UTF-8."""
    if not path.is_file():
        display_error(f"Script not found: {path}")
        raise typer.Exit(1)
    try:
        return path.read_text(encoding="utf-8").splitlines()
    except UnicodeDecodeError as e:
        display_error(f"Script is not valid UTF-8: {path} ({e.reason} at byte {e.start})")
        raise typer.Exit(1) from e


@app.command()
def check(
    path: Path = typer.Argument(..., help="Script file to check"),
) -> None:
    """Report invalid and non-canonical action lines."""
    lines = _read_lines(path)
    errors = 0
    warnings = 0

    for number, line in enumerate(lines, start=1):
        if classify_line(line) is not LineKind.ACTION:
            continue

        action_line = parse(line, ignore_invalid_floats=False)
        if action_line is None:
            display_error(f"{path}:{number}: invalid feather angle or magnitude in {escape(repr(line.strip()))}")
            errors += 1
            continue

        if action_line.frames > MAX_FRAMES:
            display_warning(f"{path}:{number}: frame count {action_line.frames} exceeds {MAX_FRAMES}")
            warnings += 1

        canonical = serialize(action_line)
        if canonical != line:
            display_warning(f"{path}:{number}: not canonical, expected {escape(repr(canonical))}")
            warnings += 1

    logger.debug(f"Checked {len(lines)} lines in {path}: {errors} errors, {warnings} warnings")

    if errors:
        raise typer.Exit(1)
    display_success(f"{path}: no errors ({warnings} warnings)")


@app.command("format")
def format_script(
    path: Path = typer.Argument(..., help="Script file to format"),
    write: bool = typer.Option(False, "--write", "-w", help="Rewrite the file in place"),
) -> None:
    """Rewrite every action line in canonical form."""
    lines = _read_lines(path)
    ignore_invalid_floats = get_settings().ignore_invalid_floats

    formatted: list[str] = []
    changed = 0
    for line in lines:
        action_line = None
        if classify_line(line) is LineKind.ACTION:
            action_line = parse(line, ignore_invalid_floats)

        new_line = serialize(action_line) if action_line is not None else line
        if new_line != line:
            changed += 1
        formatted.append(new_line)

    text = "".join(f"{line}\n" for line in formatted)
    if write:
        path.write_text(text, encoding="utf-8")
        display_success(f"Formatted {changed} line(s) in {path}")
    else:
        typer.echo(text, nl=False)
