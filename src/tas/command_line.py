"""Command line tokenizer.

Splits directive lines like "console load 1" or "Set, Player.Speed, 100"
into a command name and its arguments.
"""

import logging
import re

from src.tas.types import CommandLine

logger = logging.getLogger(__name__)

# Whitespace, or a comma with optional whitespace around it
SEPARATOR_PATTERN = re.compile(r"(?:\s+)|(?:\s*,\s*)")


def parse_command(line: str) -> CommandLine | None:
    """Split a command line on the first separator style it uses.

    The text of the first separator match is reused as the literal delimiter
    for the whole line, so "Set, A, B" splits on ", " and "Set A B" on " ".

    Args:
        line: Raw script line.

    Returns:
        The parsed CommandLine, or None if the line has no content.

    Examples:
        >>> parse_command("console load 1").arguments
        ('load', '1')
    """
    if not line.strip():
        logger.debug(f"Command parse rejected {line!r}: no content")
        return None

    match = SEPARATOR_PATTERN.search(line)
    if match is None:
        return CommandLine(command=line, arguments=(), original_text=line, argument_separator="")

    separator = match.group(0)
    command, *arguments = line.split(separator)
    return CommandLine(
        command=command,
        arguments=tuple(arguments),
        original_text=line,
        argument_separator=separator,
    )
