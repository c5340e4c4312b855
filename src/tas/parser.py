"""Entry points for reading raw script lines."""

import logging

from src.tas.loose import parse_loose
from src.tas.strict import parse_strict
from src.tas.types import ActionLine, LineKind

logger = logging.getLogger(__name__)

COMMENT_PREFIX = "#"
BREAKPOINT_PREFIX = "***"


def parse(line: str, ignore_invalid_floats: bool = True) -> ActionLine | None:
    """Parse an action line, falling back to the lenient parser.

    Args:
        line: Raw script line.
        ignore_invalid_floats: Tolerate unparsable feather numbers. Pass False
            when validating a script, True when displaying it.

    Returns:
        The parsed ActionLine, or None if neither parser accepts the line.
    """
    action_line = parse_strict(line, ignore_invalid_floats)
    if action_line is not None:
        return action_line

    logger.debug(f"Falling back to lenient parse for {line!r}")
    return parse_loose(line, ignore_invalid_floats)


def classify_line(line: str) -> LineKind:
    """Determine what kind of script line ``line`` is.

    Examples:
        >>> classify_line("  15,R,J")
        <LineKind.ACTION: 'action'>
        >>> classify_line("Read, level.tas")
        <LineKind.COMMAND: 'command'>
    """
    stripped = line.strip()
    if not stripped:
        return LineKind.EMPTY
    if stripped.startswith(COMMENT_PREFIX):
        return LineKind.COMMENT
    if stripped.startswith(BREAKPOINT_PREFIX):
        return LineKind.BREAKPOINT
    if parse(line) is not None:
        return LineKind.ACTION
    return LineKind.COMMAND
