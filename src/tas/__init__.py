"""TAS script line parsing.

Parses and renders the two kinds of lines a TAS script holds: action lines
(a frame count plus held inputs) and command lines (a directive with
arguments).

Usage:
    >>> from src.tas import parse, serialize, parse_command
    >>> action_line = parse("15rjx")
    >>> serialize(action_line)
    '  15,R,J,X'
    >>> parse_command("console load 1").command
    'console'
"""

# Vocabulary
from src.tas.actions import (
    ActionTableError,
    Actions,
    action_for_char,
    char_for_action,
    get_dash_only,
    get_move_only,
    is_direction,
    is_pseudo_action,
    is_restricted_direction,
    key_for_char,
    sorted_actions,
    to_dash_only,
    to_move_only,
)

# Types
from src.tas.types import (
    DELIMITER,
    MAX_FRAMES,
    MAX_FRAMES_DIGITS,
    ActionLine,
    CommandLine,
    LineKind,
)

# Parsers
from src.tas.strict import parse_strict
from src.tas.loose import ParseState, parse_loose
from src.tas.parser import classify_line, parse
from src.tas.command_line import parse_command

# Serializer
from src.tas.serializer import serialize

__all__ = [
    # Vocabulary
    "ActionTableError",
    "Actions",
    "action_for_char",
    "char_for_action",
    "get_dash_only",
    "get_move_only",
    "is_direction",
    "is_pseudo_action",
    "is_restricted_direction",
    "key_for_char",
    "sorted_actions",
    "to_dash_only",
    "to_move_only",
    # Types
    "DELIMITER",
    "MAX_FRAMES",
    "MAX_FRAMES_DIGITS",
    "ActionLine",
    "CommandLine",
    "LineKind",
    # Parsers
    "parse_strict",
    "parse_loose",
    "ParseState",
    "parse",
    "classify_line",
    "parse_command",
    # Serializer
    "serialize",
]
