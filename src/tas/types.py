"""TAS script line type definitions.

Immutable dataclasses for parsed action lines and command lines.
"""

from dataclasses import dataclass, field
from enum import Enum

from src.tas.actions import Actions

DELIMITER = ","
MAX_FRAMES = 9999  # Largest count that fits the padded frame column
MAX_FRAMES_DIGITS = 4


class LineKind(str, Enum):
    """Kind of a raw script line."""

    EMPTY = "empty"
    COMMENT = "comment"  # "# ..."
    BREAKPOINT = "breakpoint"  # "***"
    ACTION = "action"  # "  15,R,J"
    COMMAND = "command"  # "Set, Player.Speed, 100"


@dataclass(frozen=True)
class ActionLine:
    """A frame count and the inputs held during those frames.

    Attributes:
        frames: Number of frames the inputs are held for.
        actions: Held inputs, including sub-list openers.
        feather_angle: Analog angle text in [0, 360], or None if not typed.
        feather_magnitude: Analog magnitude text in [0, 1]. An empty string
            means the separator was typed without a value, None means absent.
        custom_bindings: Uppercase keys pressed through PRESSED_KEY.
    """

    frames: int
    actions: Actions = Actions.NONE
    feather_angle: str | None = None
    feather_magnitude: str | None = None
    custom_bindings: frozenset[str] = field(default_factory=frozenset)

    def __str__(self) -> str:
        from src.tas.serializer import serialize

        return serialize(self)


@dataclass(frozen=True)
class CommandLine:
    """A directive line split into command name and arguments.

    Attributes:
        command: First token of the line.
        arguments: Remaining tokens, in order.
        original_text: The line exactly as given.
        argument_separator: Separator text the line was split on, so the
            original spacing style can be reproduced.
    """

    command: str
    arguments: tuple[str, ...]
    original_text: str
    argument_separator: str

    def is_command(self, name: str | None) -> bool:
        """Check if this line runs ``name``, ignoring case."""
        if name is None:
            return False
        return name.casefold() == self.command.casefold()
