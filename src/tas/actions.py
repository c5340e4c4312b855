"""Action vocabulary for TAS script lines.

Defines the bit-flag set of inputs an action line can hold, the character
each input is written as, and the projections used by the dash-only and
move-only sub-lists.
"""

from enum import IntFlag


class ActionTableError(RuntimeError):
    """Vocabulary tables are inconsistent with the flags being expanded.

    Never raised for user input; indicates a bug in this module.
    """

    pass


class Actions(IntFlag):
    """Inputs held during an action line.

    Plain directions, dash-only directions and move-only directions are
    separate bits so that composing them with ``|`` is a plain set union.
    """

    NONE = 0

    # Directions
    LEFT = 1 << 0
    RIGHT = 1 << 1
    UP = 1 << 2
    DOWN = 1 << 3

    # Buttons
    JUMP = 1 << 4
    DASH = 1 << 5
    GRAB = 1 << 6
    START = 1 << 7
    RESTART = 1 << 8
    FEATHER = 1 << 9  # Analog input, carries angle/magnitude
    JOURNAL = 1 << 10
    JUMP2 = 1 << 11
    DASH2 = 1 << 12
    CONFIRM = 1 << 13
    DEMO_DASH = 1 << 14
    DEMO_DASH2 = 1 << 15

    # Directions which only register for dashing
    LEFT_DASH_ONLY = 1 << 16
    RIGHT_DASH_ONLY = 1 << 17
    UP_DASH_ONLY = 1 << 18
    DOWN_DASH_ONLY = 1 << 19

    # Directions which only register for movement
    LEFT_MOVE_ONLY = 1 << 20
    RIGHT_MOVE_ONLY = 1 << 21
    UP_MOVE_ONLY = 1 << 22
    DOWN_MOVE_ONLY = 1 << 23

    # Sub-list openers
    DASH_ONLY = 1 << 24
    MOVE_ONLY = 1 << 25
    PRESSED_KEY = 1 << 26


DIRECTIONS: tuple[Actions, ...] = (Actions.LEFT, Actions.RIGHT, Actions.UP, Actions.DOWN)

PSEUDO_ACTIONS: tuple[Actions, ...] = (Actions.DASH_ONLY, Actions.MOVE_ONLY, Actions.PRESSED_KEY)

DASH_ONLY_DIRECTIONS: dict[Actions, Actions] = {
    Actions.LEFT: Actions.LEFT_DASH_ONLY,
    Actions.RIGHT: Actions.RIGHT_DASH_ONLY,
    Actions.UP: Actions.UP_DASH_ONLY,
    Actions.DOWN: Actions.DOWN_DASH_ONLY,
}

MOVE_ONLY_DIRECTIONS: dict[Actions, Actions] = {
    Actions.LEFT: Actions.LEFT_MOVE_ONLY,
    Actions.RIGHT: Actions.RIGHT_MOVE_ONLY,
    Actions.UP: Actions.UP_MOVE_ONLY,
    Actions.DOWN: Actions.DOWN_MOVE_ONLY,
}

CHAR_FOR_ACTION: dict[Actions, str] = {
    Actions.RIGHT: "R",
    Actions.LEFT: "L",
    Actions.UP: "U",
    Actions.DOWN: "D",
    Actions.JUMP: "J",
    Actions.JUMP2: "K",
    Actions.DEMO_DASH: "Z",
    Actions.DEMO_DASH2: "V",
    Actions.DASH: "X",
    Actions.DASH2: "C",
    Actions.GRAB: "G",
    Actions.START: "S",
    Actions.RESTART: "Q",
    Actions.FEATHER: "F",
    Actions.JOURNAL: "N",
    Actions.CONFIRM: "O",
    Actions.DASH_ONLY: "A",
    Actions.MOVE_ONLY: "M",
    Actions.PRESSED_KEY: "P",
}

ACTION_FOR_CHAR: dict[str, Actions] = {char: action for action, char in CHAR_FOR_ACTION.items()}

# Serialization order. FEATHER is last since its angle/magnitude trail the line.
SORTED_ACTIONS: tuple[Actions, ...] = (
    Actions.LEFT,
    Actions.RIGHT,
    Actions.UP,
    Actions.DOWN,
    Actions.JUMP,
    Actions.JUMP2,
    Actions.DEMO_DASH,
    Actions.DEMO_DASH2,
    Actions.DASH,
    Actions.DASH2,
    Actions.GRAB,
    Actions.START,
    Actions.RESTART,
    Actions.JOURNAL,
    Actions.CONFIRM,
    Actions.DASH_ONLY,
    Actions.MOVE_ONLY,
    Actions.PRESSED_KEY,
    Actions.FEATHER,
)


def char_for_action(action: Actions) -> str:
    """Get the script character for a single action.

    Returns a space for values without a character of their own
    (NONE, restricted directions, combinations).
    """
    return CHAR_FOR_ACTION.get(action, " ")


def action_for_char(char: str) -> Actions:
    """Get the action written as ``char``, case-insensitively.

    Unknown characters map to ``Actions.NONE`` so callers can OR the result
    into a flag set without checking it.
    """
    return ACTION_FOR_CHAR.get(char.upper(), Actions.NONE)


def key_for_char(char: str) -> str:
    """Get the pressed-key binding written as ``char``.

    Uppercases ``char`` unless that would expand it to several characters
    (``"ß".upper() == "SS"``), in which case it is kept as is.
    """
    upper = char.upper()
    return upper if len(upper) == 1 else char


def to_dash_only(action: Actions) -> Actions:
    """Map a plain direction to its dash-only flag, NONE for anything else."""
    return DASH_ONLY_DIRECTIONS.get(action, Actions.NONE)


def to_move_only(action: Actions) -> Actions:
    """Map a plain direction to its move-only flag, NONE for anything else."""
    return MOVE_ONLY_DIRECTIONS.get(action, Actions.NONE)


def _folded_directions(
    actions: Actions, opener: Actions, table: dict[Actions, Actions]
) -> list[Actions]:
    if opener not in actions:
        raise ActionTableError(f"Cannot expand {opener.name} directions from {actions!r}")
    return [direction for direction in DIRECTIONS if table[direction] in actions]


def get_dash_only(actions: Actions) -> list[Actions]:
    """Get the plain directions folded under the dash-only opener.

    Raises:
        ActionTableError: If ``actions`` does not contain DASH_ONLY.
    """
    return _folded_directions(actions, Actions.DASH_ONLY, DASH_ONLY_DIRECTIONS)


def get_move_only(actions: Actions) -> list[Actions]:
    """Get the plain directions folded under the move-only opener.

    Raises:
        ActionTableError: If ``actions`` does not contain MOVE_ONLY.
    """
    return _folded_directions(actions, Actions.MOVE_ONLY, MOVE_ONLY_DIRECTIONS)


def sorted_actions(actions: Actions) -> list[Actions]:
    """List the top-level actions in ``actions`` in serialization order."""
    return [action for action in SORTED_ACTIONS if action in actions]


def is_direction(action: Actions) -> bool:
    """Check if ``action`` is a single plain direction."""
    return action in DASH_ONLY_DIRECTIONS


def is_restricted_direction(action: Actions) -> bool:
    """Check if ``action`` is a single dash-only or move-only direction."""
    return action in DASH_ONLY_DIRECTIONS.values() or action in MOVE_ONLY_DIRECTIONS.values()


def is_pseudo_action(action: Actions) -> bool:
    """Check if ``action`` opens a sub-list instead of holding an input."""
    return action in PSEUDO_ACTIONS
