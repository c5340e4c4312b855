"""Lenient action line parser.

Recovers usable data from near-miss lines such as "1gd" or "15RJX" with a
single left-to-right pass over the characters. A state either consumes the
current character or hands it, unconsumed, to the ACTION state.
"""

import logging
from enum import Enum

from src.tas.actions import (
    Actions,
    action_for_char,
    is_direction,
    key_for_char,
    to_dash_only,
    to_move_only,
)
from src.tas.floats import ANGLE_RANGE, MAGNITUDE_RANGE, clamp_value
from src.tas.types import DELIMITER, ActionLine

logger = logging.getLogger(__name__)

_DIGITS = frozenset("0123456789")
_NUMBER_CHARS = _DIGITS | {"."}


class ParseState(Enum):
    """What the lenient parser expects next."""

    FRAME = "frame"
    ACTION = "action"
    DASH_ONLY = "dash_only"
    MOVE_ONLY = "move_only"
    PRESSED_KEY = "pressed_key"
    FEATHER_ANGLE = "feather_angle"
    FEATHER_MAGNITUDE = "feather_magnitude"


# State entered after reading an action, ACTION if missing
STATE_AFTER_ACTION: dict[Actions, ParseState] = {
    Actions.DASH_ONLY: ParseState.DASH_ONLY,
    Actions.MOVE_ONLY: ParseState.MOVE_ONLY,
    Actions.PRESSED_KEY: ParseState.PRESSED_KEY,
    Actions.FEATHER: ParseState.FEATHER_ANGLE,
}


def parse_loose(line: str, ignore_invalid_floats: bool = True) -> ActionLine | None:
    """Parse an action line with missing or irregular delimiters.

    Args:
        line: Raw script line.
        ignore_invalid_floats: Keep unparsable feather numbers as typed
            instead of rejecting the line.

    Returns:
        The parsed ActionLine, or None if the line has no frame count or an
        invalid number was hit while ``ignore_invalid_floats`` is False.
    """
    state = ParseState.FRAME
    frame_digits = ""
    frames = 0
    actions = Actions.NONE
    feather_angle: str | None = None
    feather_magnitude: str | None = None
    custom_bindings: set[str] = set()

    index = 0
    while index < len(line):
        char = line[index]
        if char.isspace():
            index += 1
            continue

        consumed = True

        if state is ParseState.FRAME:
            if char in _DIGITS:
                frame_digits += char
            elif char != DELIMITER:
                if not frame_digits:
                    logger.debug(f"Lenient parse rejected {line!r}: no frame count")
                    return None
                frames = int(frame_digits)
                state = ParseState.ACTION
                consumed = False

        elif state is ParseState.ACTION:
            if char != DELIMITER:
                action = action_for_char(char)
                actions |= action
                state = STATE_AFTER_ACTION.get(action, ParseState.ACTION)

        elif state is ParseState.DASH_ONLY or state is ParseState.MOVE_ONLY:
            if char == DELIMITER:
                state = ParseState.ACTION
            else:
                action = action_for_char(char)
                if not is_direction(action):
                    state = ParseState.ACTION
                    consumed = False
                elif state is ParseState.DASH_ONLY:
                    actions |= to_dash_only(action)
                else:
                    actions |= to_move_only(action)

        elif state is ParseState.PRESSED_KEY:
            if char == DELIMITER:
                state = ParseState.ACTION
            else:
                custom_bindings.add(key_for_char(char))

        elif state is ParseState.FEATHER_ANGLE:
            if char == DELIMITER:
                state = ParseState.FEATHER_MAGNITUDE
            elif char in _NUMBER_CHARS:
                feather_angle = (feather_angle or "") + char
            else:
                state = ParseState.ACTION
                consumed = False

        elif state is ParseState.FEATHER_MAGNITUDE:
            if char == DELIMITER:
                state = ParseState.ACTION
            elif char in _NUMBER_CHARS:
                feather_magnitude = (feather_magnitude or "") + char
            else:
                state = ParseState.ACTION
                consumed = False

        if consumed:
            index += 1

    if state is ParseState.FRAME:
        logger.debug(f"Lenient parse rejected {line!r}: no actions after frame count")
        return None

    if feather_angle is None and feather_magnitude is not None:
        # Angle was skipped, read the lone number as the angle like the strict parser does
        feather_angle, feather_magnitude = feather_magnitude, None

    if feather_angle is not None:
        angle = clamp_value(feather_angle, ANGLE_RANGE)
        if angle is not None:
            feather_angle = angle
        elif not ignore_invalid_floats:
            logger.debug(f"Lenient parse rejected {line!r}: invalid angle {feather_angle!r}")
            return None

    if feather_magnitude is not None:
        magnitude = clamp_value(feather_magnitude, MAGNITUDE_RANGE)
        if magnitude is not None:
            feather_magnitude = magnitude
        elif not ignore_invalid_floats:
            logger.debug(f"Lenient parse rejected {line!r}: invalid magnitude {feather_magnitude!r}")
            return None

    return ActionLine(
        frames=frames,
        actions=actions,
        feather_angle=feather_angle,
        feather_magnitude=feather_magnitude,
        custom_bindings=frozenset(custom_bindings),
    )
