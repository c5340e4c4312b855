"""Strict action line parser.

Handles lines which mostly follow the canonical formatting, e.g. "  15,R,J".
It accepts everything the serializer writes and rejects what it cannot
reproduce; sloppier input is left to the lenient parser.
"""

import logging

from src.tas.actions import Actions, action_for_char, key_for_char, to_dash_only, to_move_only
from src.tas.floats import ANGLE_RANGE, MAGNITUDE_RANGE, clamp_text
from src.tas.types import DELIMITER, ActionLine

logger = logging.getLogger(__name__)

_DIGITS = frozenset("0123456789")


def parse_frames(text: str) -> int | None:
    """Parse an unsigned decimal frame count, or None."""
    if not text or not set(text) <= _DIGITS:
        return None
    return int(text)


def parse_strict(line: str, ignore_invalid_floats: bool = True) -> ActionLine | None:
    """Parse a delimiter-separated action line.

    Args:
        line: Raw script line.
        ignore_invalid_floats: Skip unparsable feather angles/magnitudes
            instead of rejecting the line.

    Returns:
        The parsed ActionLine, or None if the frame count is missing or an
        invalid number was hit while ``ignore_invalid_floats`` is False.

    Examples:
        >>> parse_strict("  15,R,J").frames
        15
        >>> parse_strict("1,F,400").feather_angle
        '360'
    """
    tokens = [token.strip() for token in line.strip().split(DELIMITER)]

    frames = parse_frames(tokens[0])
    if frames is None:
        logger.debug(f"Strict parse rejected {line!r}: invalid frame count {tokens[0]!r}")
        return None

    actions = Actions.NONE
    feather_angle: str | None = None
    feather_magnitude: str | None = None
    custom_bindings: frozenset[str] = frozenset()

    i = 1
    while i < len(tokens):
        token = tokens[i]
        if not token:
            # Vacant separator
            i += 1
            continue

        action = action_for_char(token[0])
        actions |= action

        if action == Actions.DASH_ONLY:
            for char in token[1:]:
                actions |= to_dash_only(action_for_char(char))
        elif action == Actions.MOVE_ONLY:
            for char in token[1:]:
                actions |= to_move_only(action_for_char(char))
        elif action == Actions.PRESSED_KEY:
            custom_bindings = frozenset(key_for_char(char) for char in token[1:])
        elif action == Actions.FEATHER and i + 1 < len(tokens):
            angle = clamp_text(tokens[i + 1], ANGLE_RANGE)
            if angle is not None:
                feather_angle = angle
                i += 1

                if i + 1 < len(tokens):
                    if not tokens[i + 1]:
                        # Keep an empty magnitude so its separator survives
                        feather_magnitude = ""
                        i += 1
                    else:
                        magnitude = clamp_text(tokens[i + 1], MAGNITUDE_RANGE)
                        if magnitude is not None:
                            feather_magnitude = magnitude
                            i += 1
                        elif not ignore_invalid_floats:
                            logger.debug(f"Strict parse rejected {line!r}: invalid magnitude {tokens[i + 1]!r}")
                            return None
            else:
                shifted = None
                if not tokens[i + 1] and i + 2 < len(tokens):
                    shifted = clamp_text(tokens[i + 2], ANGLE_RANGE)

                if shifted is not None:
                    # Empty angle: the magnitude slot holds the angle
                    feather_angle = shifted
                    i += 2
                elif not ignore_invalid_floats:
                    logger.debug(f"Strict parse rejected {line!r}: invalid angle {tokens[i + 1]!r}")
                    return None

        i += 1

    return ActionLine(
        frames=frames,
        actions=actions,
        feather_angle=feather_angle,
        feather_magnitude=feather_magnitude,
        custom_bindings=custom_bindings,
    )
