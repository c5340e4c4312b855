"""Canonical action line rendering."""

from src.tas.actions import (
    Actions,
    char_for_action,
    get_dash_only,
    get_move_only,
    sorted_actions,
)
from src.tas.types import DELIMITER, MAX_FRAMES_DIGITS, ActionLine


def _render_action(action: Actions, action_line: ActionLine) -> str:
    if action == Actions.DASH_ONLY:
        directions = get_dash_only(action_line.actions)
    elif action == Actions.MOVE_ONLY:
        directions = get_move_only(action_line.actions)
    elif action == Actions.PRESSED_KEY:
        return char_for_action(action) + "".join(sorted(action_line.custom_bindings))
    else:
        return char_for_action(action)

    return char_for_action(action) + "".join(char_for_action(direction) for direction in directions)


def serialize(action_line: ActionLine) -> str:
    """Render an action line in canonical form.

    The frame count is right-aligned to four columns and actions follow in
    serialization order. The strict parser reads the result back into an
    equal ActionLine.

    Examples:
        >>> serialize(ActionLine(frames=15, actions=Actions.JUMP | Actions.RIGHT))
        '  15,R,J'
    """
    parts = [str(action_line.frames).rjust(MAX_FRAMES_DIGITS)]
    for action in sorted_actions(action_line.actions):
        parts.append(DELIMITER + _render_action(action, action_line))

    if Actions.FEATHER in action_line.actions:
        parts.append(DELIMITER + (action_line.feather_angle or ""))
        if action_line.feather_magnitude is not None:
            parts.append(DELIMITER + action_line.feather_magnitude)

    return "".join(parts)
