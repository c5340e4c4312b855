"""Feather angle/magnitude number handling.

Numbers are kept as text on ActionLine so a value the user typed survives a
round trip untouched. These helpers recognise, clamp and re-render them.
"""

import re

ANGLE_RANGE: tuple[float, float] = (0.0, 360.0)
MAGNITUDE_RANGE: tuple[float, float] = (0.0, 1.0)

# Invariant-culture decimal: "45", "-5", "0.5", ".5", "1.", "1e2"
FLOAT_PATTERN = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?", re.ASCII)


def parse_float(text: str) -> float | None:
    """Parse ``text`` as a decimal number, or None if it is not one.

    Surrounding whitespace is allowed. ``nan``, ``inf`` and underscores,
    which ``float()`` would accept, are rejected.
    """
    text = text.strip()
    if not FLOAT_PATTERN.fullmatch(text):
        return None
    return float(text)


def format_float(value: float) -> str:
    """Render a number the shortest way, without a trailing ``.0``."""
    if value.is_integer():
        return str(int(value))
    return repr(value)


def clamp_text(text: str, bounds: tuple[float, float]) -> str | None:
    """Clamp a typed number, keeping the original text when it is in range.

    Returns:
        ``text`` if it lies within ``bounds``, the rendered bound it was
        clamped to otherwise, or None if ``text`` is not a number.

    Examples:
        >>> clamp_text("45.50", ANGLE_RANGE)
        '45.50'
        >>> clamp_text("400", ANGLE_RANGE)
        '360'
    """
    value = parse_float(text)
    if value is None:
        return None

    low, high = bounds
    if value > high:
        return format_float(high)
    if value < low:
        return format_float(low)
    return text


def clamp_value(text: str, bounds: tuple[float, float]) -> str | None:
    """Clamp a typed number and re-render it from the clamped value.

    Returns None if ``text`` is not a number.

    Examples:
        >>> clamp_value("045", ANGLE_RANGE)
        '45'
    """
    value = parse_float(text)
    if value is None:
        return None

    low, high = bounds
    return format_float(min(max(value, low), high))
