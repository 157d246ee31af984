"""
Render ranked option changes as terminal text.

Two layouts:

    value table    (range metric) name, dot padding, before -> after
    percent table  (relative metric) name, signed percentage

Only the after value (or the percentage) is colored: green for an increase,
red for a decrease, grey when unchanged.
"""

from __future__ import annotations

import math
from decimal import Decimal

from spsa_diff.diff_engine import ChangeDirection, ScoredPair

CONTROL_GREY = "\x1b[38;5;243m"
CONTROL_GREEN = "\x1b[32m"
CONTROL_RED = "\x1b[31m"
CONTROL_RESET = "\x1b[0m"

STYLE_CODES: dict[ChangeDirection, str] = {
    ChangeDirection.INCREASE: CONTROL_GREEN,
    ChangeDirection.DECREASE: CONTROL_RED,
    ChangeDirection.UNCHANGED: CONTROL_GREY,
}

# Value table layout
LINE_WIDTH = 45
LINE_MARGIN = 5
VALUE_COLUMN = 36
TAIL_WIDTH = 5

# Percent table layout
NAME_WIDTH = 28


def format_value(value: float) -> str:
    """Format a number the short way: ``6.0`` -> ``6``, ``0.25`` -> ``0.25``."""
    if value.is_integer():
        return str(int(value))
    return format(Decimal(repr(value)), "f")


def magnitude(value: float) -> int:
    """Number of integer digits of |value| minus one, never negative."""
    size = abs(value)
    if size < 1:
        return 0
    return int(math.log10(size))


def _display_width(value: float) -> int:
    return magnitude(value) + (1 if value < 0 else 0)


def colorize(text: str, direction: ChangeDirection, color: bool = True) -> str:
    """Wrap text in the escape codes for a change direction."""
    if not color:
        return text
    return f"{STYLE_CODES[direction]}{text}{CONTROL_RESET}"


def render_value_table(pairs: list[ScoredPair], color: bool = True) -> list[str]:
    """Render pairs as an aligned ``before -> after`` table.

    Args:
        pairs: Ranked scored pairs.
        color: Whether to emit ANSI color codes.

    Returns:
        Display lines, header and separator first.
    """
    lines = [
        f"OPTION NAME {' ' * (LINE_WIDTH - 20)} CHANGE",
        "-" * (LINE_WIDTH + LINE_MARGIN),
    ]
    for pair in pairs:
        before = pair.before.value
        after = pair.after.value
        pad = "." * max(0, VALUE_COLUMN - (len(pair.name) + _display_width(before)))
        tail = "." * max(0, TAIL_WIDTH - _display_width(after))
        after_text = colorize(format_value(after), pair.direction, color)
        lines.append(f"{pair.name} {pad} {format_value(before)} -> {after_text} {tail}")
    return lines


def render_percent_table(pairs: list[ScoredPair], color: bool = True) -> list[str]:
    """Render pairs as fixed columns of name and signed percentage change."""
    header = f"{'OPTION NAME':<{NAME_WIDTH}} {'CHANGE':>8}"
    lines = [header, "-" * len(header)]
    for pair in pairs:
        percent = colorize(f"{pair.change_fraction * 100:+7.1f}", pair.direction, color)
        lines.append(f"{pair.name:<{NAME_WIDTH}.{NAME_WIDTH}} {percent}%")
    return lines


# Metric name -> renderer
RENDERERS = {
    "range": render_value_table,
    "relative": render_percent_table,
}


def render(pairs: list[ScoredPair], metric: str = "range", color: bool = True) -> list[str]:
    """Render pairs with the layout that matches the metric."""
    return RENDERERS[metric](pairs, color=color)
