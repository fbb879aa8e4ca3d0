"""Text colours for the HTML log and the CSS rules that style them."""

from __future__ import annotations

from enum import IntEnum
from typing import Dict, Tuple, Union


class LogColor(IntEnum):
    """Colour of a logged message."""

    WHITE = 0
    RED = 1
    GREEN = 2
    PINK = 3
    YELLOW = 4
    BLACK = 5
    BLUE = 6


_CLASS_NAMES: Dict[LogColor, str] = {
    LogColor.RED: "red_text",
    LogColor.GREEN: "green_text",
    LogColor.PINK: "pink_text",
    LogColor.YELLOW: "yellow_text",
    LogColor.BLACK: "black_text",
    LogColor.BLUE: "blue_text",
    LogColor.WHITE: "",
}

_RULE_BODIES: Dict[LogColor, str] = {
    LogColor.RED: " { color: #ff4444; } \n",
    LogColor.GREEN: " { color: #0bf80b; } \n",
    LogColor.PINK: " { color: #f605c7; } \n",
    LogColor.YELLOW: " { color: #ecc40b; } \n",
    LogColor.BLUE: " { color: #0c89e8; } \n",
    LogColor.BLACK: " { color: #000000; } \n",
}

# Order in which the stylesheet lists the colour classes; red closes the list again.
_RULE_ORDER: Tuple[LogColor, ...] = (
    LogColor.RED,
    LogColor.GREEN,
    LogColor.YELLOW,
    LogColor.BLUE,
    LogColor.BLACK,
    LogColor.PINK,
    LogColor.RED,
)


def html_class(color: Union[LogColor, int]) -> str:
    """Return the CSS class name for ``color``; white has none.

    Raises ValueError for anything that is not a known colour.
    """
    if isinstance(color, bool) or not isinstance(color, int):
        raise ValueError(f"undefined log color: {color!r}")
    try:
        return _CLASS_NAMES[LogColor(color)]
    except ValueError:
        raise ValueError(f"undefined log color: {color!r}") from None


def render_color_rules(indent: int) -> str:
    """Return the CSS rules for the coloured text classes.

    Every rule is preceded by ``indent`` tabs; the block ends with an empty line.
    """
    tabs = "\t" * indent
    rules = "".join(
        f"{tabs}.{_CLASS_NAMES[color]} {_RULE_BODIES[color]}" for color in _RULE_ORDER
    )
    return rules + "\n"