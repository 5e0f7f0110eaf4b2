"""
text.py
-------
Display-ready text primitives shared by features and the display manager.

A rendered line is either a plain string or a list of TextSpan segments.
"""

import textwrap
from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple, Union

from idlefloor.core.runtime.game_settings import Colors


@dataclass(frozen=True)
class TextSpan:
    """A run of text with one style."""
    text: str
    color: Optional[Tuple[int, int, int]] = None
    bold: bool = False
    strike: bool = False


Line = Union[str, Sequence[TextSpan]]


KEY_NAMES = {
    "esc": "Esc",
    "left": "<-",
    "right": "->",
    "enter": "Enter",
}


def key_name(key) -> str:
    """Printable label for a key value."""
    if key is None:
        return "?"
    if key in KEY_NAMES:
        return KEY_NAMES[key]
    if len(key) == 1:
        return key
    return "?"


def line_text(line: Line) -> str:
    """Flatten a line to its plain text."""
    if isinstance(line, str):
        return line
    return "".join(span.text for span in line)


def wrap(text: str, width: int) -> List[str]:
    """Word-wrap text to at most width columns."""
    return textwrap.wrap(text, max(width, 1)) or [""]


def health_bar(current: float, maximum: float, width: int = 20) -> str:
    """ASCII bar such as [#######.....]."""
    if maximum <= 0:
        return "[" + "." * width + "]"
    filled = int(round(width * max(0.0, min(current, maximum)) / maximum))
    return "[" + "#" * filled + "." * (width - filled) + "]"


def timer_bar(remaining: float, maximum: float, width: int = 10) -> str:
    """Bar that fills up as a countdown approaches zero."""
    if maximum <= 0:
        return "[" + "#" * width + "]"
    progress = 1.0 - max(0.0, min(remaining, maximum)) / maximum
    filled = int(round(width * progress))
    return "[" + "#" * filled + "." * (width - filled) + "]"


RARITY_COLORS = {
    "COMMON": Colors.WHITE,
    "UNCOMMON": Colors.GREEN,
    "RARE": Colors.BLUE,
    "EPIC": Colors.MAGENTA,
    "LEGENDARY": Colors.YELLOW,
    "MYTHIC": Colors.RED,
}


def rarity_span(rarity, text: str) -> TextSpan:
    """Color a name by item rarity."""
    return TextSpan(text, RARITY_COLORS.get(rarity.name, Colors.WHITE), bold=rarity.name == "MYTHIC")
