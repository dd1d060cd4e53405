"""Key identifiers passed from the terminal to the engine.

Printable keys are plain one-character strings; navigation keys use Key.
"""

from enum import Enum
from typing import Union


class Key(str, Enum):
    """Non-printable keys understood by the engine."""
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"


KeyEvent = Union[str, Key]

QUIT = "q"
PAUSE = " "
RESET = "r"
