"""Module s0_keypad : Dispositions des claviers numérique et directionnel."""

from .types import KeypadId, StepOutcome, Position, Button, Direction
from .topology import (
    KeypadTopology,
    DIRECTIONS,
    numeric_keypad,
    directional_keypad,
    get_keypad,
)

__all__ = [
    # Types
    "KeypadId",
    "StepOutcome",
    "Position",
    "Button",
    "Direction",
    # Topologie
    "KeypadTopology",
    "DIRECTIONS",
    "numeric_keypad",
    "directional_keypad",
    "get_keypad",
]
