"""Types pour le module s0_keypad."""

from dataclasses import dataclass
from enum import Enum
from typing import Tuple


class KeypadId(str, Enum):
    """Identité d'un clavier (utilisée dans les clés de cache)."""
    NUMERIC = "numeric"
    DIRECTIONAL = "directional"


class StepOutcome(Enum):
    """Résultat d'un pas depuis une position."""
    BUTTON = "button"
    GAP = "gap"
    OUTSIDE = "outside"


@dataclass(frozen=True)
class Position:
    """Position sur la grille (x vers la droite, y vers le haut)."""
    x: int
    y: int

    def to_tuple(self) -> Tuple[int, int]:
        return (self.x, self.y)

    def moved(self, dx: int, dy: int) -> "Position":
        return Position(self.x + dx, self.y + dy)

    def manhattan(self, other: "Position") -> int:
        return abs(self.x - other.x) + abs(self.y - other.y)


@dataclass(frozen=True)
class Button:
    """Bouton d'un clavier."""
    symbol: str
    position: Position


@dataclass(frozen=True)
class Direction:
    """Direction de déplacement du bras d'un robot."""
    symbol: str
    dx: int
    dy: int
