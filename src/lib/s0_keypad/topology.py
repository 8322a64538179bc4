"""Topologie d'un clavier : correspondance bouton ↔ position et trou interdit."""

from __future__ import annotations

from typing import Dict, Iterable, List, Optional, Sequence, Tuple

import numpy as np

from src.config import ACTIVATE_SYMBOL, DIRECTION_VECTORS, KEYPAD_LAYOUTS, SEARCH_ORDER
from .types import Button, Direction, KeypadId, Position, StepOutcome

GAP_CELL = ""

DIRECTIONS: Tuple[Direction, ...] = tuple(
    Direction(symbol, *DIRECTION_VECTORS[symbol]) for symbol in SEARCH_ORDER
)


class KeypadTopology:
    """
    Clavier immuable construit à partir d'une disposition en lignes.

    La grille numpy est stockée ligne du haut en premier ; les positions
    exposées ont l'origine en bas à gauche (y vers le haut).
    """

    def __init__(self, keypad_id: KeypadId, grid: np.ndarray):
        self.keypad_id = keypad_id
        self._grid = grid
        self._grid.setflags(write=False)
        self.height, self.width = grid.shape

        gaps = np.argwhere(grid == GAP_CELL)
        if len(gaps) != 1:
            raise ValueError(
                f"Le clavier {keypad_id.value} doit avoir exactement un trou (trouvé {len(gaps)})"
            )
        self._gap = self._to_position(*gaps[0])

        self._positions: Dict[str, Position] = {}
        self._symbols: Dict[Position, str] = {}
        for row, col in np.argwhere(grid != GAP_CELL):
            symbol = str(grid[row, col])
            if symbol in self._positions:
                raise ValueError(f"Bouton en double sur le clavier {keypad_id.value}: {symbol!r}")
            position = self._to_position(row, col)
            self._positions[symbol] = position
            self._symbols[position] = symbol

        if ACTIVATE_SYMBOL not in self._positions:
            raise ValueError(f"Le clavier {keypad_id.value} n'a pas de bouton {ACTIVATE_SYMBOL!r}")

    @classmethod
    def from_layout(
        cls,
        keypad_id: KeypadId,
        rows: Sequence[Sequence[Optional[str]]],
    ) -> "KeypadTopology":
        """Construit un clavier depuis ses lignes (None = trou)."""
        widths = {len(row) for row in rows}
        if len(widths) != 1:
            raise ValueError(f"Disposition non rectangulaire pour {keypad_id.value}")
        for row in rows:
            for cell in row:
                if cell is not None and len(cell) != 1:
                    raise ValueError(f"Symbole invalide pour {keypad_id.value}: {cell!r}")
        cells = [[GAP_CELL if cell is None else cell for cell in row] for row in rows]
        return cls(keypad_id, np.array(cells, dtype="<U1"))

    def _to_position(self, row: int, col: int) -> Position:
        return Position(int(col), int(self.height - 1 - row))

    def _in_bounds(self, position: Position) -> bool:
        return 0 <= position.x < self.width and 0 <= position.y < self.height

    # Public API -------------------------------------------------------------
    @property
    def gap(self) -> Position:
        return self._gap

    @property
    def buttons(self) -> List[Button]:
        return [Button(symbol, position) for symbol, position in self._positions.items()]

    @property
    def symbols(self) -> Tuple[str, ...]:
        return tuple(self._positions)

    def position_of(self, symbol: str) -> Position:
        """Position d'un bouton ; KeyError si le bouton n'existe pas."""
        try:
            return self._positions[symbol]
        except KeyError:
            raise KeyError(f"Bouton inconnu sur le clavier {self.keypad_id.value}: {symbol!r}") from None

    def button_at(self, position: Position) -> Optional[str]:
        """Bouton à une position, ou None (trou ou hors grille)."""
        return self._symbols.get(position)

    def step(self, position: Position, direction: Direction) -> Tuple[StepOutcome, Position]:
        """Classe la case atteinte en faisant un pas depuis une position."""
        target = position.moved(direction.dx, direction.dy)
        if not self._in_bounds(target):
            return StepOutcome.OUTSIDE, target
        if target == self._gap:
            return StepOutcome.GAP, target
        return StepOutcome.BUTTON, target

    def neighbor(self, symbol: str, direction: Direction) -> Optional[str]:
        outcome, target = self.step(self.position_of(symbol), direction)
        if outcome is not StepOutcome.BUTTON:
            return None
        return self._symbols[target]

    def manhattan(self, a: str, b: str) -> int:
        return self.position_of(a).manhattan(self.position_of(b))

    def validate_sequence(self, sequence: Iterable[str]) -> None:
        """Lève KeyError au premier bouton absent du clavier."""
        for symbol in sequence:
            self.position_of(symbol)

    def render(self) -> str:
        return "\n".join(
            "".join(cell if cell != GAP_CELL else " " for cell in row) for row in self._grid
        )

    def __repr__(self) -> str:
        return f"KeypadTopology({self.keypad_id.value}, {self.width}x{self.height}, gap={self._gap.to_tuple()})"


# === API fonctionnelle ===

_keypads: Dict[KeypadId, KeypadTopology] = {}


def get_keypad(keypad_id: KeypadId) -> KeypadTopology:
    """Retourne l'instance partagée du clavier demandé."""
    keypad = _keypads.get(keypad_id)
    if keypad is None:
        keypad = KeypadTopology.from_layout(keypad_id, KEYPAD_LAYOUTS[keypad_id.value])
        _keypads[keypad_id] = keypad
    return keypad


def numeric_keypad() -> KeypadTopology:
    return get_keypad(KeypadId.NUMERIC)


def directional_keypad() -> KeypadTopology:
    return get_keypad(KeypadId.DIRECTIONAL)
