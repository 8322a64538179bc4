"""Types pour le module s2_cost."""

from dataclasses import dataclass
from typing import NamedTuple

from src.lib.s0_keypad.types import KeypadId


class MemoKey(NamedTuple):
    """Clé du cache de coûts."""
    sequence: str
    depth: int
    keypad_id: KeypadId


@dataclass
class CostStats:
    """Statistiques du moteur de coûts."""
    hits: int = 0
    misses: int = 0
    computations: int = 0
    cache_size: int = 0

    @property
    def lookups(self) -> int:
        return self.hits + self.misses
