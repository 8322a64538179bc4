"""Types pour le module s1_pathfinder."""

from dataclasses import dataclass
from typing import FrozenSet, Tuple

# Ensemble des séquences minimales (chaque séquence se termine par 'A')
PathSet = FrozenSet[str]
ButtonPair = Tuple[str, str]


@dataclass
class PathCacheInfo:
    """Statistiques du cache de chemins."""
    hits: int = 0
    misses: int = 0
    size: int = 0

    @property
    def lookups(self) -> int:
        return self.hits + self.misses
